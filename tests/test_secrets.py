import json
import os

from common.secrets import SecretsManager


def test_missing_file_is_empty(tmp_path):
    mgr = SecretsManager(tmp_path / "absent.json")
    assert mgr.get("bsi_api") is None
    assert mgr.section("bsi_api") == {}


def test_section_reads_and_copies(tmp_path):
    path = tmp_path / "app.json"
    path.write_text(json.dumps({"bsi_api": {"api_key": "k"}, "other": "flat"}))
    mgr = SecretsManager(path)
    section = mgr.section("bsi_api")
    section["api_key"] = "mutated"
    assert mgr.section("bsi_api") == {"api_key": "k"}
    assert mgr.section("other") == {}


def test_reloads_when_file_changes(tmp_path):
    path = tmp_path / "app.json"
    path.write_text(json.dumps({"bsi_api": {"api_key": "old"}}))
    mgr = SecretsManager(path)
    assert mgr.section("bsi_api")["api_key"] == "old"

    path.write_text(json.dumps({"bsi_api": {"api_key": "new"}}))
    st = path.stat()
    os.utime(path, (st.st_atime, st.st_mtime + 10))
    assert mgr.section("bsi_api")["api_key"] == "new"


def test_override_pins_contents(tmp_path):
    path = tmp_path / "app.json"
    path.write_text(json.dumps({"bsi_api": {"api_key": "file"}}))
    mgr = SecretsManager(path)
    mgr.set_override({"bsi_api": {"api_key": "pinned"}})
    assert mgr.section("bsi_api")["api_key"] == "pinned"
    mgr.clear_override()
    assert mgr.section("bsi_api")["api_key"] == "file"
