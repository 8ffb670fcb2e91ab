"""JSON secrets file used as the application configuration source.

The file (``SECRETS_PATH``, default ``/var/run/secrets/app.json``) holds one
object per integration, e.g.::

    {"bsi_api": {"api_key": "...", "password": "...", "env": "sandbox"}}

It is re-read when its modification time changes, so rotated credentials are
picked up by the next client built from it.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

__all__ = ["SecretsManager", "secrets"]


class SecretsManager:
    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(
            path or os.getenv("SECRETS_PATH", "/var/run/secrets/app.json")
        )
        self._cache: dict[str, Any] | None = None
        self._mtime: float | None = None
        self._pinned = False

    def _load(self) -> dict[str, Any]:
        if self._pinned and self._cache is not None:
            return self._cache
        try:
            mtime = self._path.stat().st_mtime
        except FileNotFoundError:
            self._cache, self._mtime = {}, None
            return self._cache
        if self._cache is None or mtime != self._mtime:
            with self._path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
            self._cache = data if isinstance(data, dict) else {}
            self._mtime = mtime
        return self._cache

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self._load().get(key, default)

    def section(self, key: str) -> dict[str, Any]:
        """Copy of the object stored under *key*; ``{}`` if absent or not an object."""
        value = self.get(key)
        return dict(value) if isinstance(value, dict) else {}

    def set_override(self, data: dict[str, Any]) -> None:
        """Pin the in-memory contents, ignoring the file (test helper)."""
        self._cache = dict(data)
        self._pinned = True

    def clear_override(self) -> None:
        self._cache, self._mtime = None, None
        self._pinned = False


# Global default manager
secrets = SecretsManager()
