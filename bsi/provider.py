"""Process-wide BSI client built from the application configuration.

Sources, lowest precedence first:

1. ``bsi_api`` section of the JSON secrets file (``SECRETS_PATH``)
2. ``BSI_*`` environment variables (``.env`` / ``.env.local`` in the working
   directory are loaded first, without overriding real env vars)
"""
from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from common.secrets import secrets

from .client import BsiClient
from .config import BsiConfig
from .factory import make_from_config

__all__ = ["ENV_PREFIX", "SECRETS_SECTION", "load_config", "get_client", "reset_client"]

_LOG = logging.getLogger(__name__)

ENV_PREFIX = "BSI_"
SECRETS_SECTION = "bsi_api"

_client: Optional[BsiClient] = None
_lock = threading.Lock()


def _load_env_files() -> None:
    for f in (Path.cwd() / ".env.local", Path.cwd() / ".env"):
        if f.exists():
            load_dotenv(dotenv_path=f, override=False)
            _LOG.debug("loaded env file %s", f)
            break


def load_config() -> BsiConfig:
    _load_env_files()
    raw: Dict[str, Any] = secrets.section(SECRETS_SECTION)
    for name in BsiConfig.model_fields:
        value = os.getenv(ENV_PREFIX + name.upper())
        if value is not None:
            raw[name] = value
    return BsiConfig.model_validate(raw)


def get_client() -> BsiClient:
    """Return the shared client, building it on first use."""
    global _client
    with _lock:
        if _client is None:
            cfg = load_config()
            _client = make_from_config(cfg, logger=logging.getLogger("bsi"))
            _LOG.debug(
                "BSI client ready: env=%s policy=%s verify_ssl=%s",
                cfg.env, cfg.signature_policy, cfg.verify_ssl,
            )
        return _client


def reset_client() -> None:
    """Drop the shared client (test helper)."""
    global _client
    with _lock:
        _client = None
