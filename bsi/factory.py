"""Build credentials and clients from application configuration."""
from __future__ import annotations

from typing import Any, Mapping, Union

from .client import BsiClient
from .config import BsiConfig
from .credentials import BsiCredentials
from .signature import get_signature_strategy

__all__ = ["credentials_from_config", "make_from_config"]

ConfigLike = Union[BsiConfig, Mapping[str, Any]]


def _as_config(config: ConfigLike) -> BsiConfig:
    if isinstance(config, BsiConfig):
        return config
    return BsiConfig.model_validate(dict(config))


def credentials_from_config(config: ConfigLike) -> BsiCredentials:
    cfg = _as_config(config)
    return BsiCredentials(
        api_key=cfg.api_key,
        cust_id=cfg.cust_id,
        user_id=cfg.user_id,
        password=cfg.password,
        sandbox_url=cfg.sandbox_url,
        production_url=cfg.production_url,
        channel_id=cfg.channel_id,
        is_development=cfg.is_development,
        verify_ssl=cfg.verify_ssl,
    )


def make_from_config(config: ConfigLike, **client_kwargs: Any) -> BsiClient:
    """Return a :class:`BsiClient` for *config*.

    ``timeout`` and ``signature_policy`` come from the config unless
    overridden through *client_kwargs* (``timeout=``, ``signature_strategy=``,
    ``logger=``, ``session=``).
    """
    cfg = _as_config(config)
    client_kwargs.setdefault("timeout", cfg.timeout)
    client_kwargs.setdefault("signature_strategy", get_signature_strategy(cfg.signature_policy))
    return BsiClient(credentials_from_config(cfg), **client_kwargs)
