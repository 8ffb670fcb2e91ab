"""Configuration model consumed by :mod:`bsi.factory`.

``BsiConfig`` is the one place a loosely-typed mapping (application config,
env vars, secrets file) is coerced into named fields. Nothing past the
factory sees the raw mapping.

Defaults:
    api_key, cust_id, user_id, password, sandbox_url, production_url: ``""``
    channel_id: ``"API"``
    env: ``"production"`` (anything else selects the sandbox URL)
    verify_ssl: ``True``
    timeout: ``30`` seconds
    signature_policy: ``"query_echo"``
"""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator

__all__ = ["BsiConfig", "SignaturePolicy", "FALSY_STRINGS"]

SignaturePolicy = Literal["query_echo", "canonical"]

FALSY_STRINGS = frozenset({"", "0", "false", "no", "off"})


class BsiConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    api_key: str = ""
    cust_id: str = ""
    user_id: str = ""
    password: str = ""
    sandbox_url: str = ""
    production_url: str = ""
    channel_id: str = "API"
    env: str = "production"
    verify_ssl: bool = True
    timeout: float = 30
    signature_policy: SignaturePolicy = "query_echo"

    @field_validator(
        "api_key", "cust_id", "user_id", "password", "sandbox_url", "production_url",
        mode="before",
    )
    @classmethod
    def _coerce_str(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("channel_id", mode="before")
    @classmethod
    def _coerce_channel(cls, value: Any) -> str:
        return "API" if value is None else str(value)

    @field_validator("env", mode="before")
    @classmethod
    def _coerce_env(cls, value: Any) -> str:
        return "production" if value is None else str(value)

    @field_validator("verify_ssl", mode="before")
    @classmethod
    def _coerce_verify(cls, value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, str):
            return value.strip().lower() not in FALSY_STRINGS
        return bool(value)

    @field_validator("timeout", mode="before")
    @classmethod
    def _coerce_timeout(cls, value: Any) -> Any:
        return 30 if value is None or value == "" else value

    @field_validator("signature_policy", mode="before")
    @classmethod
    def _coerce_policy(cls, value: Any) -> Any:
        if value is None or value == "":
            return "query_echo"
        return str(value).strip().lower()

    @property
    def is_development(self) -> bool:
        return self.env != "production"
