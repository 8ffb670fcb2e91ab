"""Redaction of sensitive values before they reach a log sink."""
from __future__ import annotations

from typing import Any, Mapping

__all__ = ["MASK", "SENSITIVE_KEYS", "mask_sensitive_data"]

MASK = "***"

# exact, case-sensitive match
SENSITIVE_KEYS = frozenset(
    {
        "api_key",
        "password",
        "cust_id",
        "user_id",
        "Authorization",
        "X-SIGNATURE",
        "token",
        "signature",
    }
)


def mask_sensitive_data(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *data* with sensitive values replaced by :data:`MASK`.

    Empty-string values under a sensitive key are left as ``""`` so a log
    still shows whether the field was populated. Nested mappings are walked,
    and string values shaped like ``k=v&k=v`` have their sensitive sub-keys
    masked too. The input is never mutated.
    """
    masked: dict[str, Any] = {}
    for key, value in data.items():
        if key in SENSITIVE_KEYS:
            masked[key] = value if value == "" else MASK
        else:
            masked[key] = _mask_value(value)
    return masked


def _mask_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return mask_sensitive_data(value)
    if isinstance(value, (list, tuple)):
        return [_mask_value(v) for v in value]
    if isinstance(value, str) and "=" in value:
        return _mask_query_string(value)
    return value


def _mask_query_string(value: str) -> str:
    parts = []
    for part in value.split("&"):
        if "=" in part:
            key, sub_value = part.split("=", 1)
            if key in SENSITIVE_KEYS:
                part = f"{key}=" if sub_value == "" else f"{key}={MASK}"
        parts.append(part)
    return "&".join(parts)
