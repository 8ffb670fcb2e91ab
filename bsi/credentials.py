"""Immutable credentials for the BSI API."""
from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["BsiCredentials"]


@dataclass(frozen=True)
class BsiCredentials:
    api_key: str
    cust_id: str
    user_id: str
    password: str = field(repr=False)
    sandbox_url: str
    production_url: str
    channel_id: str = "API"
    is_development: bool = True
    verify_ssl: bool = True

    @property
    def base_url(self) -> str:
        url = self.sandbox_url if self.is_development else self.production_url
        return url.rstrip("/")
