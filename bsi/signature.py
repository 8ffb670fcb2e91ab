"""Signature strategies for ``/api/generate/signature/rsa``.

The remote API has shipped two incompatible signing contracts. A client pins
exactly one of them at construction; it is never switched per call.

``query_echo``
    Only ``api_key``, ``user_id`` and ``cust_id`` from the credentials are
    sent, in the query string. The caller's params are not part of the
    request. Signature is read from ``data.signature``.

``canonical``
    The caller's params are reduced to a canonical ``k=v&k=v`` string
    (empty, null, list and mapping values dropped, keys sorted ascending,
    URL-encoded then decoded) and posted as ``{"data": <string>}``.
    Signature is read from the top-level ``signature`` field.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Mapping, Protocol, runtime_checkable
from urllib.parse import unquote_plus, urlencode

if TYPE_CHECKING:  # pragma: no cover
    from .client import BsiClient

__all__ = [
    "SIGNATURE_PATH",
    "SignatureStrategy",
    "QueryEchoSignature",
    "CanonicalStringSignature",
    "canonical_string",
    "get_signature_strategy",
]

SIGNATURE_PATH = "/api/generate/signature/rsa"
_TARGET = "Generate Signature RSA"


@runtime_checkable
class SignatureStrategy(Protocol):
    name: str

    def sign(self, client: "BsiClient", params: Mapping[str, Any]) -> str:
        ...


def canonical_string(params: Mapping[str, Any]) -> str:
    """Return the canonical ``k=v&k=v`` form of *params*.

    >>> canonical_string({"b": "2", "a": "1", "skip": None})
    'a=1&b=2'
    """
    kept: Dict[str, str] = {}
    for key in sorted(params, key=str):
        value = params[key]
        if value is None or value == "" or isinstance(value, (list, tuple, Mapping)):
            continue
        if isinstance(value, bool):
            value = "1" if value else "0"
        kept[str(key)] = str(value)
    return unquote_plus(urlencode(kept))


class QueryEchoSignature:
    name = "query_echo"

    def sign(self, client: "BsiClient", params: Mapping[str, Any]) -> str:
        creds = client.credentials
        query = {
            "api_key": creds.api_key,
            "user_id": creds.user_id,
            "cust_id": creds.cust_id,
        }
        body = client.post(_TARGET, SIGNATURE_PATH, params=query)
        data = body.get("data")
        if not isinstance(data, Mapping):
            return ""
        return _as_str(data.get("signature"))


class CanonicalStringSignature:
    name = "canonical"

    def sign(self, client: "BsiClient", params: Mapping[str, Any]) -> str:
        payload = {"data": canonical_string(params)}
        body = client.post(_TARGET, SIGNATURE_PATH, json=payload)
        return _as_str(body.get("signature"))


_STRATEGIES = {
    QueryEchoSignature.name: QueryEchoSignature,
    CanonicalStringSignature.name: CanonicalStringSignature,
}


def get_signature_strategy(name: str = QueryEchoSignature.name) -> SignatureStrategy:
    strategy_cls = _STRATEGIES.get(name)
    if strategy_cls is None:
        raise ValueError(f"Unsupported signature policy: {name}")
    return strategy_cls()


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)
