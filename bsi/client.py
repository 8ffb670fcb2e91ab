# bsi/client.py
"""Synchronous client for the BSI REST API.

Every authenticated operation runs three sequential calls: token, signature,
then the actual request carrying ``Authorization`` and ``X-SIGNATURE``.
Nothing is cached between operations and nothing is retried; transport
errors (``requests.RequestException``) reach the caller untouched.

Unexpected response shapes degrade to ``""`` / ``{}`` / ``[]`` instead of
raising, so callers must treat an empty result as failure.
"""
from __future__ import annotations

import hashlib
import logging
import time
from typing import Any, Dict, List, Mapping, Optional, Union

import requests

from common.datetime import DateLike, format_ymd

from .credentials import BsiCredentials
from .masking import mask_sensitive_data
from .metrics import bsi_latency_seconds, bsi_requests_total
from .models import Statement
from .signature import SignatureStrategy, get_signature_strategy

__all__ = ["BsiClient", "USER_AGENT", "DEFAULT_TIMEOUT"]

_log = logging.getLogger(__name__)

USER_AGENT = "ncmsruntime"
DEFAULT_TIMEOUT = 30

TOKEN_PATH = "/api/gettoken"
ACCOUNT_STATEMENT_PATH = "/api/accountstatement/single"
INFORMATION_BALANCE_PATH = "/api/informationbalance"


def _null_logger() -> logging.Logger:
    logger = logging.getLogger("bsi.null")
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger


# --- HTTP session -------------------------------------------------------------
def _build_session() -> requests.Session:
    s = requests.Session()
    s.headers.update(
        {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
    )
    return s


class BsiClient:
    """
    Client for the BSI token, signature, statement and balance endpoints.
    - Base URL picked from the credentials (sandbox vs production).
    - ``verify=False`` is passed only when ``verify_ssl`` is off.
    - Request/response pairs are logged at DEBUG with sensitive values masked.
    """

    def __init__(
        self,
        credentials: BsiCredentials,
        *,
        signature_strategy: Optional[SignatureStrategy] = None,
        logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.credentials = credentials
        self.signature_strategy = signature_strategy or get_signature_strategy()
        self.logger = logger or _null_logger()
        self.timeout = timeout
        self.session = session or _build_session()

    def set_logger(self, logger: Union[logging.Logger, logging.LoggerAdapter]) -> None:
        self.logger = logger

    # --- Public API -------------------------------------------------------------
    def get_token(self) -> str:
        """POST /api/gettoken; returns ``data.token`` or ``""``."""
        creds = self.credentials
        params = {
            "api_key": creds.api_key,
            "cust_id": creds.cust_id,
            "user_id": creds.user_id,
            "password": hashlib.md5(creds.password.encode("utf-8")).hexdigest(),
        }
        body = self.post("Get Token", TOKEN_PATH, params=params)
        data = body.get("data")
        if not isinstance(data, Mapping) or data.get("token") is None:
            return ""
        return str(data["token"])

    def generate_signature(self, params: Mapping[str, Any]) -> str:
        """Sign *params* with the pinned strategy; ``""`` when none is returned."""
        return self.signature_strategy.sign(self, params)

    def get_account_statement(
        self, account_number: str, from_date: DateLike, to_date: DateLike
    ) -> List[Statement]:
        return [
            Statement.from_record(record)
            for record in self.get_account_statement_records(account_number, from_date, to_date)
        ]

    def get_account_statement_records(
        self, account_number: str, from_date: DateLike, to_date: DateLike
    ) -> List[Dict[str, Any]]:
        """Raw ``data.record`` items of POST /api/accountstatement/single."""
        params = self._account_params(account_number)
        params["date_from"] = format_ymd(from_date)
        params["date_to"] = format_ymd(to_date)

        body = self._signed_post("Account Statement Single", ACCOUNT_STATEMENT_PATH, params)
        data = body.get("data")
        records = data.get("record") if isinstance(data, Mapping) else None
        if not isinstance(records, list):
            return []
        return [dict(r) for r in records if isinstance(r, Mapping)]

    def get_information_balance(self, account_number: str) -> Dict[str, Any]:
        """``data`` mapping of POST /api/informationbalance, or ``{}``."""
        params = self._account_params(account_number)
        body = self._signed_post("Information Balance", INFORMATION_BALANCE_PATH, params)
        data = body.get("data")
        return dict(data) if isinstance(data, Mapping) else {}

    # --- core request helpers -------------------------------------------------
    def post(
        self,
        target: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        """POST *path* and return the decoded JSON object (``{}`` if not one)."""
        url = f"{self.credentials.base_url}/{path.lstrip('/')}"
        self._log_request(target, params if json is None else json, headers)

        kwargs: Dict[str, Any] = {}
        if not self.credentials.verify_ssl:
            kwargs["verify"] = False
        if json is not None:
            kwargs["json"] = dict(json)

        start = time.perf_counter()
        try:
            resp = self.session.request(
                "POST",
                url,
                params=dict(params) if params is not None else None,
                headers=dict(headers) if headers else None,
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException:
            bsi_requests_total.labels(target=target, status="ERR").inc()
            raise
        finally:
            bsi_latency_seconds.labels(target=target).observe(time.perf_counter() - start)
        bsi_requests_total.labels(target=target, status=str(resp.status_code)).inc()

        body = _json_body(resp)
        self._log_response(target, resp.status_code, body)
        return body

    def _signed_post(self, target: str, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        token = self.get_token()
        signature = self.generate_signature(params)
        headers = {
            "Authorization": f"Bearer {token}",
            "X-SIGNATURE": signature,
        }
        return self.post(target, path, params=params, headers=headers)

    def _account_params(self, account_number: str) -> Dict[str, Any]:
        creds = self.credentials
        return {
            "api_key": creds.api_key,
            "channel_id": creds.channel_id,
            "cust_id": creds.cust_id,
            "user_id": creds.user_id,
            "account_number": account_number,
        }

    # --- logging --------------------------------------------------------------
    def _log_request(
        self,
        target: str,
        params: Optional[Mapping[str, Any]],
        headers: Optional[Mapping[str, str]],
    ) -> None:
        try:
            self.logger.debug(
                "Request - %s",
                target,
                extra={
                    "target": target,
                    "params": mask_sensitive_data(params or {}),
                    "headers": mask_sensitive_data(headers or {}),
                },
            )
        except Exception:
            _log.debug("request log for %s failed", target, exc_info=True)

    def _log_response(self, target: str, status: int, body: Mapping[str, Any]) -> None:
        try:
            self.logger.debug(
                "Response - %s",
                target,
                extra={
                    "target": target,
                    "status": status,
                    "body": mask_sensitive_data(body),
                },
            )
        except Exception:
            _log.debug("response log for %s failed", target, exc_info=True)


def _json_body(resp: requests.Response) -> Dict[str, Any]:
    try:
        body = resp.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}
