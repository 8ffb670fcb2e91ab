from __future__ import annotations

"""Offline smoke script: runs balance + statement against canned responses."""

import json
import logging
from datetime import date

import requests

from bsi import make_from_config
from common.logging import configure_logging

_CANNED = {
    "/api/gettoken": {"data": {"token": "tok-smoke"}},
    "/api/generate/signature/rsa": {"data": {"signature": "sig-smoke"}},
    "/api/informationbalance": {"data": {"account_number": "7001", "balance": "12,500.00"}},
    "/api/accountstatement/single": {
        "data": {
            "record": [
                {
                    "ft_number": "FT0001",
                    "amount": "2,500.00",
                    "balance": "12,500.00",
                    "dbcr": "CR",
                    "ccy": "IDR",
                    "description": "Transfer in",
                    "date": "01 Feb 2026 09:00",
                }
            ]
        }
    },
}


class _CannedSession(requests.Session):
    def request(self, method, url, **kwargs):  # type: ignore[override]
        path = url.split("?", 1)[0]
        body = next((v for k, v in _CANNED.items() if path.endswith(k)), {})
        resp = requests.Response()
        resp.status_code = 200
        resp._content = json.dumps(body).encode()
        resp.url = url
        return resp


def main():  # noqa: D401
    configure_logging(fmt="json", level="DEBUG", service_name="bsi-smoke")
    client = make_from_config(
        {
            "api_key": "smoke-key",
            "cust_id": "smoke-cust",
            "user_id": "smoke-user",
            "password": "smoke-pass",
            "sandbox_url": "https://sandbox.bsi.mock/rest",
            "env": "sandbox",
        },
        session=_CannedSession(),
        logger=logging.getLogger("bsi"),
    )
    print(f"Balance: {client.get_information_balance('7001')}")
    for st in client.get_account_statement("7001", date(2026, 2, 1), date(2026, 2, 1)):
        print(json.dumps(st.to_dict()))


if __name__ == "__main__":
    main()
