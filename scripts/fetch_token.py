"""Utility script to fetch a BSI bearer token using the configured credentials."""

from bsi.provider import get_client
from common.logging import configure_logging

if __name__ == "__main__":
    configure_logging()
    token = get_client().get_token()
    if not token:
        raise SystemExit("No token returned; check BSI_* settings and LOG_LEVEL=DEBUG output")
    print(token)
