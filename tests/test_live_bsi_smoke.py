"""Opt-in smoke test against a real BSI sandbox (BSI_INTEGRATION=1)."""
import os

import pytest

from bsi.provider import get_client, reset_client


@pytest.mark.skipif(
    not (os.getenv("BSI_API_KEY") and os.getenv("BSI_SANDBOX_URL")),
    reason="Live BSI creds not provided in environment",
)
def test_live_token_and_balance():
    os.environ.setdefault("BSI_ENV", "sandbox")
    reset_client()
    client = get_client()

    assert client.get_token() != ""

    account = os.getenv("BSI_TEST_ACCOUNT")
    if account:
        assert isinstance(client.get_information_balance(account), dict)
