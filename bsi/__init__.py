"""BSI API client package.

Token issuance, RSA signature generation, account statements and balance
inquiry against the BSI REST API.
"""

from .client import BsiClient
from .config import BsiConfig
from .credentials import BsiCredentials
from .factory import credentials_from_config, make_from_config
from .masking import MASK, mask_sensitive_data
from .models import Money, Statement
from .signature import (
    CanonicalStringSignature,
    QueryEchoSignature,
    SignatureStrategy,
    canonical_string,
    get_signature_strategy,
)

__all__ = [
    "BsiClient",
    "BsiConfig",
    "BsiCredentials",
    "credentials_from_config",
    "make_from_config",
    "MASK",
    "mask_sensitive_data",
    "Money",
    "Statement",
    "SignatureStrategy",
    "QueryEchoSignature",
    "CanonicalStringSignature",
    "canonical_string",
    "get_signature_strategy",
]
