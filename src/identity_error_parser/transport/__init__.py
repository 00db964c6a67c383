"""
Transport integration: classify errors on httpx responses.
"""

from identity_error_parser.transport.http import (
    AsyncIdentityErrorHook,
    IdentityErrorHook,
    acheck_response,
    aexchange,
    body_supplier,
    check_response,
    exchange,
)

__all__ = [
    "AsyncIdentityErrorHook",
    "IdentityErrorHook",
    "acheck_response",
    "aexchange",
    "body_supplier",
    "check_response",
    "exchange",
]
