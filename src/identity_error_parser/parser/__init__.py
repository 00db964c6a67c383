"""
Rule-based classification of identity-server error responses.
"""

from identity_error_parser.parser.body import BodySupplier, ResponseBody
from identity_error_parser.parser.catalog import default_api_rules, default_ids_rules
from identity_error_parser.parser.classifier import (
    IdentityErrorParser,
    RuleTier,
    raise_if_present,
)
from identity_error_parser.parser.holder import (
    configure_default_parser,
    get_default_parser,
    reset_default_parser,
)
from identity_error_parser.parser.rules import ErrorFactory, ErrorRule

__all__ = [
    "BodySupplier",
    "ErrorFactory",
    "ErrorRule",
    "IdentityErrorParser",
    "ResponseBody",
    "RuleTier",
    "configure_default_parser",
    "default_api_rules",
    "default_ids_rules",
    "get_default_parser",
    "raise_if_present",
    "reset_default_parser",
]
