"""身份服务器错误解析器：将 HTTP 错误响应归类为类型化错误。

identity-error-parser: typed errors for identity-server HTTP responses.

Classifies a response (status code plus response text) against ordered
pattern rules and raises the first matching error from a fixed catalog.
"""

from __future__ import annotations

from identity_error_parser.errors import (
    ConfigurationError,
    IdentityError,
    IdentityLibError,
    IdentityParserApiError,
    IdentityParserIdsError,
)
from identity_error_parser.matching import MessageMatcher, RegexMatcher
from identity_error_parser.parser import (
    ErrorRule,
    IdentityErrorParser,
    RuleTier,
    configure_default_parser,
    get_default_parser,
    raise_if_present,
)

__version__ = "1.0.0"

__all__ = [
    # Errors
    "ConfigurationError",
    "IdentityError",
    "IdentityLibError",
    "IdentityParserApiError",
    "IdentityParserIdsError",
    # Matching
    "MessageMatcher",
    "RegexMatcher",
    # Parser
    "ErrorRule",
    "IdentityErrorParser",
    "RuleTier",
    "configure_default_parser",
    "get_default_parser",
    "raise_if_present",
    # Version
    "__version__",
]
