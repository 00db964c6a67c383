"""
Matchers deciding whether a response belongs to an error kind.
"""

from identity_error_parser.matching.base import AllOf, MessageMatcher, StatusCodeMatcher
from identity_error_parser.matching.regex import RegexMatcher

__all__ = [
    "AllOf",
    "MessageMatcher",
    "RegexMatcher",
    "StatusCodeMatcher",
]
