"""Rules pairing a matcher with the error it produces."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from identity_error_parser.errors import IdentityError
from identity_error_parser.matching import MessageMatcher, RegexMatcher

ErrorFactory = Callable[[str | None, int], IdentityError]
"""Builds the error for a matched response: ``(original_message, status_code)``.

Every catalog error class has this constructor signature, so the class
itself is a factory. Factories must not raise.
"""


@dataclass(frozen=True)
class ErrorRule:
    """One entry of a rule tier.

    Attributes:
        matcher: Decides whether the response belongs to this rule
        factory: Builds the error once the matcher voted true
    """

    matcher: MessageMatcher
    factory: ErrorFactory

    @classmethod
    def regex(
        cls,
        *patterns: str | re.Pattern[str],
        factory: ErrorFactory,
        **matcher_options: Any,
    ) -> ErrorRule:
        """Create a rule backed by a :class:`RegexMatcher`."""
        return cls(RegexMatcher(*patterns, **matcher_options), factory)

    def __repr__(self) -> str:
        name = getattr(self.factory, "__name__", repr(self.factory))
        return f"ErrorRule({self.matcher!r} -> {name})"
