"""Regular-expression matcher for response text."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from identity_error_parser.matching.base import MessageMatcher
from identity_error_parser.telemetry import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = get_logger(__name__)

# Failures a single pattern may raise while being compiled or matched
_PATTERN_FAILURES = (re.error, RecursionError, TypeError, ValueError)


class RegexMatcher(MessageMatcher):
    """Votes true when any pattern matches the whole response text.

    Matching uses :func:`re.fullmatch`: a pattern must cover the entire
    message, so catalog patterns are written as ``.*fragment.*``.

    Patterns that fail to compile or to match are logged and treated as
    a non-vote for that pattern only; remaining patterns are still tried.
    This is the only place in the engine where a fault is absorbed.

    Example:
        >>> matcher = RegexMatcher(r".*User is locked out.*")
        >>> matcher.vote("USER IS LOCKED OUT", 400)
        True
    """

    def __init__(
        self,
        *patterns: str | re.Pattern[str] | Iterable[str | re.Pattern[str]],
        flags: int | None = re.IGNORECASE,
        absent_message_vote: bool = False,
    ) -> None:
        """Initialize the matcher.

        Args:
            patterns: Patterns as strings or compiled regexes; a single
                iterable of patterns is also accepted
            flags: Flags applied to every pattern, replacing the flags of
                compiled patterns. ``None`` keeps compiled patterns' own
                flags and compiles strings without flags.
            absent_message_vote: Vote returned when the message is absent

        Raises:
            ValueError: If no patterns are given
        """
        flat = _flatten(patterns)
        if not flat:
            raise ValueError("RegexMatcher requires at least one pattern")

        self._flags = flags
        self._absent_message_vote = absent_message_vote
        self._patterns: list[tuple[str, int, re.Pattern[str] | None]] = []
        for pattern in flat:
            source, pattern_flags = _source_and_flags(pattern, flags)
            self._patterns.append((source, pattern_flags, _try_compile(source, pattern_flags)))

    @property
    def patterns(self) -> list[str]:
        """Pattern sources in evaluation order."""
        return [source for source, _, _ in self._patterns]

    @property
    def absent_message_vote(self) -> bool:
        return self._absent_message_vote

    def vote(self, message: str | None, status_code: int) -> bool:
        if not message:
            return self._absent_message_vote

        for source, pattern_flags, compiled in self._patterns:
            try:
                regex = compiled or re.compile(source, pattern_flags)
                if regex.fullmatch(message):
                    return True
            except _PATTERN_FAILURES as e:
                logger.error(
                    "Error parsing pattern",
                    pattern=source,
                    error_type=type(e).__name__,
                    error=str(e),
                    input=message,
                )
        return False

    def __repr__(self) -> str:
        return f"RegexMatcher({', '.join(map(repr, self.patterns))})"


def _flatten(
    patterns: tuple[str | re.Pattern[str] | Iterable[str | re.Pattern[str]], ...],
) -> list[str | re.Pattern[str]]:
    flat: list[str | re.Pattern[str]] = []
    for item in patterns:
        if isinstance(item, (str, re.Pattern)):
            flat.append(item)
        else:
            flat.extend(item)
    return flat


def _source_and_flags(pattern: str | re.Pattern[str], flags: int | None) -> tuple[str, int]:
    if isinstance(pattern, re.Pattern):
        if flags is None:
            # Drop re.UNICODE, which compile() adds implicitly for str patterns
            return pattern.pattern, pattern.flags & ~re.UNICODE
        return pattern.pattern, flags
    return pattern, flags or 0


def _try_compile(source: str, flags: int) -> re.Pattern[str] | None:
    try:
        return re.compile(source, flags)
    except re.error as e:
        logger.warning(
            "Invalid pattern, it will never vote",
            pattern=source,
            error_type=type(e).__name__,
            error=str(e),
        )
        return None
