"""Matcher interfaces.

A matcher votes on whether a response belongs to one error kind.
Matchers must never raise: internal failures degrade to a ``False`` vote.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from identity_error_parser.parser.body import ResponseBody


class MessageMatcher(ABC):
    """Predicate over ``(message, status_code)``.

    The classifier calls :meth:`matches` with a lazy body. The default
    implementation resolves the body text and delegates to :meth:`vote`;
    matchers that can decide without the text override :meth:`matches`
    so the body is never read on their behalf.
    """

    @abstractmethod
    def vote(self, message: str | None, status_code: int) -> bool:
        """Return True if the response belongs to this matcher's error kind.

        Args:
            message: Response text, or None if the response had none
            status_code: HTTP status code

        Returns:
            The matcher's vote
        """

    def matches(self, status_code: int, body: ResponseBody) -> bool:
        """Vote on a response whose text is resolved on demand."""
        return self.vote(body.text, status_code)


class StatusCodeMatcher(MessageMatcher):
    """Votes on status code alone; never reads the body."""

    def __init__(self, *status_codes: int) -> None:
        if not status_codes:
            raise ValueError("StatusCodeMatcher requires at least one status code")
        self._status_codes = frozenset(status_codes)

    @property
    def status_codes(self) -> frozenset[int]:
        return self._status_codes

    def vote(self, message: str | None, status_code: int) -> bool:
        return status_code in self._status_codes

    def matches(self, status_code: int, body: ResponseBody) -> bool:
        return status_code in self._status_codes

    def __repr__(self) -> str:
        return f"StatusCodeMatcher({', '.join(map(str, sorted(self._status_codes)))})"


class AllOf(MessageMatcher):
    """Votes true only when every child matcher does.

    Children are asked left to right and evaluation stops at the first
    ``False``, so put body-free matchers first.
    """

    def __init__(self, *matchers: MessageMatcher) -> None:
        if not matchers:
            raise ValueError("AllOf requires at least one matcher")
        self._matchers = tuple(matchers)

    @property
    def matchers(self) -> tuple[MessageMatcher, ...]:
        return self._matchers

    def vote(self, message: str | None, status_code: int) -> bool:
        return all(m.vote(message, status_code) for m in self._matchers)

    def matches(self, status_code: int, body: ResponseBody) -> bool:
        return all(m.matches(status_code, body) for m in self._matchers)

    def __repr__(self) -> str:
        return f"AllOf({', '.join(map(repr, self._matchers))})"
