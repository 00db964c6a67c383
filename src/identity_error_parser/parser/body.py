"""Lazy access to response text."""

from __future__ import annotations

from collections.abc import Callable

BodySupplier = Callable[[], str | None]


class ResponseBody:
    """Response text resolved on first access and memoised.

    Reading a response body may be expensive (draining a stream), so the
    supplier runs only when a matcher asks for :attr:`text`, and at most
    once. If the supplier raises, the exception propagates unchanged and
    nothing is cached.
    """

    __slots__ = ("_resolved", "_supplier", "_text")

    def __init__(self, supplier: BodySupplier) -> None:
        self._supplier = supplier
        self._resolved = False
        self._text: str | None = None

    @classmethod
    def of(cls, text: str | None) -> ResponseBody:
        """Wrap text that is already known."""
        body = cls(lambda: text)
        body._text = text
        body._resolved = True
        return body

    @property
    def resolved(self) -> bool:
        """Whether the supplier has already been called."""
        return self._resolved

    @property
    def text(self) -> str | None:
        if not self._resolved:
            self._text = self._supplier()
            self._resolved = True
        return self._text

    def __repr__(self) -> str:
        if not self._resolved:
            return "ResponseBody(<unresolved>)"
        return f"ResponseBody({self._text!r})"


def as_body(body: ResponseBody | BodySupplier | str | None) -> ResponseBody:
    """Coerce a supplier, text, or body into a :class:`ResponseBody`."""
    if isinstance(body, ResponseBody):
        return body
    if body is None or isinstance(body, str):
        return ResponseBody.of(body)
    return ResponseBody(body)
