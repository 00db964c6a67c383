"""HTTP 集成：在 httpx 响应上运行错误解析器。

httpx integration for identity-error-parser.

Provides:
- Lazy body suppliers over httpx responses
- One-shot checks for sync and async responses
- Response event hooks for ``httpx.Client`` / ``httpx.AsyncClient``
- ``exchange`` helpers that check a response before handing it on
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypeVar

import httpx

from identity_error_parser.parser import (
    IdentityErrorParser,
    get_default_parser,
    raise_if_present,
)
from identity_error_parser.parser.body import BodySupplier

T = TypeVar("T")


def body_supplier(response: httpx.Response) -> BodySupplier:
    """Create a supplier that reads the response body on first call.

    Streaming responses are drained only when a matcher asks for text.
    An already-closed stream raises ``httpx.StreamClosed``, which
    propagates unchanged.
    """

    def read() -> str:
        response.read()
        return response.text

    return read


def _should_check(response: httpx.Response, errors_only: bool) -> bool:
    return not errors_only or response.is_error


def check_response(
    response: httpx.Response,
    parser: IdentityErrorParser | None = None,
    *,
    errors_only: bool = True,
) -> None:
    """Raise the classified identity error for a response, if any.

    Args:
        response: Response to classify
        parser: Parser to use (default: the process-wide default parser)
        errors_only: Skip responses with a non-error status

    Raises:
        IdentityError: If a rule matched the response
    """
    if not _should_check(response, errors_only):
        return
    parser = parser or get_default_parser()
    parser.process_any_error(response.status_code, body_supplier(response))


async def acheck_response(
    response: httpx.Response,
    parser: IdentityErrorParser | None = None,
    *,
    errors_only: bool = True,
) -> None:
    """Async variant of :func:`check_response`.

    Classification is synchronous, so an unread body cannot be drained
    from inside a matcher. The rules are tried first against the unread
    response; only if one of them asks for the text is the body read
    with ``aread`` and the response classified again.
    """
    if not _should_check(response, errors_only):
        return
    parser = parser or get_default_parser()
    try:
        error = parser.find_any_error(response.status_code, lambda: response.text)
    except httpx.ResponseNotRead:
        await response.aread()
        error = parser.find_any_error(response.status_code, lambda: response.text)
    raise_if_present(error)


class IdentityErrorHook:
    """Response event hook for ``httpx.Client``.

    Example:
        >>> client = httpx.Client(event_hooks={"response": [IdentityErrorHook()]})
    """

    def __init__(
        self,
        parser: IdentityErrorParser | None = None,
        *,
        errors_only: bool = True,
    ) -> None:
        self._parser = parser
        self._errors_only = errors_only

    def __call__(self, response: httpx.Response) -> None:
        check_response(response, self._parser, errors_only=self._errors_only)


class AsyncIdentityErrorHook:
    """Response event hook for ``httpx.AsyncClient``."""

    def __init__(
        self,
        parser: IdentityErrorParser | None = None,
        *,
        errors_only: bool = True,
    ) -> None:
        self._parser = parser
        self._errors_only = errors_only

    async def __call__(self, response: httpx.Response) -> None:
        await acheck_response(response, self._parser, errors_only=self._errors_only)


def exchange(
    client: httpx.Client,
    request: httpx.Request,
    handler: Callable[[httpx.Response], T],
    parser: IdentityErrorParser | None = None,
    *,
    errors_only: bool = True,
) -> T:
    """Send a request, raise its identity error if any, else handle it.

    The response is closed after ``handler`` returns.

    Args:
        client: Client to send with
        request: Request to send
        handler: Called with the response when no error was classified
        parser: Parser to use (default: the process-wide default parser)
        errors_only: Skip classification for non-error statuses

    Returns:
        Whatever ``handler`` returns
    """
    response = client.send(request, stream=True)
    try:
        check_response(response, parser, errors_only=errors_only)
        return handler(response)
    finally:
        response.close()


async def aexchange(
    client: httpx.AsyncClient,
    request: httpx.Request,
    handler: Callable[[httpx.Response], Awaitable[T]],
    parser: IdentityErrorParser | None = None,
    *,
    errors_only: bool = True,
) -> T:
    """Async variant of :func:`exchange`."""
    response = await client.send(request, stream=True)
    try:
        await acheck_response(response, parser, errors_only=errors_only)
        return await handler(response)
    finally:
        await response.aclose()
