"""Root pytest fixtures for identity-error-parser tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from io import StringIO

import pytest

from identity_error_parser.parser import IdentityErrorParser, reset_default_parser
from identity_error_parser.telemetry import IdentityLogger, LogLevel


class CountingSupplier:
    """Body supplier that records how often it was called."""

    def __init__(self, text: str | None) -> None:
        self.text = text
        self.calls = 0

    def __call__(self) -> str | None:
        self.calls += 1
        return self.text


@pytest.fixture(autouse=True)
def _fresh_default_parser() -> Iterator[None]:
    """Isolate the process-wide default parser between tests."""
    reset_default_parser()
    yield
    reset_default_parser()


@pytest.fixture
def parser() -> IdentityErrorParser:
    """Parser with the built-in catalog."""
    return IdentityErrorParser()


@pytest.fixture
def counting_supplier() -> Callable[[str | None], CountingSupplier]:
    """Factory for body suppliers that count their calls."""
    return CountingSupplier


@pytest.fixture
def log_stream() -> Iterator[StringIO]:
    """Capture library logs as JSON lines."""
    stream = StringIO()
    IdentityLogger.configure(level=LogLevel.DEBUG, format="json", stream=stream)
    yield stream
    IdentityLogger.configure(level=LogLevel.INFO, format="text")
