"""Base error classes for identity-error-parser.

Provides a layered error hierarchy:
- IdentityLibError: Base class for all library errors
- ConfigurationError: Catalog loading and default-parser setup errors
- IdentityError: Errors reported by the identity server, classified
  into the fixed catalog
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ErrorContext:
    """Structured error context for diagnostics."""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional details about the error"""

    source: str | None = None
    """Error source (e.g., 'ids', 'api', 'catalog')"""

    hint: str | None = None
    """Actionable hint for resolving the error"""

    def __str__(self) -> str:
        parts = []
        if self.source:
            parts.append(f"[{self.source}]")
        if self.hint:
            parts.append(f"(hint: {self.hint})")
        return " ".join(parts)


class IdentityLibError(Exception):
    """Base class for all identity-error-parser errors.

    Attributes:
        message: Human-readable error message
        context: Structured error context
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        self.message = message
        self.context = context or ErrorContext()
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message."""
        ctx_str = str(self.context)
        if ctx_str:
            return f"{self.message} {ctx_str}"
        return self.message

    def with_hint(self, hint: str) -> IdentityLibError:
        """Add a hint to this error."""
        self.context.hint = hint
        self.args = (self._format_message(),)
        return self


class ConfigurationError(IdentityLibError):
    """Error in parser configuration.

    Raised when:
    - Catalog file not found or not valid YAML
    - Catalog schema validation failure
    - Unknown error kind referenced by a catalog rule
    - Default parser configured twice or after first use
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        catalog_path: str | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="configuration")
        if catalog_path:
            ctx.details["catalog_path"] = catalog_path
        super().__init__(message, ctx)
        self.catalog_path = catalog_path


class IdentityError(IdentityLibError):
    """Error reported by the identity server.

    Every classified error carries the fixed category message of its
    kind together with what the server actually said.

    Attributes:
        status_code: HTTP status code of the response, if known
        original_message: Response text that triggered classification
        cause: Underlying fault, also exposed as ``__cause__``
    """

    source = "identity"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        original_message: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        ctx = ErrorContext(source=self.source)
        if status_code is not None:
            ctx.details["status_code"] = status_code
        if original_message is not None:
            ctx.details["original_message"] = original_message

        super().__init__(message, ctx)

        self.status_code = status_code
        self.original_message = original_message
        self.cause = cause
        self.__cause__ = cause

    def _format_message(self) -> str:
        base = super()._format_message()
        status = self.context.details.get("status_code")
        if status is not None:
            return f"{base} (status={status})"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging and comparison."""
        return {
            "kind": type(self).__name__,
            "message": self.message,
            "status_code": self.status_code,
            "original_message": self.original_message,
            "cause": repr(self.cause) if self.cause is not None else None,
        }
