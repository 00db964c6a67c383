"""Errors for the account activation flow.

These are not produced by classification; callers raise them when an
activation step fails, chaining the underlying fault.
"""

from __future__ import annotations

from identity_error_parser.errors.base import IdentityError


class IdentityActivationError(IdentityError):
    """Failure during account activation on the identity server."""

    source = "activation"
    default_message = "Exception during activation on IDServer."

    def __init__(
        self,
        status_code: int | None = None,
        original_message: str | None = None,
        cause: BaseException | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            message or self.default_message,
            status_code=status_code,
            original_message=original_message,
            cause=cause,
        )


class IdentityGetActivationCodeError(IdentityActivationError):
    default_message = "Exception during activation on IDServer. Can't get activation code"


class IdentityApproveActivationCodeError(IdentityActivationError):
    default_message = "Exception during activation on IDServer. Can't get approve code"
