"""Session-layer errors raised from identity-server token and login flows."""

from __future__ import annotations

from typing import ClassVar

from identity_error_parser.errors.base import IdentityError
from identity_error_parser.errors.kinds import IdsErrorType


class IdentityParserIdsError(IdentityError):
    """Base class for errors classified by the ids rule tier.

    Subclasses fix ``error_type`` and ``category``; constructing one only
    needs what the server sent, so every subclass doubles as an error
    factory ``(original_message, status_code) -> error``.
    """

    source = "ids"
    error_type: ClassVar[IdsErrorType] = IdsErrorType.UNKNOWN
    category: ClassVar[str] = "Unknown identity server error"

    def __init__(
        self,
        original_message: str | None = None,
        status_code: int | None = None,
        *,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            self.category,
            status_code=status_code,
            original_message=original_message,
            cause=cause,
        )

    def to_dict(self) -> dict[str, object]:
        result = super().to_dict()
        result["error_type"] = self.error_type.value
        return result


class IdentityInvalidTwoFaError(IdentityParserIdsError):
    error_type = IdsErrorType.TWO_FA
    category = "2FA code is invalid"


class IdentityLockedAccountError(IdentityParserIdsError):
    error_type = IdsErrorType.LOCKED
    category = "Account is locked"


class IdentityNoPasswordError(IdentityParserIdsError):
    error_type = IdsErrorType.NO_PASSWORD
    category = "Profile password is not set"


class IdentityNotActivatedError(IdentityParserIdsError):
    error_type = IdsErrorType.NOT_ACTIVATED
    category = "Account is not activated"


class IdentityInvalidCredentialsError(IdentityParserIdsError):
    error_type = IdsErrorType.INVALID_CREDENTIALS
    category = "Account credentials are not valid"


class IdentityInvalidRefreshTokenError(IdentityParserIdsError):
    error_type = IdsErrorType.INVALID_REFRESH_TOKEN
    category = "Refresh token is invalid"


class IdentityUseTwoFaError(IdentityParserIdsError):
    error_type = IdsErrorType.TWO_FA
    category = "2FA code is required"


class IdentityUseAuthenticatorError(IdentityParserIdsError):
    error_type = IdsErrorType.AUTHENTICATOR
    category = "Authenticator code is required"
