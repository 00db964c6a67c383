"""Business errors raised from the identity server's account API."""

from __future__ import annotations

from typing import ClassVar

from identity_error_parser.errors.base import IdentityError
from identity_error_parser.errors.kinds import ApiErrorType


class IdentityParserApiError(IdentityError):
    """Base class for errors classified by the api rule tier."""

    source = "api"
    error_type: ClassVar[ApiErrorType] = ApiErrorType.UNKNOWN
    category: ClassVar[str] = "Unknown identity API error"

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


class IdentityPasswordIsNotStrongEnoughError(IdentityParserApiError):
    error_type = ApiErrorType.PASSWORD_IS_NOT_STRONG_ENOUGH
    category = "Password is not strong enough"


class IdentityProfileNotExistOnIdentityError(IdentityParserApiError):
    error_type = ApiErrorType.PROFILE_NOT_EXIST
    category = "Profile does not exist on identity server"


class IdentityProfileIsAlreadyActivatedError(IdentityParserApiError):
    error_type = ApiErrorType.PROFILE_IS_ALREADY_ACTIVATED
    category = "Profile is already activated"


class IdentityInvalidActivationCodeError(IdentityParserApiError):
    error_type = ApiErrorType.INVALID_CODE
    category = "Activation code is invalid"


class IdentityInvalidResetPasswordCodeError(IdentityParserApiError):
    error_type = ApiErrorType.INVALID_CODE
    category = "Reset password code is invalid"


class IdentityInvalidChangeContactsCodeError(IdentityParserApiError):
    error_type = ApiErrorType.INVALID_CODE
    category = "Change contacts code is invalid"


class IdentityInvalidAuthenticatorCodeError(IdentityParserApiError):
    error_type = ApiErrorType.AUTHENTICATOR_CODE_IS_INVALID
    category = "Authenticator code is invalid"


class IdentityProfileIsAlreadyRegisteredError(IdentityParserApiError):
    error_type = ApiErrorType.PROFILE_IS_ALREADY_REGISTERED
    category = "Profile is already registered"


class IdentityProfileIsAlreadyRegisteredAndActivatedError(
    IdentityProfileIsAlreadyRegisteredError
):
    category = "Profile is already registered and activated"


class IdentityProfileIsAlreadyRegisteredButNotActivatedError(
    IdentityProfileIsAlreadyRegisteredError
):
    category = "Profile is already registered but not activated"


class IdentityProfileIsAlreadyExistsError(IdentityProfileIsAlreadyRegisteredError):
    category = "Profile already exists"


class IdentityProfileIsIncorrectRequestError(IdentityParserApiError):
    error_type = ApiErrorType.INCORRECT_REQUEST
    category = "Account request is incorrect"
