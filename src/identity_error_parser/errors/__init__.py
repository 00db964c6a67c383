"""错误体系：身份服务器错误的结构化类型目录。

Error hierarchy for identity-error-parser.

Provides the typed catalog of identity-server errors produced by
classification, plus the library's own configuration errors.
"""

from identity_error_parser.errors.activation import (
    IdentityActivationError,
    IdentityApproveActivationCodeError,
    IdentityGetActivationCodeError,
)
from identity_error_parser.errors.api import (
    IdentityInvalidActivationCodeError,
    IdentityInvalidAuthenticatorCodeError,
    IdentityInvalidChangeContactsCodeError,
    IdentityInvalidResetPasswordCodeError,
    IdentityParserApiError,
    IdentityPasswordIsNotStrongEnoughError,
    IdentityProfileIsAlreadyActivatedError,
    IdentityProfileIsAlreadyExistsError,
    IdentityProfileIsAlreadyRegisteredAndActivatedError,
    IdentityProfileIsAlreadyRegisteredButNotActivatedError,
    IdentityProfileIsAlreadyRegisteredError,
    IdentityProfileIsIncorrectRequestError,
    IdentityProfileNotExistOnIdentityError,
)
from identity_error_parser.errors.base import (
    ConfigurationError,
    ErrorContext,
    IdentityError,
    IdentityLibError,
)
from identity_error_parser.errors.ids import (
    IdentityInvalidCredentialsError,
    IdentityInvalidRefreshTokenError,
    IdentityInvalidTwoFaError,
    IdentityLockedAccountError,
    IdentityNoPasswordError,
    IdentityNotActivatedError,
    IdentityParserIdsError,
    IdentityUseAuthenticatorError,
    IdentityUseTwoFaError,
)
from identity_error_parser.errors.kinds import ApiErrorType, IdsErrorType

# Error kinds a catalog rule may name, keyed by class name
ERROR_KINDS: dict[str, type[IdentityError]] = {
    cls.__name__: cls
    for cls in (
        IdentityInvalidTwoFaError,
        IdentityLockedAccountError,
        IdentityNoPasswordError,
        IdentityNotActivatedError,
        IdentityInvalidCredentialsError,
        IdentityInvalidRefreshTokenError,
        IdentityUseTwoFaError,
        IdentityUseAuthenticatorError,
        IdentityPasswordIsNotStrongEnoughError,
        IdentityProfileNotExistOnIdentityError,
        IdentityProfileIsAlreadyActivatedError,
        IdentityInvalidActivationCodeError,
        IdentityInvalidResetPasswordCodeError,
        IdentityInvalidChangeContactsCodeError,
        IdentityInvalidAuthenticatorCodeError,
        IdentityProfileIsAlreadyRegisteredAndActivatedError,
        IdentityProfileIsAlreadyRegisteredButNotActivatedError,
        IdentityProfileIsAlreadyExistsError,
        IdentityProfileIsIncorrectRequestError,
        IdentityProfileIsAlreadyRegisteredError,
    )
}

__all__ = [
    # Base errors
    "ConfigurationError",
    "ErrorContext",
    "IdentityError",
    "IdentityLibError",
    # Kinds
    "ApiErrorType",
    "ERROR_KINDS",
    "IdsErrorType",
    # Activation
    "IdentityActivationError",
    "IdentityApproveActivationCodeError",
    "IdentityGetActivationCodeError",
    # Ids tier
    "IdentityInvalidCredentialsError",
    "IdentityInvalidRefreshTokenError",
    "IdentityInvalidTwoFaError",
    "IdentityLockedAccountError",
    "IdentityNoPasswordError",
    "IdentityNotActivatedError",
    "IdentityParserIdsError",
    "IdentityUseAuthenticatorError",
    "IdentityUseTwoFaError",
    # Api tier
    "IdentityInvalidActivationCodeError",
    "IdentityInvalidAuthenticatorCodeError",
    "IdentityInvalidChangeContactsCodeError",
    "IdentityInvalidResetPasswordCodeError",
    "IdentityParserApiError",
    "IdentityPasswordIsNotStrongEnoughError",
    "IdentityProfileIsAlreadyActivatedError",
    "IdentityProfileIsAlreadyExistsError",
    "IdentityProfileIsAlreadyRegisteredAndActivatedError",
    "IdentityProfileIsAlreadyRegisteredButNotActivatedError",
    "IdentityProfileIsAlreadyRegisteredError",
    "IdentityProfileIsIncorrectRequestError",
    "IdentityProfileNotExistOnIdentityError",
]
