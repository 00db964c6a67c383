"""Built-in rule catalog for the identity server.

Order matters inside each tier: the first matching rule wins. Keep
more specific patterns ahead of the general ones they overlap with
(e.g. ``User_Already_Binded_Activated`` before ``User_Already_Binded``).
"""

from __future__ import annotations

from identity_error_parser.errors import (
    IdentityInvalidActivationCodeError,
    IdentityInvalidAuthenticatorCodeError,
    IdentityInvalidChangeContactsCodeError,
    IdentityInvalidCredentialsError,
    IdentityInvalidRefreshTokenError,
    IdentityInvalidResetPasswordCodeError,
    IdentityInvalidTwoFaError,
    IdentityLockedAccountError,
    IdentityNoPasswordError,
    IdentityNotActivatedError,
    IdentityPasswordIsNotStrongEnoughError,
    IdentityProfileIsAlreadyActivatedError,
    IdentityProfileIsAlreadyExistsError,
    IdentityProfileIsAlreadyRegisteredAndActivatedError,
    IdentityProfileIsAlreadyRegisteredButNotActivatedError,
    IdentityProfileIsAlreadyRegisteredError,
    IdentityProfileIsIncorrectRequestError,
    IdentityProfileNotExistOnIdentityError,
    IdentityUseAuthenticatorError,
    IdentityUseTwoFaError,
)
from identity_error_parser.parser.rules import ErrorRule


def default_ids_rules() -> list[ErrorRule]:
    """Session-layer rules (token endpoint, login, 2FA)."""
    return [
        ErrorRule.regex(
            r".*The Code must be at least.*",
            r".*invalid_grant.*Invalid code.*",
            r".*Invalid code.*invalid_grant.*",
            factory=IdentityInvalidTwoFaError,
        ),
        ErrorRule.regex(r".*User is locked out.*", factory=IdentityLockedAccountError),
        ErrorRule.regex(r".*Password not set.*", factory=IdentityNoPasswordError),
        ErrorRule.regex(
            r".*Account hasn't been activated.*",
            # JSON-escaped apostrophe as sent by some server versions
            r".*Account hasn\\u0027t been activated.*",
            factory=IdentityNotActivatedError,
        ),
        ErrorRule.regex(
            r".*Invalid username or password.*", factory=IdentityInvalidCredentialsError
        ),
        ErrorRule.regex(
            r'.*\{"error":"invalid_grant"\}.*', factory=IdentityInvalidRefreshTokenError
        ),
        ErrorRule.regex(r".*Must be use 2FA code.*", factory=IdentityUseTwoFaError),
        ErrorRule.regex(
            r".*Must use the code from the authenticator.*",
            factory=IdentityUseAuthenticatorError,
        ),
    ]


def default_api_rules() -> list[ErrorRule]:
    """Account API rules (registration, activation, profile changes)."""
    return [
        ErrorRule.regex(
            r".*Password_Validation_Failed.*", factory=IdentityPasswordIsNotStrongEnoughError
        ),
        ErrorRule.regex(r".*User_Not_Found.*", factory=IdentityProfileNotExistOnIdentityError),
        ErrorRule.regex(
            r".*Account_Already_Activated.*", factory=IdentityProfileIsAlreadyActivatedError
        ),
        ErrorRule.regex(
            r".*User_Activation_Fail: Invalid token.*",
            factory=IdentityInvalidActivationCodeError,
        ),
        ErrorRule.regex(
            r".*Reset_Password_Fail: Invalid token.*",
            factory=IdentityInvalidResetPasswordCodeError,
        ),
        ErrorRule.regex(
            r".*Update_Profile_Fail: Invalid token.*",
            factory=IdentityInvalidChangeContactsCodeError,
        ),
        ErrorRule.regex(r".*Authenticator_Fail.*", factory=IdentityInvalidAuthenticatorCodeError),
        ErrorRule.regex(
            r".*User_Already_Binded_Activated.*",
            factory=IdentityProfileIsAlreadyRegisteredAndActivatedError,
        ),
        ErrorRule.regex(
            r".*User_Already_Binded_Not_Activated.*",
            factory=IdentityProfileIsAlreadyRegisteredButNotActivatedError,
        ),
        ErrorRule.regex(r".*User_Already_Exists.*", factory=IdentityProfileIsAlreadyExistsError),
        ErrorRule.regex(
            r".*Incorrect_Account_Request.*", factory=IdentityProfileIsIncorrectRequestError
        ),
        ErrorRule.regex(
            r".*User_Already_Binded:.*",
            r".*User_Already_Binded .*",
            r".*User_Already_Binded",
            factory=IdentityProfileIsAlreadyRegisteredError,
        ),
    ]
