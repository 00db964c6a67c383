"""Error kinds for classified identity-server errors.

Two families mirror the two rule tiers: session-layer errors reported by
the identity server's token endpoints, and business errors reported by
its account API.
"""

from __future__ import annotations

from enum import Enum


class IdsErrorType(str, Enum):
    """Session-layer error kinds (login, token and 2FA flows)."""

    NO_PASSWORD = "no_password"
    """Profile has no password set."""

    LOCKED = "locked"
    """Account is locked out."""

    NOT_ACTIVATED = "not_activated"
    """Account has not been activated yet."""

    INVALID_CREDENTIALS = "invalid_credentials"
    """Username or password is wrong."""

    INVALID_REFRESH_TOKEN = "invalid_refresh_token"
    """Refresh token grant was rejected."""

    TWO_FA = "two_fa"
    """A 2FA code is required or the supplied one is wrong."""

    AUTHENTICATOR = "authenticator"
    """An authenticator app code is required."""

    UNKNOWN = "unknown"
    """Unrecognised session-layer error."""


class ApiErrorType(str, Enum):
    """Account API error kinds (registration, activation, profile)."""

    PROFILE_IS_ALREADY_ACTIVATED = "profile_is_already_activated"
    PROFILE_IS_ALREADY_REGISTERED = "profile_is_already_registered"
    PASSWORD_IS_NOT_STRONG_ENOUGH = "password_is_not_strong_enough"
    PROFILE_NOT_EXIST = "profile_not_exist"
    INCORRECT_REQUEST = "incorrect_request"
    INVALID_CODE = "invalid_code"
    AUTHENTICATOR_CODE_IS_INVALID = "authenticator_code_is_invalid"
    UNKNOWN = "unknown"
