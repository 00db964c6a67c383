"""Tests for the built-in rule catalog."""

import pytest

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
    IdentityParserApiError,
    IdentityParserIdsError,
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
from identity_error_parser.parser import (
    IdentityErrorParser,
    default_api_rules,
    default_ids_rules,
)

IDS_CASES = [
    ("The Code must be at least 6 characters long.", IdentityInvalidTwoFaError),
    ('{"error":"invalid_grant","error_description":"Invalid code"}', IdentityInvalidTwoFaError),
    ("Invalid code (invalid_grant)", IdentityInvalidTwoFaError),
    ('{"error_description":"User is locked out"}', IdentityLockedAccountError),
    ("Password not set for this profile", IdentityNoPasswordError),
    ("Account hasn't been activated", IdentityNotActivatedError),
    ('{"error_description":"Account hasn\\u0027t been activated"}', IdentityNotActivatedError),
    ("Invalid username or password", IdentityInvalidCredentialsError),
    ('{"error":"invalid_grant"}', IdentityInvalidRefreshTokenError),
    ("Must be use 2FA code", IdentityUseTwoFaError),
    ("Must use the code from the authenticator app", IdentityUseAuthenticatorError),
]

API_CASES = [
    ("Password_Validation_Failed: too short", IdentityPasswordIsNotStrongEnoughError),
    ("User_Not_Found", IdentityProfileNotExistOnIdentityError),
    ("Account_Already_Activated", IdentityProfileIsAlreadyActivatedError),
    ("User_Activation_Fail: Invalid token", IdentityInvalidActivationCodeError),
    ("Reset_Password_Fail: Invalid token", IdentityInvalidResetPasswordCodeError),
    ("Update_Profile_Fail: Invalid token", IdentityInvalidChangeContactsCodeError),
    ("Authenticator_Fail", IdentityInvalidAuthenticatorCodeError),
    ("User_Already_Binded_Activated", IdentityProfileIsAlreadyRegisteredAndActivatedError),
    (
        "User_Already_Binded_Not_Activated",
        IdentityProfileIsAlreadyRegisteredButNotActivatedError,
    ),
    ("User_Already_Exists", IdentityProfileIsAlreadyExistsError),
    ("Incorrect_Account_Request", IdentityProfileIsIncorrectRequestError),
    ("User_Already_Binded: user@example.com", IdentityProfileIsAlreadyRegisteredError),
    ("User_Already_Binded user@example.com", IdentityProfileIsAlreadyRegisteredError),
    ("Error: User_Already_Binded", IdentityProfileIsAlreadyRegisteredError),
]


class TestDefaultCatalog:
    """Tests for the built-in tiers."""

    def test_tier_sizes(self) -> None:
        """Test both tiers are populated."""
        assert len(default_ids_rules()) == 8
        assert len(default_api_rules()) == 12

    def test_fresh_lists(self) -> None:
        """Test each call returns an independent list."""
        rules = default_ids_rules()
        rules.clear()
        assert len(default_ids_rules()) == 8

    @pytest.mark.parametrize(("message", "expected"), IDS_CASES)
    def test_ids_rules(self, message: str, expected: type) -> None:
        """Test each session-layer message maps to its error kind."""
        error = IdentityErrorParser().find_ids_error(400, message)
        assert type(error) is expected
        assert isinstance(error, IdentityParserIdsError)
        assert error.original_message == message

    @pytest.mark.parametrize(("message", "expected"), API_CASES)
    def test_api_rules(self, message: str, expected: type) -> None:
        """Test each account API message maps to its error kind."""
        parser = IdentityErrorParser()
        assert parser.find_ids_error(400, message) is None
        error = parser.find_any_error(400, message)
        assert type(error) is expected
        assert isinstance(error, IdentityParserApiError)

    def test_binded_suffix_not_generic(self) -> None:
        """Test an unknown User_Already_Binded suffix is not classified."""
        assert IdentityErrorParser().find_api_error(409, "User_Already_BindedX") is None
