"""Tests for telemetry module."""

import json
from io import StringIO

import pytest

from identity_error_parser.parser import IdentityErrorParser
from identity_error_parser.telemetry import (
    IdentityLogger,
    LogContext,
    LogLevel,
    SensitiveDataMasker,
    clear_log_context,
    get_log_context,
    get_logger,
    set_log_context,
)


class TestSensitiveDataMasker:
    """Tests for SensitiveDataMasker."""

    def test_mask_bearer(self) -> None:
        """Test bearer tokens are masked."""
        masked = SensitiveDataMasker().mask("Authorization: Bearer eyJhbGciOi.abc")
        assert masked == "Authorization: Bearer ***REDACTED***"

    def test_mask_json_tokens(self) -> None:
        """Test token fields in JSON bodies are masked."""
        masked = SensitiveDataMasker().mask('{"access_token":"abc","expires_in":3600}')
        assert masked == '{"access_token":"***REDACTED***","expires_in":3600}'

    def test_mask_form_password(self) -> None:
        """Test form-encoded passwords are masked."""
        masked = SensitiveDataMasker().mask("grant_type=password&password=hunter2&username=bob")
        assert masked == "grant_type=password&password=***REDACTED***&username=bob"

    def test_mask_dict(self) -> None:
        """Test sensitive keys are redacted."""
        masked = SensitiveDataMasker().mask_dict(
            {"refresh_token": "abc", "status_code": 400, "nested": {"password": "x"}}
        )
        assert masked == {
            "refresh_token": "***REDACTED***",
            "status_code": 400,
            "nested": {"password": "***REDACTED***"},
        }


class TestLogContext:
    """Tests for LogContext."""

    def test_round_trip(self) -> None:
        """Test context survives set/get."""
        set_log_context(LogContext(request_id="r-1", endpoint="/connect/token").with_extra(
            attempt=2
        ))
        try:
            ctx = get_log_context()
            assert ctx.request_id == "r-1"
            assert ctx.endpoint == "/connect/token"
            assert ctx.extra == {"attempt": 2}
        finally:
            clear_log_context()
        assert get_log_context().to_dict() == {}


class TestIdentityLogger:
    """Tests for IdentityLogger."""

    def test_json_output(self, log_stream: StringIO) -> None:
        """Test JSON records carry fields and masking."""
        get_logger("identity_error_parser.test").info("Token refused", password="hunter2")
        record = json.loads(log_stream.getvalue().splitlines()[-1])
        assert record["level"] == "INFO"
        assert record["message"] == "Token refused"
        assert record["password"] == "***REDACTED***"

    def test_text_output(self) -> None:
        """Test text records append fields."""
        stream = StringIO()
        IdentityLogger.configure(level=LogLevel.DEBUG, format="text", stream=stream)
        try:
            get_logger("identity_error_parser.test").debug("Rule matched", tier="ids")
            assert "Rule matched | tier=ids" in stream.getvalue()
        finally:
            IdentityLogger.configure(level=LogLevel.INFO, format="text")

    def test_configure_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test environment configuration."""
        monkeypatch.setenv("IDENTITY_LOG_LEVEL", "warning")
        monkeypatch.setenv("IDENTITY_LOG_FORMAT", "json")
        stream = StringIO()
        IdentityLogger.configure_from_env(stream=stream)
        try:
            logger = get_logger("identity_error_parser.test")
            logger.info("hidden")
            logger.warning("shown")
            lines = stream.getvalue().splitlines()
            assert [json.loads(line)["message"] for line in lines] == ["shown"]
        finally:
            IdentityLogger.configure(level=LogLevel.INFO, format="text")

    def test_classification_logged(self, log_stream: StringIO) -> None:
        """Test classification outcomes are logged at debug level."""
        IdentityErrorParser().find_any_error(400, "User is locked out")
        records = [json.loads(line) for line in log_stream.getvalue().splitlines()]
        matched = [r for r in records if r["message"] == "Identity error classified"]
        assert matched[0]["tier"] == "ids"
        assert matched[0]["kind"] == "IdentityLockedAccountError"
        assert matched[0]["rule_index"] == 1
