"""Tests for the process-wide default parser."""

from pathlib import Path

import pytest

from identity_error_parser.errors import ConfigurationError, IdentityLockedAccountError
from identity_error_parser.parser import (
    IdentityErrorParser,
    configure_default_parser,
    get_default_parser,
)
from identity_error_parser.parser.holder import CATALOG_ENV_VAR


class TestDefaultParser:
    """Tests for get/configure_default_parser."""

    def test_lazily_built_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the default is built on first use and then reused."""
        monkeypatch.delenv(CATALOG_ENV_VAR, raising=False)
        first = get_default_parser()
        assert first is get_default_parser()
        assert len(first.ids_rules) == 8

    def test_configure(self) -> None:
        """Test an explicitly configured parser is returned."""
        parser = IdentityErrorParser(ids_rules=[], api_rules=[])
        configure_default_parser(parser)
        assert get_default_parser() is parser

    def test_configure_twice(self) -> None:
        """Test the default can only be assigned once."""
        configure_default_parser(IdentityErrorParser())
        with pytest.raises(ConfigurationError) as exc_info:
            configure_default_parser(IdentityErrorParser())
        assert "hint: Configure it once at startup" in str(exc_info.value)

    def test_configure_after_use(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test configuring after first use is rejected."""
        monkeypatch.delenv(CATALOG_ENV_VAR, raising=False)
        get_default_parser()
        with pytest.raises(ConfigurationError) as exc_info:
            configure_default_parser(IdentityErrorParser())
        assert exc_info.value.context.hint

    def test_catalog_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test IDENTITY_ERROR_CATALOG selects the catalog."""
        path = tmp_path / "catalog.yaml"
        path.write_text(
            "ids:\n"
            "  - error: IdentityLockedAccountError\n"
            "    patterns: ['.*Frozen.*']\n",
            encoding="utf-8",
        )
        monkeypatch.setenv(CATALOG_ENV_VAR, str(path))
        parser = get_default_parser()
        assert len(parser.ids_rules) == 1
        assert isinstance(parser.find_any_error(400, "Frozen"), IdentityLockedAccountError)

    def test_bad_catalog_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a broken env catalog fails and leaves nothing assigned."""
        monkeypatch.setenv(CATALOG_ENV_VAR, str(tmp_path / "missing.yaml"))
        with pytest.raises(ConfigurationError):
            get_default_parser()
        monkeypatch.delenv(CATALOG_ENV_VAR)
        assert len(get_default_parser().api_rules) == 12
