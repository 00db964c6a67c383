"""Process-wide default parser.

The default is assigned at most once. Either configure it explicitly at
startup with :func:`configure_default_parser`, or let the first call to
:func:`get_default_parser` build it, from the catalog named by the
``IDENTITY_ERROR_CATALOG`` environment variable when set, else from the
built-in catalog. Once assigned it cannot be replaced.
"""

from __future__ import annotations

import os
import threading

from identity_error_parser.errors import ConfigurationError
from identity_error_parser.parser.classifier import IdentityErrorParser
from identity_error_parser.telemetry import get_logger

logger = get_logger(__name__)

CATALOG_ENV_VAR = "IDENTITY_ERROR_CATALOG"

_lock = threading.Lock()
_default_parser: IdentityErrorParser | None = None


def configure_default_parser(parser: IdentityErrorParser) -> None:
    """Assign the process-wide default parser.

    Raises:
        ConfigurationError: If a default parser is already assigned
    """
    global _default_parser
    with _lock:
        if _default_parser is not None:
            raise ConfigurationError(
                "Default identity error parser is already configured"
            ).with_hint("Configure it once at startup, before the first request")
        _default_parser = parser
    logger.debug("Default identity error parser configured", parser=repr(parser))


def get_default_parser() -> IdentityErrorParser:
    """Get the process-wide default parser, building it on first use."""
    global _default_parser
    with _lock:
        if _default_parser is None:
            catalog_path = os.getenv(CATALOG_ENV_VAR)
            if catalog_path:
                _default_parser = IdentityErrorParser.from_catalog(catalog_path)
            else:
                _default_parser = IdentityErrorParser()
            logger.debug(
                "Default identity error parser created",
                catalog_path=catalog_path,
                parser=repr(_default_parser),
            )
        return _default_parser


def reset_default_parser() -> None:
    """Forget the default parser. Intended for tests."""
    global _default_parser
    with _lock:
        _default_parser = None
