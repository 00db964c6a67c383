"""
Catalog loader for rule tiers supplied as YAML configuration.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from pydantic import ValidationError

from identity_error_parser.config.models import CatalogSpec, RuleSpec
from identity_error_parser.errors import ERROR_KINDS, ConfigurationError, ErrorContext
from identity_error_parser.matching import AllOf, MessageMatcher, RegexMatcher, StatusCodeMatcher
from identity_error_parser.parser.catalog import default_api_rules, default_ids_rules
from identity_error_parser.parser.rules import ErrorRule
from identity_error_parser.telemetry import get_logger

logger = get_logger(__name__)


@dataclass
class Catalog:
    """Rule tiers built from a catalog file."""

    ids_rules: list[ErrorRule] = field(default_factory=list)
    api_rules: list[ErrorRule] = field(default_factory=list)
    version: str | None = None


def load_catalog(path: str | Path) -> Catalog:
    """Load a catalog from a YAML file.

    Args:
        path: Path to the catalog file

    Returns:
        Catalog with both rule tiers

    Raises:
        ConfigurationError: If the file cannot be read, parsed or validated
    """
    catalog_path = Path(path)
    try:
        text = catalog_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read error catalog: {e}", catalog_path=str(catalog_path)
        ) from e

    catalog = parse_catalog(text, source=str(catalog_path))
    logger.info(
        "Error catalog loaded",
        catalog_path=str(catalog_path),
        version=catalog.version,
        ids_rules=len(catalog.ids_rules),
        api_rules=len(catalog.api_rules),
    )
    return catalog


def parse_catalog(text: str, source: str | None = None) -> Catalog:
    """Parse a catalog from YAML text.

    Args:
        text: YAML document
        source: Where the text came from, for error messages

    Raises:
        ConfigurationError: If the document is not a valid catalog
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in error catalog: {e}", catalog_path=source) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Error catalog must be a mapping with 'ids' and/or 'api' lists",
            catalog_path=source,
        )

    try:
        spec = CatalogSpec.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid error catalog: {e}", catalog_path=source) from e

    return build_catalog(spec, source=source)


def build_catalog(spec: CatalogSpec, source: str | None = None) -> Catalog:
    """Build rule tiers from a validated catalog spec."""
    ids_rules = [build_rule(rule, source) for rule in spec.ids]
    api_rules = [build_rule(rule, source) for rule in spec.api]
    if spec.include_defaults:
        ids_rules.extend(default_ids_rules())
        api_rules.extend(default_api_rules())
    return Catalog(ids_rules=ids_rules, api_rules=api_rules, version=spec.version)


def build_rule(spec: RuleSpec, source: str | None = None) -> ErrorRule:
    """Build one rule; status checks run before patterns."""
    factory = ERROR_KINDS.get(spec.error)
    if factory is None:
        ctx = ErrorContext(source="configuration", details={"error": spec.error})
        raise ConfigurationError(
            f"Unknown error kind {spec.error!r}", ctx, catalog_path=source
        ).with_hint(f"Use one of: {', '.join(sorted(ERROR_KINDS))}")

    matchers: list[MessageMatcher] = []
    if spec.status_codes:
        matchers.append(StatusCodeMatcher(*spec.status_codes))
    if spec.patterns:
        matchers.append(
            RegexMatcher(
                *spec.patterns,
                flags=0 if spec.case_sensitive else re.IGNORECASE,
                absent_message_vote=spec.absent_message_vote,
            )
        )

    matcher = matchers[0] if len(matchers) == 1 else AllOf(*matchers)
    return ErrorRule(matcher, factory)
