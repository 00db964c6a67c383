"""
Configuration: rule tiers loaded from YAML catalog files.
"""

from identity_error_parser.config.loader import (
    Catalog,
    build_catalog,
    build_rule,
    load_catalog,
    parse_catalog,
)
from identity_error_parser.config.models import CatalogSpec, RuleSpec

__all__ = [
    "Catalog",
    "CatalogSpec",
    "RuleSpec",
    "build_catalog",
    "build_rule",
    "load_catalog",
    "parse_catalog",
]
