"""
Error catalog models.

These Pydantic models describe the YAML file format used to supply
rule tiers as configuration:

    include_defaults: true
    ids:
      - error: IdentityLockedAccountError
        patterns: [".*Account temporarily blocked.*"]
    api:
      - error: IdentityProfileIsAlreadyExistsError
        status_codes: [409]
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class RuleSpec(BaseModel):
    """One rule of a catalog tier."""

    model_config = ConfigDict(extra="forbid")

    error: str = Field(description="Error class name, e.g. IdentityLockedAccountError")
    patterns: list[str] = Field(
        default_factory=list, description="Full-match patterns; any one may match"
    )
    status_codes: list[int] = Field(
        default_factory=list, description="Status codes the response must have"
    )
    case_sensitive: bool = Field(default=False, description="Match patterns case-sensitively")
    absent_message_vote: bool = Field(
        default=False, description="Vote returned when the response has no text"
    )

    @field_validator("patterns")
    @classmethod
    def _patterns_compile(cls, patterns: list[str]) -> list[str]:
        for pattern in patterns:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"invalid pattern {pattern!r}: {e}") from e
        return patterns

    @model_validator(mode="after")
    def _has_condition(self) -> RuleSpec:
        if not self.patterns and not self.status_codes:
            raise ValueError("a rule needs at least one pattern or status code")
        if self.absent_message_vote and not self.patterns:
            raise ValueError("absent_message_vote needs at least one pattern")
        return self


class CatalogSpec(BaseModel):
    """A complete catalog file."""

    model_config = ConfigDict(extra="forbid")

    version: str | None = Field(default=None, description="Free-form catalog version")
    include_defaults: bool = Field(
        default=False,
        description="Append the built-in rules after this file's rules in each tier",
    )
    ids: list[RuleSpec] = Field(default_factory=list, description="Session-layer rules")
    api: list[RuleSpec] = Field(default_factory=list, description="Account API rules")
