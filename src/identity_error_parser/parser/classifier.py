"""错误解析器：按顺序匹配规则，将身份服务器响应归类为类型化错误。

Identity-server error parser.

Classifies a response (status code plus lazily read text) by asking the
rules of two ordered tiers in turn:

- ``ids``: session-layer errors (lockouts, credentials, token grants)
- ``api``: account API errors (validation, duplicates, invalid tokens)

The first rule whose matcher votes true builds the error; later rules
are never asked. The ids tier is consulted before the api tier, so a
response both could match is reported as a session-layer error. That
precedence is a catalog policy, not an accident of ordering.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from identity_error_parser.parser.body import BodySupplier, ResponseBody, as_body
from identity_error_parser.parser.catalog import default_api_rules, default_ids_rules
from identity_error_parser.telemetry import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from identity_error_parser.errors import IdentityError
    from identity_error_parser.parser.rules import ErrorRule

logger = get_logger(__name__)

BodyInput = ResponseBody | BodySupplier | str | None


class RuleTier(str, Enum):
    """Rule tiers, in precedence order."""

    IDS = "ids"
    API = "api"


def raise_if_present(error: IdentityError | None) -> None:
    """Raise ``error`` if there is one, otherwise do nothing."""
    if error is not None:
        raise error


class IdentityErrorParser:
    """Classifies identity-server error responses.

    The rule lists are plain lists: extend them while configuring, then
    treat them as read-only. Classification never mutates them and takes
    no locks, so one parser may serve many threads as long as nobody
    edits the lists concurrently. To specialise the parser, pass
    different rule lists rather than subclassing.

    Example:
        >>> parser = IdentityErrorParser()
        >>> error = parser.find_any_error(400, lambda: "User is locked out")
        >>> type(error).__name__
        'IdentityLockedAccountError'
    """

    def __init__(
        self,
        ids_rules: Iterable[ErrorRule] | None = None,
        api_rules: Iterable[ErrorRule] | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            ids_rules: Ordered session-layer rules (default: built-in catalog)
            api_rules: Ordered account API rules (default: built-in catalog)
        """
        self.ids_rules: list[ErrorRule] = (
            list(ids_rules) if ids_rules is not None else default_ids_rules()
        )
        self.api_rules: list[ErrorRule] = (
            list(api_rules) if api_rules is not None else default_api_rules()
        )

    @classmethod
    def from_catalog(cls, path: str | Path) -> IdentityErrorParser:
        """Create a parser from a YAML catalog file.

        Raises:
            ConfigurationError: If the catalog cannot be loaded
        """
        from identity_error_parser.config import load_catalog

        catalog = load_catalog(path)
        return cls(ids_rules=catalog.ids_rules, api_rules=catalog.api_rules)

    def rules(self, tier: RuleTier | str) -> list[ErrorRule]:
        """Get the rule list of a tier.

        Raises:
            ValueError: If ``tier`` does not name a tier
        """
        tier = RuleTier(tier)
        if tier is RuleTier.IDS:
            return self.ids_rules
        if tier is RuleTier.API:
            return self.api_rules
        raise ValueError(f"Unknown rule tier: {tier!r}")

    # ---- find ----------------------------------------------------------

    def find(
        self, tier: RuleTier | str, status_code: int, body: BodyInput
    ) -> IdentityError | None:
        """Find the error of the first rule in ``tier`` that matches.

        Args:
            tier: Tier to search, as a :class:`RuleTier` or its name
            status_code: HTTP status code
            body: Response text, a zero-argument supplier of it, or a
                :class:`ResponseBody`. A supplier runs at most once.

        Returns:
            The error built by the first matching rule, or None

        Raises:
            ValueError: If ``tier`` does not name a tier
        """
        return self._find_in(RuleTier(tier), status_code, as_body(body))

    def find_ids_error(self, status_code: int, body: BodyInput) -> IdentityError | None:
        """Find a session-layer error for the response."""
        return self.find(RuleTier.IDS, status_code, body)

    def find_api_error(self, status_code: int, body: BodyInput) -> IdentityError | None:
        """Find an account API error for the response."""
        return self.find(RuleTier.API, status_code, body)

    def find_any_error(self, status_code: int, body: BodyInput) -> IdentityError | None:
        """Find an error in the ids tier, falling back to the api tier.

        Both tiers share one :class:`ResponseBody`, so the response text
        is read at most once for the whole call.
        """
        response_body = as_body(body)
        error = self._find_in(RuleTier.IDS, status_code, response_body)
        if error is None:
            error = self._find_in(RuleTier.API, status_code, response_body)
        return error

    # ---- process -------------------------------------------------------

    def process_ids_error(self, status_code: int, body: BodyInput) -> None:
        """Raise the session-layer error for the response, if any."""
        raise_if_present(self.find_ids_error(status_code, body))

    def process_api_error(self, status_code: int, body: BodyInput) -> None:
        """Raise the account API error for the response, if any."""
        raise_if_present(self.find_api_error(status_code, body))

    def process_any_error(self, status_code: int, body: BodyInput) -> None:
        """Raise the first error found in either tier, if any."""
        raise_if_present(self.find_any_error(status_code, body))

    # ---- internals -----------------------------------------------------

    def _find_in(
        self, tier: RuleTier, status_code: int, body: ResponseBody
    ) -> IdentityError | None:
        # Matcher and factory exceptions propagate to the caller.
        for index, rule in enumerate(self.rules(tier)):
            if rule.matcher.matches(status_code, body):
                error = rule.factory(body.text, status_code)
                logger.debug(
                    "Identity error classified",
                    tier=tier.value,
                    rule_index=index,
                    kind=type(error).__name__,
                    status_code=status_code,
                )
                return error
        logger.debug("No identity error rule matched", tier=tier.value, status_code=status_code)
        return None

    def __repr__(self) -> str:
        return (
            f"IdentityErrorParser(ids_rules={len(self.ids_rules)}, "
            f"api_rules={len(self.api_rules)})"
        )
