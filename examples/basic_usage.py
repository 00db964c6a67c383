#!/usr/bin/env python3
"""
Basic usage example.

This example demonstrates how to:
- Classify identity-server responses with the built-in catalog
- Extend a tier with a custom rule
- Raise classified errors from an httpx client via an event hook

Usage:
    python examples/basic_usage.py
"""

import httpx

from identity_error_parser import IdentityError, IdentityErrorParser
from identity_error_parser.errors import IdentityParserApiError
from identity_error_parser.parser import ErrorRule
from identity_error_parser.transport import IdentityErrorHook


def classify_examples(parser: IdentityErrorParser) -> None:
    """Classify a few canned responses."""
    responses = [
        (400, '{"error":"invalid_grant","error_description":"Invalid code"}'),
        (422, "Password_Validation_Failed: too short"),
        (500, "Database connection refused"),
    ]
    for status, body in responses:
        error = parser.find_any_error(status, lambda body=body: body)
        if error is None:
            print(f"{status}: unclassified, use generic handling")
        else:
            print(f"{status}: {type(error).__name__} - {error.message}")
    print()


def custom_rule(parser: IdentityErrorParser) -> None:
    """Append a rule before the parser is used."""
    parser.api_rules.append(
        ErrorRule.regex(r".*Quota_Exceeded.*", factory=IdentityParserApiError)
    )
    error = parser.find_any_error(429, "Quota_Exceeded: 10 per hour")
    print(f"Custom rule: {type(error).__name__}")
    print()


def with_httpx(parser: IdentityErrorParser) -> None:
    """Raise classified errors from client calls."""

    def fake_server(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, text="User is locked out")

    client = httpx.Client(
        transport=httpx.MockTransport(fake_server),
        event_hooks={"response": [IdentityErrorHook(parser)]},
    )
    with client:
        try:
            client.post("https://ids.example.com/connect/token", data={"grant_type": "password"})
        except IdentityError as e:
            print(f"Login failed: {e}")
            print(f"Server said: {e.original_message}")


def main() -> None:
    parser = IdentityErrorParser()
    classify_examples(parser)
    custom_rule(parser)
    with_httpx(parser)


if __name__ == "__main__":
    main()
