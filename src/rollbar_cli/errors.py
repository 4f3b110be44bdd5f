"""
Exception taxonomy for rollbar-cli.

Every failure a command can hit is a ``RollbarCLIError``. The CLI catches
the base class, prints the message to stderr and exits with status 1.
Nothing is retried.
"""

from __future__ import annotations

import json
from typing import Any


class RollbarCLIError(Exception):
    """Base class for all rollbar-cli failures."""


class ConfigError(RollbarCLIError):
    """Missing or invalid configuration (e.g. no access token)."""


class TransportError(RollbarCLIError):
    """The request never produced an HTTP response (DNS, connection, timeout)."""


class APIError(RollbarCLIError):
    """The API answered with a non-2xx HTTP status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error: {status_code} - {body}")


class APIErrorCode(RollbarCLIError):
    """The response envelope carried a non-zero ``err`` code."""

    def __init__(self, code: int, api_message: Any = None) -> None:
        self.code = code
        self.api_message = api_message
        message = f"API returned error code {code}"
        if api_message not in (None, ""):
            detail = (
                api_message
                if isinstance(api_message, str)
                else json.dumps(api_message, ensure_ascii=False)
            )
            message = f"{message}: {detail}"
        super().__init__(message)


class DecodeError(RollbarCLIError):
    """The response body is not the JSON envelope we expect."""
