"""Rollbar read API client: authenticated GETs and envelope decoding.

API docs: https://docs.rollbar.com/reference

Every response is an envelope ``{"err": 0, "result": {...}}``. A non-zero
``err`` is an application failure even when the HTTP status is 200.
"""

from __future__ import annotations

import time
from typing import Any, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from rollbar_cli.config import DEFAULT_API_BASE, DEFAULT_TIMEOUT, Settings
from rollbar_cli.errors import APIError, APIErrorCode, ConfigError, DecodeError, TransportError
from rollbar_cli.logs import get_logger
from rollbar_cli.schemas import Envelope
from rollbar_cli.services.http import create_session

ACCESS_TOKEN_HEADER = "X-Rollbar-Access-Token"
TOKEN_ENV_VAR = "ROLLBAR_READ_TOKEN"

ModelT = TypeVar("ModelT", bound=BaseModel)

log = get_logger("rollbar.client")


class RollbarClient:
    """Thin wrapper around a ``requests.Session`` bound to one access token."""

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        if not token:
            raise ConfigError(f"{TOKEN_ENV_VAR} environment variable is not set")
        self.base_url = base_url.rstrip("/")
        if session is None:
            session = create_session(timeout=timeout, headers={ACCESS_TOKEN_HEADER: token})
        else:
            session.headers[ACCESS_TOKEN_HEADER] = token
        self.session = session

    @classmethod
    def from_settings(cls, settings: Settings) -> RollbarClient:
        return cls(settings.read_token, base_url=settings.api_base, timeout=settings.timeout)

    def get(self, endpoint: str, params: dict[str, str] | None = None) -> bytes:
        """
        Issue one GET and return the raw body.

        Raises:
            TransportError: No response (DNS, connection refused, timeout).
            APIError: Response status outside 2xx.
        """
        url = self.base_url + endpoint
        started = time.monotonic()
        try:
            resp = self.session.get(url, params=params or None)
        except requests.RequestException as exc:
            log.debug("request failed", endpoint=endpoint, error=str(exc))
            raise TransportError(f"request to {endpoint} failed: {exc}") from exc

        log.debug(
            "request",
            endpoint=endpoint,
            params=params,
            status=resp.status_code,
            elapsed_ms=round((time.monotonic() - started) * 1000),
        )
        if not 200 <= resp.status_code < 300:
            raise APIError(resp.status_code, resp.text)
        return resp.content

    def get_envelope(self, endpoint: str, params: dict[str, str] | None = None) -> Envelope:
        """GET ``endpoint`` and decode its envelope, failing on a non-zero ``err``."""
        return decode_envelope(self.get(endpoint, params))

    def get_result(
        self, endpoint: str, model: type[ModelT], params: dict[str, str] | None = None
    ) -> ModelT:
        """GET ``endpoint`` and validate its ``result`` into ``model``."""
        envelope = self.get_envelope(endpoint, params)
        try:
            return model.model_validate(envelope.result)
        except ValidationError as exc:
            raise DecodeError(f"unexpected result from {endpoint}: {exc}") from exc


def decode_envelope(body: bytes) -> Envelope:
    """
    Parse a response body into an ``Envelope``.

    Raises:
        DecodeError: Body is not a JSON object of the envelope shape.
        APIErrorCode: Envelope ``err`` is non-zero.
    """
    try:
        envelope = Envelope.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(f"malformed API response: {exc}") from exc
    if envelope.err != 0:
        raise APIErrorCode(envelope.err, envelope.message)
    return envelope


def truncate(records: list[Any], limit: int) -> list[Any]:
    """First ``limit`` records in the order received. The API has no page size."""
    return records[: max(limit, 0)]
