"""Shared fixtures: isolated settings and quiet logging for every test."""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
import requests
import structlog

from rollbar_cli.config import get_settings
from rollbar_cli.logs import setup_logging

ResponseFactory = Callable[..., requests.Response]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """No ROLLBAR_* variables or stray .env leak into a test."""
    for name in list(os.environ):
        if name.startswith("ROLLBAR_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    setup_logging("WARNING")
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


def _make_response(
    status: int = 200, payload: Any = None, body: bytes | None = None
) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = body if body is not None else json.dumps(payload).encode()
    resp.encoding = "utf-8"
    return resp


@pytest.fixture
def make_response() -> ResponseFactory:
    """Build ``requests.Response`` objects without touching the network."""
    return _make_response
