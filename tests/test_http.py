"""Tests for the shared HTTP session factory."""

from __future__ import annotations

from unittest.mock import patch

import requests
from urllib3.util.retry import Retry

from rollbar_cli.services.http import DEFAULT_TIMEOUT, NO_RETRY, create_session


class TestNoRetry:
    """Rollbar reads are single-shot."""

    def test_total_retries(self) -> None:
        assert NO_RETRY.total == 0

    def test_no_connect_or_read_retries(self) -> None:
        assert NO_RETRY.connect == 0
        assert NO_RETRY.read == 0

    def test_status_left_to_caller(self) -> None:
        assert NO_RETRY.raise_on_status is False


class TestCreateSession:
    """Verify session factory."""

    def test_returns_session(self) -> None:
        s = create_session()
        assert isinstance(s, requests.Session)

    def test_mounts_https_adapter(self) -> None:
        s = create_session()
        adapter = s.get_adapter("https://example.com")
        assert isinstance(adapter, requests.adapters.HTTPAdapter)

    def test_adapter_has_no_retry(self) -> None:
        s = create_session()
        adapter = s.get_adapter("https://example.com")
        assert adapter.max_retries.total == 0

    def test_custom_retry(self) -> None:
        custom = Retry(total=2, backoff_factor=1)
        s = create_session(retry=custom)
        adapter = s.get_adapter("https://example.com")
        assert adapter.max_retries.total == 2

    def test_user_agent_header(self) -> None:
        s = create_session()
        assert s.headers["User-Agent"].startswith("rollbar-cli/")

    def test_extra_headers(self) -> None:
        s = create_session(headers={"X-Rollbar-Access-Token": "abc"})
        assert s.headers["X-Rollbar-Access-Token"] == "abc"

    def test_default_timeout_injected(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_explicit_timeout_not_overridden(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep, timeout=99)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 99

    def test_default_timeout(self) -> None:
        assert DEFAULT_TIMEOUT == 30
