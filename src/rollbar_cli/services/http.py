"""
Shared HTTP session factory.

Provides a pre-configured ``requests.Session`` with a default timeout and a
User-Agent. Rollbar reads are single-shot: the adapter is mounted with a
zero-retry strategy so a failure surfaces on the first attempt.

Usage::

    from rollbar_cli.services.http import create_session

    s = create_session(timeout=10)
    resp = s.get("https://api.rollbar.com/api/1/items")
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from rollbar_cli import __version__

#: No retries, no backoff. Status codes are left for the caller to inspect.
NO_RETRY = Retry(total=0, connect=0, read=0, redirect=0, raise_on_status=False)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"rollbar-cli/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    headers: dict[str, str] | None = None,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``NO_RETRY``).
        timeout: Default timeout applied to every request.
        headers: Extra headers sent with every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or NO_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT
    s.headers["Accept"] = "application/json"
    if headers:
        s.headers.update(headers)

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s
