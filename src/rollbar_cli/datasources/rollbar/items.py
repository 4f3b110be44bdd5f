"""Item (error group) endpoints."""

from __future__ import annotations

from urllib.parse import quote

from rollbar_cli.datasources.rollbar.client import RollbarClient, truncate
from rollbar_cli.schemas import Item, ItemRecord, ItemsResult

DEFAULT_STATUS = "active"


def fetch_items(
    client: RollbarClient,
    limit: int = 10,
    *,
    status: str = DEFAULT_STATUS,
    level: str = "",
    environment: str = "",
) -> list[Item]:
    """
    List recent items, optionally filtered.

    Args:
        client: Authenticated API client.
        limit: Keep only the first ``limit`` items returned.
        status: ``active``, ``resolved``, ``muted``; empty for any.
        level: ``critical``, ``error``, ``warning``, ...; empty for any.
        environment: Environment name; empty for any.

    Returns:
        Items in the order the API returned them.
    """
    filters = {"status": status, "level": level, "environment": environment}
    params = {key: value for key, value in filters.items() if value}

    result = client.get_result("/items", ItemsResult, params=params)
    return [record.to_item() for record in truncate(result.items, limit)]


def fetch_item(client: RollbarClient, item_id: str) -> Item:
    """Fetch a single item by ID."""
    record = client.get_result(f"/item/{quote(item_id, safe='')}", ItemRecord)
    return record.to_item()
