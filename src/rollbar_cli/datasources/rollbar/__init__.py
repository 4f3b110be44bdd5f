"""Rollbar read API data source.

Public API:
  - client: RollbarClient (authenticated GET + envelope decoding)
  - items: fetch_items, fetch_item
  - occurrences: fetch_occurrences, fetch_occurrence, fetch_occurrence_raw
  - summary: summarize_occurrence (readable view of an occurrence payload)
  - payload: Node (safe traversal of free-form JSON)
"""

from rollbar_cli.datasources.rollbar.client import RollbarClient, decode_envelope
from rollbar_cli.datasources.rollbar.items import fetch_item, fetch_items
from rollbar_cli.datasources.rollbar.occurrences import (
    fetch_occurrence,
    fetch_occurrence_raw,
    fetch_occurrences,
)
from rollbar_cli.datasources.rollbar.payload import Node
from rollbar_cli.datasources.rollbar.summary import summarize_occurrence

__all__ = [
    "Node",
    "RollbarClient",
    "decode_envelope",
    "fetch_item",
    "fetch_items",
    "fetch_occurrence",
    "fetch_occurrence_raw",
    "fetch_occurrences",
    "summarize_occurrence",
]
