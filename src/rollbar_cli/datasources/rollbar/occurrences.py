"""Occurrence (instance) endpoints."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from rollbar_cli.datasources.rollbar.client import RollbarClient, truncate
from rollbar_cli.schemas import InstanceRecord, InstancesResult, Occurrence


def _instance_endpoint(occurrence_id: str) -> str:
    return f"/instance/{quote(occurrence_id, safe='')}"


def fetch_occurrences(client: RollbarClient, item_id: str, limit: int = 10) -> list[Occurrence]:
    """Occurrences of one item, first ``limit`` in API order (most recent first)."""
    endpoint = f"/item/{quote(item_id, safe='')}/instances"
    result = client.get_result(endpoint, InstancesResult)
    return [record.to_occurrence() for record in truncate(result.instances, limit)]


def fetch_occurrence(client: RollbarClient, occurrence_id: str) -> Occurrence:
    """Fetch a single occurrence, payload included."""
    record = client.get_result(_instance_endpoint(occurrence_id), InstanceRecord)
    return record.to_occurrence()


def fetch_occurrence_raw(client: RollbarClient, occurrence_id: str) -> dict[str, Any]:
    """The full response envelope for one occurrence, for verbose output."""
    envelope = client.get_envelope(_instance_endpoint(occurrence_id))
    received = envelope.model_fields_set | set(envelope.model_extra or {})
    return {key: value for key, value in envelope.model_dump().items() if key in received}
