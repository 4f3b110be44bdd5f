"""Tests for the occurrence endpoints."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from rollbar_cli.datasources.rollbar.client import RollbarClient
from rollbar_cli.datasources.rollbar.occurrences import (
    fetch_occurrence,
    fetch_occurrence_raw,
    fetch_occurrences,
)
from rollbar_cli.errors import APIErrorCode, DecodeError

SAMPLE_INSTANCE: dict = {
    "id": 987654321,
    "item_id": 272505123,
    "timestamp": 1700000000,
    "version": 2,
    "data": {
        "environment": "production",
        "level": "error",
        "body": {"message": {"body": "Payment declined"}},
    },
}


def _envelope(result: object, err: int = 0) -> bytes:
    return json.dumps({"err": err, "result": result}).encode()


@pytest.fixture
def client() -> RollbarClient:
    return RollbarClient("tok")


class TestFetchOccurrences:
    def test_truncates_and_keeps_order(self, client: RollbarClient) -> None:
        instances = [{"id": n, "item_id": "5", "timestamp": n} for n in range(30, 0, -1)]
        body = _envelope({"instances": instances})
        with patch.object(client, "get", return_value=body) as mock_get:
            occurrences = fetch_occurrences(client, "5", limit=3)
        mock_get.assert_called_once_with("/item/5/instances", None)
        assert [occ.id for occ in occurrences] == [30, 29, 28]

    def test_numeric_item_id_decoded_as_string(self, client: RollbarClient) -> None:
        with patch.object(client, "get", return_value=_envelope({"instances": [SAMPLE_INSTANCE]})):
            (occ,) = fetch_occurrences(client, "272505123")
        assert occ.item_id == "272505123"
        assert occ.timestamp == "2023-11-14 22:13:20"

    def test_error_code(self, client: RollbarClient) -> None:
        with (
            patch.object(client, "get", return_value=_envelope({}, err=3)),
            pytest.raises(APIErrorCode, match="error code 3"),
        ):
            fetch_occurrences(client, "5")


class TestFetchOccurrence:
    def test_fetches_payload(self, client: RollbarClient) -> None:
        with patch.object(client, "get", return_value=_envelope(SAMPLE_INSTANCE)) as mock_get:
            occ = fetch_occurrence(client, "987654321")
        mock_get.assert_called_once_with("/instance/987654321", None)
        assert occ.id == 987654321
        assert occ.data["body"]["message"]["body"] == "Payment declined"

    def test_data_not_a_mapping(self, client: RollbarClient) -> None:
        bad = {**SAMPLE_INSTANCE, "data": ["nope"]}
        with (
            patch.object(client, "get", return_value=_envelope(bad)),
            pytest.raises(DecodeError),
        ):
            fetch_occurrence(client, "1")

    def test_out_of_range_timestamp_is_a_decode_error(self, client: RollbarClient) -> None:
        bad = {**SAMPLE_INSTANCE, "timestamp": 10**15}
        with (
            patch.object(client, "get", return_value=_envelope(bad)),
            pytest.raises(DecodeError, match="out of range"),
        ):
            fetch_occurrence(client, "1")


class TestFetchOccurrenceRaw:
    def test_returns_whole_envelope(self, client: RollbarClient) -> None:
        raw = {"err": 0, "result": SAMPLE_INSTANCE, "extra": True}
        with patch.object(client, "get", return_value=json.dumps(raw).encode()) as mock_get:
            assert fetch_occurrence_raw(client, "987654321") == raw
        mock_get.assert_called_once_with("/instance/987654321", None)

    def test_error_code_still_surfaces(self, client: RollbarClient) -> None:
        with (
            patch.object(client, "get", return_value=_envelope({}, err=1)),
            pytest.raises(APIErrorCode),
        ):
            fetch_occurrence_raw(client, "1")

    def test_absent_keys_not_added(self, client: RollbarClient) -> None:
        raw = {"result": {"id": 1}}
        with patch.object(client, "get", return_value=json.dumps(raw).encode()):
            assert fetch_occurrence_raw(client, "1") == raw
