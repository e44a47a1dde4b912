"""Unit tests for the Firestore REST adapter, against httpx.MockTransport."""

import json
from datetime import UTC, datetime
from unittest.mock import MagicMock

import httpx
import pytest

from app.infrastructure.firebase._rest_client import DocumentNotFoundError, FirestoreRESTClient
from app.infrastructure.firebase._rest_encoding import (
    SERVER_TIMESTAMP,
    decode_document,
    encode_document,
    parse_timestamp,
)

DOCS = "projects/festival/databases/(default)/documents"


class _Recorder:
    """MockTransport handler returning queued responses and recording requests."""

    def __init__(self, *responses: httpx.Response) -> None:
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responses.pop(0)

    def body(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)


def _client(recorder: _Recorder) -> FirestoreRESTClient:
    credentials = MagicMock(valid=True, token="access-token")
    http = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    return FirestoreRESTClient("festival", credentials, http_client=http)


def test_encode_decode_values() -> None:
    when = datetime(2025, 10, 11, 17, 0, tzinfo=UTC)
    data = {
        "title": "LINEUP",
        "enabled": True,
        "price": 75,
        "ratio": 1.5,
        "tags": ["a", "b"],
        "details": {"venue": "Liberty Station"},
        "at": when,
        "none": None,
    }
    fields = encode_document(data)["fields"]
    assert fields["price"] == {"integerValue": "75"}
    assert fields["at"] == {"timestampValue": "2025-10-11T17:00:00.000000Z"}
    assert decode_document(fields) == data


def test_parse_timestamp_nanoseconds() -> None:
    parsed = parse_timestamp("2025-10-01T12:00:00.123456789Z")
    assert parsed == datetime(2025, 10, 1, 12, 0, 0, 123456, tzinfo=UTC)
    assert parse_timestamp(None) is None


async def test_get_document_with_update_time() -> None:
    recorder = _Recorder(
        httpx.Response(
            200,
            json={
                "name": f"{DOCS}/content/home_page",
                "fields": {"headline": {"stringValue": "Ahoy"}},
                "updateTime": "2025-10-01T12:00:00.5Z",
            },
        )
    )
    snapshot = await _client(recorder).collection("content").document("home_page").get()
    assert snapshot.id == "home_page"
    assert snapshot.to_dict() == {"headline": "Ahoy"}
    assert snapshot.update_time == datetime(2025, 10, 1, 12, 0, 0, 500000, tzinfo=UTC)
    request = recorder.requests[0]
    assert request.headers["Authorization"] == "Bearer access-token"
    assert request.url.path.endswith("/documents/content/home_page")


async def test_get_missing_document_returns_none() -> None:
    recorder = _Recorder(httpx.Response(404, json={"error": {"code": 404}}))
    assert await _client(recorder).collection("content").document("x").get() is None


async def test_update_uses_mask_precondition_and_transform() -> None:
    """Merge write: only the given fields, document must exist, server time transform."""
    recorder = _Recorder(httpx.Response(200, json={"writeResults": [{}]}))
    await _client(recorder).collection("content").document("home_page").update(
        {"headline": "Set Sail", "updatedAt": SERVER_TIMESTAMP}
    )
    write = recorder.body()["writes"][0]
    assert recorder.requests[0].url.path.endswith("/documents:commit")
    assert write["updateMask"] == {"fieldPaths": ["headline"]}
    assert write["currentDocument"] == {"exists": True}
    assert write["update"]["fields"] == {"headline": {"stringValue": "Set Sail"}}
    assert write["updateTransforms"] == [
        {"fieldPath": "updatedAt", "setToServerValue": "REQUEST_TIME"}
    ]


async def test_update_missing_document_raises() -> None:
    recorder = _Recorder(httpx.Response(404, json={}))
    with pytest.raises(DocumentNotFoundError):
        await _client(recorder).collection("registrations").document("gone").update({"name": "x"})


async def test_server_error_propagates() -> None:
    recorder = _Recorder(httpx.Response(403, json={"error": {"status": "PERMISSION_DENIED"}}))
    with pytest.raises(httpx.HTTPStatusError):
        await _client(recorder).collection("content").document("home_page").set({"a": 1})


async def test_query_filters_order_and_limit() -> None:
    recorder = _Recorder(
        httpx.Response(
            200,
            json=[
                {"document": {"name": f"{DOCS}/registrations/r1", "fields": {"name": {"stringValue": "Kenny"}}}},
                {"readTime": "2025-10-01T12:00:00Z"},
            ],
        )
    )
    query = (
        _client(recorder)
        .collection("registrations")
        .where("name", "==", "Kenny")
        .where("email", "==", "kenny@example.com")
        .order_by("timestamp", "DESCENDING")
        .limit(1)
    )
    snapshots = [s async for s in query.stream()]
    assert [s.id for s in snapshots] == ["r1"]
    structured = recorder.body()["structuredQuery"]
    assert structured["from"] == [{"collectionId": "registrations"}]
    assert structured["where"]["compositeFilter"]["op"] == "AND"
    assert len(structured["where"]["compositeFilter"]["filters"]) == 2
    assert structured["orderBy"][0]["direction"] == "DESCENDING"
    assert structured["limit"] == 1
    assert set(structured) == {"from", "where", "orderBy", "limit"}
    assert recorder.requests[0].url.path.endswith("/documents:runQuery")


async def test_count_aggregation() -> None:
    recorder = _Recorder(
        httpx.Response(
            200,
            json=[{"result": {"aggregateFields": {"total": {"integerValue": "42"}}}}],
        )
    )
    since = datetime(2025, 10, 1, tzinfo=UTC)
    total = await _client(recorder).collection("registrations").where("timestamp", ">=", since).count()
    assert total == 42
    body = recorder.body()["structuredAggregationQuery"]
    assert body["aggregations"] == [{"alias": "total", "count": {}}]
    assert body["structuredQuery"]["where"]["fieldFilter"]["op"] == "GREATER_THAN_OR_EQUAL"
