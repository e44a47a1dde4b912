"""Public registration API and admin registration management."""

from datetime import UTC, datetime

from httpx import AsyncClient

from app.infrastructure.firebase.collections import COLLECTION_REGISTRATIONS
from tests.fakes import FakeFirestore


async def test_register_created(client: AsyncClient, firestore: FakeFirestore) -> None:
    response = await client.post(
        "/api/v1/registrations",
        json={"name": "Kenny", "email": "kenny@example.com", "phone": "619"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "created"
    assert body["registration"]["name"] == "Kenny"


async def test_register_duplicate_returns_200(client: AsyncClient, firestore: FakeFirestore) -> None:
    payload = {"name": "Kenny", "email": "kenny@example.com"}
    await client.post("/api/v1/registrations", json=payload)
    response = await client.post("/api/v1/registrations", json=payload)
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "duplicate"
    assert body["message"] == "You're already registered! We'll notify you when tickets go on sale."
    assert body["registration"] is None
    assert len(firestore.docs[COLLECTION_REGISTRATIONS]) == 1


async def test_register_invalid_email(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/registrations", json={"name": "Kenny", "email": "kenny.example.com"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_register_without_store(unconfigured_client: AsyncClient) -> None:
    response = await unconfigured_client.post(
        "/api/v1/registrations", json={"name": "Kenny", "email": "kenny@example.com"}
    )
    assert response.status_code == 503
    assert response.json()["error"] == "SERVICE_NOT_CONFIGURED"


async def test_admin_routes_require_session(client: AsyncClient) -> None:
    response = await client.get("/api/v1/admin/registrations")
    assert response.status_code == 401


async def test_admin_list_edit_delete(
    client: AsyncClient, firestore: FakeFirestore, admin_headers: dict[str, str]
) -> None:
    created = await client.post(
        "/api/v1/admin/registrations",
        json={"name": "Kenny", "email": "kenny@example.com"},
        headers=admin_headers,
    )
    assert created.status_code == 201
    registration_id = created.json()["registration"]["id"]

    listing = await client.get("/api/v1/admin/registrations", headers=admin_headers)
    assert listing.json()["total"] == 1

    edited = await client.put(
        f"/api/v1/admin/registrations/{registration_id}",
        json={"name": "Kenny Loggins", "email": "kenny@example.com", "phone": "858"},
        headers=admin_headers,
    )
    assert edited.status_code == 200
    assert edited.json()["status"] == "updated"
    assert firestore.docs[COLLECTION_REGISTRATIONS][registration_id]["name"] == "Kenny Loggins"

    deleted = await client.delete(
        f"/api/v1/admin/registrations/{registration_id}", headers=admin_headers
    )
    assert deleted.status_code == 200
    assert firestore.docs[COLLECTION_REGISTRATIONS] == {}

    missing = await client.delete(
        f"/api/v1/admin/registrations/{registration_id}", headers=admin_headers
    )
    assert missing.status_code == 404


async def test_admin_export_csv(
    client: AsyncClient, firestore: FakeFirestore, admin_headers: dict[str, str]
) -> None:
    empty = await client.get("/api/v1/admin/registrations/export", headers=admin_headers)
    assert empty.status_code == 404

    firestore.seed(COLLECTION_REGISTRATIONS, "r1", {
        "name": "Kenny", "email": "kenny@example.com", "phone": "619",
        "timestamp": datetime(2025, 10, 11, 20, 15, tzinfo=UTC),
    })
    response = await client.get("/api/v1/admin/registrations/export", headers=admin_headers)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "attachment; filename=\"festival-registrations-" in response.headers["content-disposition"]
    assert response.text.splitlines()[1] == '"Kenny","kenny@example.com","619","10/11/2025, 1:15:00 PM"'
