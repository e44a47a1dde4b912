"""Setup API: first-run content initialization and admin creation."""

from httpx import AsyncClient

from app.application.dtos.admin import AdminUserResult
from app.infrastructure.firebase.collections import COLLECTION_ADMINS, COLLECTION_CONTENT
from tests.fakes import FakeFirestore


async def test_status_before_first_admin(client: AsyncClient) -> None:
    response = await client.get("/api/v1/setup/status")
    assert response.json() == {"firestore": True, "authentication": True, "has_admin": False}


async def test_status_unconfigured(unconfigured_client: AsyncClient) -> None:
    response = await unconfigured_client.get("/api/v1/setup/status")
    assert response.json() == {"firestore": False, "authentication": False, "has_admin": False}


async def test_first_run_is_open(client: AsyncClient, firestore: FakeFirestore) -> None:
    content = await client.post("/api/v1/setup/content")
    assert content.status_code == 200
    assert len(content.json()["initialized"]) == 6
    assert len(firestore.docs[COLLECTION_CONTENT]) == 6

    created = await client.post(
        "/api/v1/setup/admin",
        json={"email": "first@example.com", "password": "anchors-up", "name": "First Mate"},
    )
    assert created.status_code == 201
    body = created.json()
    assert body["role"] == "admin"
    assert firestore.docs[COLLECTION_ADMINS][body["id"]]["name"] == "First Mate"

    status = await client.get("/api/v1/setup/status")
    assert status.json()["has_admin"] is True


async def test_closed_once_admin_exists(
    client: AsyncClient, admin: AdminUserResult, admin_headers: dict[str, str]
) -> None:
    anonymous = await client.post("/api/v1/setup/content")
    assert anonymous.status_code == 401

    allowed = await client.post(
        "/api/v1/setup/admin",
        json={"email": "deckhand@example.com", "password": "anchors-up", "name": "Deckhand", "role": "editor"},
        headers=admin_headers,
    )
    assert allowed.status_code == 201
    assert allowed.json()["role"] == "editor"


async def test_duplicate_account_rejected(client: AsyncClient, admin: AdminUserResult, admin_headers) -> None:
    response = await client.post(
        "/api/v1/setup/admin",
        json={"email": admin.email, "password": "anchors-up", "name": "Again"},
        headers=admin_headers,
    )
    assert response.status_code == 401
    assert response.json()["message"] == "An account with this email already exists."
