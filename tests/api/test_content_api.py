"""Public content read API."""

from httpx import AsyncClient

from tests.fakes import FakeFirestore


async def test_get_content_from_store(client: AsyncClient, seeded_content: FakeFirestore) -> None:
    response = await client.get("/api/v1/content/lineup_page")
    assert response.status_code == 200
    body = response.json()
    assert body["source"] == "store"
    assert body["data"]["title"] == "2025 LINEUP"
    assert [a["order"] for a in body["data"]["artists"]] == [1, 2, 3, 4, 5]


async def test_get_content_fallback(unconfigured_client: AsyncClient) -> None:
    response = await unconfigured_client.get("/api/v1/content/home_page")
    assert response.status_code == 200
    body = response.json()
    assert body["source"] == "fallback"
    assert body["data"]["formLabels"]["email"] == "Email"


async def test_list_all_content(client: AsyncClient, seeded_content: FakeFirestore) -> None:
    response = await client.get("/api/v1/content")
    assert [d["content_id"] for d in response.json()] == [
        "site_metadata",
        "home_page",
        "lineup_page",
        "schedule_page",
        "tickets_page",
        "navigation",
    ]


async def test_unknown_content_id(client: AsyncClient) -> None:
    response = await client.get("/api/v1/content/about_page")
    assert response.status_code == 422
