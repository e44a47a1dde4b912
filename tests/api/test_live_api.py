"""Live document binding over WebSocket (starlette TestClient)."""

import time

import pytest
from starlette.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from app.infrastructure.firebase.collections import COLLECTION_CONTENT
from app.infrastructure.security.jwt import JWTTokenService
from tests.conftest import build_test_app
from tests.fakes import seed_admin, seed_default_content


@pytest.fixture
def live_setup(firestore, identity, notifier):
    application = build_test_app(firestore, identity, notifier)
    seed_default_content(firestore)
    admin = seed_admin(firestore, identity)
    token = JWTTokenService().issue(admin.id, {"email": admin.email})
    return TestClient(application), token


def test_binding_streams_changes(live_setup, firestore) -> None:
    client, token = live_setup
    with client.websocket_connect(f"/api/v1/live/tickets_page?token={token}") as ws:
        assert ws.receive_json()["state"] == "loading"
        ready = ws.receive_json()
        assert ready["state"] == "ready"
        assert ready["content_id"] == "tickets_page"
        assert ready["data"]["title"] == "GET YOUR TICKETS"
        assert ready["error"] is None

        time.sleep(0.2)
        updated = dict(firestore.docs[COLLECTION_CONTENT]["tickets_page"])
        updated["title"] = "LAST CALL"
        firestore.seed(COLLECTION_CONTENT, "tickets_page", updated)

        pushed = ws.receive_json()
        assert pushed["state"] == "ready"
        assert pushed["data"]["title"] == "LAST CALL"


@pytest.mark.parametrize(
    "path",
    [
        "/api/v1/live/not_a_document?token=x",
        "/api/v1/live/home_page",
        "/api/v1/live/home_page?token=forged",
    ],
)
def test_rejected_connections_close_with_policy_violation(live_setup, path: str) -> None:
    client, _ = live_setup
    with client.websocket_connect(path) as ws:
        with pytest.raises(WebSocketDisconnect) as exc_info:
            ws.receive_json()
    assert exc_info.value.code == 1008


def test_unconfigured_store_closes_with_internal_error(identity, notifier) -> None:
    client = TestClient(build_test_app(None, identity, notifier))
    with client.websocket_connect("/api/v1/live/home_page?token=x") as ws:
        with pytest.raises(WebSocketDisconnect) as exc_info:
            ws.receive_json()
    assert exc_info.value.code == 1011
