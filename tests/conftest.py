"""Pytest configuration and fixtures for the festival CMS.

The app is built with create_app() and wired by build_services() over an
in-memory document store (tests/fakes.py); ASGITransport does not run the
lifespan, so no Firebase credentials or network access are needed.
"""

import httpx
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.application.dtos.admin import AdminUserResult
from app.core.config import get_settings
from app.core.lifespan import build_services
from app.core.limiter import limiter, reset_auth_rate_limits
from app.infrastructure.security.jwt import JWTTokenService
from app.main import create_app
from tests.fakes import (
    FakeFirestore,
    FakeIdentityProvider,
    FakeNotifier,
    seed_admin,
    seed_default_content,
)

TEST_SECRET_KEY = "test-secret-key-for-admin-sessions"

_INTEGRATION_ENV = (
    "FIREBASE_SERVICE_ACCOUNT_KEY",
    "FIREBASE_SERVICE_ACCOUNT_PATH",
    "FIREBASE_WEB_API_KEY",
    "CRON_SECRET",
    "RESEND_API_KEY",
    "NOTIFICATION_EMAIL",
    "CONTENT_CACHE_BACKEND",
)


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch: pytest.MonkeyPatch):
    """Known settings per test; rate-limit state is reset between tests."""
    for name in _INTEGRATION_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SECRET_KEY", TEST_SECRET_KEY)
    monkeypatch.setenv("LIVE_POLL_INTERVAL_SECONDS", "0.05")
    get_settings.cache_clear()
    reset_auth_rate_limits()
    limiter.reset()
    yield
    get_settings.cache_clear()


@pytest.fixture
def firestore() -> FakeFirestore:
    return FakeFirestore()


@pytest.fixture
def identity() -> FakeIdentityProvider:
    return FakeIdentityProvider()


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


def build_test_app(
    firestore: FakeFirestore | None,
    identity: FakeIdentityProvider | None,
    notifier: FakeNotifier,
) -> FastAPI:
    """create_app() plus services over the given doubles (None store = not configured)."""
    application = create_app()
    build_services(
        application.state,
        get_settings(),
        http_client=httpx.AsyncClient(),
        firestore=firestore,
    )
    application.state.identity_provider = identity
    application.state.notifier = notifier
    return application


@pytest.fixture
async def test_app(firestore, identity, notifier) -> FastAPI:
    application = build_test_app(firestore, identity, notifier)
    yield application
    if application.state.change_feed is not None:
        await application.state.change_feed.stop()
    await application.state.http_client.aclose()


@pytest.fixture
async def client(test_app: FastAPI) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def unconfigured_client(notifier) -> AsyncClient:
    """Client for an app with no Firestore and no authentication provider."""
    application = build_test_app(None, None, notifier)
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    await application.state.http_client.aclose()


@pytest.fixture
def seeded_content(firestore: FakeFirestore) -> FakeFirestore:
    seed_default_content(firestore)
    return firestore


@pytest.fixture
def admin(firestore: FakeFirestore, identity: FakeIdentityProvider) -> AdminUserResult:
    return seed_admin(firestore, identity)


@pytest.fixture
def admin_headers(admin: AdminUserResult) -> dict[str, str]:
    """Authorization header carrying a session token for the test admin."""
    token = JWTTokenService().issue(admin.id, {"email": admin.email})
    return {"Authorization": f"Bearer {token}"}
