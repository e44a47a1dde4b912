"""Unit tests for the identity provider and alert e-mail adapters (httpx.MockTransport)."""

import json

import httpx
import pytest

from app.application.dtos.monitoring import AlertMessage
from app.core.config import Settings
from app.domain.exceptions import EmailDeliveryException, IdentityProviderError
from app.infrastructure.external.email import (
    LogOnlyNotificationService,
    NotificationServiceFactory,
    ResendNotificationService,
)
from app.infrastructure.firebase.identity_toolkit import FirebaseIdentityProvider

ALERT = AlertMessage(to="ops@example.com", subject="No sign-ups", html="<p>quiet</p>")


def _http(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


async def test_identity_sign_in_posts_password_grant() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"localId": "uid-9", "email": "captain@example.com"})

    provider = FirebaseIdentityProvider("web-key", _http(handler))
    result = await provider.sign_in("captain@example.com", "pw")
    assert result.uid == "uid-9"
    assert seen[0].url.path == "/v1/accounts:signInWithPassword"
    assert seen[0].url.params["key"] == "web-key"
    assert json.loads(seen[0].content)["returnSecureToken"] is True


@pytest.mark.parametrize(
    ("message", "code"),
    [
        ("INVALID_PASSWORD", "INVALID_PASSWORD"),
        ("WEAK_PASSWORD : Password should be at least 6 characters", "WEAK_PASSWORD"),
    ],
)
async def test_identity_error_codes_are_extracted(message: str, code: str) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": {"code": 400, "message": message}})

    provider = FirebaseIdentityProvider("web-key", _http(handler))
    with pytest.raises(IdentityProviderError) as exc_info:
        await provider.sign_up("captain@example.com", "pw")
    assert exc_info.value.code == code


async def test_identity_network_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("offline", request=request)

    provider = FirebaseIdentityProvider("web-key", _http(handler))
    with pytest.raises(IdentityProviderError) as exc_info:
        await provider.send_password_reset("captain@example.com")
    assert exc_info.value.code == "NETWORK_REQUEST_FAILED"


async def test_resend_sends_and_returns_id() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": "email-123"})

    sender = ResendNotificationService("re_key", "Festival <alerts@example.com>", _http(handler))
    assert await sender.send(ALERT) == "email-123"
    body = json.loads(seen[0].content)
    assert body == {
        "from": "Festival <alerts@example.com>",
        "to": ["ops@example.com"],
        "subject": "No sign-ups",
        "html": "<p>quiet</p>",
    }
    assert seen[0].headers["Authorization"] == "Bearer re_key"


async def test_resend_rejection_raises_delivery_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, json={"message": "Invalid `to` field"})

    sender = ResendNotificationService("re_key", "alerts@example.com", _http(handler))
    with pytest.raises(EmailDeliveryException) as exc_info:
        await sender.send(ALERT)
    assert "HTTP 422" in exc_info.value.message


async def test_log_only_sender_returns_no_id() -> None:
    assert await LogOnlyNotificationService().send(ALERT) is None


def test_factory_picks_sender_from_settings() -> None:
    http = httpx.AsyncClient()
    configured = NotificationServiceFactory.create_notification_service(
        Settings(resend_api_key="re_key"), http
    )
    assert isinstance(configured, ResendNotificationService)
    fallback = NotificationServiceFactory.create_notification_service(Settings(), http)
    assert isinstance(fallback, LogOnlyNotificationService)
