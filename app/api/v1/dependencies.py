"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the application services built at startup
(app.state, see app.core.lifespan.build_services). Routes depend only on
these dependencies, not on infrastructure directly. HTTPConnection is used
instead of Request so the same dependencies serve WebSocket routes.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.requests import HTTPConnection

from app.application.dtos.admin import AdminUserResult
from app.application.services.auth_service import AuthService
from app.application.services.content_service import ContentService
from app.application.services.content_watcher import ContentChangeFeed
from app.application.services.registration_monitor import RegistrationMonitor
from app.application.services.registration_service import RegistrationService
from app.core.config import Settings, get_settings
from app.domain.exceptions import ServiceNotConfiguredException
from app.infrastructure.security.jwt import JWTTokenService


def get_content_service(conn: HTTPConnection) -> ContentService:
    """Content accessors and writers (built at startup)."""
    return conn.app.state.content_service


def get_registration_service(conn: HTTPConnection) -> RegistrationService:
    return conn.app.state.registration_service


def get_change_feed(conn: HTTPConnection) -> ContentChangeFeed:
    """In-process change feed; 503 when Firestore is not configured."""
    feed = conn.app.state.change_feed
    if feed is None:
        raise ServiceNotConfiguredException("Firestore")
    return feed


def get_auth_service(conn: HTTPConnection) -> AuthService:
    """Auth service over Firebase Authentication and the admin allow-list.

    Raises ServiceNotConfiguredException (503) when either is missing.
    """
    state = conn.app.state
    if state.admin_repo is None:
        raise ServiceNotConfiguredException(
            "Firestore", "set FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_SERVICE_ACCOUNT_PATH"
        )
    if state.identity_provider is None:
        raise ServiceNotConfiguredException("Firebase Authentication", "set FIREBASE_WEB_API_KEY")
    return AuthService(
        state.identity_provider,
        state.admin_repo,
        JWTTokenService(),
        cache=state.content_cache,
    )


def get_registration_monitor(
    conn: HTTPConnection,
    settings: Annotated[Settings, Depends(get_settings)],
) -> RegistrationMonitor | None:
    """Monitor over the registration store; None when Firestore is not configured."""
    state = conn.app.state
    if state.registration_repo is None:
        return None
    return RegistrationMonitor(
        state.registration_repo,
        state.notifier,
        recipient=settings.notification_email or "",
        timezone=settings.alert_timezone,
        dashboard_url=settings.registrations_dashboard_url,
    )


_http_bearer = HTTPBearer(auto_error=False)


async def get_current_admin(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> AdminUserResult:
    """Admin from the bearer JWT; 401 without a token, 403 when not on the allow-list."""
    if credentials is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return await auth_service.authenticate_token(credentials.credentials)


async def get_setup_admin(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> AdminUserResult | None:
    """Setup gate: open until the first admin exists, then requires an admin session.

    Returns None while bootstrapping.
    """
    if not await auth_service.has_admin():
        return None
    if credentials is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return await auth_service.authenticate_token(credentials.credentials)


CurrentAdmin = Annotated[AdminUserResult, Depends(get_current_admin)]
ContentServiceDep = Annotated[ContentService, Depends(get_content_service)]
RegistrationServiceDep = Annotated[RegistrationService, Depends(get_registration_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
