"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (Firestore client,
content cache, change feed, outbound HTTP client) into the application
services stored on app.state.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import httpx
from fastapi import FastAPI

from app.application.services.content_service import ContentService
from app.application.services.content_watcher import ContentChangeFeed
from app.application.services.registration_service import RegistrationService
from app.core.config import Settings, get_settings
from app.infrastructure.cache import ContentCacheFactory
from app.infrastructure.external.email import NotificationServiceFactory
from app.infrastructure.firebase import close_firebase, get_firestore_client, init_firebase
from app.infrastructure.firebase.identity_toolkit import FirebaseIdentityProvider
from app.infrastructure.firebase.repositories import (
    FirestoreAdminRepository,
    FirestoreContentRepository,
    FirestoreRegistrationRepository,
    FirestoreVersionRepository,
)
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


def build_services(
    state: Any,
    settings: Settings,
    *,
    http_client: httpx.AsyncClient,
    firestore: Any | None,
) -> None:
    """Construct repositories and services and attach them to app.state.

    firestore is the document store client, or None when not configured:
    repositories are then None, reads serve fallback content and writes
    raise ServiceNotConfiguredException.
    """
    state.settings = settings
    state.http_client = http_client

    content_repo = FirestoreContentRepository(firestore) if firestore is not None else None
    version_repo = FirestoreVersionRepository(firestore) if firestore is not None else None
    state.registration_repo = (
        FirestoreRegistrationRepository(firestore) if firestore is not None else None
    )
    state.admin_repo = FirestoreAdminRepository(firestore) if firestore is not None else None

    cache = ContentCacheFactory.create_content_cache(settings)
    state.content_cache = cache

    feed = (
        ContentChangeFeed(content_repo, settings.live_poll_interval_seconds)
        if content_repo is not None
        else None
    )
    state.change_feed = feed
    state.content_service = ContentService(
        content_repo,
        version_repo,
        cache,
        on_change=feed.notify if feed is not None else None,
    )
    state.registration_service = RegistrationService(
        state.registration_repo, timezone=settings.alert_timezone
    )

    web_api_key = (
        settings.firebase_web_api_key.get_secret_value()
        if settings.firebase_web_api_key
        else ""
    )
    state.identity_provider = (
        FirebaseIdentityProvider(web_api_key, http_client) if web_api_key else None
    )
    state.notifier = NotificationServiceFactory.create_notification_service(
        settings, http_client
    )


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, shared HTTP client, Firestore, services, cache
    connect (Redis only). Shutdown order: change feed, cache disconnect,
    Firestore close, shared HTTP client close.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    # Shared HTTP client for Firestore, Identity Toolkit and Resend (connection reuse).
    http_client = httpx.AsyncClient(timeout=30.0)
    init_firebase(http_client=http_client)
    build_services(
        app.state,
        settings,
        http_client=http_client,
        firestore=get_firestore_client(),
    )
    connect = getattr(app.state.content_cache, "connect", None)
    if connect is not None:
        await connect()
    logger.info(
        "%s %s started (firestore=%s, cache=%s)",
        settings.app_name,
        settings.app_version,
        app.state.content_service.store_configured,
        settings.content_cache_backend,
    )

    yield

    # ---- Shutdown ----
    if app.state.change_feed is not None:
        await app.state.change_feed.stop()

    disconnect = getattr(app.state.content_cache, "disconnect", None)
    if disconnect is not None:
        await disconnect()
        logger.info("Cache disconnected")

    await close_firebase()

    await http_client.aclose()
    app.state.http_client = None
    logger.info("Shared HTTP client closed")
