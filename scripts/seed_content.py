"""Write the default festival content to Firestore (all six documents).

Usage:
    python -m scripts.seed_content
Overwrites existing documents. No version records are written.
All imports use app.*.
"""

import asyncio
import sys

import httpx

from app.application.services.content_service import ContentService
from app.core.config import get_settings
from app.infrastructure.cache import MemoryContentCache
from app.infrastructure.firebase import close_firebase, get_firestore_client, init_firebase
from app.infrastructure.firebase.repositories import (
    FirestoreContentRepository,
    FirestoreVersionRepository,
)
from app.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Initialize default content; exit 1 when Firestore is not configured."""
    get_settings()
    setup_logging()
    async with httpx.AsyncClient(timeout=30.0) as http_client:
        if not init_firebase(http_client=http_client):
            print(
                "Firestore not configured: set FIREBASE_SERVICE_ACCOUNT_KEY or "
                "FIREBASE_SERVICE_ACCOUNT_PATH",
                file=sys.stderr,
            )
            sys.exit(1)
        db = get_firestore_client()
        service = ContentService(
            FirestoreContentRepository(db),
            FirestoreVersionRepository(db),
            MemoryContentCache(),
        )
        try:
            written = await service.initialize_default_content()
        finally:
            await close_firebase()
    print("Initialized: " + ", ".join(content_id.value for content_id in written))


if __name__ == "__main__":
    asyncio.run(main())
