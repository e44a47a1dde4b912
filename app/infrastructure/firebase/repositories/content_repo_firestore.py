"""Firestore-backed content document repository (implements IContentRepository)."""

from __future__ import annotations

from typing import Any

from app.application.dtos.content import ContentSnapshot
from app.domain.enums import ContentId
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase._rest_encoding import SERVER_TIMESTAMP
from app.infrastructure.firebase.collections import COLLECTION_CONTENT


class FirestoreContentRepository:
    """Six singleton documents in the content collection, keyed by ContentId."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_CONTENT)

    async def get(self, content_id: ContentId) -> ContentSnapshot | None:
        doc = await self._coll.document(content_id.value).get()
        if not doc:
            return None
        return ContentSnapshot(
            content_id=content_id,
            data=doc.to_dict(),
            update_time=doc.update_time,
        )

    async def merge(self, content_id: ContentId, data: dict[str, Any]) -> None:
        """Partial write; untouched fields keep their stored values."""
        await self._coll.document(content_id.value).update(
            {**data, "updatedAt": SERVER_TIMESTAMP}
        )

    async def replace(self, content_id: ContentId, data: dict[str, Any]) -> None:
        await self._coll.document(content_id.value).set(
            {**data, "id": content_id.value, "updatedAt": SERVER_TIMESTAMP}
        )
