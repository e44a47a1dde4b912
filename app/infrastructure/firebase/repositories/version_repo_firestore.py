"""Firestore-backed version log (implements IVersionRepository)."""

from __future__ import annotations

from app.application.dtos.content import VersionRecordCreate, VersionRecordResult
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase.collections import COLLECTION_CONTENT_VERSIONS
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid


class FirestoreVersionRepository:
    """Append-only content_versions collection. Records are never updated or deleted here."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_CONTENT_VERSIONS)

    def _to_result(self, doc_id: str, data: dict) -> VersionRecordResult:
        return VersionRecordResult(
            id=doc_id,
            content_type=data.get("contentType", ""),
            content_id=data.get("contentId", ""),
            changed_by=data.get("changedBy", ""),
            changed_at=data.get("changedAt"),
            data=data.get("data") or {},
            change_note=data.get("changeNote"),
        )

    async def append(self, record: VersionRecordCreate) -> VersionRecordResult:
        version_id = generate_cuid()
        data = {
            "contentType": record.content_type.value,
            "contentId": record.content_id.value,
            "data": record.data,
            "changedBy": record.changed_by,
            "changedAt": utc_now(),
        }
        if record.change_note:
            data["changeNote"] = record.change_note
        await self._coll.document(version_id).set(data)
        return self._to_result(version_id, data)

    async def list_newest_first(self) -> list[VersionRecordResult]:
        q = self._coll.order_by("changedAt", "DESCENDING")
        return [self._to_result(s.id, s.to_dict()) async for s in q.stream()]
