"""Firestore-backed admin allow-list (implements IAdminRepository)."""

from __future__ import annotations

from app.application.dtos.admin import AdminUserResult
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase._rest_encoding import SERVER_TIMESTAMP
from app.infrastructure.firebase.collections import COLLECTION_ADMINS
from app.shared.utils.datetime import utc_now


class FirestoreAdminRepository:
    """admins/{uid}: presence of the document is the authorization check."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_ADMINS)

    def _to_result(self, doc_id: str, data: dict) -> AdminUserResult:
        return AdminUserResult(
            id=doc_id,
            email=data.get("email", ""),
            name=data.get("name", ""),
            role=data.get("role", "admin"),
            created_at=data.get("createdAt"),
            last_login=data.get("lastLogin"),
        )

    async def get_by_id(self, uid: str) -> AdminUserResult | None:
        doc = await self._coll.document(uid).get()
        if not doc:
            return None
        return self._to_result(doc.id, doc.to_dict())

    async def create(self, uid: str, email: str, name: str, role: str) -> AdminUserResult:
        now = utc_now()
        data = {
            "email": email,
            "name": name,
            "role": role,
            "createdAt": now,
            "lastLogin": now,
        }
        await self._coll.document(uid).set(data)
        return self._to_result(uid, data)

    async def touch_last_login(self, uid: str) -> None:
        await self._coll.document(uid).update({"lastLogin": SERVER_TIMESTAMP})

    async def any_exists(self) -> bool:
        return await self._coll.count() > 0
