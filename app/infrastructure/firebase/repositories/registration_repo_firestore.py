"""Firestore-backed registration repository (implements IRegistrationRepository)."""

from __future__ import annotations

from datetime import datetime

from app.application.dtos.registration import RegistrationResult
from app.infrastructure.firebase._rest_client import (
    DocumentNotFoundError,
    FirestoreRESTClient,
)
from app.infrastructure.firebase.collections import COLLECTION_REGISTRATIONS
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid


class FirestoreRegistrationRepository:
    """Registrations collection. Uniqueness is checked by the service, not enforced here."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_REGISTRATIONS)

    def _to_result(self, doc_id: str, data: dict) -> RegistrationResult:
        return RegistrationResult(
            id=doc_id,
            name=data.get("name", ""),
            email=data.get("email", ""),
            phone=data.get("phone", "") or "",
            timestamp=data.get("timestamp"),
        )

    async def create(self, name: str, email: str, phone: str) -> RegistrationResult:
        registration_id = generate_cuid()
        data = {"name": name, "email": email, "phone": phone, "timestamp": utc_now()}
        await self._coll.document(registration_id).set(data)
        return self._to_result(registration_id, data)

    async def update(
        self, registration_id: str, name: str, email: str, phone: str
    ) -> RegistrationResult | None:
        """Update identity fields; timestamp keeps the original signup time."""
        try:
            await self._coll.document(registration_id).update(
                {"name": name, "email": email, "phone": phone}
            )
        except DocumentNotFoundError:
            return None
        return await self.get_by_id(registration_id)

    async def delete(self, registration_id: str) -> bool:
        ref = self._coll.document(registration_id)
        if await ref.get() is None:
            return False
        await ref.delete()
        return True

    async def get_by_id(self, registration_id: str) -> RegistrationResult | None:
        doc = await self._coll.document(registration_id).get()
        if not doc:
            return None
        return self._to_result(doc.id, doc.to_dict())

    async def list_newest_first(self) -> list[RegistrationResult]:
        q = self._coll.order_by("timestamp", "DESCENDING")
        return [self._to_result(s.id, s.to_dict()) async for s in q.stream()]

    async def find_ids(self, name: str, field: str, value: str) -> list[str]:
        q = self._coll.where("name", "==", name).where(field, "==", value)
        return [s.id async for s in q.stream()]

    async def count_since(self, since: datetime) -> int:
        return await self._coll.where("timestamp", ">=", since).count()

    async def count_all(self) -> int:
        return await self._coll.count()

    async def latest(self) -> RegistrationResult | None:
        q = self._coll.order_by("timestamp", "DESCENDING").limit(1)
        async for snapshot in q.stream():
            return self._to_result(snapshot.id, snapshot.to_dict())
        return None
