"""In-memory test doubles for the document store and external providers.

FakeFirestore implements the subset of the Firestore REST adapter that the
repositories use: document get/set/update/delete, chained where (AND),
order_by, limit, stream and count. SERVER_TIMESTAMP sentinels are replaced
with the fake clock and every write bumps the document's update time.
"""

from __future__ import annotations

import copy
import operator
from collections.abc import AsyncIterator, Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from app.application.dtos.admin import AdminUserResult, IdentityResult
from app.application.dtos.monitoring import AlertMessage
from app.application.services.content_defaults import default_content
from app.domain.exceptions import EmailDeliveryException, IdentityProviderError
from app.infrastructure.firebase._rest_client import DocumentNotFoundError, DocumentSnapshot
from app.infrastructure.firebase._rest_encoding import SERVER_TIMESTAMP
from app.infrastructure.firebase.collections import COLLECTION_ADMINS, COLLECTION_CONTENT

_OPS: dict[str, Callable[[Any, Any], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}


class StoreUnavailable(Exception):
    """Raised by FakeFirestore while offline."""


class FakeFirestore:
    """Dict-backed stand-in for FirestoreRESTClient."""

    def __init__(self, start: datetime | None = None) -> None:
        self.docs: dict[str, dict[str, dict[str, Any]]] = {}
        self.update_times: dict[tuple[str, str], datetime] = {}
        self.now = start or datetime(2025, 10, 1, 12, 0, tzinfo=UTC)
        self.offline = False
        self.fail_writes = False
        self.reads = 0
        self.writes = 0

    def tick(self, seconds: float = 1) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now

    def seed(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        """Write a document directly, bypassing fail flags and counters."""
        self.docs.setdefault(collection, {})[doc_id] = self._stamp(data)
        self._touch(collection, doc_id)

    def collection(self, name: str) -> "FakeCollection":
        return FakeCollection(self, name)

    def _check_read(self) -> None:
        self.reads += 1
        if self.offline:
            raise StoreUnavailable("store unreachable")

    def _check_write(self) -> None:
        if self.offline or self.fail_writes:
            raise StoreUnavailable("write rejected")
        self.writes += 1

    def _stamp(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: (self.now if v is SERVER_TIMESTAMP else copy.deepcopy(v)) for k, v in data.items()}

    def _touch(self, collection: str, doc_id: str) -> None:
        self.tick(0.001)
        self.update_times[(collection, doc_id)] = self.now


class FakeDocumentRef:
    def __init__(self, store: FakeFirestore, collection: str, doc_id: str) -> None:
        self._store = store
        self._collection = collection
        self.id = doc_id

    @property
    def _docs(self) -> dict[str, dict[str, Any]]:
        return self._store.docs.setdefault(self._collection, {})

    async def get(self) -> DocumentSnapshot | None:
        self._store._check_read()
        data = self._docs.get(self.id)
        if data is None:
            return None
        return DocumentSnapshot(
            self.id,
            copy.deepcopy(data),
            self._store.update_times.get((self._collection, self.id)),
        )

    async def set(self, data: dict[str, Any]) -> None:
        self._store._check_write()
        self._docs[self.id] = self._store._stamp(data)
        self._store._touch(self._collection, self.id)

    async def update(self, data: dict[str, Any]) -> None:
        self._store._check_write()
        if self.id not in self._docs:
            raise DocumentNotFoundError(f"{self._collection}/{self.id}")
        self._docs[self.id].update(self._store._stamp(data))
        self._store._touch(self._collection, self.id)

    async def delete(self) -> None:
        self._store._check_write()
        self._docs.pop(self.id, None)
        self._store.update_times.pop((self._collection, self.id), None)


class FakeQuery:
    def __init__(self, store: FakeFirestore, collection: str) -> None:
        self._store = store
        self._collection = collection
        self._filters: list[tuple[str, str, Any]] = []
        self._order: tuple[str, bool] | None = None
        self._limit: int | None = None

    def where(self, field: str, op: str, value: Any) -> "FakeQuery":
        self._filters.append((field, op, value))
        return self

    def order_by(self, field: str, direction: str = "ASCENDING") -> "FakeQuery":
        self._order = (field, direction.upper().startswith("DESC"))
        return self

    def limit(self, n: int) -> "FakeQuery":
        self._limit = n
        return self

    def _matches(self) -> list[tuple[str, dict[str, Any]]]:
        self._store._check_read()
        rows = [
            (doc_id, data)
            for doc_id, data in self._store.docs.get(self._collection, {}).items()
            if all(
                field in data and _OPS[op](data[field], value)
                for field, op, value in self._filters
            )
        ]
        if self._order is not None:
            field, descending = self._order
            rows = [r for r in rows if field in r[1]]
            rows.sort(key=lambda r: r[1][field], reverse=descending)
        if self._limit is not None:
            rows = rows[: self._limit]
        return rows

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        for doc_id, data in self._matches():
            yield DocumentSnapshot(doc_id, copy.deepcopy(data))

    async def count(self) -> int:
        return len(self._matches())


class FakeCollection:
    def __init__(self, store: FakeFirestore, name: str) -> None:
        self._store = store
        self._name = name

    def document(self, doc_id: str) -> FakeDocumentRef:
        return FakeDocumentRef(self._store, self._name, doc_id)

    def where(self, field: str, op: str, value: Any) -> FakeQuery:
        return FakeQuery(self._store, self._name).where(field, op, value)

    def order_by(self, field: str, direction: str = "ASCENDING") -> FakeQuery:
        return FakeQuery(self._store, self._name).order_by(field, direction)

    async def count(self) -> int:
        return await FakeQuery(self._store, self._name).count()

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        async for snapshot in FakeQuery(self._store, self._name).stream():
            yield snapshot


class FakeIdentityProvider:
    """Accounts keyed by e-mail; raises IdentityProviderError like the real provider."""

    def __init__(self) -> None:
        self.accounts: dict[str, tuple[str, str]] = {}
        self.reset_requests: list[str] = []
        self.fail_with: str | None = None

    def add_account(self, uid: str, email: str, password: str) -> None:
        self.accounts[email] = (uid, password)

    async def sign_in(self, email: str, password: str) -> IdentityResult:
        if self.fail_with:
            raise IdentityProviderError(self.fail_with)
        if email not in self.accounts:
            raise IdentityProviderError("EMAIL_NOT_FOUND")
        uid, expected = self.accounts[email]
        if password != expected:
            raise IdentityProviderError("INVALID_PASSWORD")
        return IdentityResult(uid=uid, email=email)

    async def sign_up(self, email: str, password: str) -> IdentityResult:
        if email in self.accounts:
            raise IdentityProviderError("EMAIL_EXISTS")
        if len(password) < 6:
            raise IdentityProviderError("WEAK_PASSWORD")
        uid = f"uid-{len(self.accounts) + 1}"
        self.accounts[email] = (uid, password)
        return IdentityResult(uid=uid, email=email)

    async def send_password_reset(self, email: str) -> None:
        if email not in self.accounts:
            raise IdentityProviderError("EMAIL_NOT_FOUND")
        self.reset_requests.append(email)


class FakeNotifier:
    """Records sent alerts; set fail=True to simulate a provider rejection."""

    def __init__(self) -> None:
        self.sent: list[AlertMessage] = []
        self.fail = False

    async def send(self, message: AlertMessage) -> str | None:
        if self.fail:
            raise EmailDeliveryException("HTTP 422: invalid recipient")
        self.sent.append(message)
        return f"email-{len(self.sent)}"


def seed_default_content(firestore: FakeFirestore) -> None:
    """Store the default festival content, as initialize_default_content would."""
    for content_id, document in default_content().items():
        data = document.model_dump(mode="json", by_alias=True, exclude={"updated_at"})
        firestore.seed(COLLECTION_CONTENT, content_id.value, data)


def seed_admin(
    firestore: FakeFirestore,
    identity: FakeIdentityProvider,
    uid: str = "uid-admin",
    email: str = "captain@example.com",
    password: str = "smooth-sailing",
) -> AdminUserResult:
    """Provider account plus allow-list record."""
    identity.add_account(uid, email, password)
    created = datetime(2025, 9, 1, tzinfo=UTC)
    firestore.seed(
        COLLECTION_ADMINS,
        uid,
        {
            "email": email,
            "name": "Captain Smooth",
            "role": "admin",
            "createdAt": created,
            "lastLogin": created,
        },
    )
    return AdminUserResult(
        id=uid,
        email=email,
        name="Captain Smooth",
        role="admin",
        created_at=created,
        last_login=created,
    )
