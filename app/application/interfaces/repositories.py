"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

from app.domain.enums import ContentId

if TYPE_CHECKING:
    from app.application.dtos.admin import AdminUserResult
    from app.application.dtos.content import (
        ContentSnapshot,
        VersionRecordCreate,
        VersionRecordResult,
    )
    from app.application.dtos.registration import RegistrationResult


# Content document repository interface
class IContentRepository(Protocol):
    """Protocol for the six singleton content documents."""

    async def get(self, content_id: ContentId) -> ContentSnapshot | None:
        """Return the stored document, or None if it does not exist."""

    async def merge(self, content_id: ContentId, data: dict[str, Any]) -> None:
        """Merge top-level fields into the existing document and stamp updatedAt with server time.

        Raises if the document does not exist or the write fails.
        """

    async def replace(self, content_id: ContentId, data: dict[str, Any]) -> None:
        """Create or fully overwrite the document and stamp updatedAt with server time."""


# Version log interface
class IVersionRepository(Protocol):
    """Protocol for the append-only content version log."""

    async def append(self, record: VersionRecordCreate) -> VersionRecordResult:
        """Insert a version record (no dedup, no validation of data)."""

    async def list_newest_first(self) -> list[VersionRecordResult]:
        """Return every version record across all documents, newest first."""


# Registration repository interface
class IRegistrationRepository(Protocol):
    """Protocol for attendee registrations."""

    async def create(self, name: str, email: str, phone: str) -> RegistrationResult:
        """Insert a registration stamped with the current time."""

    async def update(
        self, registration_id: str, name: str, email: str, phone: str
    ) -> RegistrationResult | None:
        """Overwrite identity fields; None if the registration does not exist."""

    async def delete(self, registration_id: str) -> bool:
        """Delete a registration; False if it did not exist."""

    async def get_by_id(self, registration_id: str) -> RegistrationResult | None:
        """Return a registration by id."""

    async def list_newest_first(self) -> list[RegistrationResult]:
        """Return all registrations, newest first."""

    async def find_ids(self, name: str, field: str, value: str) -> list[str]:
        """Return ids of registrations whose name and the given field both match exactly."""

    async def count_since(self, since: datetime) -> int:
        """Count registrations with timestamp >= since."""

    async def count_all(self) -> int:
        """Count all registrations."""

    async def latest(self) -> RegistrationResult | None:
        """Return the most recent registration, if any."""


# Admin allow-list interface
class IAdminRepository(Protocol):
    """Protocol for the admin allow-list (admins/{uid})."""

    async def get_by_id(self, uid: str) -> AdminUserResult | None:
        """Return the admin record for an authenticated identity."""

    async def create(self, uid: str, email: str, name: str, role: str) -> AdminUserResult:
        """Create (or overwrite) an admin record."""

    async def touch_last_login(self, uid: str) -> None:
        """Stamp lastLogin with server time."""

    async def any_exists(self) -> bool:
        """True once at least one admin has been created."""
