"""DTOs for content documents and version records (no dependency on Firestore)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.domain.enums import ContentId, ContentType


@dataclass(frozen=True)
class ContentSnapshot:
    """Raw stored content document plus the store's last-modified time."""

    content_id: ContentId
    data: dict[str, Any]
    update_time: datetime | None = None


@dataclass(frozen=True)
class VersionRecordCreate:
    """Version record to append after a successful content write."""

    content_type: ContentType
    content_id: ContentId
    data: dict[str, Any]
    changed_by: str
    change_note: str | None = None


@dataclass(frozen=True)
class VersionRecordResult:
    """Stored version record (immutable audit entry)."""

    id: str
    content_type: str
    content_id: str
    changed_by: str
    changed_at: datetime | None
    data: dict[str, Any] = field(default_factory=dict)
    change_note: str | None = None
