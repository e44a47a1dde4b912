"""DTOs for attendee registrations."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import RegistrationStatus


@dataclass(frozen=True)
class RegistrationResult:
    """Registration read-model."""

    id: str
    name: str
    email: str
    phone: str
    timestamp: datetime | None


@dataclass(frozen=True)
class RegistrationOutcome:
    """Result of a gated write: created/updated with the record, or duplicate."""

    status: RegistrationStatus
    message: str
    registration: RegistrationResult | None = None

    @property
    def is_duplicate(self) -> bool:
        return self.status == RegistrationStatus.DUPLICATE
