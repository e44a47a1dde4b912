"""DTOs for the registration monitoring check."""

from dataclasses import dataclass
from datetime import datetime

from app.application.dtos.registration import RegistrationResult
from app.domain.enums import MonitoringStatus


@dataclass(frozen=True)
class RegistrationStats:
    """Counts gathered for one monitoring check."""

    checked_at: datetime
    recent: int
    total: int
    last_registration: RegistrationResult | None
    hours_since_last: int | None

    @property
    def needs_alert(self) -> bool:
        """True when nobody registered within the monitoring window."""
        return self.recent == 0


@dataclass(frozen=True)
class AlertMessage:
    """Rendered alert e-mail."""

    to: str
    subject: str
    html: str


@dataclass(frozen=True)
class MonitoringCheckResult:
    """Result of check-and-maybe-alert."""

    status: MonitoringStatus
    stats: RegistrationStats | None = None
    alert_sent: bool = False
    email_id: str | None = None
    error: str | None = None
    missing: tuple[str, ...] = ()
