"""Application DTOs (no storage dependency)."""

from app.application.dtos.admin import AdminSession, AdminUserResult, IdentityResult
from app.application.dtos.content import (
    ContentSnapshot,
    VersionRecordCreate,
    VersionRecordResult,
)
from app.application.dtos.monitoring import (
    AlertMessage,
    MonitoringCheckResult,
    RegistrationStats,
)
from app.application.dtos.registration import RegistrationOutcome, RegistrationResult

__all__ = [
    "AdminSession",
    "AdminUserResult",
    "AlertMessage",
    "ContentSnapshot",
    "IdentityResult",
    "MonitoringCheckResult",
    "RegistrationOutcome",
    "RegistrationResult",
    "RegistrationStats",
    "VersionRecordCreate",
    "VersionRecordResult",
]
