"""Pydantic request/response schemas for the API."""

from app.schemas.auth import (
    AdminResponse,
    CreateAdminRequest,
    LoginRequest,
    MessageResponse,
    PasswordResetRequest,
    TokenResponse,
)
from app.schemas.content import (
    ContentResponse,
    InitializeContentResponse,
    ItemMoveRequest,
    ItemReorderRequest,
    VersionRecordResponse,
)
from app.schemas.health import HealthResponse, ReadinessErrorResponse, ReadinessResponse
from app.schemas.monitoring import MonitoringCheckResponse, MonitoringStatusResponse
from app.schemas.registration import (
    RegistrationListResponse,
    RegistrationOutcomeResponse,
    RegistrationRequest,
    RegistrationResponse,
)

__all__ = [
    "AdminResponse",
    "ContentResponse",
    "CreateAdminRequest",
    "HealthResponse",
    "InitializeContentResponse",
    "ItemMoveRequest",
    "ItemReorderRequest",
    "LoginRequest",
    "MessageResponse",
    "MonitoringCheckResponse",
    "MonitoringStatusResponse",
    "PasswordResetRequest",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "RegistrationListResponse",
    "RegistrationOutcomeResponse",
    "RegistrationRequest",
    "RegistrationResponse",
    "TokenResponse",
    "VersionRecordResponse",
]
