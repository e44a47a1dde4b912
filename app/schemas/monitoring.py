"""Monitoring API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.domain.enums import MonitoringStatus


class MonitoringCheckResponse(BaseModel):
    """Response of the hourly registration check."""

    status: MonitoringStatus
    recent: int | None = None
    total: int | None = None
    last_registration_at: datetime | None = None
    hours_since_last: int | None = None
    alert_sent: bool = False
    email_id: str | None = None
    error: str | None = None
    missing: list[str] = Field(default_factory=list)
    checked_at: datetime | None = None


class MonitoringStatusResponse(BaseModel):
    """Admin dry run: configuration per variable plus current statistics."""

    configured: dict[str, bool]
    recent: int | None = None
    total: int | None = None
    last_registration_at: datetime | None = None
    hours_since_last: int | None = None
    alert_would_trigger: bool | None = None
    checked_at: datetime | None = None
