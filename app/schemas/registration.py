"""Registration API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.domain.enums import RegistrationStatus


class RegistrationRequest(BaseModel):
    """Public sign-up form and admin add/edit body.

    E-mail format is checked by the dedup gate so the form gets the same
    message as every other caller.
    """

    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=3, max_length=320)
    phone: str = Field(default="", max_length=40)


class RegistrationResponse(BaseModel):
    """Stored registration."""

    id: str
    name: str
    email: str
    phone: str
    timestamp: datetime | None = None


class RegistrationOutcomeResponse(BaseModel):
    """Result of a gated write: created/updated, or duplicate (not an error)."""

    status: RegistrationStatus
    message: str
    registration: RegistrationResponse | None = None


class RegistrationListResponse(BaseModel):
    """Admin list, newest first."""

    items: list[RegistrationResponse]
    total: int
