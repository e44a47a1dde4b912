"""Auth API schemas."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from app.domain.enums import AdminRole


class LoginRequest(BaseModel):
    """Request body for admin sign-in."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class PasswordResetRequest(BaseModel):
    """Request body for POST /auth/reset-password."""

    email: EmailStr


class CreateAdminRequest(BaseModel):
    """Request body for creating an admin (setup or by an existing admin)."""

    email: EmailStr
    password: str = Field(..., min_length=6, description="Password (min 6 characters)")
    name: str = Field(..., min_length=1, max_length=200)
    role: AdminRole = AdminRole.ADMIN


class AdminResponse(BaseModel):
    """Admin allow-list entry."""

    id: str
    email: str
    name: str
    role: str
    created_at: datetime | None = None
    last_login: datetime | None = None


class TokenResponse(BaseModel):
    """JWT session for the admin API."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int
    admin: AdminResponse


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
