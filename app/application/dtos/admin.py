"""DTOs for admin users and sessions."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AdminUserResult:
    """Admin allow-list entry. Role is stored but does not gate capabilities."""

    id: str
    email: str
    name: str
    role: str
    created_at: datetime | None = None
    last_login: datetime | None = None


@dataclass(frozen=True)
class IdentityResult:
    """Identity returned by the authentication provider after sign-in or sign-up."""

    uid: str
    email: str


@dataclass(frozen=True)
class AdminSession:
    """Signed-in admin plus the bearer token for the admin API."""

    admin: AdminUserResult
    access_token: str
    expires_in: int
