"""Auth API: admin sign-in, sign-out, password reset and current admin.

Uses only injected dependencies (get_auth_service, get_current_admin).
Provider error codes are translated by AuthService; routes never see them.
"""

from fastapi import APIRouter, Request

from app.api.v1.dependencies import AuthServiceDep, CurrentAdmin
from app.application.dtos.admin import AdminUserResult
from app.core.limiter import check_auth_rate_per_email, limit_auth, limit_password_reset
from app.schemas.auth import (
    AdminResponse,
    LoginRequest,
    MessageResponse,
    PasswordResetRequest,
    TokenResponse,
)

router = APIRouter()


def to_admin_response(admin: AdminUserResult) -> AdminResponse:
    return AdminResponse(
        id=admin.id,
        email=admin.email,
        name=admin.name,
        role=admin.role,
        created_at=admin.created_at,
        last_login=admin.last_login,
    )


@router.post("/login", response_model=TokenResponse)
@limit_auth
async def login(
    request: Request,
    body: LoginRequest,
    auth_service: AuthServiceDep,
):
    """Sign in with e-mail and password; return a JWT for the admin API.

    401 with a readable message on bad credentials; 403 when the account
    is not on the admin allow-list.
    """
    check_auth_rate_per_email(body.email)
    session = await auth_service.sign_in(body.email, body.password)
    return TokenResponse(
        access_token=session.access_token,
        expires_in=session.expires_in,
        admin=to_admin_response(session.admin),
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(current_admin: CurrentAdmin, auth_service: AuthServiceDep):
    """Sign out: clears the content cache. The client discards its token."""
    await auth_service.sign_out(current_admin)
    return MessageResponse(message="Signed out")


@router.post("/reset-password", response_model=MessageResponse)
@limit_password_reset
async def reset_password(
    request: Request,
    body: PasswordResetRequest,
    auth_service: AuthServiceDep,
):
    """Send a password reset e-mail through the authentication provider."""
    await auth_service.reset_password(body.email)
    return MessageResponse(message="Password reset email sent")


@router.get("/me", response_model=AdminResponse)
async def get_me(current_admin: CurrentAdmin):
    """Return the signed-in admin. Requires Authorization: Bearer <token>."""
    return to_admin_response(current_admin)
