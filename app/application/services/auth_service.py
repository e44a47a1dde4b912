"""Admin authentication: provider sign-in gated by the admin allow-list.

The provider proves who someone is; the admins collection decides whether
they may use the admin API. Provider error codes are translated into
messages a person can act on and never leak through as-is.
"""

from __future__ import annotations

from app.application.dtos.admin import AdminSession, AdminUserResult
from app.application.interfaces.repositories import IAdminRepository
from app.application.interfaces.services import (
    IContentCache,
    IIdentityProvider,
    ITokenService,
)
from app.core.constants import ADMIN_REQUIRED_MESSAGE
from app.domain.enums import AdminRole
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    IdentityProviderError,
    ValidationException,
)
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_PROVIDER_MESSAGES: dict[str, str] = {
    "EMAIL_NOT_FOUND": "No account found with this email.",
    "INVALID_PASSWORD": "Incorrect password.",
    "INVALID_LOGIN_CREDENTIALS": "Incorrect password.",
    "INVALID_EMAIL": "Invalid email address.",
    "TOO_MANY_ATTEMPTS_TRY_LATER": "Too many failed attempts. Please try again later.",
    "EMAIL_EXISTS": "An account with this email already exists.",
    "WEAK_PASSWORD": "Password should be at least 6 characters.",
}


def auth_error_message(code: str) -> str:
    """User-readable message for a provider error code."""
    return _PROVIDER_MESSAGES.get(code, "Authentication failed")


class AuthService:
    """Sign-in, sign-out, password reset and admin creation."""

    def __init__(
        self,
        identity: IIdentityProvider,
        admin_repo: IAdminRepository,
        tokens: ITokenService,
        cache: IContentCache | None = None,
    ) -> None:
        self._identity = identity
        self._admins = admin_repo
        self._tokens = tokens
        self._cache = cache

    async def sign_in(self, email: str, password: str) -> AdminSession:
        """Authenticate and require an admin record.

        Raises:
            AuthenticationException: Provider rejected the credentials.
            AuthorizationException: Identity is not on the admin allow-list.
        """
        try:
            identity = await self._identity.sign_in(email, password)
        except IdentityProviderError as e:
            logger.info("Admin sign-in rejected by provider: %s", e.code)
            raise AuthenticationException(auth_error_message(e.code)) from e
        admin = await self._admins.get_by_id(identity.uid)
        if admin is None:
            logger.warning("Sign-in by %s refused: not an admin", identity.email)
            raise AuthorizationException(ADMIN_REQUIRED_MESSAGE)
        await self._admins.touch_last_login(admin.id)
        token = self._tokens.issue(admin.id, {"email": admin.email})
        logger.info("Admin %s signed in", admin.email)
        return AdminSession(
            admin=admin,
            access_token=token,
            expires_in=self._tokens.expires_in,
        )

    async def sign_out(self, admin: AdminUserResult) -> None:
        """Clear cached content so the next session starts from the store.

        Tokens are stateless; the client discards its copy.
        """
        if self._cache is not None:
            await self._cache.clear()
        logger.info("Admin %s signed out", admin.email)

    async def reset_password(self, email: str) -> None:
        try:
            await self._identity.send_password_reset(email)
        except IdentityProviderError as e:
            raise AuthenticationException(auth_error_message(e.code)) from e
        logger.info("Password reset requested for %s", email)

    async def create_admin(
        self,
        email: str,
        password: str,
        name: str,
        role: AdminRole = AdminRole.ADMIN,
    ) -> AdminUserResult:
        """Create the provider identity, then the matching allow-list entry."""
        if not name.strip():
            raise ValidationException("Name is required", field="name")
        try:
            identity = await self._identity.sign_up(email, password)
        except IdentityProviderError as e:
            raise AuthenticationException(auth_error_message(e.code)) from e
        admin = await self._admins.create(identity.uid, identity.email, name.strip(), role.value)
        logger.info("Admin %s created (role=%s)", admin.email, admin.role)
        return admin

    async def authenticate_token(self, token: str) -> AdminUserResult:
        """Resolve a bearer token to its admin record.

        The allow-list is checked on every request, so removing an admin
        record revokes outstanding tokens.

        Raises:
            AuthenticationException: Token invalid or expired.
            AuthorizationException: Admin record no longer exists.
        """
        try:
            claims = self._tokens.verify(token)
        except ValueError as e:
            raise AuthenticationException("Session expired or invalid. Please sign in again.") from e
        admin = await self._admins.get_by_id(str(claims["sub"]))
        if admin is None:
            raise AuthorizationException(ADMIN_REQUIRED_MESSAGE)
        return admin

    async def has_admin(self) -> bool:
        return await self._admins.any_exists()
