"""JWT session tokens for the admin API.

Uses app.core.config for secret, algorithm and lifetime. A missing
SECRET_KEY does not stop the app from starting (public pages still
render); issuing or verifying a token then raises ServiceNotConfiguredException.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from app.core.config import Settings, get_settings
from app.domain.exceptions import ServiceNotConfiguredException


def _secret(settings: Settings) -> str:
    secret = settings.secret_key.get_secret_value()
    if not secret:
        raise ServiceNotConfiguredException("Admin sessions", "set SECRET_KEY")
    return secret


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT access token with the given claims.

    Args:
        data: Claims to encode (sub = admin uid, email).
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.

    Returns:
        Encoded JWT string.

    Raises:
        ServiceNotConfiguredException: SECRET_KEY is empty.
    """
    settings = get_settings()
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = datetime.now(UTC) + expires_delta
    encoded = jwt.encode(to_encode, _secret(settings), algorithm=settings.algorithm)
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces presence of exp and sub.

    Raises:
        ValueError: If token is invalid, expired, or missing required claims.
        ServiceNotConfiguredException: SECRET_KEY is empty.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            _secret(settings),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if "sub" not in payload:
        raise ValueError("Token missing required claim: sub")
    return payload


class JWTTokenService:
    """ITokenService over python-jose; lifetime from settings."""

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return get_settings().access_token_expire_minutes * 60

    def issue(self, subject: str, claims: dict[str, Any] | None = None) -> str:
        return create_access_token({**(claims or {}), "sub": subject})

    def verify(self, token: str) -> dict[str, Any]:
        return verify_token(token)
