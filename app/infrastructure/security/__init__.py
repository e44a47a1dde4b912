"""Security: JWT admin session tokens."""

from app.infrastructure.security.jwt import (
    JWTTokenService,
    create_access_token,
    verify_token,
)

__all__ = [
    "JWTTokenService",
    "create_access_token",
    "verify_token",
]
