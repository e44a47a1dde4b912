"""Service interfaces (ports) for the application layer.

Protocols define contracts for caches and external providers (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.admin import IdentityResult
    from app.application.dtos.monitoring import AlertMessage


# Content cache interface
class IContentCache(Protocol):
    """Key -> value cache with a fixed TTL; clear() empties the content namespace."""

    async def get(self, key: str) -> Any | None:
        """Return the cached value if present and younger than the TTL."""

    async def set(self, key: str, value: Any) -> None:
        """Store value with the current fetch time."""

    async def clear(self) -> None:
        """Drop every cached entry."""


# Authentication provider interface
class IIdentityProvider(Protocol):
    """Protocol for the hosted e-mail/password authentication provider."""

    async def sign_in(self, email: str, password: str) -> IdentityResult:
        """Verify credentials. Raises IdentityProviderError(code) on failure."""

    async def sign_up(self, email: str, password: str) -> IdentityResult:
        """Create an identity. Raises IdentityProviderError(code) on failure."""

    async def send_password_reset(self, email: str) -> None:
        """Ask the provider to e-mail a password reset link."""


# Outbound e-mail interface
class INotificationService(Protocol):
    """Protocol for sending alert e-mails."""

    async def send(self, message: AlertMessage) -> str | None:
        """Send the message; return the provider's message id (None when only logged).

        Raises EmailDeliveryException when the provider rejects the send.
        """


# Session token interface
class ITokenService(Protocol):
    """Issues and verifies admin session tokens."""

    @property
    def expires_in(self) -> int:
        """Lifetime of issued tokens in seconds."""

    def issue(self, subject: str, claims: dict[str, Any] | None = None) -> str:
        """Return a signed token for subject (the admin uid)."""

    def verify(self, token: str) -> dict[str, Any]:
        """Return the token's claims. Raises ValueError when invalid or expired."""
