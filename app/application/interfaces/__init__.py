"""Application ports (repository and service protocols)."""

from app.application.interfaces.repositories import (
    IAdminRepository,
    IContentRepository,
    IRegistrationRepository,
    IVersionRepository,
)
from app.application.interfaces.services import (
    IContentCache,
    IIdentityProvider,
    INotificationService,
    ITokenService,
)

__all__ = [
    "IAdminRepository",
    "IContentCache",
    "IContentRepository",
    "IIdentityProvider",
    "INotificationService",
    "ITokenService",
    "IRegistrationRepository",
    "IVersionRepository",
]
