"""Application services: content, live binding, registrations, auth, monitoring."""

from app.application.services.auth_service import AuthService
from app.application.services.content_service import ContentService
from app.application.services.content_watcher import ContentChangeFeed, LiveContentBinding
from app.application.services.registration_monitor import RegistrationMonitor
from app.application.services.registration_service import RegistrationService

__all__ = [
    "AuthService",
    "ContentChangeFeed",
    "ContentService",
    "LiveContentBinding",
    "RegistrationMonitor",
    "RegistrationService",
]
