"""Outbound alert e-mail: Resend sender, log-only sender, and factory."""

from app.infrastructure.external.email.factory import NotificationServiceFactory
from app.infrastructure.external.email.log_only import LogOnlyNotificationService
from app.infrastructure.external.email.resend_sender import ResendNotificationService

__all__ = [
    "LogOnlyNotificationService",
    "NotificationServiceFactory",
    "ResendNotificationService",
]
