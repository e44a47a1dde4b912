"""Alert sender factory: Resend when configured, log-only otherwise."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from app.application.interfaces.services import INotificationService
from app.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from app.core.config import Settings

logger = get_logger(__name__)


class NotificationServiceFactory:
    """Factory for INotificationService instances based on configuration."""

    @staticmethod
    def create_notification_service(
        settings: "Settings",
        http_client: httpx.AsyncClient,
    ) -> INotificationService:
        """Create the alert sender.

        Args:
            settings: Application settings (Resend key and sender address).
            http_client: Shared httpx.AsyncClient for connection reuse.

        Returns:
            ResendNotificationService or LogOnlyNotificationService.
        """
        if settings.resend_api_key and settings.resend_api_key.get_secret_value():
            from app.infrastructure.external.email.resend_sender import (
                ResendNotificationService,
            )

            return ResendNotificationService(
                api_key=settings.resend_api_key.get_secret_value(),
                from_address=settings.alert_from_address,
                http_client=http_client,
            )
        from app.infrastructure.external.email.log_only import LogOnlyNotificationService

        logger.debug("RESEND_API_KEY not set; alerts are logged only")
        return LogOnlyNotificationService()
