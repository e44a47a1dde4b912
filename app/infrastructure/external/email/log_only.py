"""Log-only alert sender for local development and unconfigured deployments."""

from __future__ import annotations

import logging

from app.application.dtos.monitoring import AlertMessage
from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import utc_now

logger = get_logger(__name__)


class LogOnlyNotificationService:
    """INotificationService implementation that logs instead of sending e-mail.

    Use when no Resend API key is configured.
    """

    async def send(self, message: AlertMessage) -> str | None:
        """Log the notification; no actual e-mail sent."""
        logger.info(
            "Alert notify: would send to %s (subject=%r)",
            message.to or "<no recipient>",
            (message.subject or "")[:80],
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Alert notify body at %s (first 500 chars): %s",
                utc_now().isoformat(),
                (message.html or "")[:500],
            )
        return None
