"""Alert e-mail delivery through the Resend REST API."""

from __future__ import annotations

import httpx

from app.application.dtos.monitoring import AlertMessage
from app.domain.exceptions import EmailDeliveryException
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_RESEND_URL = "https://api.resend.com/emails"


class ResendNotificationService:
    """INotificationService implementation backed by Resend."""

    def __init__(
        self,
        api_key: str,
        from_address: str,
        http_client: httpx.AsyncClient,
    ) -> None:
        self._api_key = api_key
        self._from = from_address
        self._http = http_client

    async def send(self, message: AlertMessage) -> str | None:
        """Send the message; return Resend's e-mail id.

        Raises:
            EmailDeliveryException: Network error or non-2xx response.
        """
        body = {
            "from": self._from,
            "to": [message.to],
            "subject": message.subject,
            "html": message.html,
        }
        headers = {"Authorization": f"Bearer {self._api_key}"}
        try:
            resp = await self._http.post(_RESEND_URL, json=body, headers=headers)
        except httpx.HTTPError as e:
            raise EmailDeliveryException(str(e) or type(e).__name__) from e
        if resp.status_code >= 400:
            try:
                reason = resp.json().get("message") or resp.text
            except ValueError:
                reason = resp.text
            logger.warning("Resend rejected e-mail (%s): %s", resp.status_code, reason)
            raise EmailDeliveryException(f"HTTP {resp.status_code}: {reason}")
        return resp.json().get("id")
