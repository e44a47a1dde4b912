"""Firebase Authentication over the Identity Toolkit REST API (no firebase-admin).

Only the e-mail/password flows the admin panel needs: sign in, sign up,
password reset. Errors surface as IdentityProviderError carrying the
provider's code (e.g. EMAIL_NOT_FOUND); callers translate codes into
user-readable messages.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.application.dtos.admin import IdentityResult
from app.domain.exceptions import IdentityProviderError

logger = logging.getLogger(__name__)

_BASE = "https://identitytoolkit.googleapis.com/v1"


def _error_code(resp: httpx.Response) -> str:
    """Extract the provider code; messages look like 'WEAK_PASSWORD : Password should be...'."""
    try:
        message = resp.json().get("error", {}).get("message", "")
    except ValueError:
        message = ""
    return message.split(" ", 1)[0].strip() or f"HTTP_{resp.status_code}"


class FirebaseIdentityProvider:
    """Implements IIdentityProvider with the project's web API key."""

    def __init__(self, api_key: str, http_client: httpx.AsyncClient) -> None:
        self._api_key = api_key
        self._http = http_client

    async def _post(self, endpoint: str, body: dict[str, Any]) -> dict[str, Any]:
        url = f"{_BASE}/accounts:{endpoint}"
        try:
            resp = await self._http.post(url, params={"key": self._api_key}, json=body)
        except httpx.HTTPError as e:
            logger.warning("Identity Toolkit request failed: %s", e)
            raise IdentityProviderError("NETWORK_REQUEST_FAILED") from e
        if resp.status_code != 200:
            raise IdentityProviderError(_error_code(resp))
        return resp.json()

    async def sign_in(self, email: str, password: str) -> IdentityResult:
        out = await self._post(
            "signInWithPassword",
            {"email": email, "password": password, "returnSecureToken": True},
        )
        return IdentityResult(uid=out["localId"], email=out.get("email", email))

    async def sign_up(self, email: str, password: str) -> IdentityResult:
        out = await self._post(
            "signUp",
            {"email": email, "password": password, "returnSecureToken": True},
        )
        return IdentityResult(uid=out["localId"], email=out.get("email", email))

    async def send_password_reset(self, email: str) -> None:
        await self._post("sendOobCode", {"requestType": "PASSWORD_RESET", "email": email})
