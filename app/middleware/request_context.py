"""Request ID and correlation ID middleware.

RequestIDMiddleware generates or forwards X-Request-ID; CorrelationIDMiddleware
forwards X-Correlation-ID or falls back to the request id. Both echo the
header on the response, store the id on scope state, and bind it to the
request context so log lines carry it. Client-provided values are
sanitized (length + character set) to prevent log injection.
Uses raw ASGI (no BaseHTTPMiddleware) so WebSocket and streaming
responses pass through untouched.
"""

import re
from typing import Callable

from app.shared.context import (
    reset_correlation_id,
    reset_request_id,
    set_correlation_id,
    set_request_id,
)
from app.shared.utils.generators import generate_cuid

# Safe for logging: alphanumeric, hyphen, underscore; max length to avoid abuse.
ID_MAX_LENGTH = 64
ID_ALLOWED_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{1," + str(ID_MAX_LENGTH) + r"}$")


def _get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def sanitize_id(raw: str | None) -> str | None:
    """Return raw (stripped) if safe for logs, else None."""
    if raw is None:
        return None
    value = raw.strip()
    return value if ID_ALLOWED_PATTERN.match(value) else None


def _with_response_header(send: Callable, header_name: str, value: str) -> Callable:
    async def send_wrapper(message: dict) -> None:
        if message["type"] == "http.response.start":
            headers = list(message.get("headers", []))
            headers.append((header_name.encode(), value.encode()))
            message["headers"] = headers
        await send(message)

    return send_wrapper


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward X-Request-ID on each HTTP request and response. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_id(_get_header(scope, header_name)) or generate_cuid()
        scope.setdefault("state", {})["request_id"] = request_id
        token = set_request_id(request_id)
        try:
            await app(scope, receive, _with_response_header(send, header_name, request_id))
        finally:
            reset_request_id(token)

    return asgi_app


def CorrelationIDMiddleware(
    app: Callable, header_name: str = "X-Correlation-ID"
) -> Callable:
    """Forward X-Correlation-ID; fall back to the request id. Raw ASGI.

    Must run inside RequestIDMiddleware (added before it) for the fallback.
    """

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        correlation_id = (
            sanitize_id(_get_header(scope, header_name))
            or scope.get("state", {}).get("request_id")
            or generate_cuid()
        )
        scope.setdefault("state", {})["correlation_id"] = correlation_id
        token = set_correlation_id(correlation_id)
        try:
            await app(scope, receive, _with_response_header(send, header_name, correlation_id))
        finally:
            reset_correlation_id(token)

    return asgi_app
