"""Request context management using contextvars.

Holds the request and correlation ids for the current request so log
records can carry them without passing them through every call.
Set by the request-context middleware; read by the logging filter.
"""

from contextvars import ContextVar, Token
from dataclasses import dataclass

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


@dataclass(frozen=True)
class RequestIds:
    """Ids of the request being handled (None outside a request)."""

    request_id: str | None
    correlation_id: str | None


def set_request_id(request_id: str | None) -> Token:
    """Bind the request id to the current task. Returns a token for reset."""
    return _request_id.set(request_id)


def set_correlation_id(correlation_id: str | None) -> Token:
    return _correlation_id.set(correlation_id)


def reset_request_id(token: Token) -> None:
    _request_id.reset(token)


def reset_correlation_id(token: Token) -> None:
    _correlation_id.reset(token)


def get_request_ids() -> RequestIds:
    return RequestIds(request_id=_request_id.get(), correlation_id=_correlation_id.get())
