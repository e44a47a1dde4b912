"""Shared utilities: telemetry, request context and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.context import get_request_ids
from app.shared.utils import (
    ensure_utc,
    generate_cuid,
    generate_item_id,
    utc_now,
)

__all__ = [
    "generate_cuid",
    "generate_item_id",
    "get_request_ids",
    "utc_now",
    "ensure_utc",
]
