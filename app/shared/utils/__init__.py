"""Shared utilities: datetime and generators."""

from app.shared.utils.datetime import (
    ensure_utc,
    format_local,
    utc_now,
    whole_hours_between,
)
from app.shared.utils.generators import generate_cuid, generate_item_id

__all__ = [
    "generate_cuid",
    "generate_item_id",
    "utc_now",
    "ensure_utc",
    "format_local",
    "whole_hours_between",
]
