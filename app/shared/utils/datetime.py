"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Use this instead of:
        - datetime.now() - naive, uses local timezone
        - datetime.utcnow() - naive, deprecated in Python 3.12
        - datetime.now(UTC) - correct but verbose

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository/persistence boundaries to normalize datetimes.

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume it's UTC and attach timezone
        return dt.replace(tzinfo=UTC)

    # Aware datetime - convert to UTC
    return dt.astimezone(UTC)


def format_local(dt: datetime, tz_name: str) -> str:
    """
    Format a datetime for people in the festival's timezone.

    Example: "Saturday, October 11, 2025 at 5:00 PM".

    Args:
        dt: Aware (or naive UTC) datetime
        tz_name: IANA timezone name (e.g. America/Los_Angeles)

    Returns:
        Human-readable local date and time
    """
    local = ensure_utc(dt).astimezone(ZoneInfo(tz_name))
    hour = local.strftime("%I").lstrip("0") or "12"
    return f"{local.strftime('%A, %B')} {local.day}, {local.year} at {hour}:{local.strftime('%M %p')}"


def whole_hours_between(earlier: datetime, later: datetime) -> int:
    """
    Return the number of whole hours from earlier to later (floored, never negative).

    Args:
        earlier: Start datetime
        later: End datetime

    Returns:
        Whole hours elapsed
    """
    seconds = (ensure_utc(later) - ensure_utc(earlier)).total_seconds()
    return max(0, int(seconds // 3600))
