"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system are timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

from datetime import UTC, datetime, timedelta
from typing import overload


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Services take this as an injectable clock so that statistics windows and
    deadline checks can be tested against a fixed instant.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


@overload
def ensure_utc(dt: datetime) -> datetime: ...


@overload
def ensure_utc(dt: None) -> None: ...


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository/persistence boundaries to normalize datetimes
    (SQLite returns naive values).

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def days_ago(now: datetime, days: int) -> datetime:
    """Return the instant `days` whole days before now."""
    return now - timedelta(days=days)


def days_ahead(now: datetime, days: int) -> datetime:
    """Return the instant `days` whole days after now."""
    return now + timedelta(days=days)
