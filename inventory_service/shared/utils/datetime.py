"""
UTC datetime utilities for consistent timezone handling.

Use these helpers instead of datetime.now() or time.time() so that
timestamp-derived identifiers are always computed in UTC.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def to_timestamp_ms(dt: datetime) -> int:
    """
    Return milliseconds since the Unix epoch for an aware datetime.

    Args:
        dt: Timezone-aware datetime

    Returns:
        Integer millisecond timestamp
    """
    return int(dt.timestamp() * 1000)
