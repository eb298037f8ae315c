"""ISO 8601 datetime/date conversion utilities.

This module centralizes all transformations between Python datetime/date objects
and ISO 8601 strings. All date/time operations should use these functions
to ensure consistency and make usage clear across the codebase.
"""

from datetime import datetime, date, UTC


def to_timestamp(dt: datetime) -> str:
    """Convert datetime to ISO 8601 UTC timestamp string."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.isoformat().replace("+00:00", "Z")


def to_datetime(timestamp: str) -> datetime:
    """Convert ISO 8601 UTC timestamp string to datetime."""
    return datetime.fromisoformat(timestamp.replace('Z', '+00:00'))


def now() -> str:
    """Get current UTC timestamp as ISO 8601 string."""
    return to_timestamp(datetime.now(UTC))


def now_unix() -> int:
    """Get current UTC time as integer seconds since the epoch."""
    return int(datetime.now(UTC).timestamp())


def today() -> date:
    """Get the current UTC calendar date."""
    return datetime.now(UTC).date()


def to_datestring(d: date) -> str:
    """Convert date to ISO 8601 date string (YYYY-MM-DD)."""
    return d.isoformat()


def to_date(datestring: str) -> date:
    """Convert ISO 8601 date string (YYYY-MM-DD) to date."""
    return date.fromisoformat(datestring)


def years_between(start: date, end: date) -> int:
    """
    Count whole years elapsed from start to end (floor).

    An anniversary falling on 29 February is taken as 28 February in
    non-leap years. Returns a negative number if end is before start.
    """
    try:
        anniversary = start.replace(year=end.year)
    except ValueError:
        anniversary = date(end.year, 2, 28)

    years = end.year - start.year
    if end < anniversary:
        years -= 1
    return years
