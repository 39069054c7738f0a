"""
Datetime utilities for consistent timezone handling.

Instants cross the store boundary as epoch milliseconds; inside the domain
they are timezone-aware ``datetime`` objects.
"""

import datetime

UTC = datetime.timezone.utc


def now_utc() -> datetime.datetime:
    """Get current datetime in UTC."""
    return datetime.datetime.now(UTC)


def to_utc(dt: datetime.datetime) -> datetime.datetime:
    """
    Convert a datetime to UTC timezone.

    Naive datetimes are assumed to already be UTC (SQLite drops offsets).
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def from_epoch_ms(value: int | float) -> datetime.datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    return datetime.datetime.fromtimestamp(value / 1000, tz=UTC)


def to_epoch_ms(dt: datetime.datetime) -> int:
    """Convert an aware datetime to epoch milliseconds."""
    return int(round(to_utc(dt).timestamp() * 1000))
