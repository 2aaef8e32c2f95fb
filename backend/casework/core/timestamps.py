"""Timestamps - clock helpers for created/updated dates.

Invariants:
    - All timestamps are timezone-aware UTC
    - Naive datetimes are read as UTC; offset datetimes are converted to UTC
    - advance() never returns a value <= previous
"""

from datetime import datetime, timedelta, timezone
from typing import Callable

Clock = Callable[[], datetime]

_TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """Normalize to UTC: naive values are taken as UTC (SQLite drops tzinfo on read)."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def advance(previous: datetime | None, now: datetime) -> datetime:
    """Return now, or previous + 1µs when the clock has not moved past previous."""
    now = as_utc(now)
    if previous is None:
        return now
    previous = as_utc(previous)
    if now <= previous:
        return previous + _TICK
    return now
