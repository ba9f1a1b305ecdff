from __future__ import annotations

from datetime import date, datetime, timezone


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def calendar_date(value: datetime) -> date:
    """Calendar day of a timestamp, time-of-day discarded.

    Aware timestamps are converted to UTC first so that the same instant always
    lands on the same day regardless of the offset it was submitted with.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.date()


def as_naive_utc(value: datetime) -> datetime:
    """Comparable form of a timestamp that may or may not carry an offset."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value
