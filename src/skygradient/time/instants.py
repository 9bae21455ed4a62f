"""UTC instant normalization utilities."""

from __future__ import annotations

from datetime import UTC, datetime


def to_utc(dt: datetime) -> datetime:
    """Convert datetime to timezone-aware UTC, assuming UTC for naive values."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def fraction_of_day(dt: datetime) -> float:
    """Return elapsed fraction of the UTC day, including microseconds."""
    dt_utc = to_utc(dt)
    hours = (
        dt_utc.hour
        + dt_utc.minute / 60.0
        + dt_utc.second / 3600.0
        + dt_utc.microsecond / 3_600_000_000.0
    )
    return hours / 24.0
