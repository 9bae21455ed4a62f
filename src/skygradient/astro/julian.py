"""Julian day conversion for UTC instants."""

from __future__ import annotations

from datetime import datetime
from math import floor

from skygradient.time.instants import fraction_of_day, to_utc

J2000_JD = 2451545.0
DAYS_PER_JULIAN_CENTURY = 36525.0


def julian_day_from_fields(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
) -> float:
    """Return the Julian day for UTC calendar fields (Gregorian calendar)."""
    if month <= 2:
        year -= 1
        month += 12

    a = floor(year / 100)
    b = 2 - a + floor(a / 4)
    day_fraction = day + (hour + minute / 60.0 + second / 3600.0) / 24.0

    return floor(365.25 * (year + 4716)) + floor(30.6001 * (month + 1)) + day_fraction + b - 1524.5


def julian_centuries(jd: float) -> float:
    """Return Julian centuries elapsed since J2000.0."""
    return (jd - J2000_JD) / DAYS_PER_JULIAN_CENTURY


def to_julian_day(dt: datetime) -> tuple[float, float]:
    """Convert a datetime to `(jd, t)`.

    Naive datetimes are interpreted as UTC. `t` is Julian centuries since J2000.0.
    """
    dt_utc = to_utc(dt)
    jd = julian_day_from_fields(dt_utc.year, dt_utc.month, dt_utc.day) + fraction_of_day(dt_utc)
    return jd, julian_centuries(jd)
