"""Day phase classification from solar elevation and day fraction."""

from __future__ import annotations

from datetime import datetime

from skygradient.contracts import DayPhase, PhaseClassification, SunTimes
from skygradient.time.instants import to_utc

CIVIL_TWILIGHT_DEG = -6.0
DEGENERATE_DAY_FRACTION = 0.5

# (upper bound, phase, lower bound) for elevation >= 0
_DAYLIGHT_BANDS: tuple[tuple[float, DayPhase, float], ...] = (
    (0.25, DayPhase.MORNING_RAMP, 0.0),
    (0.55, DayPhase.APPROACHING_MIDDAY, 0.25),
    (0.80, DayPhase.EARLY_EVENING, 0.55),
    (1.00, DayPhase.SUNSET, 0.80),
)


def _clamp01(value: float) -> float:
    """Clamp a numeric value to [0, 1]."""
    return max(0.0, min(1.0, value))


def day_fraction(now: datetime, sunrise: datetime, sunset: datetime) -> float:
    """Return progress between sunrise (0) and sunset (1), clamped.

    A degenerate interval (sunset not after sunrise) yields 0.5. Naive values
    are interpreted as UTC.
    """
    now, sunrise, sunset = to_utc(now), to_utc(sunrise), to_utc(sunset)
    span = (sunset - sunrise).total_seconds()
    if span <= 0.0:
        return DEGENERATE_DAY_FRACTION
    return _clamp01((now - sunrise).total_seconds() / span)


def classify(elevation_deg: float, fraction: float | None = None) -> PhaseClassification:
    """Classify the sky phase and its intra-phase blend factor.

    `fraction` is the day fraction; `None` means sun times are unknown and the
    midpoint is assumed.
    """
    used_fraction = DEGENERATE_DAY_FRACTION if fraction is None else _clamp01(fraction)

    if elevation_deg <= CIVIL_TWILIGHT_DEG:
        return PhaseClassification(DayPhase.NIGHT, 0.0, used_fraction)

    if elevation_deg < 0.0:
        blend = (elevation_deg - CIVIL_TWILIGHT_DEG) / -CIVIL_TWILIGHT_DEG
        return PhaseClassification(DayPhase.DAWN, _clamp01(blend), used_fraction)

    for upper, phase, lower in _DAYLIGHT_BANDS:
        if used_fraction < upper:
            break
    blend = (used_fraction - lower) / (upper - lower)
    return PhaseClassification(phase, _clamp01(blend), used_fraction)


def classify_at(elevation_deg: float, now: datetime, sun_times: SunTimes | None) -> PhaseClassification:
    """Classify using the day fraction of `now` within `sun_times`, when known."""
    if sun_times is None:
        return classify(elevation_deg, None)
    return classify(elevation_deg, day_fraction(now, sun_times.sunrise, sun_times.sunset))
