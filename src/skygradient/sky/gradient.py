"""Two-stop sky gradient composition."""

from __future__ import annotations

from datetime import datetime

from skygradient.contracts import DayPhase, Gradient, PhaseClassification, Rgb, SunTimes
from skygradient.sky.color import darken, lerp_color
from skygradient.sky.palette import DEFAULT_PALETTE, SkyPalette
from skygradient.sky.phase import day_fraction
from skygradient.time.instants import to_utc

HORIZON_DARKEN = 0.05
BOTTOM_BIAS = 0.1
FALLBACK_DARKEN = 0.2


def phase_anchors(
    classification: PhaseClassification,
    palette: SkyPalette,
    rising: bool | None = None,
) -> tuple[Rgb, Rgb]:
    """Return the `(from, to)` anchor colors blended within a phase.

    `rising` tells dawn from dusk during twilight. When it is None the day
    fraction decides, so twilight with unknown sun times (fraction 0.5) is dusk.
    """
    phase = classification.phase
    if phase is DayPhase.NIGHT:
        return palette.night, palette.night
    if phase is DayPhase.DAWN:
        if rising is None:
            rising = classification.day_fraction < 0.5
        if not rising:
            return palette.night, palette.sunset
        return palette.night, palette.sunrise
    if phase is DayPhase.MORNING_RAMP:
        return palette.sunrise, palette.morning
    if phase is DayPhase.APPROACHING_MIDDAY:
        return palette.morning, palette.midday
    if phase is DayPhase.EARLY_EVENING:
        return palette.midday, palette.early_evening
    return palette.early_evening, palette.sunset


def compose_gradient(
    classification: PhaseClassification,
    palette: SkyPalette = DEFAULT_PALETTE,
    horizon_darken: float = HORIZON_DARKEN,
    bottom_bias: float = BOTTOM_BIAS,
    rising: bool | None = None,
) -> Gradient:
    """Compose the top/bottom stops for a classified phase.

    The bottom stop is pushed `bottom_bias` further along the phase blend and then
    darkened toward black by `horizon_darken`. `rising` is passed to
    `phase_anchors`.
    """
    start, end = phase_anchors(classification, palette, rising)
    blend = classification.blend

    top = lerp_color(start, end, blend)
    bottom = lerp_color(start, end, min(1.0, blend + bottom_bias))
    return Gradient.vertical(top, darken(bottom, horizon_darken))


def fallback_gradient(
    now: datetime,
    sun_times: SunTimes,
    palette: SkyPalette = DEFAULT_PALETTE,
    darken_amount: float = FALLBACK_DARKEN,
) -> Gradient:
    """Gradient used when no coordinate is available.

    Warm at sunrise, cool at midday, warm again at sunset, with the bottom stop
    darkened by a flat amount. Outside daylight both stops are the night color.
    A degenerate sunrise/sunset interval is treated as midday. Naive values are
    interpreted as UTC.
    """
    now, sunrise, sunset = to_utc(now), to_utc(sun_times.sunrise), to_utc(sun_times.sunset)
    if sunset > sunrise and (now < sunrise or now > sunset):
        return Gradient.vertical(palette.fallback_night, palette.fallback_night)

    t = day_fraction(now, sunrise, sunset)
    if t < 0.5:
        top = lerp_color(palette.fallback_warm, palette.fallback_cool, t * 2.0)
    else:
        top = lerp_color(palette.fallback_cool, palette.fallback_warm, (t - 0.5) * 2.0)
    return Gradient.vertical(top, darken(top, darken_amount))
