"""Tests for sky gradient composition."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from skygradient.contracts import DayPhase, Gradient, PhaseClassification, Rgb, SunTimes
from skygradient.sky.color import darken
from skygradient.sky.gradient import compose_gradient, fallback_gradient, phase_anchors
from skygradient.sky.palette import DEFAULT_PALETTE as P

_SUN = SunTimes(
    sunrise=datetime(2024, 6, 20, 9, 38, tzinfo=timezone.utc),
    sunset=datetime(2024, 6, 21, 0, 53, tzinfo=timezone.utc),
)


def _rgb(color: Rgb) -> tuple[float, float, float]:
    return (color.red, color.green, color.blue)


def test_gradient_offsets_are_top_and_bottom() -> None:
    """Top stop sits at offset 0 and bottom stop at offset 1."""
    gradient = compose_gradient(PhaseClassification(DayPhase.MORNING_RAMP, 0.4, 0.1))

    assert gradient.top.offset == 0.0
    assert gradient.bottom.offset == 1.0


def test_night_gradient_is_night_with_darker_horizon() -> None:
    """Night uses the night anchor; the bottom is darkened by 5%."""
    gradient = compose_gradient(PhaseClassification(DayPhase.NIGHT, 0.0, 0.0))

    assert gradient.top.color == P.night
    assert _rgb(gradient.bottom.color) == pytest.approx(_rgb(darken(P.night, 0.05)))


@pytest.mark.parametrize(
    ("phase", "expected"),
    [
        (DayPhase.MORNING_RAMP, (P.sunrise, P.morning)),
        (DayPhase.APPROACHING_MIDDAY, (P.morning, P.midday)),
        (DayPhase.EARLY_EVENING, (P.midday, P.early_evening)),
        (DayPhase.SUNSET, (P.early_evening, P.sunset)),
    ],
)
def test_daylight_phase_anchors(phase: DayPhase, expected: tuple[Rgb, Rgb]) -> None:
    """Each daylight phase blends between its two named anchors."""
    assert phase_anchors(PhaseClassification(phase, 0.5, 0.5), P) == expected


def test_twilight_anchor_depends_on_time_of_day() -> None:
    """Twilight before sunrise heads to the sunrise color, after sunset to the sunset color."""
    dawn = compose_gradient(PhaseClassification(DayPhase.DAWN, 1.0, 0.0))
    dusk = compose_gradient(PhaseClassification(DayPhase.DAWN, 1.0, 1.0))

    assert _rgb(dawn.top.color) == pytest.approx(_rgb(P.sunrise))
    assert _rgb(dusk.top.color) == pytest.approx(_rgb(P.sunset))


def test_twilight_direction_overrides_day_fraction() -> None:
    """An explicit rising flag picks the twilight anchor regardless of day fraction."""
    unknown = PhaseClassification(DayPhase.DAWN, 0.5, 0.5)

    assert phase_anchors(unknown, P) == (P.night, P.sunset)
    assert phase_anchors(unknown, P, rising=True) == (P.night, P.sunrise)
    assert phase_anchors(PhaseClassification(DayPhase.DAWN, 0.5, 0.0), P, rising=False) == (
        P.night,
        P.sunset,
    )


def test_bottom_stop_is_biased_along_the_blend() -> None:
    """The bottom stop is 0.1 further along the phase blend, then darkened."""
    classification = PhaseClassification(DayPhase.MORNING_RAMP, 0.3, 0.075)
    gradient = compose_gradient(classification)

    start, end = P.sunrise, P.morning
    expected = Rgb(
        *(s + (e - s) * 0.4 for s, e in zip(_rgb(start), _rgb(end)))
    )
    assert _rgb(gradient.bottom.color) == pytest.approx(_rgb(darken(expected, 0.05)))


def test_bottom_bias_saturates_at_phase_end() -> None:
    """Near the end of a phase the bottom stop stops at the target anchor."""
    gradient = compose_gradient(PhaseClassification(DayPhase.SUNSET, 0.97, 0.994))

    assert _rgb(gradient.bottom.color) == pytest.approx(_rgb(darken(P.sunset, 0.05)))


@pytest.mark.parametrize("phase", [DayPhase.APPROACHING_MIDDAY, DayPhase.EARLY_EVENING])
def test_midday_bottom_never_brighter_than_top(phase: DayPhase) -> None:
    """Around midday every bottom channel is at most the top channel."""
    for step in range(0, 101):
        gradient = compose_gradient(PhaseClassification(phase, step / 100.0, 0.5))
        for top, bottom in zip(_rgb(gradient.top.color), _rgb(gradient.bottom.color)):
            assert bottom <= top


def test_morning_ramp_bottom_blue_can_exceed_top() -> None:
    """Sunrise to morning raises blue, so the biased bottom stop is bluer than the top."""
    gradient = compose_gradient(PhaseClassification(DayPhase.MORNING_RAMP, 0.5, 0.125))

    assert gradient.bottom.color.blue > gradient.top.color.blue


def test_custom_darken_and_bias() -> None:
    """Horizon darkening and bias are configurable."""
    classification = PhaseClassification(DayPhase.APPROACHING_MIDDAY, 0.5, 0.4)
    gradient = compose_gradient(classification, horizon_darken=0.0, bottom_bias=0.0)

    assert gradient.bottom.color == gradient.top.color


def test_fallback_is_night_outside_daylight() -> None:
    """Before sunrise and after sunset both stops are the fallback night color."""
    before = fallback_gradient(_SUN.sunrise - timedelta(minutes=1), _SUN)
    after = fallback_gradient(_SUN.sunset + timedelta(minutes=1), _SUN)

    expected = Gradient.vertical(P.fallback_night, P.fallback_night)
    assert before == expected
    assert after == expected


def test_fallback_warm_cool_warm() -> None:
    """Warm at sunrise, cool at midday, warm again at sunset."""
    midday = _SUN.sunrise + (_SUN.sunset - _SUN.sunrise) / 2

    assert fallback_gradient(_SUN.sunrise, _SUN).top.color == P.fallback_warm
    assert _rgb(fallback_gradient(midday, _SUN).top.color) == pytest.approx(_rgb(P.fallback_cool))
    assert _rgb(fallback_gradient(_SUN.sunset, _SUN).top.color) == pytest.approx(
        _rgb(P.fallback_warm)
    )


def test_fallback_bottom_is_twenty_percent_darker() -> None:
    """The far stop is the top color scaled by 0.8."""
    now = _SUN.sunrise + timedelta(hours=3)
    gradient = fallback_gradient(now, _SUN)

    assert _rgb(gradient.bottom.color) == pytest.approx(
        tuple(channel * 0.8 for channel in _rgb(gradient.top.color))
    )


def test_fallback_degenerate_interval_uses_midday() -> None:
    """A degenerate sunrise/sunset interval renders the midday color."""
    degenerate = SunTimes(sunrise=_SUN.sunset, sunset=_SUN.sunrise)
    gradient = fallback_gradient(_SUN.sunrise + timedelta(hours=30), degenerate)

    assert gradient.top.color == P.fallback_cool
