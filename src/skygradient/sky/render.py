"""Per-tick render entry point.

The caller owns the timer; each tick it builds a `RenderSnapshot` and asks for a
fresh gradient. Nothing is cached between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from skygradient.astro.solar import solar_position
from skygradient.config import EngineConfig
from skygradient.contracts import (
    DayPhase,
    GeoCoordinate,
    Gradient,
    PhaseClassification,
    SolarPosition,
    SunTimes,
)
from skygradient.sky.gradient import compose_gradient, fallback_gradient
from skygradient.sky.phase import classify_at
from skygradient.time.instants import to_utc

_LOGGER = logging.getLogger(__name__)

_DEFAULT_CONFIG = EngineConfig()


@dataclass(frozen=True, slots=True)
class RenderSnapshot:
    """Inputs for one render tick."""

    now: datetime
    coordinate: GeoCoordinate | None = None
    sun_times: SunTimes | None = None


@dataclass(frozen=True, slots=True)
class SkyState:
    """Everything derived during one render tick."""

    gradient: Gradient
    position: SolarPosition | None = None
    classification: PhaseClassification | None = None


def evaluate(snapshot: RenderSnapshot, config: EngineConfig | None = None) -> SkyState:
    """Derive solar position, phase and gradient for one snapshot.

    Without a coordinate the sunrise/sunset-only fallback is used; with neither a
    coordinate nor sun times the sky is rendered as night.
    """
    cfg = config or _DEFAULT_CONFIG
    now = to_utc(snapshot.now)

    if snapshot.coordinate is not None:
        coord = snapshot.coordinate
        position = solar_position(now, coord.lat_deg, coord.lon_deg)
        classification = classify_at(position.elevation_deg, now, snapshot.sun_times)
        _LOGGER.debug(
            "solar render elevation=%.3f phase=%s blend=%.3f",
            position.elevation_deg,
            classification.phase,
            classification.blend,
        )
        # without sun times, an eastern sun means morning twilight
        rising = None if snapshot.sun_times is not None else position.azimuth_deg < 180.0
        gradient = compose_gradient(
            classification,
            palette=cfg.palette,
            horizon_darken=cfg.horizon_darken,
            bottom_bias=cfg.bottom_bias,
            rising=rising,
        )
        return SkyState(gradient=gradient, position=position, classification=classification)

    if snapshot.sun_times is not None:
        _LOGGER.debug("no coordinate; using sunrise/sunset fallback gradient")
        gradient = fallback_gradient(
            now,
            snapshot.sun_times,
            palette=cfg.palette,
            darken_amount=cfg.fallback_darken,
        )
        return SkyState(gradient=gradient)

    _LOGGER.debug("no coordinate or sun times; rendering night")
    night = PhaseClassification(DayPhase.NIGHT, 0.0, 0.5)
    gradient = compose_gradient(
        night,
        palette=cfg.palette,
        horizon_darken=cfg.horizon_darken,
        bottom_bias=cfg.bottom_bias,
    )
    return SkyState(gradient=gradient, classification=night)


def render(snapshot: RenderSnapshot, config: EngineConfig | None = None) -> Gradient:
    """Return the background gradient for one tick."""
    return evaluate(snapshot, config).gradient
