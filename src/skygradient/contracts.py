"""Core data contracts for the sky gradient engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from math import isfinite
from typing import Any

from skygradient.time.instants import to_utc


@dataclass(frozen=True, slots=True)
class GeoCoordinate:
    """WGS84 coordinate captured once per weather fetch."""

    lat_deg: float
    lon_deg: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not isfinite(self.lat_deg) or not -90.0 <= self.lat_deg <= 90.0:
            raise ValueError("lat_deg must be within [-90, 90].")
        if not isfinite(self.lon_deg) or not -180.0 <= self.lon_deg <= 180.0:
            raise ValueError("lon_deg must be within [-180, 180].")


@dataclass(frozen=True, slots=True)
class SolarPosition:
    """Solar elevation/azimuth in degrees; azimuth clockwise from North."""

    elevation_deg: float
    azimuth_deg: float

    def to_dict(self) -> dict[str, float]:
        """Serialize to a JSON-compatible dictionary."""
        return {"elevation_deg": self.elevation_deg, "azimuth_deg": self.azimuth_deg}


@dataclass(frozen=True, slots=True)
class SunTimes:
    """Sunrise/sunset pair derived from one successful weather fetch."""

    sunrise: datetime
    sunset: datetime

    @property
    def is_degenerate(self) -> bool:
        """Return True when sunset does not follow sunrise (naive values are UTC)."""
        return to_utc(self.sunset) <= to_utc(self.sunrise)


class DayPhase(StrEnum):
    """Sky phases in the order they occur through a day."""

    NIGHT = "night"
    DAWN = "dawn"
    MORNING_RAMP = "morning_ramp"
    APPROACHING_MIDDAY = "approaching_midday"
    EARLY_EVENING = "early_evening"
    SUNSET = "sunset"


@dataclass(frozen=True, slots=True)
class PhaseClassification:
    """Classified phase with its intra-phase blend factor."""

    phase: DayPhase
    blend: float
    day_fraction: float


@dataclass(frozen=True, slots=True)
class Rgb:
    """Color triple with channels nominally in [0, 1]."""

    red: float
    green: float
    blue: float

    def to_bytes(self) -> tuple[int, int, int]:
        """Return 8-bit channels, clamped to [0, 255]."""
        red, green, blue = (
            max(0, min(255, round(channel * 255.0)))
            for channel in (self.red, self.green, self.blue)
        )
        return (red, green, blue)

    def to_hex(self) -> str:
        """Return `#rrggbb` representation."""
        return "#{:02x}{:02x}{:02x}".format(*self.to_bytes())


@dataclass(frozen=True, slots=True)
class ColorStop:
    """One gradient stop at an offset along the vertical axis."""

    color: Rgb
    offset: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize the stop to a JSON-compatible dictionary."""
        return {
            "hex": self.color.to_hex(),
            "rgb": [self.color.red, self.color.green, self.color.blue],
            "offset": self.offset,
        }


@dataclass(frozen=True, slots=True)
class Gradient:
    """Two-stop vertical gradient, top stop first."""

    top: ColorStop
    bottom: ColorStop

    @classmethod
    def vertical(cls, top: Rgb, bottom: Rgb) -> Gradient:
        """Build a gradient running from offset 0 (top) to 1 (bottom)."""
        return cls(top=ColorStop(top, 0.0), bottom=ColorStop(bottom, 1.0))

    def to_dict(self) -> dict[str, Any]:
        """Serialize the gradient to a JSON-compatible dictionary."""
        return {"top": self.top.to_dict(), "bottom": self.bottom.to_dict()}
