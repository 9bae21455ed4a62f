"""Adapter for weather-provider "current weather" payloads.

The package never fetches anything; callers pass the decoded JSON document they
already retrieved. Field layout follows OpenWeather's current-weather response.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from skygradient.contracts import GeoCoordinate, SunTimes
from skygradient.sky.render import RenderSnapshot
from skygradient.weather.conversions import dew_point_f, wind_compass

_LOGGER = logging.getLogger(__name__)


def sun_times_from_epoch(sunrise_s: int, sunset_s: int, utc_offset_s: int | None = None) -> SunTimes:
    """Build local `SunTimes` from epoch seconds.

    With no provider offset the device's local timezone is used.
    """
    if utc_offset_s is None:
        _LOGGER.debug("provider UTC offset missing; using device local timezone")
        return SunTimes(
            sunrise=datetime.fromtimestamp(sunrise_s, tz=timezone.utc).astimezone(),
            sunset=datetime.fromtimestamp(sunset_s, tz=timezone.utc).astimezone(),
        )
    tz = timezone(timedelta(seconds=utc_offset_s))
    return SunTimes(
        sunrise=datetime.fromtimestamp(sunrise_s, tz=tz),
        sunset=datetime.fromtimestamp(sunset_s, tz=tz),
    )


def format_clock(dt: datetime) -> str:
    """Format as `h:mm AM/PM` without a leading zero."""
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt.minute:02d} {'AM' if dt.hour < 12 else 'PM'}"


def _require(payload: Mapping[str, Any], *path: str | int) -> Any:
    """Walk a nested payload path, raising ValueError when absent."""
    node: Any = payload
    for key in path:
        try:
            node = node[key]
        except (KeyError, IndexError, TypeError) as exc:
            dotted = ".".join(str(part) for part in path)
            raise ValueError(f"provider payload missing field: {dotted}") from exc
    return node


def _number(value: Any, field: str, cast: Callable[[Any], Any] = float) -> Any:
    """Convert a provider value with `cast`, raising ValueError when it is not numeric."""
    try:
        return cast(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValueError(f"provider payload field {field} must be numeric") from exc


@dataclass(frozen=True, slots=True)
class WeatherSummary:
    """Display-ready values derived from one observation."""

    temperature_f: float
    dew_point_f: float
    humidity_percent: float
    description: str
    wind_speed_mph: float
    wind_deg: int
    wind_compass: str
    sunrise_local: datetime
    sunset_local: datetime
    location_name: str | None

    def to_display_dict(self) -> dict[str, Any]:
        """Serialize with rounded values and clock-formatted sun times."""
        return {
            "temperature_f": round(self.temperature_f, 1),
            "dew_point_f": round(self.dew_point_f, 1),
            "humidity_percent": self.humidity_percent,
            "description": self.description,
            "wind": {
                "compass": self.wind_compass,
                "speed_mph": round(self.wind_speed_mph, 1),
                "deg": self.wind_deg,
            },
            "sunrise": format_clock(self.sunrise_local),
            "sunset": format_clock(self.sunset_local),
            "location_name": self.location_name,
        }


@dataclass(frozen=True, slots=True)
class WeatherObservation:
    """Provider fields consumed by the display (imperial units)."""

    temperature_f: float
    humidity_percent: float
    description: str
    wind_speed_mph: float
    wind_deg: int
    sunrise_epoch_s: int
    sunset_epoch_s: int
    utc_offset_s: int | None = None
    coordinate: GeoCoordinate | None = None
    location_name: str | None = None

    @classmethod
    def from_provider_payload(cls, payload: Mapping[str, Any]) -> WeatherObservation:
        """Parse a decoded provider payload.

        Missing wind data defaults to calm; missing coordinate, name or offset
        become None. Other missing fields and non-numeric values raise ValueError.
        """
        humidity = _number(_require(payload, "main", "humidity"), "main.humidity")
        if humidity <= 0.0:
            raise ValueError("provider humidity must be > 0")

        wind = payload.get("wind") or {}
        if not isinstance(wind, Mapping):
            raise ValueError("provider payload field wind must be an object")
        coord = payload.get("coord")
        coordinate = None
        if isinstance(coord, Mapping) and "lat" in coord and "lon" in coord:
            coordinate = GeoCoordinate(
                _number(coord["lat"], "coord.lat"), _number(coord["lon"], "coord.lon")
            )

        offset = payload.get("timezone")
        name = payload.get("name") or None

        return cls(
            temperature_f=_number(_require(payload, "main", "temp"), "main.temp"),
            humidity_percent=humidity,
            description=str(_require(payload, "weather", 0, "description")),
            wind_speed_mph=_number(wind.get("speed", 0.0), "wind.speed"),
            wind_deg=_number(wind.get("deg", 0), "wind.deg", int),
            sunrise_epoch_s=_number(_require(payload, "sys", "sunrise"), "sys.sunrise", int),
            sunset_epoch_s=_number(_require(payload, "sys", "sunset"), "sys.sunset", int),
            utc_offset_s=None if offset is None else _number(offset, "timezone", int),
            coordinate=coordinate,
            location_name=name,
        )

    def sun_times(self) -> SunTimes:
        """Return local sunrise/sunset for this observation."""
        return sun_times_from_epoch(self.sunrise_epoch_s, self.sunset_epoch_s, self.utc_offset_s)

    def summary(self) -> WeatherSummary:
        """Derive display values (dew point, compass label, local sun times)."""
        sun = self.sun_times()
        return WeatherSummary(
            temperature_f=self.temperature_f,
            dew_point_f=dew_point_f(self.temperature_f, self.humidity_percent),
            humidity_percent=self.humidity_percent,
            description=self.description,
            wind_speed_mph=self.wind_speed_mph,
            wind_deg=self.wind_deg,
            wind_compass=wind_compass(self.wind_deg),
            sunrise_local=sun.sunrise,
            sunset_local=sun.sunset,
            location_name=self.location_name,
        )

    def render_snapshot(self, now: datetime) -> RenderSnapshot:
        """Build the per-tick render input for `now`."""
        return RenderSnapshot(now=now, coordinate=self.coordinate, sun_times=self.sun_times())
