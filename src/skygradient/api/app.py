"""FastAPI app exposing solar position, gradient and weather summary endpoints."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, model_validator

from skygradient import __version__
from skygradient.astro.solar import solar_position
from skygradient.config import EngineConfig, load_config
from skygradient.contracts import GeoCoordinate, SunTimes
from skygradient.sky.render import RenderSnapshot, SkyState, evaluate
from skygradient.time.instants import to_utc
from skygradient.weather.observation import WeatherObservation

_LOGGER = logging.getLogger(__name__)


class SolarPositionRequest(BaseModel):
    """Request schema for one solar position evaluation."""

    time_utc: datetime
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)


class SolarPositionResponse(BaseModel):
    """Solar elevation/azimuth in degrees."""

    elevation_deg: float
    azimuth_deg: float


class GradientRequest(BaseModel):
    """Request schema for one render tick."""

    time_utc: datetime | None = None
    lat: float | None = Field(default=None, ge=-90.0, le=90.0)
    lon: float | None = Field(default=None, ge=-180.0, le=180.0)
    sunrise_utc: datetime | None = None
    sunset_utc: datetime | None = None

    @model_validator(mode="after")
    def validate_pairs(self) -> "GradientRequest":
        """Require lat/lon and sunrise/sunset to be supplied together."""
        if (self.lat is None) != (self.lon is None):
            raise ValueError("lat and lon must be provided together")
        if (self.sunrise_utc is None) != (self.sunset_utc is None):
            raise ValueError("sunrise_utc and sunset_utc must be provided together")
        return self

    def to_snapshot(self) -> RenderSnapshot:
        """Convert the request into a render snapshot."""
        coordinate = None
        if self.lat is not None and self.lon is not None:
            coordinate = GeoCoordinate(self.lat, self.lon)
        sun_times = None
        if self.sunrise_utc is not None and self.sunset_utc is not None:
            sun_times = SunTimes(to_utc(self.sunrise_utc), to_utc(self.sunset_utc))
        return RenderSnapshot(now=_normalize_time(self.time_utc), coordinate=coordinate, sun_times=sun_times)


class ColorStopResponse(BaseModel):
    """One gradient stop."""

    hex: str
    rgb: list[float]
    offset: float


class GradientResponse(BaseModel):
    """Gradient plus the intermediate values that produced it."""

    phase: str | None
    blend: float | None
    day_fraction: float | None
    elevation_deg: float | None
    azimuth_deg: float | None
    top: ColorStopResponse
    bottom: ColorStopResponse


class WeatherSummaryResponse(BaseModel):
    """Display summary of a provider payload with the current gradient."""

    summary: dict[str, Any]
    gradient: GradientResponse


def _normalize_time(dt: datetime | None) -> datetime:
    """Normalize optional datetime to timezone-aware UTC value."""
    if dt is None:
        return datetime.now(timezone.utc)
    return to_utc(dt)


def _gradient_response(state: SkyState) -> GradientResponse:
    """Flatten a render result into the response schema."""
    classification = state.classification
    position = state.position
    stops = state.gradient.to_dict()
    return GradientResponse(
        phase=None if classification is None else classification.phase.value,
        blend=None if classification is None else classification.blend,
        day_fraction=None if classification is None else classification.day_fraction,
        elevation_deg=None if position is None else position.elevation_deg,
        azimuth_deg=None if position is None else position.azimuth_deg,
        top=ColorStopResponse(**stops["top"]),
        bottom=ColorStopResponse(**stops["bottom"]),
    )


def create_app(config: EngineConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI app."""
    app = FastAPI(title="Sky Gradient API", version=__version__)
    engine_config = config or load_config()
    app.state.engine_config = engine_config

    @app.get("/health")
    def get_health() -> dict[str, str]:
        """Liveness probe."""
        return {"status": "ok"}

    @app.post("/solar-position", response_model=SolarPositionResponse)
    def post_solar_position(payload: SolarPositionRequest) -> SolarPositionResponse:
        """Compute solar elevation/azimuth for input time/location."""
        position = solar_position(_normalize_time(payload.time_utc), payload.lat, payload.lon)
        return SolarPositionResponse(**position.to_dict())

    @app.post("/gradient", response_model=GradientResponse)
    def post_gradient(payload: GradientRequest) -> GradientResponse:
        """Render the background gradient for one tick."""
        state = evaluate(payload.to_snapshot(), engine_config)
        return _gradient_response(state)

    @app.post("/weather/summary", response_model=WeatherSummaryResponse)
    def post_weather_summary(
        payload: dict[str, Any], now_utc: datetime | None = None
    ) -> WeatherSummaryResponse:
        """Summarize a provider payload and render the gradient at `now_utc`."""
        try:
            observation = WeatherObservation.from_provider_payload(payload)
        except ValueError as exc:
            _LOGGER.info("rejected provider payload: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc

        state = evaluate(observation.render_snapshot(_normalize_time(now_utc)), engine_config)
        return WeatherSummaryResponse(
            summary=observation.summary().to_display_dict(),
            gradient=_gradient_response(state),
        )

    return app


app = create_app()
