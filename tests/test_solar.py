"""Tests for solar position calculations."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from skygradient.astro.julian import to_julian_day
from skygradient.astro.solar import greenwich_mean_sidereal_time, solar_position


def test_solar_position_equinox_noon_equator_sanity() -> None:
    """Sun should be nearly overhead at the equator around March equinox noon."""
    noon = solar_position(datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc), lat_deg=0.0, lon_deg=0.0)
    # local solar noon trails UTC noon by the equation of time (~7.5 min)
    transit = solar_position(
        datetime(2024, 3, 20, 12, 7, 30, tzinfo=timezone.utc), lat_deg=0.0, lon_deg=0.0
    )

    assert noon.elevation_deg > 87.5
    assert transit.elevation_deg > 89.5
    assert 0.0 <= noon.azimuth_deg < 360.0


def test_solar_position_bounds_over_grid() -> None:
    """Elevation stays in [-90, 90] and azimuth in [0, 360) everywhere."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    for day in (0, 79, 171, 265, 355):
        for hour in range(0, 24, 5):
            dt = start + timedelta(days=day, hours=hour, minutes=13)
            for lat in (-90.0, -60.0, -23.44, 0.0, 23.44, 60.0, 90.0):
                for lon in (-180.0, -90.0, 0.0, 90.0, 180.0):
                    position = solar_position(dt, lat, lon)
                    assert -90.0 <= position.elevation_deg <= 90.0
                    assert 0.0 <= position.azimuth_deg < 360.0


def test_morning_sun_is_east_and_afternoon_sun_is_west() -> None:
    """Azimuth is measured clockwise from North."""
    morning = solar_position(datetime(2024, 3, 20, 6, 30, tzinfo=timezone.utc), 0.0, 0.0)
    afternoon = solar_position(datetime(2024, 3, 20, 17, 30, tzinfo=timezone.utc), 0.0, 0.0)

    assert morning.elevation_deg > 0.0
    assert 85.0 < morning.azimuth_deg < 95.0
    assert afternoon.elevation_deg > 0.0
    assert 265.0 < afternoon.azimuth_deg < 275.0


def test_buffalo_summer_solstice_noon() -> None:
    """Buffalo at local solar noon on the June solstice: high sun due south."""
    position = solar_position(datetime(2024, 6, 20, 17, 17, tzinfo=timezone.utc), 42.88, -78.88)

    assert position.elevation_deg > 65.0
    assert position.elevation_deg == pytest.approx(70.5, abs=1.0)
    assert 170.0 < position.azimuth_deg < 190.0


def test_midnight_sun_is_below_horizon_at_equator() -> None:
    """At UTC midnight on the prime meridian the sun is well below the horizon."""
    position = solar_position(datetime(2024, 3, 20, 0, 0, tzinfo=timezone.utc), 0.0, 0.0)

    assert position.elevation_deg < -80.0


def test_gmst_at_j2000() -> None:
    """GMST at the J2000.0 epoch is about 280.46 degrees."""
    jd, _ = to_julian_day(datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc))

    assert greenwich_mean_sidereal_time(jd) == pytest.approx(280.46061837, abs=1e-6)


def test_solar_position_deterministic() -> None:
    """The computation must be deterministic for identical inputs."""
    dt = datetime(2024, 12, 1, 0, 0, tzinfo=timezone.utc)
    first = solar_position(dt, lat_deg=-33.8688, lon_deg=151.2093)
    second = solar_position(dt, lat_deg=-33.8688, lon_deg=151.2093)

    assert first == second
