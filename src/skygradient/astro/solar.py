"""Solar position helpers.

Low-precision solar ephemeris (no nutation, no refraction), accurate to roughly a
degree. Good enough to theme a background; not for navigation.
"""

from __future__ import annotations

from datetime import datetime
from math import acos, asin, atan2, cos, degrees, floor, radians, sin, tan

from skygradient.astro.julian import J2000_JD, julian_centuries, to_julian_day
from skygradient.contracts import SolarPosition


def _normalize_degrees(angle_deg: float) -> float:
    """Normalize an angle to [0, 360)."""
    value = angle_deg % 360.0
    # -1e-20 % 360.0 rounds to 360.0
    if value >= 360.0:
        return 0.0
    return value


def _wrap_hour_angle(angle_deg: float) -> float:
    """Wrap an angle into (-180, 180]."""
    value = _normalize_degrees(angle_deg)
    if value > 180.0:
        value -= 360.0
    return value


def greenwich_mean_sidereal_time(jd: float) -> float:
    """Return GMST in degrees, normalized to [0, 360)."""
    jd_midnight = floor(jd - 0.5) + 0.5
    t0 = julian_centuries(jd_midnight)
    gmst = (
        280.46061837
        + 360.98564736629 * (jd - J2000_JD)
        + 0.000387933 * t0 * t0
        - t0 * t0 * t0 / 38710000.0
    )
    return _normalize_degrees(gmst)


def solar_equatorial(t: float) -> tuple[float, float]:
    """Return `(declination_deg, right_ascension_deg)` for Julian centuries `t`."""
    mean_long = _normalize_degrees(280.46646 + 36000.76983 * t + 0.0003032 * t * t)
    mean_anomaly = radians(357.52911 + 35999.05029 * t - 0.0001537 * t * t)

    center = (
        (1.914602 - 0.004817 * t - 0.000014 * t * t) * sin(mean_anomaly)
        + (0.019993 - 0.000101 * t) * sin(2.0 * mean_anomaly)
        + 0.000289 * sin(3.0 * mean_anomaly)
    )
    true_long_rad = radians(mean_long + center)
    obliquity_rad = radians(23.439291 - 0.0130042 * t)

    decl_deg = degrees(asin(sin(true_long_rad) * sin(obliquity_rad)))
    ra_deg = _normalize_degrees(
        degrees(atan2(cos(obliquity_rad) * sin(true_long_rad), cos(true_long_rad)))
    )
    return decl_deg, ra_deg


def solar_position(dt: datetime, lat_deg: float, lon_deg: float) -> SolarPosition:
    """Compute solar elevation/azimuth for a UTC instant and WGS84 coordinates.

    Args:
        dt: Time of evaluation. Naive values are interpreted as UTC.
        lat_deg: Latitude in degrees.
        lon_deg: Longitude in degrees (east positive).

    Returns:
        `SolarPosition` with elevation in [-90, 90] and azimuth in [0, 360),
        measured clockwise from North.
    """
    jd, t = to_julian_day(dt)
    decl_deg, ra_deg = solar_equatorial(t)

    local_sidereal_deg = _normalize_degrees(greenwich_mean_sidereal_time(jd) + lon_deg)
    hour_angle_rad = radians(_wrap_hour_angle(local_sidereal_deg - ra_deg))

    lat_rad = radians(lat_deg)
    decl_rad = radians(decl_deg)
    cos_zenith = sin(lat_rad) * sin(decl_rad) + cos(lat_rad) * cos(decl_rad) * cos(hour_angle_rad)
    cos_zenith = min(1.0, max(-1.0, cos_zenith))
    elevation_deg = 90.0 - degrees(acos(cos_zenith))

    azimuth_rad = atan2(
        sin(hour_angle_rad),
        cos(hour_angle_rad) * sin(lat_rad) - tan(decl_rad) * cos(lat_rad),
    )
    azimuth_deg = _normalize_degrees(degrees(azimuth_rad) + 180.0)

    return SolarPosition(elevation_deg=elevation_deg, azimuth_deg=azimuth_deg)
