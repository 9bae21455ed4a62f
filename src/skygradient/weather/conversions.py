"""Closed-form weather unit conversions.

References:
  - Magnus-Tetens dew point approximation (a=17.27, b=237.7 C)
"""

from __future__ import annotations

import math

MAGNUS_A = 17.27
MAGNUS_B = 237.7

COMPASS_POINTS: tuple[str, ...] = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


def fahrenheit_to_celsius(temp_f: float) -> float:
    """Convert Fahrenheit to Celsius."""
    return (temp_f - 32.0) * 5.0 / 9.0


def celsius_to_fahrenheit(temp_c: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return temp_c * 9.0 / 5.0 + 32.0


def dew_point_f(temp_f: float, humidity_percent: float) -> float:
    """Magnus-Tetens dew point in Fahrenheit.

    `humidity_percent` must be > 0; the logarithm is undefined otherwise and
    callers are expected to validate upstream.
    """
    temp_c = fahrenheit_to_celsius(temp_f)
    gamma = (MAGNUS_A * temp_c) / (MAGNUS_B + temp_c) + math.log(humidity_percent / 100.0)
    dew_c = (MAGNUS_B * gamma) / (MAGNUS_A - gamma)
    return celsius_to_fahrenheit(dew_c)


def wind_compass(degrees: float) -> str:
    """Convert degrees to a 16-point compass label (22.5 degree buckets)."""
    return COMPASS_POINTS[math.floor(degrees / 22.5 + 0.5) % 16]
