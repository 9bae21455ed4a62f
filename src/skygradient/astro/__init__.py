"""Low-precision solar ephemeris helpers."""
