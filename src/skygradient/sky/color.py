"""RGB color interpolation helpers."""

from __future__ import annotations

from skygradient.contracts import Rgb

BLACK = Rgb(0.0, 0.0, 0.0)


def rgb_from_bytes(red: int, green: int, blue: int) -> Rgb:
    """Build an `Rgb` from 8-bit channels."""
    return Rgb(red / 255.0, green / 255.0, blue / 255.0)


def parse_hex_color(value: str) -> Rgb:
    """Parse `#rrggbb` or `rrggbb` into an `Rgb`."""
    text = value.strip().lstrip("#")
    if len(text) != 6:
        raise ValueError(f"invalid hex color: {value!r}")
    try:
        red, green, blue = (int(text[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError as exc:
        raise ValueError(f"invalid hex color: {value!r}") from exc
    return rgb_from_bytes(red, green, blue)


def lerp_color(a: Rgb, b: Rgb, f: float) -> Rgb:
    """Linearly interpolate per channel. `f` is not clamped."""
    return Rgb(
        a.red + (b.red - a.red) * f,
        a.green + (b.green - a.green) * f,
        a.blue + (b.blue - a.blue) * f,
    )


def darken(color: Rgb, amount: float) -> Rgb:
    """Blend `color` toward black by `amount`."""
    return lerp_color(color, BLACK, amount)
