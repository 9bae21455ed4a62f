"""Anchor colors used by the gradient composer."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from skygradient.contracts import Rgb
from skygradient.sky.color import rgb_from_bytes


@dataclass(frozen=True, slots=True)
class SkyPalette:
    """Named anchor colors.

    Daytime anchors after `morning` get darker channel by channel
    (morning >= midday >= early_evening), so the biased bottom stop is never
    brighter than the top stop in the approaching-midday and early-evening
    phases. Other phases blend between anchors that brighten in some channel
    (sunrise to morning raises blue), so there the bottom stop can be brighter.
    """

    night: Rgb = rgb_from_bytes(8, 12, 36)
    sunrise: Rgb = rgb_from_bytes(255, 153, 51)
    morning: Rgb = rgb_from_bytes(158, 214, 247)
    midday: Rgb = rgb_from_bytes(135, 206, 235)
    early_evening: Rgb = rgb_from_bytes(107, 148, 209)
    sunset: Rgb = rgb_from_bytes(250, 115, 64)

    # coordinate-free fallback
    fallback_warm: Rgb = rgb_from_bytes(255, 153, 51)
    fallback_cool: Rgb = rgb_from_bytes(135, 206, 235)
    fallback_night: Rgb = rgb_from_bytes(0, 0, 32)

    @classmethod
    def anchor_names(cls) -> tuple[str, ...]:
        """Return configurable anchor names in declaration order."""
        return tuple(f.name for f in fields(cls))

    def with_overrides(self, overrides: dict[str, Rgb]) -> SkyPalette:
        """Return a copy with selected anchors replaced."""
        unknown = sorted(set(overrides) - set(self.anchor_names()))
        if unknown:
            raise ValueError(f"unknown palette anchors: {', '.join(unknown)}")
        return replace(self, **overrides)


DEFAULT_PALETTE = SkyPalette()
