"""Engine configuration loaded from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from skygradient.contracts import Rgb
from skygradient.sky.color import parse_hex_color
from skygradient.sky.gradient import BOTTOM_BIAS, FALLBACK_DARKEN, HORIZON_DARKEN
from skygradient.sky.palette import SkyPalette

ENV_PREFIX = "SKYGRADIENT_"
PALETTE_ENV_PREFIX = f"{ENV_PREFIX}PALETTE_"


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Explicitly passed configuration handle for gradient rendering."""

    palette: SkyPalette = field(default_factory=SkyPalette)
    horizon_darken: float = HORIZON_DARKEN
    bottom_bias: float = BOTTOM_BIAS
    fallback_darken: float = FALLBACK_DARKEN


def _read_unit_float(environ: Mapping[str, str], name: str, default: float) -> float:
    """Read a float in [0, 1] from the environment."""
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number in [0, 1]") from exc
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be a number in [0, 1]")
    return value


def _read_palette(environ: Mapping[str, str]) -> SkyPalette:
    """Apply `SKYGRADIENT_PALETTE_<ANCHOR>=#rrggbb` overrides to the default palette."""
    overrides: dict[str, Rgb] = {}
    for anchor in SkyPalette.anchor_names():
        name = f"{PALETTE_ENV_PREFIX}{anchor.upper()}"
        raw = environ.get(name)
        if raw:
            try:
                overrides[anchor] = parse_hex_color(raw)
            except ValueError as exc:
                raise ValueError(f"{name} must be a #rrggbb color") from exc
    return SkyPalette().with_overrides(overrides)


def load_config(environ: Mapping[str, str] | None = None) -> EngineConfig:
    """Build `EngineConfig` from environment variables (defaults to `os.environ`)."""
    env = os.environ if environ is None else environ
    return EngineConfig(
        palette=_read_palette(env),
        horizon_darken=_read_unit_float(env, f"{ENV_PREFIX}HORIZON_DARKEN", HORIZON_DARKEN),
        bottom_bias=_read_unit_float(env, f"{ENV_PREFIX}BOTTOM_BIAS", BOTTOM_BIAS),
        fallback_darken=_read_unit_float(env, f"{ENV_PREFIX}FALLBACK_DARKEN", FALLBACK_DARKEN),
    )
