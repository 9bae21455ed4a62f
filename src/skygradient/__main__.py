"""Command-line entrypoint for skygradient."""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path

from skygradient import __version__
from skygradient.astro.solar import solar_position
from skygradient.config import load_config
from skygradient.contracts import GeoCoordinate, SunTimes
from skygradient.sky.render import RenderSnapshot, SkyState, evaluate
from skygradient.time.instants import to_utc
from skygradient.weather.observation import WeatherObservation


def _parse_iso_datetime(value: str) -> datetime:
    """Parse ISO datetime string and normalize to aware UTC."""
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid datetime: {value}") from exc
    return to_utc(parsed)


def _state_to_dict(state: SkyState) -> dict[str, object]:
    """Serialize a render result for printing."""
    out: dict[str, object] = {"gradient": state.gradient.to_dict()}
    if state.position is not None:
        out["position"] = state.position.to_dict()
    if state.classification is not None:
        out["phase"] = state.classification.phase.value
        out["blend"] = state.classification.blend
        out["day_fraction"] = state.classification.day_fraction
    return out


def build_parser() -> argparse.ArgumentParser:
    """Create and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="skygradient",
        description="Solar position and sky gradient command-line interface.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )

    subparsers = parser.add_subparsers(dest="command")

    position = subparsers.add_parser("position", help="Print solar elevation/azimuth.")
    position.add_argument("--lat", type=float, required=True)
    position.add_argument("--lon", type=float, required=True)
    position.add_argument("--time-utc", type=_parse_iso_datetime, default=None)

    gradient = subparsers.add_parser("gradient", help="Print the sky gradient for one instant.")
    gradient.add_argument("--lat", type=float, default=None)
    gradient.add_argument("--lon", type=float, default=None)
    gradient.add_argument("--time-utc", type=_parse_iso_datetime, default=None)
    gradient.add_argument("--sunrise-utc", type=_parse_iso_datetime, default=None)
    gradient.add_argument("--sunset-utc", type=_parse_iso_datetime, default=None)

    weather = subparsers.add_parser(
        "weather",
        help="Summarize a saved weather-provider JSON payload.",
    )
    weather.add_argument("payload", type=Path)
    weather.add_argument("--time-utc", type=_parse_iso_datetime, default=None)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    now = getattr(args, "time_utc", None) or datetime.now(timezone.utc)

    if args.command == "position":
        try:
            coord = GeoCoordinate(args.lat, args.lon)
        except ValueError as exc:
            parser.error(str(exc))
        print(json.dumps(solar_position(now, coord.lat_deg, coord.lon_deg).to_dict()))
        return 0

    if args.command == "gradient":
        if (args.lat is None) != (args.lon is None):
            parser.error("--lat and --lon must be provided together")
        if (args.sunrise_utc is None) != (args.sunset_utc is None):
            parser.error("--sunrise-utc and --sunset-utc must be provided together")
        try:
            config = load_config()
            coord = None if args.lat is None else GeoCoordinate(args.lat, args.lon)
        except ValueError as exc:
            parser.error(str(exc))
        sun_times = None
        if args.sunrise_utc is not None:
            sun_times = SunTimes(args.sunrise_utc, args.sunset_utc)
        state = evaluate(RenderSnapshot(now=now, coordinate=coord, sun_times=sun_times), config)
        print(json.dumps(_state_to_dict(state)))
        return 0

    if args.command == "weather":
        try:
            payload = json.loads(args.payload.read_text(encoding="utf-8"))
            observation = WeatherObservation.from_provider_payload(payload)
            config = load_config()
        except (OSError, ValueError) as exc:
            parser.error(str(exc))
        state = evaluate(observation.render_snapshot(now), config)
        print(
            json.dumps(
                {"summary": observation.summary().to_display_dict(), **_state_to_dict(state)}
            )
        )
        return 0

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
