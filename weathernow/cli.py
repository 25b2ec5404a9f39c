"""CLI entry point for the weather dashboard."""

import argparse
import asyncio
import json
import logging
from pathlib import Path

from weathernow.chart.svg import render_sparkline_svg
from weathernow.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from weathernow.config.schema import WeatherNowConfig
from weathernow.models.location import Location
from weathernow.reporting.view import build_dashboard_view, format_dashboard_text
from weathernow.state.session import WeatherSession

DEFAULT_CONFIG = "weathernow.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weathernow",
        description="Weather dashboard: search places and show forecasts",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # search
    search_p = sub.add_parser("search", help="Look up place suggestions")
    search_p.add_argument("query", help="Place name")

    # forecast
    fc_p = sub.add_parser("forecast", help="Show the dashboard for a place")
    fc_p.add_argument("--lat", type=float)
    fc_p.add_argument("--lon", type=float)
    fc_p.add_argument("--name", default=None, help="Display name for --lat/--lon")
    fc_p.add_argument("--favorite", default=None, help="Use a favorite by name")
    fc_p.add_argument("--query", default=None, help="Search and use a suggestion")
    fc_p.add_argument(
        "--pick", type=int, default=0, help="Suggestion index for --query"
    )
    fc_p.add_argument("--json", action="store_true", help="Print view as JSON")
    fc_p.add_argument("--svg", default=None, help="Write sparkline SVG here")

    # favorites
    sub.add_parser("favorites", help="List favorite places")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "search":
        return asyncio.run(_cmd_search(config, args))
    elif args.command == "forecast":
        return asyncio.run(_cmd_forecast(config, args))
    elif args.command == "favorites":
        return _cmd_favorites(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


async def _cmd_search(config: WeatherNowConfig, args) -> int:
    session = WeatherSession.from_config(config)
    try:
        session.type_query(args.query)
        suggestions = await session.search.flush()
    finally:
        session.close()
    if not suggestions:
        print("No matches")
        return 1
    for i, s in enumerate(suggestions):
        print(f"[{i}] {s.name} ({s.lat:.4f}, {s.lon:.4f})")
    return 0


async def _cmd_forecast(config: WeatherNowConfig, args) -> int:
    session = WeatherSession.from_config(config)
    try:
        if args.query:
            session.type_query(args.query)
            suggestions = await session.search.flush()
            if not 0 <= args.pick < len(suggestions):
                print(f"No suggestion #{args.pick} for {args.query!r}")
                return 1
            state = await session.choose_suggestion(suggestions[args.pick])
        elif args.favorite:
            try:
                state = await session.choose_favorite(args.favorite)
            except KeyError as e:
                print(f"Error: {e.args[0]}")
                return 1
        elif args.lat is not None and args.lon is not None:
            name = args.name or f"{args.lat:.4f}, {args.lon:.4f}"
            state = await session.choose_location(
                Location(name=name, lat=args.lat, lon=args.lon)
            )
        else:
            state = await session.refresh()
    finally:
        session.close()

    view = build_dashboard_view(state, config)
    if args.json:
        print(json.dumps(view.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(format_dashboard_text(view))

    if args.svg:
        if view.sparkline is None:
            print("No hourly data, sparkline not written")
        else:
            svg = render_sparkline_svg(
                view.sparkline.geometry,
                view.sparkline.samples,
                color=view.theme.curve_color,
                label_every=config.chart.label_every,
            )
            Path(args.svg).write_text(svg)
            print(f"Sparkline written to {args.svg}")

    return 0 if state.forecast is not None else 1


def _cmd_favorites(config: WeatherNowConfig) -> int:
    for fav in config.favorites:
        print(f"{fav.name} ({fav.lat:.4f}, {fav.lon:.4f})")
    return 0


def _cmd_config(config: WeatherNowConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
        except Exception as e:
            print(f"Error: {e}")
            return 1
        save_config(new_config, args.config)
        print(f"Set {key} = {get_config_value(new_config, key.strip())}")
        return 0
    else:
        print("Use: config show | config set key=value")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
