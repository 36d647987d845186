"""CLI entry point for the forecast viewer."""

import argparse
import logging

from pydantic import ValidationError

from forecastview.app import build_controller
from forecastview.config.loader import get_config_value, load_config, set_config_value
from forecastview.config.schema import AppConfig
from forecastview.core.controller import ViewStateController
from forecastview.errors import ForecastViewError
from forecastview.models.view import Screen
from forecastview.render.formatters import (
    format_city_selection,
    format_forecast,
    format_screen,
    format_today,
)

DEFAULT_CONFIG = "forecastview.yaml"

BROWSE_HELP = (
    "Commands: start, select <city or number>, forecast, today, "
    "change, back, retry, home, help, quit"
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="forecastview",
        description="NWS weather forecasts for a fixed set of US cities",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("cities", help="List available cities")

    today_p = sub.add_parser("today", help="Show today's weather for a city")
    today_p.add_argument("city")

    forecast_p = sub.add_parser("forecast", help="Show the multi-day forecast")
    forecast_p.add_argument("city")
    forecast_p.add_argument("--days", type=int, help="Maximum day cards")

    sub.add_parser("browse", help="Interactive screen navigation")

    serve_p = sub.add_parser("serve", help="Run the HTTP dashboard")
    serve_p.add_argument("--host", default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8777)

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="Dotted key, e.g. display.max_days")
    set_p = config_sub.add_parser("set", help="Validate a config change")
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

    if args.command == "cities":
        return _cmd_cities(config)
    elif args.command == "today":
        return _cmd_today(config, args)
    elif args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "browse":
        return _cmd_browse(config)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _load_city(controller: ViewStateController, city: str) -> bool:
    if city not in controller.directory:
        print(f"Error: unknown city {city!r}")
        print(format_city_selection(controller.cities()))
        return False
    controller.start()
    state = controller.select_city(city)
    if state.screen == Screen.ERROR:
        print(format_screen(controller))
        return False
    return True


def _cmd_cities(config: AppConfig) -> int:
    for c in config.cities:
        print(f"{c.name}: {c.region_code} {c.grid_x},{c.grid_y}")
    return 0


def _cmd_today(config, args) -> int:
    controller = build_controller(config)
    if not _load_city(controller, args.city):
        return 1
    print(format_today(controller.today_view()))
    return 0


def _cmd_forecast(config, args) -> int:
    if args.days is not None:
        try:
            config = set_config_value(config, "display.max_days", args.days)
        except ValidationError as e:
            print(f"Error: invalid --days: {e.errors()[0]['msg']}")
            return 1
    controller = build_controller(config)
    if not _load_city(controller, args.city):
        return 1
    controller.view_forecast()
    print(format_forecast(controller.forecast_view()))
    return 0


def _cmd_browse(config: AppConfig, input_fn=input) -> int:
    controller = build_controller(config)
    controller.prewarm()
    print(format_screen(controller))
    print(BROWSE_HELP)

    while True:
        try:
            line = input_fn("> ").strip()
        except EOFError:
            return 0
        if not line:
            continue
        command, _, arg = line.partition(" ")
        if command in ("quit", "exit"):
            return 0
        if command == "help":
            print(BROWSE_HELP)
            continue
        try:
            _dispatch(controller, command, arg.strip())
        except ForecastViewError as e:
            print(f"Error: {e}")
            continue
        print(format_screen(controller))


def _dispatch(controller: ViewStateController, command: str, arg: str) -> None:
    actions = {
        "start": controller.start,
        "forecast": controller.view_forecast,
        "today": controller.view_today,
        "change": controller.change_city,
        "back": controller.back,
        "retry": controller.retry,
        "home": controller.home,
    }
    if command == "select":
        names = controller.cities()
        if arg.isdigit() and 1 <= int(arg) <= len(names):
            arg = names[int(arg) - 1]
        controller.select_city(arg)
    elif command in actions:
        actions[command]()
    else:
        print(f"Unknown command: {command}")


def _cmd_serve(config, args) -> int:
    import uvicorn

    from forecastview.dashboard import create_app

    controller = build_controller(config)
    controller.prewarm()
    uvicorn.run(create_app(controller), host=args.host, port=args.port)
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get key | config set key=value")
        return 1
