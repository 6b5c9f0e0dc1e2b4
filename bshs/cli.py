"""CLI entry point for the BSHS site weather services."""

import argparse
import json
import logging

from bshs.config.loader import get_config_value, load_config_or_default
from bshs.page import PageController
from bshs.ui.views import REMINDER_KEY, WEATHER_KEY

DEFAULT_CONFIG = "ops/configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bshs",
        description="BSHS site weather proxy and page controller",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the /api/weather proxy")
    serve_p.add_argument("--host", default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8000)

    # weather
    weather_p = sub.add_parser("weather", help="Fetch and render weather once")
    weather_p.add_argument("--proxy-url", help="Override page.proxy_url")

    # page
    page_p = sub.add_parser("page", help="Run the page controller loop")
    page_p.add_argument("--proxy-url", help="Override page.proxy_url")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. proxy.location")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs full request URLs at INFO, and the upstream URL carries the key
    logging.getLogger("httpx").setLevel(logging.WARNING)

    config = load_config_or_default(args.config)

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "weather":
        return _cmd_weather(config, args)
    elif args.command == "page":
        return _cmd_page(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _page_config(config, args):
    if args.proxy_url:
        return config.page.model_copy(update={"proxy_url": args.proxy_url})
    return config.page


def _print_weather(targets: dict[str, str]) -> None:
    print(f"{targets['weather-icon']}  {targets['weather-condition']}  {targets['weather-temp']}")
    print(f"   {targets['weather-message']}")
    print(f"   {targets['weather-details']}")
    print(f"   {targets['weather-updated']}")


def _cmd_serve(config, args) -> int:
    import uvicorn

    from bshs.proxy import create_app

    uvicorn.run(create_app(config), host=args.host, port=args.port)
    return 0


def _cmd_weather(config, args) -> int:
    controller = PageController(_page_config(config, args))
    if not controller.refresh_weather():
        print("Weather update failed (see log)")
        return 1
    _print_weather(controller.weather_text())
    alerts = controller.document.get("alert-text").text
    if alerts:
        print(f"⚠️  {alerts}")
    return 0


def _cmd_page(config, args) -> int:
    controller = PageController(_page_config(config, args))
    controller.state.subscribe(
        WEATHER_KEY, lambda key, display: _print_weather(display.as_targets())
    )
    controller.state.subscribe(
        REMINDER_KEY, lambda key, text: print(f"📌 {text}")
    )
    controller.start()
    print("Page controller running. Press Ctrl+C to stop.")
    controller.scheduler.run_forever()
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except (KeyError, IndexError, ValueError):
            print(f"Error: unknown config key {args.key}")
            return 1
        if hasattr(value, "model_dump"):
            value = value.model_dump()
        print(json.dumps(value, indent=2, ensure_ascii=False))
        return 0
    print("Error: use 'config show' or 'config get KEY'")
    return 1
