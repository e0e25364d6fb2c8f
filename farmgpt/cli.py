"""CLI entry point for FarmGPT."""

import argparse
import logging

from farmgpt.agronomy.crop_calendar import CROP_CALENDAR, season_for_month
from farmgpt.agronomy.crops import recommend_crops, recommendation_inputs
from farmgpt.agronomy.schemes import KISAN_CALL_CENTRE, SCHEMES
from farmgpt.agronomy.soil import lookup_soil_profile
from farmgpt.config.loader import get_config_value, load_config, redacted_dump
from farmgpt.config.schema import AppConfig
from farmgpt.ingest.provider_client import ProviderClient
from farmgpt.ingest.proxy_client import ProxyClient
from farmgpt.models.common import Language
from farmgpt.models.weather import Location
from farmgpt.pipeline.dashboard_pipeline import DashboardPipeline
from farmgpt.reporting.formatters import (
    format_calendar_text,
    format_conditions_text,
    format_forecast_text,
    format_json,
    format_recommendations_text,
    format_schemes_text,
    format_soil_text,
)
from farmgpt.state.app_state import AppState


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="farmgpt",
        description="Weather, soil and crop information for farmers",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "--lang", choices=[lang.value for lang in Language], default=None,
        help="Output language (defaults to config)",
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the API server")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    # forecast
    fc_p = sub.add_parser("forecast", help="Current weather and daily forecast")
    fc_p.add_argument("--lat", type=float, required=True)
    fc_p.add_argument("--lon", type=float, required=True)
    fc_p.add_argument(
        "--proxy", default=None, help="Fetch through a FarmGPT server at this URL"
    )

    # recommend
    rec_p = sub.add_parser("recommend", help="Crop recommendations")
    rec_p.add_argument("--temp", type=float, default=None, help="Temperature in °C")
    rec_p.add_argument("--rainfall", type=float, default=None, help="Rainfall in mm")
    soil_group = rec_p.add_mutually_exclusive_group()
    soil_group.add_argument("--soil", default=None, help="Soil type label")
    soil_group.add_argument("--region", default=None, help="State to look up soil for")
    rec_p.add_argument("--json", action="store_true", help="Print crops as JSON")

    # soil
    soil_p = sub.add_parser("soil", help="Soil profile for a state")
    soil_p.add_argument("region")

    cal_p = sub.add_parser("calendar", help="Seasonal crop calendar")
    cal_p.add_argument(
        "--month", type=int, choices=range(1, 13), default=None,
        help="Only the season that month falls in",
    )
    sub.add_parser("schemes", help="Government schemes for farmers")

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="Dotted key, e.g. provider.timeout_seconds")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    language = Language(args.lang) if args.lang else config.language

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "forecast":
        return _cmd_forecast(config, args, language)
    elif args.command == "recommend":
        return _cmd_recommend(config, args, language)
    elif args.command == "soil":
        print(format_soil_text(args.region, lookup_soil_profile(args.region), language))
        return 0
    elif args.command == "calendar":
        seasons = (
            (season_for_month(args.month),) if args.month else CROP_CALENDAR
        )
        print(format_calendar_text(seasons, language))
        return 0
    elif args.command == "schemes":
        print(format_schemes_text(SCHEMES, KISAN_CALL_CENTRE, language))
        return 0
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config: AppConfig, args) -> int:
    from farmgpt.server import serve

    if not config.provider.api_key:
        print("WARNING: OPENWEATHERMAP_API_KEY not set; weather endpoints will return 500")
    serve(config, host=args.host, port=args.port)
    return 0


def _cmd_forecast(config: AppConfig, args, language: Language) -> int:
    if args.proxy:
        source = ProxyClient(args.proxy, timeout=config.provider.timeout_seconds)
    elif config.provider.api_key:
        source = ProviderClient.from_config(config.provider)
    else:
        print("Error: set OPENWEATHERMAP_API_KEY or pass --proxy")
        return 1

    state = AppState()
    state.set_language(language)
    DashboardPipeline(source, state, config.forecast_days).refresh(args.lat, args.lon)

    if state.show_error_screen:
        print(f"Error: {state.error}")
        return 1
    if state.weather is not None:
        print(format_conditions_text(state.weather, state.location, language))
    if state.soil_profile is not None and state.location is not None:
        print(format_soil_text(state.location.state, state.soil_profile, language))
    print(format_forecast_text(state.forecast, language))
    return 0 if state.error is None else 1


def _cmd_recommend(config: AppConfig, args, language: Language) -> int:
    defaults = config.recommendation
    location = None
    if args.region:
        location = Location(latitude=0.0, longitude=0.0, state=args.region)
    temperature, rainfall, soil_type = recommendation_inputs(None, location, defaults)
    if args.temp is not None:
        temperature = args.temp
    if args.rainfall is not None:
        rainfall = args.rainfall
    if args.soil:
        soil_type = args.soil

    crops = recommend_crops(temperature, rainfall, soil_type)
    if args.json:
        print(format_json(crops, language))
    else:
        print(format_recommendations_text(
            crops, temperature, rainfall, soil_type, language
        ))
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(redacted_dump(config))
        return 0
    elif args.config_command == "get":
        if args.key.strip() == "provider.api_key":
            print("Error: provider.api_key is not displayed")
            return 1
        try:
            print(get_config_value(config, args.key.strip()))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    print("Use: config show | config get KEY")
    return 1
