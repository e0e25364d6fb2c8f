"""FarmGPT API: weather provider proxy plus forecast and agronomy endpoints."""

import logging
import os
from dataclasses import asdict
from datetime import datetime
from typing import Callable

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from farmgpt.agronomy.crop_calendar import CROP_CALENDAR, season_for_month
from farmgpt.agronomy.crops import recommend_crops
from farmgpt.agronomy.schemes import KISAN_CALL_CENTRE, SCHEMES, find_scheme
from farmgpt.agronomy.soil import lookup_soil_profile
from farmgpt.config.loader import load_config
from farmgpt.config.schema import AppConfig
from farmgpt.forecast.aggregator import aggregate_daily
from farmgpt.ingest.parsers import parse_forecast_samples
from farmgpt.ingest.provider_client import ProviderClient, ProviderError
from farmgpt.models.common import Language, utc_now, utc_now_iso
from farmgpt.reporting.formatters import localize, time_ago
from farmgpt.state.app_state import AppState, CommunityMessage

logger = logging.getLogger(__name__)

CONFIG_ENV = "FARMGPT_CONFIG"

MISSING_COORDS = "lat and lon are required"


class CommunityPost(BaseModel):
    model_config = {"extra": "forbid"}

    text: str
    author: str = Field(default="Farmer", min_length=1)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _message_json(message: CommunityMessage, now: datetime) -> dict:
    return {
        "author": message.author,
        "text": message.text,
        "timestamp": message.timestamp.isoformat(),
        "age": time_ago(message.timestamp, now),
    }


def create_app(
    config: AppConfig | None = None, client: ProviderClient | None = None
) -> FastAPI:
    """Build the API app. Tests pass a config and a client; serving loads both."""
    if config is None:
        config = load_config(os.environ.get(CONFIG_ENV))
    if client is None:
        client = ProviderClient.from_config(config.provider)

    state = AppState()
    state.set_language(config.language)

    app = FastAPI(title="FarmGPT API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def relay(
        fetch: Callable[[str, str], object],
        lat: str | None,
        lon: str | None,
        missing_key_message: str,
        failure_message: str,
        transform: Callable[[object], object] | None = None,
    ):
        """Forward one provider call, mapping failures to JSON error bodies."""
        if not lat or not lon:
            return _error(400, MISSING_COORDS)
        if not config.provider.api_key:
            return _error(500, missing_key_message)
        try:
            data = fetch(lat, lon)
            return transform(data) if transform else data
        except ProviderError as e:
            if e.status_code is not None:
                return JSONResponse(status_code=e.status_code, content=e.payload)
            logger.error("%s: %s", failure_message, e)
            return _error(500, failure_message)
        except Exception:
            logger.exception(failure_message)
            return _error(500, failure_message)

    # ── Provider proxy ──────────────────────────────────────────────

    @app.get("/api/weather/current")
    def get_current_weather(lat: str | None = None, lon: str | None = None):
        return relay(
            client.current_weather, lat, lon,
            "Weather API key not configured", "Failed to fetch weather data",
        )

    @app.get("/api/weather/forecast")
    def get_forecast(lat: str | None = None, lon: str | None = None):
        return relay(
            client.forecast, lat, lon,
            "Weather API key not configured", "Failed to fetch forecast data",
        )

    @app.get("/api/geocode/reverse")
    def get_reverse_geocode(lat: str | None = None, lon: str | None = None):
        return relay(
            client.reverse_geocode, lat, lon,
            "API key not configured", "Failed to reverse geocode",
        )

    # ── Derived data ────────────────────────────────────────────────

    @app.get("/api/forecast/daily")
    def get_daily_forecast(lat: str | None = None, lon: str | None = None):
        """Forecast aggregated into daily summaries."""

        def to_daily(raw):
            days = aggregate_daily(parse_forecast_samples(raw), config.forecast_days)
            return [asdict(d) for d in days]

        return relay(
            client.forecast, lat, lon,
            "Weather API key not configured", "Failed to fetch forecast data",
            transform=to_daily,
        )

    @app.get("/api/crops/recommendations")
    def get_recommendations(
        temperature: float | None = None,
        rainfall: float | None = None,
        soil_type: str | None = None,
        region: str | None = None,
        lang: Language | None = None,
    ):
        """Crops matching the conditions; unset inputs use configured defaults."""
        defaults = config.recommendation
        language = lang or config.language
        if soil_type is None:
            soil_type = (
                lookup_soil_profile(region).soil_type.en
                if region is not None
                else defaults.default_soil_type
            )
        if temperature is None:
            temperature = defaults.default_temperature
        if rainfall is None:
            rainfall = defaults.default_rainfall

        crops = recommend_crops(temperature, rainfall, soil_type)
        return {
            "temperature": temperature,
            "rainfall": rainfall,
            "soil_type": soil_type,
            "crops": [localize(c, language) for c in crops],
        }

    @app.get("/api/soil")
    def get_soil_profile(region: str = "", lang: Language | None = None):
        profile = lookup_soil_profile(region)
        return {"region": region, **localize(profile, lang or config.language)}

    @app.get("/api/crop-calendar")
    def get_crop_calendar(month: int | None = None, lang: Language | None = None):
        """All seasons, or only the season a month (1-12) falls in."""
        seasons = CROP_CALENDAR
        if month is not None:
            try:
                seasons = (season_for_month(month),)
            except ValueError as e:
                return _error(400, str(e))
        return [localize(s, lang or config.language) for s in seasons]

    @app.get("/api/schemes")
    def get_schemes(lang: Language | None = None):
        return {
            "helpline": KISAN_CALL_CENTRE,
            "schemes": [localize(s, lang or config.language) for s in SCHEMES],
        }

    @app.get("/api/schemes/{scheme_id}")
    def get_scheme(scheme_id: str, lang: Language | None = None):
        scheme = find_scheme(scheme_id)
        if scheme is None:
            return _error(404, f"Unknown scheme: {scheme_id}")
        return localize(scheme, lang or config.language)

    # ── Community board ─────────────────────────────────────────────

    @app.get("/api/community/messages")
    def get_community_messages():
        """Messages newest first, each with its relative age."""
        now = utc_now()
        return [_message_json(m, now) for m in state.messages]

    @app.post("/api/community/messages", status_code=201)
    def post_community_message(post: CommunityPost):
        message = state.add_community_message(post.text, post.author)
        if message is None:
            return _error(400, "Message text is required")
        return _message_json(message, utc_now())

    @app.get("/api/health")
    def get_health():
        return {
            "ok": True,
            "api_key_configured": bool(config.provider.api_key),
            "timestamp": utc_now_iso(),
        }

    return app


def serve(
    config: AppConfig | None = None, host: str | None = None, port: int | None = None
) -> None:
    """Run the API with uvicorn; host and port default to the server config."""
    if config is None:
        config = load_config(os.environ.get(CONFIG_ENV))
    uvicorn.run(
        create_app(config),
        host=host or config.server.host,
        port=port or config.server.port,
    )


app = create_app()


if __name__ == "__main__":
    serve()
