"""Dashboard pipeline: location, soil, current weather and forecast refresh."""

import logging
from typing import Protocol

from farmgpt.agronomy.soil import lookup_soil_profile
from farmgpt.forecast.aggregator import MAX_FORECAST_DAYS, aggregate_daily
from farmgpt.ingest.parsers import (
    parse_current_conditions,
    parse_forecast_samples,
    parse_location,
)
from farmgpt.ingest.provider_client import ProviderError
from farmgpt.state.app_state import AppState

logger = logging.getLogger(__name__)


class WeatherSource(Protocol):
    def current_weather(self, lat: float, lon: float) -> dict: ...

    def forecast(self, lat: float, lon: float) -> dict: ...

    def reverse_geocode(self, lat: float, lon: float) -> list: ...


class DashboardPipeline:
    def __init__(
        self,
        source: WeatherSource,
        state: AppState,
        forecast_days: int = MAX_FORECAST_DAYS,
    ):
        self.source = source
        self.state = state
        self.forecast_days = forecast_days

    def refresh(self, latitude: float | None, longitude: float | None) -> AppState:
        """Run one refresh cycle for a position.

        Steps run one at a time; the first failure stops the cycle and puts
        the state into the location error status. Calling refresh again is
        the retry. A missing position means location permission was denied.
        """
        self.state.begin_refresh()

        if latitude is None or longitude is None:
            self.state.fail("Location unavailable")
            return self.state

        try:
            # 1. LOCATION + SOIL
            raw_geo = self.source.reverse_geocode(latitude, longitude)
            location = parse_location(raw_geo, latitude, longitude)
            self.state.set_location(location, lookup_soil_profile(location.state))
            logger.info("Resolved location %s, %s", location.city, location.state)

            # 2. CURRENT WEATHER
            raw_current = self.source.current_weather(latitude, longitude)
            conditions = parse_current_conditions(raw_current)
            if conditions is not None:
                self.state.set_weather(conditions)

            # 3. FORECAST
            raw_forecast = self.source.forecast(latitude, longitude)
            if raw_forecast.get("list") is not None:
                samples = parse_forecast_samples(raw_forecast)
                daily = aggregate_daily(samples, self.forecast_days)
                self.state.set_forecast(daily)
                logger.info(
                    "Aggregated %d samples into %d days", len(samples), len(daily)
                )
        except ProviderError as e:
            self.state.fail(str(e))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.exception("Malformed provider response")
            self.state.fail(f"Malformed provider response: {e}")
        finally:
            self.state.finish()

        return self.state
