"""OpenWeatherMap API client for current weather, forecast and reverse geocoding."""

import logging
import time

import httpx

from farmgpt.config.schema import OPENWEATHERMAP_BASE_URL, ProviderConfig

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """Raised when the weather provider (or the proxy in front of it) fails.

    status_code and payload carry the upstream response when there was one,
    so callers can relay it unchanged.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        payload: object | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


def error_payload(resp: httpx.Response) -> object:
    try:
        return resp.json()
    except ValueError:
        return {"error": resp.text}


class ProviderClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHERMAP_BASE_URL,
        units: str = "metric",
        timeout: float = 30.0,
        max_retries: int = 0,
        retry_base_delay: float = 1.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    @classmethod
    def from_config(cls, config: ProviderConfig) -> "ProviderClient":
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            units=config.units,
            timeout=config.timeout_seconds,
            max_retries=config.max_retries,
            retry_base_delay=config.retry_base_delay,
        )

    def current_weather(self, lat: str | float, lon: str | float) -> dict:
        return self._get(
            "/data/2.5/weather",
            {"lat": lat, "lon": lon, "appid": self.api_key, "units": self.units},
        )

    def forecast(self, lat: str | float, lon: str | float) -> dict:
        """Fetch the 5-day, 3-hour interval forecast."""
        return self._get(
            "/data/2.5/forecast",
            {"lat": lat, "lon": lon, "appid": self.api_key, "units": self.units},
        )

    def reverse_geocode(self, lat: str | float, lon: str | float) -> list:
        return self._get(
            "/geo/1.0/reverse",
            {"lat": lat, "lon": lon, "limit": 1, "appid": self.api_key},
        )

    def _get(self, path: str, params: dict):
        """GET a provider endpoint and return the decoded JSON body.

        Retries on 503/429 with exponential backoff when max_retries > 0.
        """
        url = f"{self.base_url}{path}"

        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(url, params=params, timeout=self.timeout)
            except httpx.RequestError as e:
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "Provider request error, retrying in %.1fs: %s", delay, e
                    )
                    time.sleep(delay)
                    continue
                logger.error("Provider request failed: %s -> %s", path, e)
                raise ProviderError(f"Request failed: {e}") from e

            if resp.status_code in (503, 429) and attempt < self.max_retries:
                delay = self.retry_base_delay * (2**attempt)
                logger.warning(
                    "Provider %s returned %d, retrying in %.1fs (attempt %d/%d)",
                    path, resp.status_code, delay, attempt + 1, self.max_retries,
                )
                time.sleep(delay)
                continue

            if resp.status_code >= 400:
                logger.error("Provider %d: %s -> %s", resp.status_code, path, resp.text)
                raise ProviderError(
                    f"HTTP {resp.status_code}", resp.status_code, error_payload(resp)
                )
            return resp.json()

        raise AssertionError("unreachable")
