"""Client for the FarmGPT proxy endpoints."""

import logging

import httpx

from farmgpt.ingest.provider_client import ProviderError, error_payload

logger = logging.getLogger(__name__)

DEFAULT_PROXY_URL = "http://localhost:5000"


class ProxyClient:
    """Calls the proxy instead of the provider, so no API key is needed here."""

    def __init__(self, base_url: str = DEFAULT_PROXY_URL, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def current_weather(self, lat: float, lon: float) -> dict:
        return self._get("/api/weather/current", lat, lon)

    def forecast(self, lat: float, lon: float) -> dict:
        return self._get("/api/weather/forecast", lat, lon)

    def reverse_geocode(self, lat: float, lon: float) -> list:
        return self._get("/api/geocode/reverse", lat, lon)

    def _get(self, path: str, lat: float, lon: float):
        url = f"{self.base_url}{path}"
        try:
            resp = httpx.get(
                url, params={"lat": str(lat), "lon": str(lon)}, timeout=self.timeout
            )
        except httpx.RequestError as e:
            logger.error("Proxy request failed: %s -> %s", path, e)
            raise ProviderError(f"Request failed: {e}") from e
        if resp.status_code >= 400:
            logger.error("Proxy %d: %s -> %s", resp.status_code, path, resp.text)
            raise ProviderError(
                f"HTTP {resp.status_code}", resp.status_code, error_payload(resp)
            )
        return resp.json()
