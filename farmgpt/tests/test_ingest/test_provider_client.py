"""Tests for the OpenWeatherMap client with mocked httpx."""

from unittest.mock import patch

import httpx
import pytest
import respx

from farmgpt.config.schema import ProviderConfig
from farmgpt.ingest.provider_client import ProviderClient, ProviderError

BASE = "https://test-owm.example.com"


@pytest.fixture
def owm() -> ProviderClient:
    return ProviderClient(api_key="test-key", base_url=BASE)


class TestCurrentWeather:
    @respx.mock
    def test_success(self, owm: ProviderClient, owm_current: dict):
        route = respx.get(f"{BASE}/data/2.5/weather").mock(
            return_value=httpx.Response(200, json=owm_current)
        )
        result = owm.current_weather(26.85, 80.95)
        assert result["main"]["temp"] == 31.46

        params = route.calls[0].request.url.params
        assert params["lat"] == "26.85"
        assert params["lon"] == "80.95"
        assert params["appid"] == "test-key"
        assert params["units"] == "metric"

    @respx.mock
    def test_upstream_error_carries_status_and_body(self, owm: ProviderClient):
        respx.get(f"{BASE}/data/2.5/weather").mock(
            return_value=httpx.Response(
                401, json={"cod": 401, "message": "Invalid API key"}
            )
        )
        with pytest.raises(ProviderError) as exc_info:
            owm.current_weather(1, 2)
        assert exc_info.value.status_code == 401
        assert exc_info.value.payload == {"cod": 401, "message": "Invalid API key"}

    @respx.mock
    def test_non_json_error_body(self, owm: ProviderClient):
        respx.get(f"{BASE}/data/2.5/weather").mock(
            return_value=httpx.Response(502, text="Bad Gateway")
        )
        with pytest.raises(ProviderError) as exc_info:
            owm.current_weather(1, 2)
        assert exc_info.value.status_code == 502
        assert exc_info.value.payload == {"error": "Bad Gateway"}

    @respx.mock
    def test_transport_error(self, owm: ProviderClient):
        respx.get(f"{BASE}/data/2.5/weather").mock(
            side_effect=httpx.ConnectError("connection refused")
        )
        with pytest.raises(ProviderError) as exc_info:
            owm.current_weather(1, 2)
        assert exc_info.value.status_code is None


class TestForecast:
    @respx.mock
    def test_success(self, owm: ProviderClient, owm_forecast: dict):
        respx.get(f"{BASE}/data/2.5/forecast").mock(
            return_value=httpx.Response(200, json=owm_forecast)
        )
        result = owm.forecast(26.85, 80.95)
        assert len(result["list"]) == 10

    @respx.mock
    def test_no_retry_by_default(self, owm: ProviderClient):
        route = respx.get(f"{BASE}/data/2.5/forecast").mock(
            return_value=httpx.Response(503)
        )
        with pytest.raises(ProviderError):
            owm.forecast(1, 2)
        assert route.call_count == 1

    @respx.mock
    def test_retry_on_503_when_enabled(self, owm_forecast: dict):
        client = ProviderClient(
            api_key="test-key", base_url=BASE, max_retries=1, retry_base_delay=0.01
        )
        route = respx.get(f"{BASE}/data/2.5/forecast").mock(
            side_effect=[
                httpx.Response(503),
                httpx.Response(200, json=owm_forecast),
            ]
        )
        with patch("farmgpt.ingest.provider_client.time.sleep"):
            result = client.forecast(1, 2)
        assert "list" in result
        assert route.call_count == 2


class TestReverseGeocode:
    @respx.mock
    def test_success(self, owm: ProviderClient, owm_reverse: list):
        route = respx.get(f"{BASE}/geo/1.0/reverse").mock(
            return_value=httpx.Response(200, json=owm_reverse)
        )
        result = owm.reverse_geocode(26.85, 80.95)
        assert result[0]["state"] == "Uttar Pradesh"
        assert route.calls[0].request.url.params["limit"] == "1"


class TestFromConfig:
    def test_fields(self):
        client = ProviderClient.from_config(
            ProviderConfig(api_key="k", base_url=f"{BASE}/", timeout_seconds=5.0)
        )
        assert client.api_key == "k"
        assert client.base_url == BASE
        assert client.timeout == 5.0
        assert client.max_retries == 0
