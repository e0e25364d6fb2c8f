"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from farmgpt.config.schema import AppConfig, ProviderConfig
from farmgpt.models.forecast import ForecastSample

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str):
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


def make_sample(
    date: str = "2024-06-01",
    temp_min: float = 20.0,
    temp_max: float = 28.0,
    rainfall: float = 0.0,
    humidity: int = 60,
    description: str = "clear sky",
    icon: str = "01d",
    timestamp: int = 1717243200,  # 2024-06-01 12:00 UTC, a Saturday
) -> ForecastSample:
    return ForecastSample(
        timestamp=timestamp,
        date=date,
        temp_min=temp_min,
        temp_max=temp_max,
        humidity=humidity,
        rainfall=rainfall,
        description=description,
        icon=icon,
    )


@pytest.fixture
def owm_forecast() -> dict:
    return load_fixture("owm_forecast.json")


@pytest.fixture
def owm_current() -> dict:
    return load_fixture("owm_current.json")


@pytest.fixture
def owm_reverse() -> list:
    return load_fixture("owm_reverse.json")


@pytest.fixture
def app_config() -> AppConfig:
    """Config with a test API key and a fake provider host."""
    return AppConfig(
        provider=ProviderConfig(
            api_key="test-key", base_url="https://test-owm.example.com"
        )
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "language": "hi",
        "provider": {"timeout_seconds": 10.0},
        "recommendation": {"default_temperature": 28.0},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
