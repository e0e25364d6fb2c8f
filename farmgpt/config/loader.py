"""YAML config loader with environment API key injection."""

import os
from pathlib import Path
from typing import Any

import yaml

from farmgpt.config.schema import AppConfig

API_KEY_ENV = "OPENWEATHERMAP_API_KEY"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    With no path every section takes its defaults. The provider API key is
    taken from OPENWEATHERMAP_API_KEY when the file leaves it empty.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    provider = raw.setdefault("provider", {}) or {}
    raw["provider"] = provider
    if not provider.get("api_key"):
        provider["api_key"] = os.environ.get(API_KEY_ENV, "")

    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Look up a value in the JSON form of the config.

    Sections are separated by dots and list items are addressed by index,
    e.g. 'server.port' or 'server.cors_origins.0'. Enums come back as their
    string values.
    """
    value: Any = config.model_dump(mode="json")
    for part in dotted_key.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        elif isinstance(value, list) and part.isdigit() and int(part) < len(value):
            value = value[int(part)]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return value


def redacted_dump(config: AppConfig) -> str:
    """JSON dump of the config with the provider API key masked."""
    masked = config.model_copy(
        update={
            "provider": config.provider.model_copy(
                update={"api_key": "***" if config.provider.api_key else ""}
            )
        }
    )
    return masked.model_dump_json(indent=2)
