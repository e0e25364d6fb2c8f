"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from farmgpt.models.common import Language

OPENWEATHERMAP_BASE_URL = "https://api.openweathermap.org"


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    base_url: str = OPENWEATHERMAP_BASE_URL
    units: str = "metric"
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=0, ge=0)
    retry_base_delay: float = Field(default=1.0, ge=0.0)


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "0.0.0.0"
    port: int = Field(default=5000, ge=1, le=65535)
    cors_origins: list[str] = ["*"]


class RecommendationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_temperature: float = 25.0
    default_rainfall: float = Field(default=50.0, ge=0.0)
    default_soil_type: str = "Alluvial Soil"


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    language: Language = Language.ENGLISH
    forecast_days: int = Field(default=7, ge=1, le=7)
    provider: ProviderConfig = ProviderConfig()
    server: ServerConfig = ServerConfig()
    recommendation: RecommendationConfig = RecommendationConfig()
