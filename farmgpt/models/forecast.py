"""OpenWeatherMap forecast data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ForecastSample:
    timestamp: int  # seconds since epoch
    date: str  # YYYY-MM-DD
    temp_min: float
    temp_max: float
    humidity: int
    rainfall: float  # mm over the 3-hour interval
    description: str
    icon: str


@dataclass(frozen=True)
class DailySummary:
    date: str  # YYYY-MM-DD
    day_name: str  # Sun..Sat
    temp_min: int
    temp_max: int
    rainfall: float
    humidity: int
    description: str
    icon: str
