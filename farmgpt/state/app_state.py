"""Application state: language, location, weather and forecast for one user.

The state is passed explicitly to the services that change it; each mutation
goes through a method so status transitions stay consistent.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from farmgpt.models.agronomy import SoilProfile
from farmgpt.models.common import Language, utc_now
from farmgpt.models.forecast import DailySummary
from farmgpt.models.weather import CurrentConditions, Location

logger = logging.getLogger(__name__)


class LoadStatus(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    LOCATION_ERROR = "location_error"


@dataclass(frozen=True)
class CommunityMessage:
    author: str
    text: str
    timestamp: datetime


@dataclass
class AppState:
    language: Language = Language.ENGLISH
    status: LoadStatus = LoadStatus.IDLE
    location: Location | None = None
    soil_profile: SoilProfile | None = None
    weather: CurrentConditions | None = None
    forecast: list[DailySummary] = field(default_factory=list)
    messages: list[CommunityMessage] = field(default_factory=list)
    error: str | None = None

    def set_language(self, language: Language | str) -> None:
        self.language = Language(language)

    def begin_refresh(self) -> None:
        self.status = LoadStatus.LOADING
        self.error = None

    def set_location(self, location: Location, soil_profile: SoilProfile) -> None:
        self.location = location
        self.soil_profile = soil_profile

    def set_weather(self, weather: CurrentConditions) -> None:
        self.weather = weather

    def set_forecast(self, forecast: list[DailySummary]) -> None:
        self.forecast = list(forecast)

    def fail(self, reason: str) -> None:
        """Enter the location error state; previously loaded data is kept."""
        logger.warning("Dashboard refresh failed: %s", reason)
        self.status = LoadStatus.LOCATION_ERROR
        self.error = reason

    def finish(self) -> None:
        if self.status == LoadStatus.LOADING:
            self.status = LoadStatus.READY

    @property
    def show_error_screen(self) -> bool:
        """The retry screen only replaces the dashboard when nothing was loaded."""
        return self.status == LoadStatus.LOCATION_ERROR and self.weather is None

    def add_community_message(
        self, text: str, author: str, timestamp: datetime | None = None
    ) -> CommunityMessage | None:
        """Post a message to the top of the board. Blank text is ignored."""
        text = text.strip()
        if not text:
            return None
        message = CommunityMessage(
            author=author, text=text, timestamp=timestamp or utc_now()
        )
        self.messages.insert(0, message)
        return message
