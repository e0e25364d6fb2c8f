"""Collapse 3-hour forecast samples into daily summaries."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Iterable

from farmgpt.i18n.translations import DAY_NAMES
from farmgpt.models.common import round_half_up
from farmgpt.models.forecast import DailySummary, ForecastSample

MAX_FORECAST_DAYS = 7


@dataclass
class _DayAccumulator:
    date: str
    day_name: str
    temp_min: float
    temp_max: float
    rainfall: float
    humidity: int
    description: str
    icon: str

    def add(self, sample: ForecastSample) -> None:
        self.temp_min = min(self.temp_min, sample.temp_min)
        self.temp_max = max(self.temp_max, sample.temp_max)
        self.rainfall += sample.rainfall

    def summary(self) -> DailySummary:
        return DailySummary(
            date=self.date,
            day_name=self.day_name,
            temp_min=int(round_half_up(self.temp_min)),
            temp_max=int(round_half_up(self.temp_max)),
            rainfall=round_half_up(self.rainfall, 1),
            humidity=self.humidity,
            description=self.description,
            icon=self.icon,
        )


def weekday_abbreviation(timestamp: int) -> str:
    """Sun..Sat for a UTC epoch timestamp."""
    # isoweekday: Monday=1 .. Sunday=7; DAY_NAMES starts at Sunday
    return DAY_NAMES[datetime.fromtimestamp(timestamp, UTC).isoweekday() % 7]


def aggregate_daily(
    samples: Iterable[ForecastSample], max_days: int = MAX_FORECAST_DAYS
) -> list[DailySummary]:
    """Aggregate interval samples into at most max_days daily summaries.

    Min/max temperature and summed rainfall cover every sample of a date.
    Humidity, description and icon come from the first sample seen for the
    date. Summaries keep the order in which each date first appeared, and
    truncation keeps the first max_days dates encountered.
    """
    days: dict[str, _DayAccumulator] = {}

    for sample in samples:
        day = days.get(sample.date)
        if day is None:
            days[sample.date] = _DayAccumulator(
                date=sample.date,
                day_name=weekday_abbreviation(sample.timestamp),
                temp_min=sample.temp_min,
                temp_max=sample.temp_max,
                rainfall=sample.rainfall,
                humidity=sample.humidity,
                description=sample.description,
                icon=sample.icon,
            )
        else:
            day.add(sample)

    return [day.summary() for day in list(days.values())[:max_days]]
