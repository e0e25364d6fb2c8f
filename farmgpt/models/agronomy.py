"""Static agronomy reference models: crops, soils, seasons and schemes."""

from dataclasses import dataclass

from farmgpt.models.common import LocalizedText


@dataclass(frozen=True)
class CropRecord:
    name: LocalizedText
    temp_min: float  # degrees C, inclusive
    temp_max: float
    rainfall_min: float  # mm, inclusive
    rainfall_max: float
    soil_types: tuple[str, ...]
    season: LocalizedText
    water_needs: LocalizedText
    expected_yield: LocalizedText
    icon: str = "leaf"


@dataclass(frozen=True)
class SoilProfile:
    soil_type: LocalizedText
    major_crops: LocalizedText
    irrigation: LocalizedText


@dataclass(frozen=True)
class CalendarCrop:
    name: LocalizedText
    sowing: LocalizedText
    harvest: LocalizedText
    icon: str = "leaf"


@dataclass(frozen=True)
class SeasonCalendar:
    season: LocalizedText
    months: LocalizedText
    crops: tuple[CalendarCrop, ...]


@dataclass(frozen=True)
class Scheme:
    scheme_id: str
    name: LocalizedText
    description: LocalizedText
    benefit: LocalizedText
    eligibility: LocalizedText
    url: str
