"""Text and JSON renderings of forecasts, recommendations and reference tables."""

import json
from dataclasses import asdict
from datetime import datetime
from functools import partial

from farmgpt.i18n.translations import day_name, translate
from farmgpt.models.agronomy import CropRecord, Scheme, SeasonCalendar, SoilProfile
from farmgpt.models.common import Language, utc_now
from farmgpt.models.forecast import DailySummary
from farmgpt.models.weather import CurrentConditions, Location, weather_icon_name


def format_forecast_text(days: list[DailySummary], language: Language) -> str:
    t = partial(translate, language=language)
    lines = [f"=== {t('forecast')} ==="]
    if not days:
        lines.append(t("no_data"))
    for d in days:
        lines.append(
            f"{day_name(d.day_name, language)} {d.date}: "
            f"{d.temp_min}-{d.temp_max}{t('celsius')}, "
            f"{t('rainfall')} {d.rainfall}{t('mm')}, "
            f"{t('humidity')} {d.humidity}{t('percent')}, {d.description}"
        )
    return "\n".join(lines)


def format_conditions_text(
    weather: CurrentConditions, location: Location | None, language: Language
) -> str:
    t = partial(translate, language=language)
    lines = []
    if location is not None:
        lines.append(f"{t('location')}: {location.city}, {location.state}")
    lines.extend([
        f"{t('weather')}: {weather.description.capitalize()} "
        f"[{weather_icon_name(weather.icon)}]",
        f"{t('temperature')}: {weather.temp}{t('celsius')} "
        f"({t('feels_like')} {weather.feels_like}{t('celsius')})",
        f"{t('humidity')}: {weather.humidity}{t('percent')} | "
        f"{t('rainfall')}: {weather.rainfall}{t('mm')} | "
        f"{t('wind_speed')}: {weather.wind_speed} {t('kmh')} | "
        f"{t('visibility')}: {weather.visibility} {t('km')}",
    ])
    return "\n".join(lines)


def format_recommendations_text(
    crops: list[CropRecord],
    temperature: float,
    rainfall: float,
    soil_type: str,
    language: Language,
) -> str:
    t = partial(translate, language=language)
    lines = [
        f"=== {t('crop_recommendations')} ===",
        f"{t('based_on_conditions')}: {temperature}{t('celsius')}, "
        f"{rainfall}{t('mm')}, {soil_type}",
    ]
    if not crops:
        lines.append(t("no_data"))
    for crop in crops:
        lines.append(
            f"- {crop.name.resolve(language)} ({crop.season.resolve(language)}) | "
            f"{t('water_needs')}: {crop.water_needs.resolve(language)} | "
            f"{t('expected_yield')}: {crop.expected_yield.resolve(language)}"
        )
    return "\n".join(lines)


def format_soil_text(region: str, profile: SoilProfile, language: Language) -> str:
    t = partial(translate, language=language)
    return "\n".join([
        f"=== {t('soil_info')}: {region} ===",
        f"{t('soil_type')}: {profile.soil_type.resolve(language)}",
        f"{t('crops_grown')}: {profile.major_crops.resolve(language)}",
        f"{t('irrigation_type')}: {profile.irrigation.resolve(language)}",
    ])


def format_calendar_text(seasons: tuple[SeasonCalendar, ...], language: Language) -> str:
    t = partial(translate, language=language)
    lines = [f"=== {t('crop_calendar')} ==="]
    for season in seasons:
        lines.append(
            f"{season.season.resolve(language)} ({season.months.resolve(language)})"
        )
        for crop in season.crops:
            lines.append(
                f"  - {crop.name.resolve(language)}: "
                f"{t('sowing_period')} {crop.sowing.resolve(language)}, "
                f"{t('harvest_period')} {crop.harvest.resolve(language)}"
            )
    return "\n".join(lines)


def format_schemes_text(
    schemes: tuple[Scheme, ...], helpline: str, language: Language
) -> str:
    t = partial(translate, language=language)
    lines = [f"=== {t('gov_schemes')} ==="]
    for s in schemes:
        lines.extend([
            f"{s.name.resolve(language)}: {s.description.resolve(language)}",
            f"  {t('benefit')}: {s.benefit.resolve(language)}",
            f"  {t('eligibility')}: {s.eligibility.resolve(language)}",
            f"  {s.url}",
        ])
    lines.append(f"{t('helpline')}: {helpline}")
    return "\n".join(lines)


def localize(record: object, language: Language) -> dict:
    """Dict form of a record with every LocalizedText resolved to one language."""
    return _resolve(asdict(record), language)


def _resolve(value, language: Language):
    if isinstance(value, dict):
        if set(value) == {"en", "hi"}:
            return value["hi"] if language == Language.HINDI else value["en"]
        return {k: _resolve(v, language) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_resolve(v, language) for v in value]
    return value


def format_json(records: list, language: Language) -> str:
    return json.dumps(
        [localize(r, language) for r in records], indent=2, ensure_ascii=False
    )


def time_ago(timestamp: datetime, now: datetime | None = None) -> str:
    """Relative age of a community message."""
    if now is None:
        now = utc_now()
    minutes = int((now - timestamp).total_seconds() // 60)
    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    return f"{hours // 24}d ago"
