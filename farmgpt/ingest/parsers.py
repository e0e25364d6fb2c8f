"""Turn raw provider payloads into forecast, weather and location models."""

import logging
from datetime import UTC, datetime

from farmgpt.models.common import round_half_up
from farmgpt.models.forecast import ForecastSample
from farmgpt.models.weather import UNKNOWN, CurrentConditions, Location

logger = logging.getLogger(__name__)

DEFAULT_ICON = "01d"
DEFAULT_VISIBILITY_M = 10000


def parse_forecast_samples(raw: dict) -> list[ForecastSample]:
    """Extract the 3-hour interval samples from a forecast response.

    A response without a "list" yields no samples.
    """
    samples: list[ForecastSample] = []
    for item in raw.get("list") or []:
        main = item.get("main") or {}
        weather = (item.get("weather") or [{}])[0] or {}
        timestamp = int(item.get("dt") or 0)
        samples.append(
            ForecastSample(
                timestamp=timestamp,
                date=_sample_date(item, timestamp),
                temp_min=float(main.get("temp_min") or 0.0),
                temp_max=float(main.get("temp_max") or 0.0),
                humidity=int(main.get("humidity") or 0),
                rainfall=float(_rain(item, "3h")),
                description=weather.get("description") or "",
                icon=weather.get("icon") or DEFAULT_ICON,
            )
        )
    return samples


def _sample_date(item: dict, timestamp: int) -> str:
    """Date of a sample: the provider's dt_txt date part when present.

    dt_txt is "YYYY-MM-DD HH:MM:SS" in UTC; falling back to the timestamp in
    UTC gives the same calendar day.
    """
    dt_txt = item.get("dt_txt")
    if dt_txt:
        return dt_txt.split(" ")[0]
    return datetime.fromtimestamp(timestamp, UTC).strftime("%Y-%m-%d")


def _rain(item: dict, window: str) -> float:
    rain = item.get("rain") or {}
    return rain.get(window) or 0


def parse_current_conditions(raw: dict) -> CurrentConditions | None:
    """Convert a current-weather response for display.

    Wind is converted from m/s to km/h and visibility from metres to km.
    Returns None when the response carries no "main" block.
    """
    main = raw.get("main")
    if not main:
        logger.warning("Current weather response has no main block")
        return None

    weather = (raw.get("weather") or [{}])[0] or {}
    wind_speed = (raw.get("wind") or {}).get("speed") or 0
    visibility = raw.get("visibility") or DEFAULT_VISIBILITY_M

    return CurrentConditions(
        temp=int(round_half_up(main.get("temp") or 0)),
        feels_like=int(round_half_up(main.get("feels_like") or 0)),
        humidity=int(main.get("humidity") or 0),
        pressure=int(main.get("pressure") or 0),
        wind_speed=int(round_half_up(wind_speed * 3.6)),
        description=weather.get("description") or "",
        icon=weather.get("icon") or DEFAULT_ICON,
        rainfall=float(_rain(raw, "1h") or _rain(raw, "3h")),
        visibility=int(round_half_up(visibility / 1000)),
        temp_min=int(round_half_up(main.get("temp_min") or 0)),
        temp_max=int(round_half_up(main.get("temp_max") or 0)),
    )


def parse_location(raw: object, latitude: float, longitude: float) -> Location:
    """Build a Location from a reverse-geocode array.

    City and state default to "Unknown" when missing or the array is empty.
    """
    city = UNKNOWN
    state = UNKNOWN
    if isinstance(raw, list) and raw:
        first = raw[0] or {}
        city = first.get("name") or UNKNOWN
        state = first.get("state") or UNKNOWN
    return Location(latitude=latitude, longitude=longitude, city=city, state=state)
