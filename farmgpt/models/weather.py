"""Current conditions and location models."""

from dataclasses import dataclass

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class CurrentConditions:
    temp: int
    feels_like: int
    humidity: int
    pressure: int
    wind_speed: int  # km/h
    description: str
    icon: str
    rainfall: float  # mm
    visibility: int  # km
    temp_min: int
    temp_max: int


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float
    city: str = UNKNOWN
    state: str = UNKNOWN


# Icon code prefixes to glyph names, checked in order
_ICON_GLYPHS = [
    (("01",), "sunny"),
    (("02",), "partly-sunny"),
    (("03", "04"), "cloudy"),
    (("09", "10"), "rainy"),
    (("11",), "thunderstorm"),
    (("13",), "snow"),
    (("50",), "cloud"),
]


def weather_icon_name(icon_code: str) -> str:
    """Map a provider icon code such as "10d" to a display glyph name."""
    for codes, glyph in _ICON_GLYPHS:
        if any(code in icon_code for code in codes):
            return glyph
    return "sunny"
