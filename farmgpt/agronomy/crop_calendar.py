"""Seasonal crop calendar: Kharif, Rabi and Zaid sowing and harvest windows."""

from farmgpt.models.agronomy import CalendarCrop, SeasonCalendar
from farmgpt.models.common import LocalizedText

_MONTHS = {
    "Jan": "जनवरी", "Feb": "फरवरी", "Mar": "मार्च", "Apr": "अप्रैल",
    "May": "मई", "Jun": "जून", "Jul": "जुलाई", "Aug": "अगस्त",
    "Sep": "सितंबर", "Oct": "अक्टूबर", "Nov": "नवंबर", "Dec": "दिसंबर",
}


def _window(start: str, end: str) -> LocalizedText:
    return LocalizedText(f"{start} - {end}", f"{_MONTHS[start]} - {_MONTHS[end]}")


def _crop(en: str, hi: str, sowing: tuple[str, str], harvest: tuple[str, str],
          icon: str = "leaf") -> CalendarCrop:
    return CalendarCrop(
        name=LocalizedText(en, hi),
        sowing=_window(*sowing),
        harvest=_window(*harvest),
        icon=icon,
    )


KHARIF_SEASON = SeasonCalendar(
    season=LocalizedText("Kharif (Monsoon)", "खरीफ (मानसून)"),
    months=_window("Jun", "Oct"),
    crops=(
        _crop("Rice", "धान", ("Jun", "Jul"), ("Oct", "Nov")),
        _crop("Maize", "मक्का", ("Jun", "Jul"), ("Sep", "Oct")),
        _crop("Cotton", "कपास", ("Apr", "May"), ("Oct", "Dec"), "flower"),
        _crop("Soybean", "सोयाबीन", ("Jun", "Jul"), ("Sep", "Oct"), "ellipse"),
        _crop("Groundnut", "मूंगफली", ("Jun", "Jul"), ("Sep", "Oct"), "ellipse"),
    ),
)

RABI_SEASON = SeasonCalendar(
    season=LocalizedText("Rabi (Winter)", "रबी (सर्दी)"),
    months=_window("Nov", "Mar"),
    crops=(
        _crop("Wheat", "गेहूं", ("Nov", "Dec"), ("Mar", "Apr"), "nutrition"),
        _crop("Mustard", "सरसों", ("Oct", "Nov"), ("Feb", "Mar"), "flower"),
        _crop("Chickpea", "चना", ("Oct", "Nov"), ("Feb", "Mar"), "ellipse"),
        _crop("Barley", "जौ", ("Nov", "Dec"), ("Mar", "Apr")),
        _crop("Potato", "आलू", ("Oct", "Nov"), ("Jan", "Feb"), "nutrition"),
    ),
)

ZAID_SEASON = SeasonCalendar(
    season=LocalizedText("Zaid (Summer)", "ज़ायद (गर्मी)"),
    months=_window("Apr", "May"),
    crops=(
        _crop("Watermelon", "तरबूज", ("Mar", "Apr"), ("May", "Jun"), "nutrition"),
        _crop("Cucumber", "खीरा", ("Mar", "Apr"), ("May", "Jun"), "nutrition"),
        _crop("Green Gram (Moong)", "मूंग", ("Mar", "Apr"), ("May", "Jun"), "ellipse"),
    ),
)

CROP_CALENDAR: tuple[SeasonCalendar, ...] = (KHARIF_SEASON, RABI_SEASON, ZAID_SEASON)


def season_for_month(month: int) -> SeasonCalendar:
    """Kharif for June-October, Rabi for November-March, Zaid for April-May."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")
    if month in (6, 7, 8, 9, 10):
        return KHARIF_SEASON
    if month in (11, 12, 1, 2, 3):
        return RABI_SEASON
    return ZAID_SEASON
