"""Localization table keyed by language and message key."""

from farmgpt.models.common import Language

MESSAGES: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        "app_name": "FarmGPT",
        "select_language": "Select Your Language",
        "detecting_location": "Detecting your location...",
        "location_denied": "Location access is needed to show weather for your farm",
        "enable_location": "Enable Location",
        "weather": "Weather",
        "forecast": "7-Day Forecast",
        "temperature": "Temperature",
        "feels_like": "Feels like",
        "humidity": "Humidity",
        "rainfall": "Rainfall",
        "wind_speed": "Wind Speed",
        "visibility": "Visibility",
        "celsius": "°C",
        "percent": "%",
        "mm": "mm",
        "kmh": "km/h",
        "km": "km",
        "soil_info": "Soil Information",
        "soil_type": "Soil Type",
        "crops_grown": "Crops Grown",
        "irrigation_type": "Irrigation",
        "how_can_i_help": "How can I help you?",
        "quick_recommendations": "Crop Recommendations",
        "quick_recommendations_desc": "Best crops for your weather and soil",
        "weather_info": "Weather Details",
        "weather_info_desc": "Detailed weather and forecast",
        "gov_schemes": "Government Schemes",
        "gov_schemes_desc": "Schemes and benefits for farmers",
        "crop_recommendations": "Crop Recommendations",
        "based_on_conditions": "Based on current conditions",
        "recommended_crops": "Recommended Crops",
        "no_data": "No data available",
        "water_needs": "Water Needs",
        "expected_yield": "Expected Yield",
        "season": "Season",
        "crop_calendar": "Crop Calendar",
        "sowing_period": "Sowing",
        "harvest_period": "Harvest",
        "community": "Community",
        "no_messages": "No messages yet. Start the conversation!",
        "benefit": "Benefit",
        "eligibility": "Eligibility",
        "helpline": "Kisan Call Centre",
        "location": "Location",
    },
    Language.HINDI: {
        "app_name": "FarmGPT",
        "select_language": "अपनी भाषा चुनें",
        "detecting_location": "आपका स्थान खोजा जा रहा है...",
        "location_denied": "आपके खेत का मौसम दिखाने के लिए स्थान की अनुमति आवश्यक है",
        "enable_location": "स्थान चालू करें",
        "weather": "मौसम",
        "forecast": "7 दिन का पूर्वानुमान",
        "temperature": "तापमान",
        "feels_like": "महसूस होता है",
        "humidity": "नमी",
        "rainfall": "वर्षा",
        "wind_speed": "हवा की गति",
        "visibility": "दृश्यता",
        "celsius": "°C",
        "percent": "%",
        "mm": "मिमी",
        "kmh": "किमी/घंटा",
        "km": "किमी",
        "soil_info": "मिट्टी की जानकारी",
        "soil_type": "मिट्टी का प्रकार",
        "crops_grown": "उगाई जाने वाली फसलें",
        "irrigation_type": "सिंचाई",
        "how_can_i_help": "मैं आपकी कैसे मदद कर सकता हूँ?",
        "quick_recommendations": "फसल सिफारिशें",
        "quick_recommendations_desc": "आपके मौसम और मिट्टी के लिए सबसे अच्छी फसलें",
        "weather_info": "मौसम विवरण",
        "weather_info_desc": "विस्तृत मौसम और पूर्वानुमान",
        "gov_schemes": "सरकारी योजनाएं",
        "gov_schemes_desc": "किसानों के लिए योजनाएं और लाभ",
        "crop_recommendations": "फसल सिफारिशें",
        "based_on_conditions": "वर्तमान परिस्थितियों के आधार पर",
        "recommended_crops": "अनुशंसित फसलें",
        "no_data": "कोई डेटा उपलब्ध नहीं",
        "water_needs": "पानी की आवश्यकता",
        "expected_yield": "अनुमानित उपज",
        "season": "मौसम",
        "crop_calendar": "फसल कैलेंडर",
        "sowing_period": "बुवाई",
        "harvest_period": "कटाई",
        "community": "समुदाय",
        "no_messages": "अभी कोई संदेश नहीं। बातचीत शुरू करें!",
        "benefit": "लाभ",
        "eligibility": "पात्रता",
        "helpline": "किसान कॉल सेंटर",
        "location": "स्थान",
    },
}

DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

_DAY_NAMES_HI = {
    "Sun": "रवि",
    "Mon": "सोम",
    "Tue": "मंगल",
    "Wed": "बुध",
    "Thu": "गुरु",
    "Fri": "शुक्र",
    "Sat": "शनि",
}

for _day in DAY_NAMES:
    MESSAGES[Language.ENGLISH][f"day.{_day}"] = _day
    MESSAGES[Language.HINDI][f"day.{_day}"] = _DAY_NAMES_HI[_day]


def translate(key: str, language: Language | str = Language.ENGLISH) -> str:
    """Resolve a message key for a language.

    Unknown languages fall back to English. Unknown keys raise KeyError.
    """
    try:
        table = MESSAGES[Language(language)]
    except ValueError:
        table = MESSAGES[Language.ENGLISH]
    if key not in table:
        raise KeyError(f"Unknown message key: {key}")
    return table[key]


def day_name(abbreviation: str, language: Language | str = Language.ENGLISH) -> str:
    """Localize a Sun..Sat weekday abbreviation."""
    return translate(f"day.{abbreviation}", language)
