"""Crop catalog and the rule-based crop recommendation evaluator."""

from farmgpt.agronomy.soil import lookup_soil_profile
from farmgpt.config.schema import RecommendationConfig
from farmgpt.models.agronomy import CropRecord
from farmgpt.models.common import LocalizedText
from farmgpt.models.weather import CurrentConditions, Location

ALLUVIAL = "Alluvial Soil"
BLACK = "Black Soil"
RED = "Red Soil"
RED_YELLOW = "Red and Yellow Soil"
LATERITE = "Laterite Soil"
DESERT = "Desert Soil"
MOUNTAIN = "Mountain Soil"
LOAMY = "Loamy Soil"
CLAY = "Clay Soil"
SANDY = "Sandy Soil"

KHARIF = LocalizedText("Kharif", "खरीफ")
RABI = LocalizedText("Rabi", "रबी")
ZAID = LocalizedText("Zaid", "ज़ायद")
YEAR_ROUND = LocalizedText("Year-round", "पूरे वर्ष")
PERENNIAL = LocalizedText("Perennial", "बारहमासी")

WATER_LOW = LocalizedText("Low", "कम")
WATER_MEDIUM = LocalizedText("Medium", "मध्यम")
WATER_HIGH = LocalizedText("High", "अधिक")


def _yield(low: int, high: int, unit: str = "quintal/acre") -> LocalizedText:
    units_hi = {"quintal/acre": "क्विंटल/एकड़", "tonne/acre": "टन/एकड़"}
    return LocalizedText(f"{low}-{high} {unit}", f"{low}-{high} {units_hi[unit]}")


# Catalog order is the recommendation order.
CROP_CATALOG: tuple[CropRecord, ...] = (
    CropRecord(
        name=LocalizedText("Rice", "धान"),
        temp_min=20, temp_max=37,
        rainfall_min=100, rainfall_max=300,
        soil_types=(ALLUVIAL, CLAY, BLACK, RED_YELLOW),
        season=KHARIF, water_needs=WATER_HIGH,
        expected_yield=_yield(20, 25),
        icon="leaf",
    ),
    CropRecord(
        name=LocalizedText("Wheat", "गेहूं"),
        temp_min=10, temp_max=25,
        rainfall_min=0, rainfall_max=100,
        soil_types=(ALLUVIAL, LOAMY, BLACK, CLAY),
        season=RABI, water_needs=WATER_MEDIUM,
        expected_yield=_yield(18, 22),
        icon="nutrition",
    ),
    CropRecord(
        name=LocalizedText("Maize", "मक्का"),
        temp_min=18, temp_max=32,
        rainfall_min=25, rainfall_max=150,
        soil_types=(ALLUVIAL, LOAMY, RED, BLACK),
        season=KHARIF, water_needs=WATER_MEDIUM,
        expected_yield=_yield(20, 30),
        icon="leaf",
    ),
    CropRecord(
        name=LocalizedText("Sugarcane", "गन्ना"),
        temp_min=20, temp_max=38,
        rainfall_min=75, rainfall_max=250,
        soil_types=(ALLUVIAL, BLACK, LOAMY, CLAY),
        season=YEAR_ROUND, water_needs=WATER_HIGH,
        expected_yield=_yield(30, 40, "tonne/acre"),
        icon="leaf",
    ),
    CropRecord(
        name=LocalizedText("Cotton", "कपास"),
        temp_min=21, temp_max=35,
        rainfall_min=50, rainfall_max=120,
        soil_types=(BLACK, ALLUVIAL, RED),
        season=KHARIF, water_needs=WATER_MEDIUM,
        expected_yield=_yield(8, 12),
        icon="flower",
    ),
    CropRecord(
        name=LocalizedText("Jute", "जूट"),
        temp_min=24, temp_max=37,
        rainfall_min=100, rainfall_max=250,
        soil_types=(ALLUVIAL, CLAY),
        season=KHARIF, water_needs=WATER_HIGH,
        expected_yield=_yield(10, 14),
        icon="leaf",
    ),
    CropRecord(
        name=LocalizedText("Soybean", "सोयाबीन"),
        temp_min=20, temp_max=32,
        rainfall_min=60, rainfall_max=150,
        soil_types=(BLACK, RED, LOAMY),
        season=KHARIF, water_needs=WATER_MEDIUM,
        expected_yield=_yield(8, 10),
        icon="ellipse",
    ),
    CropRecord(
        name=LocalizedText("Chickpea", "चना"),
        temp_min=15, temp_max=30,
        rainfall_min=0, rainfall_max=80,
        soil_types=(BLACK, ALLUVIAL, LOAMY, RED),
        season=RABI, water_needs=WATER_LOW,
        expected_yield=_yield(6, 8),
        icon="ellipse",
    ),
    CropRecord(
        name=LocalizedText("Mustard", "सरसों"),
        temp_min=10, temp_max=25,
        rainfall_min=0, rainfall_max=60,
        soil_types=(ALLUVIAL, LOAMY, DESERT),
        season=RABI, water_needs=WATER_LOW,
        expected_yield=_yield(6, 8),
        icon="flower",
    ),
    CropRecord(
        name=LocalizedText("Potato", "आलू"),
        temp_min=15, temp_max=25,
        rainfall_min=0, rainfall_max=100,
        soil_types=(ALLUVIAL, LOAMY, MOUNTAIN, SANDY),
        season=RABI, water_needs=WATER_MEDIUM,
        expected_yield=_yield(80, 120),
        icon="nutrition",
    ),
    CropRecord(
        name=LocalizedText("Groundnut", "मूंगफली"),
        temp_min=20, temp_max=30,
        rainfall_min=25, rainfall_max=125,
        soil_types=(RED, SANDY, BLACK, LOAMY),
        season=KHARIF, water_needs=WATER_LOW,
        expected_yield=_yield(8, 12),
        icon="ellipse",
    ),
    CropRecord(
        name=LocalizedText("Pearl Millet (Bajra)", "बाजरा"),
        temp_min=25, temp_max=38,
        rainfall_min=0, rainfall_max=75,
        soil_types=(DESERT, SANDY, RED, BLACK),
        season=KHARIF, water_needs=WATER_LOW,
        expected_yield=_yield(8, 10),
        icon="leaf",
    ),
    CropRecord(
        name=LocalizedText("Finger Millet (Ragi)", "रागी"),
        temp_min=20, temp_max=30,
        rainfall_min=25, rainfall_max=100,
        soil_types=(RED, LATERITE, RED_YELLOW),
        season=KHARIF, water_needs=WATER_LOW,
        expected_yield=_yield(8, 12),
        icon="leaf",
    ),
    CropRecord(
        name=LocalizedText("Green Gram (Moong)", "मूंग"),
        temp_min=25, temp_max=35,
        rainfall_min=0, rainfall_max=100,
        soil_types=(ALLUVIAL, LOAMY, RED, DESERT),
        season=ZAID, water_needs=WATER_LOW,
        expected_yield=_yield(3, 5),
        icon="ellipse",
    ),
    CropRecord(
        name=LocalizedText("Watermelon", "तरबूज"),
        temp_min=24, temp_max=35,
        rainfall_min=0, rainfall_max=50,
        soil_types=(SANDY, ALLUVIAL, DESERT),
        season=ZAID, water_needs=WATER_MEDIUM,
        expected_yield=_yield(100, 150),
        icon="nutrition",
    ),
    CropRecord(
        name=LocalizedText("Tea", "चाय"),
        temp_min=13, temp_max=30,
        rainfall_min=150, rainfall_max=300,
        soil_types=(MOUNTAIN, LATERITE),
        season=PERENNIAL, water_needs=WATER_HIGH,
        expected_yield=_yield(8, 10),
        icon="cafe",
    ),
)


def soil_matches(label: str, soil_type: str) -> bool:
    """Case-sensitive soil label match.

    Equal strings match, as does either one containing the other, so
    "Black Soil" matches "Black Soil (Regur)". An empty soil type matches
    nothing.
    """
    if not soil_type or not label:
        return False
    return label == soil_type or label in soil_type or soil_type in label


def recommend_crops(
    temperature: float, rainfall: float, soil_type: str
) -> list[CropRecord]:
    """Return catalog crops whose inclusive ranges and soil labels all match.

    Results are in catalog order. No match is an empty list.
    """
    return [
        crop
        for crop in CROP_CATALOG
        if crop.temp_min <= temperature <= crop.temp_max
        and crop.rainfall_min <= rainfall <= crop.rainfall_max
        and any(soil_matches(label, soil_type) for label in crop.soil_types)
    ]


def recommendation_inputs(
    weather: CurrentConditions | None,
    location: Location | None,
    defaults: RecommendationConfig | None = None,
) -> tuple[float, float, str]:
    """Temperature, rainfall and soil type to recommend for.

    Missing or zero live readings fall back to the configured defaults; the
    soil type comes from the location's state, or the default soil type when
    there is no location.
    """
    if defaults is None:
        defaults = RecommendationConfig()

    soil_type = defaults.default_soil_type
    if location is not None:
        soil_type = lookup_soil_profile(location.state).soil_type.en or soil_type

    temperature = (weather.temp if weather else 0) or defaults.default_temperature
    rainfall = (weather.rainfall if weather else 0) or defaults.default_rainfall
    return temperature, rainfall, soil_type
