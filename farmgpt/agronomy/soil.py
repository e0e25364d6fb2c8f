"""Per-state soil profiles for India with an Alluvial Soil fallback."""

import logging

from farmgpt.models.agronomy import SoilProfile
from farmgpt.models.common import LocalizedText

logger = logging.getLogger(__name__)

ALLUVIAL_PROFILE = SoilProfile(
    soil_type=LocalizedText("Alluvial Soil", "जलोढ़ मिट्टी"),
    major_crops=LocalizedText(
        "Wheat, Rice, Sugarcane, Pulses", "गेहूं, धान, गन्ना, दालें"
    ),
    irrigation=LocalizedText("Canal & Tube Well", "नहर और नलकूप"),
)

_BLACK_PROFILE = SoilProfile(
    soil_type=LocalizedText("Black Soil", "काली मिट्टी"),
    major_crops=LocalizedText(
        "Cotton, Soybean, Jowar, Wheat", "कपास, सोयाबीन, ज्वार, गेहूं"
    ),
    irrigation=LocalizedText("Drip & Well Irrigation", "ड्रिप और कुआं सिंचाई"),
)

_RED_PROFILE = SoilProfile(
    soil_type=LocalizedText("Red Soil", "लाल मिट्टी"),
    major_crops=LocalizedText(
        "Groundnut, Ragi, Millets, Pulses", "मूंगफली, रागी, मोटे अनाज, दालें"
    ),
    irrigation=LocalizedText("Tank & Well Irrigation", "तालाब और कुआं सिंचाई"),
)

_RED_YELLOW_PROFILE = SoilProfile(
    soil_type=LocalizedText("Red and Yellow Soil", "लाल और पीली मिट्टी"),
    major_crops=LocalizedText("Rice, Maize, Pulses", "धान, मक्का, दालें"),
    irrigation=LocalizedText("Rain-fed & Tank", "वर्षा आधारित और तालाब"),
)

_LATERITE_PROFILE = SoilProfile(
    soil_type=LocalizedText("Laterite Soil", "लैटेराइट मिट्टी"),
    major_crops=LocalizedText(
        "Coconut, Rubber, Cashew, Spices", "नारियल, रबर, काजू, मसाले"
    ),
    irrigation=LocalizedText("Rain-fed & Sprinkler", "वर्षा आधारित और स्प्रिंकलर"),
)

_DESERT_PROFILE = SoilProfile(
    soil_type=LocalizedText("Desert Soil", "रेगिस्तानी मिट्टी"),
    major_crops=LocalizedText("Bajra, Mustard, Moong", "बाजरा, सरसों, मूंग"),
    irrigation=LocalizedText("Drip & Sprinkler", "ड्रिप और स्प्रिंकलर"),
)

_MOUNTAIN_PROFILE = SoilProfile(
    soil_type=LocalizedText("Mountain Soil", "पर्वतीय मिट्टी"),
    major_crops=LocalizedText("Apple, Tea, Potato, Maize", "सेब, चाय, आलू, मक्का"),
    irrigation=LocalizedText("Rain-fed & Kuhl Channels", "वर्षा आधारित और कूहल"),
)

SOIL_PROFILES: dict[str, SoilProfile] = {
    "Uttar Pradesh": ALLUVIAL_PROFILE,
    "Punjab": ALLUVIAL_PROFILE,
    "Haryana": ALLUVIAL_PROFILE,
    "Bihar": ALLUVIAL_PROFILE,
    "West Bengal": ALLUVIAL_PROFILE,
    "Assam": ALLUVIAL_PROFILE,
    "Delhi": ALLUVIAL_PROFILE,
    "Maharashtra": _BLACK_PROFILE,
    "Gujarat": _BLACK_PROFILE,
    "Madhya Pradesh": _BLACK_PROFILE,
    "Tamil Nadu": _RED_PROFILE,
    "Karnataka": _RED_PROFILE,
    "Andhra Pradesh": _RED_PROFILE,
    "Telangana": _RED_PROFILE,
    "Odisha": _RED_PROFILE,
    "Chhattisgarh": _RED_YELLOW_PROFILE,
    "Jharkhand": _RED_YELLOW_PROFILE,
    "Kerala": _LATERITE_PROFILE,
    "Goa": _LATERITE_PROFILE,
    "Rajasthan": _DESERT_PROFILE,
    "Himachal Pradesh": _MOUNTAIN_PROFILE,
    "Uttarakhand": _MOUNTAIN_PROFILE,
    "Jammu and Kashmir": _MOUNTAIN_PROFILE,
    "Sikkim": _MOUNTAIN_PROFILE,
}

DEFAULT_SOIL_PROFILE = ALLUVIAL_PROFILE


def lookup_soil_profile(region: str) -> SoilProfile:
    """Exact-match a state name; anything unrecognized gets the default profile."""
    profile = SOIL_PROFILES.get(region)
    if profile is None:
        logger.debug("No soil profile for region %r, using default", region)
        return DEFAULT_SOIL_PROFILE
    return profile
