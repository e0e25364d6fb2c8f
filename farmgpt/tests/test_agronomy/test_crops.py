"""Tests for the crop recommendation evaluator."""

from farmgpt.agronomy.crops import (
    CROP_CATALOG,
    recommend_crops,
    recommendation_inputs,
    soil_matches,
)
from farmgpt.config.schema import RecommendationConfig
from farmgpt.models.weather import CurrentConditions, Location


def _names(crops) -> list[str]:
    return [c.name.en for c in crops]


def _conditions(temp: int, rainfall: float) -> CurrentConditions:
    return CurrentConditions(
        temp=temp, feels_like=temp, humidity=50, pressure=1005, wind_speed=10,
        description="clear sky", icon="01d", rainfall=rainfall, visibility=10,
        temp_min=temp, temp_max=temp,
    )


class TestRecommendCrops:
    def test_hot_wet_alluvial(self):
        crops = recommend_crops(30, 150, "Alluvial Soil")
        assert _names(crops) == ["Rice", "Maize", "Sugarcane", "Jute"]

    def test_catalog_order(self):
        crops = recommend_crops(25, 50, "Alluvial Soil")
        positions = [CROP_CATALOG.index(c) for c in crops]
        assert positions == sorted(positions)
        assert _names(crops) == [
            "Wheat", "Maize", "Cotton", "Chickpea", "Mustard", "Potato",
            "Green Gram (Moong)", "Watermelon",
        ]

    def test_no_match_is_empty_list(self):
        assert recommend_crops(-50, -10, "NoSuchSoil") == []

    def test_soil_mismatch_excludes(self):
        assert "Tea" not in _names(recommend_crops(20, 200, "Alluvial Soil"))
        assert "Tea" in _names(recommend_crops(20, 200, "Mountain Soil"))

    def test_ranges_inclusive(self):
        # Wheat: 10-25 °C, 0-100 mm
        assert "Wheat" in _names(recommend_crops(10, 0, "Alluvial Soil"))
        assert "Wheat" in _names(recommend_crops(25, 100, "Alluvial Soil"))
        assert "Wheat" not in _names(recommend_crops(25.1, 100, "Alluvial Soil"))
        assert "Wheat" not in _names(recommend_crops(25, 100.1, "Alluvial Soil"))

    def test_partial_soil_match(self):
        crops = recommend_crops(28, 90, "Black Soil (Regur)")
        assert "Cotton" in _names(crops)

    def test_case_sensitive(self):
        assert recommend_crops(30, 150, "alluvial soil") == []


class TestSoilMatches:
    def test_exact(self):
        assert soil_matches("Red Soil", "Red Soil")

    def test_contains(self):
        assert soil_matches("Black Soil", "Black Soil (Regur)")
        assert soil_matches("Laterite Soil", "Laterite")

    def test_empty_never_matches(self):
        assert not soil_matches("Red Soil", "")


class TestRecommendationInputs:
    def test_defaults_without_data(self):
        assert recommendation_inputs(None, None) == (25.0, 50.0, "Alluvial Soil")

    def test_live_values_and_state_soil(self):
        location = Location(latitude=19.07, longitude=72.87, state="Maharashtra")
        result = recommendation_inputs(_conditions(31, 4.5), location)
        assert result == (31, 4.5, "Black Soil")

    def test_zero_readings_fall_back(self):
        result = recommendation_inputs(_conditions(0, 0.0), None)
        assert result == (25.0, 50.0, "Alluvial Soil")

    def test_unknown_state_uses_alluvial(self):
        location = Location(latitude=0.0, longitude=0.0)
        assert recommendation_inputs(None, location)[2] == "Alluvial Soil"

    def test_configured_defaults(self):
        defaults = RecommendationConfig(
            default_temperature=20.0, default_rainfall=10.0,
            default_soil_type="Red Soil",
        )
        assert recommendation_inputs(None, None, defaults) == (20.0, 10.0, "Red Soil")
