"""Tests for the seasonal crop calendar."""

import pytest

from farmgpt.agronomy.crop_calendar import (
    CROP_CALENDAR,
    KHARIF_SEASON,
    RABI_SEASON,
    ZAID_SEASON,
    season_for_month,
)
from farmgpt.models.common import Language


class TestCropCalendar:
    def test_three_seasons_in_order(self):
        assert [s.season.en for s in CROP_CALENDAR] == [
            "Kharif (Monsoon)", "Rabi (Winter)", "Zaid (Summer)",
        ]

    def test_localized_windows(self):
        wheat = RABI_SEASON.crops[0]
        assert wheat.name.resolve(Language.HINDI) == "गेहूं"
        assert wheat.sowing.en == "Nov - Dec"
        assert wheat.sowing.hi == "नवंबर - दिसंबर"


class TestSeasonForMonth:
    @pytest.mark.parametrize("month", [6, 7, 8, 9, 10])
    def test_kharif(self, month: int):
        assert season_for_month(month) is KHARIF_SEASON

    @pytest.mark.parametrize("month", [11, 12, 1, 2, 3])
    def test_rabi(self, month: int):
        assert season_for_month(month) is RABI_SEASON

    @pytest.mark.parametrize("month", [4, 5])
    def test_zaid(self, month: int):
        assert season_for_month(month) is ZAID_SEASON

    def test_invalid_month(self):
        with pytest.raises(ValueError):
            season_for_month(13)
