"""Tests for daily forecast aggregation."""

from conftest import make_sample

from farmgpt.forecast.aggregator import aggregate_daily, weekday_abbreviation
from farmgpt.ingest.parsers import parse_forecast_samples

DAY = 86400
BASE_TS = 1717243200  # 2024-06-01 12:00 UTC


def _distinct_days(n: int) -> list:
    return [
        make_sample(date=f"2024-06-{i + 1:02d}", timestamp=BASE_TS + i * DAY)
        for i in range(n)
    ]


class TestAggregateDaily:
    def test_empty_input(self):
        assert aggregate_daily([]) == []

    def test_same_day_min_max_and_rain(self):
        samples = [
            make_sample(temp_min=20, temp_max=28, rainfall=1.2),
            make_sample(temp_min=18, temp_max=30, rainfall=0.5),
        ]
        result = aggregate_daily(samples)
        assert len(result) == 1
        day = result[0]
        assert day.date == "2024-06-01"
        assert day.temp_min == 18
        assert day.temp_max == 30
        assert day.rainfall == 1.7

    def test_first_sample_wins_for_description_icon_humidity(self):
        samples = [
            make_sample(description="clear sky", icon="01d", humidity=40),
            make_sample(description="heavy rain", icon="10d", humidity=95),
        ]
        day = aggregate_daily(samples)[0]
        assert day.description == "clear sky"
        assert day.icon == "01d"
        assert day.humidity == 40

        reordered = aggregate_daily(list(reversed(samples)))[0]
        assert reordered.description == "heavy rain"
        assert reordered.icon == "10d"
        assert reordered.humidity == 95

    def test_numeric_fields_order_independent(self):
        samples = [
            make_sample(temp_min=22.4, temp_max=29.0, rainfall=0.25),
            make_sample(temp_min=19.6, temp_max=33.2, rainfall=2.0),
            make_sample(temp_min=21.0, temp_max=31.0, rainfall=0.5),
        ]
        forward = aggregate_daily(samples)[0]
        backward = aggregate_daily(list(reversed(samples)))[0]
        assert (forward.temp_min, forward.temp_max, forward.rainfall) == (
            backward.temp_min, backward.temp_max, backward.rainfall,
        )
        assert forward.temp_min == 20
        assert forward.temp_max == 33
        assert forward.rainfall == 2.8

    def test_missing_rain_counts_as_zero(self):
        samples = [make_sample(rainfall=0.0), make_sample(rainfall=0.0)]
        assert aggregate_daily(samples)[0].rainfall == 0.0

    def test_truncates_to_first_seven_encountered(self):
        samples = _distinct_days(10)
        result = aggregate_daily(samples)
        assert [d.date for d in result] == [f"2024-06-{i:02d}" for i in range(1, 8)]

    def test_truncation_keeps_first_seen_not_latest(self):
        # Dates arrive newest first; the first seven seen are kept as-is
        samples = list(reversed(_distinct_days(10)))
        result = aggregate_daily(samples)
        assert [d.date for d in result] == [
            f"2024-06-{i:02d}" for i in range(10, 3, -1)
        ]

    def test_preserves_first_occurrence_order(self):
        samples = [
            make_sample(date="2024-06-02", timestamp=BASE_TS + DAY),
            make_sample(date="2024-06-01", timestamp=BASE_TS),
            make_sample(date="2024-06-02", timestamp=BASE_TS + DAY, temp_max=35),
        ]
        result = aggregate_daily(samples)
        assert [d.date for d in result] == ["2024-06-02", "2024-06-01"]
        assert result[0].temp_max == 35

    def test_length_bounded_by_distinct_dates(self):
        samples = _distinct_days(3) + _distinct_days(3)
        assert len(aggregate_daily(samples)) == 3

    def test_idempotent_on_daily_input(self):
        samples = _distinct_days(5)
        first = aggregate_daily(samples)
        again = aggregate_daily(
            [
                make_sample(
                    date=d.date,
                    timestamp=BASE_TS + i * DAY,
                    temp_min=d.temp_min,
                    temp_max=d.temp_max,
                    rainfall=d.rainfall,
                    humidity=d.humidity,
                    description=d.description,
                    icon=d.icon,
                )
                for i, d in enumerate(first)
            ]
        )
        assert again == first

    def test_rounding_is_half_up(self):
        samples = [make_sample(temp_min=22.5, temp_max=34.5, rainfall=0.25)]
        day = aggregate_daily(samples)[0]
        assert day.temp_min == 23
        assert day.temp_max == 35
        assert day.rainfall == 0.3

    def test_custom_max_days(self):
        assert len(aggregate_daily(_distinct_days(5), max_days=3)) == 3


class TestWeekday:
    def test_saturday(self):
        assert weekday_abbreviation(BASE_TS) == "Sat"

    def test_sunday(self):
        assert weekday_abbreviation(BASE_TS + DAY) == "Sun"


class TestFixtureForecast:
    def test_two_days(self, owm_forecast: dict):
        result = aggregate_daily(parse_forecast_samples(owm_forecast))
        assert len(result) == 2

        first, second = result
        assert first.date == "2024-06-01"
        assert first.day_name == "Sat"
        assert first.temp_min == 26
        assert first.temp_max == 33
        assert first.rainfall == 1.8
        assert first.humidity == 48
        assert first.description == "clear sky"

        assert second.date == "2024-06-02"
        assert second.day_name == "Sun"
        assert second.temp_min == 24
        assert second.temp_max == 35
        assert second.rainfall == 0.0
        assert second.icon == "04n"
