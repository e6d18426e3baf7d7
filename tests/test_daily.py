"""Tests for daily aggregation."""

from __future__ import annotations

from datetime import date

import pytest

from seoul_bike_explorer.analysis.daily import aggregate_daily, daily_metrics, group_by_day
from seoul_bike_explorer.analysis.reducers import InvalidPolicy
from seoul_bike_explorer.datasources.seoul_bike.models import RawRecord


def _record(
    day: date,
    hour: int = 0,
    rented: float | None = 10.0,
    temperature: float | None = 10.0,
    rainfall: float | None = 0.0,
    season: str = "Winter",
) -> RawRecord:
    return RawRecord(
        day=day,
        hour=float(hour),
        rented_count=rented,
        temperature=temperature,
        humidity=50.0,
        wind_speed=1.0,
        visibility=2000.0,
        dew_point=-2.0,
        solar_radiation=0.5,
        rainfall=rainfall,
        snowfall=0.0,
        season=season,
    )


D1 = date(2018, 1, 1)
D2 = date(2018, 1, 2)
D3 = date(2018, 1, 3)


class TestGroupByDay:
    """Test day grouping."""

    def test_groups_are_distinct_and_cover_input(self) -> None:
        records = [_record(D2, 0), _record(D1, 0), _record(D2, 1), _record(D1, 1)]
        groups = group_by_day(records)

        assert list(groups) == [D1, D2]
        members = [r for group in groups.values() for r in group]
        assert sorted(members, key=id) == sorted(records, key=id)

    def test_group_keeps_input_order(self) -> None:
        records = [_record(D1, 5), _record(D1, 2), _record(D1, 9)]
        assert [r.hour for r in group_by_day(records)[D1]] == [5.0, 2.0, 9.0]


class TestAggregateDaily:
    """Test the canonical daily series."""

    def test_sums_and_means(self) -> None:
        records = [
            _record(D1, 0, rented=100, temperature=10, rainfall=1.0),
            _record(D1, 1, rented=50, temperature=20, rainfall=2.5),
        ]
        [agg] = aggregate_daily(records)

        assert agg.day == D1
        assert agg.total_rentals == 150
        assert agg.mean_temperature == 15
        assert agg.mean_humidity == 50
        assert agg.mean_wind_speed == 1
        assert agg.mean_solar_radiation == 0.5
        assert agg.total_rainfall == 3.5

    def test_sorted_by_day(self) -> None:
        records = [_record(D3), _record(D1), _record(D2)]
        assert [d.day for d in aggregate_daily(records)] == [D1, D2, D3]

    def test_zero_activity_day_dropped(self) -> None:
        records = [
            _record(D1, 0, rented=0),
            _record(D1, 1, rented=0),
            _record(D2, 0, rented=5),
        ]
        daily = aggregate_daily(records)
        assert [d.day for d in daily] == [D2]
        assert all(d.total_rentals is not None and d.total_rentals > 0 for d in daily)

    def test_season_from_first_record(self) -> None:
        records = [_record(D1, 0, season="Autumn"), _record(D1, 1, season="Winter")]
        assert aggregate_daily(records)[0].season == "Autumn"

    def test_invalid_value_poisons_day_statistic(self) -> None:
        records = [_record(D1, 0, temperature=None), _record(D1, 1, temperature=4.0)]
        [agg] = aggregate_daily(records)
        assert agg.mean_temperature is None
        assert agg.total_rentals == 20

    def test_invalid_rentals_drop_day(self) -> None:
        records = [_record(D1, 0, rented=None), _record(D1, 1, rented=5), _record(D2)]
        assert [d.day for d in aggregate_daily(records)] == [D2]

    def test_skip_policy_ignores_invalid_values(self) -> None:
        records = [_record(D1, 0, temperature=None), _record(D1, 1, temperature=4.0)]
        [agg] = aggregate_daily(records, InvalidPolicy.SKIP)
        assert agg.mean_temperature == 4.0

    def test_empty(self) -> None:
        assert aggregate_daily([]) == []


class TestDailyMetrics:
    """Test the wider per-day reduction used for correlation."""

    def test_keeps_zero_activity_days(self) -> None:
        records = [_record(D1, rented=0), _record(D2, rented=8)]
        days = daily_metrics(records)
        assert [d.day for d in days] == [D1, D2]
        assert days[0].total_rentals == 0

    def test_wider_fields(self) -> None:
        records = [_record(D1, 0, rainfall=1.0), _record(D1, 1, rainfall=2.0)]
        [day] = daily_metrics(records)
        assert day.visibility == 2000
        assert day.dew_point == pytest.approx(-2.0)
        assert day.rainfall == 3.0
