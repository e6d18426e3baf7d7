"""Tests for the weather/rentals correlation ranking."""

from __future__ import annotations

from datetime import date

import pytest

from seoul_bike_explorer.analysis.correlation import (
    CORRELATED_METRICS,
    correlate_with_rentals,
    pearson,
)
from seoul_bike_explorer.analysis.reducers import InvalidPolicy
from seoul_bike_explorer.datasources.seoul_bike.models import RawRecord


def _day(
    day: int,
    rented: float,
    temperature: float = 15.0,
    humidity: float = 50.0,
    wind_speed: float = 2.0,
    visibility: float = 2000.0,
    solar_radiation: float = 1.0,
    rainfall: float = 0.0,
) -> RawRecord:
    """A single-hour day, so daily totals and means equal the record values."""
    return RawRecord(
        day=date(2018, 5, day),
        hour=12.0,
        rented_count=rented,
        temperature=temperature,
        humidity=humidity,
        wind_speed=wind_speed,
        visibility=visibility,
        dew_point=5.0,
        solar_radiation=solar_radiation,
        rainfall=rainfall,
        snowfall=0.0,
        season="Spring",
    )


class TestPearson:
    """Test the Pearson coefficient."""

    def test_two_point_perfect_correlation(self) -> None:
        assert pearson([10.0, 20.0], [100.0, 200.0]) == 1.0

    def test_negative_correlation(self) -> None:
        assert pearson([1.0, 2.0, 3.0], [30.0, 20.0, 10.0]) == pytest.approx(-1.0)

    def test_scaling_invariance(self) -> None:
        xs = [3.0, 7.0, 1.0, 9.0, 4.0]
        ys = [10.0, 25.0, 8.0, 20.0, 18.0]
        base = pearson(xs, ys)
        scaled = pearson([x * 3.5 for x in xs], ys)
        assert base is not None
        assert scaled == pytest.approx(base)

    def test_bounded(self) -> None:
        r = pearson([0.1, 0.2, 0.3], [0.30000000000000004, 0.6, 0.9])
        assert r is not None
        assert -1.0 <= r <= 1.0

    def test_fewer_than_two_points_is_undefined(self) -> None:
        assert pearson([], []) is None
        assert pearson([1.0], [2.0]) is None

    def test_zero_variance_is_undefined(self) -> None:
        assert pearson([5.0, 5.0, 5.0], [1.0, 2.0, 3.0]) is None
        assert pearson([1.0, 2.0, 3.0], [7.0, 7.0, 7.0]) is None

    def test_constant_series_with_inexact_value_is_undefined(self) -> None:
        # 0.1 has no exact binary form, so its mean differs from each value by an ulp
        assert pearson([0.1] * 3, [100.0, 200.0, 300.0]) is None
        assert pearson([100.0, 200.0, 300.0], [0.1] * 3) is None

    def test_invalid_value_propagates(self) -> None:
        assert pearson([1.0, None, 3.0], [1.0, 2.0, 3.0]) is None

    def test_invalid_pairs_skipped(self) -> None:
        r = pearson([1.0, None, 3.0], [1.0, 2.0, 3.0], InvalidPolicy.SKIP)
        assert r == pytest.approx(1.0)

    def test_length_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="lengths differ"):
            pearson([1.0, 2.0], [1.0])


class TestCorrelateWithRentals:
    """Test per-metric correlation against daily rentals."""

    def test_two_day_example(self) -> None:
        records = [_day(1, 100, temperature=10), _day(2, 200, temperature=20)]
        ranking = correlate_with_rentals(records)

        coefficients = {e.metric: e.coefficient for e in ranking.entries}
        assert coefficients["Temperature"] == 1.0
        # Constant columns have no defined correlation
        assert coefficients["Humidity"] is None
        assert ranking.day_count == 2
        assert ranking.top_factors == ["Temperature"]

    def test_entries_in_fixed_order(self) -> None:
        ranking = correlate_with_rentals([_day(1, 100), _day(2, 200)])
        assert [e.metric for e in ranking.entries] == [name for name, _ in CORRELATED_METRICS]

    def test_top_two_by_absolute_coefficient(self) -> None:
        records = [
            _day(1, 100, temperature=5, humidity=90, wind_speed=3.0, rainfall=4.0),
            _day(2, 300, temperature=12, humidity=70, wind_speed=1.0, rainfall=0.0),
            _day(3, 500, temperature=18, humidity=55, wind_speed=4.0, rainfall=1.0),
            _day(4, 700, temperature=25, humidity=30, wind_speed=2.0, rainfall=0.0),
        ]
        ranking = correlate_with_rentals(records)

        assert ranking.top_factors == ["Temperature", "Humidity"]
        ranked = ranking.ranked
        assert all(
            abs(a.coefficient or 0) >= abs(b.coefficient or 0)
            for a, b in zip(ranked, ranked[1:], strict=False)
        )
        assert ranking.top_factors_label == ", ".join(ranking.top_factors)

    def test_ties_keep_metric_order(self) -> None:
        records = [
            _day(1, 100, temperature=1, solar_radiation=1),
            _day(2, 200, temperature=2, solar_radiation=2),
            _day(3, 300, temperature=3, solar_radiation=3),
        ]
        assert correlate_with_rentals(records).top_factors == ["Temperature", "Solar Radiation"]

    def test_hours_regrouped_by_day(self) -> None:
        records = [
            _day(1, 40, temperature=10),
            _day(1, 60, temperature=10),
            _day(2, 150, temperature=20),
            _day(2, 50, temperature=20),
        ]
        ranking = correlate_with_rentals(records)
        assert ranking.day_count == 2
        assert ranking.entries[0].coefficient == 1.0

    def test_constant_metric_excluded_from_ranking(self) -> None:
        records = [
            _day(1, 100, temperature=10, humidity=0.1),
            _day(2, 250, temperature=18, humidity=0.1),
            _day(3, 300, temperature=21, humidity=0.1),
        ]
        ranking = correlate_with_rentals(records)

        assert ranking.entries[1].metric == "Humidity"
        assert ranking.entries[1].coefficient is None
        assert ranking.top_factors == ["Temperature"]

    def test_empty_subset(self) -> None:
        ranking = correlate_with_rentals([])
        assert ranking.day_count == 0
        assert all(not e.available for e in ranking.entries)
        assert ranking.ranked == []
        assert ranking.top_factors_label == ""
