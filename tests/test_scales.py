"""Tests for chart scales and the daily-point projection."""

from __future__ import annotations

from datetime import date

import pytest

from seoul_bike_explorer.analysis.scales import ChartProjection, LinearScale, TimeScale
from seoul_bike_explorer.datasources.seoul_bike.models import DailyAggregate


def _daily(day: date, total: float) -> DailyAggregate:
    return DailyAggregate(
        day=day,
        total_rentals=total,
        mean_temperature=0.0,
        mean_humidity=0.0,
        mean_wind_speed=0.0,
        mean_solar_radiation=0.0,
        total_rainfall=0.0,
        season="Spring",
    )


class TestLinearScale:
    """Test linear mapping and nice()."""

    def test_maps_linearly(self) -> None:
        scale = LinearScale((0.0, 100.0), (0.0, 800.0))
        assert scale(0) == 0
        assert scale(50) == 400
        assert scale(100) == 800

    def test_inverted_range(self) -> None:
        scale = LinearScale((0.0, 100.0), (130.0, 0.0))
        assert scale(0) == 130
        assert scale(100) == 0

    def test_zero_width_domain_maps_to_midpoint(self) -> None:
        scale = LinearScale((5.0, 5.0), (0.0, 100.0))
        assert scale(5) == 50

    @pytest.mark.parametrize(
        ("domain", "expected"),
        [
            ((977.0, 36149.0), (0.0, 40000.0)),
            ((0.5, 9.7), (0.0, 10.0)),
            ((0.13, 0.47), (0.1, 0.5)),
            ((12.0, 12.0), (12.0, 12.0)),
        ],
    )
    def test_nice(self, domain: tuple[float, float], expected: tuple[float, float]) -> None:
        scale = LinearScale(domain, (0.0, 1.0)).nice()
        assert scale.domain == pytest.approx(expected)

    def test_nice_reversed_domain(self) -> None:
        scale = LinearScale((9.7, 0.5), (0.0, 1.0)).nice()
        assert scale.domain == pytest.approx((10.0, 0.0))

    def test_nice_without_ticks_keeps_domain(self) -> None:
        scale = LinearScale((0.5, 9.7), (0.0, 1.0)).nice(count=0)
        assert scale.domain == (0.5, 9.7)


class TestTimeScale:
    """Test date mapping."""

    def test_maps_by_day(self) -> None:
        scale = TimeScale((date(2018, 1, 1), date(2018, 1, 11)), (0.0, 100.0))
        assert scale(date(2018, 1, 1)) == 0
        assert scale(date(2018, 1, 6)) == 50
        assert scale(date(2018, 1, 11)) == 100


class TestChartProjection:
    """Test fitting a projection to the daily series."""

    def test_from_daily(self) -> None:
        daily = [_daily(date(2018, 1, 1), 977), _daily(date(2018, 1, 11), 36149)]
        projection = ChartProjection.from_daily(daily, width=800, height=130)

        assert projection.x.domain == (date(2018, 1, 1), date(2018, 1, 11))
        assert projection.y.domain == pytest.approx((0.0, 40000.0))
        assert projection(daily[0])[0] == 0
        assert projection(daily[1])[0] == 800

    def test_y_axis_inverted(self) -> None:
        daily = [_daily(date(2018, 1, 1), 100), _daily(date(2018, 1, 2), 200)]
        projection = ChartProjection.from_daily(daily, width=800, height=130)
        _, y_low = projection(daily[0])
        _, y_high = projection(daily[1])
        assert y_high < y_low

    def test_domains(self) -> None:
        daily = [_daily(date(2018, 1, 1), 100), _daily(date(2018, 1, 2), 200)]
        domains = ChartProjection.from_daily(daily, width=800, height=130).domains()
        assert domains.date_start == date(2018, 1, 1)
        assert domains.date_end == date(2018, 1, 2)
        assert domains.rentals_min == 100
        assert domains.rentals_max == 200
        assert domains.width == 800
        assert domains.height == 130

    def test_empty_series(self) -> None:
        projection = ChartProjection.from_daily([], width=800, height=130)
        assert projection.y.domain == (0.0, 0.0)
