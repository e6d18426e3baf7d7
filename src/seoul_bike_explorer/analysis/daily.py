"""Reduce hourly records to one aggregate per calendar day.

Grouping is keyed on the record's ``date`` only, so it is stable and
independent of time-of-day. The same grouping feeds both the canonical daily
series and the wider per-day metrics used for correlation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from seoul_bike_explorer.analysis.reducers import InvalidPolicy, mean, total
from seoul_bike_explorer.datasources.seoul_bike.models import DailyAggregate, DailyMetrics

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from seoul_bike_explorer.datasources.seoul_bike.models import RawRecord


def group_by_day(records: Iterable[RawRecord]) -> dict[date, list[RawRecord]]:
    """Bucket records by day, keeping each bucket in input order.

    Returns:
        Dict of day -> records, ordered by day ascending.
    """
    groups: dict[date, list[RawRecord]] = {}
    for record in records:
        groups.setdefault(record.day, []).append(record)
    return dict(sorted(groups.items()))


def aggregate_day(
    day: date, group: list[RawRecord], policy: InvalidPolicy = InvalidPolicy.PROPAGATE
) -> DailyAggregate:
    """Reduce one day's records.

    Season comes from the first record of the day; days are assumed to be
    single-season.
    """
    return DailyAggregate(
        day=day,
        total_rentals=total((r.rented_count for r in group), policy),
        mean_temperature=mean((r.temperature for r in group), policy),
        mean_humidity=mean((r.humidity for r in group), policy),
        mean_wind_speed=mean((r.wind_speed for r in group), policy),
        mean_solar_radiation=mean((r.solar_radiation for r in group), policy),
        total_rainfall=total((r.rainfall for r in group), policy),
        season=group[0].season,
    )


def aggregate_daily(
    records: Iterable[RawRecord], policy: InvalidPolicy = InvalidPolicy.PROPAGATE
) -> list[DailyAggregate]:
    """Build the canonical daily series.

    Days whose total rentals are not positive (zero, or invalid) are left out.
    Their raw records stay in the dataset.

    Args:
        records: Normalized hourly records.
        policy: How invalid numeric values affect each day's statistics.

    Returns:
        One DailyAggregate per retained day, sorted by day.
    """
    daily: list[DailyAggregate] = []
    for day, group in group_by_day(records).items():
        agg = aggregate_day(day, group, policy)
        if agg.total_rentals is not None and agg.total_rentals > 0:
            daily.append(agg)
    return daily


def daily_metrics(
    records: Iterable[RawRecord], policy: InvalidPolicy = InvalidPolicy.PROPAGATE
) -> list[DailyMetrics]:
    """Per-day totals and means over the wider metric set.

    Unlike ``aggregate_daily`` no day is dropped.
    """
    return [
        DailyMetrics(
            day=day,
            total_rentals=total((r.rented_count for r in group), policy),
            temperature=mean((r.temperature for r in group), policy),
            humidity=mean((r.humidity for r in group), policy),
            wind_speed=mean((r.wind_speed for r in group), policy),
            visibility=mean((r.visibility for r in group), policy),
            dew_point=mean((r.dew_point for r in group), policy),
            solar_radiation=mean((r.solar_radiation for r in group), policy),
            rainfall=total((r.rainfall for r in group), policy),
        )
        for day, group in group_by_day(records).items()
    ]
