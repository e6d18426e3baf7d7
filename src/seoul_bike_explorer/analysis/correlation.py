"""Pearson correlation of daily weather metrics against daily rentals.

The record subset is regrouped by day over a wider metric set, then each
independent metric is correlated with total rentals across those days.
Metrics are ranked by absolute coefficient; the top two are reported as the
dominant factors of the subset.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from seoul_bike_explorer.analysis.daily import daily_metrics
from seoul_bike_explorer.analysis.reducers import InvalidPolicy

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from seoul_bike_explorer.datasources.seoul_bike.models import RawRecord

# (display name, DailyMetrics field), in ranking tie-break order.
CORRELATED_METRICS: tuple[tuple[str, str], ...] = (
    ("Temperature", "temperature"),
    ("Humidity", "humidity"),
    ("Wind speed", "wind_speed"),
    ("Visibility", "visibility"),
    ("Solar Radiation", "solar_radiation"),
    ("Rainfall", "rainfall"),
)

TARGET_METRIC = "Rented Bike Count"
TOP_FACTORS = 2


def pearson(
    xs: Sequence[float | None],
    ys: Sequence[float | None],
    policy: InvalidPolicy = InvalidPolicy.PROPAGATE,
) -> float | None:
    """Pearson correlation coefficient of two equal-length series.

    Returns None when it is undefined: fewer than two usable pairs, zero
    variance in either series, or (with ``PROPAGATE``) any invalid value.
    With ``SKIP`` pairs containing an invalid value are dropped.
    """
    if len(xs) != len(ys):
        msg = f"series lengths differ: {len(xs)} != {len(ys)}"
        raise ValueError(msg)

    pairs: list[tuple[float, float]] = []
    for x, y in zip(xs, ys, strict=True):
        if x is None or y is None:
            if policy is InvalidPolicy.PROPAGATE:
                return None
            continue
        pairs.append((x, y))

    n = len(pairs)
    if n < 2:
        return None
    x_first, y_first = pairs[0]
    if all(x == x_first for x, _ in pairs) or all(y == y_first for _, y in pairs):
        return None

    mean_x = math.fsum(x for x, _ in pairs) / n
    mean_y = math.fsum(y for _, y in pairs) / n
    cov = math.fsum((x - mean_x) * (y - mean_y) for x, y in pairs)
    ss_x = math.fsum((x - mean_x) ** 2 for x, _ in pairs)
    ss_y = math.fsum((y - mean_y) ** 2 for _, y in pairs)
    if ss_x == 0 or ss_y == 0:
        return None

    r = cov / math.sqrt(ss_x * ss_y)
    return max(-1.0, min(1.0, r))


@dataclass(frozen=True)
class CorrelationEntry:
    """One metric's coefficient against daily rentals (None if unavailable)."""

    metric: str
    coefficient: float | None

    @property
    def available(self) -> bool:
        return self.coefficient is not None


@dataclass(frozen=True)
class CorrelationRanking:
    """All coefficients in fixed metric order, plus the dominant factors."""

    entries: list[CorrelationEntry]
    day_count: int

    @property
    def ranked(self) -> list[CorrelationEntry]:
        """Available entries by descending absolute coefficient (stable)."""
        available = [e for e in self.entries if e.coefficient is not None]
        return sorted(available, key=lambda e: abs(e.coefficient or 0.0), reverse=True)

    @property
    def top_factors(self) -> list[str]:
        return [e.metric for e in self.ranked[:TOP_FACTORS]]

    @property
    def top_factors_label(self) -> str:
        """E.g. ``Temperature, Solar Radiation``; empty when nothing is available."""
        return ", ".join(self.top_factors)


def correlate_with_rentals(
    records: Iterable[RawRecord], policy: InvalidPolicy = InvalidPolicy.PROPAGATE
) -> CorrelationRanking:
    """Correlate each weather metric with daily rentals over a record subset.

    Args:
        records: Hourly records (e.g. the current selection's records).
        policy: Invalid-value handling for the daily regrouping and Pearson.

    Returns:
        CorrelationRanking with one entry per metric in CORRELATED_METRICS.
    """
    days = daily_metrics(records, policy)
    rentals = [d.total_rentals for d in days]
    entries = [
        CorrelationEntry(
            metric=name,
            coefficient=pearson([getattr(d, field) for d in days], rentals, policy),
        )
        for name, field in CORRELATED_METRICS
    ]
    return CorrelationRanking(entries=entries, day_count=len(days))
