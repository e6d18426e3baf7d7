"""Per-metric weather summaries for a set of days, against global references.

Intensive quantities (temperature, humidity, wind, solar radiation) are
averaged over the selected days; rainfall is summed. Each value is paired
with a reference fixed at load time from the full series so the summary
bars keep a stable scale while the selection changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from seoul_bike_explorer.analysis.reducers import InvalidPolicy, maximum, mean, or_zero, total

if TYPE_CHECKING:
    from collections.abc import Sequence

    from seoul_bike_explorer.datasources.seoul_bike.models import DailyAggregate

# Headroom above the global rainfall sum for the rainfall axis.
RAINFALL_AXIS_HEADROOM = 1.1


@dataclass(frozen=True)
class TrackedMetric:
    """A daily field summarized in the weather panel."""

    key: str
    title: str
    field: str
    statistic: Literal["mean", "sum"]

    def values(self, daily: Sequence[DailyAggregate]) -> list[float | None]:
        return [getattr(d, self.field) for d in daily]

    def reduce(
        self, daily: Sequence[DailyAggregate], policy: InvalidPolicy = InvalidPolicy.PROPAGATE
    ) -> float | None:
        values = self.values(daily)
        if self.statistic == "sum":
            return total(values, policy)
        return mean(values, policy)


TRACKED_METRICS: tuple[TrackedMetric, ...] = (
    TrackedMetric("temperature", "Temperature (℃)", "mean_temperature", "mean"),
    TrackedMetric("humidity", "Humidity (%)", "mean_humidity", "mean"),
    TrackedMetric("wind_speed", "Wind Speed (m/s)", "mean_wind_speed", "mean"),
    TrackedMetric("solar_radiation", "Solar Radiation", "mean_solar_radiation", "mean"),
    TrackedMetric("rainfall", "Rainfall (mm)", "total_rainfall", "sum"),
)


@dataclass(frozen=True)
class MetricReference:
    """Full-series reference for one metric.

    ``reference`` is the global mean (global sum for rainfall) drawn as a
    comparison line; ``axis_max`` is the top of the bar axis.
    """

    reference: float
    axis_max: float


GlobalReferences = dict[str, MetricReference]


@dataclass(frozen=True)
class MetricSummary:
    """Selected-days statistic for one metric next to its global reference."""

    key: str
    title: str
    statistic: str
    value: float
    reference: float
    axis_max: float


def compute_references(
    daily: Sequence[DailyAggregate], policy: InvalidPolicy = InvalidPolicy.PROPAGATE
) -> GlobalReferences:
    """Reference values per metric from the full daily series (computed once)."""
    refs: GlobalReferences = {}
    for metric in TRACKED_METRICS:
        reference = or_zero(metric.reduce(daily, policy))
        if metric.statistic == "sum":
            axis_max = reference * RAINFALL_AXIS_HEADROOM
        else:
            axis_max = or_zero(maximum(metric.values(daily), policy))
        refs[metric.key] = MetricReference(reference=reference, axis_max=axis_max)
    return refs


def summarize_metrics(
    daily: Sequence[DailyAggregate],
    references: GlobalReferences,
    policy: InvalidPolicy = InvalidPolicy.PROPAGATE,
) -> list[MetricSummary]:
    """One summary per tracked metric, in display order.

    Undefined statistics (empty selection, invalid inputs) are reported as 0.
    """
    summaries: list[MetricSummary] = []
    for metric in TRACKED_METRICS:
        ref = references.get(metric.key, MetricReference(reference=0.0, axis_max=0.0))
        summaries.append(
            MetricSummary(
                key=metric.key,
                title=metric.title,
                statistic=metric.statistic,
                value=or_zero(metric.reduce(daily, policy)),
                reference=ref.reference,
                axis_max=ref.axis_max,
            )
        )
    return summaries
