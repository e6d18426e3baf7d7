"""JSON serialization helpers for the daily series and selection views."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from seoul_bike_explorer.analysis.correlation import TARGET_METRIC
from seoul_bike_explorer.analysis.reducers import or_zero

if TYPE_CHECKING:
    from collections.abc import Sequence

    from seoul_bike_explorer.analysis.correlation import CorrelationRanking
    from seoul_bike_explorer.analysis.dashboard import Dataset, SelectionView
    from seoul_bike_explorer.analysis.hourly import HourlyProfile
    from seoul_bike_explorer.analysis.metrics import MetricSummary
    from seoul_bike_explorer.datasources.seoul_bike.models import DailyAggregate


def _num(value: float | None, digits: int = 2) -> float | None:
    return None if value is None else round(value, digits)


def daily_to_dict(daily: Sequence[DailyAggregate]) -> list[dict[str, Any]]:
    """Serialize daily aggregates; invalid statistics become ``null``."""
    return [
        {
            "date": d.day.isoformat(),
            "total_rentals": _num(d.total_rentals, 0),
            "mean_temperature": _num(d.mean_temperature),
            "mean_humidity": _num(d.mean_humidity),
            "mean_wind_speed": _num(d.mean_wind_speed),
            "mean_solar_radiation": _num(d.mean_solar_radiation),
            "total_rainfall": _num(d.total_rainfall),
            "season": d.season,
        }
        for d in daily
    ]


def hourly_to_dict(profile: HourlyProfile) -> dict[str, Any]:
    return {
        "hours": list(range(24)),
        "mean_rentals": [round(v, 2) for v in profile.means],
        "peak_hour": profile.peak_hour,
        "peak_hour_label": profile.peak_hour_label,
        "peak_value": round(profile.peak_value, 2),
        "peak_label": profile.peak_label,
    }


def metrics_to_dict(summaries: Sequence[MetricSummary]) -> list[dict[str, Any]]:
    return [
        {
            "key": s.key,
            "title": s.title,
            "statistic": s.statistic,
            "value": round(s.value, 2),
            "reference": round(s.reference, 2),
            "axis_max": round(s.axis_max, 2),
        }
        for s in summaries
    ]


def correlation_to_dict(ranking: CorrelationRanking) -> dict[str, Any]:
    """Serialize coefficients (``null`` when unavailable) and the top factors."""
    return {
        "target": TARGET_METRIC,
        "day_count": ranking.day_count,
        "entries": [
            {"metric": e.metric, "coefficient": _num(e.coefficient, 4)} for e in ranking.entries
        ],
        "ranking": [e.metric for e in ranking.ranked],
        "top_factors": ranking.top_factors,
        "top_factors_label": ranking.top_factors_label,
    }


def view_to_dict(view: SelectionView) -> dict[str, Any]:
    """Serialize one selection view."""
    return {
        "selection": None if view.rect is None else view.rect.model_dump(),
        "period_label": view.period_label,
        "selected_days": [d.day.isoformat() for d in view.selection.daily],
        "selected_record_count": len(view.selection.records),
        "mean_daily_rentals": round(or_zero(view.mean_daily_rentals), 0),
        "hourly": hourly_to_dict(view.hourly),
        "metrics": metrics_to_dict(view.metrics),
        "correlation": correlation_to_dict(view.correlation),
    }


def dataset_to_dict(dataset: Dataset) -> dict[str, Any]:
    """Serialize the load-time state a renderer needs: series, axes, references."""
    return {
        "record_count": len(dataset.records),
        "daily": daily_to_dict(dataset.daily),
        "axes": dataset.projection.domains().model_dump(mode="json"),
        "references": {
            key: {"reference": round(ref.reference, 2), "axis_max": round(ref.axis_max, 2)}
            for key, ref in dataset.references.items()
        },
    }
