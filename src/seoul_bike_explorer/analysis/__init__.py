"""Aggregation and recomputation engine.

Pure functions over the normalized records; no I/O, no Prefect decorators.

Modules:
  - reducers: sum/mean/max over values that may be invalid (None)
  - daily: hourly records -> canonical daily series (zero-activity days dropped)
  - scales: chart axis scales and the daily-point projection
  - selection: brush rectangle -> selected days -> their hourly records
  - hourly: mean rentals by hour of day and the peak hour
  - metrics: weather summaries for selected days against global references
  - correlation: Pearson ranking of weather metrics against daily rentals
  - dashboard: load-time Dataset and the per-selection fan-out

Adding a derived view
---------------------
1. Create ``analysis/{name}.py`` with a pure function taking the filtered
   subset (``SelectionResult.daily`` or ``SelectionResult.records``)::

       def summarize_something(records: Iterable[RawRecord]) -> SomeView:
           ...

2. Rules:
   - Read only its input; never close over dataset state.
   - Undefined numeric results surface as 0 (or "unavailable"), never NaN.
   - Return dataclasses the serializer can turn into JSON.

3. Add a field to ``SelectionView`` and fill it in ``compute_view``.

4. Serialize it in ``serialization.py`` and add tests in ``tests/test_{name}.py``.
"""

from seoul_bike_explorer.analysis.correlation import (
    CorrelationEntry,
    CorrelationRanking,
    correlate_with_rentals,
    pearson,
)
from seoul_bike_explorer.analysis.daily import aggregate_daily, daily_metrics, group_by_day
from seoul_bike_explorer.analysis.dashboard import Dataset, LatestView, SelectionView, compute_view
from seoul_bike_explorer.analysis.hourly import HourlyProfile, format_hour_12h, profile_hours
from seoul_bike_explorer.analysis.metrics import (
    TRACKED_METRICS,
    MetricReference,
    MetricSummary,
    compute_references,
    summarize_metrics,
)
from seoul_bike_explorer.analysis.reducers import InvalidPolicy
from seoul_bike_explorer.analysis.scales import ChartProjection, LinearScale, TimeScale
from seoul_bike_explorer.analysis.selection import (
    SelectionResult,
    apply_selection,
    expand_to_records,
    select_daily,
)

__all__ = [
    "TRACKED_METRICS",
    "ChartProjection",
    "CorrelationEntry",
    "CorrelationRanking",
    "Dataset",
    "HourlyProfile",
    "InvalidPolicy",
    "LatestView",
    "LinearScale",
    "MetricReference",
    "MetricSummary",
    "SelectionResult",
    "SelectionView",
    "TimeScale",
    "aggregate_daily",
    "apply_selection",
    "compute_references",
    "compute_view",
    "correlate_with_rentals",
    "daily_metrics",
    "expand_to_records",
    "format_hour_12h",
    "group_by_day",
    "pearson",
    "profile_hours",
    "select_daily",
    "summarize_metrics",
]
