"""Select daily points under a brush rectangle and expand them back to hours.

A rectangle picks days by their projected chart position; the raw records of
the picked days then feed every hour-level view (hourly profile,
correlation).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from seoul_bike_explorer.analysis.reducers import mean, or_zero

if TYPE_CHECKING:
    from seoul_bike_explorer.datasources.seoul_bike.models import DailyAggregate, RawRecord
    from seoul_bike_explorer.schemas import SelectionRect

#: Maps a daily point to its (x, y) chart position under the current scales.
Projection = Callable[["DailyAggregate"], tuple[float, float]]

NO_PERIOD = "None"


@dataclass(frozen=True)
class SelectionResult:
    """Daily points inside the selection plus their hourly records."""

    daily: list[DailyAggregate]
    records: list[RawRecord]

    @property
    def is_empty(self) -> bool:
        return not self.daily


def select_daily(
    daily: Sequence[DailyAggregate],
    project: Projection,
    rect: SelectionRect | None,
) -> list[DailyAggregate]:
    """Daily points whose projected position lies inside ``rect`` (inclusive).

    With no rectangle the whole series is returned.
    """
    if rect is None:
        return list(daily)
    return [d for d in daily if rect.contains(*project(d))]


def expand_to_records(
    records: Sequence[RawRecord], selected: Sequence[DailyAggregate]
) -> list[RawRecord]:
    """All raw records falling on a selected day, in dataset order."""
    days = {d.day for d in selected}
    return [r for r in records if r.day in days]


def apply_selection(
    records: Sequence[RawRecord],
    daily: Sequence[DailyAggregate],
    project: Projection,
    rect: SelectionRect | None,
) -> SelectionResult:
    """Run the filter: daily subset first, then its raw records.

    Args:
        records: Every valid record in the dataset.
        daily: The canonical daily series.
        project: Chart projection the rectangle was drawn against.
        rect: Brush rectangle, or None for "all data".
    """
    if rect is None:
        return SelectionResult(daily=list(daily), records=list(records))
    selected = select_daily(daily, project, rect)
    return SelectionResult(daily=selected, records=expand_to_records(records, selected))


def period_label(selected: Sequence[DailyAggregate], rect: SelectionRect | None) -> str:
    """Brush period such as ``3/1~4/15``; ``None`` without a matching selection."""
    if rect is None or not selected:
        return NO_PERIOD
    start = min(d.day for d in selected)
    end = max(d.day for d in selected)
    return f"{start.month}/{start.day}~{end.month}/{end.day}"


def mean_daily_rentals(selected: Sequence[DailyAggregate]) -> float:
    """Average total rentals per selected day (0 when nothing is selected)."""
    return or_zero(mean(d.total_rentals for d in selected))
