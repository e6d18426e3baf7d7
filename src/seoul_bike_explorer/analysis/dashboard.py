"""Load-time dataset state and the per-selection recomputation pass.

``Dataset`` is built once and never mutated. Every selection event calls
``compute_view`` which filters, then derives the hourly profile, metric
summaries and correlation ranking independently from the filtered subset.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from seoul_bike_explorer.analysis.correlation import CorrelationRanking, correlate_with_rentals
from seoul_bike_explorer.analysis.daily import aggregate_daily
from seoul_bike_explorer.analysis.hourly import HourlyProfile, profile_hours
from seoul_bike_explorer.analysis.metrics import (
    GlobalReferences,
    MetricSummary,
    compute_references,
    summarize_metrics,
)
from seoul_bike_explorer.analysis.reducers import InvalidPolicy
from seoul_bike_explorer.analysis.scales import ChartProjection
from seoul_bike_explorer.analysis.selection import (
    SelectionResult,
    apply_selection,
    mean_daily_rentals,
    period_label,
)
from seoul_bike_explorer.datasources.seoul_bike.models import DailyAggregate, RawRecord
from seoul_bike_explorer.datasources.seoul_bike.normalize import normalize_rows
from seoul_bike_explorer.schemas import DataBounds, SelectionRect

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dataset:
    """Read-only session state: records, canonical daily series, scales, references."""

    records: tuple[RawRecord, ...]
    daily: tuple[DailyAggregate, ...]
    projection: ChartProjection
    references: GlobalReferences
    policy: InvalidPolicy = InvalidPolicy.PROPAGATE

    @classmethod
    def from_records(
        cls,
        records: Iterable[RawRecord],
        width: float,
        height: float,
        policy: InvalidPolicy = InvalidPolicy.PROPAGATE,
    ) -> Dataset:
        records = tuple(records)
        daily = tuple(aggregate_daily(records, policy))
        logger.info("Loaded %d hourly records into %d active days", len(records), len(daily))
        return cls(
            records=records,
            daily=daily,
            projection=ChartProjection.from_daily(daily, width, height),
            references=compute_references(daily, policy),
            policy=policy,
        )

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Mapping[str, str]],
        width: float,
        height: float,
        policy: InvalidPolicy = InvalidPolicy.PROPAGATE,
    ) -> Dataset:
        """Normalize text rows and build the dataset."""
        return cls.from_records(normalize_rows(rows), width, height, policy)

    def rect_for(self, bounds: DataBounds | None) -> SelectionRect | None:
        """Screen rectangle for a data-space window; None when unconstrained."""
        if bounds is None or bounds.is_open:
            return None
        return SelectionRect.from_bounds(self.projection, bounds)


@dataclass(frozen=True)
class SelectionView:
    """Everything a renderer shows for one selection."""

    rect: SelectionRect | None
    selection: SelectionResult
    period_label: str
    mean_daily_rentals: float
    hourly: HourlyProfile
    metrics: list[MetricSummary]
    correlation: CorrelationRanking


def compute_view(dataset: Dataset, rect: SelectionRect | None) -> SelectionView:
    """One recomputation pass for a selection event.

    Args:
        dataset: Load-time state.
        rect: Brush rectangle in chart coordinates, or None for all data.
    """
    selection = apply_selection(dataset.records, dataset.daily, dataset.projection, rect)
    logger.debug(
        "Selection %s matched %d days / %d records",
        rect,
        len(selection.daily),
        len(selection.records),
    )
    return SelectionView(
        rect=rect,
        selection=selection,
        period_label=period_label(selection.daily, rect),
        mean_daily_rentals=mean_daily_rentals(selection.daily),
        hourly=profile_hours(selection.records, dataset.policy),
        metrics=summarize_metrics(selection.daily, dataset.references, dataset.policy),
        correlation=correlate_with_rentals(selection.records, dataset.policy),
    )


class LatestView:
    """Holds the view of the newest selection event.

    Events are numbered in arrival order. A view computed for an older event
    than the one already published is discarded.
    """

    def __init__(self) -> None:
        self.event_id: int | None = None
        self.view: SelectionView | None = None

    def publish(self, event_id: int, view: SelectionView) -> bool:
        """Store ``view`` if ``event_id`` is newer; return whether it was kept."""
        if self.event_id is not None and event_id <= self.event_id:
            logger.debug("Discarding stale view for event %d (latest %d)", event_id, self.event_id)
            return False
        self.event_id = event_id
        self.view = view
        return True
