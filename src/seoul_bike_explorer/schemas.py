"""
Boundary models for the explorer.

Pydantic models for what crosses the engine's edges: the user's selection
(in screen or data space) and the axis domains handed to a chart renderer.
Engine-internal records are dataclasses in ``datasources`` and ``analysis``.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, model_validator

if TYPE_CHECKING:
    from seoul_bike_explorer.analysis.scales import ChartProjection


class SelectionRect(BaseModel):
    """Axis-aligned brush rectangle in chart coordinates (closed on all sides).

    Corners may be given in any order; they are normalized so that
    ``x0 <= x1`` and ``y0 <= y1``.
    """

    model_config = {"frozen": True}

    x0: float
    y0: float
    x1: float
    y1: float

    @model_validator(mode="before")
    @classmethod
    def _order_corners(cls, data: object) -> object:
        if isinstance(data, dict) and {"x0", "x1", "y0", "y1"} <= data.keys():
            try:
                x0, x1 = sorted((float(data["x0"]), float(data["x1"])))
                y0, y1 = sorted((float(data["y0"]), float(data["y1"])))
            except (TypeError, ValueError):
                # Left for field validation to report
                return data
            data = {**data, "x0": x0, "x1": x1, "y0": y0, "y1": y1}
        return data

    def contains(self, x: float, y: float) -> bool:
        """Whether a point lies inside or on the edge of the rectangle."""
        return self.x0 <= x <= self.x1 and self.y0 <= y <= self.y1

    @classmethod
    def from_bounds(cls, projection: ChartProjection, bounds: DataBounds) -> SelectionRect:
        """Project a data-space window into a screen rectangle.

        Missing bounds fall back to the edge of the corresponding axis domain.
        """
        x_start, x_end = projection.x.domain
        y_low, y_high = sorted(projection.y.domain)
        start = bounds.start or x_start
        end = bounds.end or x_end
        low = bounds.min_rentals if bounds.min_rentals is not None else y_low
        high = bounds.max_rentals if bounds.max_rentals is not None else y_high
        return cls(
            x0=projection.x(start),
            x1=projection.x(end),
            y0=projection.y(high),
            y1=projection.y(low),
        )


class DataBounds(BaseModel):
    """A selection window in data units; any side may be left open."""

    start: date | None = None
    end: date | None = None
    min_rentals: float | None = Field(default=None, ge=0)
    max_rentals: float | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> DataBounds:
        if self.start and self.end and self.start > self.end:
            msg = f"start {self.start} is after end {self.end}"
            raise ValueError(msg)
        if (
            self.min_rentals is not None
            and self.max_rentals is not None
            and self.min_rentals > self.max_rentals
        ):
            msg = "min_rentals is greater than max_rentals"
            raise ValueError(msg)
        return self

    @property
    def is_open(self) -> bool:
        """True when no side is constrained (equivalent to no selection)."""
        return (
            self.start is None
            and self.end is None
            and self.min_rentals is None
            and self.max_rentals is None
        )


class AxisDomains(BaseModel):
    """Domains and screen ranges of the daily scatter axes."""

    date_start: date
    date_end: date
    rentals_min: float
    rentals_max: float
    width: float
    height: float
