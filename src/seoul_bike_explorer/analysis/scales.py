"""Axis scales mapping the daily series into chart (screen) coordinates.

Selection rectangles are drawn in screen space, so deciding which daily
points a rectangle covers needs the same scales the chart uses: dates on a
linear time axis and total rentals on an inverted, "niced" linear axis.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from seoul_bike_explorer.analysis.reducers import or_zero
from seoul_bike_explorer.schemas import AxisDomains

if TYPE_CHECKING:
    from collections.abc import Sequence

    from seoul_bike_explorer.datasources.seoul_bike.models import DailyAggregate

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)

EPOCH_DAY = date(1970, 1, 1)


def tick_increment(start: float, stop: float, count: int) -> float:
    """Round tick step for ``count`` ticks over [start, stop].

    Positive results are the step itself; negative results are the negated
    inverse of a fractional step (``-20`` means a step of 0.05).
    """
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / 10**power
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1
    if power >= 0:
        return factor * 10**power
    return -(10**-power) / factor


@dataclass
class LinearScale:
    """Continuous linear map from ``domain`` onto ``range``."""

    domain: tuple[float, float]
    range: tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return (r0 + r1) / 2
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def nice(self, count: int = 10) -> LinearScale:
        """Extend the domain outward to whole multiples of a round tick step."""
        d0, d1 = self.domain
        if count <= 0 or d0 == d1 or not (math.isfinite(d0) and math.isfinite(d1)):
            return self
        reverse = d1 < d0
        start, stop = (d1, d0) if reverse else (d0, d1)

        prestep: float | None = None
        for _ in range(10):
            step = tick_increment(start, stop, count)
            if step == prestep:
                self.domain = (stop, start) if reverse else (start, stop)
                break
            if step > 0:
                start = math.floor(start / step) * step
                stop = math.ceil(stop / step) * step
            elif step < 0:
                start = math.ceil(start * step) / step
                stop = math.floor(stop * step) / step
            else:
                break
            prestep = step
        return self


@dataclass
class TimeScale:
    """Linear map from calendar days onto ``range``."""

    domain: tuple[date, date]
    range: tuple[float, float]

    def __call__(self, day: date) -> float:
        d0, d1 = self.domain
        return LinearScale((d0.toordinal(), d1.toordinal()), self.range)(day.toordinal())


@dataclass
class ChartProjection:
    """Screen position of each daily point: (day -> x, total rentals -> y)."""

    x: TimeScale
    y: LinearScale

    @classmethod
    def from_daily(
        cls, daily: Sequence[DailyAggregate], width: float, height: float
    ) -> ChartProjection:
        """Fit scales to the extent of a daily series.

        The y axis runs from ``height`` (bottom) to 0 (top) and is niced.
        """
        if daily:
            days = [d.day for d in daily]
            totals = [or_zero(d.total_rentals) for d in daily]
            x_domain = (min(days), max(days))
            y_domain = (min(totals), max(totals))
        else:
            x_domain = (EPOCH_DAY, EPOCH_DAY)
            y_domain = (0.0, 0.0)

        return cls(
            x=TimeScale(x_domain, (0.0, width)),
            y=LinearScale(y_domain, (height, 0.0)).nice(),
        )

    def __call__(self, agg: DailyAggregate) -> tuple[float, float]:
        return self.x(agg.day), self.y(or_zero(agg.total_rentals))

    def domains(self) -> AxisDomains:
        """Axis domains for the chart renderer."""
        return AxisDomains(
            date_start=self.x.domain[0],
            date_end=self.x.domain[1],
            rentals_min=self.y.domain[0],
            rentals_max=self.y.domain[1],
            width=self.x.range[1],
            height=self.y.range[0],
        )
