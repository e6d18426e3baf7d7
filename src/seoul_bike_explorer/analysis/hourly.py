"""Hour-of-day rental profile and its peak hour."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from seoul_bike_explorer.analysis.reducers import InvalidPolicy, mean, or_zero

if TYPE_CHECKING:
    from collections.abc import Iterable

    from seoul_bike_explorer.datasources.seoul_bike.models import RawRecord

HOURS = tuple(range(24))
PEAK_UNAVAILABLE = "unavailable"


def format_hour_12h(hour: int) -> str:
    """24-hour clock hour as a 12-hour label, e.g. 0 -> ``12 AM``, 18 -> ``6 PM``."""
    if hour == 0:
        return "12 AM"
    if hour < 12:
        return f"{hour} AM"
    if hour == 12:
        return "12 PM"
    return f"{hour - 12} PM"


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class HourlyProfile:
    """Mean rentals for each hour 0-23 and the busiest hour.

    ``peak_hour`` is None when no hour has a positive mean.
    """

    means: tuple[float, ...]
    peak_hour: int | None
    peak_value: float

    @property
    def peak_hour_label(self) -> str:
        if self.peak_hour is None:
            return PEAK_UNAVAILABLE
        return format_hour_12h(self.peak_hour)

    @property
    def peak_label(self) -> str:
        """Headline text, e.g. ``Peak Hour: 6PM, Rental Average: 1,234``."""
        if self.peak_hour is None:
            return PEAK_UNAVAILABLE
        hour = self.peak_hour_label.replace(" ", "")
        return f"Peak Hour: {hour}, Rental Average: {round_half_up(self.peak_value):,}"


def profile_hours(
    records: Iterable[RawRecord], policy: InvalidPolicy = InvalidPolicy.PROPAGATE
) -> HourlyProfile:
    """Average rented count per hour of day over a record subset.

    Hours without records (or whose mean is invalid) report 0. Ties for the
    peak go to the earliest hour.
    """
    by_hour: dict[int, list[float | None]] = {h: [] for h in HOURS}
    for record in records:
        hour = record.hour_of_day
        if hour in by_hour:
            by_hour[hour].append(record.rented_count)

    means = tuple(or_zero(mean(by_hour[h], policy)) for h in HOURS)

    peak_value = max(means)
    peak_hour = means.index(peak_value) if peak_value > 0 else None
    return HourlyProfile(means=means, peak_hour=peak_hour, peak_value=peak_value)
