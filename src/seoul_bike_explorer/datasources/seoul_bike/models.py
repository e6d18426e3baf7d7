"""Seoul bike record models.

Numeric fields are ``float | None``: ``None`` marks a value that failed to
parse. Reducers in ``analysis.reducers`` decide whether it propagates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date


@dataclass(frozen=True)
class RawRecord:
    """One hourly observation."""

    day: date
    hour: float | None
    rented_count: float | None
    temperature: float | None
    humidity: float | None
    wind_speed: float | None
    visibility: float | None
    dew_point: float | None
    solar_radiation: float | None
    rainfall: float | None
    snowfall: float | None
    season: str

    @property
    def hour_of_day(self) -> int | None:
        """Hour as an int (0-23), or None when it is not a whole hour."""
        if self.hour is None or not self.hour.is_integer():
            return None
        return int(self.hour)


@dataclass(frozen=True)
class DailyAggregate:
    """All hourly records of one calendar day reduced to a single point.

    Only days with positive total rentals are kept in the canonical series.
    """

    day: date
    total_rentals: float | None
    mean_temperature: float | None
    mean_humidity: float | None
    mean_wind_speed: float | None
    mean_solar_radiation: float | None
    total_rainfall: float | None
    season: str


@dataclass(frozen=True)
class DailyMetrics:
    """Wider per-day reduction used for correlation against rentals."""

    day: date
    total_rentals: float | None
    temperature: float | None
    humidity: float | None
    wind_speed: float | None
    visibility: float | None
    dew_point: float | None
    solar_radiation: float | None
    rainfall: float | None
