"""Seoul bike dataset location and column layout."""

from __future__ import annotations

DATASET_SOURCE = "archive.ics.uci.edu"

# Canonical column names (the cleaned export used by the dashboard).
DATE = "Date"
HOUR = "Hour"
RENTED_COUNT = "Rented Bike Count"
TEMPERATURE = "Temperature"
HUMIDITY = "Humidity"
WIND_SPEED = "Wind speed"
VISIBILITY = "Visibility"
DEW_POINT = "Dew point temperature"
SOLAR_RADIATION = "Solar Radiation"
RAINFALL = "Rainfall"
SNOWFALL = "Snowfall"
SEASONS = "Seasons"

# Headers as published on UCI, with units.
COLUMN_ALIASES: dict[str, str] = {
    "Temperature(°C)": TEMPERATURE,
    "Humidity(%)": HUMIDITY,
    "Wind speed (m/s)": WIND_SPEED,
    "Visibility (10m)": VISIBILITY,
    "Dew point temperature(°C)": DEW_POINT,
    "Solar Radiation (MJ/m2)": SOLAR_RADIATION,
    "Rainfall(mm)": RAINFALL,
    "Snowfall (cm)": SNOWFALL,
}

SEASON_LABELS = ("Winter", "Spring", "Summer", "Autumn")


def canonical_column(name: str) -> str:
    """Map a raw header to its canonical column name."""
    stripped = name.strip()
    return COLUMN_ALIASES.get(stripped, stripped)
