"""Coerce raw text rows into typed ``RawRecord`` values.

Numeric text that fails to parse becomes ``None`` and is kept; a row whose
date fails to parse is dropped. Row order is preserved.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from datetime import date

from seoul_bike_explorer.datasources.seoul_bike import client
from seoul_bike_explorer.datasources.seoul_bike.models import RawRecord

logger = logging.getLogger(__name__)


def parse_number(text: str | None) -> float | None:
    """Parse numeric text.

    Blank text counts as zero. Missing fields, unparsable text and ``nan``
    give None.
    """
    if text is None:
        return None
    stripped = text.strip()
    if not stripped:
        return 0.0
    try:
        value = float(stripped)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return value


def parse_day(text: str | None) -> date | None:
    """Parse ``day/month/year`` text into a date, or None if it is not a real date."""
    if not text:
        return None
    parts = text.strip().split("/")
    if len(parts) != 3:
        return None
    try:
        day, month, year = (int(p) for p in parts)
        return date(year, month, day)
    except ValueError:
        return None


def _canonical_fields(row: Mapping[str, str]) -> dict[str, str]:
    return {client.canonical_column(k): v for k, v in row.items() if k is not None}


def normalize_row(row: Mapping[str, str]) -> RawRecord | None:
    """Build a RawRecord from one text row, or None if its date is unusable."""
    fields = _canonical_fields(row)
    day = parse_day(fields.get(client.DATE))
    if day is None:
        return None

    season = (fields.get(client.SEASONS) or "").strip()
    if season not in client.SEASON_LABELS:
        logger.debug("Unrecognized season %r on %s", season, day)

    return RawRecord(
        day=day,
        hour=parse_number(fields.get(client.HOUR)),
        rented_count=parse_number(fields.get(client.RENTED_COUNT)),
        temperature=parse_number(fields.get(client.TEMPERATURE)),
        humidity=parse_number(fields.get(client.HUMIDITY)),
        wind_speed=parse_number(fields.get(client.WIND_SPEED)),
        visibility=parse_number(fields.get(client.VISIBILITY)),
        dew_point=parse_number(fields.get(client.DEW_POINT)),
        solar_radiation=parse_number(fields.get(client.SOLAR_RADIATION)),
        rainfall=parse_number(fields.get(client.RAINFALL)),
        snowfall=parse_number(fields.get(client.SNOWFALL)),
        season=season,
    )


def normalize_rows(rows: Iterable[Mapping[str, str]]) -> list[RawRecord]:
    """Normalize text rows, dropping those with unparsable dates.

    Args:
        rows: Field-name -> text mappings (e.g. from ``csv.DictReader``).

    Returns:
        Valid records in input order.
    """
    records: list[RawRecord] = []
    dropped = 0
    for row in rows:
        record = normalize_row(row)
        if record is None:
            dropped += 1
            continue
        records.append(record)

    if dropped:
        logger.info("Dropped %d rows with unparsable dates", dropped)
    return records
