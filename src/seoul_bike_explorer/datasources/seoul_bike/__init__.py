"""Seoul bike sharing dataset (hourly rentals with weather covariates).

Public API:
  - models: RawRecord, DailyAggregate, DailyMetrics
  - download: fetch_dataset_csv
  - loader: read_csv_rows, parse_csv_text, decode_csv_bytes
  - normalize: normalize_rows, parse_number, parse_day
"""

from seoul_bike_explorer.datasources.seoul_bike.client import DATASET_SOURCE
from seoul_bike_explorer.datasources.seoul_bike.download import fetch_dataset_csv
from seoul_bike_explorer.datasources.seoul_bike.loader import (
    decode_csv_bytes,
    parse_csv_text,
    read_csv_rows,
)
from seoul_bike_explorer.datasources.seoul_bike.models import (
    DailyAggregate,
    DailyMetrics,
    RawRecord,
)
from seoul_bike_explorer.datasources.seoul_bike.normalize import (
    normalize_rows,
    parse_day,
    parse_number,
)

__all__ = [
    "DATASET_SOURCE",
    "DailyAggregate",
    "DailyMetrics",
    "RawRecord",
    "decode_csv_bytes",
    "fetch_dataset_csv",
    "normalize_rows",
    "parse_csv_text",
    "parse_day",
    "parse_number",
    "read_csv_rows",
]
