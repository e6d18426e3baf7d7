"""Seoul Bike Explorer - brush-linked views over hourly bike rental records.

Architecture::

    datasources/   Seoul bike dataset (download, CSV loading, row normalization)
    store.py       Tiered cache with TTL (reference -> derived)
    analysis/      Aggregation and recomputation engine (daily, selection,
                   hourly profile, metric summaries, correlation ranking)
    flows/         Prefect orchestration (fetch checks freshness, build writes views)
    services/      Shared utilities (HTTP client with retry)

Data flow: datasources -> store (cache) -> analysis -> serialization -> derived/

Extension points - see each package's docstring for step-by-step guides:
  - New data source:   datasources/__init__.py
  - New derived view:  analysis/__init__.py
"""

__version__ = "0.1.0"
__author__ = "Michael Howden"

from seoul_bike_explorer.config import Settings

__all__ = ["Settings", "__version__"]
