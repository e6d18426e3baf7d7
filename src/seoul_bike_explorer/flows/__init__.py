"""Prefect flows for the Seoul bike explorer.

Flows:
  - fetch: Download the hourly dataset into the reference tier
  - build: Compute the daily series and selection views into the derived tier
"""

from seoul_bike_explorer.flows.build import build_all
from seoul_bike_explorer.flows.fetch import fetch_all

__all__ = ["build_all", "fetch_all"]
