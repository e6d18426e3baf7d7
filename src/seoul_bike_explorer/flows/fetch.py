"""
Prefect flow for fetching the Seoul bike dataset.

Run locally:
    python -m seoul_bike_explorer.flows.fetch

Run with Prefect dashboard:
    prefect server start &
    python -m seoul_bike_explorer.flows.fetch
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

from prefect import flow, task

from seoul_bike_explorer.config import get_settings
from seoul_bike_explorer.datasources import seoul_bike
from seoul_bike_explorer.store import DataStore

# Data store with tiered directories
store = DataStore(get_settings().data_dir)

# Relative path within the store
DATASET_PATH = Path("reference/seoul_bike.csv")


@task(name="fetch-dataset", retries=2, retry_delay_seconds=5)
def fetch_dataset(url: str) -> bytes:
    """Download the hourly rental CSV."""
    return seoul_bike.fetch_dataset_csv(url)


@task(name="save-dataset")
def save_dataset(content: bytes, url: str, ttl_days: int) -> Path:
    """Save the CSV into the reference tier with a freshness window."""
    return store.write_file(
        DATASET_PATH,
        content,
        source=seoul_bike.DATASET_SOURCE,
        valid_until=datetime.now(UTC) + timedelta(days=ttl_days),
        url=url,
        size_bytes=len(content),
    )


@flow(name="fetch-data", log_prints=True)
def fetch_all(
    url: str | None = None, ttl_days: int | None = None, force: bool = False
) -> dict[str, Any]:
    """
    Fetch the dataset unless the stored copy is still fresh.

    Args:
        url: Dataset location (default: ``Settings.dataset_url``).
        ttl_days: Freshness window (default: ``Settings.dataset_ttl_days``).
        force: Download even if the stored copy is fresh.
    """
    settings = get_settings()
    url = url or settings.dataset_url
    ttl_days = ttl_days or settings.dataset_ttl_days

    if not force and store.is_fresh(DATASET_PATH):
        print("Dataset is fresh, skipping fetch.")
        return {"fetched": False, "path": str(store.file_path(DATASET_PATH))}

    print(f"Fetching dataset from {url}...")
    content = fetch_dataset(url)
    output_path = save_dataset(content, url, ttl_days)
    print(f"Saved {len(content):,} bytes to {output_path}")
    return {"fetched": True, "path": str(output_path), "size_bytes": len(content)}


if __name__ == "__main__":
    result = fetch_all()
    print(f"Flow complete: {result}")
