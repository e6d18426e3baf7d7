"""
Prefect flow for computing the explorer views from the stored dataset.

Loads the hourly CSV, builds the canonical daily series once, computes the
view for an optional data-space window and writes everything a renderer
needs to ``derived/dashboard.json``.

Run locally:
    python -m seoul_bike_explorer.flows.build
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from prefect import flow, task
from prefect.cache_policies import NO_CACHE

from seoul_bike_explorer.analysis.dashboard import Dataset, SelectionView, compute_view
from seoul_bike_explorer.analysis.reducers import InvalidPolicy
from seoul_bike_explorer.config import get_settings
from seoul_bike_explorer.datasources import seoul_bike
from seoul_bike_explorer.flows.fetch import DATASET_PATH
from seoul_bike_explorer.schemas import DataBounds
from seoul_bike_explorer.serialization import dataset_to_dict, view_to_dict
from seoul_bike_explorer.store import DataStore

store = DataStore(get_settings().data_dir)

VIEWS_PATH = Path("derived/dashboard.json")


# =============================================================================
# Loading
# =============================================================================


@task(name="load-rows")
def load_rows(csv_path: Path | None = None) -> list[dict[str, str]] | None:
    """Read dataset rows from ``csv_path``, or from the store when not given.

    Returns None if the stored dataset has not been fetched yet.
    """
    if csv_path is not None:
        return seoul_bike.read_csv_rows(csv_path)
    raw = store.read_bytes(DATASET_PATH)
    if raw is None:
        return None
    return seoul_bike.parse_csv_text(seoul_bike.decode_csv_bytes(raw))


# =============================================================================
# Computation
# =============================================================================


@task(name="build-dataset", cache_policy=NO_CACHE)
def build_dataset(rows: list[dict[str, str]]) -> Dataset:
    """Normalize rows and build the load-time state (daily series, scales, references)."""
    settings = get_settings()
    return Dataset.from_rows(
        rows,
        width=settings.chart_width,
        height=settings.chart_height,
        policy=InvalidPolicy(settings.invalid_policy),
    )


@task(name="compute-view", cache_policy=NO_CACHE)
def compute_selection_view(dataset: Dataset, bounds: DataBounds | None = None) -> SelectionView:
    """Compute the view for a data-space window (None means all data)."""
    return compute_view(dataset, dataset.rect_for(bounds))


@task(name="write-views", cache_policy=NO_CACHE)
def write_views(dataset: Dataset, view: SelectionView, bounds: DataBounds | None = None) -> Path:
    """Write the dataset summary and the view to the derived tier."""
    payload = {"dataset": dataset_to_dict(dataset), "view": view_to_dict(view)}
    params: dict[str, Any] = {}
    if bounds is not None:
        params["bounds"] = bounds.model_dump(mode="json")
    return store.write(VIEWS_PATH, payload, source="seoul-bike-explorer", **params)


@flow(name="build-views", log_prints=True)
def build_all(bounds: DataBounds | None = None, csv_path: Path | None = None) -> dict[str, Any]:
    """
    Build the derived views.

    Args:
        bounds: Optional selection window in data units.
        csv_path: Read this CSV instead of the stored dataset.
    """
    print("Loading dataset rows...")
    rows = load_rows(csv_path)
    if rows is None:
        print("No dataset found. Run fetch flow first.")
        return {"error": "no data"}

    print(f"Aggregating {len(rows):,} rows...")
    dataset = build_dataset(rows)

    print("Computing selection view...")
    view = compute_selection_view(dataset, bounds)

    output_path = write_views(dataset, view, bounds)
    print(f"Views written: {output_path}")
    return {
        "days": len(dataset.daily),
        "selected_days": len(view.selection.daily),
        "peak": view.hourly.peak_label,
        "top_factors": view.correlation.top_factors,
        "output": str(output_path),
    }


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
