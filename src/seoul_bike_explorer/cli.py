"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from seoul_bike_explorer import __version__
from seoul_bike_explorer.analysis.dashboard import Dataset, SelectionView, compute_view
from seoul_bike_explorer.analysis.reducers import InvalidPolicy
from seoul_bike_explorer.config import get_settings
from seoul_bike_explorer.datasources import seoul_bike
from seoul_bike_explorer.flows.build import VIEWS_PATH, build_all
from seoul_bike_explorer.flows.fetch import DATASET_PATH, fetch_all
from seoul_bike_explorer.schemas import DataBounds
from seoul_bike_explorer.store import DataStore


def _add_window_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--start", type=date.fromisoformat, help="First day (YYYY-MM-DD)")
    parser.add_argument("--end", type=date.fromisoformat, help="Last day (YYYY-MM-DD)")
    parser.add_argument("--min-rentals", type=float, help="Lowest daily total to include")
    parser.add_argument("--max-rentals", type=float, help="Highest daily total to include")
    parser.add_argument(
        "--csv",
        type=Path,
        default=None,
        help="Read this CSV instead of the fetched dataset",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="seoul-bike-explorer",
        description="Daily, hourly, weather and correlation views over Seoul bike rentals",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    fetch_parser = subparsers.add_parser("fetch", help="Download the dataset")
    fetch_parser.add_argument(
        "--force",
        action="store_true",
        help="Download even if the stored copy is fresh",
    )

    build_parser = subparsers.add_parser("build", help="Write derived views to the store")
    _add_window_arguments(build_parser)

    subparsers.add_parser("refresh", help="Fetch data and build views")

    explore_parser = subparsers.add_parser("explore", help="Print views for a selection window")
    _add_window_arguments(explore_parser)

    return parser


def bounds_from_args(args: argparse.Namespace) -> DataBounds:
    """Selection window from the --start/--end/--min-rentals/--max-rentals flags."""
    return DataBounds(
        start=args.start,
        end=args.end,
        min_rentals=args.min_rentals,
        max_rentals=args.max_rentals,
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Data dir: {settings.data_dir}")
    print(f"Dataset URL: {settings.dataset_url}")
    store = DataStore(settings.data_dir)
    fetched = store.meta(DATASET_PATH).get("fetched_at")
    print(f"Dataset fetched: {fetched or 'never'}")

    views = store.read(VIEWS_PATH)
    if views is None:
        print("Last build: never")
    else:
        built = store.meta(VIEWS_PATH).get("fetched_at")
        days = len(views["dataset"]["daily"])
        print(f"Last build: {built} ({days} days, period {views['view']['period_label']})")
    return 0


def cmd_fetch(args: argparse.Namespace) -> int:
    """Handle the 'fetch' command."""
    result = fetch_all(force=args.force)
    print(f"Dataset: {result['path']}")
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command."""
    try:
        bounds = bounds_from_args(args)
    except ValidationError as e:
        print(f"Error: invalid selection window: {e}", file=sys.stderr)
        return 1

    result = build_all(bounds=bounds, csv_path=args.csv)
    if "error" in result:
        print("No dataset found. Run 'seoul-bike-explorer fetch' first.", file=sys.stderr)
        return 1
    print(f"Views written to {result['output']}")
    return 0


def cmd_refresh(_args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: fetch data then build views."""
    print("Fetching dataset...")
    fetch_all()

    print("Building views...")
    result = build_all()
    if "error" in result:
        print("Build failed: no dataset available.", file=sys.stderr)
        return 1

    print("Done.")
    return 0


def format_view(view: SelectionView) -> str:
    """Plain-text rendering of a selection view."""
    lines = [
        f"Brush period: {view.period_label}",
        f"Selected days: {len(view.selection.daily)}"
        f" (rental average {view.mean_daily_rentals:,.0f})",
        "",
        view.hourly.peak_label,
    ]
    lines.extend(
        f"  {hour:>2}  {mean:>9,.1f}" for hour, mean in enumerate(view.hourly.means)
    )
    lines.append("")
    lines.append("Weather (selection / global):")
    for s in view.metrics:
        ref_name = "Sum" if s.statistic == "sum" else "Avg"
        lines.append(f"  {s.title:<22} {s.value:>10.1f}   {ref_name} {s.reference:.1f}")
    lines.append("")
    lines.append("Correlation with daily rentals:")
    for e in view.correlation.entries:
        coef = "n/a" if e.coefficient is None else f"{e.coefficient:+.2f}"
        lines.append(f"  {e.metric:<16} {coef:>6}")
    factors = view.correlation.top_factors_label or "unavailable"
    lines.append(f"Important factors: {factors}")
    return "\n".join(lines)


def cmd_explore(args: argparse.Namespace) -> int:
    """Handle the 'explore' command: compute and print one view."""
    settings = get_settings()
    try:
        bounds = bounds_from_args(args)
    except ValidationError as e:
        print(f"Error: invalid selection window: {e}", file=sys.stderr)
        return 1

    if args.csv is not None:
        if not args.csv.exists():
            print(f"Error: {args.csv} does not exist", file=sys.stderr)
            return 1
        rows = seoul_bike.read_csv_rows(args.csv)
    else:
        raw = DataStore(settings.data_dir).read_bytes(DATASET_PATH)
        if raw is None:
            print("No dataset found. Run 'seoul-bike-explorer fetch' first.", file=sys.stderr)
            return 1
        rows = seoul_bike.parse_csv_text(seoul_bike.decode_csv_bytes(raw))

    dataset = Dataset.from_rows(
        rows,
        width=settings.chart_width,
        height=settings.chart_height,
        policy=InvalidPolicy(settings.invalid_policy),
    )
    view = compute_view(dataset, dataset.rect_for(bounds))
    print(format_view(view))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "fetch": cmd_fetch,
        "build": cmd_build,
        "refresh": cmd_refresh,
        "explore": cmd_explore,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
