"""Command line entry point. Allows python -m netflix_insights."""

import argparse
import sys
from pathlib import Path

from netflix_insights.analytics import (
    CatalogueReports,
    ContentRecord,
    analyze_growth,
    render_frame,
    render_growth,
    render_top_growth,
    top_growth_genres,
)
from netflix_insights.etl.utils import setup_logger

logger = setup_logger("cli")

REPORT_NAMES = (
    "count-by-kind",
    "most-common-rating",
    "consistent-countries",
    "duration-groups",
    "top-countries",
    "longest-movie",
    "added-since",
    "series-min-seasons",
    "genre-counts",
    "country-share",
    "keyword-labels",
)


# =============================================================================
# DATA ACCESS
# =============================================================================


def load_records(csv_path: Path | None) -> list[ContentRecord]:
    """Read records from a CSV file, or from the database without one.

    Args:
        csv_path: Dataset CSV path or None.

    Returns:
        Content records.
    """
    if csv_path is not None:
        from netflix_insights.etl.extractors import CSVExtractor

        return CSVExtractor().extract_records(csv_path)

    from netflix_insights.database import TitleRepository, get_database

    db = get_database()
    db.create_schema()
    with db.session() as session:
        records = list(TitleRepository(session).iter_records())
    logger.info(f"Read {len(records)} records from database")
    return records


# =============================================================================
# COMMAND HANDLERS
# =============================================================================


def run_load(csv_path: Path | None, replace: bool) -> None:
    """Load the CSV dataset into the database."""
    from netflix_insights.database import get_database
    from netflix_insights.etl.extractors import CSVExtractor
    from netflix_insights.etl.loaders import TitleLoader
    from netflix_insights.settings import settings

    records = CSVExtractor().extract_records(csv_path)

    db = get_database()
    db.create_schema()
    with db.session() as session:
        stats = TitleLoader(session, batch_size=settings.dataset.batch_size).load(
            records, replace=replace
        )

    print(f"Loaded {stats.inserted} titles ({stats.skipped} skipped, {stats.deleted} replaced)")


def run_growth(csv_path: Path | None) -> None:
    """Print per-year growth for every category."""
    print(render_growth(analyze_growth(load_records(csv_path))))


def run_top_growth(csv_path: Path | None, window: int | None) -> None:
    """Print average growth over the most recent years."""
    print(render_top_growth(top_growth_genres(load_records(csv_path), window_years=window)))


def run_report(csv_path: Path | None, name: str) -> None:
    """Print one catalogue report."""
    reports = CatalogueReports.from_records(load_records(csv_path))
    print(render_frame(reports.run(name)))


def run_director(csv_path: Path | None, name: str) -> None:
    """Print titles of one director."""
    reports = CatalogueReports.from_records(load_records(csv_path))
    print(render_frame(reports.by_director(name)))


def run_all(csv_path: Path | None) -> None:
    """Print every report."""
    records = load_records(csv_path)
    reports = CatalogueReports.from_records(records)

    print(f"Total titles: {reports.total_count()}")
    print("\n== growth ==")
    print(render_growth(analyze_growth(records)))
    print("\n== top-growth ==")
    print(render_top_growth(top_growth_genres(records)))
    for name in REPORT_NAMES:
        print(f"\n== {name} ==")
        print(render_frame(reports.run(name)))


# =============================================================================
# ARGUMENT PARSING
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Netflix catalogue insights",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m netflix_insights load --csv data/raw/netflix_titles.csv
  python -m netflix_insights growth
  python -m netflix_insights top-growth --window 3
  python -m netflix_insights report genre-counts
  python -m netflix_insights director "Rajiv Chilaka"
  python -m netflix_insights all --csv data/raw/netflix_titles.csv
        """,
    )

    csv_parent = argparse.ArgumentParser(add_help=False)
    csv_parent.add_argument("--csv", type=Path, default=None, help="Dataset CSV (default: database)")

    subparsers = parser.add_subparsers(dest="command", help="Command")

    load_parser = subparsers.add_parser("load", help="Load CSV into the database")
    load_parser.add_argument("--csv", type=Path, default=None, help="Dataset CSV")
    load_parser.add_argument("--replace", action="store_true", help="Delete stored rows first")

    subparsers.add_parser("growth", parents=[csv_parent], help="Yearly growth per genre")

    top_parser = subparsers.add_parser(
        "top-growth", parents=[csv_parent], help="Genres with the highest recent growth"
    )
    top_parser.add_argument("--window", type=int, default=None, help="Years in the window")

    report_parser = subparsers.add_parser("report", parents=[csv_parent], help="One report")
    report_parser.add_argument("name", choices=REPORT_NAMES)

    director_parser = subparsers.add_parser(
        "director", parents=[csv_parent], help="Titles by director"
    )
    director_parser.add_argument("name")

    subparsers.add_parser("all", parents=[csv_parent], help="Every report")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch the command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "load":
            run_load(args.csv, args.replace)
        elif args.command == "growth":
            run_growth(args.csv)
        elif args.command == "top-growth":
            run_top_growth(args.csv, args.window)
        elif args.command == "report":
            run_report(args.csv, args.name)
        elif args.command == "director":
            run_director(args.csv, args.name)
        elif args.command == "all":
            run_all(args.csv)

    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(130)
    except Exception as e:
        logger.error(f"{args.command} failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
