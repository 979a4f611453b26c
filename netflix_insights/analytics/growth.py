"""Year-over-year growth of content categories.

Counts titles per (category, added year) and compares every year
with the nearest earlier year present for the same category.
A category with a gap (2019, 2021) compares 2021 against 2019.

Percentages are rounded to 2 decimals half away from zero
(decimal.ROUND_HALF_UP): 12.345 -> 12.35, -12.345 -> -12.35.
"""

import logging
from collections import Counter, defaultdict
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from netflix_insights.analytics.schemas import (
    ContentRecord,
    GenreGrowth,
    GrowthRow,
    YearCategoryBucket,
)

logger = logging.getLogger(__name__)

_TWO_PLACES = Decimal("0.01")


# =============================================================================
# STATISTICS
# =============================================================================


@dataclass
class GrowthStats:
    """Statistics for one bucket computation.

    Attributes:
        records_seen: Records received.
        records_skipped: Records without a usable added-date.
        buckets: Distinct (category, year) buckets produced.
    """

    records_seen: int = 0
    records_skipped: int = 0
    buckets: int = 0

    def log_summary(self) -> None:
        """Log bucket statistics."""
        logger.info(
            "Growth buckets: %d records, %d skipped (no added-date), %d buckets",
            self.records_seen,
            self.records_skipped,
            self.buckets,
        )


# =============================================================================
# ROUNDING
# =============================================================================


def round_percent(value: Decimal | float) -> float:
    """Round a percentage to 2 decimals, half away from zero.

    Args:
        value: Percentage value.

    Returns:
        Rounded float.
    """
    if not isinstance(value, Decimal):
        value = Decimal(repr(value))
    return float(value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def _raw_change(current: int, previous: int | None) -> Decimal | None:
    """Unrounded percent change, None when the previous count is 0 or missing."""
    if not previous:
        return None
    return Decimal(current * 100) / Decimal(previous) - 100


def percent_change(current: int, previous: int | None) -> float | None:
    """Percent change between two counts.

    Args:
        current: Count for the current year.
        previous: Count for the nearest earlier year, None if there is none.

    Returns:
        Rounded percentage, or None when undefined (no or zero denominator).
    """
    change = _raw_change(current, previous)
    return round_percent(change) if change is not None else None


# =============================================================================
# BUCKETS
# =============================================================================


def _iter_category_years(
    records: Iterable[ContentRecord],
    stats: GrowthStats,
    first_year: int | None = None,
    last_year: int | None = None,
) -> Iterator[tuple[str, int]]:
    """Expand records into (category, year) pairs.

    Each distinct category of a record yields one pair, so a label
    repeated inside one record counts once.
    """
    for record in records:
        stats.records_seen += 1
        year = record.added_year
        if year is None:
            stats.records_skipped += 1
            logger.debug("Skipping %s: unusable added-date %r", record.show_id, record.date_added)
            continue
        if first_year is not None and year < first_year:
            continue
        if last_year is not None and year > last_year:
            continue
        for category in record.categories:
            yield category, year


def build_buckets(
    records: Iterable[ContentRecord],
    first_year: int | None = None,
    last_year: int | None = None,
) -> list[YearCategoryBucket]:
    """Count titles per (category, added year).

    Args:
        records: Content records.
        first_year: Inclusive lower bound on the added year.
        last_year: Inclusive upper bound on the added year.

    Returns:
        Buckets ordered by category then year, both ascending.
    """
    stats = GrowthStats()
    counts = Counter(_iter_category_years(records, stats, first_year, last_year))
    stats.buckets = len(counts)
    stats.log_summary()

    return [
        YearCategoryBucket(category=category, year=year, count=count)
        for (category, year), count in sorted(counts.items())
    ]


def _iter_raw_changes(
    buckets: Iterable[YearCategoryBucket],
) -> Iterator[tuple[YearCategoryBucket, Decimal | None]]:
    """Pair each bucket with its change vs the previous bucket of its category.

    Buckets must be sorted by category then year.
    """
    previous: YearCategoryBucket | None = None
    for bucket in buckets:
        if previous is None or previous.category != bucket.category:
            yield bucket, None
        else:
            yield bucket, _raw_change(bucket.count, previous.count)
        previous = bucket


# =============================================================================
# REPORTS
# =============================================================================


def analyze_growth(records: Iterable[ContentRecord]) -> list[GrowthRow]:
    """Compute per-year counts and percent change for every category.

    Args:
        records: Content records. Records without a parsable added-date
            are skipped.

    Returns:
        Rows ordered by category then year. The first year of a category
        has percent_change None.
    """
    return [
        GrowthRow(
            category=bucket.category,
            year=bucket.year,
            count=bucket.count,
            percent_change=round_percent(change) if change is not None else None,
        )
        for bucket, change in _iter_raw_changes(build_buckets(records))
    ]


def top_growth_genres(
    records: Iterable[ContentRecord],
    window_years: int | None = None,
) -> list[GenreGrowth]:
    """Average yearly growth per category over the most recent years.

    The window ends at the latest added year found in the data and spans
    `window_years` calendar years. Growth is computed inside the window
    only, then averaged over the years where it is defined.

    Args:
        records: Content records.
        window_years: Window size, defaults to ANALYTICS_GROWTH_WINDOW_YEARS.

    Returns:
        Categories sorted by average growth descending, then name. Categories
        without any defined growth in the window are omitted.
    """
    if window_years is None:
        from netflix_insights.settings import settings

        window_years = settings.analytics.growth_window_years
    if window_years < 1:
        raise ValueError(f"window_years must be >= 1, got {window_years}")

    materialized = list(records)
    years = [year for year in (r.added_year for r in materialized) if year is not None]
    if not years:
        return []

    last_year = max(years)
    first_year = last_year - window_years + 1
    buckets = build_buckets(materialized, first_year=first_year, last_year=last_year)

    changes: dict[str, list[Decimal]] = defaultdict(list)
    for bucket, change in _iter_raw_changes(buckets):
        if change is not None:
            changes[bucket.category].append(change)

    averages = [(category, sum(values) / len(values)) for category, values in changes.items()]
    averages.sort(key=lambda item: (-item[1], item[0]))

    return [
        GenreGrowth(category=category, average_growth=round_percent(average))
        for category, average in averages
    ]
