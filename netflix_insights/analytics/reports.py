"""Catalogue reports computed with Polars.

Single-pass aggregations over the Netflix titles table: content type
counts, rating rankings, country coverage, duration groups, genre
counts and keyword labelling. Multi-valued fields are exploded to one
row per value before grouping.
"""

import re
from collections.abc import Callable, Iterable, Sequence
from datetime import date
from typing import Any, Final

import polars as pl

from netflix_insights.analytics.growth import round_percent
from netflix_insights.analytics.schemas import ContentKind, ContentRecord
from netflix_insights.etl.utils import setup_logger
from netflix_insights.settings import settings

MOVIE: Final[str] = ContentKind.MOVIE.value
SERIES: Final[str] = ContentKind.SERIES.value

LABEL_BAD: Final[str] = "Bad"
LABEL_GOOD: Final[str] = "Good"

FRAME_SCHEMA: Final[dict[str, pl.DataType]] = {
    "show_id": pl.Utf8,
    "kind": pl.Utf8,
    "title": pl.Utf8,
    "director": pl.Utf8,
    "cast": pl.List(pl.Utf8),
    "country": pl.List(pl.Utf8),
    "date_added": pl.Utf8,
    "added_on": pl.Date,
    "release_year": pl.Int64,
    "rating": pl.Utf8,
    "duration": pl.Utf8,
    "duration_value": pl.Int64,
    "listed_in": pl.List(pl.Utf8),
    "description": pl.Utf8,
}


def records_to_frame(records: Iterable[ContentRecord]) -> pl.DataFrame:
    """Build the analysis DataFrame from content records.

    Args:
        records: Content records.

    Returns:
        One row per record with parsed added-date, added year and
        numeric duration columns.
    """
    rows = [
        {
            "show_id": r.show_id,
            "kind": r.kind.value,
            "title": r.title,
            "director": r.director,
            "cast": list(r.cast),
            "country": list(r.country),
            "date_added": r.date_added,
            "added_on": r.added_on,
            "release_year": r.release_year,
            "rating": r.rating,
            "duration": r.duration,
            "duration_value": r.duration_value,
            "listed_in": list(r.categories),
            "description": r.description,
        }
        for r in records
    ]
    df = pl.DataFrame(rows, schema=FRAME_SCHEMA)
    return df.with_columns(pl.col("added_on").dt.year().alias("added_year"))


def years_before(reference: date, years: int) -> date:
    """Same calendar day `years` years earlier (Feb 29 falls back to Feb 28).

    Args:
        reference: Reference date.
        years: Number of years to go back.

    Returns:
        Shifted date.
    """
    try:
        return reference.replace(year=reference.year - years)
    except ValueError:
        return reference.replace(year=reference.year - years, day=28)


class CatalogueReports:
    """Catalogue reports over one immutable DataFrame.

    Attributes:
        frame: Analysis DataFrame built by records_to_frame.
    """

    def __init__(self, frame: pl.DataFrame) -> None:
        """Initialize reports.

        Args:
            frame: DataFrame built by records_to_frame.
        """
        self.frame = frame
        self.logger = setup_logger("analytics.reports")
        self.params = settings.analytics

    @classmethod
    def from_records(cls, records: Iterable[ContentRecord]) -> "CatalogueReports":
        """Build reports from content records."""
        return cls(records_to_frame(records))

    # =========================================================================
    # COUNTS
    # =========================================================================

    def total_count(self) -> int:
        """Number of titles."""
        return self.frame.height

    def count_by_kind(self) -> pl.DataFrame:
        """Number of movies and series.

        Returns:
            Columns kind, total; sorted by kind.
        """
        return self.frame.group_by("kind").agg(pl.len().alias("total")).sort("kind")

    def most_common_rating(self) -> pl.DataFrame:
        """Most frequent rating per content kind.

        Ties are all returned. Titles without rating are ignored.

        Returns:
            Columns kind, rating, total; sorted by kind then rating.
        """
        counts = (
            self.frame.filter(pl.col("rating").is_not_null())
            .group_by("kind", "rating")
            .agg(pl.len().alias("total"))
        )
        return counts.filter(pl.col("total") == pl.col("total").max().over("kind")).sort(
            "kind", "rating"
        )

    def genre_counts(self) -> pl.DataFrame:
        """Number of titles per genre.

        Returns:
            Columns genre, total; most common first.
        """
        return (
            self.frame.select(pl.col("listed_in").alias("genre"))
            .explode("genre")
            .drop_nulls("genre")
            .group_by("genre")
            .agg(pl.len().alias("total"))
            .sort(["total", "genre"], descending=[True, False])
        )

    # =========================================================================
    # COUNTRIES
    # =========================================================================

    def top_countries(self, limit: int | None = None) -> pl.DataFrame:
        """Countries with the most titles.

        Args:
            limit: Number of countries, defaults to ANALYTICS_TOP_COUNTRIES.

        Returns:
            Columns country, total.
        """
        limit = limit or self.params.top_countries
        return (
            self.frame.select("country")
            .explode("country")
            .drop_nulls("country")
            .group_by("country")
            .agg(pl.len().alias("total"))
            .sort(["total", "country"], descending=[True, False])
            .head(limit)
        )

    def consistent_countries(self, years: int | None = None) -> pl.DataFrame:
        """Countries that added content in every one of the last `years` years.

        The window ends at the latest added-date in the data. A country
        qualifies with at least `years` distinct added years inside it.

        Args:
            years: Window size, defaults to ANALYTICS_RECENT_YEARS.

        Returns:
            Columns country, years_active; sorted by country.
        """
        years = years or self.params.recent_years
        dated = self.frame.filter(pl.col("added_on").is_not_null())
        if dated.is_empty():
            return pl.DataFrame(schema={"country": pl.Utf8, "years_active": pl.UInt32})

        cutoff = years_before(dated["added_on"].max(), years)
        return (
            dated.filter(pl.col("added_on") >= cutoff)
            .select("country", "added_year")
            .explode("country")
            .drop_nulls("country")
            .group_by("country")
            .agg(pl.col("added_year").n_unique().alias("years_active"))
            .filter(pl.col("years_active") >= years)
            .sort("country")
        )

    def country_yearly_share(
        self,
        country: str | None = None,
        limit: int = 5,
    ) -> pl.DataFrame:
        """Yearly share of one country's titles.

        Only titles produced by that country alone are counted. The share
        is the year's count over all of the country's titles, in percent.

        Args:
            country: Country name, defaults to ANALYTICS_FOCUS_COUNTRY.
            limit: Number of years returned, highest share first.

        Returns:
            Columns year, total, share.
        """
        country = country or self.params.focus_country
        only_country = self.frame.filter(
            (pl.col("country").list.len() == 1) & (pl.col("country").list.first() == country)
        )
        overall = only_country.height
        grouped = (
            only_country.drop_nulls("added_year")
            .group_by("added_year")
            .agg(pl.len().alias("total"))
            .rows()
        )
        rows = [
            (int(year), total, round_percent(total * 100 / overall)) for year, total in grouped
        ]
        rows.sort(key=lambda row: (-row[2], row[0]))

        return pl.DataFrame(
            rows[:limit],
            schema={"year": pl.Int64, "total": pl.Int64, "share": pl.Float64},
            orient="row",
        )

    # =========================================================================
    # DURATION
    # =========================================================================

    def duration_groups(self) -> pl.DataFrame:
        """Group movies by length: short, medium or long.

        Returns:
            Columns show_id, title, duration, duration_group.
        """
        short_max = self.params.short_max_minutes
        medium_max = self.params.medium_max_minutes
        minutes = pl.col("duration_value")
        return self.frame.filter(
            (pl.col("kind") == MOVIE) & minutes.is_not_null()
        ).select(
            "show_id",
            "title",
            "duration",
            pl.when(minutes < short_max)
            .then(pl.lit("short"))
            .when(minutes < medium_max)
            .then(pl.lit("medium"))
            .otherwise(pl.lit("long"))
            .alias("duration_group"),
        )

    def longest_movie(self) -> pl.DataFrame:
        """Longest movie by minutes.

        Returns:
            Columns title, minutes; one row, empty without movies.
        """
        return (
            self.frame.filter((pl.col("kind") == MOVIE) & pl.col("duration_value").is_not_null())
            .sort(["duration_value", "title"], descending=[True, False])
            .select("title", pl.col("duration_value").alias("minutes"))
            .head(1)
        )

    def series_with_min_seasons(self, min_seasons: int | None = None) -> pl.DataFrame:
        """Series with strictly more seasons than the threshold.

        Args:
            min_seasons: Threshold, defaults to ANALYTICS_MIN_SEASONS.

        Returns:
            Columns title, duration; most seasons first.
        """
        if min_seasons is None:
            min_seasons = self.params.min_seasons
        return (
            self.frame.filter(
                (pl.col("kind") == SERIES) & (pl.col("duration_value") > min_seasons)
            )
            .sort(["duration_value", "title"], descending=[True, False])
            .select("title", "duration")
        )

    # =========================================================================
    # LOOKUPS
    # =========================================================================

    def added_since(self, years: int | None = None, today: date | None = None) -> pl.DataFrame:
        """Titles added in the last `years` years.

        Args:
            years: Look-back, defaults to ANALYTICS_RECENT_YEARS.
            today: Reference date, defaults to the current date.

        Returns:
            Columns title, date_added; most recent first.
        """
        years = years or self.params.recent_years
        cutoff = years_before(today or date.today(), years)
        return (
            self.frame.filter(pl.col("added_on") >= cutoff)
            .sort(["added_on", "title"], descending=[True, False])
            .select("title", "date_added")
        )

    def by_director(self, name: str) -> pl.DataFrame:
        """Titles whose director field contains `name`, case-insensitive.

        Args:
            name: Director name or part of it.

        Returns:
            Columns show_id, kind, title, director, release_year.
        """
        needle = name.strip().lower()
        if not needle:
            raise ValueError("Director name must not be empty")
        return self.frame.filter(
            pl.col("director").str.to_lowercase().str.contains(needle, literal=True)
        ).select("show_id", "kind", "title", "director", "release_year")

    # =========================================================================
    # KEYWORDS
    # =========================================================================

    def keyword_labels(self, keywords: Sequence[str] | None = None) -> pl.DataFrame:
        """Label titles Bad when the description mentions a keyword.

        Keywords match whole words, case-insensitive.

        Args:
            keywords: Words, defaults to ANALYTICS_BAD_KEYWORDS.

        Returns:
            Columns label, total; sorted by label.
        """
        keywords = keywords or self.params.bad_keywords
        pattern = r"(?i)\b(" + "|".join(re.escape(k) for k in keywords) + r")\b"
        labelled = self.frame.select(
            pl.when(pl.col("description").fill_null("").str.contains(pattern))
            .then(pl.lit(LABEL_BAD))
            .otherwise(pl.lit(LABEL_GOOD))
            .alias("label")
        )
        return labelled.group_by("label").agg(pl.len().alias("total")).sort("label")

    # =========================================================================
    # DISPATCH
    # =========================================================================

    def catalogue(self) -> dict[str, Callable[..., Any]]:
        """Reports runnable without arguments, by CLI name."""
        return {
            "count-by-kind": self.count_by_kind,
            "most-common-rating": self.most_common_rating,
            "consistent-countries": self.consistent_countries,
            "duration-groups": self.duration_groups,
            "top-countries": self.top_countries,
            "longest-movie": self.longest_movie,
            "added-since": self.added_since,
            "series-min-seasons": self.series_with_min_seasons,
            "genre-counts": self.genre_counts,
            "country-share": self.country_yearly_share,
            "keyword-labels": self.keyword_labels,
        }

    def run(self, name: str) -> pl.DataFrame:
        """Run one report by name.

        Args:
            name: Report name (see catalogue()).

        Returns:
            Report DataFrame.

        Raises:
            KeyError: Unknown report name.
        """
        reports = self.catalogue()
        if name not in reports:
            raise KeyError(f"Unknown report '{name}'. Valid: {sorted(reports)}")
        self.logger.info(f"running_report: {name}")
        return reports[name]()
