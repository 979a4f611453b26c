"""Pydantic schemas for catalogue analytics.

Defines the content record read from the dataset and the
derived rows produced by the growth analyzer.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# CONSTANTS
# =============================================================================

DATE_FORMATS: tuple[str, ...] = ("%B %d, %Y", "%b %d, %Y", "%Y-%m-%d")
"""Accepted added-date formats, tried in order ("September 25, 2021" first)."""

SERIES_LABELS = frozenset({"series", "tv show", "tv series", "show"})
"""Dataset labels mapped to ContentKind.SERIES."""

_LEADING_NUMBER = re.compile(r"^\s*(\d+)")


# =============================================================================
# HELPERS
# =============================================================================


def split_multi_value(value: str | list[str] | tuple[str, ...] | None) -> tuple[str, ...]:
    """Split a comma-separated field into trimmed, non-empty values.

    Args:
        value: Raw field ("Dramas, International Movies") or an already split list.

    Returns:
        Tuple of values in source order.
    """
    if value is None:
        return ()
    parts = value.split(",") if isinstance(value, str) else value
    return tuple(p.strip() for p in parts if p and p.strip())


def parse_added_date(value: str | None) -> date | None:
    """Parse a human readable added-date.

    Args:
        value: Date string such as "September 25, 2021".

    Returns:
        Parsed date or None when absent or unparsable.
    """
    if value is None:
        return None
    cleaned = value.strip()
    if not cleaned:
        return None
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt).date()
        except ValueError:
            continue
    return None


# =============================================================================
# CONTENT RECORD
# =============================================================================


class ContentKind(str, Enum):
    """Kind of catalogue entry."""

    MOVIE = "Movie"
    SERIES = "Series"


class ContentRecord(BaseModel):
    """One row of the Netflix titles dataset.

    Multi-valued fields (cast, country, listed_in) are stored split.
    Records are immutable once built.

    Attributes:
        show_id: Unique dataset identifier (s1, s2, ...).
        kind: Movie or Series.
        title: Title.
        director: Director names as listed.
        cast: Cast names.
        country: Production countries.
        date_added: Date made available, as written in the dataset.
        release_year: Original release year.
        rating: Classification code (TV-MA, PG-13, ...).
        duration: "90 min" for movies, "3 Seasons" for series.
        listed_in: Category (genre) labels.
        description: Synopsis.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", str_strip_whitespace=True)

    show_id: str = Field(min_length=1)
    kind: ContentKind
    title: str = Field(min_length=1)
    director: str | None = None
    cast: tuple[str, ...] = ()
    country: tuple[str, ...] = ()
    date_added: str | None = None
    release_year: int
    rating: str | None = None
    duration: str | None = None
    listed_in: tuple[str, ...] = ()
    description: str | None = None

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, v: object) -> object:
        """Map dataset labels ("TV Show") onto ContentKind."""
        if not isinstance(v, str):
            return v
        label = v.strip().lower()
        if label in SERIES_LABELS:
            return ContentKind.SERIES
        if label == "movie":
            return ContentKind.MOVIE
        return v

    @field_validator("cast", "country", "listed_in", mode="before")
    @classmethod
    def validate_multi_valued(cls, v: object) -> tuple[str, ...]:
        """Split comma-separated values."""
        return split_multi_value(v)  # type: ignore[arg-type]

    @field_validator("director", "date_added", "rating", "duration", "description")
    @classmethod
    def validate_optional_text(cls, v: str | None) -> str | None:
        """Empty strings become None."""
        return v or None

    @property
    def added_on(self) -> date | None:
        """Parsed added-date, None when absent or malformed."""
        return parse_added_date(self.date_added)

    @property
    def added_year(self) -> int | None:
        """Year of the added-date."""
        added = self.added_on
        return added.year if added else None

    @property
    def duration_value(self) -> int | None:
        """Leading number of the duration (minutes or seasons)."""
        if not self.duration:
            return None
        match = _LEADING_NUMBER.match(self.duration)
        return int(match.group(1)) if match else None

    @property
    def categories(self) -> tuple[str, ...]:
        """Distinct category labels, first occurrence order."""
        return tuple(dict.fromkeys(self.listed_in))


# =============================================================================
# DERIVED ROWS
# =============================================================================


@dataclass(frozen=True)
class YearCategoryBucket:
    """Number of titles of one category added in one year."""

    category: str
    year: int
    count: int


@dataclass(frozen=True)
class GrowthRow:
    """Per-year count and change for one category.

    Attributes:
        category: Category label.
        year: Added year.
        count: Titles added that year in the category.
        percent_change: Change vs the nearest earlier year, None when undefined.
    """

    category: str
    year: int
    count: int
    percent_change: float | None


@dataclass(frozen=True)
class GenreGrowth:
    """Average yearly growth of one category over a window of years."""

    category: str
    average_growth: float
