"""Netflix titles dataset types.

TypedDict definitions for rows read from netflix_titles.csv.
"""

from typing import TypedDict


class NetflixTitleRaw(TypedDict, total=False):
    """Raw CSV row, multi-valued fields still comma-separated."""

    show_id: str | None
    type: str | None
    title: str | None
    director: str | None
    cast: str | None
    country: str | None
    date_added: str | None
    release_year: int | None
    rating: str | None
    duration: str | None
    listed_in: str | None
    description: str | None


class NetflixExtractionResult(TypedDict):
    """Detailed CSV extraction statistics."""

    total_rows: int
    valid_rows: int
    skipped_rows: int
    error_count: int
    duration_seconds: float
