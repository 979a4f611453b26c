"""Netflix titles normalizer.

Transforms raw CSV rows into ContentRecord instances.
"""

from pydantic import ValidationError

from netflix_insights.analytics.schemas import (
    SERIES_LABELS,
    ContentKind,
    ContentRecord,
)
from netflix_insights.etl.types import NetflixTitleRaw
from netflix_insights.etl.utils.logger import setup_logger

_KIND_LABELS = frozenset({ContentKind.MOVIE.value.lower()}) | SERIES_LABELS


class NetflixNormalizer:
    """Normalizes Netflix titles rows.

    Rows without show_id, title or a known type are skipped.
    Unparsable added-dates are kept as written: the growth analyzer
    skips them.
    """

    def __init__(self) -> None:
        """Initialize normalizer."""
        self._logger = setup_logger("etl.netflix.normalizer")
        self._normalized_count: int = 0
        self._skipped_count: int = 0
        self._bad_date_count: int = 0

    # -------------------------------------------------------------------------
    # Main Normalization
    # -------------------------------------------------------------------------

    def normalize(self, raw_data: NetflixTitleRaw) -> ContentRecord | None:
        """Normalize a single raw row.

        Args:
            raw_data: Raw row from CSV.

        Returns:
            ContentRecord or None if invalid.
        """
        if not self._is_valid(raw_data):
            self._skipped_count += 1
            return None

        try:
            record = ContentRecord(
                show_id=str(raw_data["show_id"]),
                kind=raw_data["type"],
                title=str(raw_data["title"]),
                director=raw_data.get("director"),
                cast=raw_data.get("cast"),
                country=raw_data.get("country"),
                date_added=raw_data.get("date_added"),
                release_year=raw_data.get("release_year"),
                rating=raw_data.get("rating"),
                duration=raw_data.get("duration"),
                listed_in=raw_data.get("listed_in"),
                description=raw_data.get("description"),
            )
        except ValidationError as e:
            self._skipped_count += 1
            self._logger.debug(f"Invalid row {raw_data.get('show_id')}: {e.error_count()} errors")
            return None

        if record.date_added and record.added_on is None:
            self._bad_date_count += 1
            self._logger.debug(f"Unparseable date_added for {record.show_id}: {record.date_added}")

        self._normalized_count += 1
        return record

    def normalize_batch(self, raw_records: list[NetflixTitleRaw]) -> list[ContentRecord]:
        """Normalize multiple rows.

        Args:
            raw_records: List of raw rows.

        Returns:
            List of records (invalid rows skipped).
        """
        normalized = []
        for raw in raw_records:
            record = self.normalize(raw)
            if record:
                normalized.append(record)
        return normalized

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    @staticmethod
    def _is_valid(raw_data: NetflixTitleRaw) -> bool:
        """Check if raw row has an id, a title and a known type.

        Args:
            raw_data: Raw row.

        Returns:
            True if valid.
        """
        if not str(raw_data.get("show_id") or "").strip():
            return False

        if not str(raw_data.get("title") or "").strip():
            return False

        kind = str(raw_data.get("type") or "").strip().lower()
        return kind in _KIND_LABELS

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def get_stats(self) -> dict[str, int]:
        """Get normalization statistics.

        Returns:
            Dict with normalized, skipped and bad date counts.
        """
        return {
            "normalized": self._normalized_count,
            "skipped": self._skipped_count,
            "bad_dates": self._bad_date_count,
        }

    def reset_stats(self) -> None:
        """Reset statistics counters."""
        self._normalized_count = 0
        self._skipped_count = 0
        self._bad_date_count = 0
