"""CSV extractor for the Netflix titles dataset.

Reads netflix_titles.csv with Polars and hands rows to the
normalizer to build ContentRecord instances.
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import polars as pl

from netflix_insights.analytics.schemas import ContentRecord
from netflix_insights.etl.extractors.base import BaseExtractor, ExtractionError
from netflix_insights.etl.extractors.csv.normalizer import NetflixNormalizer
from netflix_insights.etl.types import ETLResult, NetflixExtractionResult, NetflixTitleRaw


class CSVExtractor(BaseExtractor):
    """Extracts titles from the Netflix CSV dataset.

    Attributes:
        name: Extractor identifier.
    """

    name = "netflix_csv"

    # -------------------------------------------------------------------------
    # Column Configuration
    # -------------------------------------------------------------------------

    REQUIRED_COLUMNS: frozenset[str] = frozenset({"show_id", "type", "title"})

    COLUMN_DTYPES: dict[str, pl.DataType] = {
        "show_id": pl.Utf8,
        "type": pl.Utf8,
        "title": pl.Utf8,
        "director": pl.Utf8,
        "cast": pl.Utf8,
        "country": pl.Utf8,
        "date_added": pl.Utf8,
        "release_year": pl.Int64,
        "rating": pl.Utf8,
        "duration": pl.Utf8,
        "listed_in": pl.Utf8,
        "description": pl.Utf8,
    }

    def __init__(self) -> None:
        """Initialize CSV extractor."""
        super().__init__()
        self._valid_rows: int = 0
        self._skipped_rows: int = 0

    # -------------------------------------------------------------------------
    # Main Extraction
    # -------------------------------------------------------------------------

    def extract(self, **kwargs: Any) -> ETLResult:
        """Execute CSV extraction.

        Kwargs:
            csv_path: Path to CSV file. Defaults to the configured dataset.

        Returns:
            ETLResult with extraction statistics.
        """
        csv_path = self._resolve_csv_path(kwargs.get("csv_path"))
        if not csv_path.exists():
            return self._create_error_result(f"CSV file not found: {csv_path}")

        self._start_extraction()
        self._logger.info(f"Reading CSV: {csv_path}")

        try:
            df = self._validate_and_filter(self._read_csv(csv_path))
            self._extracted_count = len(df)
            self._logger.info(f"Extracted {self._extracted_count} valid rows")
        except (pl.exceptions.PolarsError, OSError, ExtractionError) as e:
            self._log_error(f"Extraction failed: {e}")

        return self._end_extraction()

    @staticmethod
    def _resolve_csv_path(csv_path: Path | str | None) -> Path:
        """Resolve CSV path from argument or settings.

        Args:
            csv_path: Explicit path or None.

        Returns:
            Path to CSV file.
        """
        if csv_path is not None:
            return Path(csv_path)

        from netflix_insights.settings import settings

        return settings.dataset.csv_path

    # -------------------------------------------------------------------------
    # CSV Reading
    # -------------------------------------------------------------------------

    def _read_csv(self, csv_path: Path) -> pl.DataFrame:
        """Read CSV file with Polars.

        Args:
            csv_path: Path to CSV file.

        Returns:
            Polars DataFrame.

        Raises:
            ExtractionError: Required columns are missing.
        """
        df = pl.read_csv(
            csv_path,
            schema_overrides=self.COLUMN_DTYPES,
            ignore_errors=True,
            null_values=["", "NA", "N/A", "null", "None"],
        )
        missing = self.REQUIRED_COLUMNS - set(df.columns)
        if missing:
            raise ExtractionError(f"Missing columns in {csv_path.name}: {sorted(missing)}")
        return df

    def _validate_and_filter(self, df: pl.DataFrame) -> pl.DataFrame:
        """Drop rows without identifier or title.

        Args:
            df: Raw DataFrame.

        Returns:
            Filtered DataFrame with valid rows only.
        """
        initial_count = len(df)

        df = df.filter(pl.col("show_id").is_not_null() & pl.col("title").is_not_null())

        self._skipped_rows = initial_count - len(df)
        self._valid_rows = len(df)

        self._logger.info(f"Filtered: {self._valid_rows} valid, {self._skipped_rows} skipped")
        return df

    # -------------------------------------------------------------------------
    # Data Access Methods
    # -------------------------------------------------------------------------

    def extract_to_dicts(self, csv_path: Path | None = None) -> list[NetflixTitleRaw]:
        """Extract CSV data as list of dictionaries.

        Args:
            csv_path: Optional path to CSV file.

        Returns:
            List of raw rows.

        Raises:
            ExtractionError: File missing or unreadable.
        """
        path = self._resolve_csv_path(csv_path)
        if not path.exists():
            raise ExtractionError(f"CSV file not found: {path}")

        try:
            df = self._validate_and_filter(self._read_csv(path))
        except pl.exceptions.PolarsError as e:
            raise ExtractionError(f"Unreadable CSV {path}: {e}") from e

        return df.to_dicts()  # type: ignore[return-value]

    def extract_batches(
        self,
        csv_path: Path | None = None,
        batch_size: int | None = None,
    ) -> Iterator[list[NetflixTitleRaw]]:
        """Yield batches of raw rows.

        Args:
            csv_path: Optional path to CSV file.
            batch_size: Rows per batch, defaults to NETFLIX_BATCH_SIZE.

        Yields:
            List of raw rows per batch.
        """
        if batch_size is None:
            from netflix_insights.settings import settings

            batch_size = settings.dataset.batch_size

        rows = self.extract_to_dicts(csv_path)
        for i in range(0, len(rows), batch_size):
            yield rows[i : i + batch_size]

    def extract_records(
        self,
        csv_path: Path | None = None,
        normalizer: NetflixNormalizer | None = None,
    ) -> list[ContentRecord]:
        """Extract and normalize the dataset into content records.

        Args:
            csv_path: Optional path to CSV file.
            normalizer: Normalizer to use (fresh one by default).

        Returns:
            Valid content records.

        Raises:
            ExtractionError: File missing or unreadable.
        """
        normalizer = normalizer or NetflixNormalizer()
        records: list[ContentRecord] = []
        for batch in self.extract_batches(csv_path):
            records.extend(normalizer.normalize_batch(batch))

        stats = normalizer.get_stats()
        self._logger.info(
            f"Normalized {stats['normalized']} records "
            f"({stats['skipped']} skipped, {stats['bad_dates']} unparseable dates)"
        )
        return records

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def get_extraction_stats(self) -> NetflixExtractionResult:
        """Get detailed extraction statistics.

        Returns:
            NetflixExtractionResult with counts.
        """
        return NetflixExtractionResult(
            total_rows=self._valid_rows + self._skipped_rows,
            valid_rows=self._valid_rows,
            skipped_rows=self._skipped_rows,
            error_count=len(self._errors),
            duration_seconds=self._calculate_duration(),
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _create_error_result(self, message: str) -> ETLResult:
        """Create an error ETLResult.

        Args:
            message: Error message.

        Returns:
            ETLResult with error status.
        """
        self._log_error(message)
        return ETLResult(
            source=self.name,
            success=False,
            count=0,
            errors=[message],
            duration_seconds=0.0,
        )
