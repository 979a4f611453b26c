"""Loader for the netflix catalogue table."""

from collections.abc import Iterable

from sqlalchemy.orm import Session

from netflix_insights.analytics.schemas import ContentRecord
from netflix_insights.database.repositories.title import TitleRepository
from netflix_insights.etl.loaders.base import BaseLoader, LoaderStats


class TitleLoader(BaseLoader):
    """Inserts content records, skipping ids already stored."""

    name = "netflix_titles"

    def __init__(self, session: Session, batch_size: int = 1000) -> None:
        """Initialize loader.

        Args:
            session: SQLAlchemy session instance.
            batch_size: Records inserted per flush.
        """
        super().__init__(session)
        self._repository = TitleRepository(session)
        self._batch_size = batch_size

    def load(self, data: Iterable[ContentRecord], replace: bool = False) -> LoaderStats:
        """Insert records into the table.

        Args:
            data: Content records.
            replace: Delete every stored row first.

        Returns:
            LoaderStats with operation results.
        """
        self.reset_stats()
        if replace:
            self._stats.deleted = self._repository.delete_all()

        seen = self._repository.existing_ids()
        batch: list[ContentRecord] = []
        for record in data:
            if record.show_id in seen:
                self._stats.skipped += 1
                continue
            seen.add(record.show_id)
            batch.append(record)
            if len(batch) >= self._batch_size:
                self._flush(batch)
                batch = []

        if batch:
            self._flush(batch)

        self._log_summary()
        return self._stats

    def _flush(self, batch: list[ContentRecord]) -> None:
        self._stats.inserted += self._repository.add_records(batch)
        self._logger.debug(f"Inserted batch of {len(batch)}")
