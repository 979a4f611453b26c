"""Base loader abstract class.

Provides common interface and utilities for loaders writing
records into the database.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from sqlalchemy.orm import Session

from netflix_insights.etl.utils.logger import setup_logger


@dataclass
class LoaderStats:
    """Statistics for a loader operation.

    Attributes:
        inserted: Number of new records inserted.
        skipped: Number of records skipped (already stored or duplicated).
        deleted: Number of rows removed before loading.
    """

    inserted: int = 0
    skipped: int = 0
    deleted: int = 0

    @property
    def total_processed(self) -> int:
        """Total records processed."""
        return self.inserted + self.skipped

    def merge(self, other: "LoaderStats") -> "LoaderStats":
        """Merge statistics from another LoaderStats.

        Args:
            other: LoaderStats to merge.

        Returns:
            New LoaderStats with combined values.
        """
        return LoaderStats(
            inserted=self.inserted + other.inserted,
            skipped=self.skipped + other.skipped,
            deleted=self.deleted + other.deleted,
        )


class BaseLoader(ABC):
    """Abstract base class for loaders.

    Attributes:
        name: Loader identifier for logging.
    """

    name: str = "base"

    def __init__(self, session: Session) -> None:
        """Initialize loader with database session.

        Args:
            session: SQLAlchemy session instance.
        """
        self._session = session
        self._logger = setup_logger(f"etl.loader.{self.name}")
        self._stats = LoaderStats()

    @property
    def session(self) -> Session:
        """Get the SQLAlchemy session."""
        return self._session

    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        return self._logger

    @property
    def stats(self) -> LoaderStats:
        """Get current loader statistics."""
        return self._stats

    def reset_stats(self) -> None:
        """Reset statistics for a new load operation."""
        self._stats = LoaderStats()

    @abstractmethod
    def load(self, data: object) -> LoaderStats:
        """Execute the load operation.

        Args:
            data: Data to load (type depends on implementation).

        Returns:
            LoaderStats with operation results.
        """
        pass

    def _log_summary(self) -> None:
        """Log final statistics summary."""
        self._logger.info(
            f"{self.name} complete: "
            f"inserted={self._stats.inserted}, "
            f"skipped={self._stats.skipped}, "
            f"deleted={self._stats.deleted}"
        )
