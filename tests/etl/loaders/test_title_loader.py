"""Unit tests for LoaderStats and the title loader."""

from unittest.mock import MagicMock

import pytest

from netflix_insights.analytics.schemas import ContentRecord
from netflix_insights.database import DatabaseConnection, TitleRepository
from netflix_insights.etl.loaders import BaseLoader, LoaderStats, TitleLoader

# -------------------------------------------------------------------------
# LoaderStats
# -------------------------------------------------------------------------


class TestLoaderStats:
    @staticmethod
    def test_defaults() -> None:
        stats = LoaderStats()
        assert stats.inserted == 0
        assert stats.skipped == 0
        assert stats.deleted == 0

    @staticmethod
    def test_total_processed() -> None:
        assert LoaderStats(inserted=5, skipped=2, deleted=9).total_processed == 7

    @staticmethod
    def test_merge() -> None:
        merged = LoaderStats(inserted=5, deleted=1).merge(LoaderStats(inserted=10, skipped=1))
        assert merged == LoaderStats(inserted=15, skipped=1, deleted=1)


# -------------------------------------------------------------------------
# BaseLoader (concrete subclass for testing)
# -------------------------------------------------------------------------


class ConcreteLoader(BaseLoader):
    name = "test"

    def load(self, data: object) -> LoaderStats:
        self._stats.inserted += 1
        return self._stats


class TestBaseLoader:
    @staticmethod
    def test_properties() -> None:
        session = MagicMock()
        loader = ConcreteLoader(session)
        assert loader.session is session
        assert loader.logger.name == "etl.loader.test"

    @staticmethod
    def test_reset_stats() -> None:
        loader = ConcreteLoader(MagicMock())
        loader.load(None)
        loader.reset_stats()
        assert loader.stats == LoaderStats()


# -------------------------------------------------------------------------
# TitleLoader
# -------------------------------------------------------------------------


class TestTitleLoader:
    @staticmethod
    def test_inserts_all(memory_db: DatabaseConnection, sample_records: list[ContentRecord]) -> None:
        with memory_db.session() as session:
            stats = TitleLoader(session, batch_size=3).load(sample_records)
        assert stats.inserted == 8
        assert stats.skipped == 0

        with memory_db.session() as session:
            assert TitleRepository(session).count() == 8

    @staticmethod
    def test_skips_existing_ids(
        memory_db: DatabaseConnection, sample_records: list[ContentRecord]
    ) -> None:
        with memory_db.session() as session:
            TitleLoader(session).load(sample_records[:3])
        with memory_db.session() as session:
            stats = TitleLoader(session).load(sample_records)
        assert stats.inserted == 5
        assert stats.skipped == 3

    @staticmethod
    def test_skips_duplicates_in_input(memory_db: DatabaseConnection, make_record) -> None:
        records = [make_record(show_id="s1"), make_record(show_id="s1", title="Other")]
        with memory_db.session() as session:
            stats = TitleLoader(session).load(records)
        assert stats.inserted == 1
        assert stats.skipped == 1

    @staticmethod
    def test_replace(memory_db: DatabaseConnection, sample_records: list[ContentRecord]) -> None:
        with memory_db.session() as session:
            TitleLoader(session).load(sample_records)
        with memory_db.session() as session:
            stats = TitleLoader(session).load(sample_records[:2], replace=True)
        assert stats.deleted == 8
        assert stats.inserted == 2

        with memory_db.session() as session:
            assert TitleRepository(session).count() == 2

    @staticmethod
    def test_failed_load_rolls_back(memory_db: DatabaseConnection, make_record) -> None:
        with pytest.raises(RuntimeError):
            with memory_db.session() as session:
                TitleLoader(session).load([make_record(show_id="s1")])
                raise RuntimeError("boom")

        with memory_db.session() as session:
            assert TitleRepository(session).count() == 0
