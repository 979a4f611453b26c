"""Repository for the netflix catalogue table."""

from collections.abc import Iterable, Iterator

from sqlalchemy import func, select

from netflix_insights.analytics.schemas import ContentRecord
from netflix_insights.database.models.title import NetflixTitle
from netflix_insights.database.repositories.base import BaseRepository


class TitleRepository(BaseRepository[NetflixTitle]):
    """Reads and writes catalogue rows as content records."""

    model = NetflixTitle

    def add_records(self, records: Iterable[ContentRecord]) -> int:
        """Insert content records.

        Args:
            records: Records to insert. Ids must not exist yet.

        Returns:
            Number of inserted rows.
        """
        rows = [NetflixTitle.from_record(r) for r in records]
        self.create_many(rows)
        return len(rows)

    def existing_ids(self) -> set[str]:
        """All show ids already stored."""
        return set(self._session.scalars(select(NetflixTitle.show_id)).all())

    def iter_records(self, batch_size: int = 1000) -> Iterator[ContentRecord]:
        """Stream every row as a content record, ordered by show_id.

        Args:
            batch_size: Rows fetched per round-trip.

        Yields:
            ContentRecord per row.
        """
        stmt = select(NetflixTitle).order_by(NetflixTitle.show_id).execution_options(
            yield_per=batch_size
        )
        for row in self._session.scalars(stmt):
            yield row.to_record()

    def count_by_type(self) -> list[tuple[str, int]]:
        """Number of rows per type, computed in SQL.

        Returns:
            (type, count) pairs sorted by type.
        """
        stmt = (
            select(NetflixTitle.type, func.count())
            .group_by(NetflixTitle.type)
            .order_by(NetflixTitle.type)
        )
        return [(kind, count) for kind, count in self._session.execute(stmt).all()]

    def search_by_director(self, name: str, limit: int = 100) -> list[NetflixTitle]:
        """Rows whose director contains `name`, case-insensitive.

        Args:
            name: Director name or part of it.
            limit: Maximum number of results.

        Returns:
            Matching rows ordered by title.
        """
        stmt = (
            select(NetflixTitle)
            .where(NetflixTitle.director.ilike(f"%{name}%"))
            .order_by(NetflixTitle.title)
            .limit(limit)
        )
        return list(self._session.scalars(stmt).all())
