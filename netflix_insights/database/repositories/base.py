"""
Base repository with generic read and write operations.

Provides a reusable base class for repositories over the
catalogue models.
"""

from typing import Generic, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from netflix_insights.database.models.base import Base

# Type alias for valid primary key values
KeyValue = str | int

# Generic type variable bound to Base model
ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic repository providing common operations.

    Attributes:
        model: SQLAlchemy model class.
        session: Database session.
    """

    model: type[ModelT]

    def __init__(self, session: Session) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy session instance.
        """
        self._session = session

    @property
    def session(self) -> Session:
        """Get the database session."""
        return self._session

    def get_by_id(self, entity_id: KeyValue) -> ModelT | None:
        """Retrieve entity by primary key.

        Args:
            entity_id: Primary key value.

        Returns:
            Entity instance or None if not found.
        """
        return self._session.get(self.model, entity_id)

    def get_all(self, limit: int = 100, offset: int = 0) -> list[ModelT]:
        """Retrieve entities with pagination.

        Args:
            limit: Maximum number of results.
            offset: Number of results to skip.

        Returns:
            List of entity instances.
        """
        stmt = select(self.model).limit(limit).offset(offset)
        return list(self._session.scalars(stmt).all())

    def exists(self, entity_id: KeyValue) -> bool:
        """Check if entity exists by primary key.

        Args:
            entity_id: Primary key value.

        Returns:
            True if entity exists.
        """
        return self.get_by_id(entity_id) is not None

    def count(self) -> int:
        """Count total number of entities.

        Returns:
            Total count.
        """
        stmt = select(func.count()).select_from(self.model)
        result = self._session.execute(stmt).scalar()
        return result or 0

    def create_many(self, entities: list[ModelT]) -> list[ModelT]:
        """Create multiple entities in batch.

        Args:
            entities: List of entity instances.

        Returns:
            List of persisted entities.
        """
        self._session.add_all(entities)
        self._session.flush()
        return entities

    def delete_all(self) -> int:
        """Delete every entity of the model.

        Returns:
            Number of deleted rows.
        """
        result = self._session.execute(delete(self.model))
        self._session.flush()
        return result.rowcount or 0
