"""Database connection management with SQLAlchemy 2.0.

Provides a synchronous engine and transactional session scope
for the catalogue table.
"""

from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from netflix_insights.database.models import Base
from netflix_insights.etl.utils import setup_logger
from netflix_insights.settings import settings

logger = setup_logger("database.connection")


class DatabaseConnection:
    """Manages the engine and session factory.

    Attributes:
        url: SQLAlchemy connection URL.

    Example:
        ```python
        db = DatabaseConnection("sqlite:///:memory:")
        db.create_schema()
        with db.session() as session:
            session.execute(text("SELECT 1"))
        ```
    """

    def __init__(self, url: str | None = None) -> None:
        """Initialize engine and session factory.

        Args:
            url: Connection URL. Defaults to DATABASE_URL or the SQLite file.
        """
        self.url = url or settings.database.sync_url
        self._engine = create_engine(self.url, echo=settings.database.echo)
        self._session_factory = sessionmaker(
            bind=self._engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Provide a transactional session scope.

        Automatically commits on success, rolls back on exception,
        and closes the session when done.

        Yields:
            SQLAlchemy Session instance.

        Raises:
            Exception: Re-raises any exception after rollback.
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_schema(self) -> None:
        """Create the netflix table and its index if missing."""
        Base.metadata.create_all(self._engine)
        logger.info("Schema ready")

    def drop_schema(self) -> None:
        """Drop the netflix table."""
        Base.metadata.drop_all(self._engine)
        logger.info("Schema dropped")

    def check_connection(self) -> bool:
        """Test database connectivity with a simple query.

        Returns:
            True if connection successful, False otherwise.
        """
        try:
            with self.session() as session:
                session.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Database connection failed: {e}")
            return False

    def dispose(self) -> None:
        """Dispose the connection pool."""
        self._engine.dispose()

    @property
    def engine(self) -> Engine:
        """Get the underlying engine."""
        return self._engine


# =============================================================================
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# =============================================================================

_db: DatabaseConnection | None = None


def get_database() -> DatabaseConnection:
    """Get the shared DatabaseConnection instance.

    Creates the instance on first call (lazy initialization).

    Returns:
        DatabaseConnection instance.
    """
    global _db  # noqa: PLW0603
    if _db is None:
        _db = DatabaseConnection()
    return _db


def close_database() -> None:
    """Release the shared connection pool."""
    global _db  # noqa: PLW0603
    if _db is not None:
        _db.dispose()
        _db = None
