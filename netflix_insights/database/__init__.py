"""Database package.

Provides connection management, the catalogue ORM model and repositories.

Usage:
    from netflix_insights.database import get_database, TitleRepository

    db = get_database()
    with db.session() as session:
        records = list(TitleRepository(session).iter_records())
"""

from netflix_insights.database.connection import (
    DatabaseConnection,
    close_database,
    get_database,
)
from netflix_insights.database.models import Base, NetflixTitle
from netflix_insights.database.repositories import BaseRepository, TitleRepository

__all__ = [
    "DatabaseConnection",
    "close_database",
    "get_database",
    "Base",
    "NetflixTitle",
    "BaseRepository",
    "TitleRepository",
]
