"""SQLAlchemy ORM models.

Usage:
    from netflix_insights.database.models import Base, NetflixTitle

Tables:
    - netflix: Flat catalogue table, indexed on type
"""

from netflix_insights.database.models.base import Base
from netflix_insights.database.models.title import SERIES_TYPE_LABEL, NetflixTitle

__all__ = ["Base", "NetflixTitle", "SERIES_TYPE_LABEL"]
