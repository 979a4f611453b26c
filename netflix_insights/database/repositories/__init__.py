"""Repositories for catalogue persistence."""

from netflix_insights.database.repositories.base import BaseRepository
from netflix_insights.database.repositories.title import TitleRepository

__all__ = ["BaseRepository", "TitleRepository"]
