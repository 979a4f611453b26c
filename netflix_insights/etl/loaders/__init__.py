"""Loaders package: writes content records into the database."""

from netflix_insights.etl.loaders.base import BaseLoader, LoaderStats
from netflix_insights.etl.loaders.title import TitleLoader

__all__ = ["BaseLoader", "LoaderStats", "TitleLoader"]
