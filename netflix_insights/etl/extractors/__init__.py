"""Extractors package: dataset readers feeding the analytics layer."""

from netflix_insights.etl.extractors.base import BaseExtractor, ExtractionError
from netflix_insights.etl.extractors.csv import CSVExtractor, NetflixNormalizer

__all__ = ["BaseExtractor", "ExtractionError", "CSVExtractor", "NetflixNormalizer"]
