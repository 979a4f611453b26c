"""CSV extractors package.

Provides the Netflix titles CSV extractor and its normalizer.
"""

from netflix_insights.etl.extractors.csv.extractor import CSVExtractor
from netflix_insights.etl.extractors.csv.normalizer import NetflixNormalizer

__all__ = ["CSVExtractor", "NetflixNormalizer"]
