"""ETL data types package.

Exports TypedDict definitions for raw rows and pipeline results.

Usage:
    from netflix_insights.etl.types import ETLResult, NetflixTitleRaw
"""

from netflix_insights.etl.types.netflix import NetflixExtractionResult, NetflixTitleRaw
from netflix_insights.etl.types.pipeline import ETLResult

__all__ = [
    "NetflixTitleRaw",
    "NetflixExtractionResult",
    "ETLResult",
]
