"""ETL utilities package: logging."""

from netflix_insights.etl.utils.logger import setup_logger

__all__ = ["setup_logger"]
