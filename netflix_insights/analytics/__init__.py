"""Catalogue analytics: growth analyzer and single-pass reports.

Usage:
    from netflix_insights.analytics import analyze_growth, CatalogueReports
"""

from netflix_insights.analytics.formatting import (
    format_percent,
    render_frame,
    render_growth,
    render_table,
    render_top_growth,
)
from netflix_insights.analytics.growth import (
    analyze_growth,
    build_buckets,
    percent_change,
    round_percent,
    top_growth_genres,
)
from netflix_insights.analytics.reports import CatalogueReports, records_to_frame
from netflix_insights.analytics.schemas import (
    ContentKind,
    ContentRecord,
    GenreGrowth,
    GrowthRow,
    YearCategoryBucket,
    parse_added_date,
    split_multi_value,
)

__all__ = [
    # Schemas
    "ContentKind",
    "ContentRecord",
    "GenreGrowth",
    "GrowthRow",
    "YearCategoryBucket",
    "parse_added_date",
    "split_multi_value",
    # Growth
    "analyze_growth",
    "build_buckets",
    "percent_change",
    "round_percent",
    "top_growth_genres",
    # Reports
    "CatalogueReports",
    "records_to_frame",
    # Rendering
    "format_percent",
    "render_frame",
    "render_growth",
    "render_table",
    "render_top_growth",
]
