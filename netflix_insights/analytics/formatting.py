"""Plain text rendering of report rows."""

from collections.abc import Iterable, Sequence
from typing import Any

import polars as pl

from netflix_insights.analytics.schemas import GenreGrowth, GrowthRow

MISSING = "n/a"
PERCENT_SUFFIX = " %"


def format_percent(value: float | None) -> str:
    """Format a rounded percentage for display ("100.00 %").

    Args:
        value: Percentage, None when undefined.

    Returns:
        Display string, MISSING for None.
    """
    if value is None:
        return MISSING
    return f"{value:.2f}{PERCENT_SUFFIX}"


def _cell(value: Any) -> str:
    if value is None:
        return MISSING
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


def render_table(headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> str:
    """Render rows as a left-aligned text table.

    Args:
        headers: Column names.
        rows: Row values, one sequence per row.

    Returns:
        Table text with a header separator line.
    """
    cells = [[_cell(v) for v in row] for row in rows]
    widths = [len(h) for h in headers]
    for row in cells:
        for i, value in enumerate(row):
            widths[i] = max(widths[i], len(value))

    def line(values: Sequence[str]) -> str:
        return "  ".join(v.ljust(w) for v, w in zip(values, widths, strict=True)).rstrip()

    output = [line(headers), line(["-" * w for w in widths])]
    output.extend(line(row) for row in cells)
    return "\n".join(output)


def render_growth(rows: Iterable[GrowthRow]) -> str:
    """Render growth analyzer rows."""
    return render_table(
        ["category", "year", "count", "change"],
        ((r.category, r.year, r.count, format_percent(r.percent_change)) for r in rows),
    )


def render_top_growth(rows: Iterable[GenreGrowth]) -> str:
    """Render average growth per category."""
    return render_table(
        ["category", "average_growth"],
        ((r.category, format_percent(r.average_growth)) for r in rows),
    )


def render_frame(df: pl.DataFrame) -> str:
    """Render a report DataFrame."""
    return render_table(df.columns, df.rows())
