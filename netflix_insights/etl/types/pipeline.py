"""ETL pipeline data types."""

from typing import NotRequired, TypedDict


class ETLResult(TypedDict):
    """Result of an ETL extraction step."""

    source: str
    success: bool
    count: int
    errors: NotRequired[list[str]]
    duration_seconds: NotRequired[float]
