"""Shared pytest fixtures."""

import csv
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

from netflix_insights.analytics.schemas import ContentRecord
from netflix_insights.database.connection import DatabaseConnection

CSV_COLUMNS = [
    "show_id",
    "type",
    "title",
    "director",
    "cast",
    "country",
    "date_added",
    "release_year",
    "rating",
    "duration",
    "listed_in",
    "description",
]


@pytest.fixture(autouse=True, scope="function")
def mock_env_for_tests(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reproducible environment for settings built inside tests."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    for var in (
        "DATABASE_URL",
        "ANALYTICS_GROWTH_WINDOW_YEARS",
        "ANALYTICS_RECENT_YEARS",
        "ANALYTICS_SHORT_MAX_MINUTES",
        "ANALYTICS_MEDIUM_MAX_MINUTES",
        "ANALYTICS_MIN_SEASONS",
        "ANALYTICS_TOP_COUNTRIES",
        "ANALYTICS_FOCUS_COUNTRY",
        "ANALYTICS_BAD_KEYWORDS",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_record() -> Callable[..., ContentRecord]:
    """Factory building a valid ContentRecord with overrides."""

    def _make(**overrides: Any) -> ContentRecord:
        base: dict[str, Any] = {
            "show_id": "s1",
            "kind": "Movie",
            "title": "Test Title",
            "release_year": 2020,
            "date_added": "September 25, 2021",
            "listed_in": "Dramas",
        }
        base.update(overrides)
        return ContentRecord(**base)

    return _make


@pytest.fixture
def sample_rows() -> list[dict[str, Any]]:
    """Small Netflix titles dataset covering every report."""
    return [
        {
            "show_id": "s1",
            "type": "Movie",
            "title": "Dick Johnson Is Dead",
            "director": "Kirsten Johnson",
            "cast": "",
            "country": "United States",
            "date_added": "September 25, 2021",
            "release_year": 2020,
            "rating": "PG-13",
            "duration": "90 min",
            "listed_in": "Documentaries",
            "description": "As her father nears the end of his life, filmmaker Kirsten "
            "Johnson stages his death in inventive and comical ways.",
        },
        {
            "show_id": "s2",
            "type": "TV Show",
            "title": "Blood & Water",
            "director": "",
            "cast": "Ama Qamata, Khosi Ngema, Gail Mabalane",
            "country": "South Africa",
            "date_added": "September 24, 2021",
            "release_year": 2021,
            "rating": "TV-MA",
            "duration": "2 Seasons",
            "listed_in": "International TV Shows, TV Dramas, TV Mysteries",
            "description": "After crossing paths at a party, a Cape Town teen sets out "
            "to prove whether a private-school swimming star is her sister.",
        },
        {
            "show_id": "s3",
            "type": "TV Show",
            "title": "Ganglands",
            "director": "Julien Leclercq",
            "cast": "Sami Bouajila, Tracy Gotoas",
            "country": "",
            "date_added": "September 24, 2021",
            "release_year": 2021,
            "rating": "TV-MA",
            "duration": "1 Season",
            "listed_in": "Crime TV Shows, International TV Shows, TV Action & Adventure",
            "description": "To protect his family from a powerful drug lord, skilled thief "
            "Mehdi and his team are pulled into a violent and deadly turf war.",
        },
        {
            "show_id": "s4",
            "type": "Movie",
            "title": "Short One",
            "director": "Anu Menon",
            "cast": "",
            "country": "India",
            "date_added": "January 1, 2020",
            "release_year": 2019,
            "rating": "TV-14",
            "duration": "25 min",
            "listed_in": "Dramas",
            "description": "A man sets out to kill the demon haunting his village.",
        },
        {
            "show_id": "s5",
            "type": "Movie",
            "title": "Mid",
            "director": "Anu Menon",
            "cast": "",
            "country": "India",
            "date_added": "October 2, 2019",
            "release_year": 2018,
            "rating": "TV-14",
            "duration": "45 min",
            "listed_in": "Dramas, Comedies",
            "description": "Violence erupts in a small town during a wedding.",
        },
        {
            "show_id": "s6",
            "type": "Movie",
            "title": "Long Epic",
            "director": "Rajiv Chilaka",
            "cast": "",
            "country": "India, United States",
            "date_added": "",
            "release_year": 2015,
            "rating": "TV-MA",
            "duration": "150 min",
            "listed_in": "Dramas",
            "description": "Skilled killers chase a stolen treasure across two continents.",
        },
        {
            "show_id": "s7",
            "type": "TV Show",
            "title": "Forever Show",
            "director": "",
            "cast": "",
            "country": "United States",
            "date_added": "March 3, 2017",
            "release_year": 2010,
            "rating": "TV-MA",
            "duration": "7 Seasons",
            "listed_in": "TV Comedies",
            "description": "A long running sitcom about four roommates.",
        },
        {
            "show_id": "s8",
            "type": "Movie",
            "title": "Kids Tale",
            "director": "Rajiv Chilaka, Someone Else",
            "cast": "",
            "country": "India",
            "date_added": "May 5, 2018",
            "release_year": 2018,
            "rating": "TV-Y",
            "duration": "60 min",
            "listed_in": "Children & Family Movies",
            "description": "Little heroes save their town.",
        },
    ]


@pytest.fixture
def sample_records(sample_rows: list[dict[str, Any]]) -> list[ContentRecord]:
    """Sample rows as content records."""
    return [ContentRecord(kind=row["type"], **row) for row in sample_rows]


@pytest.fixture
def sample_csv(tmp_path: Path, sample_rows: list[dict[str, Any]]) -> Path:
    """Sample rows written as netflix_titles.csv."""
    path = tmp_path / "netflix_titles.csv"
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        writer.writerows(sample_rows)
    return path


@pytest.fixture
def memory_db() -> Generator[DatabaseConnection, None, None]:
    """In-memory SQLite database with the netflix table."""
    db = DatabaseConnection("sqlite:///:memory:")
    db.create_schema()
    yield db
    db.dispose()
