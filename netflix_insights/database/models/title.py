"""Netflix title model.

One row per catalogue entry, multi-valued fields stored as
comma-separated strings exactly as in the source dataset.
"""

from sqlalchemy import Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from netflix_insights.analytics.schemas import ContentKind, ContentRecord
from netflix_insights.database.models.base import Base

_SEPARATOR = ", "

# Dataset label stored in the `type` column for series
SERIES_TYPE_LABEL = "TV Show"


class NetflixTitle(Base):
    """Flat catalogue table.

    Attributes:
        show_id: Dataset identifier (primary key).
        type: "Movie" or "TV Show".
        title: Title.
        director: Director names.
        casts: Cast names, comma-separated.
        country: Countries, comma-separated.
        date_added: Added-date as written ("September 25, 2021").
        release_year: Release year.
        rating: Classification code.
        duration: "90 min" or "3 Seasons".
        listed_in: Genres, comma-separated.
        description: Synopsis.
    """

    __tablename__ = "netflix"

    show_id: Mapped[str] = mapped_column(String(10), primary_key=True)
    type: Mapped[str] = mapped_column(String(10), nullable=False)
    title: Mapped[str] = mapped_column(String(150), nullable=False)
    director: Mapped[str | None] = mapped_column(String(208))
    casts: Mapped[str | None] = mapped_column(String(1000))
    country: Mapped[str | None] = mapped_column(String(150))
    date_added: Mapped[str | None] = mapped_column(String(50))
    release_year: Mapped[int] = mapped_column(Integer, nullable=False)
    rating: Mapped[str | None] = mapped_column(String(10))
    duration: Mapped[str | None] = mapped_column(String(15))
    listed_in: Mapped[str | None] = mapped_column(String(100))
    description: Mapped[str | None] = mapped_column(Text)

    __table_args__ = (Index("idx_netflix_type", "type"),)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<NetflixTitle(show_id='{self.show_id}', title='{self.title}')>"

    @classmethod
    def from_record(cls, record: ContentRecord) -> "NetflixTitle":
        """Build a row from a content record.

        Args:
            record: Content record.

        Returns:
            Unsaved NetflixTitle.
        """
        return cls(
            show_id=record.show_id,
            type=SERIES_TYPE_LABEL if record.kind is ContentKind.SERIES else record.kind.value,
            title=record.title,
            director=record.director,
            casts=_join(record.cast),
            country=_join(record.country),
            date_added=record.date_added,
            release_year=record.release_year,
            rating=record.rating,
            duration=record.duration,
            listed_in=_join(record.listed_in),
            description=record.description,
        )

    def to_record(self) -> ContentRecord:
        """Convert the row back to a content record."""
        return ContentRecord(
            show_id=self.show_id,
            kind=self.type,
            title=self.title,
            director=self.director,
            cast=self.casts,
            country=self.country,
            date_added=self.date_added,
            release_year=self.release_year,
            rating=self.rating,
            duration=self.duration,
            listed_in=self.listed_in,
            description=self.description,
        )


def _join(values: tuple[str, ...]) -> str | None:
    return _SEPARATOR.join(values) if values else None
