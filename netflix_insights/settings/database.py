"""Database configuration settings.

Connection URL for the single `netflix` table store.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from netflix_insights.settings.base import get_project_root


class DatabaseSettings(BaseSettings):
    """Relational store configuration.

    Attributes:
        url: SQLAlchemy connection URL. Defaults to a SQLite file under data/.
        echo: Log emitted SQL statements.
    """

    url: str | None = Field(default=None, alias="DATABASE_URL")
    echo: bool = Field(default=False, alias="DB_ECHO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_configured(self) -> bool:
        """Check if an explicit database URL is configured."""
        return bool(self.url)

    @property
    def sync_url(self) -> str:
        """Synchronous connection URL."""
        if self.url:
            return self.url
        return f"sqlite:///{get_project_root() / 'data' / 'netflix.db'}"
