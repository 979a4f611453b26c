"""Netflix titles dataset settings.

Source file location and batching.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatasetSettings(BaseSettings):
    """Netflix CSV dataset configuration.

    Attributes:
        csv_filename: File name of the dataset inside data/raw.
        batch_size: Rows per batch when streaming the CSV.
    """

    csv_filename: str = Field(
        default="netflix_titles.csv",
        alias="NETFLIX_CSV_FILENAME",
    )
    batch_size: int = Field(default=1000, ge=1, alias="NETFLIX_BATCH_SIZE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def csv_path(self) -> Path:
        """Path to the dataset CSV file."""
        from netflix_insights.settings.base import PathsSettings

        return PathsSettings().raw_dir / self.csv_filename
