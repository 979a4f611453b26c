"""Analytics report parameters.

Thresholds and defaults used by the growth analyzer and the
catalogue reports.
"""

from typing import Self

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnalyticsSettings(BaseSettings):
    """Report parameters.

    Attributes:
        growth_window_years: Most recent years kept by the top growth report.
        recent_years: Look-back for "recently added" and country coverage.
        short_max_minutes: Movies under this length are "short".
        medium_max_minutes: Movies under this length are "medium".
        min_seasons: Series must exceed this number of seasons.
        top_countries: Number of countries in the top countries report.
        focus_country: Country used by the yearly share report.
        bad_keywords: Description words that label a title "Bad".
    """

    growth_window_years: int = Field(default=3, ge=1, alias="ANALYTICS_GROWTH_WINDOW_YEARS")
    recent_years: int = Field(default=5, ge=1, alias="ANALYTICS_RECENT_YEARS")
    short_max_minutes: int = Field(default=30, ge=1, alias="ANALYTICS_SHORT_MAX_MINUTES")
    medium_max_minutes: int = Field(default=60, ge=1, alias="ANALYTICS_MEDIUM_MAX_MINUTES")
    min_seasons: int = Field(default=5, ge=0, alias="ANALYTICS_MIN_SEASONS")
    top_countries: int = Field(default=5, ge=1, alias="ANALYTICS_TOP_COUNTRIES")
    focus_country: str = Field(default="India", alias="ANALYTICS_FOCUS_COUNTRY")
    bad_keywords: list[str] = Field(
        default_factory=lambda: ["kill", "violence"],
        alias="ANALYTICS_BAD_KEYWORDS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("bad_keywords")
    @classmethod
    def validate_keywords(cls, v: list[str]) -> list[str]:
        """Lowercase and drop empty keywords."""
        keywords = [k.strip().lower() for k in v if k and k.strip()]
        if not keywords:
            raise ValueError("ANALYTICS_BAD_KEYWORDS must contain at least one keyword")
        return keywords

    @model_validator(mode="after")
    def validate_duration_bounds(self) -> Self:
        """Short bucket must end before the medium bucket."""
        if self.short_max_minutes >= self.medium_max_minutes:
            raise ValueError(
                "ANALYTICS_SHORT_MAX_MINUTES must be lower than ANALYTICS_MEDIUM_MAX_MINUTES"
            )
        return self
