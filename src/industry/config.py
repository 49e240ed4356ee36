"""Configuration settings for industry matching."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class IndustryMatchConfig(BaseSettings):
    """Industry match scoring configuration.

    Defaults are the production scoring constants. They can be overridden via
    environment variables with `INDUSTRY_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="INDUSTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Per-tag base scores
    exact_base_score: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=1.0,
        description="Base score for a job tag the candidate has direct years in",
    )
    related_base_score: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.5,
        description="Base score for a job tag reached through a related industry",
    )

    # Years boost
    max_years_boost: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.2,
        description="Largest additive boost from years of experience",
    )
    boost_saturation_years: Annotated[float, Field(gt=0.0)] = Field(
        default=5.0,
        description="Years of experience at which the boost saturates",
    )

    # Experience accumulation
    max_years_per_row: Annotated[float, Field(gt=0.0)] = Field(
        default=10.0,
        description="Cap on the years a single work experience row can contribute",
    )

    # Job tag seeding
    company_fallback: bool = Field(
        default=False,
        description="Seed job tags from the company map when a posting has none",
    )

    @model_validator(mode="after")
    def validate_exact_beats_related(self) -> IndustryMatchConfig:
        """Ensure an exact match always outscores a related one."""
        if self.related_base_score >= self.exact_base_score:
            raise ValueError(
                "related_base_score must be lower than exact_base_score "
                f"(related={self.related_base_score}, exact={self.exact_base_score})."
            )
        return self


# Singleton instance for easy import
_industry_config: IndustryMatchConfig | None = None


def get_industry_config() -> IndustryMatchConfig:
    """Get the industry match configuration singleton."""
    global _industry_config
    if _industry_config is None:
        _industry_config = IndustryMatchConfig()
    return _industry_config


def reset_industry_config() -> None:
    """Reset the industry match configuration singleton (useful for testing)."""
    global _industry_config
    _industry_config = None
