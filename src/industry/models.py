"""Data models for industry experience matching."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class WorkExperienceRow(BaseModel):
    """One entry of a candidate's work history.

    Dates are kept as text; the experience accumulator parses them and
    treats anything unparseable as zero years.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    job_title: str | None = Field(
        default=None,
        validation_alias=AliasChoices("job_title", "jobTitle", "position", "title"),
        description="Job title / position (free text)",
    )
    start_date: str | None = Field(
        default=None,
        validation_alias=AliasChoices("start_date", "startDate"),
        description="Start date (YYYY-MM-DD or ISO-8601)",
    )
    end_date: str | None = Field(
        default=None,
        validation_alias=AliasChoices("end_date", "endDate"),
        description="End date, absent for a current job",
    )
    is_current: bool | None = Field(
        default=None,
        validation_alias=AliasChoices("is_current", "isCurrent"),
        description="Whether this is the candidate's current job",
    )
    company: str | None = Field(
        default=None,
        validation_alias=AliasChoices("company", "company_name", "companyName"),
        description="Company name (informational)",
    )
    description: str | None = Field(default=None, description="Role description")

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def coerce_date_to_text(cls, v: object) -> object:
        """Accept date objects (e.g. from YAML) by storing their ISO text."""
        if isinstance(v, (date, datetime)):
            return v.isoformat()
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("job_title", "company", "description", mode="before")
    @classmethod
    def drop_non_text(cls, v: object) -> object:
        """Treat non-string text fields as absent; an untitled row is skipped."""
        return v if isinstance(v, str) else None

    @field_validator("is_current", mode="before")
    @classmethod
    def drop_non_bool(cls, v: object) -> object:
        """Anything but a real bool means the flag is unknown."""
        return v if isinstance(v, bool) else None

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> WorkExperienceRow:
        """Deserialize from a dictionary (snake_case or camelCase keys)."""
        return cls.model_validate(data)


class UserIndustryProfile(BaseModel):
    """Derived industry -> years profile for a candidate."""

    candidate_id: str = Field(..., description="Candidate identifier")
    industry_years: dict[str, float] = Field(
        default_factory=dict, description="Canonical industry tag -> years"
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the profile was computed",
    )

    def to_payload(self) -> dict[str, Any]:
        """Flat persistence payload, valid for a full replace or partial update."""
        return {
            "industry_years_json": dict(self.industry_years),
            "updated_at": self.updated_at.isoformat(),
        }

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> UserIndustryProfile:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


@dataclass
class MatchedExact:
    """A job tag the candidate has direct experience in."""

    tag: str
    years: float

    def to_dict(self) -> dict:
        return {"tag": self.tag, "years": self.years}


@dataclass
class MatchedRelated:
    """A job tag reached through a related industry."""

    job_tag: str
    matched_via: str
    years: float

    def to_dict(self) -> dict:
        return {
            "jobTag": self.job_tag,
            "matchedVia": self.matched_via,
            "years": self.years,
        }


@dataclass
class IndustryMatchResult:
    """Outcome of scoring one job's industries against one candidate.

    `percent` is None only when the job declared no industry (`is_na`); callers
    must exclude such jobs from scoring instead of treating them as 0%.
    """

    percent: int | None
    is_na: bool = False
    reasons: list[str] = field(default_factory=list)
    matched_exact: list[MatchedExact] = field(default_factory=list)
    matched_related: list[MatchedRelated] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if (self.percent is None) != self.is_na:
            raise ValueError(
                "IndustryMatchResult.percent must be None exactly when is_na is True "
                f"(percent={self.percent}, is_na={self.is_na})"
            )
        if self.percent is not None and not (0 <= self.percent <= 100):
            raise ValueError(f"percent must be between 0 and 100 (got {self.percent})")

    def to_dict(self) -> dict:
        """Serialize to the presentation-layer shape."""
        return {
            "percent": self.percent,
            "isNa": self.is_na,
            "reasons": list(self.reasons),
            "matchedExact": [m.to_dict() for m in self.matched_exact],
            "matchedRelated": [m.to_dict() for m in self.matched_related],
            "missing": list(self.missing),
        }
