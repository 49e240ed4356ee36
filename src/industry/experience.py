"""Derive years of experience per industry from a candidate's work history."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping
from datetime import UTC, date, datetime

from src.industry.config import IndustryMatchConfig, get_industry_config
from src.industry.models import UserIndustryProfile, WorkExperienceRow
from src.industry.positions import get_industries_for_position

logger = logging.getLogger(__name__)

MAX_YEARS_PER_ROW = 10.0
DAYS_PER_YEAR = 365.25
SECONDS_PER_YEAR = DAYS_PER_YEAR * 24 * 60 * 60

_YEAR_MONTH_RE = re.compile(r"\d{4}-\d{2}")


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def parse_date(value: str | date | datetime | None) -> datetime | None:
    """Parse a calendar date into an aware datetime.

    Accepts YYYY-MM-DD, ISO-8601 datetimes (including a trailing "Z"), and
    YYYY-MM (taken as the first of the month). Naive values are read as UTC.
    Returns None for anything else.
    """
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    if _YEAR_MONTH_RE.fullmatch(text):
        text = f"{text}-01"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return _as_utc(parsed)


def compute_years_for_row(
    start_date: str | date | None,
    end_date: str | date | None = None,
    is_current: bool | None = None,
    *,
    now: datetime | None = None,
    max_years: float | None = None,
) -> float:
    """Years between start and end of a single work experience row.

    A missing end date (or a current job) runs until `now`; an unparseable
    end date also falls back to `now`. Unparseable start dates and reversed
    ranges give 0. The result is capped at `max_years` (10 by default).
    """
    start = parse_date(start_date)
    if start is None:
        return 0.0

    current = _as_utc(now) if now is not None else datetime.now(UTC)

    end: datetime | None = None
    if end_date is not None and str(end_date).strip():
        end = parse_date(end_date)
    # is_current and an absent end date both mean "still there".
    if end is None:
        end = current

    if end < start:
        return 0.0

    cap = MAX_YEARS_PER_ROW if max_years is None else max_years
    years = (end - start).total_seconds() / SECONDS_PER_YEAR
    return min(cap, max(0.0, years))


def _coerce_row(row: WorkExperienceRow | Mapping) -> WorkExperienceRow:
    if isinstance(row, WorkExperienceRow):
        return row
    return WorkExperienceRow.from_dict(dict(row))


def build_industry_years_from_work_experience(
    candidate_id: str,
    rows: Iterable[WorkExperienceRow | Mapping],
    *,
    now: datetime | None = None,
    config: IndustryMatchConfig | None = None,
) -> UserIndustryProfile:
    """Rebuild a candidate's industry -> years map from their full work history.

    Each row's title is classified into industries; rows with no industry
    are skipped. A row's years count in full toward every industry it maps
    to. Industries no row touches are absent from the result.
    """
    cfg = config or get_industry_config()
    computed_at = _as_utc(now) if now is not None else datetime.now(UTC)

    industry_years: dict[str, float] = {}
    for raw_row in rows:
        row = _coerce_row(raw_row)

        industries = get_industries_for_position(row.job_title)
        if not industries:
            logger.debug("No industry for position %r; row skipped", row.job_title)
            continue

        years = compute_years_for_row(
            row.start_date,
            row.end_date,
            row.is_current,
            now=computed_at,
            max_years=cfg.max_years_per_row,
        )
        if years <= 0:
            continue

        for industry in industries:
            industry_years[industry] = industry_years.get(industry, 0.0) + years

    return UserIndustryProfile(
        candidate_id=candidate_id,
        industry_years=industry_years,
        updated_at=computed_at,
    )


def get_user_industry_years(
    profile: UserIndustryProfile | Mapping | None,
) -> dict[str, float]:
    """Return a copy of the industry -> years map from a stored profile.

    Accepts a UserIndustryProfile or a raw payload carrying `industry_years`
    or `industry_years_json`. Missing or malformed data gives an empty map;
    non-numeric and negative entries are dropped.
    """
    if isinstance(profile, UserIndustryProfile):
        raw = profile.industry_years
    elif isinstance(profile, Mapping):
        raw = profile.get("industry_years")
        if raw is None:
            raw = profile.get("industry_years_json")
    else:
        return {}

    if not isinstance(raw, Mapping):
        return {}

    years: dict[str, float] = {}
    for tag, value in raw.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            continue
        if math.isnan(value) or value < 0:
            continue
        years[str(tag)] = float(value)
    return years
