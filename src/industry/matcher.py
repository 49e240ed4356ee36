"""Deterministic industry match: job industry tags vs candidate industry years."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping

from src.industry.config import IndustryMatchConfig, get_industry_config
from src.industry.models import IndustryMatchResult, MatchedExact, MatchedRelated
from src.industry.taxonomy import (
    capitalize_industry_tag,
    get_related_industries,
    normalize_industry,
)

NOT_PROVIDED_REASON = "Job industry not provided"


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _positive_years(user_years: Mapping[str, float], tag: str) -> float | None:
    value = user_years.get(tag)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if math.isnan(value) or value <= 0:
        return None
    return float(value)


def _dedupe_job_tags(job_tags: Iterable[str]) -> list[str]:
    tags: list[str] = []
    for raw in job_tags:
        tag = normalize_industry(raw)
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def compute_years_boost(
    years: float, *, config: IndustryMatchConfig | None = None
) -> float:
    """Additive boost for years of experience, saturating at 5 years (0.2 max)."""
    cfg = config or get_industry_config()
    if years <= 0:
        return 0.0
    return _clamp(years / cfg.boost_saturation_years, 0.0, 1.0) * cfg.max_years_boost


def compute_industry_match(
    job_tags: Iterable[str],
    user_years: Mapping[str, float],
    *,
    config: IndustryMatchConfig | None = None,
) -> IndustryMatchResult:
    """Score a job's industry tags against a candidate's industry years.

    Each job tag lands in exactly one bucket:

    - exact: the candidate has positive years in the tag (base 1.0)
    - related: the first tag in the job tag's related list with positive
      years (base 0.5)
    - missing: neither (0)

    Every tag then gets the years boost and is clamped to [0, 1]; the percent
    is the rounded mean. A job with no tags is not applicable: percent is
    None rather than 0.
    """
    cfg = config or get_industry_config()
    tags = _dedupe_job_tags(job_tags)

    if not tags:
        return IndustryMatchResult(percent=None, is_na=True, reasons=[NOT_PROVIDED_REASON])

    matched_exact: list[MatchedExact] = []
    matched_related: list[MatchedRelated] = []
    missing: list[str] = []
    total_points = 0.0

    for tag in tags:
        years = _positive_years(user_years, tag)
        if years is not None:
            base = cfg.exact_base_score
            matched_exact.append(MatchedExact(tag=tag, years=years))
        else:
            base = 0.0
            years = 0.0
            for related in get_related_industries(tag):
                related_years = _positive_years(user_years, related)
                if related_years is not None:
                    base = cfg.related_base_score
                    years = related_years
                    matched_related.append(
                        MatchedRelated(job_tag=tag, matched_via=related, years=years)
                    )
                    break
            else:
                missing.append(tag)

        boost = compute_years_boost(years, config=cfg)
        total_points += _clamp(base + boost, 0.0, 1.0)

    percent = _round_half_up(total_points / len(tags) * 100)

    reasons: list[str] = []
    for exact in matched_exact:
        reasons.append(
            f"Exact match: {capitalize_industry_tag(exact.tag)} ({exact.years:.1f} yrs)"
        )
    for related in matched_related:
        reasons.append(
            f"Related match: {capitalize_industry_tag(related.job_tag)} via "
            f"{capitalize_industry_tag(related.matched_via)} ({related.years:.1f} yrs)"
        )
    for tag in missing:
        reasons.append(f"No match: {capitalize_industry_tag(tag)}")

    return IndustryMatchResult(
        percent=percent,
        is_na=False,
        reasons=reasons,
        matched_exact=matched_exact,
        matched_related=matched_related,
        missing=missing,
    )
