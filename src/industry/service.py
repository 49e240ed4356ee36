"""Industry match service implementation."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from src.industry.companies import get_industries_for_company
from src.industry.config import IndustryMatchConfig, get_industry_config
from src.industry.experience import get_user_industry_years
from src.industry.matcher import compute_industry_match
from src.industry.models import IndustryMatchResult, UserIndustryProfile
from src.industry.taxonomy import parse_industry_tags

logger = logging.getLogger(__name__)


class IndustryMatchService:
    """Service for scoring job postings against a candidate's industry years."""

    def __init__(self, config: IndustryMatchConfig | None = None) -> None:
        self.config = config or get_industry_config()

    def resolve_job_tags(
        self, industry_tags: str | None, *, company: str | None = None
    ) -> list[str]:
        """Parse a posting's industry string into canonical tags.

        When the string is empty and company fallback is enabled, tags are
        seeded from the static company map instead. Nothing else is inferred.
        """
        tags = parse_industry_tags(industry_tags)
        if tags or not self.config.company_fallback or not company:
            return tags

        seeded = get_industries_for_company(company)
        if seeded:
            logger.debug("Seeded job industries %s from company %r", seeded, company)
        return seeded

    def match_job(
        self,
        industry_tags: str | None,
        user_years: Mapping[str, float],
        *,
        company: str | None = None,
    ) -> IndustryMatchResult:
        """Score one posting's raw industry string against industry years."""
        tags = self.resolve_job_tags(industry_tags, company=company)
        result = compute_industry_match(tags, user_years, config=self.config)

        if result.is_na:
            logger.debug("Industry match not applicable: no job industry tags")
        else:
            logger.debug(
                "Industry match %s%% (exact=%d related=%d missing=%d)",
                result.percent,
                len(result.matched_exact),
                len(result.matched_related),
                len(result.missing),
            )
        return result

    def match_job_for_profile(
        self,
        industry_tags: str | None,
        profile: UserIndustryProfile | Mapping | None,
        *,
        company: str | None = None,
    ) -> IndustryMatchResult:
        """Score a posting against a stored profile (or its raw payload)."""
        return self.match_job(
            industry_tags, get_user_industry_years(profile), company=company
        )
