"""Industry experience matching.

This module scores how well the industries a candidate has worked in match
the industries a job posting declares, and explains the score.

Public API:
    - parse_industry_tags: Normalize a job's raw industry string
    - get_industries_for_position: Infer industries from a job title
    - build_industry_years_from_work_experience: Derive industry -> years
    - compute_industry_match: Score job tags against industry years
    - IndustryMatchService: Caller-facing scoring service
    - ProfileRefreshService: Recompute and persist a candidate's profile
    - IndustryProfileRepository: SQLite profile store
    - IndustryMatchConfig: Configuration settings
"""

from src.industry.config import (
    IndustryMatchConfig,
    get_industry_config,
    reset_industry_config,
)
from src.industry.experience import (
    build_industry_years_from_work_experience,
    compute_years_for_row,
    get_user_industry_years,
)
from src.industry.matcher import compute_industry_match
from src.industry.models import (
    IndustryMatchResult,
    MatchedExact,
    MatchedRelated,
    UserIndustryProfile,
    WorkExperienceRow,
)
from src.industry.positions import get_industries_for_position
from src.industry.refresh import (
    ProfileRefreshService,
    ProfileStore,
    ProfileWriteNotSupportedError,
)
from src.industry.repository import IndustryProfileRepository
from src.industry.service import IndustryMatchService
from src.industry.taxonomy import (
    INDUSTRY_RELATED,
    INDUSTRY_SYNONYMS,
    capitalize_industry_tag,
    parse_industry_tags,
)

__all__ = [
    "IndustryMatchService",
    "ProfileRefreshService",
    "ProfileStore",
    "ProfileWriteNotSupportedError",
    "IndustryProfileRepository",
    "IndustryMatchResult",
    "MatchedExact",
    "MatchedRelated",
    "UserIndustryProfile",
    "WorkExperienceRow",
    "IndustryMatchConfig",
    "get_industry_config",
    "reset_industry_config",
    "INDUSTRY_SYNONYMS",
    "INDUSTRY_RELATED",
    "parse_industry_tags",
    "capitalize_industry_tag",
    "get_industries_for_position",
    "compute_years_for_row",
    "build_industry_years_from_work_experience",
    "get_user_industry_years",
    "compute_industry_match",
]
