"""Infer industry tags from a job title / position string."""

from __future__ import annotations

import re
from dataclasses import dataclass

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class PositionKeywordGroup:
    """Keywords (lowercase) that indicate experience in the given industries."""

    keywords: tuple[str, ...]
    industries: tuple[str, ...]


# Canonical industry names must match the taxonomy spelling.
POSITION_KEYWORDS: tuple[PositionKeywordGroup, ...] = (
    PositionKeywordGroup(
        keywords=(
            "ui/ux designer",
            "ui ux designer",
            "ux designer",
            "ui designer",
            "ux/ui",
            "product designer",
            "graphic designer",
            "web designer",
            "designer",
        ),
        industries=("design",),
    ),
    PositionKeywordGroup(
        keywords=(
            "software engineer",
            "software developer",
            "developer",
            "frontend",
            "front-end",
            "backend",
            "back-end",
            "fullstack",
            "full stack",
            "engineer",
            "programmer",
            "devops",
            "sre",
        ),
        industries=("technology",),
    ),
    PositionKeywordGroup(
        keywords=(
            "data scientist",
            "data analyst",
            "analytics",
            "machine learning",
            "ml engineer",
            "ai engineer",
        ),
        industries=("technology",),
    ),
    PositionKeywordGroup(
        keywords=("product manager", "pm ", "product owner", "product lead"),
        industries=("technology",),
    ),
    PositionKeywordGroup(
        keywords=(
            "financial analyst",
            "finance manager",
            "banker",
            "investment",
            "risk analyst",
            "compliance",
            "accountant",
            "cfo",
        ),
        industries=("fintech", "banking"),
    ),
    PositionKeywordGroup(
        keywords=("payment", "payments specialist"),
        industries=("payments", "fintech"),
    ),
    PositionKeywordGroup(
        keywords=(
            "marketing manager",
            "marketing specialist",
            "digital marketing",
            "growth lead",
            "brand manager",
        ),
        industries=("marketing",),
    ),
    PositionKeywordGroup(
        keywords=(
            "sales manager",
            "sales representative",
            "business development",
            "bd ",
        ),
        industries=("sales",),
    ),
    PositionKeywordGroup(
        keywords=(
            "hr manager",
            "hr specialist",
            "recruiter",
            "talent",
            "people operations",
        ),
        industries=("hr",),
    ),
    PositionKeywordGroup(
        keywords=(
            "customer success",
            "customer support",
            "support specialist",
            "account manager",
        ),
        industries=("customer service",),
    ),
    PositionKeywordGroup(
        keywords=("nurse", "doctor", "physician", "clinical", "healthcare"),
        industries=("healthcare",),
    ),
    PositionKeywordGroup(
        keywords=("e-commerce", "ecommerce", "retail manager", "merchandising"),
        industries=("e-commerce", "retail"),
    ),
    PositionKeywordGroup(
        keywords=("consultant", "consulting"),
        industries=("consulting",),
    ),
    PositionKeywordGroup(
        keywords=("content writer", "copywriter", "content manager", "editor"),
        industries=("content",),
    ),
    PositionKeywordGroup(
        keywords=("qa engineer", "quality assurance", "test engineer", "sdet"),
        industries=("technology",),
    ),
)


def normalize_title(title: str | None) -> str:
    """Normalize a job title for keyword lookup."""
    if not isinstance(title, str):
        return ""
    return _WHITESPACE_RE.sub(" ", title.strip().lower())


def _keyword_in_title(keyword: str, title: str) -> bool:
    # Substring match: "senior backend engineer" hits "backend".
    return keyword in title or _WHITESPACE_RE.sub(" ", keyword) in title


def get_industries_for_position(title: str | None) -> list[str]:
    """Return canonical industry tags for a job title.

    E.g. "UI/UX Designer" -> ["design"], "Software Engineer" -> ["technology"].
    A title may match several groups. Returns [] when nothing matches; there
    is no default industry.
    """
    normalized = normalize_title(title)
    if not normalized:
        return []

    industries: list[str] = []
    for group in POSITION_KEYWORDS:
        if any(_keyword_in_title(kw, normalized) for kw in group.keywords):
            for industry in group.industries:
                if industry not in industries:
                    industries.append(industry)
    return industries
