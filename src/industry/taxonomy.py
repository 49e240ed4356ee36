"""Industry taxonomy: canonical tags, synonyms, and related industries.

Used to normalize a job posting's industry string and to look up which
industries count as adjacent when scoring. Only normalizes what it is given;
an unknown industry passes through as its own tag.
"""

from __future__ import annotations

import re
from types import MappingProxyType

_WHITESPACE_RE = re.compile(r"\s+")

INDUSTRY_SYNONYMS = MappingProxyType(
    {
        "financial services": "fintech",
        "finance": "fintech",
        "fs": "fintech",
        "fin tech": "fintech",
        "banking": "banking",
        "payments": "payments",
        "e commerce": "e-commerce",
        "ecommerce": "e-commerce",
        "retail": "retail",
        "insurance": "insurance",
        "enterprise software": "enterprise software",
        "saas": "saas",
        "software as a service": "saas",
        "medtech": "medtech",
        "medical technology": "medtech",
        "pharma": "pharma",
        "pharmaceutical": "pharma",
        "healthcare": "healthcare",
        "health care": "healthcare",
        "marketplace": "marketplace",
        "market place": "marketplace",
        "technology": "technology",
        "tech": "technology",
        "software": "technology",
        "cloud": "cloud",
        "cloud computing": "cloud",
    }
)

# Lists are ordered: the scorer takes the first related tag with experience.
INDUSTRY_RELATED = MappingProxyType(
    {
        "fintech": ("banking", "insurance", "payments"),
        "banking": ("fintech", "payments"),
        "payments": ("fintech", "banking"),
        "e-commerce": ("retail", "marketplace"),
        "retail": ("e-commerce", "marketplace"),
        "marketplace": ("e-commerce", "retail"),
        "healthcare": ("medtech", "pharma"),
        "medtech": ("healthcare", "pharma"),
        "pharma": ("healthcare", "medtech"),
        "technology": ("saas", "cloud"),
        "saas": ("technology", "enterprise software"),
        "enterprise software": ("saas", "technology"),
        "cloud": ("technology",),
    }
)


def normalize_industry(value: str | None) -> str:
    """Trim, lowercase, and collapse internal whitespace to single spaces."""
    if not isinstance(value, str):
        return ""
    return _WHITESPACE_RE.sub(" ", value.strip().lower())


def canonicalize_industry(value: str | None) -> str:
    """Return the canonical tag for a single industry string."""
    normalized = normalize_industry(value)
    return INDUSTRY_SYNONYMS.get(normalized, normalized)


def parse_industry_tags(raw: str | None) -> list[str]:
    """Parse a comma-separated industry string into canonical tags.

    Empty or missing input yields an empty list. Each piece is normalized,
    folded through the synonym table, and duplicates are dropped (first
    occurrence wins; order carries no meaning for scoring).
    """
    if not isinstance(raw, str) or not raw.strip():
        return []

    tags: list[str] = []
    seen: set[str] = set()
    for piece in raw.split(","):
        tag = canonicalize_industry(piece)
        if tag and tag not in seen:
            seen.add(tag)
            tags.append(tag)
    return tags


def get_related_industries(tag: str) -> tuple[str, ...]:
    """Return the ordered related tags declared for ``tag`` (may be empty)."""
    return INDUSTRY_RELATED.get(tag, ())


def capitalize_industry_tag(tag: str) -> str:
    """Capitalize a tag for display ("fintech" -> "Fintech")."""
    if not tag:
        return tag
    return tag[0].upper() + tag[1:].lower()
