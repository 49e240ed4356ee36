"""Static company name -> industry lookup.

Auxiliary data only: the experience accumulator and the scorer never read it.
Callers may use it to seed job tags for a posting with no industry string.
"""

from __future__ import annotations

import re
from types import MappingProxyType

COMPANY_INDUSTRY_MAP = MappingProxyType(
    {
        "paypal": ("payments", "fintech"),
        "stripe": ("payments", "fintech"),
        "amazon": ("e-commerce", "retail", "cloud"),
        "amazon web services": ("cloud", "technology"),
        "aws": ("cloud", "technology"),
        "sap": ("enterprise software", "saas"),
        "salesforce": ("saas", "enterprise software"),
        "google": ("technology", "cloud"),
        "microsoft": ("technology", "cloud", "saas"),
        "apple": ("technology",),
        "meta": ("technology",),
        "facebook": ("technology",),
        "spotify": ("technology", "marketplace"),
        "netflix": ("technology",),
        "uber": ("technology", "marketplace"),
        "airbnb": ("marketplace", "e-commerce"),
        "shopify": ("e-commerce", "saas"),
        "alibaba": ("e-commerce", "retail"),
        "ebay": ("e-commerce", "marketplace"),
        "adobe": ("technology", "saas"),
        "oracle": ("enterprise software", "cloud"),
        "ibm": ("technology", "cloud", "enterprise software"),
        "jpmorgan": ("banking", "fintech"),
        "jp morgan": ("banking", "fintech"),
        "goldman": ("banking", "fintech"),
        "goldman sachs": ("banking", "fintech"),
        "morgan stanley": ("banking", "fintech"),
        "visa": ("payments", "fintech"),
        "mastercard": ("payments", "fintech"),
        "square": ("payments", "fintech"),
        "revolut": ("fintech", "banking", "payments"),
        "n26": ("fintech", "banking"),
        "klarna": ("fintech", "payments", "e-commerce"),
        "plaid": ("fintech", "payments"),
        "brex": ("fintech",),
        "merck": ("pharma", "healthcare"),
        "pfizer": ("pharma", "healthcare"),
        "johnson": ("pharma", "healthcare"),
        "johnson johnson": ("pharma", "healthcare"),
        "siemens": ("technology", "enterprise software"),
        "bcg": ("consulting",),
        "boston consulting": ("consulting",),
        "mckinsey": ("consulting",),
        "bain": ("consulting",),
    }
)


def normalize_company_name(name: str | None) -> str:
    """Lowercase, turn punctuation into spaces, and collapse whitespace.

    "Johnson & Johnson" -> "johnson johnson", "J.P. Morgan" -> "j p morgan".
    """
    if not isinstance(name, str):
        return ""
    value = re.sub(r"[^\w\s]|_", " ", name.strip().lower())
    return re.sub(r"\s+", " ", value).strip()


def get_industries_for_company(name: str | None) -> list[str]:
    """Return canonical industry tags for a company, or [] when unknown."""
    key = normalize_company_name(name)
    if not key:
        return []
    return list(COMPANY_INDUSTRY_MAP.get(key, ()))
