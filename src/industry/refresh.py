"""Refresh and persist a candidate's industry profile.

Call after the candidate adds, edits, or deletes work experience. The profile
is always rebuilt from the complete work history and written as a whole.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, Protocol

from src.industry.config import IndustryMatchConfig, get_industry_config
from src.industry.experience import (
    build_industry_years_from_work_experience,
    get_user_industry_years,
)
from src.industry.models import UserIndustryProfile, WorkExperienceRow

logger = logging.getLogger(__name__)


class ProfileWriteNotSupportedError(Exception):
    """Raised by a profile store that does not support whole-profile replace."""


class ProfileStore(Protocol):
    """Persistence boundary for industry profiles."""

    async def replace_profile(
        self, candidate_id: str, payload: Mapping[str, Any]
    ) -> None: ...

    async def update_profile(
        self, candidate_id: str, payload: Mapping[str, Any]
    ) -> None: ...

    async def get_profile(self, candidate_id: str) -> UserIndustryProfile | None: ...


class ProfileRefreshService:
    """Recompute a candidate's industry profile and hand it to a store."""

    def __init__(
        self, store: ProfileStore, config: IndustryMatchConfig | None = None
    ) -> None:
        self.store = store
        self.config = config or get_industry_config()

    async def refresh_profile(
        self,
        candidate_id: str,
        work_experiences: Iterable[WorkExperienceRow | Mapping],
        *,
        now: datetime | None = None,
    ) -> UserIndustryProfile:
        """Rebuild the profile from the full work history and persist it.

        Writes with a whole-profile replace; a store that rejects that as
        unsupported gets a partial update with the same payload instead.
        An empty history stores an empty map.
        """
        profile = build_industry_years_from_work_experience(
            candidate_id, work_experiences, now=now, config=self.config
        )
        payload = profile.to_payload()

        try:
            await self.store.replace_profile(candidate_id, payload)
        except ProfileWriteNotSupportedError:
            logger.warning(
                "Profile replace not supported for candidate %s; "
                "falling back to partial update",
                candidate_id,
            )
            await self.store.update_profile(candidate_id, payload)

        logger.info(
            "Refreshed industry profile for candidate %s (%d industries)",
            candidate_id,
            len(profile.industry_years),
        )
        return profile

    async def load_industry_years(self, candidate_id: str) -> dict[str, float]:
        """Return the stored industry -> years map, or {} when none is stored."""
        profile = await self.store.get_profile(candidate_id)
        return get_user_industry_years(profile)
