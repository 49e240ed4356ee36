"""Database repository for derived industry profiles.

This module provides async SQLite storage for the industry -> years
profile computed from a candidate's work history.
"""

import json
from collections.abc import AsyncGenerator, Mapping
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import aiosqlite

from src.industry.experience import get_user_industry_years
from src.industry.models import UserIndustryProfile

# SQL schema for the industry profile table
CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS industry_profile (
    candidate_id TEXT PRIMARY KEY,
    industry_years_json TEXT NOT NULL DEFAULT '{}',
    updated_at TEXT NOT NULL
)
"""

UPSERT_SQL = """
INSERT INTO industry_profile (candidate_id, industry_years_json, updated_at)
VALUES (?, ?, ?)
ON CONFLICT(candidate_id) DO UPDATE SET
    industry_years_json = excluded.industry_years_json,
    updated_at = excluded.updated_at
"""

PROFILE_FIELDS = ("industry_years_json", "updated_at")


class IndustryProfileRepository:
    """Async SQLite repository for industry profiles.

    Supports both write styles used by profile refresh: a whole-profile
    replace and a partial update of the supplied fields.
    """

    def __init__(self, db_path: Path | str):
        """Initialize the repository.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
        self._connection: aiosqlite.Connection | None = None

    @asynccontextmanager
    async def _get_connection(self) -> AsyncGenerator[aiosqlite.Connection, None]:
        """Get a database connection.

        Yields:
            An aiosqlite connection.
        """
        if self._connection is None:
            self._connection = await aiosqlite.connect(self.db_path)
            self._connection.row_factory = aiosqlite.Row
        yield self._connection

    async def initialize(self) -> None:
        """Initialize the database, creating tables if needed."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        async with self._get_connection() as conn:
            await conn.execute(CREATE_TABLE_SQL)
            await conn.commit()

    async def close(self) -> None:
        """Close the database connection."""
        if self._connection is not None:
            await self._connection.close()
            self._connection = None

    async def replace_profile(
        self, candidate_id: str, payload: Mapping[str, Any]
    ) -> None:
        """Replace the whole stored profile for a candidate.

        Idempotent: writing the same payload twice leaves one identical row.

        Args:
            candidate_id: The candidate the profile belongs to.
            payload: Mapping with `industry_years_json` and `updated_at`.
        """
        years = get_user_industry_years(payload)
        updated_at = _updated_at_text(payload.get("updated_at"))

        async with self._get_connection() as conn:
            await conn.execute(
                UPSERT_SQL, (candidate_id, json.dumps(years, sort_keys=True), updated_at)
            )
            await conn.commit()

    async def update_profile(
        self, candidate_id: str, payload: Mapping[str, Any]
    ) -> None:
        """Update only the fields present in the payload.

        Creates the row when the candidate has no stored profile yet.

        Args:
            candidate_id: The candidate the profile belongs to.
            payload: Mapping with any of `industry_years_json` and `updated_at`.
        """
        existing = await self.get_profile(candidate_id)
        merged: dict[str, Any] = (
            existing.to_payload()
            if existing is not None
            else {"industry_years_json": {}, "updated_at": None}
        )
        for key in PROFILE_FIELDS:
            if key in payload:
                merged[key] = payload[key]

        await self.replace_profile(candidate_id, merged)

    async def get_profile(self, candidate_id: str) -> UserIndustryProfile | None:
        """Get the stored profile for a candidate.

        Args:
            candidate_id: The candidate to look up.

        Returns:
            The profile if found, None otherwise.
        """
        async with self._get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM industry_profile WHERE candidate_id = ?",
                (candidate_id,),
            )
            row = await cursor.fetchone()

        if row is None:
            return None

        return self._row_to_profile(row)

    async def delete_profile(self, candidate_id: str) -> None:
        """Delete the stored profile for a candidate, if any."""
        async with self._get_connection() as conn:
            await conn.execute(
                "DELETE FROM industry_profile WHERE candidate_id = ?",
                (candidate_id,),
            )
            await conn.commit()

    def _row_to_profile(self, row: aiosqlite.Row) -> UserIndustryProfile:
        """Convert a database row to a UserIndustryProfile.

        Args:
            row: The database row.

        Returns:
            A UserIndustryProfile instance.
        """
        try:
            raw_years = json.loads(row["industry_years_json"] or "{}")
        except json.JSONDecodeError:
            raw_years = {}

        return UserIndustryProfile(
            candidate_id=row["candidate_id"],
            industry_years=get_user_industry_years({"industry_years": raw_years}),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )


def _updated_at_text(value: object) -> str:
    if isinstance(value, str) and value.strip():
        value = datetime.fromisoformat(value.strip())
    if not isinstance(value, datetime):
        value = datetime.now(UTC)
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.isoformat()
