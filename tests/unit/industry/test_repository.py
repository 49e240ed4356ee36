"""Tests for the IndustryProfileRepository database layer."""

import json
from datetime import UTC, datetime

import pytest


@pytest.fixture
async def repo(tmp_path):
    """Create an initialized repository in a temp directory."""
    from src.industry.repository import IndustryProfileRepository

    repository = IndustryProfileRepository(tmp_path / "profiles.db")
    await repository.initialize()
    yield repository
    await repository.close()


class TestDatabaseInitialization:
    """Test database initialization."""

    @pytest.mark.asyncio
    async def test_creates_database_file_and_parent_dirs(self, tmp_path):
        from src.industry.repository import IndustryProfileRepository

        db_path = tmp_path / "nested" / "profiles.db"
        assert not db_path.exists()

        repository = IndustryProfileRepository(db_path)
        await repository.initialize()

        assert db_path.exists()
        await repository.close()

    @pytest.mark.asyncio
    async def test_creates_table_with_expected_columns(self, repo):
        async with repo._get_connection() as conn:
            cursor = await conn.execute("PRAGMA table_info(industry_profile)")
            columns = [col[1] for col in await cursor.fetchall()]

        assert columns == ["candidate_id", "industry_years_json", "updated_at"]

    @pytest.mark.asyncio
    async def test_initialize_is_idempotent(self, repo):
        await repo.initialize()
        await repo.initialize()


class TestReplaceProfile:
    """Test whole-profile replace."""

    @pytest.mark.asyncio
    async def test_replace_then_get(self, repo):
        await repo.replace_profile(
            "c1",
            {
                "industry_years_json": {"fintech": 2.5, "banking": 2.5},
                "updated_at": "2024-06-01T00:00:00+00:00",
            },
        )

        profile = await repo.get_profile("c1")

        assert profile is not None
        assert profile.candidate_id == "c1"
        assert profile.industry_years == {"fintech": 2.5, "banking": 2.5}
        assert profile.updated_at == datetime(2024, 6, 1, tzinfo=UTC)

    @pytest.mark.asyncio
    async def test_replace_overwrites_previous_profile(self, repo):
        await repo.replace_profile(
            "c1", {"industry_years_json": {"fintech": 1}, "updated_at": "2024-01-01"}
        )
        await repo.replace_profile(
            "c1", {"industry_years_json": {"hr": 3}, "updated_at": "2024-02-01"}
        )

        profile = await repo.get_profile("c1")

        assert profile.industry_years == {"hr": 3.0}

    @pytest.mark.asyncio
    async def test_replace_is_idempotent(self, repo):
        payload = {
            "industry_years_json": {"saas": 4.0},
            "updated_at": "2024-06-01T00:00:00+00:00",
        }
        await repo.replace_profile("c1", payload)
        await repo.replace_profile("c1", payload)

        async with repo._get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM industry_profile")
            rows = await cursor.fetchall()

        assert len(rows) == 1
        assert json.loads(rows[0]["industry_years_json"]) == {"saas": 4.0}

    @pytest.mark.asyncio
    async def test_replace_with_empty_map(self, repo):
        await repo.replace_profile("c1", {"industry_years_json": {}})

        profile = await repo.get_profile("c1")

        assert profile.industry_years == {}
        assert profile.updated_at.tzinfo is not None


class TestUpdateProfile:
    """Test partial profile update."""

    @pytest.mark.asyncio
    async def test_update_creates_missing_profile(self, repo):
        await repo.update_profile(
            "c2", {"industry_years_json": {"retail": 1.5}, "updated_at": "2024-03-01"}
        )

        profile = await repo.get_profile("c2")

        assert profile.industry_years == {"retail": 1.5}

    @pytest.mark.asyncio
    async def test_update_only_changes_supplied_fields(self, repo):
        await repo.replace_profile(
            "c1",
            {"industry_years_json": {"fintech": 2.0}, "updated_at": "2024-01-01T00:00:00+00:00"},
        )

        await repo.update_profile("c1", {"updated_at": "2024-05-01T00:00:00+00:00"})

        profile = await repo.get_profile("c1")
        assert profile.industry_years == {"fintech": 2.0}
        assert profile.updated_at == datetime(2024, 5, 1, tzinfo=UTC)


class TestGetAndDelete:
    """Test lookups and deletes."""

    @pytest.mark.asyncio
    async def test_get_unknown_candidate_returns_none(self, repo):
        assert await repo.get_profile("nobody") is None

    @pytest.mark.asyncio
    async def test_delete_profile(self, repo):
        await repo.replace_profile("c1", {"industry_years_json": {"hr": 1}})

        await repo.delete_profile("c1")

        assert await repo.get_profile("c1") is None
