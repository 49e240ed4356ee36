"""Pytest configuration and shared fixtures."""

from datetime import UTC, datetime

import pytest


@pytest.fixture(autouse=True)
def _isolated_industry_config(monkeypatch):
    """Keep INDUSTRY_* environment overrides and cached config out of tests."""
    import os

    from src.industry.config import reset_industry_config

    for name in list(os.environ):
        if name.upper().startswith("INDUSTRY_"):
            monkeypatch.delenv(name, raising=False)
    reset_industry_config()
    yield
    reset_industry_config()


@pytest.fixture(autouse=True)
def _reset_package_logging():
    """Undo configure_logging so caplog sees module records."""
    from src.utils.logging import reset_logging

    yield
    reset_logging()


@pytest.fixture
def fixed_now() -> datetime:
    """A pinned "now" for date arithmetic."""
    return datetime(2024, 6, 1, tzinfo=UTC)


@pytest.fixture
def sample_work_history() -> list[dict]:
    """Work history rows as the profile API returns them."""
    return [
        {
            "job_title": "Senior Backend Engineer",
            "company": "Stripe",
            "start_date": "2019-01-01",
            "end_date": "2021-01-01",
        },
        {
            "job_title": "Financial Analyst",
            "company": "Some Bank",
            "start_date": "2021-01-01",
            "end_date": None,
            "is_current": True,
        },
        {
            "job_title": "Barista",
            "start_date": "2015-01-01",
            "end_date": "2016-01-01",
        },
    ]
