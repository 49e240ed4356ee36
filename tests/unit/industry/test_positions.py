"""Tests for position -> industry classification."""

import pytest


class TestGetIndustriesForPosition:
    """Test get_industries_for_position."""

    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("UI/UX Designer", ["design"]),
            ("Software Engineer", ["technology"]),
            ("Data Scientist", ["technology"]),
            ("Nurse", ["healthcare"]),
            ("Recruiter", ["hr"]),
            ("Copywriter", ["content"]),
        ],
    )
    def test_maps_common_titles(self, title, expected):
        """Common titles should map to their industry."""
        from src.industry.positions import get_industries_for_position

        assert get_industries_for_position(title) == expected

    def test_empty_or_missing_title_returns_empty(self):
        """No title means no industries."""
        from src.industry.positions import get_industries_for_position

        assert get_industries_for_position(None) == []
        assert get_industries_for_position("") == []
        assert get_industries_for_position("   ") == []

    def test_unmatched_title_returns_empty(self):
        """There is no default industry for unknown titles."""
        from src.industry.positions import get_industries_for_position

        assert get_industries_for_position("Barista") == []

    def test_substring_matching_handles_compound_titles(self):
        """'Senior Backend Engineer' should match via the 'backend' keyword."""
        from src.industry.positions import get_industries_for_position

        assert get_industries_for_position("Senior Backend Engineer") == ["technology"]

    def test_normalizes_case_and_whitespace(self):
        """Titles should be matched case-insensitively with collapsed spaces."""
        from src.industry.positions import get_industries_for_position

        assert get_industries_for_position("  PRODUCT    designer ") == ["design"]

    def test_title_can_match_multiple_groups(self):
        """A title hitting several groups yields all their industries."""
        from src.industry.positions import get_industries_for_position

        industries = get_industries_for_position("Payments Software Engineer")

        assert set(industries) == {"technology", "payments", "fintech"}

    def test_group_with_multiple_industries(self):
        """Finance roles should map to fintech and banking."""
        from src.industry.positions import get_industries_for_position

        assert get_industries_for_position("Financial Analyst") == ["fintech", "banking"]

    def test_result_has_no_duplicates(self):
        """Several groups mapping to technology should give it once."""
        from src.industry.positions import get_industries_for_position

        industries = get_industries_for_position("ML Engineer, QA Engineer")

        assert industries == ["technology"]


class TestNormalizeTitle:
    """Test normalize_title."""

    def test_normalize_title(self):
        from src.industry.positions import normalize_title

        assert normalize_title("  Senior\tData   Analyst ") == "senior data analyst"
        assert normalize_title(None) == ""
