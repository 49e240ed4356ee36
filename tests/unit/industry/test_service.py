"""Tests for the industry match service."""

import logging


class TestMatchJob:
    """Test IndustryMatchService.match_job."""

    def test_parses_raw_string_and_scores(self):
        from src.industry.service import IndustryMatchService

        result = IndustryMatchService().match_job(
            "Financial Services, Banking, Health Care", {"fintech": 2.5}
        )

        assert [m.tag for m in result.matched_exact] == ["fintech"]
        assert [m.job_tag for m in result.matched_related] == ["banking"]
        assert result.missing == ["healthcare"]
        assert result.percent == 53

    def test_missing_industry_string_is_not_applicable(self):
        from src.industry.service import IndustryMatchService

        result = IndustryMatchService().match_job(None, {"fintech": 2})

        assert result.is_na is True
        assert result.percent is None

    def test_company_is_ignored_without_fallback(self):
        """The company map must not seed tags unless enabled."""
        from src.industry.service import IndustryMatchService

        result = IndustryMatchService().match_job("", {"fintech": 2}, company="Stripe")

        assert result.is_na is True

    def test_company_fallback_seeds_tags(self):
        from src.industry.config import IndustryMatchConfig
        from src.industry.service import IndustryMatchService

        config = IndustryMatchConfig(_env_file=None, company_fallback=True)  # type: ignore[call-arg]
        service = IndustryMatchService(config=config)

        result = service.match_job("", {"fintech": 2}, company="Stripe")

        assert result.is_na is False
        assert [m.tag for m in result.matched_exact] == ["fintech"]
        assert [(m.job_tag, m.matched_via) for m in result.matched_related] == [
            ("payments", "fintech")
        ]

    def test_explicit_tags_win_over_company_fallback(self):
        from src.industry.config import IndustryMatchConfig
        from src.industry.service import IndustryMatchService

        config = IndustryMatchConfig(_env_file=None, company_fallback=True)  # type: ignore[call-arg]
        service = IndustryMatchService(config=config)

        assert service.resolve_job_tags("Healthcare", company="Stripe") == ["healthcare"]

    def test_unknown_company_fallback_stays_not_applicable(self):
        from src.industry.config import IndustryMatchConfig
        from src.industry.service import IndustryMatchService

        config = IndustryMatchConfig(_env_file=None, company_fallback=True)  # type: ignore[call-arg]

        result = IndustryMatchService(config=config).match_job(
            None, {"fintech": 2}, company="Acme Widgets"
        )

        assert result.is_na is True

    def test_logs_outcome_at_debug(self, caplog):
        from src.industry.service import IndustryMatchService

        with caplog.at_level(logging.DEBUG, logger="src.industry.service"):
            IndustryMatchService().match_job("fintech", {"fintech": 1})

        assert "Industry match 100%" in caplog.text


class TestMatchJobForProfile:
    """Test IndustryMatchService.match_job_for_profile."""

    def test_reads_years_from_profile_model(self):
        from src.industry.models import UserIndustryProfile
        from src.industry.service import IndustryMatchService

        profile = UserIndustryProfile(candidate_id="c1", industry_years={"retail": 6})

        result = IndustryMatchService().match_job_for_profile("e-commerce", profile)

        assert result.matched_related[0].matched_via == "retail"
        assert result.percent == 70

    def test_reads_years_from_raw_payload(self):
        from src.industry.service import IndustryMatchService

        result = IndustryMatchService().match_job_for_profile(
            "saas", {"industry_years_json": {"saas": 3}}
        )

        assert result.percent == 100

    def test_missing_profile_scores_as_no_experience(self):
        from src.industry.service import IndustryMatchService

        result = IndustryMatchService().match_job_for_profile("saas", None)

        assert result.percent == 0
        assert result.missing == ["saas"]
