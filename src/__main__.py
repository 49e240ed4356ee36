"""Main entry point for the industry match tool."""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from src import __version__
from src.config.settings import Settings
from src.utils.logging import configure_logging


def _print_json(payload: object) -> None:
    def _default(value: object):
        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        return str(value)

    print(json.dumps(payload, indent=2, sort_keys=True, default=_default))


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="industry-match",
        description="Industry experience matching for candidate-to-job fit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src parse-tags "Financial Services, E Commerce"
  python -m src classify "Senior Backend Engineer"
  python -m src match --tags "fintech, banking" --history history.yaml
  python -m src refresh --candidate 42 --history history.yaml
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
    )

    parse_parser = subparsers.add_parser(
        "parse-tags",
        help="Normalize a comma-separated industry string",
    )
    parse_parser.add_argument("raw", help="Raw industry string from a job posting")

    classify_parser = subparsers.add_parser(
        "classify",
        help="Infer industries from a job title",
    )
    classify_parser.add_argument("title", help="Job title / position")

    years_parser = subparsers.add_parser(
        "years",
        help="Derive industry years from a work history file",
    )
    years_parser.add_argument(
        "--history",
        type=Path,
        required=True,
        help="Path to work history (YAML or JSON)",
    )
    years_parser.add_argument(
        "--candidate",
        default="",
        help="Candidate identifier echoed in the output",
    )

    match_parser = subparsers.add_parser(
        "match",
        help="Score a job's industries against a candidate",
    )
    match_parser.add_argument(
        "--tags",
        default=None,
        help="Raw comma-separated industry string of the job",
    )
    match_parser.add_argument(
        "--company",
        default=None,
        help="Company name (used only when company fallback is enabled)",
    )
    source = match_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--history",
        type=Path,
        help="Path to work history (YAML or JSON)",
    )
    source.add_argument(
        "--years",
        type=Path,
        help="Path to a stored industry -> years map (YAML or JSON)",
    )

    refresh_parser = subparsers.add_parser(
        "refresh",
        help="Recompute and store a candidate's industry profile",
    )
    refresh_parser.add_argument("--candidate", required=True, help="Candidate ID")
    refresh_parser.add_argument(
        "--history",
        type=Path,
        required=True,
        help="Path to the complete work history (YAML or JSON)",
    )
    refresh_parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Override the profile database path",
    )

    show_parser = subparsers.add_parser(
        "show",
        help="Show a stored industry profile",
    )
    show_parser.add_argument("--candidate", required=True, help="Candidate ID")
    show_parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Override the profile database path",
    )

    return parser


async def _refresh(db_path: Path, candidate_id: str, rows: list) -> object:
    from src.industry.refresh import ProfileRefreshService
    from src.industry.repository import IndustryProfileRepository

    repo = IndustryProfileRepository(db_path)
    await repo.initialize()
    try:
        service = ProfileRefreshService(repo)
        return await service.refresh_profile(candidate_id, rows)
    finally:
        await repo.close()


async def _show(db_path: Path, candidate_id: str) -> object:
    from src.industry.repository import IndustryProfileRepository

    repo = IndustryProfileRepository(db_path)
    await repo.initialize()
    try:
        return await repo.get_profile(candidate_id)
    finally:
        await repo.close()


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    # Load settings
    try:
        settings = Settings()
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    # Configure logging
    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    # If no command specified, show help
    if parsed.command is None:
        parser.print_help()
        return 0

    logger.debug(f"industry-match v{__version__} running {parsed.command}")

    if parsed.command == "parse-tags":
        from src.industry.taxonomy import parse_industry_tags

        _print_json(parse_industry_tags(parsed.raw))
        return 0

    if parsed.command == "classify":
        from src.industry.positions import get_industries_for_position

        _print_json(get_industries_for_position(parsed.title))
        return 0

    from src.industry.profile import WorkHistoryLoader

    loader = WorkHistoryLoader()

    try:
        if parsed.command == "years":
            from src.industry.experience import (
                build_industry_years_from_work_experience,
            )

            rows = loader.load(parsed.history)
            profile = build_industry_years_from_work_experience(parsed.candidate, rows)
            _print_json(profile.to_dict())
            return 0

        if parsed.command == "match":
            from src.industry.experience import (
                build_industry_years_from_work_experience,
            )
            from src.industry.service import IndustryMatchService

            if parsed.history is not None:
                rows = loader.load(parsed.history)
                user_years = build_industry_years_from_work_experience(
                    "", rows
                ).industry_years
            else:
                user_years = loader.load_industry_years(parsed.years)

            result = IndustryMatchService().match_job(
                parsed.tags, user_years, company=parsed.company
            )
            _print_json(result.to_dict())
            return 0

        if parsed.command == "refresh":
            rows = loader.load(parsed.history)
            db_path = parsed.db or settings.profile_db_path
            profile = asyncio.run(_refresh(db_path, parsed.candidate, rows))
            _print_json(profile.to_dict())
            return 0

        if parsed.command == "show":
            db_path = parsed.db or settings.profile_db_path
            profile = asyncio.run(_show(db_path, parsed.candidate))
            if profile is None:
                print("Not found", file=sys.stderr)
                return 1
            _print_json(profile.to_dict())
            return 0
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Unknown command: {parsed.command}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
