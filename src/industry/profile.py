"""Work history and industry-years file loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from src.industry.experience import get_user_industry_years
from src.industry.models import WorkExperienceRow

_HISTORY_KEYS = ("work_experience", "work_history", "work_experiences")


class WorkHistoryLoader:
    """Load work history rows and industry-years maps from YAML or JSON."""

    def load(self, path: Path | str) -> list[WorkExperienceRow]:
        """Load work experience rows.

        The file holds either a list of rows or a mapping with one of
        `work_experience`, `work_history` or `work_experiences`.
        """
        history_path = Path(path)
        data = self._load_file(history_path)

        if isinstance(data, dict):
            for key in _HISTORY_KEYS:
                if key in data:
                    data = data[key] or []
                    break
            else:
                raise ValueError(f"No work history found in: {history_path}")

        if not isinstance(data, list):
            raise ValueError(f"Work history must be a list: {history_path}")

        rows: list[WorkExperienceRow] = []
        for item in data:
            if not isinstance(item, dict):
                raise ValueError(f"Work history entries must be mappings: {history_path}")
            rows.append(WorkExperienceRow.from_dict(item))
        return rows

    def load_industry_years(self, path: Path | str) -> dict[str, float]:
        """Load a stored industry -> years map.

        Accepts a flat mapping or a payload with `industry_years` /
        `industry_years_json`.
        """
        years_path = Path(path)
        data = self._load_file(years_path)
        if not isinstance(data, dict):
            raise ValueError(f"Industry years must be a mapping/dict: {years_path}")

        if "industry_years" in data or "industry_years_json" in data:
            return get_user_industry_years(data)
        return get_user_industry_years({"industry_years": data})

    def _load_file(self, path: Path) -> Any:
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        suffix = path.suffix.lower()
        if suffix in {".yaml", ".yml"}:
            return self._load_yaml(path)
        if suffix == ".json":
            return self._load_json(path)
        return self._load_unknown(path)

    def _load_yaml(self, path: Path) -> Any:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML file: {path}") from e
        return {} if data is None else data

    def _load_json(self, path: Path) -> Any:
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON file: {path}") from e

    def _load_unknown(self, path: Path) -> Any:
        """Auto-detect the format when the file extension is unknown."""
        raw = path.read_text(encoding="utf-8")
        raw_stripped = raw.lstrip()

        # Try JSON first if it looks like JSON, otherwise fall back to YAML.
        if raw_stripped.startswith("{") or raw_stripped.startswith("["):
            try:
                return json.loads(raw)
            except json.JSONDecodeError:
                pass

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid file format: {path}") from e
        return {} if data is None else data
