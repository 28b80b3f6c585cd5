"""Load standings configurations from TOML files."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any
import tomllib

from domain.common import TiePolicy


@dataclass(frozen=True)
class StandingsConfig:
    """Configuration for one standings table."""

    name: str
    description: str | None
    file_path: Path
    tie_policy: TiePolicy = TiePolicy.DRAW

    def as_config_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "tie_policy": self.tie_policy.value,
        }


def load_standings_config(file_path: Path) -> StandingsConfig:
    """Load and validate one standings TOML file."""
    with file_path.open("rb") as file:
        raw = tomllib.load(file)
    return _parse_standings_config(raw, file_path)


def load_standings_configs(config_dir: Path) -> list[StandingsConfig]:
    """Load every standings TOML file in a directory, sorted by file name.

    Config names must be unique across the directory since scripts select a
    table by `[system].name`.
    """
    configs = [load_standings_config(file_path) for file_path in _standings_config_files(config_dir)]

    duplicates = sorted(name for name, count in Counter(c.name for c in configs).items() if count > 1)
    if duplicates:
        raise ValueError(
            f"Duplicate standings config names found in {config_dir}: {', '.join(duplicates)}"
        )
    return configs


def _standings_config_files(config_dir: Path) -> list[Path]:
    if not config_dir.is_dir():
        if config_dir.exists():
            raise NotADirectoryError(f"Config path is not a directory: {config_dir}")
        raise FileNotFoundError(f"Config directory not found: {config_dir}")

    config_files = sorted(config_dir.glob("*.toml"))
    if not config_files:
        raise ValueError(f"No .toml config files found in: {config_dir}")
    return config_files


def _parse_standings_config(raw: dict[str, Any], file_path: Path) -> StandingsConfig:
    system_raw = raw.get("system", {})
    standings_raw = raw.get("standings", {})

    name = str(system_raw.get("name", "")).strip()
    if not name:
        raise ValueError(f"{file_path}: [system].name is required")

    description_value = system_raw.get("description")
    description = None if description_value is None else str(description_value)

    tie_policy_value = str(standings_raw.get("tie_policy", TiePolicy.DRAW.value)).strip().lower()
    try:
        tie_policy = TiePolicy(tie_policy_value)
    except ValueError as exc:
        available = ", ".join(policy.value for policy in TiePolicy)
        raise ValueError(
            f"{file_path}: [standings].tie_policy must be one of: {available} "
            f"(got {tie_policy_value!r})"
        ) from exc

    return StandingsConfig(
        name=name,
        description=description,
        file_path=file_path,
        tie_policy=tie_policy,
    )


__all__ = ["StandingsConfig", "load_standings_config", "load_standings_configs"]
