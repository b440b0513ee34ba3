# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from gridwalk.errors import ConfigurationError
from gridwalk.search import RunConstraints

DEFAULT_CONFIG_FILE = Path(__file__).parent.parent / "config" / "puzzles.yaml"


@dataclass(frozen=True)
class CrucibleConfig:
    part_one: RunConstraints = field(default_factory=lambda: RunConstraints(min_run=0, max_run=3))
    part_two: RunConstraints = field(default_factory=lambda: RunConstraints(min_run=4, max_run=10))


@dataclass(frozen=True)
class DishConfig:
    spin_cycles: int = 1_000_000_000

    def __post_init__(self) -> None:
        if self.spin_cycles < 0:
            raise ConfigurationError(f"spin_cycles must be non-negative, got {self.spin_cycles}")


@dataclass(frozen=True)
class BeamsConfig:
    n_jobs: int = 1

    def __post_init__(self) -> None:
        if self.n_jobs == 0:
            raise ConfigurationError("n_jobs must not be 0")


@dataclass(frozen=True)
class GridwalkConfig:
    crucible: CrucibleConfig = field(default_factory=CrucibleConfig)
    dish: DishConfig = field(default_factory=DishConfig)
    beams: BeamsConfig = field(default_factory=BeamsConfig)


def _section(data: dict[str, Any], name: str, allowed: set[str]) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Section '{name}' must be a mapping")
    unknown = set(section) - allowed
    if unknown:
        raise ConfigurationError(f"Unknown keys in '{name}': {', '.join(sorted(unknown))}")
    return section


def _int(section: dict[str, Any], key: str, default: int, where: str) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"'{where}.{key}' must be an integer, got {value!r}")
    return value


def _run_constraints(data: dict[str, Any], part: str, default: RunConstraints) -> RunConstraints:
    section = _section(data, part, {"min_run", "max_run"})
    return RunConstraints(
        min_run=_int(section, "min_run", default.min_run, f"crucible.{part}"),
        max_run=_int(section, "max_run", default.max_run, f"crucible.{part}"),
    )


def parse_config(data: dict[str, Any] | None) -> GridwalkConfig:
    if data is None:
        return GridwalkConfig()
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration must be a mapping of puzzle sections")

    unknown = set(data) - {"crucible", "dish", "beams"}
    if unknown:
        raise ConfigurationError(f"Unknown configuration sections: {', '.join(sorted(unknown))}")

    defaults = GridwalkConfig()

    crucible = _section(data, "crucible", {"part_one", "part_two"})
    dish = _section(data, "dish", {"spin_cycles"})
    beams = _section(data, "beams", {"n_jobs"})

    return GridwalkConfig(
        crucible=CrucibleConfig(
            part_one=_run_constraints(crucible, "part_one", defaults.crucible.part_one),
            part_two=_run_constraints(crucible, "part_two", defaults.crucible.part_two),
        ),
        dish=DishConfig(spin_cycles=_int(dish, "spin_cycles", defaults.dish.spin_cycles, "dish")),
        beams=BeamsConfig(n_jobs=_int(beams, "n_jobs", defaults.beams.n_jobs, "beams")),
    )


def load_config(config_file: str | Path | None = None) -> GridwalkConfig:
    """
    Load puzzle parameters from a YAML file.

    Args:
        config_file: Path to the YAML file. If None, uses config/puzzles.yaml
                     when present and the built-in defaults otherwise.

    Returns:
        A validated GridwalkConfig
    """
    if config_file is None:
        if not DEFAULT_CONFIG_FILE.exists():
            return GridwalkConfig()
        config_file = DEFAULT_CONFIG_FILE
    else:
        config_file = Path(config_file)
        if not config_file.exists():
            raise ConfigurationError(f"Configuration file {config_file} not found")

    with open(config_file, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing {config_file}: {e}") from e

    return parse_config(data)
