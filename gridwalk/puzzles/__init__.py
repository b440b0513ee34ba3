# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from dataclasses import dataclass
from typing import Any, Callable

from gridwalk.config import GridwalkConfig
from gridwalk.errors import ConfigurationError

from . import beams, crucible, dish, pipes


@dataclass(frozen=True)
class PuzzleSpec:
    name: str
    description: str
    parse: Callable[[str], Any]
    part_one: Callable[[Any, GridwalkConfig], int]
    part_two: Callable[[Any, GridwalkConfig], int]


PUZZLES: dict[str, PuzzleSpec] = {
    "pipes": PuzzleSpec("pipes", "Pipe loop length and enclosed area", pipes.parse, pipes.part_one, pipes.part_two),
    "beams": PuzzleSpec("beams", "Energized tiles from light beams", beams.parse, beams.part_one, beams.part_two),
    "crucible": PuzzleSpec(
        "crucible", "Minimal heat loss under straight-run limits", crucible.parse, crucible.part_one, crucible.part_two
    ),
    "dish": PuzzleSpec("dish", "North load after tilting and spin cycles", dish.parse, dish.part_one, dish.part_two),
}


def get_puzzle(name: str) -> PuzzleSpec:
    if name not in PUZZLES:
        raise ConfigurationError(f"Unknown puzzle '{name}', expected one of: {', '.join(sorted(PUZZLES))}")
    return PUZZLES[name]


def solve_puzzle(name: str, text: str, part: int, config: GridwalkConfig | None = None) -> int:
    """Parse text with the named puzzle's parser and compute the requested part."""
    if part not in (1, 2):
        raise ConfigurationError(f"Part must be 1 or 2, got {part}")
    if config is None:
        config = GridwalkConfig()

    puzzle = get_puzzle(name)
    model = puzzle.parse(text)
    if part == 1:
        return puzzle.part_one(model, config)
    return puzzle.part_two(model, config)


__all__ = ["PUZZLES", "PuzzleSpec", "get_puzzle", "solve_puzzle", "beams", "crucible", "dish", "pipes"]
