# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Crucible routing over a heat-loss map with straight-run limits."""

from gridwalk.config import GridwalkConfig
from gridwalk.models import Direction, Grid, TraversalState
from gridwalk.search import RunConstraints, SearchResult, create_run_engine


def _parse_digit(char: str) -> int:
    if not char.isdigit():
        raise ValueError(f"Heat loss must be a digit, got {char}")
    return int(char)


def parse(text: str) -> Grid[int]:
    return Grid.from_string(text, _parse_digit)


def minimal_heat_loss(grid: Grid[int], constraints: RunConstraints) -> SearchResult:
    """Cheapest route from the top-left to the bottom-right block, starting either right or down."""
    target = (grid.width - 1, grid.height - 1)
    engine = create_run_engine(grid, constraints, cost_of=lambda heat: heat, target=target)
    seeds = [
        TraversalState(position=(0, 0), facing=Direction.RIGHT),
        TraversalState(position=(0, 0), facing=Direction.DOWN),
    ]
    return engine.search(seeds)


def part_one(grid: Grid[int], config: GridwalkConfig) -> int:
    return minimal_heat_loss(grid, config.crucible.part_one).unwrap()


def part_two(grid: Grid[int], config: GridwalkConfig) -> int:
    return minimal_heat_loss(grid, config.crucible.part_two).unwrap()
