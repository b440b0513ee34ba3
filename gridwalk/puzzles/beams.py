# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Light beams bouncing through mirrors and splitters."""

from collections import deque

from gridwalk.config import GridwalkConfig
from gridwalk.models import Direction, Grid, Position, TraversalState
from gridwalk.parallel import map_reduce

TILES = {".", "/", "\\", "|", "-"}


def _parse_tile(char: str) -> str:
    if char not in TILES:
        raise ValueError(f"Unknown tile: {char}")
    return char


def parse(text: str) -> Grid[str]:
    return Grid.from_string(text, _parse_tile)


def deflect(tile: str, facing: Direction) -> tuple[Direction, ...]:
    """Directions a beam leaves a tile in after entering it facing `facing`."""
    if tile == "/":
        mirrored = {
            Direction.UP: Direction.RIGHT,
            Direction.DOWN: Direction.LEFT,
            Direction.LEFT: Direction.DOWN,
            Direction.RIGHT: Direction.UP,
        }
        return (mirrored[facing],)
    if tile == "\\":
        mirrored = {
            Direction.UP: Direction.LEFT,
            Direction.DOWN: Direction.RIGHT,
            Direction.LEFT: Direction.UP,
            Direction.RIGHT: Direction.DOWN,
        }
        return (mirrored[facing],)
    if tile == "|" and facing in (Direction.LEFT, Direction.RIGHT):
        return (Direction.UP, Direction.DOWN)
    if tile == "-" and facing in (Direction.UP, Direction.DOWN):
        return (Direction.LEFT, Direction.RIGHT)
    return (facing,)


def energize(grid: Grid[str], entry: TraversalState) -> set[Position]:
    """Cells crossed by the beam entering at `entry`, including the entry cell."""
    energized = {entry.position}
    visited: set[tuple[Position, Direction]] = set()
    to_visit = deque([entry])

    while to_visit:
        beam = to_visit.popleft()
        key = (beam.position, beam.facing)
        if key in visited:
            continue
        visited.add(key)

        for direction in deflect(grid[beam.position], beam.facing):
            target = grid.step(beam.position, direction)
            if target is None:
                continue
            energized.add(target)
            to_visit.append(TraversalState(position=target, facing=direction))

    return energized


def border_entries(grid: Grid[str]) -> list[TraversalState]:
    entries = []
    for x in range(grid.width):
        entries.append(TraversalState(position=(x, 0), facing=Direction.DOWN))
        entries.append(TraversalState(position=(x, grid.height - 1), facing=Direction.UP))
    for y in range(grid.height):
        entries.append(TraversalState(position=(0, y), facing=Direction.RIGHT))
        entries.append(TraversalState(position=(grid.width - 1, y), facing=Direction.LEFT))
    return entries


def part_one(grid: Grid[str], config: GridwalkConfig) -> int:
    return len(energize(grid, TraversalState(position=(0, 0), facing=Direction.RIGHT)))


def part_two(grid: Grid[str], config: GridwalkConfig) -> int:
    return map_reduce(
        lambda entry: len(energize(grid, entry)),
        border_entries(grid),
        max,
        n_jobs=config.beams.n_jobs,
    )
