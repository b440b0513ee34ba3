# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Pipe maze: trace the loop through S, measure it, count the tiles it encloses."""

from collections import deque
from enum import Enum
from typing import FrozenSet

from gridwalk.config import GridwalkConfig
from gridwalk.errors import MalformedInput
from gridwalk.models import Direction, Grid, Position
from gridwalk.regions import count_enclosed


class Pipe(str, Enum):
    VERTICAL = "|"
    HORIZONTAL = "-"
    NORTH_EAST = "L"
    NORTH_WEST = "J"
    SOUTH_WEST = "7"
    SOUTH_EAST = "F"
    GROUND = "."
    START = "S"

    @property
    def openings(self) -> FrozenSet[Direction]:
        mapping = {
            Pipe.VERTICAL: {Direction.UP, Direction.DOWN},
            Pipe.HORIZONTAL: {Direction.LEFT, Direction.RIGHT},
            Pipe.NORTH_EAST: {Direction.UP, Direction.RIGHT},
            Pipe.NORTH_WEST: {Direction.UP, Direction.LEFT},
            Pipe.SOUTH_WEST: {Direction.DOWN, Direction.LEFT},
            Pipe.SOUTH_EAST: {Direction.DOWN, Direction.RIGHT},
            Pipe.GROUND: set(),
            Pipe.START: set(Direction),
        }
        return frozenset(mapping[self])


def parse(text: str) -> Grid[Pipe]:
    grid = Grid.from_string(text, Pipe)
    find_start(grid)
    return grid


def find_start(grid: Grid[Pipe]) -> Position:
    start = grid.find(Pipe.START)
    if start is None:
        raise MalformedInput("No start tile 'S' in pipe map")
    return start


def adjacent_pipes(grid: Grid[Pipe], pos: Position) -> list[Position]:
    """Neighbours joined to pos: both pipes must open towards each other."""
    pipe = grid[pos]
    result = []
    for target, direction in grid.neighbors(*pos):
        if direction in pipe.openings and direction.opposite in grid[target].openings:
            result.append(target)
    return result


def linked(grid: Grid[Pipe], a: Position, b: Position) -> bool:
    return b in adjacent_pipes(grid, a)


def loop_distances(grid: Grid[Pipe]) -> dict[Position, int]:
    """Breadth-first distance from S to every pipe connected to it."""
    start = find_start(grid)
    distances = {start: 0}
    to_visit = deque([start])
    while to_visit:
        pos = to_visit.popleft()
        for target in adjacent_pipes(grid, pos):
            if target not in distances:
                distances[target] = distances[pos] + 1
                to_visit.append(target)
    return distances


def part_one(grid: Grid[Pipe], config: GridwalkConfig) -> int:
    return max(loop_distances(grid).values())


def part_two(grid: Grid[Pipe], config: GridwalkConfig) -> int:
    loop = set(loop_distances(grid))
    return count_enclosed(grid, loop, lambda a, b: linked(grid, a, b))
