# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Parabolic reflector dish: rounded rocks roll until they hit a wall, a cube rock or another rock."""

from gridwalk.config import GridwalkConfig
from gridwalk.models import Direction, Grid
from gridwalk.simulator import MarkerState, simulate

ROUNDED = "O"
CUBE = "#"
EMPTY = "."

SPIN_ORDER = (Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT)


def _parse_tile(char: str) -> str:
    if char not in (ROUNDED, CUBE, EMPTY):
        raise ValueError(f"Unknown tile: {char}")
    return char


def parse(text: str) -> MarkerState:
    return MarkerState.from_grid(Grid.from_string(text, _parse_tile), marker=ROUNDED, obstacle=CUBE)


def tilt(state: MarkerState, direction: Direction) -> MarkerState:
    dx, dy = direction.delta
    # Rocks nearest the wall being tilted towards settle first
    ordered = sorted(state.markers, key=lambda pos: -(pos[0] * dx + pos[1] * dy))

    settled: set[tuple[int, int]] = set()
    for x, y in ordered:
        while state.layout.is_free((x + dx, y + dy)) and (x + dx, y + dy) not in settled:
            x, y = x + dx, y + dy
        settled.add((x, y))
    return state.with_markers(settled)


def spin_cycle(state: MarkerState) -> MarkerState:
    for direction in SPIN_ORDER:
        state = tilt(state, direction)
    return state


def north_load(state: MarkerState) -> int:
    return sum(state.layout.height - y for _, y in state.markers)


def part_one(state: MarkerState, config: GridwalkConfig) -> int:
    return north_load(tilt(state, Direction.UP))


def part_two(state: MarkerState, config: GridwalkConfig) -> int:
    tilted: dict[tuple[MarkerState, Direction], MarkerState] = {}

    def cached_spin(current: MarkerState) -> MarkerState:
        for direction in SPIN_ORDER:
            key = (current, direction)
            if key not in tilted:
                tilted[key] = tilt(current, direction)
            current = tilted[key]
        return current

    return north_load(simulate(cached_spin, state, config.dish.spin_cycles))
