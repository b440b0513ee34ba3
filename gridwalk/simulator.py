# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""
Repeated application of a deterministic whole-grid step with cycle skipping.

A step function must be pure: the next state may depend only on the current
one, and states must compare structurally. Once a state repeats, the rest of
the run is read off the cycle instead of being simulated.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, Generic, Hashable, Iterable, TypeVar

from gridwalk.errors import ConfigurationError
from gridwalk.models import Grid, Position

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Hashable)


@dataclass(frozen=True)
class Layout:
    """Static part of a whole-grid state, shared by every state of a simulation."""

    width: int
    height: int
    obstacles: FrozenSet[Position] = frozenset()

    def is_free(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height and pos not in self.obstacles


@dataclass(frozen=True)
class MarkerState:
    """Which cells hold a movable marker. Equality ignores the shared layout."""

    markers: FrozenSet[Position]
    layout: Layout = field(compare=False, repr=False)

    def with_markers(self, markers: Iterable[Position]) -> "MarkerState":
        return MarkerState(markers=frozenset(markers), layout=self.layout)

    def to_string(self, marker: str = "O", obstacle: str = "#", empty: str = ".") -> str:
        lines = []
        for y in range(self.layout.height):
            row = ""
            for x in range(self.layout.width):
                if (x, y) in self.markers:
                    row += marker
                elif (x, y) in self.layout.obstacles:
                    row += obstacle
                else:
                    row += empty
            lines.append(row)
        return "\n".join(lines) + "\n"

    @classmethod
    def from_grid(cls, grid: Grid[str], marker: str = "O", obstacle: str = "#") -> "MarkerState":
        markers = set()
        obstacles = set()
        for x, y in grid.positions():
            cell = grid.get(x, y)
            if cell == marker:
                markers.add((x, y))
            elif cell == obstacle:
                obstacles.add((x, y))
        layout = Layout(width=grid.width, height=grid.height, obstacles=frozenset(obstacles))
        return cls(markers=frozenset(markers), layout=layout)


class StateArena(Generic[S]):
    """Interns structurally equal states to small integer ids."""

    def __init__(self) -> None:
        self._ids: dict[S, int] = {}
        self._states: list[S] = []

    def intern(self, state: S) -> int:
        state_id = self._ids.get(state)
        if state_id is None:
            state_id = len(self._states)
            self._ids[state] = state_id
            self._states.append(state)
        return state_id

    def __contains__(self, state: object) -> bool:
        return state in self._ids

    def __getitem__(self, state_id: int) -> S:
        return self._states[state_id]

    def __len__(self) -> int:
        return len(self._states)


@dataclass
class SimulationResult(Generic[S]):
    state: S
    steps_simulated: int
    cycle_start: int | None = None
    cycle_length: int | None = None

    @property
    def cycle_found(self) -> bool:
        return self.cycle_length is not None


class CycleSimulator(Generic[S]):
    def __init__(self, step: Callable[[S], S]):
        self.step = step

    def run(self, initial: S, n: int) -> SimulationResult[S]:
        """
        Returns the state after applying step n times.

        Index 0 is the initial state. When step produces a state first seen at
        index first_seen, states first_seen..i form the cycle and the state for
        n is cycle[(n - first_seen) % cycle_length].
        """
        if n < 0:
            raise ConfigurationError(f"Step count must be non-negative, got {n}")

        arena: StateArena[S] = StateArena()
        # state id -> index at which the state was first produced
        memo: dict[int, int] = {arena.intern(initial): 0}
        history: list[int] = [0]

        current = initial
        for i in range(n):
            current = self.step(current)
            state_id = arena.intern(current)
            first_seen = memo.get(state_id)
            if first_seen is not None:
                cycle = history[first_seen:]
                cycle_length = len(cycle)
                logger.debug("Cycle of length %d found at step %d (first seen at %d)", cycle_length, i + 1, first_seen)
                final = arena[cycle[(n - first_seen) % cycle_length]]
                return SimulationResult(
                    state=final,
                    steps_simulated=i + 1,
                    cycle_start=first_seen,
                    cycle_length=cycle_length,
                )
            memo[state_id] = i + 1
            history.append(state_id)

        return SimulationResult(state=current, steps_simulated=n)


def simulate(step: Callable[[S], S], initial: S, n: int) -> S:
    return CycleSimulator(step).run(initial, n).state
