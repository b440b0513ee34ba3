# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from dataclasses import dataclass
from typing import Callable, TypeVar

from gridwalk.errors import ConfigurationError
from gridwalk.models import Grid, Position, TraversalState
from gridwalk.search.engine import EdgeCost, GoalPredicate, LegalMoves, SearchEngine

T = TypeVar("T")


@dataclass(frozen=True)
class RunConstraints:
    """
    Straight-run limits for an agent that must keep going before it may turn.

    min_run: moves in the current facing required before a turn (or a stop).
    max_run: moves in the current facing after which a turn is forced.
    """

    min_run: int = 0
    max_run: int = 3

    def __post_init__(self) -> None:
        if self.min_run < 0:
            raise ConfigurationError(f"min_run must be non-negative, got {self.min_run}")
        if self.max_run < 1:
            raise ConfigurationError(f"max_run must be at least 1, got {self.max_run}")
        if self.min_run > self.max_run:
            raise ConfigurationError(f"min_run ({self.min_run}) exceeds max_run ({self.max_run})")


def run_moves(grid: Grid[T], constraints: RunConstraints) -> LegalMoves:
    """Continue straight while under max_run; turn left or right once min_run is met. Never reverse."""

    def legal_moves(state: TraversalState) -> list[TraversalState]:
        moves = []
        if state.straight_run < constraints.max_run:
            ahead = state.moved(grid, state.facing)
            if ahead is not None:
                moves.append(ahead)
        if state.straight_run >= constraints.min_run:
            for direction in state.facing.turns:
                turned = state.moved(grid, direction)
                if turned is not None:
                    moves.append(turned)
        return moves

    return legal_moves


def unit_moves(grid: Grid[T], passable: Callable[[T], bool]) -> LegalMoves:
    """Unconstrained four-way moves onto passable cells."""

    def legal_moves(state: TraversalState) -> list[TraversalState]:
        x, y = state.position
        return [
            TraversalState(position=target, facing=direction)
            for target, direction in grid.neighbors(x, y)
            if passable(grid[target])
        ]

    return legal_moves


def unit_cost(source: Position, target: Position) -> int:
    return 1


def cell_cost(grid: Grid[T], cost_of: Callable[[T], int]) -> EdgeCost:
    """Entering a cell costs whatever that cell holds."""

    def edge_cost(source: Position, target: Position) -> int:
        return cost_of(grid[target])

    return edge_cost


def reaches(target: Position, constraints: RunConstraints | None = None) -> GoalPredicate:
    """Goal on arrival at target; with constraints, only after at least min_run straight moves."""

    def is_goal(state: TraversalState) -> bool:
        if state.position != target:
            return False
        return constraints is None or state.straight_run >= constraints.min_run

    return is_goal


def create_run_engine(
    grid: Grid[T],
    constraints: RunConstraints,
    cost_of: Callable[[T], int],
    target: Position,
) -> SearchEngine:
    """Engine for an agent bounded by straight-run limits paying cost_of(cell) on entry."""
    return SearchEngine(
        legal_moves=run_moves(grid, constraints),
        edge_cost=cell_cost(grid, cost_of),
        is_goal=reaches(target, constraints),
        run_bound=constraints.max_run,
    )
