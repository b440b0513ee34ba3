import heapq
import itertools
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Hashable, Iterable

from gridwalk.errors import ConfigurationError, Unreachable
from gridwalk.models import Position, TraversalState

logger = logging.getLogger(__name__)

LegalMoves = Callable[[TraversalState], Iterable[TraversalState]]
EdgeCost = Callable[[Position, Position], int]
GoalPredicate = Callable[[TraversalState], bool]


class SearchStatus(Enum):
    REACHED = "REACHED"
    UNREACHABLE = "UNREACHABLE"


@dataclass
class SearchResult:
    """Outcome of a best-first search."""

    status: SearchStatus
    cost: int | None = None
    state: TraversalState | None = None
    expanded: int = 0

    @property
    def reached(self) -> bool:
        return self.status == SearchStatus.REACHED

    def unwrap(self) -> int:
        if self.cost is None:
            raise Unreachable(f"Goal not reachable after expanding {self.expanded} states")
        return self.cost


class SearchEngine:
    """
    Dijkstra-style search over TraversalStates.

    The engine knows nothing about puzzle rules: successors come from legal_moves,
    the price of entering a cell from edge_cost, and termination from is_goal.
    States are deduplicated on TraversalState.identity(run_bound), keeping the
    cheapest cost seen per identity.
    """

    def __init__(
        self,
        legal_moves: LegalMoves,
        edge_cost: EdgeCost,
        is_goal: GoalPredicate,
        run_bound: int | None = None,
    ):
        if run_bound is not None and run_bound < 0:
            raise ConfigurationError(f"run_bound must be non-negative, got {run_bound}")
        self.legal_moves = legal_moves
        self.edge_cost = edge_cost
        self.is_goal = is_goal
        self.run_bound = run_bound

    def search(self, seeds: Iterable[TraversalState]) -> SearchResult:
        # Counter breaks cost ties so heapq never compares states
        counter = itertools.count()
        queue: list[tuple[int, int, TraversalState]] = []
        for seed in seeds:
            heapq.heappush(queue, (seed.cost, next(counter), seed))

        best_known: dict[Hashable, int] = {}
        expanded = 0

        while queue:
            cost, _, state = heapq.heappop(queue)
            key = state.identity(self.run_bound)

            known = best_known.get(key)
            if known is not None and known <= cost:
                continue
            best_known[key] = cost
            expanded += 1

            if self.is_goal(state):
                logger.debug("Goal %s reached at cost %d after %d expansions", state.position, cost, expanded)
                return SearchResult(status=SearchStatus.REACHED, cost=cost, state=state, expanded=expanded)

            for successor in self.legal_moves(state):
                step_cost = self.edge_cost(state.position, successor.position)
                if step_cost < 0:
                    raise ConfigurationError(
                        f"Negative edge cost {step_cost} from {state.position} to {successor.position}"
                    )
                new_cost = cost + step_cost
                known = best_known.get(successor.identity(self.run_bound))
                if known is not None and known <= new_cost:
                    continue
                successor = replace(successor, cost=new_cost)
                heapq.heappush(queue, (new_cost, next(counter), successor))

        logger.debug("Frontier exhausted after %d expansions", expanded)
        return SearchResult(status=SearchStatus.UNREACHABLE, expanded=expanded)
