from typing import Any, Callable, TypeVar

from hypothesis import given, settings
from hypothesis import strategies as st

from gridwalk.models import Direction, Grid
from gridwalk.puzzles import dish
from gridwalk.simulator import CycleSimulator, Layout, MarkerState, simulate

S = TypeVar("S")

TRACK = Layout(width=10, height=1)


def along_track(state: MarkerState) -> MarkerState:
    """Three steps of lead-in (x = 0, 1, 2), then a loop of seven over x = 3..9."""
    ((x, y),) = state.markers
    if x < 3:
        return state.with_markers({(x + 1, y)})
    return state.with_markers({(3 + (x - 3 + 1) % 7, y)})


def brute_force(step: Callable[[S], S], initial: S, n: int) -> S:
    state = initial
    for _ in range(n):
        state = step(state)
    return state


@given(st.integers(min_value=0, max_value=200))
def test_cycle_with_offset_matches_brute_force(n: int) -> None:
    start = MarkerState(markers=frozenset({(0, 0)}), layout=TRACK)

    result = CycleSimulator(along_track).run(start, n)

    assert result.state == brute_force(along_track, start, n)
    if n >= 10:
        assert result.cycle_start == 3
        assert result.cycle_length == 7


@st.composite
def platform_strategy(draw: Any) -> MarkerState:
    width = draw(st.integers(min_value=1, max_value=5))
    height = draw(st.integers(min_value=1, max_value=5))
    cell = st.sampled_from(".#O")
    grid = Grid(tuple(tuple(draw(cell) for _ in range(width)) for _ in range(height)))
    return MarkerState.from_grid(grid)


@settings(max_examples=50, deadline=None)
@given(platform_strategy(), st.integers(min_value=0, max_value=40))
def test_spin_cycles_match_brute_force(platform: MarkerState, n: int) -> None:
    assert simulate(dish.spin_cycle, platform, n) == brute_force(dish.spin_cycle, platform, n)


@given(platform_strategy(), st.sampled_from(Direction))
def test_tilt_is_idempotent(platform: MarkerState, direction: Direction) -> None:
    once = dish.tilt(platform, direction)
    assert dish.tilt(once, direction) == once
    assert len(once.markers) == len(platform.markers)
    assert once.markers.isdisjoint(platform.layout.obstacles)
