import pytest

from gridwalk.config import GridwalkConfig
from gridwalk.errors import MalformedInput, Unreachable
from gridwalk.puzzles import crucible
from gridwalk.search import RunConstraints, SearchStatus

HEAT_MAP = """
2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533
"""

LONG_RUN = """
111111111111
999999999991
999999999991
999999999991
999999999991
"""


def test_parse_heat_map() -> None:
    grid = crucible.parse(HEAT_MAP)

    assert grid.width == 13
    assert grid.height == 13
    assert grid.get(0, 0) == 2
    assert grid.get(12, 12) == 3


def test_parse_rejects_non_digits() -> None:
    with pytest.raises(MalformedInput):
        crucible.parse("12\n3a")


def test_part_one() -> None:
    assert crucible.part_one(crucible.parse(HEAT_MAP), GridwalkConfig()) == 102


@pytest.mark.parametrize("text,expected", [(HEAT_MAP, 94), (LONG_RUN, 71)])
def test_part_two(text: str, expected: int) -> None:
    assert crucible.part_two(crucible.parse(text), GridwalkConfig()) == expected


def test_minimal_heat_loss_result() -> None:
    result = crucible.minimal_heat_loss(crucible.parse(HEAT_MAP), RunConstraints(min_run=0, max_run=3))

    assert result.status == SearchStatus.REACHED
    assert result.cost == 102
    assert result.state is not None
    assert result.state.position == (12, 12)
    assert result.expanded > 0


def test_min_run_longer_than_grid_is_unreachable() -> None:
    grid = crucible.parse("123\n456\n789")
    result = crucible.minimal_heat_loss(grid, RunConstraints(min_run=4, max_run=10))

    assert result.status == SearchStatus.UNREACHABLE
    with pytest.raises(Unreachable):
        crucible.part_two(grid, GridwalkConfig())
