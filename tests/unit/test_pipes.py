import pytest

from gridwalk.config import GridwalkConfig
from gridwalk.errors import MalformedInput
from gridwalk.puzzles import pipes
from gridwalk.puzzles.pipes import Pipe

SIMPLE_LOOP = """
.....
.S-7.
.|.|.
.L-J.
.....
"""

COMPLEX_LOOP = """
..F7.
.FJ|.
SJ.L7
|F--J
LJ...
"""

ENCLOSED_FOUR = """
...........
.S-------7.
.|F-----7|.
.||.....||.
.||.....||.
.|L-7.F-J|.
.|..|.|..|.
.L--J.L--J.
...........
"""

SQUEEZE = """
..........
.S------7.
.|F----7|.
.||....||.
.||....||.
.|L-7F-J|.
.|..||..|.
.L--JL--J.
..........
"""

ENCLOSED_EIGHT = """
.F----7F7F7F7F-7....
.|F--7||||||||FJ....
.||.FJ||||||||L7....
FJL7L7LJLJ||LJ.L-7..
L--J.L7...LJS7F-7L7.
....F-J..F7FJ|L7L7L7
....L7.F7||L7|.L7L7|
.....|FJLJ|FJ|F7|.LJ
....FJL-7.||.||||...
....L---J.LJ.LJLJ...
"""


def test_parse_pipes() -> None:
    grid = pipes.parse(SIMPLE_LOOP)

    assert grid.width == 5
    assert grid.height == 5
    assert grid.get(1, 1) == Pipe.START
    assert grid.get(3, 1) == Pipe.SOUTH_WEST
    assert pipes.find_start(grid) == (1, 1)


def test_parse_rejects_unknown_tile() -> None:
    with pytest.raises(MalformedInput):
        pipes.parse(".S.\n.X.")


def test_parse_requires_start() -> None:
    with pytest.raises(MalformedInput):
        pipes.parse("F7\nLJ")


def test_adjacent_pipes_need_both_openings() -> None:
    grid = pipes.parse(COMPLEX_LOOP)

    # S at (0, 2): J to the right and | below both point back, '.' above does not
    assert sorted(pipes.adjacent_pipes(grid, (0, 2))) == [(0, 3), (1, 2)]
    assert pipes.linked(grid, (0, 2), (1, 2))
    assert not pipes.linked(grid, (0, 2), (0, 1))


def test_loop_distances() -> None:
    grid = pipes.parse(SIMPLE_LOOP)
    distances = pipes.loop_distances(grid)

    assert len(distances) == 8
    assert distances[(1, 1)] == 0
    assert distances[(3, 3)] == 4


@pytest.mark.parametrize(
    "text,expected",
    [
        (SIMPLE_LOOP, 4),
        (COMPLEX_LOOP, 8),
    ],
)
def test_part_one(text: str, expected: int) -> None:
    assert pipes.part_one(pipes.parse(text), GridwalkConfig()) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        (SIMPLE_LOOP, 1),
        (ENCLOSED_FOUR, 4),
        (SQUEEZE, 4),
        (ENCLOSED_EIGHT, 8),
    ],
)
def test_part_two(text: str, expected: int) -> None:
    assert pipes.part_two(pipes.parse(text), GridwalkConfig()) == expected
