from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Iterator, List, Mapping, Optional, Tuple, TypeVar

from gridwalk.errors import MalformedInput, OutOfBounds

T = TypeVar("T")

# (x, y) with y growing downward
Position = Tuple[int, int]


class Direction(str, Enum):
    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"

    @property
    def delta(self) -> Tuple[int, int]:
        mapping = {
            Direction.UP: (0, -1),
            Direction.DOWN: (0, 1),
            Direction.LEFT: (-1, 0),
            Direction.RIGHT: (1, 0),
        }
        return mapping[self]

    @property
    def opposite(self) -> "Direction":
        opposites = {
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
            Direction.LEFT: Direction.RIGHT,
            Direction.RIGHT: Direction.LEFT,
        }
        return opposites[self]

    @property
    def turns(self) -> Tuple["Direction", "Direction"]:
        """The two directions perpendicular to this one."""
        if self in (Direction.UP, Direction.DOWN):
            return Direction.LEFT, Direction.RIGHT
        return Direction.UP, Direction.DOWN

    @classmethod
    def from_char(cls, char: str) -> "Direction":
        aliases = {"U": cls.UP, "D": cls.DOWN, "L": cls.LEFT, "R": cls.RIGHT}
        if char in aliases:
            return aliases[char]
        return cls(char)


@dataclass(frozen=True)
class Grid(Generic[T]):
    """Immutable rectangular surface of cells, addressed as (x, y)."""

    cells: Tuple[Tuple[T, ...], ...]

    def __post_init__(self) -> None:
        if not self.cells:
            return
        width = len(self.cells[0])
        for y, row in enumerate(self.cells):
            if len(row) != width:
                raise MalformedInput(f"Row {y} has {len(row)} cells, expected {width}")

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def height(self) -> int:
        return len(self.cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> T:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return self.cells[y][x]

    def __getitem__(self, pos: Position) -> T:
        return self.get(*pos)

    def step(self, pos: Position, direction: Direction) -> Optional[Position]:
        """Returns the position one step away, or None past the border."""
        dx, dy = direction.delta
        nx, ny = pos[0] + dx, pos[1] + dy
        if self.in_bounds(nx, ny):
            return (nx, ny)
        return None

    def neighbors(self, x: int, y: int) -> List[Tuple[Position, Direction]]:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        result = []
        for direction in Direction:
            target = self.step((x, y), direction)
            if target is not None:
                result.append((target, direction))
        return result

    def positions(self) -> Iterator[Position]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def find(self, value: T) -> Optional[Position]:
        for x, y in self.positions():
            if self.cells[y][x] == value:
                return (x, y)
        return None

    def replace(self, updates: Mapping[Position, T]) -> "Grid[T]":
        """Returns a copy with the given cells overwritten; self is untouched."""
        rows = [list(row) for row in self.cells]
        for (x, y), value in updates.items():
            if not self.in_bounds(x, y):
                raise OutOfBounds(x, y, self.width, self.height)
            rows[y][x] = value
        return Grid(tuple(tuple(row) for row in rows))

    def to_string(self, render: Callable[[T], str] = str) -> str:
        return "\n".join("".join(render(cell) for cell in row) for row in self.cells) + "\n"

    @classmethod
    def from_string(cls, text: str, parse_cell: Callable[[str], T]) -> "Grid[T]":
        lines = text.strip("\r\n").splitlines()
        if not lines:
            raise MalformedInput("Grid input is empty")

        rows = []
        for y, line in enumerate(lines):
            if not line.strip():
                raise MalformedInput(f"Blank line {y + 1} inside grid")
            row = []
            for x, char in enumerate(line):
                try:
                    row.append(parse_cell(char))
                except (KeyError, ValueError) as e:
                    raise MalformedInput(f"Invalid cell {char!r} at line {y + 1}, column {x + 1}") from e
            rows.append(tuple(row))
        return cls(tuple(rows))


@dataclass(frozen=True)
class TraversalState:
    """One agent mid-search: where it is, where it faces, how long it has gone straight."""

    position: Position
    facing: Direction
    straight_run: int = 0
    cost: int = 0

    def __post_init__(self) -> None:
        if self.straight_run < 0:
            raise ValueError(f"straight_run must be non-negative, got {self.straight_run}")
        if self.cost < 0:
            raise ValueError(f"cost must be non-negative, got {self.cost}")

    def identity(self, run_bound: Optional[int] = None) -> Tuple[Position, Direction, int]:
        run = self.straight_run if run_bound is None else min(self.straight_run, run_bound)
        return (self.position, self.facing, run)

    def moved(self, grid: Grid[T], direction: Direction) -> Optional["TraversalState"]:
        """Steps once towards direction; the run restarts at 1 on a turn."""
        target = grid.step(self.position, direction)
        if target is None:
            return None
        run = self.straight_run + 1 if direction == self.facing else 1
        return TraversalState(position=target, facing=direction, straight_run=run, cost=self.cost)
