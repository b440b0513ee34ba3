from pathlib import Path
from typing import Callable, TypeVar

from gridwalk.models import Grid

T = TypeVar("T")


def read_input(file_path: str | Path) -> str:
    with open(file_path, "r", encoding="utf-8") as f:
        return f.read()


def read_grid(file_path: str | Path, parse_cell: Callable[[str], T]) -> Grid[T]:
    return Grid.from_string(read_input(file_path), parse_cell)

