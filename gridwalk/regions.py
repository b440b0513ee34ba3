# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from collections import deque
from enum import Enum
from typing import Any, Callable, Collection

from gridwalk.errors import OutOfBounds
from gridwalk.models import Direction, Grid, Position


class RegionLabel(Enum):
    BOUNDARY = "BOUNDARY"
    ENCLOSED = "ENCLOSED"
    OUTSIDE = "OUTSIDE"
    UNVISITED = "UNVISITED"


def _overlay_pos(pos: Position) -> Position:
    return (pos[0] * 2 + 1, pos[1] * 2 + 1)


def classify_regions(
    grid: Grid[Any],
    loop: Collection[Position],
    connected: Callable[[Position, Position], bool],
) -> dict[Position, RegionLabel]:
    """
    Labels every cell as BOUNDARY (on the loop), OUTSIDE or ENCLOSED.

    The flood fill runs on an overlay at doubled resolution: cell (x, y) maps to
    (2x+1, 2y+1) and the even rows and columns are the gaps between cells. A gap
    is only blocked where connected() joins the two loop cells on either side,
    so two loop segments that merely touch still leave room to squeeze through.
    """
    width = grid.width * 2 + 1
    height = grid.height * 2 + 1
    overlay = [[RegionLabel.UNVISITED] * width for _ in range(height)]

    loop_cells = set(loop)
    for x, y in loop_cells:
        if not grid.in_bounds(x, y):
            raise OutOfBounds(x, y, grid.width, grid.height)

    for pos in loop_cells:
        ox, oy = _overlay_pos(pos)
        overlay[oy][ox] = RegionLabel.BOUNDARY
        for direction in (Direction.RIGHT, Direction.DOWN):
            other = grid.step(pos, direction)
            if other is None or other not in loop_cells:
                continue
            if connected(pos, other):
                dx, dy = direction.delta
                overlay[oy + dy][ox + dx] = RegionLabel.BOUNDARY

    overlay[0][0] = RegionLabel.OUTSIDE
    to_visit = deque([(0, 0)])
    while to_visit:
        cx, cy = to_visit.popleft()
        for direction in Direction:
            dx, dy = direction.delta
            nx, ny = cx + dx, cy + dy
            if 0 <= nx < width and 0 <= ny < height and overlay[ny][nx] == RegionLabel.UNVISITED:
                overlay[ny][nx] = RegionLabel.OUTSIDE
                to_visit.append((nx, ny))

    labels = {}
    for pos in grid.positions():
        if pos in loop_cells:
            labels[pos] = RegionLabel.BOUNDARY
            continue
        ox, oy = _overlay_pos(pos)
        if overlay[oy][ox] == RegionLabel.OUTSIDE:
            labels[pos] = RegionLabel.OUTSIDE
        else:
            labels[pos] = RegionLabel.ENCLOSED
    return labels


def count_enclosed(
    grid: Grid[Any],
    loop: Collection[Position],
    connected: Callable[[Position, Position], bool],
) -> int:
    labels = classify_regions(grid, loop, connected)
    return sum(1 for label in labels.values() if label == RegionLabel.ENCLOSED)
