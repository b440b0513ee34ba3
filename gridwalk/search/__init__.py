# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from .engine import SearchEngine, SearchResult, SearchStatus
from .moves import (
    RunConstraints,
    cell_cost,
    create_run_engine,
    reaches,
    run_moves,
    unit_cost,
    unit_moves,
)

__all__ = [
    "SearchEngine",
    "SearchResult",
    "SearchStatus",
    "RunConstraints",
    "cell_cost",
    "create_run_engine",
    "reaches",
    "run_moves",
    "unit_cost",
    "unit_moves",
]
