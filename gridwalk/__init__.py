# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from .errors import ConfigurationError, GridwalkError, MalformedInput, OutOfBounds, Unreachable
from .models import Direction, Grid, Position, TraversalState
from .regions import RegionLabel, classify_regions, count_enclosed
from .simulator import CycleSimulator, Layout, MarkerState, SimulationResult, StateArena, simulate

__all__ = [
    "ConfigurationError",
    "GridwalkError",
    "MalformedInput",
    "OutOfBounds",
    "Unreachable",
    "Direction",
    "Grid",
    "Position",
    "TraversalState",
    "RegionLabel",
    "classify_regions",
    "count_enclosed",
    "CycleSimulator",
    "Layout",
    "MarkerState",
    "SimulationResult",
    "StateArena",
    "simulate",
]
