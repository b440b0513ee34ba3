# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.


class GridwalkError(Exception):
    """Base class for every error raised by gridwalk."""


class OutOfBounds(GridwalkError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"Position ({x},{y}) outside {width}x{height} grid")
        self.x = x
        self.y = y


class Unreachable(GridwalkError):
    """The search frontier emptied before any state satisfied the goal."""


class MalformedInput(GridwalkError, ValueError):
    pass


class ConfigurationError(GridwalkError, ValueError):
    pass
