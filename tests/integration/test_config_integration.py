# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Integration tests for configuration loading with the shipped defaults."""

import pytest

from gridwalk.config import DEFAULT_CONFIG_FILE, load_config
from gridwalk.search import RunConstraints

pytestmark = pytest.mark.integration


def test_default_config_file_exists() -> None:
    assert DEFAULT_CONFIG_FILE.exists()


def test_load_default_config() -> None:
    """Test that load_config reads config/puzzles.yaml when no path is given."""
    config = load_config()

    assert config.crucible.part_one == RunConstraints(min_run=0, max_run=3)
    assert config.crucible.part_two == RunConstraints(min_run=4, max_run=10)
    assert config.dish.spin_cycles == 1_000_000_000
    assert config.beams.n_jobs == -1
