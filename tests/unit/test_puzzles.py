import pytest

from gridwalk.config import DishConfig, GridwalkConfig
from gridwalk.errors import ConfigurationError
from gridwalk.puzzles import PUZZLES, get_puzzle, solve_puzzle


def test_registry_names() -> None:
    assert set(PUZZLES) == {"pipes", "beams", "crucible", "dish"}
    assert get_puzzle("dish").name == "dish"


def test_unknown_puzzle() -> None:
    with pytest.raises(ConfigurationError):
        get_puzzle("snowverload")


def test_solve_puzzle_parts() -> None:
    text = ".....\n.S-7.\n.|.|.\n.L-J.\n....."

    assert solve_puzzle("pipes", text, 1) == 4
    assert solve_puzzle("pipes", text, 2) == 1


def test_solve_puzzle_uses_config() -> None:
    text = "O.\n.."
    config = GridwalkConfig(dish=DishConfig(spin_cycles=1))

    # One spin ends with the rock in the bottom-right corner
    assert solve_puzzle("dish", text, 2, config) == 1


def test_solve_puzzle_rejects_bad_part() -> None:
    with pytest.raises(ConfigurationError):
        solve_puzzle("pipes", "S", 3)
