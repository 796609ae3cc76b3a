"""
Pytest configuration and shared fixtures for the lifeboard test suite.
"""

import sys
import tempfile
from pathlib import Path

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'lifeboard' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from lifeboard.core.board import Board  # noqa: E402

GLIDER = [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)]


def _make_board(width, height, alive=()):
    board = Board(width, height, randomize=False)
    for row, col in alive:
        board.set_cell_manually(row * width + col)
    return board


def _advance(board, generations=1):
    for _ in range(generations):
        board.compute_neighbor_counts()
        board.advance_generation()
    return board


@pytest.fixture
def make_board():
    """Factory: make_board(width, height, alive=[(row, col), ...]) on a dead board."""
    return _make_board


@pytest.fixture
def advance():
    """Helper: advance(board, generations=1) runs count + advance per generation."""
    return _advance


@pytest.fixture
def empty_board():
    """An 8x8 board with every cell dead."""
    return Board(8, 8, randomize=False)


@pytest.fixture
def glider_board():
    """An 8x8 board holding a single glider in its top-left corner."""
    return _make_board(8, 8, GLIDER)


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def valid_config_dict():
    """
    Fixture providing a complete valid configuration dictionary.
    """
    return {
        "board": {"width": 12, "height": 7, "randomize": False, "seed": 42},
        "timing": {"tick_interval_ms": 250},
        "logging": {"level": "debug"},
    }


@pytest.fixture
def temp_config_yaml_file(temp_yaml_file, valid_config_dict):
    """
    Fixture that creates a temporary YAML file with valid configuration.

    Yields:
        Path: Path to the temporary YAML file with valid configuration
    """
    with open(temp_yaml_file, "w", encoding="utf-8") as f:
        yaml.dump(valid_config_dict, f)

    yield temp_yaml_file
