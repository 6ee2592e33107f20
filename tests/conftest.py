from pathlib import Path

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")

from game_of_life import Board  # noqa: E402


BOARDS_DIR = Path(__file__).parent / "boards"


@pytest.fixture
def boards_dir() -> Path:
    return BOARDS_DIR


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(0)


@pytest.fixture
def make_board():
    def _make(grid):
        board = Board()
        board.set_grid(grid)
        return board
    return _make
