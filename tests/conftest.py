"""Shared fixtures."""

import logging
from pathlib import Path

import numpy as np
import pytest

from sudoku_backtrack.grid import to_grid

CORPUS_PATH = Path(__file__).resolve().parent.parent / "data" / "puzzles.txt"

PUZZLE_4X4 = [
    [1, 0, 0, 4],
    [0, 4, 1, 0],
    [0, 1, 4, 0],
    [4, 0, 0, 1],
]

SOLUTION_4X4 = [
    [1, 2, 3, 4],
    [3, 4, 1, 2],
    [2, 1, 4, 3],
    [4, 3, 2, 1],
]

PUZZLE_9X9 = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

SOLUTION_9X9 = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by get_logger so each test starts clean."""
    yield
    logger = logging.getLogger("sudoku_backtrack")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def puzzle_4x4() -> np.ndarray:
    return to_grid(PUZZLE_4X4)


@pytest.fixture
def solution_4x4() -> np.ndarray:
    return to_grid(SOLUTION_4X4)


@pytest.fixture
def puzzle_9x9() -> np.ndarray:
    return to_grid(PUZZLE_9X9)


@pytest.fixture
def solution_9x9() -> np.ndarray:
    return to_grid(SOLUTION_9X9)
