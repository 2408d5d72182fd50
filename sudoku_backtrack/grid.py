import math
from typing import Sequence

import numpy as np

# An N x N integer board, row-major, 0 marks an empty cell.
Grid = np.ndarray
Cell = tuple[int, int]


class GridConfigurationError(ValueError):
    """Raised when a grid or size cannot be handed to the solver."""


def box_size(n: int) -> int:
    """Validate that n is a supported Sudoku order and return box size."""
    if n <= 0:
        raise GridConfigurationError(f"n must be positive, got {n}")
    box = int(math.isqrt(n))
    if box * box != n:
        raise GridConfigurationError(f"n must be a perfect square (e.g. 4, 9, 16); got {n}")
    return box


def box_index(row: int, col: int, box: int) -> Cell:
    """Return the (band, stack) index of the box holding (row, col)."""
    return row // box, col // box


def box_origin(row: int, col: int, box: int) -> Cell:
    """Return the top-left cell of the box holding (row, col)."""
    band, stack = box_index(row, col, box)
    return band * box, stack * box


def to_grid(rows: Sequence[Sequence[int]]) -> Grid:
    """Copy a nested sequence of ints into a fresh int64 grid."""
    return np.array(rows, dtype=np.int64)


def validate_grid(grid: Grid) -> int:
    """
    Check that a grid can be searched and return its box size.

    Args:
        grid: Candidate puzzle, an N x N integer array.

    Returns:
        The side length of one box (sqrt(N)).

    Raises:
        GridConfigurationError: If the grid is not a square integer array,
            N is not a perfect square, or a value lies outside [0, N].
    """
    if not isinstance(grid, np.ndarray):
        raise GridConfigurationError(
            f"grid must be a numpy array (see to_grid); got {type(grid).__name__}"
        )
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
        raise GridConfigurationError(f"grid must be square; got shape={grid.shape}")
    if not np.issubdtype(grid.dtype, np.integer):
        raise GridConfigurationError(f"grid must hold integers; got dtype={grid.dtype}")

    n = int(grid.shape[0])
    box = box_size(n)

    bad = np.argwhere((grid < 0) | (grid > n))
    if len(bad):
        r, c = (int(i) for i in bad[0])
        raise GridConfigurationError(
            f"grid contains out-of-range value {grid[r, c]} at ({r}, {c}) for n={n}"
        )
    return box


def make_base_solution(n: int) -> Grid:
    """Create a canonical valid n×n Sudoku solution for n=k^2.

    Uses the standard pattern construction:
      value(r,c) = (r*k + r//k + c) mod n + 1
    which guarantees each row/col is a permutation of 1..n and each k×k box is valid.
    """
    k = box_size(n)
    grid = np.empty((n, n), dtype=np.int64)
    for r in range(n):
        for c in range(n):
            grid[r, c] = (r * k + (r // k) + c) % n + 1
    return grid
