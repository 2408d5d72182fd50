"""
Backtracking Sudoku solver.

- Empty-cell selection (first blank in row-major order)
- Candidate validity check with self-exclusion
- Depth-first search with an optional per-placement observation hook
- Independent full-grid verifier
"""

import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np

from .grid import Cell, Grid, box_origin, box_size, validate_grid

logger = logging.getLogger(__name__)

# Called after every tentative placement with (grid, cell, value).
AssignHook = Callable[[Grid, Cell, int], None]


class SearchBudgetExceeded(RuntimeError):
    """Raised when a search performs more placements than it was allowed."""

    def __init__(self, max_steps: int):
        super().__init__(f"search exceeded {max_steps} placements")
        self.max_steps = max_steps


@dataclass(frozen=True)
class Violation:
    """A cell whose value breaks a row, column or box constraint."""

    row: int
    col: int
    value: int

    def __str__(self) -> str:
        if self.value == 0:
            return f"Empty cell at ({self.row}, {self.col})"
        return f"Constraint violated at ({self.row}, {self.col}): {self.value}"


class SolutionMismatchError(AssertionError):
    """A grid reported as solved failed re-verification."""

    def __init__(self, violation: Violation):
        super().__init__(str(violation))
        self.violation = violation


@dataclass
class SearchStats:
    """Counters collected during one or more searches."""

    assignments: int = 0
    backtracks: int = 0
    max_depth: int = 0


def find_empty_cell(grid: Grid) -> Cell | None:
    """Return the first empty cell in row-major order, or None if the grid is full."""
    empties = np.argwhere(grid == 0)
    if len(empties) == 0:
        return None
    row, col = empties[0]
    return int(row), int(col)


def is_valid(grid: Grid, value: int, row: int, col: int) -> bool:
    """
    Check whether `value` may sit at (row, col).

    The cell's own occupant is ignored, so the same check serves both an
    empty cell during search and a filled cell during verification.

    Args:
        grid: N x N board.
        value: Digit to test, 1..N.
        row: Target row.
        col: Target column.

    Returns:
        True if no other cell in the row, column or box holds `value`.
    """
    line = grid[row, :] == value
    line[col] = False
    if line.any():
        return False

    line = grid[:, col] == value
    line[row] = False
    if line.any():
        return False

    box = box_size(int(grid.shape[0]))
    r0, c0 = box_origin(row, col, box)
    block = grid[r0:r0 + box, c0:c0 + box] == value
    block[row - r0, col - c0] = False
    return not block.any()


def find_violation(grid: Grid, *, allow_empty: bool = False) -> Violation | None:
    """
    Scan the grid in row-major order for the first broken constraint.

    Args:
        grid: N x N board.
        allow_empty: Skip blank cells instead of reporting them.

    Returns:
        The first offending cell, or None if every cell passes.
    """
    n = int(grid.shape[0])
    for row in range(n):
        for col in range(n):
            value = int(grid[row, col])
            if value == 0:
                if allow_empty:
                    continue
                return Violation(row, col, value)
            if not is_valid(grid, value, row, col):
                return Violation(row, col, value)
    return None


def verify(grid: Grid) -> bool:
    """
    Return True if every cell is filled and satisfies its constraints.

    A blank cell counts as a violation, so a grid with even one empty cell
    fails. Use find_violation(grid, allow_empty=True) to check a partial grid.
    """
    violation = find_violation(grid)
    if violation is not None:
        logger.warning(str(violation))
        return False
    return True


def check_solution(grid: Grid) -> None:
    """Raise SolutionMismatchError if a solved grid fails verification."""
    violation = find_violation(grid)
    if violation is not None:
        raise SolutionMismatchError(violation)


def solve(
    grid: Grid,
    on_assign: AssignHook | None = None,
    *,
    max_steps: int | None = None,
    stats: SearchStats | None = None,
) -> bool:
    """
    Fill the grid in place by depth-first backtracking.

    Each blank is tried with 1..N in ascending order. A placement that leads
    nowhere is retracted before the next value is tried.

    Args:
        grid: N x N board, mutated in place.
        on_assign: Observer called after every tentative placement.
        max_steps: Maximum number of tentative placements (None = unbounded).
        stats: Counters updated in place.

    Returns:
        True if the grid now holds a solution. On False the grid is
        restored to its input state.

    Raises:
        GridConfigurationError: If the grid cannot be searched.
        SearchBudgetExceeded: If `max_steps` placements were not enough.
            The grid is restored to its input state.
    """
    validate_grid(grid)
    n = int(grid.shape[0])
    stats = stats if stats is not None else SearchStats()
    baseline = stats.assignments

    clash = find_violation(grid, allow_empty=True)
    if clash is not None:
        logger.debug(f"Givens conflict, no search attempted: {clash}")
        return False

    original = grid.copy()

    def search(depth: int) -> bool:
        cell = find_empty_cell(grid)
        if cell is None:
            return True

        row, col = cell
        stats.max_depth = max(stats.max_depth, depth)

        for value in range(1, n + 1):
            if not is_valid(grid, value, row, col):
                continue
            if max_steps is not None and stats.assignments - baseline >= max_steps:
                raise SearchBudgetExceeded(max_steps)

            grid[row, col] = value
            stats.assignments += 1
            if on_assign is not None:
                on_assign(grid, cell, value)

            if search(depth + 1):
                return True

            grid[row, col] = 0
            stats.backtracks += 1

        return False

    logger.debug(f"Solving {n}x{n} grid with {int((grid == 0).sum())} blanks")
    solved = False
    try:
        solved = search(1)
    finally:
        if not solved:
            np.copyto(grid, original)

    logger.debug(
        f"Search finished: solved={solved}, assignments={stats.assignments - baseline}, "
        f"backtracks={stats.backtracks}"
    )
    return solved
