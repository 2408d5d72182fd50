"""
sudoku-backtrack: plain backtracking Sudoku solver.

Solves N x N puzzles (N a perfect square, 4 and 9 in the bundled corpus)
loaded from a labeled text corpus, with an independent verifier.
"""

from sudoku_backtrack.config import Config, load_config, merge_configs
from sudoku_backtrack.corpus import (
    PuzzleNotFoundError,
    load_puzzle,
    parse_puzzle,
    read_sections,
)
from sudoku_backtrack.display import ProgressRenderer, clear_terminal, format_grid
from sudoku_backtrack.grid import (
    GridConfigurationError,
    box_index,
    box_size,
    make_base_solution,
    to_grid,
    validate_grid,
)
from sudoku_backtrack.logging_utils import SolveLogger, SolveRecord, get_logger
from sudoku_backtrack.solver import (
    SearchBudgetExceeded,
    SearchStats,
    SolutionMismatchError,
    Violation,
    check_solution,
    find_empty_cell,
    find_violation,
    is_valid,
    solve,
    verify,
)

__version__ = "0.1.0"
__all__ = [
    # Grid
    "GridConfigurationError",
    "box_index",
    "box_size",
    "make_base_solution",
    "to_grid",
    "validate_grid",
    # Solver
    "find_empty_cell",
    "is_valid",
    "solve",
    "verify",
    "find_violation",
    "check_solution",
    "SearchStats",
    "SearchBudgetExceeded",
    "SolutionMismatchError",
    "Violation",
    # Corpus
    "PuzzleNotFoundError",
    "load_puzzle",
    "parse_puzzle",
    "read_sections",
    # Display
    "ProgressRenderer",
    "clear_terminal",
    "format_grid",
    # Logging
    "SolveLogger",
    "SolveRecord",
    "get_logger",
    # Configuration
    "Config",
    "load_config",
    "merge_configs",
]
