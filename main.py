#!/usr/bin/env python3
"""
Main entry point for the backtracking Sudoku solver.

Loads a puzzle from the labeled corpus, shows it, then solves it while
optionally animating every placement, and finally re-verifies the result.
"""

import argparse
import sys
import time
from pathlib import Path
from typing import Any

from sudoku_backtrack.config import Config, load_config, merge_configs
from sudoku_backtrack.corpus import (
    SUPPORTED_PERCENTAGES,
    SUPPORTED_SIZES,
    PuzzleNotFoundError,
    load_puzzle,
)
from sudoku_backtrack.display import ProgressRenderer, clear_terminal, format_grid
from sudoku_backtrack.grid import GridConfigurationError
from sudoku_backtrack.logging_utils import SolveLogger, SolveRecord, get_logger
from sudoku_backtrack.solver import (
    SearchBudgetExceeded,
    SearchStats,
    SolutionMismatchError,
    check_solution,
    solve,
)

EXIT_OK = 0
EXIT_NO_SOLUTION = 1
EXIT_BAD_INPUT = 2
EXIT_VERIFY_FAILED = 3


def prompt_choice(prompt: str, choices: tuple[int, ...]) -> int:
    """Ask until the user enters one of `choices`."""
    allowed = " or ".join(str(c) for c in choices)
    while True:
        answer = input(prompt)
        try:
            value = int(answer)
        except ValueError:
            print("Invalid input. Please enter a number.")
            continue
        if value in choices:
            return value
        print(f"Invalid input. Please enter {allowed}.")


def run(config: Config, wait_for_enter: bool = True) -> int:
    """
    Load, display, solve and verify one puzzle.

    Args:
        config: Complete configuration.
        wait_for_enter: Pause after showing the problem.

    Returns:
        Process exit code.
    """
    try:
        logger = get_logger(
            "sudoku_backtrack",
            level=str(config.logging.level).upper(),
            log_file=Path(config.logging.log_file) if config.logging.log_file else None,
        )
    except ValueError as e:
        print(f"Invalid logging configuration: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    size = config.puzzle.size
    percentage = config.puzzle.percentage

    try:
        grid = load_puzzle(config.puzzle.corpus_path, size, percentage)
    except (FileNotFoundError, PuzzleNotFoundError) as e:
        logger.error(str(e))
        return EXIT_NO_SOLUTION
    except GridConfigurationError as e:
        logger.error(f"Malformed puzzle: {e}")
        return EXIT_BAD_INPUT

    display = config.display
    if display.clear_screen:
        clear_terminal()
    print("\nProblem: \n")
    print(format_grid(grid))

    if wait_for_enter:
        print("\nPress Enter to See the Solution...")
        input()

    renderer = None
    if display.animate:
        renderer = ProgressRenderer(
            clear=display.clear_screen,
            delay=display.delay,
            every=display.render_every,
        )

    stats = SearchStats()
    start = time.perf_counter()
    try:
        solved = solve(grid, renderer, max_steps=config.solver.max_steps, stats=stats)
    except SearchBudgetExceeded as e:
        logger.error(f"Gave up: {e}")
        return EXIT_NO_SOLUTION
    elapsed = time.perf_counter() - start

    verified = None
    if not solved:
        print("No solution exists.")
    else:
        if display.clear_screen:
            clear_terminal()
        print(format_grid(grid))
        if config.solver.verify:
            try:
                check_solution(grid)
                verified = True
                print("\nThe solution is verified\n")
            except SolutionMismatchError as e:
                verified = False
                logger.error(f"Solver produced an invalid grid. {e.violation}")
                print("\nYour solution is incorrect. Please try again.")

    logger.info(
        f"{size}x{size} {percentage}%: solved={solved}, "
        f"assignments={stats.assignments}, backtracks={stats.backtracks}, "
        f"time={elapsed:.3f}s"
    )

    if config.logging.record_solves:
        SolveLogger(Path(config.logging.log_dir)).log(
            SolveRecord(
                size=size,
                percentage=percentage,
                solved=solved,
                verified=verified,
                assignments=stats.assignments,
                backtracks=stats.backtracks,
                max_depth=stats.max_depth,
                elapsed_seconds=round(elapsed, 6),
            )
        )

    if not solved:
        return EXIT_NO_SOLUTION
    if verified is False:
        return EXIT_VERIFY_FAILED
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sudoku solver: plain backtracking over a labeled puzzle corpus"
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML config file (default: built-in defaults)",
    )

    # Puzzle selection
    parser.add_argument(
        "--size",
        type=int,
        choices=list(SUPPORTED_SIZES),
        default=None,
        help="Grid size: 4 (4x4) or 9 (9x9); prompted for when omitted",
    )
    parser.add_argument(
        "--percentage",
        type=int,
        choices=list(SUPPORTED_PERCENTAGES),
        default=None,
        help="Percentage of given cells: 30 or 70; prompted for when omitted",
    )
    parser.add_argument(
        "--corpus",
        type=str,
        default=None,
        help="Path to the puzzle corpus (default: data/puzzles.txt)",
    )

    # Search
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Abort after this many placements (default: unbounded)",
    )

    # Display
    parser.add_argument(
        "--no-animate",
        action="store_true",
        help="Do not redraw the board after every placement",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Never clear the terminal",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds to pause after each animation frame",
    )
    parser.add_argument(
        "--yes",
        "-y",
        action="store_true",
        help="Do not wait for Enter before solving",
    )

    # Logging
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--record-solves",
        action="store_true",
        help="Append a row per solve to <log_dir>/solves.csv",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point with CLI argument parsing."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(e, file=sys.stderr)
        return EXIT_BAD_INPUT
    except (TypeError, ValueError) as e:
        print(f"Invalid config file {args.config}: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    overrides: dict[str, Any] = {"puzzle": {}, "solver": {}, "display": {}, "logging": {}}
    if args.size is not None:
        overrides["puzzle"]["size"] = args.size
    elif args.config is None:
        overrides["puzzle"]["size"] = prompt_choice(
            "Enter the size of the Sudoku grid (4 or 9): ", SUPPORTED_SIZES
        )
    if args.percentage is not None:
        overrides["puzzle"]["percentage"] = args.percentage
    elif args.config is None:
        overrides["puzzle"]["percentage"] = prompt_choice(
            "Enter the percentage of input you want (30 or 70): ", SUPPORTED_PERCENTAGES
        )
    if args.corpus is not None:
        overrides["puzzle"]["corpus_path"] = args.corpus
    if args.max_steps is not None:
        overrides["solver"]["max_steps"] = args.max_steps
    if args.no_animate:
        overrides["display"]["animate"] = False
    if args.no_clear:
        overrides["display"]["clear_screen"] = False
    if args.delay is not None:
        overrides["display"]["delay"] = args.delay
    if args.log_level is not None:
        overrides["logging"]["level"] = args.log_level
    if args.record_solves:
        overrides["logging"]["record_solves"] = True

    config = merge_configs(config, overrides)
    return run(config, wait_for_enter=not args.yes)


if __name__ == "__main__":
    sys.exit(main())
