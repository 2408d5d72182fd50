import argparse
import json
import sys
import time
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))
from sudoku_backtrack.corpus import parse_label, parse_puzzle, read_sections
from sudoku_backtrack.solver import SearchBudgetExceeded, SearchStats, solve, verify


def solve_section(label: str, digits: str, max_steps: int | None) -> dict:
    """Solve one corpus section and return a result row."""
    size, percentage = parse_label(label)
    grid = parse_puzzle(digits, size)

    stats = SearchStats()
    start = time.perf_counter()
    try:
        solved = solve(grid, max_steps=max_steps, stats=stats)
        status = "solved" if solved else "unsolvable"
    except SearchBudgetExceeded:
        solved = False
        status = "budget"
    elapsed = time.perf_counter() - start

    return {
        "label": label,
        "size": size,
        "percentage": percentage,
        "status": status,
        "verified": verify(grid) if solved else None,
        "assignments": stats.assignments,
        "backtracks": stats.backtracks,
        "seconds": round(elapsed, 4),
    }


def main():
    parser = argparse.ArgumentParser(description="Solve every puzzle in a corpus")
    parser.add_argument("--corpus", type=str, default="data/puzzles.txt", help="Path to the puzzle corpus")
    parser.add_argument("--max-steps", type=int, default=None, help="Placement budget per puzzle")
    parser.add_argument("--save-json", type=str, default=None, help="Path to save results JSON")
    args = parser.parse_args()

    try:
        sections = read_sections(args.corpus)
    except FileNotFoundError as e:
        print(e)
        sys.exit(1)

    results = []
    print(f"{'Section':<18} | {'Status':<10} | {'Verified':<8} | {'Placements':>10} | {'Backtracks':>10} | {'Time':>8}")
    print("-" * 80)

    for label, digits in sections.items():
        try:
            row = solve_section(label, digits, args.max_steps)
        except ValueError as e:
            print(f"{label:<18} | skipped: {e}")
            continue
        results.append(row)
        print(
            f"{label:<18} | {row['status']:<10} | {str(row['verified']):<8} | "
            f"{row['assignments']:>10} | {row['backtracks']:>10} | {row['seconds']:>7.3f}s"
        )

    print("-" * 80)

    if args.save_json:
        with open(args.save_json, "w") as f:
            json.dump(results, f, indent=2)
        print(f"Results saved to {args.save_json}")


if __name__ == "__main__":
    main()
