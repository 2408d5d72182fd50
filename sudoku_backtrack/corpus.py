"""Labeled puzzle corpus loading."""

import re
from pathlib import Path

import numpy as np

from .grid import Grid, GridConfigurationError, validate_grid

SUPPORTED_SIZES = (4, 9)
SUPPORTED_PERCENTAGES = (30, 70)

_LABEL_RE = re.compile(r"(\d+)x(\d+) (\d+)% puzzles")


class PuzzleNotFoundError(LookupError):
    """No corpus section matches the requested size and percentage."""


def section_label(size: int, percentage: int) -> str:
    """Return the label line that introduces a corpus section."""
    return f"{size}x{size} {percentage}% puzzles"


def parse_puzzle(text: str, size: int) -> Grid:
    """
    Convert a digit string into an N x N grid.

    Whitespace is ignored; '0' and '.' both mark a blank cell.

    Args:
        text: Puzzle digits in row-major order.
        size: Side length N of the grid.

    Returns:
        Parsed grid of shape (size, size).
    """
    chars = "".join(text.split())
    if len(chars) != size * size:
        raise GridConfigurationError(
            f"Puzzle must have {size * size} cells for a {size}x{size} grid, got {len(chars)}"
        )

    values = []
    for idx, char in enumerate(chars):
        if char == ".":
            values.append(0)
        elif char in "0123456789":
            values.append(int(char))
        else:
            raise GridConfigurationError(f"Invalid character {char!r} at position {idx}")

    grid = np.array(values, dtype=np.int64).reshape(size, size)
    validate_grid(grid)
    return grid


def read_sections(path: str | Path) -> dict[str, str]:
    """
    Read every labeled section of a corpus file.

    A section begins at a line containing "<N>x<N> <P>% puzzles" and runs
    until the next blank line. Only the first section with a given label
    is kept.

    Returns:
        Mapping of label to the concatenated puzzle digits.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Puzzle corpus not found: {path}")

    sections: dict[str, str] = {}
    label: str | None = None
    rows: list[str] = []

    def close() -> None:
        if label is not None and rows and label not in sections:
            sections[label] = "".join(rows)

    with open(path) as f:
        for line in f:
            stripped = line.strip()
            if "% puzzles" in stripped:
                close()
                label, rows = stripped, []
            elif not stripped:
                close()
                label, rows = None, []
            elif label is not None:
                rows.append(stripped)
    close()

    return sections


def load_puzzle(path: str | Path, size: int, percentage: int) -> Grid:
    """
    Load the puzzle for a grid size and fill percentage.

    Raises:
        FileNotFoundError: If the corpus file does not exist.
        PuzzleNotFoundError: If no section carries the requested label.
    """
    target = section_label(size, percentage)
    for label, digits in read_sections(path).items():
        if target in label:
            return parse_puzzle(digits, size)
    raise PuzzleNotFoundError(f"No puzzle found for size {size} and percentage {percentage}.")


def parse_label(label: str) -> tuple[int, int]:
    """Extract (size, percentage) from a section label such as "9x9 30% puzzles"."""
    match = _LABEL_RE.search(label)
    if match is None:
        raise ValueError(f"Not a puzzle section label: {label!r}")
    rows, cols, percentage = (int(g) for g in match.groups())
    if rows != cols:
        raise GridConfigurationError(f"Grid must be square; got {rows}x{cols} in {label!r}")
    return rows, percentage
