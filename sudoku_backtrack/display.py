"""Terminal rendering of Sudoku boards."""

import os
import subprocess
import sys
import time
from typing import TextIO

from .grid import Cell, Grid, box_size


def format_grid(grid: Grid) -> str:
    """
    Render a board as text with box separators.

    Blanks are shown as spaces, columns are joined by single spaces, a
    "| " marks each vertical box boundary and a dashed line each
    horizontal one.
    """
    n = int(grid.shape[0])
    box = box_size(n)
    separator = "--" * (n + box - 1)

    lines = []
    for r in range(n):
        if r % box == 0 and r != 0:
            lines.append(separator)
        cells = []
        for c in range(n):
            if c % box == 0 and c != 0:
                cells.append("|")
            value = int(grid[r, c])
            cells.append(" " if value == 0 else str(value))
        lines.append(" ".join(cells))
    return "\n".join(lines)


def clear_terminal() -> None:
    """Clear the attached terminal."""
    if os.name == "nt":
        subprocess.run("cls", shell=True, check=False)
    else:
        subprocess.run(["clear"], check=False)


class ProgressRenderer:
    """
    Search observer that redraws the board after placements.

    Pass an instance as the `on_assign` hook of `solve`.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        clear: bool = True,
        delay: float = 0.0,
        every: int = 1,
    ):
        """
        Args:
            stream: Where to write frames (default: stdout).
            clear: Clear the terminal before each frame.
            delay: Seconds to pause after each frame.
            every: Draw one frame per this many placements.
        """
        if every < 1:
            raise ValueError(f"every must be >= 1, got {every}")
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear
        self.delay = delay
        self.every = every
        self.placements = 0
        self.frames = 0

    def __call__(self, grid: Grid, cell: Cell, value: int) -> None:
        self.placements += 1
        if self.placements % self.every:
            return

        if self.clear:
            clear_terminal()
        self.stream.write("\nSolution: \n\n")
        self.stream.write(format_grid(grid) + "\n")
        self.stream.flush()
        self.frames += 1

        if self.delay > 0:
            time.sleep(self.delay)
