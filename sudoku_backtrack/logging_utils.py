"""
Logging utilities.
- Console / file logger setup
- Per-solve CSV records (size, outcome, search counters, timing)
"""

import csv
import logging
import sys
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path


def get_logger(
    name: str,
    level: int | str = logging.INFO,
    log_file: Path | None = None,
) -> logging.Logger:
    """
    Create and configure a logger.

    Args:
        name: Logger name.
        level: Logging level, as a number or a name such as "DEBUG".
        log_file: Optional file path to write logs to.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File handler (if specified)
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_format = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    return logger


@dataclass
class SolveRecord:
    """Outcome of one solve, written as a CSV row."""

    size: int
    percentage: int | None
    solved: bool
    verified: bool | None
    assignments: int
    backtracks: int
    max_depth: int
    elapsed_seconds: float
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


class SolveLogger:
    """
    CSV-based logger for solve outcomes.

    Appends one row per solve; the header is written once when the file
    is created.
    """

    FIELDNAMES = [
        "timestamp",
        "size",
        "percentage",
        "solved",
        "verified",
        "assignments",
        "backtracks",
        "max_depth",
        "elapsed_seconds",
    ]

    def __init__(self, log_dir: Path, filename: str = "solves.csv"):
        """
        Initialize the solve logger.

        Args:
            log_dir: Directory to save the CSV file.
            filename: Name of the CSV file.
        """
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.filepath = self.log_dir / filename

    def _init_file(self) -> None:
        """Initialize CSV file with headers."""
        if not self.filepath.exists():
            with open(self.filepath, "w", newline="") as f:
                writer = csv.DictWriter(f, fieldnames=self.FIELDNAMES)
                writer.writeheader()

    def log(self, record: SolveRecord) -> None:
        """Append one solve record."""
        self._init_file()
        with open(self.filepath, "a", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=self.FIELDNAMES)
            writer.writerow(asdict(record))

    def read(self) -> list[dict[str, str]]:
        """Return all logged rows."""
        if not self.filepath.exists():
            return []
        with open(self.filepath, newline="") as f:
            return list(csv.DictReader(f))
