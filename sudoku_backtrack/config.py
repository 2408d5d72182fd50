"""Configuration management for the Sudoku solver."""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml


@dataclass
class PuzzleConfig:
    """Which puzzle to load and from where."""

    size: int = 9
    percentage: int = 30
    corpus_path: str = "data/puzzles.txt"


@dataclass
class SolverConfig:
    """Search configuration."""

    max_steps: int | None = None  # None = unbounded
    verify: bool = True


@dataclass
class DisplayConfig:
    """Progress display configuration."""

    animate: bool = True
    clear_screen: bool = True
    delay: float = 0.0
    render_every: int = 1


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    log_dir: str = "logs"
    log_file: str | None = None
    record_solves: bool = False


@dataclass
class Config:
    """Complete solver configuration."""

    puzzle: PuzzleConfig = field(default_factory=PuzzleConfig)
    solver: SolverConfig = field(default_factory=SolverConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            raw = yaml.safe_load(f)

        return cls.from_dict(raw or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create configuration from a dictionary."""
        config = cls()

        if "puzzle" in data:
            config.puzzle = PuzzleConfig(**(data["puzzle"] or {}))

        if "solver" in data:
            config.solver = SolverConfig(**(data["solver"] or {}))

        if "display" in data:
            config.display = DisplayConfig(**(data["display"] or {}))

        if "logging" in data:
            config.logging = LoggingConfig(**(data["logging"] or {}))

        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "puzzle": asdict(self.puzzle),
            "solver": asdict(self.solver),
            "display": asdict(self.display),
            "logging": asdict(self.logging),
        }

    def save(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


def load_config(path: str | Path | None = None) -> Config:
    """
    Load configuration from file or return defaults.

    Args:
        path: Path to YAML config file. If None, returns default config.

    Returns:
        Configuration object.
    """
    if path is None:
        return Config()
    return Config.from_yaml(path)


def merge_configs(base: Config, overrides: dict[str, Any]) -> Config:
    """
    Merge override values into a base configuration.

    Args:
        base: Base configuration.
        overrides: Nested dictionary of override values, e.g.
            {"puzzle": {"size": 4}}.

    Returns:
        New configuration with overrides applied.
    """
    base_dict = base.to_dict()

    for key, value in overrides.items():
        if isinstance(value, dict) and key in base_dict:
            base_dict[key].update(value)
        else:
            base_dict[key] = value

    return Config.from_dict(base_dict)
