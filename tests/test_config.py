"""Tests for configuration management."""

import tempfile
from pathlib import Path

import pytest

from sudoku_backtrack.config import (
    Config,
    DisplayConfig,
    LoggingConfig,
    PuzzleConfig,
    SolverConfig,
    load_config,
    merge_configs,
)

DEFAULT_YAML = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"


class TestPuzzleConfig:
    """Tests for PuzzleConfig dataclass."""

    def test_default_values(self):
        """PuzzleConfig should have sensible defaults."""
        config = PuzzleConfig()
        assert config.size == 9
        assert config.percentage == 30
        assert config.corpus_path == "data/puzzles.txt"

    def test_custom_values(self):
        """PuzzleConfig should accept custom values."""
        config = PuzzleConfig(size=4, percentage=70)
        assert config.size == 4
        assert config.percentage == 70


class TestSolverConfig:
    """Tests for SolverConfig dataclass."""

    def test_default_values(self):
        """Search is unbounded and verified by default."""
        config = SolverConfig()
        assert config.max_steps is None
        assert config.verify is True


class TestConfig:
    """Tests for the main Config class."""

    def test_default_initialization(self):
        """Config should initialize with defaults."""
        config = Config()
        assert isinstance(config.puzzle, PuzzleConfig)
        assert isinstance(config.solver, SolverConfig)
        assert isinstance(config.display, DisplayConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_from_dict(self):
        """Config should load from dictionary."""
        data = {
            "puzzle": {"size": 4, "percentage": 70},
            "solver": {"max_steps": 500},
            "display": {"animate": False},
        }
        config = Config.from_dict(data)

        assert config.puzzle.size == 4
        assert config.puzzle.percentage == 70
        assert config.solver.max_steps == 500
        assert config.display.animate is False
        assert config.logging.level == "INFO"

    def test_from_dict_null_section(self):
        """A section given as null keeps its defaults."""
        config = Config.from_dict({"puzzle": None, "display": {"animate": False}})
        assert config.puzzle == PuzzleConfig()
        assert config.display.animate is False

    def test_from_dict_unknown_key(self):
        """Unknown keys inside a section are rejected."""
        with pytest.raises(TypeError):
            Config.from_dict({"puzzle": {"colour": "red"}})

    def test_to_dict(self):
        """Config should convert to dictionary."""
        data = Config().to_dict()

        assert set(data) == {"puzzle", "solver", "display", "logging"}
        assert data["display"]["render_every"] == 1


class TestConfigYAML:
    """Tests for YAML loading and saving."""

    def test_from_yaml(self):
        """Config should load from YAML file."""
        yaml_content = """
puzzle:
  size: 4
  percentage: 70

display:
  delay: 0.05
  clear_screen: false
"""
        with tempfile.NamedTemporaryFile(
            mode="w", suffix=".yaml", delete=False
        ) as f:
            f.write(yaml_content)
            f.flush()

            config = Config.from_yaml(f.name)

            assert config.puzzle.size == 4
            assert config.puzzle.percentage == 70
            assert config.display.delay == 0.05
            assert config.display.clear_screen is False

        Path(f.name).unlink()

    def test_from_empty_yaml(self, tmp_path):
        """An empty file yields defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert Config.from_yaml(path).puzzle.size == 9

    def test_from_yaml_file_not_found(self):
        """Config should raise error for missing file."""
        with pytest.raises(FileNotFoundError):
            Config.from_yaml("nonexistent.yaml")

    def test_save_and_load(self):
        """Config should round-trip through save/load."""
        config = Config()
        config.puzzle.size = 4
        config.solver.max_steps = 1000
        config.logging.record_solves = True

        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "test_config.yaml"
            config.save(path)

            loaded = Config.from_yaml(path)

            assert loaded.puzzle.size == 4
            assert loaded.solver.max_steps == 1000
            assert loaded.logging.record_solves is True

    def test_bundled_default_matches_dataclasses(self):
        """configs/default.yaml should agree with the built-in defaults."""
        assert Config.from_yaml(DEFAULT_YAML).to_dict() == Config().to_dict()


class TestLoadConfig:
    """Tests for the load_config function."""

    def test_load_none_returns_defaults(self):
        """load_config(None) should return default config."""
        config = load_config(None)
        assert isinstance(config, Config)
        assert config.puzzle.size == 9

    def test_load_from_path(self, tmp_path):
        """load_config should load from path."""
        path = tmp_path / "config.yaml"
        path.write_text("solver:\n  verify: false\n")

        config = load_config(path)
        assert config.solver.verify is False


class TestMergeConfigs:
    """Tests for the merge_configs function."""

    def test_merge_nested(self):
        """Nested overrides should update single fields."""
        base = Config()
        merged = merge_configs(base, {"puzzle": {"size": 4}, "display": {"animate": False}})

        assert merged.puzzle.size == 4
        assert merged.puzzle.percentage == 30
        assert merged.display.animate is False
        assert merged.display.clear_screen is True

    def test_merge_does_not_modify_base(self):
        """The base configuration should be left untouched."""
        base = Config()
        merge_configs(base, {"solver": {"max_steps": 10}})
        assert base.solver.max_steps is None

    def test_merge_empty_sections(self):
        """Empty override sections change nothing."""
        merged = merge_configs(Config(), {"puzzle": {}, "logging": {}})
        assert merged.to_dict() == Config().to_dict()
