"""Configuration management for perfmeasures."""

import os
from dataclasses import dataclass
from typing import Any

from perfmeasures.configs.config_io import (
    ensure_parent_dir,
    load_json_file,
    load_yaml_file,
    save_json_file,
    save_yaml_file,
)
from perfmeasures.utils.errors import ConfigError, InvalidConfiguration

DEFAULT_REPETITIONS = 5
DEFAULT_WARMUP_RUNS = 5

CONFIG_ENV_VAR = "PERFMEASURES_CONFIG"

DEFAULT_CONFIG: dict[str, Any] = {
    "benchmark": {
        "repetitions": DEFAULT_REPETITIONS,
        "warmup_runs": DEFAULT_WARMUP_RUNS,
    },
}


class Config:
    """Configuration container with dotted-key lookup."""

    def __init__(self, config_dict: dict[str, Any] | None = None):
        """Initialize configuration.

        Args:
            config_dict: Optional dictionary to use as base (shallow copy)
        """
        self.config = (config_dict or {}).copy()

    def update(self, config_dict: dict[str, Any]) -> None:
        """Update configuration with provided values.

        Nested dicts are merged one level deep; other values are replaced.

        Args:
            config_dict: Dictionary with configuration overrides
        """
        for key, value in config_dict.items():
            if isinstance(self.config.get(key), dict) and isinstance(value, dict):
                self.config[key] = {**self.config[key], **value}
            else:
                self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key.

        Args:
            key: Configuration key (e.g., 'benchmark.repetitions')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value = self.config
        for k in key.split("."):
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary (nested sections copied)."""
        return {key: (dict(value) if isinstance(value, dict) else value) for key, value in self.config.items()}


@dataclass
class BenchmarkConfig:
    """Repetition settings for a benchmark run.

    Attributes:
        repetitions: Measured repetitions (must be > 1)
        warmup_runs: Discarded runs before measuring (must be >= 0)
    """

    repetitions: int = DEFAULT_REPETITIONS
    warmup_runs: int = DEFAULT_WARMUP_RUNS

    def validate(self) -> "BenchmarkConfig":
        """Raise InvalidConfiguration if the counts are out of range."""
        validate_repetitions(self.repetitions)
        validate_warmup_runs(self.warmup_runs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Export for JSON/YAML."""
        return {"repetitions": self.repetitions, "warmup_runs": self.warmup_runs}

    @classmethod
    def from_config(cls, config: Config) -> "BenchmarkConfig":
        """Read the ``benchmark`` section of a Config, falling back to defaults."""
        return cls(
            repetitions=config.get("benchmark.repetitions", DEFAULT_REPETITIONS),
            warmup_runs=config.get("benchmark.warmup_runs", DEFAULT_WARMUP_RUNS),
        ).validate()


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_repetitions(repetitions: Any) -> int:
    """Return repetitions if it is an int > 1, else raise InvalidConfiguration."""
    if not _is_int(repetitions):
        raise InvalidConfiguration(f"repetitions must be an integer, got {repetitions!r}")
    if repetitions <= 1:
        raise InvalidConfiguration(
            f"repetitions must be > 1 (standard deviation needs at least two samples), got {repetitions}"
        )
    return repetitions


def validate_warmup_runs(warmup_runs: Any) -> int:
    """Return warmup_runs if it is an int >= 0, else raise InvalidConfiguration."""
    if not _is_int(warmup_runs):
        raise InvalidConfiguration(f"warmup_runs must be an integer, got {warmup_runs!r}")
    if warmup_runs < 0:
        raise InvalidConfiguration(f"warmup_runs must be >= 0, got {warmup_runs}")
    return warmup_runs


class ConfigManager:
    """Manages loading and saving configuration files."""

    @staticmethod
    def load_yaml(filepath: str) -> Config:
        """Load configuration from YAML file."""
        return Config(load_yaml_file(filepath))

    @staticmethod
    def load_json(filepath: str) -> Config:
        """Load configuration from JSON file."""
        return Config(load_json_file(filepath))

    @staticmethod
    def load(filepath: str) -> Config:
        """Load configuration from a YAML or JSON file, chosen by extension."""
        if filepath.endswith((".yaml", ".yml")):
            return ConfigManager.load_yaml(filepath)
        if filepath.endswith(".json"):
            return ConfigManager.load_json(filepath)
        raise ConfigError(f"Unsupported config file type (expected .yaml, .yml or .json): {filepath}")

    @staticmethod
    def save_yaml(config: Config, filepath: str) -> None:
        """Save configuration to YAML file."""
        ensure_parent_dir(filepath)
        save_yaml_file(filepath, config.to_dict())

    @staticmethod
    def save_json(config: Config, filepath: str) -> None:
        """Save configuration to JSON file."""
        ensure_parent_dir(filepath)
        save_json_file(filepath, config.to_dict())

    @staticmethod
    def load_or_default(
        filepath: str | None = None,
        default_config: dict[str, Any] | None = None,
    ) -> Config:
        """Load configuration from file or return defaults.

        When ``filepath`` is omitted the ``PERFMEASURES_CONFIG`` environment
        variable is consulted. File values are merged over the defaults.

        Args:
            filepath: Optional path to configuration file
            default_config: Defaults to merge under the file (DEFAULT_CONFIG if None)

        Returns:
            Config object (loaded from file or defaults)
        """
        defaults = DEFAULT_CONFIG if default_config is None else default_config
        base = Config({key: (dict(value) if isinstance(value, dict) else value) for key, value in defaults.items()})
        path = filepath or os.environ.get(CONFIG_ENV_VAR)
        if not path:
            return base
        if not os.path.exists(path):
            raise ConfigError(f"Config file not found: {path}")
        base.update(ConfigManager.load(path).config)
        return base
