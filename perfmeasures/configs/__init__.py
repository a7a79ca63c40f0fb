"""Configuration load/save and benchmark config types."""

from .config import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG,
    DEFAULT_REPETITIONS,
    DEFAULT_WARMUP_RUNS,
    BenchmarkConfig,
    Config,
    ConfigManager,
    validate_repetitions,
    validate_warmup_runs,
)
from .config_io import (
    ensure_parent_dir,
    load_json_file,
    load_yaml_file,
    save_json_file,
    save_yaml_file,
)

__all__ = [
    "load_yaml_file",
    "load_json_file",
    "save_yaml_file",
    "save_json_file",
    "ensure_parent_dir",
    "Config",
    "ConfigManager",
    "BenchmarkConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_REPETITIONS",
    "DEFAULT_WARMUP_RUNS",
    "CONFIG_ENV_VAR",
    "validate_repetitions",
    "validate_warmup_runs",
]
