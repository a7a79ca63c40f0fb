"""Shared utilities: errors and statistics."""

from .errors import (
    ConfigError,
    InvalidConfiguration,
    PerfMeasuresError,
    TargetResolutionError,
)
from .stats import mean, percentile, population_stddev, summarize

__all__ = [
    "PerfMeasuresError",
    "InvalidConfiguration",
    "ConfigError",
    "TargetResolutionError",
    "mean",
    "population_stddev",
    "percentile",
    "summarize",
]
