"""Micro-benchmarking for zero-argument Python callables.

Provides:
- runners (BenchmarkRunner, measure, report)
- schema (BenchmarkResult)
- stats (mean, population_stddev, percentile, summarize)
- configs (Config, ConfigManager, BenchmarkConfig)
- serializer (save/load BenchmarkResult as JSON)
- reporting (render_line, timings_frame, export_timings_csv)
"""

from perfmeasures.configs import (
    DEFAULT_REPETITIONS,
    DEFAULT_WARMUP_RUNS,
    BenchmarkConfig,
    Config,
    ConfigManager,
)
from perfmeasures.reporting import export_timings_csv, render_line, timings_frame
from perfmeasures.runners import BenchmarkRunner, measure, report
from perfmeasures.schema import BenchmarkResult
from perfmeasures.serializer import load_benchmark_result, save_benchmark_result
from perfmeasures.utils.errors import (
    ConfigError,
    InvalidConfiguration,
    PerfMeasuresError,
    TargetResolutionError,
)
from perfmeasures.utils.stats import mean, percentile, population_stddev, summarize

__version__ = "0.1.0"

__all__ = [
    # Runners
    "BenchmarkRunner",
    "measure",
    "report",
    # Result
    "BenchmarkResult",
    # Stats
    "mean",
    "population_stddev",
    "percentile",
    "summarize",
    # Config
    "Config",
    "ConfigManager",
    "BenchmarkConfig",
    "DEFAULT_REPETITIONS",
    "DEFAULT_WARMUP_RUNS",
    # Serialization / reporting
    "save_benchmark_result",
    "load_benchmark_result",
    "render_line",
    "timings_frame",
    "export_timings_csv",
    # Errors
    "PerfMeasuresError",
    "InvalidConfiguration",
    "ConfigError",
    "TargetResolutionError",
]
