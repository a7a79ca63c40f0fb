"""Benchmark runner for perfmeasures.

Provides the BenchmarkRunner class, which calls a zero-argument computation
repeatedly, discards warm-up runs and returns the first measured value with
the mean and population standard deviation of the measured timings.
"""

import logging
import time
from collections.abc import Callable
from typing import Any

from perfmeasures.configs.config import (
    DEFAULT_REPETITIONS,
    DEFAULT_WARMUP_RUNS,
    BenchmarkConfig,
    validate_repetitions,
    validate_warmup_runs,
)
from perfmeasures.schema import BenchmarkResult
from perfmeasures.utils.stats import mean, population_stddev

LOGGER = logging.getLogger(__name__)

# Returns seconds; only differences between two readings are used.
Clock = Callable[[], float]


class BenchmarkRunner:
    """Time repeated calls of a computation after a fixed number of warm-up runs."""

    def __init__(
        self,
        repetitions: int = DEFAULT_REPETITIONS,
        warmup_runs: int = DEFAULT_WARMUP_RUNS,
        clock: Clock = time.perf_counter,
    ):
        """Initialize benchmark runner.

        Args:
            repetitions: Default number of measured repetitions (> 1)
            warmup_runs: Runs executed and discarded before measuring (>= 0)
            clock: Zero-argument callable returning seconds
        """
        self.repetitions = validate_repetitions(repetitions)
        self.warmup_runs = validate_warmup_runs(warmup_runs)
        self.clock = clock

    @classmethod
    def from_config(cls, config: BenchmarkConfig, clock: Clock = time.perf_counter) -> "BenchmarkRunner":
        """Build a runner from a validated BenchmarkConfig."""
        return cls(repetitions=config.repetitions, warmup_runs=config.warmup_runs, clock=clock)

    def measure(self, computation: Callable[[], Any], repetitions: int | None = None) -> BenchmarkResult:
        """Run computation ``repetitions + warmup_runs`` times and summarize the measured runs.

        The computation is called fresh on every repetition, one call at a
        time. Exceptions it raises propagate unchanged and abort the run.

        Args:
            computation: Zero-argument callable to benchmark
            repetitions: Measured repetitions (> 1); runner default if None

        Returns:
            BenchmarkResult with the first measured value, mean and stddev in ms

        Raises:
            InvalidConfiguration: if repetitions <= 1 (nothing is executed)
            TypeError: if computation is not callable
        """
        reps = validate_repetitions(self.repetitions if repetitions is None else repetitions)
        if not callable(computation):
            raise TypeError(f"computation must be callable, got {type(computation).__name__}")

        total = reps + self.warmup_runs
        name = getattr(computation, "__qualname__", None) or type(computation).__qualname__
        LOGGER.debug("Benchmarking %s: %d warm-up + %d measured runs", name, self.warmup_runs, reps)

        first_value: Any = None
        timings_ms: list[float] = []
        for i in range(total):
            start = self.clock()
            value = computation()
            elapsed_ms = (self.clock() - start) * 1000.0
            if i < self.warmup_runs:
                LOGGER.debug("[warmup %d/%d] %.6f ms", i + 1, self.warmup_runs, elapsed_ms)
                continue
            if not timings_ms:
                first_value = value
            timings_ms.append(elapsed_ms)
            LOGGER.debug("[run %d/%d] %.6f ms", len(timings_ms), reps, elapsed_ms)

        avg = mean(timings_ms)
        std = population_stddev(timings_ms, avg)
        LOGGER.debug("%s: mean %.6f ms, stddev %.6f ms over %d runs", name, avg, std, reps)
        return BenchmarkResult(
            value=first_value,
            mean_ms=avg,
            stddev_ms=std,
            timings_ms=tuple(timings_ms),
            warmup_runs=self.warmup_runs,
        )

    def report(self, computation: Callable[[], Any], repetitions: int | None = None) -> None:
        """Measure computation and print the one-line summary to stdout."""
        result = self.measure(computation, repetitions)
        print(result.render())


def measure(computation: Callable[[], Any], repetitions: int = DEFAULT_REPETITIONS) -> BenchmarkResult:
    """Measure with the default 5 warm-up runs and the wall clock."""
    return BenchmarkRunner().measure(computation, repetitions)


def report(computation: Callable[[], Any], repetitions: int = DEFAULT_REPETITIONS) -> None:
    """Measure with the default runner and print the result line."""
    BenchmarkRunner().report(computation, repetitions)
