"""Benchmark result schema.

A BenchmarkResult is the immutable snapshot returned by one
``BenchmarkRunner.measure`` call: the value the computation produced plus
the timing statistics of the measured (post warm-up) repetitions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from perfmeasures.utils.stats import summarize

REPORT_TEMPLATE = "function computes result: {value} in {mean} ms on average with standard deviation {stddev}"

REQUIRED_FIELDS = ("value", "mean_ms", "stddev_ms")


@dataclass(frozen=True)
class BenchmarkResult:
    """Value of the first measured run with mean/stddev of measured timings (ms).

    ``timings_ms`` and ``warmup_runs`` describe how the statistics were
    obtained; they are kept out of equality and repr so two results compare
    on the three reported fields only.
    """

    value: Any
    mean_ms: float
    stddev_ms: float
    timings_ms: Tuple[float, ...] = field(default=(), compare=False, repr=False)
    warmup_runs: Optional[int] = field(default=None, compare=False, repr=False)

    @property
    def repetitions(self) -> int:
        """Number of measured repetitions behind the statistics."""
        return len(self.timings_ms)

    def render(self) -> str:
        """One-line human-readable rendering used by ``report``."""
        return REPORT_TEMPLATE.format(value=self.value, mean=self.mean_ms, stddev=self.stddev_ms)

    def summary(self) -> Dict[str, Any]:
        """Extended statistics (min/max/percentiles/cv) over the measured timings."""
        return summarize(self.timings_ms)

    def to_dict(self) -> Dict[str, Any]:
        """Export for JSON."""
        return {
            "value": self.value,
            "mean_ms": self.mean_ms,
            "stddev_ms": self.stddev_ms,
            "repetitions": self.repetitions,
            "warmup_runs": self.warmup_runs,
            "timings_ms": list(self.timings_ms),
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "BenchmarkResult":
        """Build a result from a ``to_dict`` payload."""
        for key in REQUIRED_FIELDS:
            if key not in payload:
                raise ValueError(f"Missing required field: {key}")
        warmup = payload.get("warmup_runs")
        return cls(
            value=payload["value"],
            mean_ms=float(payload["mean_ms"]),
            stddev_ms=float(payload["stddev_ms"]),
            timings_ms=tuple(float(t) for t in payload.get("timings_ms") or ()),
            warmup_runs=int(warmup) if warmup is not None else None,
        )

    def __str__(self) -> str:
        return self.render()
