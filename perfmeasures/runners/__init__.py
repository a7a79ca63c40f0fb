"""Benchmark runner module for perfmeasures.

Provides the BenchmarkRunner class and module-level measure/report helpers.
"""

from .benchmark_runner import BenchmarkRunner, Clock, measure, report

__all__ = [
    "BenchmarkRunner",
    "Clock",
    "measure",
    "report",
]
