#!/usr/bin/env python3
"""
Example: compare a naive recursive sum with an accumulator loop.

This demonstrates using the perfmeasures package programmatically.
"""

import sys

from perfmeasures import BenchmarkRunner, ConfigManager, BenchmarkConfig

N = 500


def naive_sum(n):
    return 0 if n == 0 else n + naive_sum(n - 1)


def accumulated_sum(n):
    acc = 0
    while n > 0:
        acc, n = acc + n, n - 1
    return acc


def main():
    """Report both implementations and their relative cost."""
    # Load configuration (or use defaults)
    config = ConfigManager.load_or_default()
    runner = BenchmarkRunner.from_config(BenchmarkConfig.from_config(config))

    sys.setrecursionlimit(max(sys.getrecursionlimit(), N + 100))
    runner.report(lambda: naive_sum(N))
    runner.report(lambda: accumulated_sum(N))

    naive = runner.measure(lambda: naive_sum(N))
    loop = runner.measure(lambda: accumulated_sum(N))
    if loop.mean_ms > 0:
        print(f"\nnaive / loop: {naive.mean_ms / loop.mean_ms:.2f}x")


if __name__ == "__main__":
    main()
