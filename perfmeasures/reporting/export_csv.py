"""Timing table and CSV export for benchmark results."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from perfmeasures.configs.config_io import ensure_parent_dir
from perfmeasures.schema import BenchmarkResult

COLUMNS = ["repetition", "elapsed_ms"]


def render_line(result: BenchmarkResult) -> str:
    """The one-line summary printed by ``report``."""
    return result.render()


def timings_frame(result: BenchmarkResult) -> pd.DataFrame:
    """Measured timings as a DataFrame (repetition is 1-based)."""
    return pd.DataFrame(
        {
            "repetition": list(range(1, result.repetitions + 1)),
            "elapsed_ms": list(result.timings_ms),
        },
        columns=COLUMNS,
    )


def export_timings_csv(result: BenchmarkResult, path: str | Path) -> bool:
    """Write measured timings to CSV. Returns False if there are none."""
    if not result.timings_ms:
        return False
    ensure_parent_dir(str(path))
    timings_frame(result).to_csv(path, index=False)
    return True
