"""Serialization helpers for benchmark results."""

import json
from pathlib import Path
from typing import Any, Union

from perfmeasures.schema import BenchmarkResult

PathLike = Union[str, Path]


def _json_safe(value: Any) -> Any:
    """Return value if json can encode it, else its repr."""
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)
    return value


def save_benchmark_result(result: BenchmarkResult, path: PathLike) -> Path:
    """Save a BenchmarkResult to JSON. Non-JSON values are stored as repr."""
    payload = result.to_dict()
    payload["value"] = _json_safe(payload["value"])
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)
    return out_path


def load_benchmark_result(path: PathLike) -> BenchmarkResult:
    """Load a BenchmarkResult from JSON."""
    in_path = Path(path)
    with in_path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object in {in_path}")
    return BenchmarkResult.from_dict(payload)
