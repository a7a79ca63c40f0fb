"""Shared statistics utilities (mean, population stddev, percentile summary)."""

from typing import Any, Iterable, Optional, Sequence

import numpy as np

from perfmeasures.utils.errors import InvalidConfiguration

DEFAULT_PERCENTILES = (50, 95, 99)


def _as_array(values: Iterable[float]) -> np.ndarray:
    return np.asarray(list(values), dtype=float)


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean of a non-empty sample."""
    arr = _as_array(values)
    if arr.size == 0:
        raise InvalidConfiguration("Cannot compute the mean of an empty sample")
    return float(np.mean(arr))


def population_stddev(values: Sequence[float], mean_value: Optional[float] = None) -> float:
    """Population standard deviation (ddof=0) of a non-empty sample.

    Args:
        values: Sample values
        mean_value: Precomputed mean of ``values``; computed when omitted

    Returns:
        Square root of the mean squared deviation from the mean
    """
    arr = _as_array(values)
    if arr.size == 0:
        raise InvalidConfiguration("Cannot compute the standard deviation of an empty sample")
    center = float(np.mean(arr)) if mean_value is None else float(mean_value)
    return float(np.sqrt(np.mean((arr - center) ** 2)))


def percentile(values: Sequence[float], p: float) -> float:
    """Calculate percentile of a list of values (linear interpolation).

    Args:
        values: List of numeric values
        p: Percentile to calculate (0-100)

    Returns:
        Percentile value, or 0.0 if values is empty
    """
    arr = _as_array(values)
    if arr.size == 0:
        return 0.0
    return float(np.percentile(arr, p))


def summarize(
    values: Sequence[float],
    percentiles: Sequence[int] = DEFAULT_PERCENTILES,
) -> dict[str, Any]:
    """Summary statistics for a timing sample.

    Returns:
        Dict with mean, std, min, max, pNN, cv and num_samples;
        empty dict if values is empty
    """
    arr = _as_array(values)
    if arr.size == 0:
        return {}
    avg = float(np.mean(arr))
    std = population_stddev(arr, avg)
    result: dict[str, Any] = {
        "mean": avg,
        "std": std,
        "min": float(np.min(arr)),
        "max": float(np.max(arr)),
    }
    for p in percentiles:
        result[f"p{p}"] = float(np.percentile(arr, p))
    result["cv"] = std / avg if avg != 0 else 0.0
    result["num_samples"] = int(arr.size)
    return result
