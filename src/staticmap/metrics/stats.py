"""Statistical helpers for probe-length distributions."""

import numpy as np
from typing import Sequence, Tuple


def gini_coefficient(values: Sequence[float]) -> float:
    """Compute Gini coefficient for inequality measurement.

    Args:
        values: Array of non-negative values

    Returns:
        Gini coefficient in [0, 1] (0 = perfect equality, 1 = maximum inequality)
    """
    values = np.asarray(values, dtype=np.float64)
    if len(values) == 0 or np.all(values == 0):
        return 0.0

    values = np.sort(values)
    n = len(values)
    index = np.arange(1, n + 1)
    return float((2 * np.sum(index * values)) / (n * np.sum(values)) - (n + 1) / n)


def mean_ci95(values: Sequence[float]) -> Tuple[float, float, float, float]:
    """Compute mean and 95% confidence interval using normal approximation.

    Used to summarize probe statistics across seeds in benchmarks.

    Args:
        values: Array of float values

    Returns:
        (mean, ci_low, ci_high, std)
    """
    if len(values) == 0:
        return (0.0, 0.0, 0.0, 0.0)

    arr = np.asarray(values, dtype=np.float64)
    n = len(arr)
    mean = float(np.mean(arr))

    if n == 1:
        return (mean, mean, mean, 0.0)

    std = float(np.std(arr, ddof=1))  # Sample standard deviation
    se = std / np.sqrt(n)
    margin = 1.96 * se

    return (mean, mean - margin, mean + margin, std)
