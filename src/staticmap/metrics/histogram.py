"""Dense distribution accumulator for non-negative integer measurements."""

from typing import Dict, List

import numpy as np


class Histogram:
    """Counts of non-negative integer values, indexed by value.

    ``counts[v]`` is the number of times ``v`` was inserted. The count list
    only ever grows, by zero-extension up to a newly seen value.

    Not wired to any builder: feed it whatever statistic you want
    characterized, e.g. each insert's returned probe distance.
    """

    def __init__(self) -> None:
        self.counts: List[int] = []

    def insert(self, value: int) -> None:
        """Record one occurrence of ``value``.

        Args:
            value: Non-negative integer

        Raises:
            TypeError: If value is not an integer
            ValueError: If value is negative
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"histogram values must be int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"histogram values must be non-negative, got {value}")
        if value < len(self.counts):
            self.counts[value] += 1
        else:
            self.counts.extend([0] * (value - len(self.counts)))
            self.counts.append(1)

    def total(self) -> int:
        """Number of recorded values."""
        return sum(self.counts)

    def max_value(self) -> int:
        """Largest recorded value, -1 if nothing was recorded."""
        for idx in range(len(self.counts) - 1, -1, -1):
            if self.counts[idx]:
                return idx
        return -1

    def average(self) -> float:
        """Mean recorded value.

        sum(index * count) / sum(count); NaN when nothing was recorded.
        """
        counts = np.asarray(self.counts, dtype=np.float64)
        weighted = np.sum(np.arange(len(counts)) * counts)
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(weighted) / np.sum(counts))

    def report(self) -> str:
        """``"<index> => <count>, "`` from the first nonzero count onward."""
        parts = []
        started = False
        for idx, count in enumerate(self.counts):
            if not started and count == 0:
                continue
            started = True
            parts.append(f"{idx} => {count}, ")
        return "".join(parts)

    def summary(self) -> Dict:
        """
        Compact summary for diagnostics output.

        Returns:
            Dictionary with:
            - total: int
            - mean: float (NaN when empty)
            - std: float
            - max: int (-1 when empty)
            - p50 / p90 / p99: int percentiles of the recorded values
        """
        total = self.total()
        if total == 0:
            return {
                "total": 0,
                "mean": float("nan"),
                "std": 0.0,
                "max": -1,
                "p50": -1,
                "p90": -1,
                "p99": -1,
            }

        values = np.repeat(np.arange(len(self.counts)), self.counts)
        return {
            "total": int(total),
            "mean": float(values.mean()),
            "std": float(values.std()),
            "max": int(values.max()),
            "p50": int(np.percentile(values, 50, method="lower")),
            "p90": int(np.percentile(values, 90, method="lower")),
            "p99": int(np.percentile(values, 99, method="lower")),
        }

    def __len__(self) -> int:
        return len(self.counts)

    def __str__(self) -> str:
        return self.report()

    def __repr__(self) -> str:
        return f"Histogram(counts={self.counts})"
