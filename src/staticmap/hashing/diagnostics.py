"""Diagnostic functions for probe-length and hash-quality analysis."""

from typing import TYPE_CHECKING, Any, Dict, Iterable

import numpy as np

from staticmap.metrics.histogram import Histogram
from staticmap.metrics.stats import gini_coefficient

if TYPE_CHECKING:
    from staticmap.hashing.base import HashFunction
    from staticmap.table.builder import Builder


def displacement_histogram(builder: "Builder") -> Histogram:
    """
    Histogram of the final displacement of every occupied slot.

    Args:
        builder: Builder (usually finished)

    Returns:
        Histogram indexed by displacement
    """
    hist = Histogram()
    for d in builder.displacements():
        hist.insert(d)
    return hist


def ideal_slot_loads(builder: "Builder") -> np.ndarray:
    """
    Number of stored entries whose ideal slot is each slot index.

    Args:
        builder: Builder

    Returns:
        Array of counts per slot, shape [capacity]
    """
    table = builder.table
    ideal = [h & table.mask for _, h, _ in table.iter_occupied()]
    return np.bincount(np.asarray(ideal, dtype=np.int64), minlength=table.capacity)


def probe_summary(builder: "Builder") -> Dict:
    """
    Compute a compact summary of table quality.

    Args:
        builder: Builder (usually finished)

    Returns:
        Dictionary with:
        - capacity: int
        - occupied: int
        - load_factor: float
        - max_displacement: int (-1 when empty)
        - mean_displacement: float (NaN when empty)
        - std_displacement: float
        - displaced_fraction: float (entries not in their ideal slot)
        - max_ideal_load: int (most keys sharing one ideal slot)
        - gini_ideal_load: float
        - histogram: str (displacement histogram report)
    """
    table = builder.table
    displacements = np.asarray(builder.displacements(), dtype=np.int64)
    hist = displacement_histogram(builder)
    loads = ideal_slot_loads(builder)

    if len(displacements) == 0:
        return {
            "capacity": table.capacity,
            "occupied": 0,
            "load_factor": 0.0,
            "max_displacement": -1,
            "mean_displacement": float("nan"),
            "std_displacement": 0.0,
            "displaced_fraction": 0.0,
            "max_ideal_load": 0,
            "gini_ideal_load": 0.0,
            "histogram": "",
        }

    return {
        "capacity": table.capacity,
        "occupied": int(table.occupied),
        "load_factor": float(table.load_factor),
        "max_displacement": int(displacements.max()),
        "mean_displacement": float(displacements.mean()),
        "std_displacement": float(displacements.std()),
        "displaced_fraction": float(np.mean(displacements > 0)),
        "max_ideal_load": int(loads.max()),
        "gini_ideal_load": gini_coefficient(loads[loads > 0]),
        "histogram": hist.report(),
    }


def hash_collision_rate(hasher: "HashFunction", keys: Iterable[Any]) -> float:
    """
    Fraction of keys whose full hash duplicates an earlier key's hash.

    Args:
        hasher: Hash function under test
        keys: Keys to hash

    Returns:
        Collision rate (0 to 1), 0.0 for no keys
    """
    hashes = [hasher.compute(k) for k in keys]
    if not hashes:
        return 0.0
    return 1.0 - len(set(hashes)) / len(hashes)
