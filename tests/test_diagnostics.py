"""Tests for probe diagnostics and stats helpers."""

import math

import numpy as np
import pytest

from staticmap import Builder, SplitMixHash, displacement_histogram, probe_summary
from staticmap.hashing import ideal_slot_loads
from staticmap.metrics import gini_coefficient, mean_ci95


def test_summary_for_packed_cluster(constant_hash) -> None:
    builder = Builder(5, constant_hash)
    for i in range(5):
        builder.insert(i, "")

    summary = probe_summary(builder)

    assert summary["capacity"] == 32
    assert summary["occupied"] == 5
    assert summary["load_factor"] == pytest.approx(5 / 32)
    assert summary["max_displacement"] == 4
    assert summary["mean_displacement"] == pytest.approx(2.0)
    assert summary["displaced_fraction"] == pytest.approx(0.8)
    assert summary["max_ideal_load"] == 5
    assert summary["histogram"] == "0 => 1, 1 => 1, 2 => 1, 3 => 1, 4 => 1, "


def test_summary_for_empty_builder(identity_hash) -> None:
    summary = probe_summary(Builder(0, identity_hash))
    assert summary["occupied"] == 0
    assert summary["max_displacement"] == -1
    assert math.isnan(summary["mean_displacement"])


def test_displacement_histogram_matches_inserts(seed) -> None:
    builder = Builder(500, SplitMixHash(seed=seed))
    for i in range(500):
        builder.insert(f"k{i}", "")

    hist = displacement_histogram(builder)
    assert hist.total() == 500
    assert hist.average() == pytest.approx(np.mean(builder.displacements()))


def test_ideal_slot_loads(seed) -> None:
    builder = Builder(200, SplitMixHash(seed=seed))
    for i in range(200):
        builder.insert(i, "")

    loads = ideal_slot_loads(builder)
    assert loads.shape == (builder.capacity,)
    assert int(loads.sum()) == 200


def test_gini_coefficient() -> None:
    assert gini_coefficient([]) == 0.0
    assert gini_coefficient([3, 3, 3]) == pytest.approx(0.0)
    assert gini_coefficient([0, 0, 0, 10]) == pytest.approx(0.75)


def test_mean_ci95() -> None:
    assert mean_ci95([]) == (0.0, 0.0, 0.0, 0.0)
    assert mean_ci95([2.0]) == (2.0, 2.0, 2.0, 0.0)
    mean, low, high, std = mean_ci95([1.0, 2.0, 3.0])
    assert mean == pytest.approx(2.0)
    assert std == pytest.approx(1.0)
    assert low < mean < high
