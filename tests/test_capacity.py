"""Tests for capacity planning."""

import math

import pytest

from staticmap.table import MIN_TABLE_SIZE, capacity_for, next_power_of_two


def test_capacity_properties_small_inputs() -> None:
    """Capacity is a power of two, at least 32, with 10% headroom."""
    for n in range(1, 1001):
        cap = capacity_for(n)
        assert cap & (cap - 1) == 0, f"capacity_for({n}) = {cap} is not a power of two"
        assert cap >= MIN_TABLE_SIZE
        assert cap >= math.ceil(n * 10 / 9), f"capacity_for({n}) = {cap} too small"


def test_capacity_is_smallest_fitting_power() -> None:
    for n in range(1, 1001):
        cap = capacity_for(n)
        if cap > MIN_TABLE_SIZE:
            assert cap // 2 < math.ceil(n * 10 / 9)


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, 32),
        (1, 32),
        (28, 32),  # ceil(280 / 9) = 32
        (29, 64),  # ceil(290 / 9) = 33
        (921, 1024),  # ceil(9210 / 9) = 1024
        (922, 2048),  # ceil(9220 / 9) = 1025
    ],
)
def test_capacity_boundaries(n, expected) -> None:
    assert capacity_for(n) == expected


def test_capacity_rejects_bad_counts() -> None:
    with pytest.raises(ValueError):
        capacity_for(-1)
    with pytest.raises(TypeError):
        capacity_for(10.5)
    with pytest.raises(TypeError):
        capacity_for(True)


def test_next_power_of_two() -> None:
    assert [next_power_of_two(n) for n in range(0, 10)] == [1, 1, 2, 4, 4, 8, 8, 8, 8, 16]
    assert next_power_of_two(1 << 40) == 1 << 40
    assert next_power_of_two((1 << 40) + 1) == 1 << 41
