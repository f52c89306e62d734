"""Hashing modules for staticmap."""

from .base import HashFunction
from .blake import Blake2bHash
from .diagnostics import (
    displacement_histogram,
    hash_collision_rate,
    ideal_slot_loads,
    probe_summary,
)
from .splitmix import SplitMixHash

HASHERS = {
    "splitmix": SplitMixHash,
    "blake2b": Blake2bHash,
}


def make_hasher(name: str, seed: int = 0) -> HashFunction:
    """Instantiate a registered hash function by name.

    Args:
        name: Registry name ("splitmix" or "blake2b")
        seed: Seed (uint64)

    Returns:
        Hash function instance

    Raises:
        ValueError: If name is not registered
    """
    if name not in HASHERS:
        raise ValueError(f"hasher must be one of {sorted(HASHERS)}, got {name!r}")
    return HASHERS[name](seed=seed)


__all__ = [
    "HASHERS",
    "HashFunction",
    "SplitMixHash",
    "Blake2bHash",
    "make_hasher",
    "displacement_histogram",
    "hash_collision_rate",
    "ideal_slot_loads",
    "probe_summary",
]
