"""Seeded SplitMix64 hash function."""

from typing import Any

from .hash_mix import derive_seed, fnv1a64, key_bytes, mix64, u64


class SplitMixHash:
    """
    Seeded SplitMix64 hash.

    Integer keys are mixed directly: mix64(key ^ salt). Every other key is
    first folded to 64 bits with FNV-1a over its canonical bytes and then
    mixed, which gives FNV's speed with SplitMix's avalanche.
    """

    SALT_CONST = 0x9E3779B97F4A7C15

    def __init__(self, seed: int = 0):
        """
        Initialize SplitMix hash.

        Args:
            seed: Seed (uint64) for deterministic hashing
        """
        if not (0 <= seed < 2**64):
            raise ValueError("seed must be uint64")
        self.seed = seed
        self.salt = derive_seed(seed, self.SALT_CONST)

    def compute(self, key: Any) -> int:
        # bool is an int subclass; route it through bytes so True != 1
        if isinstance(key, int) and not isinstance(key, bool):
            return mix64(u64(key) ^ self.salt)
        return mix64(fnv1a64(key_bytes(key)) ^ self.salt)

    def describe(self) -> str:
        return f"SplitMixHash {{ seed: {self.seed} }}"

    def __repr__(self) -> str:
        return f"SplitMixHash(seed={self.seed})"
