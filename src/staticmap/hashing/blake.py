"""Keyed BLAKE2b hash function."""

import hashlib
import struct
from typing import Any

from .hash_mix import key_bytes


class Blake2bHash:
    """
    Keyed BLAKE2b hash truncated to 64 bits.

    Slower than SplitMixHash but well distributed for arbitrary byte keys.
    The seed is packed into the BLAKE2b key, so different seeds give
    unrelated hash streams.
    """

    def __init__(self, seed: int = 0):
        """
        Initialize BLAKE2b hash.

        Args:
            seed: Seed (uint64), used as the BLAKE2b key
        """
        if not (0 <= seed < 2**64):
            raise ValueError("seed must be uint64")
        self.seed = seed
        self._key = struct.pack("<Q", seed)

    def compute(self, key: Any) -> int:
        digest = hashlib.blake2b(key_bytes(key), digest_size=8, key=self._key).digest()
        return struct.unpack("<Q", digest)[0]

    def describe(self) -> str:
        return f"Blake2bHash {{ seed: {self.seed} }}"

    def __repr__(self) -> str:
        return f"Blake2bHash(seed={self.seed})"
