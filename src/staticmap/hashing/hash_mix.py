"""Hash mixing functions for slot hashing.

This module provides deterministic 64-bit hash mixing functions based on
SplitMix64 and FNV-1a. All functions operate on Python ints and are
platform-independent, so a table built twice from the same input hashes
identically.
"""

from typing import Any

MASK64 = (1 << 64) - 1

FNV_OFFSET_BASIS = 0xCBF29CE484222325
FNV_PRIME = 0x100000001B3


def u64(x: int) -> int:
    """Force integer into unsigned 64-bit domain.

    Args:
        x: Input integer (can be negative or any size)

    Returns:
        Unsigned 64-bit integer (value modulo 2^64)
    """
    return x & MASK64


def mix64(x: int) -> int:
    """64-bit mixing function based on SplitMix64.

    Applies three rounds of XOR-shift and multiplication to thoroughly
    mix the bits of a 64-bit value.

    Args:
        x: Input value (will be masked to 64 bits)

    Returns:
        Mixed 64-bit unsigned integer
    """
    z = u64(x)

    # Round 1: XOR-shift right 30, multiply
    z = u64((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9)

    # Round 2: XOR-shift right 27, multiply
    z = u64((z ^ (z >> 27)) * 0x94D049BB133111EB)

    # Round 3: Final XOR-shift right 31
    return u64(z ^ (z >> 31))


def fnv1a64(data: bytes, basis: int = FNV_OFFSET_BASIS) -> int:
    """FNV-1a over a byte string, 64-bit.

    Args:
        data: Bytes to hash
        basis: Starting state (defaults to the FNV offset basis)

    Returns:
        64-bit unsigned hash
    """
    h = u64(basis)
    for byte in data:
        h = u64((h ^ byte) * FNV_PRIME)
    return h


def key_bytes(key: Any) -> bytes:
    """Canonical byte encoding of a key.

    ``bytes``/``bytearray`` pass through, ``str`` is UTF-8 encoded, and
    anything else is encoded through its ``repr`` so that ``1`` and ``"1"``
    hash differently.

    Args:
        key: Table key

    Returns:
        Bytes fed to the byte-oriented hashers
    """
    if isinstance(key, (bytes, bytearray)):
        return bytes(key)
    if isinstance(key, str):
        return key.encode("utf-8")
    return repr(key).encode("utf-8")


def derive_seed(base: int, salt: int) -> int:
    """Derive a seed from base and salt using mixing.

    Args:
        base: Base seed value
        salt: Salt value to mix with base

    Returns:
        Mixed seed value (64-bit unsigned)
    """
    return mix64(u64(base) ^ u64(salt))
