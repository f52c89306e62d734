"""Base hash function interface."""

from typing import Any, Protocol


class HashFunction(Protocol):
    """
    Protocol for hash functions used by the table builder.

    Hash functions map a key to an unsigned integer. They must be
    deterministic for the lifetime of a build; quality only affects probe
    lengths, never correctness.
    """

    def compute(self, key: Any) -> int:
        """
        Hash a key.

        Args:
            key: Table key

        Returns:
            Unsigned integer hash (may be 0; the builder remaps it)
        """
        ...

    def describe(self) -> str:
        """
        Textual descriptor written after the entries in the artifact.

        Returns:
            Descriptor string; has no effect on hashing
        """
        ...
