"""Fixed-capacity slot storage for the Robin Hood builder."""

from typing import Any, Iterator, List, Tuple

from .entry import Entry

# Reserved stored hash for an unoccupied slot
EMPTY_HASH = 0


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


class Table:
    """Two index-aligned slot sequences: stored hashes and stored entries.

    Slot ``i`` is empty iff ``hashes[i] == EMPTY_HASH``; the entry in an empty
    slot is a placeholder and carries no meaning. The table is allocated once
    and never resized.

    Attributes:
        hashes: Stored (remapped) hash per slot
        entries: Stored entry per slot
        capacity: Number of slots, a power of two
    """

    def __init__(self, capacity: int, empty_key: Any = ""):
        """Allocate an empty table.

        Args:
            capacity: Number of slots (power of two)
            empty_key: Key rendered for unoccupied slots

        Raises:
            ValueError: If capacity is not a power of two
        """
        if not is_power_of_two(capacity):
            raise ValueError(f"capacity must be power of 2, got {capacity}")

        self.capacity = capacity
        self.empty_key = empty_key
        self.hashes: List[int] = [EMPTY_HASH] * capacity
        self.entries: List[Entry] = [Entry(empty_key, "") for _ in range(capacity)]
        self.occupied = 0

    @property
    def mask(self) -> int:
        return self.capacity - 1

    @property
    def load_factor(self) -> float:
        return self.occupied / self.capacity

    def is_empty(self, pos: int) -> bool:
        return self.hashes[pos] == EMPTY_HASH

    def is_full(self) -> bool:
        return self.occupied >= self.capacity

    def displacement(self, pos: int) -> int:
        """Probe distance of the entry stored at ``pos`` from its ideal slot.

        Args:
            pos: Slot index

        Returns:
            Distance in slots, wrapping around the end of the table

        Raises:
            ValueError: If the slot is empty
        """
        if self.is_empty(pos):
            raise ValueError(f"slot {pos} is empty")
        return (pos - self.hashes[pos]) & self.mask

    def iter_occupied(self) -> Iterator[Tuple[int, int, Entry]]:
        """Yield ``(pos, hash, entry)`` for every occupied slot in slot order."""
        for pos, h in enumerate(self.hashes):
            if h != EMPTY_HASH:
                yield pos, h, self.entries[pos]

    def __len__(self) -> int:
        return self.occupied

    def __repr__(self) -> str:
        return f"Table(capacity={self.capacity}, occupied={self.occupied})"
