"""Robin Hood table builder.

Entries are inserted once, in any order, into a table sized up front from
the expected entry count. On a probe collision the entry that is farther
from its ideal slot keeps the slot and the richer occupant moves on, which
bounds the longest probe sequence of the finished table.
"""

import operator
from typing import TYPE_CHECKING, Any, List, TextIO

from staticmap.hashing import make_hasher
from staticmap.hashing.base import HashFunction
from staticmap.table.entry import Entry
from staticmap.table.serializer import serialize
from staticmap.table.table import EMPTY_HASH, Table
from staticmap.utils.log import get_logger

if TYPE_CHECKING:
    from staticmap.config import BuildConfig

logger = get_logger(__name__)

MIN_TABLE_SIZE = 32

# Load factor ceiling expressed as a ratio: capacity >= n * 10 / 9
LOAD_NUM = 10
LOAD_DEN = 9


class TableFullError(RuntimeError):
    """Raised when inserting into a table with no empty slot left."""


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 1)."""
    return 1 << max(n - 1, 0).bit_length()


def capacity_for(n: int) -> int:
    """Compute table capacity for an expected entry count.

    capacity = max(32, next_power_of_two(ceil(n * 10 / 9)))

    Args:
        n: Expected number of entries

    Returns:
        Power-of-two capacity keeping the load factor at or below 90%

    Raises:
        TypeError: If n is not an integer
        ValueError: If n is negative
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected entry count must be int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"expected entry count must be non-negative, got {n}")
    target = -(-n * LOAD_NUM // LOAD_DEN)
    return max(next_power_of_two(target), MIN_TABLE_SIZE)


def remap_hash(h: int) -> int:
    """Move a genuine hash of 0 off the empty-slot sentinel."""
    return 1 if h == EMPTY_HASH else h


class Builder:
    """Robin Hood hash table builder.

    Owns one Table and one hash function for its whole lifetime. The table
    is never resized, so the caller must not insert more entries than
    ``capacity``; doing so raises TableFullError. Duplicate keys are not
    detected and each insert occupies its own slot.
    """

    def __init__(self, expected_entries: int, hasher: HashFunction, empty_key: Any = ""):
        """
        Initialize builder.

        Args:
            expected_entries: Number of entries the caller plans to insert
            hasher: Hash function exposing compute(key) and describe()
            empty_key: Key rendered for unoccupied slots
        """
        self.hasher = hasher
        self.table = Table(capacity_for(expected_entries), empty_key=empty_key)
        logger.debug(
            "Sized table for %d entries: capacity=%d",
            expected_entries,
            self.table.capacity,
        )

    @classmethod
    def from_config(cls, cfg: "BuildConfig") -> "Builder":
        """Create a builder from a validated BuildConfig."""
        return cls(
            cfg.expected_entries,
            make_hasher(cfg.hasher, cfg.seed),
            empty_key=cfg.empty_key,
        )

    @property
    def capacity(self) -> int:
        return self.table.capacity

    @property
    def hashes(self) -> List[int]:
        return self.table.hashes

    @property
    def entries(self) -> List[Entry]:
        return self.table.entries

    def __len__(self) -> int:
        return self.table.occupied

    def hash(self, key: Any) -> int:
        """Hash a key and remap the empty sentinel.

        Args:
            key: Table key

        Returns:
            Non-zero unsigned hash as stored in the table

        Raises:
            TypeError: If the hash function returns a non-integer
            ValueError: If the hash function returns a negative value
        """
        h = operator.index(self.hasher.compute(key))
        if h < 0:
            raise ValueError(f"hash function returned negative value {h} for key {key!r}")
        return remap_hash(h)

    def insert(self, key: Any, value: str) -> int:
        """
        Insert one entry using Robin Hood displacement.

        Args:
            key: Table key
            value: Opaque payload string

        Returns:
            Probe distance at which the loop placed an entry into an empty
            slot. Equals the new entry's displacement unless it displaced
            a richer occupant along the way.

        Raises:
            TableFullError: If every slot is already occupied
            TypeError: If value is not a string
        """
        if not isinstance(value, str):
            raise TypeError(f"value must be str, got {type(value).__name__}")

        table = self.table
        if table.is_full():
            raise TableFullError(
                f"table is full: capacity {table.capacity} reached, "
                "expected_entries was too small"
            )

        mask = table.mask
        h = self.hash(key)
        pos = h & mask
        dist = 0
        entry = Entry(key, value)

        # At least one slot is empty, so the scan ends within capacity steps
        while True:
            probe_hash = table.hashes[pos]

            if probe_hash == EMPTY_HASH:
                table.hashes[pos] = h
                table.entries[pos] = entry
                table.occupied += 1
                return dist

            probe_dist = (pos - probe_hash) & mask

            if probe_dist < dist:
                table.hashes[pos], h = h, probe_hash
                table.entries[pos], entry = entry, table.entries[pos]
                dist = probe_dist

            pos = (pos + 1) & mask
            dist += 1

    def displacements(self) -> List[int]:
        """Displacement of every occupied slot, in slot order."""
        return [self.table.displacement(pos) for pos, _, _ in self.table.iter_occupied()]

    def build(self, sink: TextIO) -> None:
        """Serialize the finished table to ``sink``."""
        serialize(self, sink)

    def __repr__(self) -> str:
        return (
            f"Builder(capacity={self.capacity}, occupied={len(self)}, "
            f"hasher={self.hasher.describe()})"
        )
