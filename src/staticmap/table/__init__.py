"""Static Robin Hood table construction."""

from .builder import (
    MIN_TABLE_SIZE,
    Builder,
    TableFullError,
    capacity_for,
    next_power_of_two,
    remap_hash,
)
from .entry import Entry
from .serializer import serialize, to_string, write_artifact
from .table import EMPTY_HASH, Table

__all__ = [
    "Builder",
    "Entry",
    "Table",
    "TableFullError",
    "EMPTY_HASH",
    "MIN_TABLE_SIZE",
    "capacity_for",
    "next_power_of_two",
    "remap_hash",
    "serialize",
    "to_string",
    "write_artifact",
]
