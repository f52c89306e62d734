"""staticmap: static Robin Hood hash tables emitted as constant data."""

from .config import BuildConfig, load_build_config, load_config
from .hashing import (
    Blake2bHash,
    HashFunction,
    SplitMixHash,
    displacement_histogram,
    hash_collision_rate,
    make_hasher,
    probe_summary,
)
from .metrics import Histogram
from .table import (
    Builder,
    Entry,
    Table,
    TableFullError,
    capacity_for,
    serialize,
    to_string,
    write_artifact,
)
from .utils import Timer, configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Core table
    "Builder",
    "Entry",
    "Table",
    "TableFullError",
    "capacity_for",
    # Serialization
    "serialize",
    "to_string",
    "write_artifact",
    # Hashing
    "HashFunction",
    "SplitMixHash",
    "Blake2bHash",
    "make_hasher",
    # Diagnostics
    "Histogram",
    "displacement_histogram",
    "hash_collision_rate",
    "probe_summary",
    # Config / utils
    "BuildConfig",
    "load_config",
    "load_build_config",
    "get_logger",
    "configure_logging",
    "Timer",
]
