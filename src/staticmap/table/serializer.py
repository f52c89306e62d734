"""Render a finished table as a constant map literal.

The artifact template is fixed::

    Map {
     hashes: &[<hash>, ...  ],
      entries: &[
    (<key>, <value>), ...  ],
      hasher: <descriptor>,};

Every slot is written in slot order, empty ones included, in a single
forward pass. Sink errors propagate to the caller unchanged.
"""

import io
from pathlib import Path
from typing import TYPE_CHECKING, TextIO, Union

from staticmap.utils.log import get_logger

if TYPE_CHECKING:
    from staticmap.table.builder import Builder

logger = get_logger(__name__)

MAP_OPEN = "Map {\n hashes: &["
HASHES_CLOSE = "  ],\n  entries: &[  \n"
ENTRIES_CLOSE = "  ],\n"
MAP_CLOSE = "};\n\n"


def serialize(builder: "Builder", sink: TextIO) -> None:
    """Stream the table and hash descriptor to a text sink.

    Args:
        builder: Finished builder (read only)
        sink: Any object with a ``write(str)`` method
    """
    table = builder.table

    sink.write(MAP_OPEN)
    for h in table.hashes:
        sink.write(f"{h}, ")
    sink.write(HASHES_CLOSE)

    for entry in table.entries:
        sink.write(f"{entry.render()}, ")
    sink.write(ENTRIES_CLOSE)

    sink.write(f"  hasher: {builder.hasher.describe()},")
    sink.write(MAP_CLOSE)


def to_string(builder: "Builder") -> str:
    """Serialize to an in-memory string."""
    buf = io.StringIO()
    serialize(builder, buf)
    return buf.getvalue()


def write_artifact(builder: "Builder", path: Union[str, Path]) -> int:
    """Serialize to a UTF-8 file.

    Args:
        builder: Finished builder
        path: Output file path (parent directories are created)

    Returns:
        Size of the written file in bytes
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        serialize(builder, f)
        written = f.tell()
    logger.debug("Wrote %d bytes to %s", written, path)
    return written
