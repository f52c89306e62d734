"""Key/value record stored in a table slot."""

from dataclasses import dataclass
from typing import Any


@dataclass
class Entry:
    """A table slot's payload.

    Attributes:
        key: Table key; must be hashable, comparable and render via str()
        value: Opaque serialized payload, never interpreted by the builder
    """

    key: Any = ""
    value: str = ""

    def render(self) -> str:
        """Render as ``(key, value)`` for the emitted artifact."""
        return f"({self.key}, {self.value})"

    def __str__(self) -> str:
        return self.render()
