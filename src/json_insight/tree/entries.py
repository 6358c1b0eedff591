"""FlatEntry dataclass: one record per JSON node produced by the Flattener."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_insight.types import JsonType

__all__ = ["FlatEntry"]


@dataclass(frozen=True, slots=True)
class FlatEntry:
    """A single node of a flattened JSON document.

    Attributes:
        path:        Address of the node, e.g. ``"users[0].name"``; ``"root"``
                     for the document root.
        key:         Final dot-separated component of ``path`` (``"root"`` at
                     the root).  Bracket indices stay attached, so the first
                     element of ``users`` has key ``"users[0]"``.
        value:       The node's value.  Containers hold the original list or
                     dict (shared, never copied or mutated).
        type:        JsonType tag of ``value``.
        depth:       Number of segments below the root (root is 0).
        parent_path: ``path`` with its last dot-separated component removed.
    """

    path: str
    key: str
    value: Any
    type: JsonType
    depth: int
    parent_path: str

    @property
    def is_container(self) -> bool:
        return self.type.is_container

    @property
    def size(self) -> int:
        """Item count for arrays, key count for objects, 0 for primitives."""
        return len(self.value) if self.is_container else 0
