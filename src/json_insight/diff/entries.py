"""DiffType StrEnum, DiffEntry tree node and DiffStats leaf counters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_insight.types import JsonType

__all__ = ["DiffEntry", "DiffStats", "DiffType"]


class DiffType(StrEnum):
    """Change classification of a compared node.

    - ADDED     -> "added"     : present on the right side only
    - REMOVED   -> "removed"   : present on the left side only
    - CHANGED   -> "changed"   : differs (containers: some descendant differs)
    - UNCHANGED -> "unchanged" : identical on both sides
    """

    ADDED = auto()
    REMOVED = auto()
    CHANGED = auto()
    UNCHANGED = auto()


@dataclass(frozen=True, slots=True)
class DiffEntry:
    """One compared JSON node.

    Attributes:
        path:        Address of the node; ``""`` for the compared roots.
        key:         Object key, ``"[i]"`` for array elements, ``"root"`` at the root.
        type:        Change classification (see DiffType).
        depth:       Nesting depth (root is 0).
        left_value:  Value on the left side, when ``has_left``.
        right_value: Value on the right side, when ``has_right``.
        left_type:   JsonType of the left value for added/removed, type-mismatch
                     and container entries; None otherwise.
        right_type:  JsonType of the right value, same rule as ``left_type``.
        children:    Child entries for containers of the same kind on both
                     sides; None for leaves.
        has_left:    Whether ``left_value`` is populated.  ``None`` is a valid
                     JSON value, so presence cannot be read off the value.
        has_right:   Whether ``right_value`` is populated.
    """

    path: str
    key: str
    type: DiffType
    depth: int
    left_value: Any = None
    right_value: Any = None
    left_type: JsonType | None = None
    right_type: JsonType | None = None
    children: list[DiffEntry] | None = None
    has_left: bool = True
    has_right: bool = True

    @property
    def is_leaf(self) -> bool:
        return self.children is None


@dataclass(slots=True)
class DiffStats:
    """Leaf-level change counters for a diff tree.

    Containers are never counted: their status is implied by their leaves.
    """

    added: int = 0
    removed: int = 0
    changed: int = 0
    unchanged: int = 0

    @property
    def is_identical(self) -> bool:
        """True when nothing was added, removed or changed."""
        return self.added == 0 and self.removed == 0 and self.changed == 0

    def record(self, diff_type: DiffType) -> None:
        """Increment the counter matching ``diff_type``."""
        setattr(self, diff_type.value, getattr(self, diff_type.value) + 1)

    def as_dict(self) -> dict[str, int]:
        return {
            "added": self.added,
            "removed": self.removed,
            "changed": self.changed,
            "unchanged": self.unchanged,
        }
