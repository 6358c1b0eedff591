"""DiffEngine: recursive structural diff between two JSON values.

Walks both values simultaneously and classifies every node as added,
removed, changed or unchanged.  The result is a tree of DiffEntry records
whose root describes the comparison of the two documents as a whole.

Precedence at every path (first rule that applies wins):
1. both null          -> unchanged
2. left null          -> added   (right value + type only)
3. right null         -> removed (left value + type only)
4. type mismatch      -> changed leaf with both values and types, no recursion
                         (object vs array counts as a mismatch)
5. both arrays        -> positional comparison up to the longer length
6. both objects       -> union of keys, left order then right-only keys
7. both primitives    -> ``==`` decides unchanged / changed

Arrays are compared by index, not aligned: an insertion in the middle of an
array shows up as a cascade of changed elements after the insertion point.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from json_insight.diff.entries import DiffEntry, DiffStats, DiffType
from json_insight.tree.paths import ROOT_PATH, child_index_path, child_key_path
from json_insight.types import JsonType, json_type_of

__all__ = ["DiffEngine"]

logger = logging.getLogger(__name__)


@dataclass
class DiffEngine:
    """Computes DiffEntry trees and their leaf statistics.

    Stateless: calling ``compute`` twice with equal inputs yields deep-equal
    trees, and inputs are never mutated (container entries reference the
    original lists and dicts).

    Example::

        engine = DiffEngine()
        tree = engine.compute({"a": 1, "b": 2}, {"a": 1, "b": 3, "c": 4})
        tree[0].type                # DiffType.CHANGED
        engine.stats(tree).as_dict()
        # {"added": 1, "removed": 0, "changed": 1, "unchanged": 1}
    """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compute(self, left: Any, right: Any) -> list[DiffEntry]:
        """Compare two JSON values.

        Args:
            left:  Left (original) JSON value.
            right: Right (modified) JSON value.

        Returns:
            A single-element list holding the root comparison entry (path
            ``""``, key ``"root"``).

        Raises:
            TypeError: If either side contains a value outside the JSON domain.
        """
        return [self._compare(left, right, path="", key=ROOT_PATH, depth=0)]

    def stats(self, entries: list[DiffEntry]) -> DiffStats:
        """Count leaf entries of a diff tree by change type.

        Only entries without ``children`` are counted; counting containers
        too would report every change once per enclosing container.
        """
        stats = DiffStats()
        stack = list(reversed(entries))
        while stack:
            entry = stack.pop()
            if entry.children is None:
                stats.record(entry.type)
            else:
                stack.extend(reversed(entry.children))
        logger.debug("diff stats: %s", stats.as_dict())
        return stats

    # ------------------------------------------------------------------
    # Recursive comparison
    # ------------------------------------------------------------------

    def _compare(self, left: Any, right: Any, path: str, key: str, depth: int) -> DiffEntry:
        left_type = json_type_of(left)
        right_type = json_type_of(right)

        if left_type == JsonType.NULL and right_type == JsonType.NULL:
            return DiffEntry(
                path=path,
                key=key,
                type=DiffType.UNCHANGED,
                depth=depth,
                left_value=left,
                right_value=right,
            )

        if left_type == JsonType.NULL:
            return self._added(right, path, key, depth)

        if right_type == JsonType.NULL:
            return self._removed(left, path, key, depth)

        if left_type != right_type:
            return DiffEntry(
                path=path,
                key=key,
                type=DiffType.CHANGED,
                depth=depth,
                left_value=left,
                right_value=right,
                left_type=left_type,
                right_type=right_type,
            )

        if left_type == JsonType.ARRAY:
            children = self._compare_arrays(left, right, path, depth)
        elif left_type == JsonType.OBJECT:
            children = self._compare_objects(left, right, path, depth)
        else:
            return DiffEntry(
                path=path,
                key=key,
                type=DiffType.UNCHANGED if left == right else DiffType.CHANGED,
                depth=depth,
                left_value=left,
                right_value=right,
            )

        changed = any(child.type != DiffType.UNCHANGED for child in children)
        return DiffEntry(
            path=path,
            key=key,
            type=DiffType.CHANGED if changed else DiffType.UNCHANGED,
            depth=depth,
            left_value=left,
            right_value=right,
            left_type=left_type,
            right_type=right_type,
            children=children,
        )

    def _compare_arrays(
        self, left: list[Any], right: list[Any], path: str, depth: int
    ) -> list[DiffEntry]:
        children: list[DiffEntry] = []
        for index in range(max(len(left), len(right))):
            child_path = child_index_path(path, index)
            child_key = f"[{index}]"
            if index >= len(left):
                children.append(self._added(right[index], child_path, child_key, depth + 1))
            elif index >= len(right):
                children.append(self._removed(left[index], child_path, child_key, depth + 1))
            else:
                children.append(
                    self._compare(left[index], right[index], child_path, child_key, depth + 1)
                )
        return children

    def _compare_objects(
        self, left: dict[str, Any], right: dict[str, Any], path: str, depth: int
    ) -> list[DiffEntry]:
        keys = list(left) + [k for k in right if k not in left]
        children: list[DiffEntry] = []
        for k in keys:
            child_path = child_key_path(path, k)
            if k not in left:
                children.append(self._added(right[k], child_path, k, depth + 1))
            elif k not in right:
                children.append(self._removed(left[k], child_path, k, depth + 1))
            else:
                children.append(self._compare(left[k], right[k], child_path, k, depth + 1))
        return children

    # ------------------------------------------------------------------
    # One-sided entries
    # ------------------------------------------------------------------

    @staticmethod
    def _added(value: Any, path: str, key: str, depth: int) -> DiffEntry:
        return DiffEntry(
            path=path,
            key=key,
            type=DiffType.ADDED,
            depth=depth,
            right_value=value,
            right_type=json_type_of(value),
            has_left=False,
        )

    @staticmethod
    def _removed(value: Any, path: str, key: str, depth: int) -> DiffEntry:
        return DiffEntry(
            path=path,
            key=key,
            type=DiffType.REMOVED,
            depth=depth,
            left_value=value,
            left_type=json_type_of(value),
            has_right=False,
        )
