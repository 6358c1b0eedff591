"""Flattener: converts any valid JSON value into an ordered list of FlatEntry.

Uses recursive pre-order dispatch: every node, containers included, produces
exactly one entry, and a container's entry precedes the entries of all of its
descendants.  Empty arrays and objects still get their own entry, which is
what lets "how many X" questions see containers with zero children.

Paths are built during traversal:
- Root is ``"root"`` when no prefix is supplied
- Object members append ``.key`` (bare ``key`` directly below the root)
- Array elements append ``[index]``
- The empty key, and ``root`` directly below the root, use ``[""]`` / ``["root"]``
  so no descendant path is empty or equal to ``"root"``
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_insight.tree.entries import FlatEntry
from json_insight.tree.paths import (
    ROOT_PATH,
    child_index_path,
    child_key_path,
    last_segment,
    parent_path,
)
from json_insight.types import JsonType, json_type_of

__all__ = ["Flattener"]


@dataclass
class Flattener:
    """Converts any valid JSON value into a flat, path-addressable entry list.

    The flattener never copies or mutates its input: container entries hold a
    reference to the original list or dict.

    Example::
        flattener = Flattener()
        entries = flattener.flatten({"x": [1, 2]})
        # [root (object), x (array), x[0] (number), x[1] (number)]
    """

    def flatten(self, value: Any, prefix: str = "", depth: int = 0) -> list[FlatEntry]:
        """Flatten a JSON value into pre-order FlatEntry records.

        Args:
            value:  Any valid JSON value (dict, list, str, int, float, bool, None).
            prefix: Path of ``value``.  Defaults to "" (the document root).
            depth:  Depth of ``value``.  Defaults to 0.

        Returns:
            Entries for ``value`` and all of its descendants, in pre-order.

        Raises:
            TypeError: If value (or anything nested in it) is not a valid JSON type.
        """
        entries: list[FlatEntry] = []
        self._visit(value, prefix, depth, entries)
        return entries

    def _visit(
        self, value: Any, prefix: str, depth: int, entries: list[FlatEntry]
    ) -> None:
        value_type = json_type_of(value)
        entries.append(self._make_entry(value, value_type, prefix, depth))

        if value_type == JsonType.ARRAY:
            for index, item in enumerate(value):
                self._visit(item, child_index_path(prefix, index), depth + 1, entries)
        elif value_type == JsonType.OBJECT:
            for key, item in value.items():
                self._visit(item, child_key_path(prefix, key), depth + 1, entries)

    @staticmethod
    def _make_entry(
        value: Any, value_type: JsonType, prefix: str, depth: int
    ) -> FlatEntry:
        return FlatEntry(
            path=prefix or ROOT_PATH,
            key=last_segment(prefix),
            value=value,
            type=value_type,
            depth=depth,
            parent_path=parent_path(prefix),
        )
