"""Case-insensitive substring search over JSON values and flattened entries."""

from __future__ import annotations

from typing import Any

from json_insight.tree.entries import FlatEntry
from json_insight.types import JsonType, json_type_of, primitive_text

__all__ = ["has_search_match", "search_entries"]


def has_search_match(value: Any, query: str) -> bool:
    """Return True if ``query`` occurs anywhere inside ``value``.

    Strings, numbers and booleans match on their JSON text; arrays match if
    any element matches; objects match if any key or any member value
    matches.  null never matches, and an empty query matches nothing.
    """
    if not query:
        return False
    return _search(value, query.lower())


def _search(value: Any, needle: str) -> bool:
    value_type = json_type_of(value)
    if value_type == JsonType.NULL:
        return False
    if value_type == JsonType.ARRAY:
        return any(_search(item, needle) for item in value)
    if value_type == JsonType.OBJECT:
        return any(
            needle in key.lower() or _search(item, needle) for key, item in value.items()
        )
    return needle in primitive_text(value).lower()


def search_entries(entries: list[FlatEntry], query: str) -> list[FlatEntry]:
    """Entries whose key or primitive value contains ``query``, in original order."""
    if not query:
        return []
    needle = query.lower()
    return [
        entry
        for entry in entries
        if needle in entry.key.lower()
        or (
            not entry.is_container
            and entry.type != JsonType.NULL
            and needle in primitive_text(entry.value).lower()
        )
    ]
