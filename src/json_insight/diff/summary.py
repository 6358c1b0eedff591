"""One-line value summaries for diff rows and assertion messages."""

from __future__ import annotations

from typing import Any

from json_insight.types import JsonType, json_type_of, primitive_text

__all__ = ["short_value"]

_MAX_STRING = 60
_TRUNCATED_STRING = 57


def short_value(value: Any) -> str:
    """Summarise a JSON value in a single short line.

    Strings longer than 60 characters are cut to 57 plus ``...``; arrays and
    objects collapse to their size (``[3 items]``, ``{2 keys}``).
    """
    value_type = json_type_of(value)
    if value_type == JsonType.STRING:
        if len(value) > _MAX_STRING:
            return f'"{value[:_TRUNCATED_STRING]}..."'
        return f'"{value}"'
    if value_type == JsonType.ARRAY:
        return f"[{len(value)} items]"
    if value_type == JsonType.OBJECT:
        return f"{{{len(value)} keys}}"
    return primitive_text(value)
