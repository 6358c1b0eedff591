"""format_value: bounded-verbosity rendering of JSON values inside answers.

Expansion is capped at one nested level: the top-level value may be spread
over several lines, its members are rendered inline or summarised.  The
limits below are part of the answer format and must stay fixed so answer
strings remain stable.
"""

from __future__ import annotations

from typing import Any

from json_insight.types import JsonType, json_type_of, primitive_text

__all__ = ["code_span", "format_value"]

# Arrays of at most this many primitives render on a single line
INLINE_ARRAY_LIMIT = 8
# Containers are only expanded line-by-line while depth < EXPAND_DEPTH
EXPAND_DEPTH = 1
EXPAND_ARRAY_LIMIT = 5
EXPAND_OBJECT_LIMIT = 6

_INDENT = "  "


def code_span(text: str) -> str:
    """Wrap document-derived ``text`` in an inline code span.

    Backticks inside ``text`` become single quotes so the span cannot end
    early; everything else is kept verbatim, including ``*`` and ``_``.
    """
    return "`" + text.replace("`", "'") + "`"


def format_value(value: Any, depth: int = 0) -> str:
    """Render ``value`` for an answer string.

    - null -> ``null``; strings are double-quoted; numbers and booleans are
      written as JSON literals.
    - Arrays: ``[] (empty array)``; up to 8 primitive elements on one line;
      otherwise, at depth 0 with up to 5 elements, one element per line;
      otherwise ``Array with N items``.
    - Objects: ``{} (empty object)``; at depth 0 with up to 6 keys, one
      ``key: value`` per line; otherwise ``Object with keys: a, b, ...``.
    """
    value_type = json_type_of(value)

    if value_type == JsonType.STRING:
        return f'"{value}"'
    if value_type == JsonType.ARRAY:
        return _format_array(value, depth)
    if value_type == JsonType.OBJECT:
        return _format_object(value, depth)
    return primitive_text(value)


def _format_array(items: list[Any], depth: int) -> str:
    if not items:
        return "[] (empty array)"
    if len(items) <= INLINE_ARRAY_LIMIT and not any(
        json_type_of(item).is_container for item in items
    ):
        return "[" + ", ".join(format_value(item, depth + 1) for item in items) + "]"
    if depth < EXPAND_DEPTH and len(items) <= EXPAND_ARRAY_LIMIT:
        lines = [_INDENT + format_value(item, depth + 1) for item in items]
        return "[\n" + ",\n".join(lines) + "\n]"
    return f"Array with {len(items)} items"


def _format_object(obj: dict[str, Any], depth: int) -> str:
    if not obj:
        return "{} (empty object)"
    if depth < EXPAND_DEPTH and len(obj) <= EXPAND_OBJECT_LIMIT:
        lines = [f"{_INDENT}{key}: {format_value(item, depth + 1)}" for key, item in obj.items()]
        return "{\n" + ",\n".join(lines) + "\n}"
    return f"Object with keys: {', '.join(obj)}"
