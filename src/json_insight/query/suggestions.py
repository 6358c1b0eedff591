"""Suggested questions derived from the shape of the first document."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from json_insight.types import JsonType, json_type_of

if TYPE_CHECKING:
    from json_insight.context import JsonContext

__all__ = ["MAX_SUGGESTIONS", "suggest_questions"]

MAX_SUGGESTIONS = 5
_KEYS_SUGGESTED = 3


def suggest_questions(contexts: Sequence[JsonContext]) -> list[str]:
    """Propose up to five plain-text questions about ``contexts[0]``.

    Object roots get one question per leading key (by value kind), a
    top-level keys question and a "List all" question for the first
    shallow, non-empty array.  Array roots get a length and a first-item
    question.  "Compare all tabs" is offered when several documents exist.
    """
    if not contexts:
        return []

    suggestions: list[str] = []
    ctx = contexts[0]
    raw_type = json_type_of(ctx.raw)

    if raw_type == JsonType.OBJECT:
        for key in list(ctx.raw)[:_KEYS_SUGGESTED]:
            value_type = json_type_of(ctx.raw[key])
            if value_type == JsonType.ARRAY:
                suggestions.append(f"How many {key} are there?")
            elif value_type in (JsonType.OBJECT, JsonType.NULL):
                suggestions.append(f"What does {key} contain?")
            else:
                suggestions.append(f"What is the {key}?")

        suggestions.append("What are the top-level keys?")

        for entry in ctx.entries:
            if entry.type == JsonType.ARRAY and entry.size > 0 and entry.depth <= 1:
                suggestions.append(f"List all {entry.key}")
                break
    elif raw_type == JsonType.ARRAY:
        suggestions.append("How many items are in the array?")
        suggestions.append("What is the structure of the first item?")

    if len(contexts) > 1:
        suggestions.append("Compare all tabs")

    return suggestions[:MAX_SUGGESTIONS]
