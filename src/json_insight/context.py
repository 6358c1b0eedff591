"""JsonContext: a named document plus its flattened entries.

Contexts are the unit the query engine and the suggestion generator work
over.  They are rebuilt whenever the underlying document changes; nothing
inside a context is ever mutated in place.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from json_insight.tree.entries import FlatEntry
from json_insight.tree.flattener import Flattener

__all__ = ["DocumentTab", "JsonContext", "build_context", "build_contexts"]

# Module-level flattener (stateless, safe to share)
_flattener = Flattener()


@dataclass(frozen=True, slots=True)
class DocumentTab:
    """An open document as seen by the workspace that owns it.

    Attributes:
        id:             Stable identifier of the tab.
        name:           Display name, used to label answers.
        parsed_content: The parsed JSON value, or None if parsing failed.
        is_valid:       Whether the tab's text parsed successfully.
    """

    id: str
    name: str
    parsed_content: Any = None
    is_valid: bool = True


@dataclass(frozen=True, slots=True)
class JsonContext:
    """An analyzable document.

    Attributes:
        tab_name: Display name of the source document.
        tab_id:   Identifier of the source document.
        raw:      The parsed JSON value.
        entries:  Flattener output for ``raw``.
    """

    tab_name: str
    tab_id: str
    raw: Any
    entries: list[FlatEntry] = field(default_factory=list)


def build_context(tab_name: str, tab_id: str, raw: Any) -> JsonContext:
    """Flatten ``raw`` and wrap it in a JsonContext."""
    return JsonContext(
        tab_name=tab_name,
        tab_id=tab_id,
        raw=raw,
        entries=_flattener.flatten(raw),
    )


def build_contexts(tabs: Iterable[DocumentTab]) -> list[JsonContext]:
    """Build one context per valid tab, preserving tab order.

    Tabs that failed to parse, or whose parsed content is None, are skipped.
    """
    return [
        build_context(tab.name, tab.id, tab.parsed_content)
        for tab in tabs
        if tab.is_valid and tab.parsed_content is not None
    ]
