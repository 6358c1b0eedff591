"""json-insight - flatten, diff and query arbitrary JSON documents."""

from __future__ import annotations

from json_insight.api import answer, diff, diff_stats, flatten, suggest
from json_insight.context import DocumentTab, JsonContext, build_context, build_contexts
from json_insight.diff import DiffEngine, DiffEntry, DiffStats, DiffType
from json_insight.query import QueryConfig, QueryEngine
from json_insight.search import has_search_match, search_entries
from json_insight.tree import FlatEntry, Flattener
from json_insight.types import JsonType

__version__: str = "0.1.0"
__all__: list[str] = [
    "DiffEngine",
    "DiffEntry",
    "DiffStats",
    "DiffType",
    "DocumentTab",
    "FlatEntry",
    "Flattener",
    "JsonContext",
    "JsonType",
    "QueryConfig",
    "QueryEngine",
    "answer",
    "build_context",
    "build_contexts",
    "diff",
    "diff_stats",
    "flatten",
    "has_search_match",
    "search_entries",
    "suggest",
]
