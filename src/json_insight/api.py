"""Public API functions for json-insight.

This module provides the five user-facing functions: flatten, diff,
diff_stats, answer and suggest.  Each call creates a fresh engine object to
guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from json_insight.context import JsonContext
from json_insight.diff.engine import DiffEngine
from json_insight.diff.entries import DiffEntry, DiffStats
from json_insight.query.config import QueryConfig
from json_insight.query.engine import QueryEngine
from json_insight.query.suggestions import suggest_questions
from json_insight.tree.entries import FlatEntry
from json_insight.tree.flattener import Flattener

__all__ = ["answer", "diff", "diff_stats", "flatten", "suggest"]


def flatten(value: Any) -> list[FlatEntry]:
    """Flatten a JSON value into pre-order, path-addressable entries.

    Args:
        value: Any JSON value (dict, list, str, int, float, bool, None).

    Returns:
        One ``FlatEntry`` per node, containers included; the root entry has
        path ``"root"``.
    """
    return Flattener().flatten(value)


def diff(left: Any, right: Any) -> list[DiffEntry]:
    """Compare two JSON values.

    Args:
        left:  Original JSON value.
        right: Modified JSON value.

    Returns:
        A single-element list holding the root ``DiffEntry``; nested changes
        hang off its ``children``.
    """
    return DiffEngine().compute(left, right)


def diff_stats(entries: list[DiffEntry]) -> DiffStats:
    """Count the leaf entries of a diff tree by change type."""
    return DiffEngine().stats(entries)


def answer(
    question: str,
    contexts: Sequence[JsonContext],
    config: QueryConfig | None = None,
) -> str:
    """Answer a free-text question about one or more documents.

    Args:
        question: The user's question, e.g. ``"How many users are there?"``.
        contexts: Documents to search, typically from ``build_contexts``.
        config:   Stop words and scoring weights.  Defaults to ``QueryConfig()``.

    Returns:
        An answer string using ``**bold**``, inline code and ``_italic_`` markup.
    """
    return QueryEngine(config=config).answer(question, contexts)


def suggest(contexts: Sequence[JsonContext]) -> list[str]:
    """Return up to five plain-text questions worth asking about ``contexts``."""
    return suggest_questions(contexts)
