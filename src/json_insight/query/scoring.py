"""Keyword relevance scoring for flattened entries.

Formula, per entry (weights come from QueryConfig)::

    score = sum over kw of [ 10 if key == kw  else 6 if kw in key ]
                         + [  4 if kw in path ]
                         + [  2 if kw in value_text ]
          + 3 if the entry is a primitive leaf
          - 0.5 * depth

Key and path comparisons are case-insensitive.  Ranking keeps entries with
a strictly positive score and sorts them by descending score; the sort is
stable, so equal scores keep traversal order (and context order across
documents).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from json_insight.query.config import QueryConfig
from json_insight.types import JsonType, json_type_of, primitive_text

if TYPE_CHECKING:
    from json_insight.context import JsonContext
    from json_insight.tree.entries import FlatEntry

__all__ = ["ScoredEntry", "rank_contexts", "rank_entries", "score_entry", "value_text"]


@dataclass(frozen=True, slots=True)
class ScoredEntry:
    """A ranked entry together with the document it came from."""

    entry: FlatEntry
    score: float
    context: JsonContext | None = None


def value_text(value: Any) -> str:
    """Searchable text of a value.

    null renders as the empty string; arrays join their elements' text with
    commas; objects contribute no text (their members are scored as entries
    of their own).
    """
    value_type = json_type_of(value)
    if value_type == JsonType.NULL or value_type == JsonType.OBJECT:
        return ""
    if value_type == JsonType.ARRAY:
        return ",".join(value_text(item) for item in value)
    return primitive_text(value)


def score_entry(
    entry: FlatEntry, keywords: Sequence[str], config: QueryConfig | None = None
) -> float:
    """Relevance of ``entry`` to ``keywords``; may be zero or negative."""
    cfg = config if config is not None else QueryConfig()
    key = entry.key.lower()
    path = entry.path.lower()
    text = value_text(entry.value).lower()

    score = 0.0
    for kw in keywords:
        if key == kw:
            score += cfg.exact_key_weight
        elif kw in key:
            score += cfg.partial_key_weight
        if kw in path:
            score += cfg.path_weight
        if kw in text:
            score += cfg.value_weight

    if not entry.is_container:
        score += cfg.leaf_bonus
    score -= entry.depth * cfg.depth_penalty
    return score


def rank_entries(
    entries: Iterable[FlatEntry],
    keywords: Sequence[str],
    config: QueryConfig | None = None,
    context: JsonContext | None = None,
) -> list[ScoredEntry]:
    """Score ``entries`` and return those above zero, best first."""
    return _rank([(context, entry) for entry in entries], keywords, config)


def rank_contexts(
    contexts: Iterable[JsonContext],
    keywords: Sequence[str],
    config: QueryConfig | None = None,
) -> list[ScoredEntry]:
    """Score every entry of every context as one corpus, best first."""
    return _rank(
        [(ctx, entry) for ctx in contexts for entry in ctx.entries], keywords, config
    )


def _rank(
    candidates: list[tuple[JsonContext | None, FlatEntry]],
    keywords: Sequence[str],
    config: QueryConfig | None,
) -> list[ScoredEntry]:
    if not candidates:
        return []

    scores = np.fromiter(
        (score_entry(entry, keywords, config) for _, entry in candidates),
        dtype=np.float64,
        count=len(candidates),
    )
    positive = np.flatnonzero(scores > 0.0)
    # Stable sort on the negated scores keeps traversal order among ties
    order = positive[np.argsort(-scores[positive], kind="stable")]

    return [
        ScoredEntry(
            entry=candidates[i][1],
            score=float(scores[i]),
            context=candidates[i][0],
        )
        for i in order.tolist()
    ]
