"""QueryConfig: stop words, scoring weights and thresholds for the query engine.

QueryConfig is a frozen (immutable) dataclass so a single instance can be
shared by every engine, handler and scoring call.  Tuning a weight or
swapping the stop-word list never requires touching traversal logic.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_STOP_WORDS", "QueryConfig"]

DEFAULT_STOP_WORDS: frozenset[str] = frozenset(
    {
        "what", "is", "the", "a", "an", "of", "in", "for", "and", "or", "to",
        "my", "me", "this", "that", "it", "its", "are", "was", "were", "be",
        "been", "being", "have", "has", "had", "do", "does", "did", "will",
        "would", "could", "should", "can", "may", "might", "shall", "there",
        "their", "they", "them", "which", "who", "whom", "how", "when", "where",
        "why", "all", "each", "every", "any", "some", "no", "not", "only",
        "same", "than", "too", "very", "just", "about", "also", "json", "data",
        "tell", "show", "give", "get", "find", "list", "value", "please",
    }
)  # fmt: skip


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """Immutable configuration for keyword extraction and entry scoring.

    Attributes:
        stop_words: Tokens dropped during keyword extraction.
        exact_key_weight: Added per keyword equal to an entry's key.
        partial_key_weight: Added per keyword contained in (but not equal to)
            an entry's key.
        path_weight: Added per keyword contained in an entry's path.
        value_weight: Added per keyword contained in an entry's value text.
        leaf_bonus: Added once for primitive entries.
        depth_penalty: Subtracted once per level of depth.
        related_threshold: Fraction of the best score a runner-up needs to be
            listed as a related value.  In [0, 1].
        max_related: How many runner-up entries are considered for the related
            values list.
        count_noise_words: Keywords ignored by the count handler.
        type_noise_words: Keywords ignored by the type handler.
    """

    stop_words: frozenset[str] = DEFAULT_STOP_WORDS
    exact_key_weight: float = 10.0
    partial_key_weight: float = 6.0
    path_weight: float = 4.0
    value_weight: float = 2.0
    leaf_bonus: float = 3.0
    depth_penalty: float = 0.5
    related_threshold: float = 0.6
    max_related: int = 3
    count_noise_words: frozenset[str] = frozenset(
        {"many", "count", "number", "total", "much"}
    )
    type_noise_words: frozenset[str] = frozenset({"type"})

    def __post_init__(self) -> None:
        for name in (
            "exact_key_weight",
            "partial_key_weight",
            "path_weight",
            "value_weight",
            "leaf_bonus",
            "depth_penalty",
        ):
            weight = getattr(self, name)
            if weight < 0.0:
                msg = f"{name} must be >= 0.0, got {weight}"
                raise ValueError(msg)
        if not 0.0 <= self.related_threshold <= 1.0:
            msg = f"related_threshold must be in [0, 1], got {self.related_threshold}"
            raise ValueError(msg)
        if self.max_related < 0:
            msg = f"max_related must be >= 0, got {self.max_related}"
            raise ValueError(msg)
