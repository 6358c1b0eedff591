"""Keyword extraction for free-text questions."""

from __future__ import annotations

import re

from json_insight.query.config import QueryConfig

__all__ = ["extract_keywords"]

# Punctuation stripped before tokenizing: ? ! . , ; : ' "
_PUNCTUATION = re.compile(r"""[?!.,;:'"]""")


def extract_keywords(question: str, config: QueryConfig | None = None) -> list[str]:
    """Return the lower-cased, stop-word-filtered tokens of ``question``.

    Tokens of length <= 1 are dropped.  Order (and duplicates) are kept so
    handlers can filter the list further.

    Example::

        extract_keywords("What is the user's email?")   # ["users", "email"]
    """
    stop_words = (config or QueryConfig()).stop_words
    text = _PUNCTUATION.sub("", question.lower())
    return [word for word in text.split() if len(word) > 1 and word not in stop_words]
