"""query subpackage: keyword-driven question answering over JSON documents.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_insight.context import build_context
    from json_insight.query import QueryEngine, suggest_questions

    ctx = build_context("people.json", "tab-1", {"name": "a", "tags": ["x", "y"]})
    suggest_questions([ctx])
    # ["What is the name?", "How many tags are there?", ...]
    QueryEngine().answer("What is the name?", [ctx])
"""

from __future__ import annotations

from json_insight.query.config import DEFAULT_STOP_WORDS, QueryConfig
from json_insight.query.engine import QueryEngine
from json_insight.query.formatting import code_span, format_value
from json_insight.query.handlers import (
    HandlerRegistry,
    QuestionHandler,
    default_handlers,
    default_registry,
)
from json_insight.query.keywords import extract_keywords
from json_insight.query.scoring import ScoredEntry, rank_contexts, rank_entries, score_entry
from json_insight.query.suggestions import suggest_questions

__all__ = [
    "DEFAULT_STOP_WORDS",
    "HandlerRegistry",
    "QueryConfig",
    "QueryEngine",
    "QuestionHandler",
    "ScoredEntry",
    "code_span",
    "default_handlers",
    "default_registry",
    "extract_keywords",
    "format_value",
    "rank_contexts",
    "rank_entries",
    "score_entry",
    "suggest_questions",
]
