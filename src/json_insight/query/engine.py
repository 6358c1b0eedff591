"""QueryEngine: answers free-text questions about one or more JSON documents.

Answering runs in three stages:

1. Pattern handlers (see ``json_insight.query.handlers``) get the first
   chance, in registration order.
2. If none answers, the question is reduced to keywords and every entry of
   every document is scored (see ``json_insight.query.scoring``).
3. The best entry is rendered: primitives as a direct value with related
   values, containers as a formatted overview.

Answers use three inline markup kinds and never nest them: ``**bold**``,
backtick-delimited inline code and ``_italic_``.  Text taken from the
documents (paths, keys, tab names, values, keywords) only appears inside
code spans; bold and italic wrap fixed wording and counts.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from json_insight.query.config import QueryConfig
from json_insight.query.formatting import code_span, format_value
from json_insight.query.handlers import HandlerRegistry, default_registry
from json_insight.query.keywords import extract_keywords
from json_insight.query.scoring import ScoredEntry, rank_contexts
from json_insight.query.suggestions import suggest_questions
from json_insight.types import JsonType, json_type_of

if TYPE_CHECKING:
    from json_insight.context import JsonContext

__all__ = ["QueryEngine"]

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No valid JSON data found. Please paste valid JSON in the editor."

_EXAMPLE_QUESTIONS = (
    "What is the environment?",
    "How many projects are there?",
    "List all events",
    "What are the user roles?",
)


class QueryEngine:
    """Deterministic keyword/path question answering over JsonContexts.

    Example::

        from json_insight.context import build_context
        from json_insight.query import QueryEngine

        ctx = build_context("config.json", "tab-1", {"users": [1, 2, 3]})
        QueryEngine().answer("How many users are there?", [ctx])
        # '`users` contains **3 items** (in `config.json`)'
    """

    def __init__(
        self,
        config: QueryConfig | None = None,
        registry: HandlerRegistry | None = None,
    ) -> None:
        """Initialise the engine.

        Args:
            config:   Stop words and scoring weights.  Defaults to ``QueryConfig()``.
            registry: Pattern handlers tried before scoring.  Defaults to a
                fresh registry of the built-in handlers.
        """
        self._config: QueryConfig = config if config is not None else QueryConfig()
        self._registry: HandlerRegistry = (
            registry if registry is not None else default_registry()
        )

    @property
    def config(self) -> QueryConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def answer(self, question: str, contexts: Sequence[JsonContext]) -> str:
        """Answer ``question`` using the documents in ``contexts``.

        Never raises for JSON-domain input: "nothing found" outcomes are
        returned as informational answers.
        """
        if not contexts:
            return NO_DATA_MESSAGE

        q = question.strip()

        handled = self._registry.dispatch(q, contexts, self._config)
        if handled:
            return handled

        keywords = extract_keywords(q, self._config)
        if not keywords:
            return self._summary(contexts)

        scored = rank_contexts(contexts, keywords, self._config)
        logger.debug("fallback scoring: %d entries above zero for %s", len(scored), keywords)
        if not scored:
            return (
                "I couldn't find anything matching "
                f"{', '.join(map(code_span, keywords))} in your JSON data."
                "\n\nTry rephrasing your question or checking if the key/value exists."
            )

        best = scored[0]
        if best.entry.is_container:
            answer = self._describe_container(best)
        else:
            answer = self._describe_primitive(best, scored)

        if len(contexts) > 1 and best.context is not None:
            answer += f"\n\n_Source:_ {code_span(best.context.tab_name)}"
        return answer

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _summary(self, contexts: Sequence[JsonContext]) -> str:
        ctx = contexts[0]
        if json_type_of(ctx.raw) == JsonType.OBJECT and ctx.raw:
            keys = ", ".join(map(code_span, ctx.raw))
            overview = f"these top-level keys: {keys}"
        else:
            overview = f"{len(ctx.entries)} entries"

        examples = suggest_questions(contexts) or list(_EXAMPLE_QUESTIONS)
        lines = "\n".join(f"• {code_span(example)}" for example in examples)
        return (
            f"Your JSON in {code_span(ctx.tab_name)} has {overview}."
            f"\n\nTry asking specific questions like:\n{lines}"
        )

    def _describe_primitive(self, best: ScoredEntry, scored: list[ScoredEntry]) -> str:
        entry = best.entry
        answer = code_span(format_value(entry.value))
        answer += f"\n\n_Found at path:_ {code_span(entry.path)}"

        floor = best.score * self._config.related_threshold
        others = [
            other
            for other in scored[1 : 1 + self._config.max_related]
            if other.score >= floor and not other.entry.is_container
        ]
        if others:
            answer += "\n\n_Related values:_"
            for other in others:
                path = code_span(other.entry.path)
                answer += f"\n• {path} = {code_span(format_value(other.entry.value))}"
        return answer

    @staticmethod
    def _describe_container(best: ScoredEntry) -> str:
        entry = best.entry
        if entry.type == JsonType.ARRAY:
            answer = f"{code_span(entry.path)} is an array with **{entry.size} items**"
        else:
            answer = f"{code_span(entry.path)} is an object with **{entry.size} keys**"
        return answer + f":\n\n{code_span(format_value(entry.value))}"
