"""Pattern handlers: special-cased answers for common question shapes.

A handler pairs a set of case-insensitive regular expressions (tested
against the raw question) with a response function.  The registry tries
handlers in registration order; the first handler that matches AND returns
a non-empty answer wins, otherwise dispatch falls through to the next one.
When nothing answers, the query engine falls back to full-corpus scoring.

Paths, keys, tab names and values only ever appear inside code spans, so
underscores and asterisks in them never open a bold or italic span.

Default order:
1. structure  - top-level keys / shape of each document
2. count      - "how many X", array lengths
3. compare    - side-by-side summary of all documents
4. list       - render the best matching container
5. type       - type of the best matching entry
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from json_insight.query.config import QueryConfig
from json_insight.query.formatting import code_span, format_value
from json_insight.query.keywords import extract_keywords
from json_insight.query.scoring import rank_entries, score_entry
from json_insight.types import JsonType, json_type_of

if TYPE_CHECKING:
    from json_insight.context import JsonContext

__all__ = ["HandlerRegistry", "QuestionHandler", "default_handlers", "default_registry"]

logger = logging.getLogger(__name__)

HandleFn = Callable[[str, Sequence["JsonContext"], QueryConfig], "str | None"]


@dataclass(frozen=True, slots=True)
class QuestionHandler:
    """A (match, handle) pair.

    Attributes:
        name:     Short identifier, used in debug logs.
        patterns: Compiled expressions; the handler matches when any of them
                  is found in the question.
        handle:   ``handle(question, contexts, config)`` returning an answer,
                  or None / "" to let the next handler try.
    """

    name: str
    patterns: tuple[re.Pattern[str], ...]
    handle: HandleFn

    def match(self, question: str) -> bool:
        return any(pattern.search(question) for pattern in self.patterns)


class HandlerRegistry:
    """Ordered, first-match-wins collection of QuestionHandlers."""

    def __init__(self, handlers: Iterable[QuestionHandler] = ()) -> None:
        self._handlers: list[QuestionHandler] = list(handlers)

    def __iter__(self) -> Iterator[QuestionHandler]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def register(self, handler: QuestionHandler) -> None:
        """Append ``handler``; it runs after every handler registered before it."""
        self._handlers.append(handler)

    def dispatch(
        self,
        question: str,
        contexts: Sequence[JsonContext],
        config: QueryConfig,
    ) -> str | None:
        """Return the first non-empty answer from a matching handler, else None."""
        for handler in self._handlers:
            if not handler.match(question):
                continue
            result = handler.handle(question, contexts, config)
            if result:
                logger.debug("handler %r answered %r", handler.name, question)
                return result
            logger.debug("handler %r matched %r but had no answer", handler.name, question)
        return None


def _patterns(*expressions: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(expr, re.IGNORECASE) for expr in expressions)


# ---------------------------------------------------------------------------
# Structure / top-level keys
# ---------------------------------------------------------------------------


def _handle_structure(
    question: str, contexts: Sequence[JsonContext], config: QueryConfig
) -> str | None:
    parts: list[str] = []
    for ctx in contexts:
        raw_type = json_type_of(ctx.raw)
        if raw_type == JsonType.OBJECT:
            keys = "\n".join(f"  • {code_span(key)}" for key in ctx.raw)
            parts.append(f"{code_span(ctx.tab_name)} has {len(ctx.raw)} top-level keys:\n{keys}")
        elif raw_type == JsonType.ARRAY:
            parts.append(f"{code_span(ctx.tab_name)} is an array with {len(ctx.raw)} items.")
        else:
            parts.append(f"{code_span(ctx.tab_name)} is a {raw_type} value.")
    return "\n\n".join(parts)


# ---------------------------------------------------------------------------
# Count
# ---------------------------------------------------------------------------


def _handle_count(
    question: str, contexts: Sequence[JsonContext], config: QueryConfig
) -> str | None:
    keywords = [
        kw for kw in extract_keywords(question, config) if kw not in config.count_noise_words
    ]
    results: list[str] = []

    for ctx in contexts:
        for entry in ctx.entries:
            if entry.type == JsonType.ARRAY and any(kw in entry.path.lower() for kw in keywords):
                results.append(
                    f"{code_span(entry.path)} contains **{entry.size} items** "
                    f"(in {code_span(ctx.tab_name)})"
                )
    if results:
        return "\n".join(results)

    # No matching array: count the entries that mention a keyword
    for ctx in contexts:
        matches = [
            entry
            for entry in ctx.entries
            if any(kw in entry.key.lower() or kw in entry.path.lower() for kw in keywords)
        ]
        if matches:
            results.append(
                f"Found **{len(matches)}** entries matching your query "
                f"in {code_span(ctx.tab_name)}."
            )
    return "\n".join(results) if results else None


# ---------------------------------------------------------------------------
# Compare documents
# ---------------------------------------------------------------------------


def _handle_compare(
    question: str, contexts: Sequence[JsonContext], config: QueryConfig
) -> str | None:
    if len(contexts) < 2:
        return "You only have one tab with valid JSON. Open multiple tabs to compare them."

    summaries: list[str] = []
    for ctx in contexts:
        raw_type = json_type_of(ctx.raw)
        top_keys = "N/A"
        if raw_type == JsonType.OBJECT and ctx.raw:
            top_keys = ", ".join(map(code_span, ctx.raw))
        summaries.append(
            f"{code_span(ctx.tab_name)}: {raw_type}, {len(ctx.entries)} total entries, "
            f"top keys: {top_keys}"
        )
    return f"Here's a comparison of your {len(contexts)} tabs:\n\n" + "\n\n".join(summaries)


# ---------------------------------------------------------------------------
# List / enumerate
# ---------------------------------------------------------------------------


def _handle_list(
    question: str, contexts: Sequence[JsonContext], config: QueryConfig
) -> str | None:
    keywords = extract_keywords(question, config)
    results: list[str] = []

    for ctx in contexts:
        matches = [
            entry
            for entry in ctx.entries
            if entry.is_container
            and any(kw in entry.key.lower() or kw in entry.path.lower() for kw in keywords)
        ]
        if not matches:
            continue
        # sorted() is stable: equal scores keep traversal order
        best = sorted(matches, key=lambda e: -score_entry(e, keywords, config))[0]
        results.append(
            f"{code_span(best.path)} (in {code_span(ctx.tab_name)}):\n"
            f"{code_span(format_value(best.value))}"
        )

    return "\n\n".join(results) if results else None


# ---------------------------------------------------------------------------
# Type questions
# ---------------------------------------------------------------------------


def _handle_type(
    question: str, contexts: Sequence[JsonContext], config: QueryConfig
) -> str | None:
    keywords = [
        kw for kw in extract_keywords(question, config) if kw not in config.type_noise_words
    ]
    for ctx in contexts:
        ranked = rank_entries(ctx.entries, keywords, config)
        if not ranked:
            continue
        entry = ranked[0].entry
        article = "an" if entry.is_container else "a"
        desc = f"{code_span(entry.path)} is {article} **{entry.type}**"
        if entry.type == JsonType.ARRAY:
            desc += f" with {entry.size} items"
        elif entry.type == JsonType.OBJECT:
            desc += f" with {entry.size} keys: {', '.join(map(code_span, entry.value))}"
        return desc + "."
    return None


def default_handlers() -> list[QuestionHandler]:
    """The built-in handlers, in dispatch order."""
    return [
        QuestionHandler(
            name="structure",
            patterns=_patterns(
                r"(?:top.?level|root|structure|keys|properties|fields)\b",
                r"(?:what does .* contain|what.*(?:structure|shape))",
            ),
            handle=_handle_structure,
        ),
        QuestionHandler(
            name="count",
            patterns=_patterns(r"how many|count|number of|total"),
            handle=_handle_count,
        ),
        QuestionHandler(
            name="compare",
            patterns=_patterns(r"(?:compare|difference|diff|between.*tab|across.*tab|all tab)"),
            handle=_handle_compare,
        ),
        QuestionHandler(
            name="list",
            patterns=_patterns(r"(?:list|enumerate|show all|what are)\b"),
            handle=_handle_list,
        ),
        QuestionHandler(
            name="type",
            patterns=_patterns(r"(?:type of|what type|is .* (?:a|an) )"),
            handle=_handle_type,
        ),
    ]


def default_registry() -> HandlerRegistry:
    """A fresh registry holding the built-in handlers."""
    return HandlerRegistry(default_handlers())
