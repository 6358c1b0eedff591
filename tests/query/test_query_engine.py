"""Tests for QueryEngine.answer: handler dispatch, fallback scoring and rendering."""

from __future__ import annotations

import re
from typing import Any

import pytest

from json_insight.context import JsonContext, build_context
from json_insight.query.config import QueryConfig
from json_insight.query.engine import NO_DATA_MESSAGE, QueryEngine
from json_insight.query.handlers import HandlerRegistry

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _ctx(raw: Any, name: str = "doc") -> JsonContext:
    return build_context(name, f"id-{name}", raw)


DEEP = {"a": {"b": {"c": {"d": {"e": {"f": {"g": 1}}}}}}}
_CODE_SPAN = re.compile(r"`[^`]*`")


class TestConstruction:
    def test_default_config(self) -> None:
        assert QueryEngine().config == QueryConfig()

    def test_config_exposed(self) -> None:
        config = QueryConfig(max_related=1)
        assert QueryEngine(config).config is config


# ---------------------------------------------------------------------------
# Direct answers
# ---------------------------------------------------------------------------


class TestPrimitiveAnswers:
    def test_best_primitive(self) -> None:
        ctx = _ctx({"environment": "prod", "region": "eu"})
        result = QueryEngine().answer("What is the environment?", [ctx])
        assert result == '`"prod"`\n\n_Found at path:_ `environment`'

    def test_question_is_stripped(self) -> None:
        ctx = _ctx({"environment": "prod", "region": "eu"})
        engine = QueryEngine()
        assert engine.answer("  What is the environment?  ", [ctx]) == engine.answer(
            "What is the environment?", [ctx]
        )

    def test_related_values(self) -> None:
        ctx = _ctx({"server_host": "a", "client_host": "b"})
        result = QueryEngine().answer("What is the host?", [ctx])
        assert result == (
            '`"a"`\n\n_Found at path:_ `server_host`'
            '\n\n_Related values:_\n• `client_host` = `"b"`'
        )

    def test_related_values_capped(self) -> None:
        ctx = _ctx({f"host_{i}": i for i in range(6)})
        result = QueryEngine().answer("What is the host?", [ctx])
        assert result.count("\n• ") == 3

    def test_related_values_disabled(self) -> None:
        ctx = _ctx({"server_host": "a", "client_host": "b"})
        result = QueryEngine(QueryConfig(max_related=0)).answer("What is the host?", [ctx])
        assert "_Related values:_" not in result

    def test_low_scoring_runner_up_not_related(self) -> None:
        ctx = _ctx({"environment": "prod", "region": "eu"})
        result = QueryEngine().answer("What is the environment?", [ctx])
        assert "region" not in result


class TestContainerAnswers:
    def test_object(self) -> None:
        ctx = _ctx({"settings": {"theme": "dark"}})
        result = QueryEngine().answer("settings please", [ctx])
        assert result == '`settings` is an object with **1 keys**:\n\n`{\n  theme: "dark"\n}`'

    def test_array_without_handlers(self) -> None:
        engine = QueryEngine(registry=HandlerRegistry())
        result = engine.answer("How many users are there?", [_ctx({"users": [1, 2, 3]})])
        assert result == "`users` is an array with **3 items**:\n\n`[1, 2, 3]`"


# ---------------------------------------------------------------------------
# Handlers first
# ---------------------------------------------------------------------------


class TestHandlerDispatch:
    def test_count_handler(self) -> None:
        result = QueryEngine().answer("How many users are there?", [_ctx({"users": [1, 2, 3]})])
        assert result == "`users` contains **3 items** (in `doc`)"

    def test_list_handler(self) -> None:
        doc = {"users": [{"name": "a"}, {"name": "b"}]}
        result = QueryEngine().answer("List all users", [_ctx(doc)])
        assert result == (
            "`users` (in `doc`):\n`[\n  Object with keys: name,\n  Object with keys: name\n]`"
        )

    def test_type_handler(self) -> None:
        result = QueryEngine().answer("What type is status?", [_ctx({"status": "ok"})])
        assert result == "`status` is a **string**."

    def test_unanswered_handler_falls_back_to_scoring(self) -> None:
        # The count handler matches but finds nothing, so scoring answers
        result = QueryEngine().answer("How many zebras?", [_ctx({"a": 1})])
        assert result == "`1`\n\n_Found at path:_ `a`"


# ---------------------------------------------------------------------------
# Informational answers
# ---------------------------------------------------------------------------


class TestInformationalAnswers:
    def test_no_contexts(self) -> None:
        assert QueryEngine().answer("anything", []) == NO_DATA_MESSAGE
        assert NO_DATA_MESSAGE == (
            "No valid JSON data found. Please paste valid JSON in the editor."
        )

    def test_nothing_found(self) -> None:
        result = QueryEngine().answer("Where is zebra?", [_ctx(DEEP)])
        assert result == (
            "I couldn't find anything matching `zebra` in your JSON data."
            "\n\nTry rephrasing your question or checking if the key/value exists."
        )

    def test_nothing_found_lists_every_keyword(self) -> None:
        result = QueryEngine().answer("zebra giraffe", [_ctx(DEEP)])
        assert result.startswith("I couldn't find anything matching `zebra`, `giraffe` in")

    def test_summary_without_keywords(self) -> None:
        ctx = _ctx({"name": "a", "tags": ["x", "y"]})
        result = QueryEngine().answer("Show me the data", [ctx])
        assert result == (
            "Your JSON in `doc` has these top-level keys: `name`, `tags`."
            "\n\nTry asking specific questions like:"
            "\n• `What is the name?`"
            "\n• `How many tags are there?`"
            "\n• `What are the top-level keys?`"
            "\n• `List all tags`"
        )

    def test_summary_for_primitive_root_uses_examples(self) -> None:
        result = QueryEngine().answer("?", [_ctx(5)])
        assert result.startswith("Your JSON in `doc` has 1 entries.")
        assert "• `What is the environment?`" in result

    def test_summary_for_empty_question(self) -> None:
        result = QueryEngine().answer("", [_ctx({"a": 1})])
        assert result.startswith("Your JSON in `doc` has these top-level keys: `a`.")


# ---------------------------------------------------------------------------
# Several documents
# ---------------------------------------------------------------------------


class TestMultipleContexts:
    def test_source_document_named(self) -> None:
        contexts = [_ctx({"region": "eu"}, "a.json"), _ctx({"environment": "prod"}, "b.json")]
        result = QueryEngine().answer("What is the environment?", contexts)
        assert result == '`"prod"`\n\n_Found at path:_ `environment`\n\n_Source:_ `b.json`'

    def test_single_document_not_named(self) -> None:
        result = QueryEngine().answer("What is the environment?", [_ctx({"environment": 1})])
        assert "_Source:_" not in result

    def test_ties_resolve_to_first_document(self) -> None:
        contexts = [_ctx({"id": 1}, "a.json"), _ctx({"id": 2}, "b.json")]
        result = QueryEngine().answer("id", contexts)
        assert result.startswith("`1`")
        assert result.endswith("_Source:_ `a.json`")


# ---------------------------------------------------------------------------
# Markup
# ---------------------------------------------------------------------------


class TestMarkup:
    @pytest.mark.parametrize(
        "question",
        [
            "What is the environment?",
            "What are the top-level keys?",
            "How many users are there?",
            "How many user_roles are there?",
            "Compare all tabs",
            "List all users",
            "List all user_roles",
            "What type is users?",
            "What type is user_roles?",
            "What is the user_name?",
            "Where is zebra?",
            "Where is zebra_stripes?",
            "Show me the data",
            "What is the host?",
        ],
    )
    def test_markers_balanced(self, question: str) -> None:
        contexts = [
            _ctx(
                {
                    "environment": "prod",
                    "users": [{"name": "a"}],
                    "host": "h",
                    "user_name": "alice_b",
                    "user_roles": ["a", "b"],
                },
                "a_doc.json",
            ),
            _ctx({"server_host": "s", "region": "eu", "*star*": "`tick`"}, "b.json"),
        ]
        result = QueryEngine().answer(question, contexts)
        # Document text lives in code spans; what remains is fixed wording
        outside = _CODE_SPAN.sub("", result)
        assert "`" not in outside
        assert outside.count("**") % 2 == 0
        assert outside.replace("**", "").count("_") % 2 == 0
        assert "*" not in outside.replace("**", "")

    def test_snake_case_value_and_path(self) -> None:
        result = QueryEngine().answer("What is the user_name?", [_ctx({"user_name": "alice"})])
        assert result == '`"alice"`\n\n_Found at path:_ `user_name`'

    def test_snake_case_count(self) -> None:
        ctx = _ctx({"user_roles": ["a", "b"]})
        result = QueryEngine().answer("How many user_roles are there?", [ctx])
        assert result == "`user_roles` contains **2 items** (in `doc`)"
