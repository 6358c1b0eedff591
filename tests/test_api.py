"""Unit tests for the public API functions: flatten, diff, diff_stats, answer, suggest."""

from __future__ import annotations

import copy

import pytest

import json_insight
from json_insight import (
    DiffType,
    DocumentTab,
    JsonType,
    QueryConfig,
    answer,
    build_contexts,
    diff,
    diff_stats,
    flatten,
    suggest,
)


class TestFlatten:
    """Tests for the flatten() function."""

    def test_pre_order_paths(self) -> None:
        entries = flatten({"x": [1, 2]})
        assert [e.path for e in entries] == ["root", "x", "x[0]", "x[1]"]

    def test_depths(self) -> None:
        entries = {e.path: e for e in flatten({"x": [1, 2]})}
        assert entries["x"].depth == 1
        assert entries["x[0]"].depth == 2
        assert entries["x"].type == JsonType.ARRAY

    def test_rejects_non_json(self) -> None:
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            flatten({"when": object()})


class TestDiff:
    """Tests for the diff() and diff_stats() functions."""

    def test_documented_example(self) -> None:
        (root,) = diff({"a": 1, "b": 2}, {"a": 1, "b": 3, "c": 4})
        assert root.type == DiffType.CHANGED
        assert root.children is not None
        by_key = {child.key: child for child in root.children}
        assert [child.key for child in root.children] == ["a", "b", "c"]
        assert by_key["a"].type == DiffType.UNCHANGED
        assert by_key["b"].type == DiffType.CHANGED
        assert (by_key["b"].left_value, by_key["b"].right_value) == (2, 3)
        assert by_key["c"].type == DiffType.ADDED
        assert by_key["c"].right_value == 4

    def test_documented_stats(self) -> None:
        stats = diff_stats(diff({"a": 1, "b": 2}, {"a": 1, "b": 3, "c": 4}))
        assert stats.as_dict() == {"added": 1, "removed": 0, "changed": 1, "unchanged": 1}

    def test_identical(self) -> None:
        doc = {"a": [1, {"b": None}]}
        assert diff_stats(diff(doc, copy.deepcopy(doc))).is_identical

    def test_no_global_state_between_calls(self) -> None:
        first = diff_stats(diff({"a": 1}, {"a": 2}))
        second = diff_stats(diff({"a": 1}, {"a": 2}))
        assert first == second


class TestAnswer:
    """Tests for the answer() function."""

    def test_documented_example(self) -> None:
        contexts = build_contexts(
            [DocumentTab(id="1", name="doc", parsed_content={"users": [1, 2, 3]})]
        )
        result = answer("How many users are there?", contexts)
        assert "users" in result
        assert "3" in result

    def test_no_documents(self) -> None:
        assert answer("anything", []).startswith("No valid JSON data found.")

    def test_config_passthrough(self) -> None:
        contexts = build_contexts(
            [
                DocumentTab(
                    id="1", name="doc", parsed_content={"server_host": "a", "client_host": "b"}
                )
            ]
        )
        assert "_Related values:_" in answer("What is the host?", contexts)
        assert "_Related values:_" not in answer(
            "What is the host?", contexts, config=QueryConfig(max_related=0)
        )

    def test_invalid_tabs_skipped(self) -> None:
        tabs = [
            DocumentTab(id="1", name="broken", parsed_content=None, is_valid=False),
            DocumentTab(id="2", name="good", parsed_content={"environment": "prod"}),
        ]
        result = answer("What is the environment?", build_contexts(tabs))
        assert result == '`"prod"`\n\n_Found at path:_ `environment`'


class TestSuggest:
    """Tests for the suggest() function."""

    def test_documented_example(self) -> None:
        contexts = build_contexts(
            [DocumentTab(id="1", name="doc", parsed_content={"name": "a", "tags": ["x", "y"]})]
        )
        result = suggest(contexts)
        assert "What is the name?" in result
        assert "How many tags are there?" in result

    def test_no_documents(self) -> None:
        assert suggest([]) == []


class TestPackageExports:
    def test_all_names_resolve(self) -> None:
        for name in json_insight.__all__:
            assert hasattr(json_insight, name), name
