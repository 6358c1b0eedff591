"""Integration tests for the json-insight pytest plugin.

These tests verify that the assert_json_unchanged fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require json-insight to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest


def test_fixture_passes_identical_docs(assert_json_unchanged: Any) -> None:
    """Structurally identical documents should pass."""
    assert_json_unchanged({"a": [1, {"b": None}], "c": "x"}, {"a": [1, {"b": None}], "c": "x"})


def test_fixture_passes_key_order_change(assert_json_unchanged: Any) -> None:
    """Object key order is not a difference."""
    assert_json_unchanged({"a": 1, "b": 2}, {"b": 2, "a": 1})


def test_fixture_fails_changed_leaf(assert_json_unchanged: Any) -> None:
    """A changed primitive should raise AssertionError naming the path."""
    with pytest.raises(AssertionError, match=r"changed=1") as exc_info:
        assert_json_unchanged({"a": 2}, {"a": 1})
    assert "  ~ a: 1 -> 2" in str(exc_info.value)


def test_fixture_error_message_contents(assert_json_unchanged: Any) -> None:
    """AssertionError message should list counts and each differing path."""
    with pytest.raises(AssertionError) as exc_info:
        assert_json_unchanged({"keep": 1, "new": "x"}, {"keep": 1, "old": [1, 2]})

    error_message = str(exc_info.value)
    assert "added=1 removed=1 changed=0" in error_message
    assert "  - old: [2 items]" in error_message
    assert '  + new: "x"' in error_message


def test_fixture_root_change(assert_json_unchanged: Any) -> None:
    """A changed primitive root is reported as root."""
    with pytest.raises(AssertionError, match=r"~ root: 1 -> 2"):
        assert_json_unchanged(2, 1)


def test_fixture_truncates_long_reports(assert_json_unchanged: Any) -> None:
    """Only the first ten differences are listed."""
    with pytest.raises(AssertionError) as exc_info:
        assert_json_unchanged(list(range(100, 115)), list(range(15)))
    assert "  ... and 5 more" in str(exc_info.value)


def test_fixture_returns_callable(assert_json_unchanged: Any) -> None:
    """The fixture should return a callable, not None or a direct assertion result."""
    assert callable(assert_json_unchanged), (
        "assert_json_unchanged fixture must return a callable, not a direct value"
    )


def test_plugin_discovery() -> None:
    """Verify assert_json_unchanged appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_json_unchanged" in result.stdout, (
        f"assert_json_unchanged not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
