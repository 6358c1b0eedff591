"""pytest plugin for json-insight.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_insight import DiffEntry, DiffType, diff, diff_stats
from json_insight.diff.summary import short_value

_MAX_REPORTED = 10


def _differing_leaves(entries: list[DiffEntry]) -> list[DiffEntry]:
    found: list[DiffEntry] = []
    for entry in entries:
        if entry.children is not None:
            found.extend(_differing_leaves(entry.children))
        elif entry.type != DiffType.UNCHANGED:
            found.append(entry)
    return found


def _describe(entry: DiffEntry) -> str:
    path = entry.path or "root"
    if entry.type == DiffType.ADDED:
        return f"  + {path}: {short_value(entry.right_value)}"
    if entry.type == DiffType.REMOVED:
        return f"  - {path}: {short_value(entry.left_value)}"
    return f"  ~ {path}: {short_value(entry.left_value)} -> {short_value(entry.right_value)}"


@pytest.fixture(scope="session")
def assert_json_unchanged() -> Any:
    """Fixture that returns a callable JSON identity asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to diff() which creates a fresh DiffEngine per call).

    Usage in tests::

        def test_roundtrip(assert_json_unchanged):
            assert_json_unchanged(load(dump(doc)), doc)

        def test_edit(assert_json_unchanged):
            with pytest.raises(AssertionError, match=r"changed=1"):
                assert_json_unchanged({"a": 1}, {"a": 2})

    Returns:
        A callable ``_assert(actual, expected) -> None`` that raises
        ``AssertionError`` when any leaf was added, removed or changed.
    """

    def _assert(actual: Any, expected: Any) -> None:
        """Assert that ``actual`` is structurally identical to ``expected``.

        Raises:
            AssertionError: When the diff from ``expected`` to ``actual`` has
                added, removed or changed leaves.  The message lists the
                counts and the first differing paths.
        """
        tree = diff(expected, actual)
        stats = diff_stats(tree)
        if stats.is_identical:
            return

        leaves = _differing_leaves(tree)
        lines = [_describe(entry) for entry in leaves[:_MAX_REPORTED]]
        if len(leaves) > _MAX_REPORTED:
            lines.append(f"  ... and {len(leaves) - _MAX_REPORTED} more")
        raise AssertionError(
            "JSON documents differ: "
            f"added={stats.added} removed={stats.removed} changed={stats.changed}\n"
            + "\n".join(lines)
        )

    return _assert
