"""diff subpackage: structural comparison of two JSON values.

Example::

    from json_insight.diff import DiffEngine

    engine = DiffEngine()
    tree = engine.compute({"a": 1}, {"a": 2})
    engine.stats(tree).changed   # 1
"""

from __future__ import annotations

from json_insight.diff.engine import DiffEngine
from json_insight.diff.entries import DiffEntry, DiffStats, DiffType
from json_insight.diff.summary import short_value

__all__ = ["DiffEngine", "DiffEntry", "DiffStats", "DiffType", "short_value"]
