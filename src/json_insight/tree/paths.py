"""Path string helpers for flattened JSON entries.

Paths use dot-separated object keys and bracketed array indices, e.g.
``users[0].name``.  The document root is addressed as ``"root"``.

Keys are written literally: a key that itself contains ``.`` or ``[`` is not
escaped, so paths are display addresses rather than a lookup syntax.  Bracket
segments stay attached to the key before them, which makes ``users[0]`` a
single trailing component whose parent is the parent of ``users``.

Two keys cannot be written bare because they would collide with the root
address: the empty key (``""``) and, directly below the root, the key
``"root"``.  Those are written in quoted bracket form: ``[""]``, ``a[""]``,
``["root"]``.  Every non-root path is therefore non-empty and distinct from
``"root"``.
"""

from __future__ import annotations

__all__ = [
    "ROOT_PATH",
    "child_index_path",
    "child_key_path",
    "last_segment",
    "parent_path",
]

ROOT_PATH = "root"


def child_key_path(prefix: str, key: str) -> str:
    """Path of object member ``key`` below ``prefix`` (bare key at the root)."""
    if key == "" or (not prefix and key == ROOT_PATH):
        return f'{prefix}["{key}"]'
    return f"{prefix}.{key}" if prefix else key


def child_index_path(prefix: str, index: int) -> str:
    """Path of array element ``index`` below ``prefix``."""
    return f"{prefix}[{index}]"


def last_segment(path: str) -> str:
    """Final dot-separated component of ``path``; ``"root"`` only for the root itself."""
    if not path:
        return ROOT_PATH
    return path.rsplit(".", 1)[-1]


def parent_path(path: str) -> str:
    """Everything before the last ``.`` of ``path``; empty for top-level paths."""
    head, sep, _ = path.rpartition(".")
    return head if sep else ""
