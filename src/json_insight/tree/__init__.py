"""Tree subpackage for JSON flattening primitives.

Re-exports the public API for the tree module:
- FlatEntry: dataclass describing one JSON node by path
- Flattener: converts any valid JSON value into a pre-order FlatEntry list
- ROOT_PATH: the path of the document root
"""

from json_insight.tree.entries import FlatEntry
from json_insight.tree.flattener import Flattener
from json_insight.tree.paths import ROOT_PATH

__all__ = ["ROOT_PATH", "FlatEntry", "Flattener"]
