"""Tree subpackage for XML-like document primitives.

Re-exports the public API for the tree module:
- Node: frozen dataclass representing one element
- TreeBuilder: parses raw XML-like text into a Node tree
- canonicalize: sorts attributes and collapses whitespace, idempotently
- format_node: multi-line rendering of a subtree for element-level changes
"""

from config_diff.tree.builder import TreeBuilder
from config_diff.tree.nodes import Node
from config_diff.tree.normalizer import canonicalize, collapse_whitespace
from config_diff.tree.serializer import format_node

__all__ = ["Node", "TreeBuilder", "canonicalize", "collapse_whitespace", "format_node"]
