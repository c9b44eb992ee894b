"""Canonicalization of Node trees.

Two structurally equal documents can differ textually in attribute order
and whitespace.  ``canonicalize`` removes those differences:

1. Attribute mappings are rebuilt with keys in sorted order.
2. Attribute values and direct text have runs of whitespace collapsed to
   one space and are trimmed.
3. Identifiers are collapsed the same way and paths are rebuilt from them.
4. Children are canonicalized recursively; their order is preserved.

The operation is idempotent: canonicalizing a canonical tree returns an
equal tree.
"""

import re

from config_diff.tree.nodes import Node

__all__ = ["canonicalize", "collapse_whitespace"]

# Any run of whitespace, including newlines and tabs
_WHITESPACE = re.compile(r"\s+")


def collapse_whitespace(value: str) -> str:
    """Collapse internal whitespace runs to single spaces and trim the ends."""
    return _WHITESPACE.sub(" ", value).strip()


def canonicalize(node: Node) -> Node:
    """Return the canonical form of ``node`` and its whole subtree."""
    return _canonical(node, "", "")


def _canonical(node: Node, old_parent: str, new_parent: str) -> Node:
    identifier = collapse_whitespace(node.identifier or "") or None

    # Paths follow the collapsed identifiers of this node and its ancestors
    path = node.path
    if old_parent != new_parent and path.startswith(f"{old_parent}/"):
        path = new_parent + path[len(old_parent):]
    old_display = node.display_name
    new_display = f"{node.name}[{identifier}]" if identifier else node.name
    if new_display != old_display and path.endswith(old_display):
        path = path[: len(path) - len(old_display)] + new_display

    return Node(
        name=node.name,
        identifier=identifier,
        path=path,
        attributes={
            key: collapse_whitespace(value)
            for key, value in sorted(node.attributes.items())
        },
        text=collapse_whitespace(node.text),
        children=tuple(_canonical(child, node.path, path) for child in node.children),
    )
