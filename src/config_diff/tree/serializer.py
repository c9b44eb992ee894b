"""Formatted XML-like rendering of Node subtrees.

Used as the payload of element-level added/removed changes so a reader
sees the whole subtree that appeared or disappeared.
"""

from __future__ import annotations

from xml.sax.saxutils import escape, quoteattr

from config_diff.tree.nodes import Node

__all__ = ["format_node"]

# Elements with more attributes than this list one attribute per line.
_INLINE_ATTRIBUTE_LIMIT = 2


def format_node(node: Node, indent: int = 0) -> str:
    """Render ``node`` as indented, multi-line XML-like text.

    Two spaces per nesting level.  Up to two attributes stay on the opening
    tag; more are placed one per line, indented four extra spaces.
    """
    spaces = "  " * indent
    parts = [f"{spaces}<{node.name}"]

    if len(node.attributes) <= _INLINE_ATTRIBUTE_LIMIT:
        parts.extend(f" {k}={quoteattr(v)}" for k, v in node.attributes.items())
    else:
        parts.extend(
            f"\n{spaces}    {k}={quoteattr(v)}" for k, v in node.attributes.items()
        )

    if not node.text and not node.children:
        parts.append("/>")
        return "".join(parts)

    parts.append(">")
    if node.text:
        text = escape(node.text)
        parts.append(f"\n{spaces}  {text}" if node.children else text)
    if node.children:
        parts.append("\n")
        for child in node.children:
            parts.append(format_node(child, indent + 1) + "\n")
        parts.append(spaces)
    parts.append(f"</{node.name}>")
    return "".join(parts)

