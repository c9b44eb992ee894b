"""TreeBuilder: parses XML-like documents into Node trees.

Uses the standard library ElementTree parser.  Each element becomes a Node
whose identifier is taken from the first identifier attribute with a
non-empty value, and whose path chains display names from the root:

- Root path is the root's display name, e.g. ``"raml"``
- Each level appends ``"/{display_name}"``
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from config_diff.algorithm.config import IDENTIFIER_ATTRIBUTES, MAX_NESTING_DEPTH
from config_diff.errors import MalformedDocument
from config_diff.tree.nodes import Node
from config_diff.tree.normalizer import collapse_whitespace

__all__ = ["TreeBuilder", "find_identifier", "local_name"]


def local_name(tag: str) -> str:
    """Drop an ElementTree ``{namespace-uri}`` prefix from a tag name."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[-1]
    return tag


def find_identifier(
    attributes: Mapping[str, str], priority: Sequence[str]
) -> str | None:
    """Return the value of the first priority attribute that is non-empty."""
    for attr in priority:
        value = attributes.get(attr)
        if value:
            return value
    return None


@dataclass
class TreeBuilder:
    """Converts raw XML-like text into a Node tree.

    Attributes:
        identifier_attributes: Ordered attribute names probed for each
            element's identifier.
        max_depth: Deepest element nesting accepted by ``build``.

    Example::
        builder = TreeBuilder()
        root = builder.build('<cfg><port id="1">up</port></cfg>')
        root.children[0].path   # "cfg/port[1]"
    """

    identifier_attributes: tuple[str, ...] = IDENTIFIER_ATTRIBUTES
    max_depth: int = MAX_NESTING_DEPTH

    def build(self, document: str, side: str | None = None) -> Node:
        """Parse ``document`` and return its root Node.

        Args:
            document: Raw XML-like text.
            side:     Optional ``"left"``/``"right"`` label for error messages.

        Raises:
            MalformedDocument: If the text is not a well-formed tree, or
                nests elements deeper than ``max_depth``.  The message
                carries the parser's own reason.
        """
        try:
            root = ET.fromstring(document.strip())
        except ET.ParseError as exc:
            raise MalformedDocument(str(exc), side=side) from exc
        except RecursionError as exc:
            raise MalformedDocument("document nesting too deep", side=side) from exc
        if _element_depth(root) > self.max_depth:
            raise MalformedDocument("document nesting too deep", side=side)
        return self.build_element(root)

    def build_element(self, element: ET.Element, parent_path: str = "") -> Node:
        """Convert one ElementTree element (and its subtree) into a Node."""
        name = local_name(element.tag)
        attributes = {local_name(k): v for k, v in element.attrib.items()}
        # Identifier and path read the collapsed values the matcher keys on
        identifier = find_identifier(
            {k: collapse_whitespace(v) for k, v in attributes.items()},
            self.identifier_attributes,
        )
        display = f"{name}[{identifier}]" if identifier else name
        path = f"{parent_path}/{display}" if parent_path else display

        # Direct text: the element's own text plus every child's tail.
        pieces = [element.text or ""]
        pieces.extend(child.tail or "" for child in element)
        text = " ".join(p.strip() for p in pieces if p.strip())

        children = tuple(self.build_element(child, path) for child in element)
        return Node(
            name=name,
            identifier=identifier,
            path=path,
            attributes=attributes,
            text=text,
            children=children,
        )


def _element_depth(root: ET.Element) -> int:
    """Deepest element nesting under ``root``, walked without recursion."""
    deepest = 0
    stack = [(root, 1)]
    while stack:
        element, depth = stack.pop()
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in element)
    return deepest
