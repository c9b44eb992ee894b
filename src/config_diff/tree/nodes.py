"""Node dataclass for semi-structured (XML-like) documents.

Provides the element representation produced by TreeBuilder and consumed
by the canonicalizer, the child matcher and TreeDiffer.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

__all__ = ["Node"]


@dataclass(frozen=True, slots=True)
class Node:
    """One element of a semi-structured document.

    Attributes:
        name:       Element (tag) name, namespace URI removed.
        identifier: Value of the first non-empty identifier attribute, or None.
        path:       Slash-joined chain of display names from the tree root,
                    e.g. ``"raml/cmData/managedObject[LNCEL]"``.
        attributes: Attribute name -> value.  Canonical nodes keep keys sorted.
        text:       The element's own direct text (children excluded).
        children:   Child elements in document order.
    """

    name: str
    identifier: str | None = None
    path: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    text: str = ""
    children: tuple[Node, ...] = ()

    @property
    def display_name(self) -> str:
        """``name[identifier]`` when an identifier exists, else just ``name``."""
        if self.identifier:
            return f"{self.name}[{self.identifier}]"
        return self.name

    def iter(self) -> Iterator[Node]:
        """Yield this node and all descendants in document (pre-)order."""
        yield self
        for child in self.children:
            yield from child.iter()

    def size(self) -> int:
        """Number of nodes in this subtree."""
        return sum(1 for _ in self.iter())
