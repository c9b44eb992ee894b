"""TreeDiffer: structural comparison of two XML-like documents.

Runs four stages in fixed order for every comparison:

1. Parse         raw text -> Node tree (TreeBuilder); MalformedDocument on failure
2. Canonicalize  sorted attributes, collapsed whitespace
3. Match         children of each matched parent pair (matcher.match_children)
4. Compare       attribute, text and element differences, recursively

The two roots are always treated as a matched pair, even when their names
differ.  Changes come out in document order: a node's own attribute and
text changes, then its matched children (recursively, left to right), then
its removed and finally its added children.
"""

from __future__ import annotations

from config_diff.algorithm.config import DiffConfig
from config_diff.algorithm.matcher import match_children
from config_diff.result import Change, ChangeKind, ChangeScope
from config_diff.tree.builder import TreeBuilder
from config_diff.tree.nodes import Node
from config_diff.tree.normalizer import canonicalize
from config_diff.tree.serializer import format_node

__all__ = ["TEXT_FIELD", "TreeDiffer"]

TEXT_FIELD = "#text"


class TreeDiffer:
    """Hierarchical change detection for semi-structured documents.

    Example::

        differ = TreeDiffer()
        changes = differ.diff(
            '<cfg><port id="1" speed="10"/></cfg>',
            '<cfg><port id="1" speed="100"/></cfg>',
        )
        changes[0].path, changes[0].field   # ("cfg/port[1]", "speed")
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config = config if config is not None else DiffConfig()
        self._builder = TreeBuilder(
            identifier_attributes=self._config.identifier_attributes
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def diff(self, document_a: str, document_b: str) -> list[Change]:
        """Parse, canonicalize and compare two raw documents.

        Raises:
            MalformedDocument: If either document is not a well-formed tree.
        """
        root_a = canonicalize(self._builder.build(document_a, side="left"))
        root_b = canonicalize(self._builder.build(document_b, side="right"))
        return self.compare_nodes(root_a, root_b)

    def compare_nodes(self, left: Node, right: Node, path: str = "") -> list[Change]:
        """Compare two (canonical) nodes and their subtrees.

        Args:
            left:  Node from the left document.
            right: Node from the right document, already matched to ``left``.
            path:  Path to report changes under; defaults to the left
                   node's display name.
        """
        current = path or left.display_name
        changes = self._compare_attributes(left, right, current)
        text_change = self._compare_text(left, right, current)
        if text_change is not None:
            changes.append(text_change)

        matching = match_children(
            left.children,
            right.children,
            identifier_attributes=self._config.identifier_attributes,
            threshold=self._config.similarity_threshold,
        )
        for child_a, child_b in matching.pairs:
            changes.extend(
                self.compare_nodes(child_a, child_b, f"{current}/{child_a.display_name}")
            )
        for node in matching.removed:
            changes.append(
                Change(
                    kind=ChangeKind.REMOVED,
                    scope=ChangeScope.ELEMENT,
                    path=f"{current}/{node.display_name}",
                    old_value=format_node(node),
                )
            )
        for node in matching.added:
            changes.append(
                Change(
                    kind=ChangeKind.ADDED,
                    scope=ChangeScope.ELEMENT,
                    path=f"{current}/{node.display_name}",
                    new_value=format_node(node),
                )
            )
        return changes

    # ------------------------------------------------------------------
    # Field comparison
    # ------------------------------------------------------------------

    @staticmethod
    def _compare_attributes(left: Node, right: Node, path: str) -> list[Change]:
        changes: list[Change] = []
        for attr in sorted(left.attributes.keys() | right.attributes.keys()):
            old = left.attributes.get(attr)
            new = right.attributes.get(attr)
            if old == new:
                continue
            if old is None:
                kind = ChangeKind.ADDED
            elif new is None:
                kind = ChangeKind.REMOVED
            else:
                kind = ChangeKind.CHANGED
            changes.append(
                Change(
                    kind=kind,
                    scope=ChangeScope.ATTRIBUTE,
                    path=path,
                    field=attr,
                    old_value=old,
                    new_value=new,
                )
            )
        return changes

    @staticmethod
    def _compare_text(left: Node, right: Node, path: str) -> Change | None:
        """Empty text counts as absent, so appearing text is an addition."""
        if left.text == right.text:
            return None
        if not left.text:
            kind = ChangeKind.ADDED
        elif not right.text:
            kind = ChangeKind.REMOVED
        else:
            kind = ChangeKind.CHANGED
        return Change(
            kind=kind,
            scope=ChangeScope.VALUE,
            path=path,
            field=TEXT_FIELD,
            old_value=left.text or None,
            new_value=right.text or None,
        )
