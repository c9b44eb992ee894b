"""Child matching for the tree differ.

Pairs the children of two matched parent nodes in two phases:

- Phase A (exact):       children whose identity key (``name[attr=value]``)
                         is identical are paired, each node used once.
- Phase B (similarity):  remaining left children take the best-scoring
                         remaining right child of the same name, provided the
                         score is strictly above the threshold.  Ties go to
                         the first candidate in document order.

Phase B scores are held in a numpy matrix; ``np.argmax`` returns the first
maximal column, which is exactly the encounter-order tie-break.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from config_diff.algorithm.config import IDENTIFIER_ATTRIBUTES
from config_diff.tree.nodes import Node

__all__ = ["ChildMatching", "match_children", "node_key", "node_similarity"]

# Similarity of two attribute-less nodes whose text differs.
_TEXT_MISMATCH_SCORE = 0.4


@dataclass(frozen=True, slots=True)
class ChildMatching:
    """Outcome of matching two child lists.

    Attributes:
        pairs:   ``(left, right)`` node pairs, ordered by left document position.
        removed: Unpaired left children, in document order.
        added:   Unpaired right children, in document order.
    """

    pairs: tuple[tuple[Node, Node], ...]
    removed: tuple[Node, ...]
    added: tuple[Node, ...]


def node_key(
    node: Node, identifier_attributes: Sequence[str] = IDENTIFIER_ATTRIBUTES
) -> str | None:
    """Return ``name[attr=value]`` for the first identifier attribute present.

    Unlike the display identifier, an attribute that is present but empty
    still produces a key.  Nodes without any identifier attribute have no key.
    """
    for attr in identifier_attributes:
        if attr in node.attributes:
            return f"{node.name}[{attr}={node.attributes[attr]}]"
    return None


def node_similarity(left: Node, right: Node) -> float:
    """Score how alike two nodes are, in [0.0, 1.0].

    - Different names score 0.0.
    - With attributes on either side: identical (name, value) attributes
      divided by the number of distinct attribute names across both.
    - With no attributes at all: 1.0 when the texts are equal, else 0.4.
    """
    if left.name != right.name:
        return 0.0
    names = left.attributes.keys() | right.attributes.keys()
    if not names:
        return 1.0 if left.text == right.text else _TEXT_MISMATCH_SCORE
    same = sum(
        1
        for name in names
        if name in left.attributes
        and name in right.attributes
        and left.attributes[name] == right.attributes[name]
    )
    return same / len(names)


def match_children(
    left: Sequence[Node],
    right: Sequence[Node],
    identifier_attributes: Sequence[str] = IDENTIFIER_ATTRIBUTES,
    threshold: float = 0.4,
) -> ChildMatching:
    """Pair corresponding children of two matched parents.

    Args:
        left:  Children of the left parent.
        right: Children of the right parent.
        identifier_attributes: Priority list used to build identity keys.
        threshold: Phase B pairs only scores strictly above this value.

    Returns:
        A ``ChildMatching`` covering every child exactly once.
    """
    matched: dict[int, int] = {}
    used_right: set[int] = set()

    # Phase A: exact identity keys (the key embeds the element name).
    right_keys = [node_key(node, identifier_attributes) for node in right]
    for i, node in enumerate(left):
        key = node_key(node, identifier_attributes)
        if key is None:
            continue
        for j, other in enumerate(right_keys):
            if j not in used_right and other == key:
                matched[i] = j
                used_right.add(j)
                break

    # Phase B: attribute similarity among the leftovers.
    pending = [i for i in range(len(left)) if i not in matched]
    if pending and len(used_right) < len(right):
        scores = np.full((len(left), len(right)), -np.inf)
        for i in pending:
            for j, candidate in enumerate(right):
                if j not in used_right and candidate.name == left[i].name:
                    scores[i, j] = node_similarity(left[i], candidate)

        for i in pending:
            row = scores[i].copy()
            if used_right:
                row[list(used_right)] = -np.inf
            j = int(np.argmax(row))
            if row[j] > threshold:
                matched[i] = j
                used_right.add(j)

    pairs = tuple((left[i], right[matched[i]]) for i in sorted(matched))
    removed = tuple(node for i, node in enumerate(left) if i not in matched)
    added = tuple(node for j, node in enumerate(right) if j not in used_right)
    return ChildMatching(pairs=pairs, removed=removed, added=added)
