"""Public API functions for config-diff.

This module provides the user-facing functions: compare, is_identical and
one thin entry point per algorithm (diff_lines, align_lines, diff_trees,
diff_paths).  Each call builds fresh differ objects to guarantee zero
global state between calls.
"""

from __future__ import annotations

from typing import Any

from config_diff.algorithm.align import Aligner
from config_diff.algorithm.config import DiffConfig, DocumentKind
from config_diff.algorithm.lines import LineDiffer
from config_diff.algorithm.paths import PathDiffer, parse_hierarchical
from config_diff.algorithm.tree import TreeDiffer
from config_diff.comparator import ConfigComparator
from config_diff.result import Change, ComparisonResult, DiffLine, PathDiffRow

__all__ = [
    "align_lines",
    "compare",
    "diff_lines",
    "diff_paths",
    "diff_trees",
    "is_identical",
]


def compare(
    left: str,
    right: str,
    kind: DocumentKind | str | None = None,
    config: DiffConfig | None = None,
) -> ComparisonResult:
    """Compare two raw configuration documents.

    Args:
        left:   Raw text of the old document.
        right:  Raw text of the new document.
        kind:   Declared kind for both sides; auto-detected when None.
        config: Diff options.  Defaults to ``DiffConfig()`` when None.

    Returns:
        A ``ComparisonResult``.  Tree and hierarchical documents that fail to
        parse are compared as text instead (see ``fallback_reason``).
    """
    return ConfigComparator(config=config).compare(left, right, kind, kind)


def is_identical(
    left: str,
    right: str,
    kind: DocumentKind | str | None = None,
    config: DiffConfig | None = None,
) -> bool:
    """Return True when the comparison reports no added, removed or changed entry."""
    return compare(left, right, kind=kind, config=config).is_identical


def diff_lines(
    left: str, right: str, config: DiffConfig | None = None
) -> list[DiffLine]:
    """Run the look-ahead line differ on two raw texts."""
    return LineDiffer(config).diff(left, right)


def align_lines(
    left: str, right: str, config: DiffConfig | None = None
) -> list[DiffLine]:
    """Run the LCS aligner on two raw texts for side-by-side rendering."""
    return Aligner(config).align(left, right)


def diff_trees(
    left: str, right: str, config: DiffConfig | None = None
) -> list[Change]:
    """Run the tree differ on two XML-like documents.

    Unlike ``compare``, parse failures are not recovered here.

    Raises:
        MalformedDocument: If either document is not a well-formed tree.
    """
    return TreeDiffer(config).diff(left, right)


def diff_paths(
    left: Any, right: Any, config: DiffConfig | None = None
) -> list[PathDiffRow]:
    """Run the path differ on two hierarchical documents.

    Args:
        left:  Raw JSON text, or an already-parsed dict/list/number.  Strings
               are always parsed as JSON text.
        right: Same as ``left``.

    Raises:
        MalformedDocument: If a string argument is not valid JSON.
    """
    if isinstance(left, str):
        left = parse_hierarchical(left, side="left")
    if isinstance(right, str):
        right = parse_hierarchical(right, side="right")
    return PathDiffer(config).diff(left, right)
