"""algorithm subpackage: the line, alignment and path diff algorithms.

Provides the LCS backbone, the two line-oriented differs, the flat path
differ, and their shared configuration.  The tree differ and its child
matcher live in ``config_diff.algorithm.tree`` and
``config_diff.algorithm.matcher``; they are re-exported from the top-level
package.

Example::

    from config_diff.algorithm import Aligner, DiffConfig

    rows = Aligner(DiffConfig(ignore_whitespace=True)).align("a\\n b", "a\\nb")
    # both rows unchanged
"""

from __future__ import annotations

from config_diff.algorithm.config import (
    IDENTIFIER_ATTRIBUTES,
    MAX_NESTING_DEPTH,
    DiffConfig,
    DocumentKind,
)
from config_diff.algorithm.lcs import SequenceMatcher, longest_common_subsequence
from config_diff.algorithm.lines import LineDiffer, split_lines
from config_diff.algorithm.align import Aligner, InlineSpan, inline_span
from config_diff.algorithm.paths import PathDiffer, flatten, flatten_tree

__all__ = [
    "IDENTIFIER_ATTRIBUTES",
    "MAX_NESTING_DEPTH",
    "Aligner",
    "DiffConfig",
    "DocumentKind",
    "InlineSpan",
    "LineDiffer",
    "PathDiffer",
    "SequenceMatcher",
    "flatten",
    "flatten_tree",
    "inline_span",
    "longest_common_subsequence",
    "split_lines",
]
