"""Config diff - structural comparison of configuration documents."""

from __future__ import annotations

from config_diff.algorithm.config import (
    IDENTIFIER_ATTRIBUTES,
    MAX_NESTING_DEPTH,
    DiffConfig,
    DocumentKind,
)
from config_diff.algorithm.align import Aligner, inline_span
from config_diff.algorithm.lcs import SequenceMatcher, longest_common_subsequence
from config_diff.algorithm.lines import LineDiffer
from config_diff.algorithm.matcher import match_children
from config_diff.algorithm.paths import PathDiffer
from config_diff.algorithm.tree import TreeDiffer
from config_diff.api import (
    align_lines,
    compare,
    diff_lines,
    diff_paths,
    diff_trees,
    is_identical,
)
from config_diff.cache import ComparisonCache
from config_diff.comparator import ConfigComparator, detect_kind
from config_diff.errors import (
    ComparisonError,
    DocumentTooLarge,
    InvalidComparisonInput,
    MalformedDocument,
    UnsupportedComparison,
)
from config_diff.result import (
    Change,
    ChangeKind,
    ChangeScope,
    ComparisonResult,
    DiffLine,
    EntryKind,
    LineKind,
    PathDiffRow,
    PathEntry,
    PathStatus,
)
from config_diff.tree import Node, TreeBuilder, canonicalize

__version__: str = "0.1.0"
__all__: list[str] = [
    "IDENTIFIER_ATTRIBUTES",
    "MAX_NESTING_DEPTH",
    "Aligner",
    "Change",
    "ChangeKind",
    "ChangeScope",
    "ComparisonCache",
    "ComparisonError",
    "ComparisonResult",
    "ConfigComparator",
    "DiffConfig",
    "DiffLine",
    "DocumentKind",
    "DocumentTooLarge",
    "EntryKind",
    "InvalidComparisonInput",
    "LineDiffer",
    "LineKind",
    "MalformedDocument",
    "Node",
    "PathDiffRow",
    "PathDiffer",
    "PathEntry",
    "PathStatus",
    "SequenceMatcher",
    "TreeBuilder",
    "TreeDiffer",
    "UnsupportedComparison",
    "align_lines",
    "canonicalize",
    "compare",
    "detect_kind",
    "diff_lines",
    "diff_paths",
    "diff_trees",
    "inline_span",
    "is_identical",
    "longest_common_subsequence",
    "match_children",
]
