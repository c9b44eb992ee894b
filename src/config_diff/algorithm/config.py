"""DiffConfig and DocumentKind for comparison engine configuration.

DiffConfig is a frozen (immutable) dataclass holding every tunable of the
four diff algorithms.  DocumentKind names the three structural kinds a
document can be compared as.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

__all__ = ["IDENTIFIER_ATTRIBUTES", "MAX_NESTING_DEPTH", "DiffConfig", "DocumentKind"]

# Attribute names probed, in order, for an element's identifying value.
IDENTIFIER_ATTRIBUTES: tuple[str, ...] = (
    "class",
    "id",
    "name",
    "distName",
    "distinguishedName",
    "dn",
    "key",
    "type",
    "refId",
    "version",
)

# Deepest element or container nesting a structured document may have.
# Deeper documents are rejected as malformed and compared as text.
MAX_NESTING_DEPTH = 256


class DocumentKind(StrEnum):
    """Structural kind a document is compared as.

    - TEXT:         Line-oriented free text (LineDiffer + Aligner).
    - TREE:         Semi-structured XML-like tree (TreeDiffer).
    - HIERARCHICAL: Strictly hierarchical key-value document such as JSON
                    (PathDiffer).
    """

    TEXT = "text"
    TREE = "xml-like-tree"
    HIERARCHICAL = "hierarchical-kv"


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for a comparison.

    Attributes:
        ignore_whitespace: Strip leading/trailing whitespace from each line
            before comparing.  Default False.
        case_sensitive: When False, lines are case-folded before comparing.
            Default True.
        lookahead_window: How many lines LineDiffer scans ahead on a mismatch
            to classify it as a deletion or addition.  Must be >= 1.
        similarity_threshold: Minimum attribute-similarity score (exclusive)
            for pairing keyless tree elements.  Must be in [0, 1].
        identifier_attributes: Ordered attribute names used to identify tree
            elements.  Must not be empty.
        type_sensitive_paths: When True, PathDiffer treats ``1`` and ``"1"``
            as different values.  Default False.
        max_lines: Optional ceiling on the line count of either document.
    """

    ignore_whitespace: bool = False
    case_sensitive: bool = True
    lookahead_window: int = 5
    similarity_threshold: float = 0.4
    identifier_attributes: tuple[str, ...] = IDENTIFIER_ATTRIBUTES
    type_sensitive_paths: bool = False
    max_lines: int | None = None

    def __post_init__(self) -> None:
        if self.lookahead_window < 1:
            msg = f"lookahead_window must be >= 1, got {self.lookahead_window}"
            raise ValueError(msg)
        if not 0.0 <= self.similarity_threshold <= 1.0:
            msg = (
                "similarity_threshold must be in [0, 1], "
                f"got {self.similarity_threshold}"
            )
            raise ValueError(msg)
        if not self.identifier_attributes:
            msg = "identifier_attributes must name at least one attribute"
            raise ValueError(msg)
        if isinstance(self.identifier_attributes, str):
            msg = "identifier_attributes must be a sequence of names, not a string"
            raise ValueError(msg)
        # Frozen: coerce lists to tuples through object.__setattr__.
        object.__setattr__(
            self, "identifier_attributes", tuple(self.identifier_attributes)
        )
        if self.max_lines is not None and self.max_lines < 1:
            msg = f"max_lines must be >= 1 when set, got {self.max_lines}"
            raise ValueError(msg)

    def normalize_line(self, line: str) -> str:
        """Return the comparison form of ``line`` under this configuration."""
        if self.ignore_whitespace:
            line = line.strip()
        if not self.case_sensitive:
            line = line.casefold()
        return line
