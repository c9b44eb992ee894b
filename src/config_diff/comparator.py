"""ConfigComparator: orchestrator that routes a document pair to the right differ.

This is the central wiring layer between the raw algorithms and the public
API.  It validates input, decides the document kind, runs the matching
differ and wraps everything into a ComparisonResult.

Architecture:
- compare() rejects empty documents and documents above ``max_lines``,
  then resolves the kind: declared kinds must agree, undeclared ones are
  detected from content.
- TREE runs TreeDiffer; HIERARCHICAL runs PathDiffer on parsed JSON; TEXT
  runs LineDiffer and Aligner.
- A structured parse failure never escapes: the same pair is re-run as
  TEXT and the parser's reason is kept in ``fallback_reason``.  Documents
  nested deeper than ``MAX_NESTING_DEPTH`` count as parse failures.
- No state survives between calls.  Memoization, when wanted, is the
  caller's job (see ``config_diff.cache.ComparisonCache``).
"""

from __future__ import annotations

import json
import logging
import time
import xml.etree.ElementTree as ET

from config_diff.algorithm.align import Aligner
from config_diff.algorithm.config import DiffConfig, DocumentKind
from config_diff.algorithm.lines import LineDiffer, split_lines
from config_diff.algorithm.paths import PathDiffer, parse_hierarchical
from config_diff.algorithm.tree import TEXT_FIELD, TreeDiffer
from config_diff.errors import (
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
    LineKind,
)

__all__ = ["ConfigComparator", "detect_kind"]

logger = logging.getLogger(__name__)


def detect_kind(document: str) -> DocumentKind:
    """Guess the structural kind of a raw document.

    - Starts with ``<`` and parses as XML            -> TREE
    - Bracket-delimited (``{}``/``[]``) valid JSON   -> HIERARCHICAL
    - Anything else                                  -> TEXT
    """
    stripped = document.strip()

    if stripped.startswith("<"):
        try:
            ET.fromstring(stripped)
        except ET.ParseError:
            pass
        else:
            return DocumentKind.TREE

    if (stripped.startswith("{") and stripped.endswith("}")) or (
        stripped.startswith("[") and stripped.endswith("]")
    ):
        try:
            json.loads(stripped)
        except json.JSONDecodeError:
            pass
        except RecursionError:
            # Bracketed but too deep to decode; parsing reports it as malformed
            return DocumentKind.HIERARCHICAL
        else:
            return DocumentKind.HIERARCHICAL

    return DocumentKind.TEXT


class ConfigComparator:
    """Compares two configuration documents of any supported kind.

    Example::

        from config_diff.comparator import ConfigComparator

        cmp = ConfigComparator()
        result = cmp.compare('{"a": {"b": 1}}', '{"a": {"b": 2, "c": 3}}')
        result.kind                          # "hierarchical-kv"
        [c.path for c in result.changes]     # ["a.b", "a.c"]
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        """Initialise the comparator.

        Args:
            config: Diff options shared by every algorithm.  Defaults to
                ``DiffConfig()``.
        """
        self._config: DiffConfig = config if config is not None else DiffConfig()
        self._line_differ = LineDiffer(self._config)
        self._aligner = Aligner(self._config)
        self._tree_differ = TreeDiffer(self._config)
        self._path_differ = PathDiffer(self._config)

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(
        self,
        left: str,
        right: str,
        left_kind: DocumentKind | str | None = None,
        right_kind: DocumentKind | str | None = None,
    ) -> ComparisonResult:
        """Compare two raw documents.

        Args:
            left:       Raw text of the left (old) document.
            right:      Raw text of the right (new) document.
            left_kind:  Declared kind of ``left``; detected when None.  A kind
                        declared on only one side applies to both.
            right_kind: Declared kind of ``right``.

        Returns:
            A ``ComparisonResult``.  Structured kinds that fail to parse are
            reported as TEXT with ``fallback_reason`` set.

        Raises:
            InvalidComparisonInput: Either document is empty or blank.
            DocumentTooLarge: Either document exceeds ``config.max_lines``.
            UnsupportedComparison: The declared kinds differ.
        """
        t0 = time.perf_counter()
        self._validate(left, "left")
        self._validate(right, "right")

        kind, fallback_reason = self._resolve_kind(left, right, left_kind, right_kind)

        if kind == DocumentKind.TREE:
            try:
                changes = self._tree_differ.diff(left, right)
            except MalformedDocument as exc:
                fallback_reason = self._degrade(kind, exc)
            else:
                return ComparisonResult(
                    kind=kind,
                    changes=tuple(changes),
                    computation_time_ms=self._elapsed(t0),
                )

        elif kind == DocumentKind.HIERARCHICAL:
            try:
                paths = self._path_differ.diff_documents(left, right)
            except MalformedDocument as exc:
                fallback_reason = self._degrade(kind, exc)
            else:
                changes = [c for c in (row.to_change() for row in paths) if c]
                return ComparisonResult(
                    kind=kind,
                    changes=tuple(changes),
                    paths=tuple(paths),
                    computation_time_ms=self._elapsed(t0),
                )

        lines = self._line_differ.diff(left, right)
        rows = self._aligner.align(left, right)
        return ComparisonResult(
            kind=DocumentKind.TEXT,
            changes=tuple(self._line_changes(lines)),
            lines=tuple(lines),
            rows=tuple(rows),
            fallback_reason=fallback_reason,
            computation_time_ms=self._elapsed(t0),
        )

    # ------------------------------------------------------------------
    # Input validation and kind resolution
    # ------------------------------------------------------------------

    def _validate(self, document: str, side: str) -> None:
        if not isinstance(document, str):
            raise InvalidComparisonInput(
                f"{side} document must be a string, got {type(document).__name__}"
            )
        if not document.strip():
            raise InvalidComparisonInput(f"{side} document is empty")
        max_lines = self._config.max_lines
        if max_lines is not None:
            line_count = len(split_lines(document))
            if line_count > max_lines:
                raise DocumentTooLarge(side, line_count, max_lines)

    def _resolve_kind(
        self,
        left: str,
        right: str,
        left_kind: DocumentKind | str | None,
        right_kind: DocumentKind | str | None,
    ) -> tuple[DocumentKind, str | None]:
        """Return the kind to compare as, plus a fallback reason if degraded."""
        declared_left = DocumentKind(left_kind) if left_kind is not None else None
        declared_right = DocumentKind(right_kind) if right_kind is not None else None

        if declared_left is not None and declared_right is not None:
            if declared_left != declared_right:
                raise UnsupportedComparison(declared_left, declared_right)
            return declared_left, None
        declared = declared_left if declared_left is not None else declared_right
        if declared is not None:
            return declared, None

        detected_left = detect_kind(left)
        detected_right = detect_kind(right)
        logger.debug("Detected kinds: left=%s right=%s", detected_left, detected_right)
        if detected_left == detected_right:
            return detected_left, None

        reason = (
            f"detected kinds differ (left={detected_left}, right={detected_right})"
        )
        logger.warning("Comparing as text: %s", reason)
        return DocumentKind.TEXT, reason

    @staticmethod
    def _degrade(kind: DocumentKind, exc: MalformedDocument) -> str:
        logger.warning("%s comparison degraded to text: %s", kind, exc)
        return str(exc)

    # ------------------------------------------------------------------
    # Result assembly
    # ------------------------------------------------------------------

    @staticmethod
    def _line_changes(lines: list[DiffLine]) -> list[Change]:
        """Turn line-diff additions and deletions into value-scope Changes."""
        changes: list[Change] = []
        for line in lines:
            if line.kind == LineKind.ADDITION:
                changes.append(
                    Change(
                        kind=ChangeKind.ADDED,
                        scope=ChangeScope.VALUE,
                        path=f"line[{line.right_line_number}]",
                        field=TEXT_FIELD,
                        new_value=line.right_content,
                    )
                )
            elif line.kind == LineKind.DELETION:
                changes.append(
                    Change(
                        kind=ChangeKind.REMOVED,
                        scope=ChangeScope.VALUE,
                        path=f"line[{line.left_line_number}]",
                        field=TEXT_FIELD,
                        old_value=line.left_content,
                    )
                )
        return changes

    @staticmethod
    def _elapsed(t0: float) -> float:
        return (time.perf_counter() - t0) * 1000.0
