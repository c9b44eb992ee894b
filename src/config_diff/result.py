"""Value objects shared by every diff algorithm.

Change, DiffLine, PathEntry and PathDiffRow are the per-comparison outputs
of the tree, line/alignment and path differs.  ComparisonResult bundles
them for the orchestrating comparator.  All of them are frozen and hold
tuples, so a result can be handed to several renderers (or cached) safely.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from config_diff.algorithm.config import DocumentKind

__all__ = [
    "Change",
    "ChangeKind",
    "ChangeScope",
    "ComparisonResult",
    "DiffLine",
    "EntryKind",
    "LineKind",
    "PathDiffRow",
    "PathEntry",
    "PathStatus",
]


class ChangeKind(StrEnum):
    """Direction of a reported difference."""

    ADDED = auto()
    REMOVED = auto()
    CHANGED = auto()


class ChangeScope(StrEnum):
    """Granularity of a reported difference.

    - ELEMENT:   A whole subtree appeared or disappeared.
    - ATTRIBUTE: A single attribute value differs.
    - VALUE:     A text value (or flattened scalar) differs.
    """

    ELEMENT = auto()
    ATTRIBUTE = auto()
    VALUE = auto()


class LineKind(StrEnum):
    """Classification of one row in a line diff or alignment."""

    UNCHANGED = auto()
    ADDITION = auto()
    DELETION = auto()
    MODIFICATION = auto()


class EntryKind(StrEnum):
    """Shape of a flattened leaf in a hierarchical document."""

    SCALAR = auto()
    ARRAY = auto()
    OBJECT = auto()
    NULL = auto()


class PathStatus(StrEnum):
    """Outcome of comparing one flattened path across two documents."""

    ADDED = auto()
    REMOVED = auto()
    MODIFIED = auto()
    UNCHANGED = auto()


@dataclass(frozen=True, slots=True)
class Change:
    """A single reported difference.

    Attributes:
        kind:      added, removed or changed.
        scope:     element, attribute or value.
        path:      Node path (tree diff), flat key path (path diff) or
                   ``line[N]`` (text diff).
        field:     Attribute name, ``#text``, or None for element-level and
                   flat-path changes.
        old_value: Previous value; None means absent (never "empty").
        new_value: New value; None means absent.

    Raises:
        ValueError: If the values do not fit ``kind`` (an added change with
            an old value, a changed change with equal values, ...).
    """

    kind: ChangeKind
    scope: ChangeScope
    path: str
    field: str | None = None
    old_value: str | None = None
    new_value: str | None = None

    def __post_init__(self) -> None:
        if self.kind == ChangeKind.ADDED:
            if self.old_value is not None or self.new_value is None:
                msg = f"added change at {self.path!r} must carry only new_value"
                raise ValueError(msg)
        elif self.kind == ChangeKind.REMOVED:
            if self.new_value is not None or self.old_value is None:
                msg = f"removed change at {self.path!r} must carry only old_value"
                raise ValueError(msg)
        else:
            if self.old_value is None or self.new_value is None:
                msg = f"changed change at {self.path!r} must carry both values"
                raise ValueError(msg)
            if self.old_value == self.new_value:
                msg = f"changed change at {self.path!r} has identical values"
                raise ValueError(msg)

    def inverted(self) -> Change:
        """Return the change as seen when the two documents are swapped."""
        kind = {
            ChangeKind.ADDED: ChangeKind.REMOVED,
            ChangeKind.REMOVED: ChangeKind.ADDED,
        }.get(self.kind, ChangeKind.CHANGED)
        return Change(
            kind=kind,
            scope=self.scope,
            path=self.path,
            field=self.field,
            old_value=self.new_value,
            new_value=self.old_value,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": str(self.kind),
            "scope": str(self.scope),
            "path": self.path,
            "field": self.field,
            "old_value": self.old_value,
            "new_value": self.new_value,
        }


@dataclass(frozen=True, slots=True)
class DiffLine:
    """One row of a line diff or side-by-side alignment.

    Line numbers are 1-based positions in the respective original sequence.
    A side is absent (number and content both None) for additions on the
    left and deletions on the right.
    """

    kind: LineKind
    left_line_number: int | None = None
    right_line_number: int | None = None
    left_content: str | None = None
    right_content: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": str(self.kind),
            "left_line_number": self.left_line_number,
            "right_line_number": self.right_line_number,
            "left_content": self.left_content,
            "right_content": self.right_content,
        }


@dataclass(frozen=True, slots=True)
class PathEntry:
    """Flattened representation of one leaf (or empty container).

    Attributes:
        path:       ``.``-joined object members and ``[i]`` array indices.
        kind:       scalar, array, object or null.
        value:      String form of the leaf (``{}``/``[]`` for empty containers).
        value_type: JSON type name of the original value (``string``,
                    ``number``, ``boolean``, ``null``, ``array``, ``object``).
    """

    path: str
    kind: EntryKind
    value: str
    value_type: str = "string"


@dataclass(frozen=True, slots=True)
class PathDiffRow:
    """Comparison outcome for one path present in either document."""

    path: str
    status: PathStatus
    left: PathEntry | None = None
    right: PathEntry | None = None

    @property
    def left_value(self) -> str | None:
        return self.left.value if self.left is not None else None

    @property
    def right_value(self) -> str | None:
        return self.right.value if self.right is not None else None

    @property
    def value_type(self) -> str:
        entry = self.left if self.left is not None else self.right
        return entry.value_type if entry is not None else ""

    def to_change(self) -> Change | None:
        """Convert to a ``Change``; unchanged rows yield None."""
        kind = {
            PathStatus.ADDED: ChangeKind.ADDED,
            PathStatus.REMOVED: ChangeKind.REMOVED,
            PathStatus.MODIFIED: ChangeKind.CHANGED,
        }.get(self.status)
        if kind is None:
            return None
        old_value, new_value = self.left_value, self.right_value
        if (
            self.left is not None
            and self.right is not None
            and old_value == new_value
        ):
            # Type-sensitive mismatch: same text, different JSON types.
            old_value = f"{old_value} ({self.left.value_type})"
            new_value = f"{new_value} ({self.right.value_type})"
        return Change(
            kind=kind,
            scope=ChangeScope.VALUE,
            path=self.path,
            old_value=old_value,
            new_value=new_value,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "status": str(self.status),
            "type": self.value_type,
            "left_value": self.left_value,
            "right_value": self.right_value,
        }


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Everything one compare invocation produced.

    Attributes:
        kind:            The document kind the comparison actually ran as
                         (TEXT after a fallback).
        changes:         Ordered Change sequence for every algorithm.
        lines:           LineDiffer output (text kind only).
        rows:            Aligner output for side-by-side rendering (text kind only).
        paths:           PathDiffer rows including unchanged paths
                         (hierarchical kind only).
        fallback_reason: Why a structured comparison degraded to text, if it did.
        computation_time_ms: Wall-clock duration of the comparison.
    """

    kind: DocumentKind
    changes: tuple[Change, ...] = ()
    lines: tuple[DiffLine, ...] = ()
    rows: tuple[DiffLine, ...] = ()
    paths: tuple[PathDiffRow, ...] = ()
    fallback_reason: str | None = None
    computation_time_ms: float = 0.0

    @property
    def added(self) -> list[Change]:
        return [c for c in self.changes if c.kind == ChangeKind.ADDED]

    @property
    def removed(self) -> list[Change]:
        return [c for c in self.changes if c.kind == ChangeKind.REMOVED]

    @property
    def changed(self) -> list[Change]:
        return [c for c in self.changes if c.kind == ChangeKind.CHANGED]

    @property
    def change_count(self) -> int:
        return len(self.changes)

    @property
    def is_identical(self) -> bool:
        return not self.changes

    @property
    def degraded(self) -> bool:
        """True when a structured comparison fell back to text."""
        return self.fallback_reason is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": str(self.kind),
            "is_identical": self.is_identical,
            "counts": {
                "added": len(self.added),
                "removed": len(self.removed),
                "changed": len(self.changed),
            },
            "changes": [c.to_dict() for c in self.changes],
            "lines": [line.to_dict() for line in self.lines],
            "rows": [row.to_dict() for row in self.rows],
            "paths": [row.to_dict() for row in self.paths],
            "fallback_reason": self.fallback_reason,
            "computation_time_ms": self.computation_time_ms,
        }
