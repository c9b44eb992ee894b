"""Exception hierarchy for config-diff.

Every error raised on purpose by this package derives from
``ComparisonError`` so callers can catch the whole family in one clause.
Parse failures additionally subclass ``ValueError`` because they describe
bad input rather than a bug.
"""

from __future__ import annotations

__all__ = [
    "ComparisonError",
    "DocumentTooLarge",
    "InvalidComparisonInput",
    "MalformedDocument",
    "UnsupportedComparison",
]


class ComparisonError(Exception):
    """Base class for all config-diff errors."""


class MalformedDocument(ComparisonError, ValueError):
    """A document could not be parsed into the requested structural kind.

    Attributes:
        reason: The message reported by the underlying parser.
        side:   ``"left"`` or ``"right"`` when known, else None.
    """

    def __init__(self, reason: str, side: str | None = None) -> None:
        self.reason = reason
        self.side = side
        prefix = f"{side} document" if side else "document"
        super().__init__(f"Malformed {prefix}: {reason}")


class UnsupportedComparison(ComparisonError):
    """The two documents were declared as kinds that cannot be compared."""

    def __init__(self, left_kind: str, right_kind: str) -> None:
        self.left_kind = str(left_kind)
        self.right_kind = str(right_kind)
        super().__init__(
            f"Cannot compare a '{self.left_kind}' document with a '{self.right_kind}' document"
        )


class InvalidComparisonInput(ComparisonError, ValueError):
    """The caller supplied input the engine refuses to coerce (e.g. an empty side)."""


class DocumentTooLarge(InvalidComparisonInput):
    """A document exceeds the configured line ceiling."""

    def __init__(self, side: str, line_count: int, max_lines: int) -> None:
        self.side = side
        self.line_count = line_count
        self.max_lines = max_lines
        super().__init__(
            f"{side} document has {line_count} lines, above the limit of {max_lines}"
        )
