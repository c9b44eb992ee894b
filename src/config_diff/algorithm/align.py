"""Aligner: side-by-side row alignment of two line sequences.

Built on the same LCS backbone as the rest of the engine.  Both sequences
are walked with pointers ``i`` and ``j`` against an LCS pointer ``k``:

- both lines equal ``lcs[k]``      -> unchanged row, advance i, j, k
- neither line equals ``lcs[k]``   -> modification row, advance i, j
- only the left line differs       -> deletion row, advance i
- only the right line differs      -> addition row, advance j

Once the LCS is exhausted, leftover left lines become deletions and
leftover right lines additions.  Line numbers therefore increase
monotonically within each pane.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from config_diff.algorithm.config import DiffConfig
from config_diff.algorithm.lcs import SequenceMatcher
from config_diff.algorithm.lines import split_lines
from config_diff.result import DiffLine, LineKind

__all__ = ["Aligner", "InlineSpan", "inline_span"]


class Aligner:
    """Produces alignment rows for dual-pane rendering.

    Example::

        rows = Aligner().align("one\\ntwo\\nthree", "one\\nthree\\nfour")
        [r.kind for r in rows]
        # ["unchanged", "deletion", "unchanged", "addition"]
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config = config if config is not None else DiffConfig()
        self._matcher = SequenceMatcher(key=self._config.normalize_line)

    def align(self, text_a: str, text_b: str) -> list[DiffLine]:
        """Align two raw texts."""
        return self.align_lines(split_lines(text_a), split_lines(text_b))

    def align_lines(
        self, lines_a: Sequence[str], lines_b: Sequence[str]
    ) -> list[DiffLine]:
        """Align two line sequences; every input line lands in exactly one row."""
        normalize = self._config.normalize_line
        lcs = [normalize(line) for line in self._matcher.match(lines_a, lines_b)]
        rows: list[DiffLine] = []
        i = j = k = 0

        while i < len(lines_a) or j < len(lines_b):
            if k < len(lcs) and i < len(lines_a) and j < len(lines_b):
                left_hit = normalize(lines_a[i]) == lcs[k]
                right_hit = normalize(lines_b[j]) == lcs[k]

                if left_hit and right_hit:
                    rows.append(self._pair(LineKind.UNCHANGED, i, j, lines_a, lines_b))
                    i += 1
                    j += 1
                    k += 1
                elif not left_hit and not right_hit:
                    rows.append(
                        self._pair(LineKind.MODIFICATION, i, j, lines_a, lines_b)
                    )
                    i += 1
                    j += 1
                elif not left_hit:
                    rows.append(self._left_only(i, lines_a))
                    i += 1
                else:
                    rows.append(self._right_only(j, lines_b))
                    j += 1
            elif i < len(lines_a):
                rows.append(self._left_only(i, lines_a))
                i += 1
            else:
                rows.append(self._right_only(j, lines_b))
                j += 1

        return rows

    @staticmethod
    def _pair(
        kind: LineKind,
        i: int,
        j: int,
        lines_a: Sequence[str],
        lines_b: Sequence[str],
    ) -> DiffLine:
        return DiffLine(
            kind=kind,
            left_line_number=i + 1,
            right_line_number=j + 1,
            left_content=lines_a[i],
            right_content=lines_b[j],
        )

    @staticmethod
    def _left_only(i: int, lines_a: Sequence[str]) -> DiffLine:
        return DiffLine(
            kind=LineKind.DELETION, left_line_number=i + 1, left_content=lines_a[i]
        )

    @staticmethod
    def _right_only(j: int, lines_b: Sequence[str]) -> DiffLine:
        return DiffLine(
            kind=LineKind.ADDITION, right_line_number=j + 1, right_content=lines_b[j]
        )


@dataclass(frozen=True, slots=True)
class InlineSpan:
    """Common prefix and suffix shared by a modified pair of strings.

    The changed middle is ``old[prefix:len(old) - suffix]`` on the left and
    ``new[prefix:len(new) - suffix]`` on the right.
    """

    prefix: int
    suffix: int

    def old_middle(self, old: str) -> str:
        return old[self.prefix : len(old) - self.suffix]

    def new_middle(self, new: str) -> str:
        return new[self.prefix : len(new) - self.suffix]


def inline_span(old: str, new: str) -> InlineSpan:
    """Locate the changed region between two strings.

    The suffix never overlaps the prefix, so for ``"abc"`` -> ``"abbc"`` the
    span is ``prefix=2, suffix=1`` and the inserted middle is ``"b"``.
    """
    limit = min(len(old), len(new))
    prefix = 0
    while prefix < limit and old[prefix] == new[prefix]:
        prefix += 1

    suffix = 0
    while (
        suffix < len(old) - prefix
        and suffix < len(new) - prefix
        and old[len(old) - 1 - suffix] == new[len(new) - 1 - suffix]
    ):
        suffix += 1

    return InlineSpan(prefix=prefix, suffix=suffix)
