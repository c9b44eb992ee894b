"""LineDiffer: forward two-pointer line diff with bounded look-ahead.

On a mismatch the differ scans at most ``lookahead_window`` lines ahead on
each side to decide whether the left line was deleted, the right line was
added, or both were replaced in place.  The result is not guaranteed to be
a minimal edit script; use ``Aligner`` when minimality matters.
"""

from __future__ import annotations

from collections.abc import Sequence

from config_diff.algorithm.config import DiffConfig
from config_diff.result import DiffLine, LineKind

__all__ = ["LineDiffer", "split_lines"]


def split_lines(text: str) -> list[str]:
    """Split raw text on ``\\n``; a trailing newline yields a final empty line."""
    return text.split("\n")


class LineDiffer:
    """Classifies every line of two texts as unchanged, added or removed.

    Example::

        differ = LineDiffer()
        rows = differ.diff("a\\nb\\nc", "a\\nc")
        [r.kind for r in rows]   # ["unchanged", "deletion", "unchanged"]
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config = config if config is not None else DiffConfig()

    def diff(self, text_a: str, text_b: str) -> list[DiffLine]:
        """Diff two raw texts line by line."""
        return self.diff_lines(split_lines(text_a), split_lines(text_b))

    def diff_lines(
        self, lines_a: Sequence[str], lines_b: Sequence[str]
    ) -> list[DiffLine]:
        """Diff two line sequences.

        Returns:
            DiffLines in emission order.  Every left line appears exactly once
            as unchanged or deletion; every right line exactly once as
            unchanged or addition.  An in-place replacement is emitted as a
            deletion immediately followed by an addition.
        """
        norm_a = [self._config.normalize_line(line) for line in lines_a]
        norm_b = [self._config.normalize_line(line) for line in lines_b]
        result: list[DiffLine] = []
        i = j = 0

        while i < len(norm_a) or j < len(norm_b):
            if i >= len(norm_a):
                result.append(self._addition(j, lines_b))
                j += 1
            elif j >= len(norm_b):
                result.append(self._deletion(i, lines_a))
                i += 1
            elif norm_a[i] == norm_b[j]:
                result.append(
                    DiffLine(
                        kind=LineKind.UNCHANGED,
                        left_line_number=i + 1,
                        right_line_number=j + 1,
                        left_content=lines_a[i],
                        right_content=lines_b[j],
                    )
                )
                i += 1
                j += 1
            else:
                # Where does the current right line reappear on the left, and
                # vice versa?  The nearer resync point wins.
                resync_a = self._find_ahead(norm_a, i, norm_b[j])
                resync_b = self._find_ahead(norm_b, j, norm_a[i])

                if resync_a != -1 and (
                    resync_b == -1 or resync_a - i <= resync_b - j
                ):
                    result.append(self._deletion(i, lines_a))
                    i += 1
                elif resync_b != -1:
                    result.append(self._addition(j, lines_b))
                    j += 1
                else:
                    result.append(self._deletion(i, lines_a))
                    result.append(self._addition(j, lines_b))
                    i += 1
                    j += 1

        return result

    def _find_ahead(self, lines: list[str], start: int, target: str) -> int:
        """Index of ``target`` within the look-ahead window from ``start``, or -1."""
        stop = min(start + self._config.lookahead_window, len(lines))
        for idx in range(start, stop):
            if lines[idx] == target:
                return idx
        return -1

    @staticmethod
    def _addition(j: int, lines_b: Sequence[str]) -> DiffLine:
        return DiffLine(
            kind=LineKind.ADDITION, right_line_number=j + 1, right_content=lines_b[j]
        )

    @staticmethod
    def _deletion(i: int, lines_a: Sequence[str]) -> DiffLine:
        return DiffLine(
            kind=LineKind.DELETION, left_line_number=i + 1, left_content=lines_a[i]
        )
