"""SequenceMatcher: longest common subsequence over two ordered sequences.

The classic O(n*m) dynamic program, with each table row computed in one
vectorised numpy pass.  For row ``i`` the recurrence

    dp[i][j] = dp[i-1][j-1] + 1                  if a[i-1] == b[j-1]
    dp[i][j] = max(dp[i-1][j], dp[i][j-1])       otherwise

is equivalent to a running maximum over ``j`` of

    c[j] = max(dp[i-1][j], (dp[i-1][j-1] + 1) * [a[i-1] == b[j-1]])

because a diagonal match always dominates both neighbours.  The backtrack
walks the finished table from the bottom-right corner; on equal scores it
steps back along the first sequence, so the earliest matching item of the
first sequence is the one kept.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

__all__ = ["SequenceMatcher", "longest_common_subsequence"]


@dataclass(frozen=True)
class SequenceMatcher:
    """Computes longest common subsequences under an optional normalisation.

    Attributes:
        key: Callable mapping each item to its comparison form (e.g.
            ``str.casefold``).  Items compare by identity of their keys;
            the returned subsequence holds the *original* items taken from
            the first sequence.

    Example::

        matcher = SequenceMatcher()
        matcher.match(["a", "b", "c"], ["a", "x", "c"])   # ["a", "c"]
    """

    key: Callable[[Any], Hashable] | None = None

    def match(self, seq_a: Sequence[Any], seq_b: Sequence[Any]) -> list[Any]:
        """Return the longest common subsequence of ``seq_a`` and ``seq_b``."""
        return [seq_a[i] for i, _ in self.match_indices(seq_a, seq_b)]

    def match_indices(
        self, seq_a: Sequence[Any], seq_b: Sequence[Any]
    ) -> list[tuple[int, int]]:
        """Return the LCS as ``(index_in_a, index_in_b)`` pairs in order."""
        if not seq_a or not seq_b:
            return []

        codes_a, codes_b = self._encode(seq_a, seq_b)
        table = self.table(codes_a, codes_b)

        pairs: list[tuple[int, int]] = []
        i, j = len(codes_a), len(codes_b)
        while i > 0 and j > 0:
            if codes_a[i - 1] == codes_b[j - 1]:
                pairs.append((i - 1, j - 1))
                i -= 1
                j -= 1
            elif table[i - 1, j] >= table[i, j - 1]:
                i -= 1
            else:
                j -= 1
        pairs.reverse()
        return pairs

    def length(self, seq_a: Sequence[Any], seq_b: Sequence[Any]) -> int:
        """Return only the LCS length."""
        if not seq_a or not seq_b:
            return 0
        codes_a, codes_b = self._encode(seq_a, seq_b)
        return int(self.table(codes_a, codes_b)[-1, -1])

    @staticmethod
    def table(codes_a: np.ndarray, codes_b: np.ndarray) -> np.ndarray:
        """Build the ``(len(a) + 1, len(b) + 1)`` LCS length table.

        Args:
            codes_a: 1-D integer array; equal integers mean equal items.
            codes_b: 1-D integer array in the same code space.

        Returns:
            Integer array whose ``[i, j]`` cell is the LCS length of
            ``a[:i]`` and ``b[:j]``.
        """
        m, n = len(codes_a), len(codes_b)
        table = np.zeros((m + 1, n + 1), dtype=np.int64)
        for i in range(1, m + 1):
            prev = table[i - 1]
            diagonal = np.where(codes_b == codes_a[i - 1], prev[:-1] + 1, 0)
            table[i, 1:] = np.maximum.accumulate(np.maximum(prev[1:], diagonal))
        return table

    def _encode(
        self, seq_a: Sequence[Any], seq_b: Sequence[Any]
    ) -> tuple[np.ndarray, np.ndarray]:
        """Map items to dense integer codes so rows compare in numpy."""
        codes: dict[Hashable, int] = {}

        def encode(seq: Sequence[Any]) -> np.ndarray:
            out = np.empty(len(seq), dtype=np.int64)
            for idx, item in enumerate(seq):
                k = self.key(item) if self.key is not None else item
                out[idx] = codes.setdefault(k, len(codes))
            return out

        return encode(seq_a), encode(seq_b)


def longest_common_subsequence(
    seq_a: Sequence[Any],
    seq_b: Sequence[Any],
    key: Callable[[Any], Hashable] | None = None,
) -> list[Any]:
    """Return the longest common subsequence of two sequences.

    Args:
        seq_a: First ordered sequence.
        seq_b: Second ordered sequence.
        key:   Optional normalisation applied to items before comparing.

    Returns:
        The LCS as a list of items from ``seq_a``; empty when either input is.
    """
    return SequenceMatcher(key=key).match(seq_a, seq_b)
