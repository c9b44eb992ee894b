"""ComparisonCache: LRU-backed memo around a ConfigComparator.

Comparisons are pure, so repeating one with the same documents, kinds and
configuration always yields the same result.  ``ComparisonCache`` keeps
recent results in memory and serves repeats without recomputing.  Results
are immutable, so a cached instance is handed out as-is.

Each ``ComparisonCache`` instance maintains its own ``LRUCache``: there is
no module-level shared state, so the engine itself stays stateless and two
caches never interfere with each other.

Example::

    from config_diff.cache import ComparisonCache

    cache = ComparisonCache(max_size=128)
    first = cache.compare(old_text, new_text)    # computed
    again = cache.compare(old_text, new_text)    # served from memory
    assert first is again
"""

from __future__ import annotations

import hashlib
import logging

from cachetools import LRUCache

from config_diff.algorithm.config import DiffConfig, DocumentKind
from config_diff.comparator import ConfigComparator
from config_diff.result import ComparisonResult

__all__ = ["ComparisonCache"]

logger = logging.getLogger(__name__)

_CacheKey = tuple[str, str, str | None, str | None]


def _digest(document: str) -> str:
    return hashlib.sha256(document.encode("utf-8")).hexdigest()


class ComparisonCache:
    """Caller-owned LRU memo of comparison results.

    Keys are SHA-256 digests of both documents plus the declared kinds, so
    large documents are not held twice.  Errors are never cached: a failing
    comparison raises again on every call.  LRU eviction is silent.

    Args:
        comparator: The comparator to memoize.  Defaults to a new
            ``ConfigComparator`` built from ``config``.
        config: Used only when ``comparator`` is None.
        max_size: Maximum number of results held.  Defaults to 128.
    """

    def __init__(
        self,
        comparator: ConfigComparator | None = None,
        config: DiffConfig | None = None,
        max_size: int = 128,
    ) -> None:
        self._comparator = (
            comparator if comparator is not None else ConfigComparator(config)
        )
        self._cache: LRUCache[_CacheKey, ComparisonResult] = LRUCache(maxsize=max_size)
        self.hits = 0
        self.misses = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of results this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of results stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Comparator surface
    # ------------------------------------------------------------------

    def compare(
        self,
        left: str,
        right: str,
        left_kind: DocumentKind | str | None = None,
        right_kind: DocumentKind | str | None = None,
    ) -> ComparisonResult:
        """Return the cached result for this pair, computing it on a miss."""
        key: _CacheKey = (
            _digest(left) if isinstance(left, str) else repr(left),
            _digest(right) if isinstance(right, str) else repr(right),
            str(left_kind) if left_kind is not None else None,
            str(right_kind) if right_kind is not None else None,
        )
        cached = self._cache.get(key)
        if cached is not None:
            self.hits += 1
            logger.debug("Comparison cache hit")
            return cached

        self.misses += 1
        result = self._comparator.compare(left, right, left_kind, right_kind)
        self._cache[key] = result
        return result

    def clear(self) -> None:
        """Drop every cached result and reset the hit/miss counters."""
        self._cache.clear()
        self.hits = 0
        self.misses = 0
