"""Performance benchmark suite for config-diff.

Timing targets on a laptop-class machine:
- ~1000-line text configs: <1s (LCS alignment dominates)
- 500-object trees: <1s
- ~800-path hierarchical documents: <100ms

Run with: pytest tests/benchmarks/ --benchmark-only -v
Skip during normal test runs: pytest --benchmark-disable
"""

from __future__ import annotations

from config_diff import DocumentKind, compare


class TestPerformanceText:
    """Line diff plus alignment of ~1000-line configs."""

    def test_text_1000_lines(self, benchmark, text_pair_1000_lines):  # type: ignore[no-untyped-def]
        left, right = text_pair_1000_lines
        result = benchmark(compare, left, right)
        # Verify the result is valid (not just timing)
        assert result.kind == DocumentKind.TEXT
        assert len(result.changed) == 0
        assert len(result.added) == len(result.removed) == 4


class TestPerformanceTree:
    """Tree diff of 500 keyed managed objects."""

    def test_tree_500_objects(self, benchmark, tree_pair_500_objects):  # type: ignore[no-untyped-def]
        left, right = tree_pair_500_objects
        result = benchmark(compare, left, right)
        assert result.kind == DocumentKind.TREE
        assert result.change_count == 20


class TestPerformanceHierarchical:
    """Path diff of ~800 flattened paths."""

    def test_hierarchical_100_sections(  # type: ignore[no-untyped-def]
        self, benchmark, hierarchical_pair_100_sections
    ):
        left, right = hierarchical_pair_100_sections
        result = benchmark(compare, left, right)
        assert result.kind == DocumentKind.HIERARCHICAL
        assert result.change_count == 10
