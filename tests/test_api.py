"""Unit tests for the public API functions.

Covers compare, is_identical, diff_lines, align_lines, diff_trees and
diff_paths, including the top-level re-exports.
"""

from __future__ import annotations

import pytest

import config_diff
from config_diff import (
    ComparisonResult,
    DiffConfig,
    DocumentKind,
    LineKind,
    MalformedDocument,
    PathStatus,
    UnsupportedComparison,
    align_lines,
    compare,
    diff_lines,
    diff_paths,
    diff_trees,
    is_identical,
)


class TestCompare:
    """Tests for the compare() function."""

    def test_returns_comparison_result(self) -> None:
        assert isinstance(compare("a", "b"), ComparisonResult)

    def test_kind_declares_both_sides(self) -> None:
        result = compare('{"a": 1}', '{"a": 2}', kind=DocumentKind.TEXT)
        assert result.kind == DocumentKind.TEXT

    def test_config_forwarded(self) -> None:
        result = compare("  a", "a", config=DiffConfig(ignore_whitespace=True))
        assert result.is_identical

    def test_malformed_declared_tree_degrades(self) -> None:
        result = compare("<a>", "<a/>", kind="xml-like-tree")
        assert result.kind == DocumentKind.TEXT
        assert result.fallback_reason is not None


class TestIsIdentical:
    @pytest.mark.parametrize(
        ("left", "right"),
        [
            ('<a y="2" x="1"/>', '<a x="1" y="2"/>'),
            ('{"b": 1, "a": 2}', '{"a": 2, "b": 1}'),
            ("same\ntext", "same\ntext"),
        ],
        ids=["tree-attribute-order", "json-key-order", "text"],
    )
    def test_equivalent_documents(self, left: str, right: str) -> None:
        assert is_identical(left, right) is True

    def test_different_documents(self) -> None:
        assert is_identical('{"a": 1}', '{"a": 2}') is False


class TestAlgorithmEntryPoints:
    def test_diff_lines(self) -> None:
        rows = diff_lines("a\nb", "a\nc")
        assert [r.kind for r in rows] == [
            LineKind.UNCHANGED,
            LineKind.DELETION,
            LineKind.ADDITION,
        ]

    def test_align_lines(self) -> None:
        rows = align_lines("a\nb\nz", "a\nc\nz")
        assert [r.kind for r in rows] == [
            LineKind.UNCHANGED,
            LineKind.MODIFICATION,
            LineKind.UNCHANGED,
        ]

    def test_diff_trees(self) -> None:
        changes = diff_trees('<r><p id="1">x</p></r>', '<r><p id="1">y</p></r>')
        assert [(c.path, c.field) for c in changes] == [("r/p[1]", "#text")]

    def test_diff_trees_does_not_degrade(self) -> None:
        with pytest.raises(MalformedDocument):
            diff_trees("<r>", "<r/>")

    def test_diff_paths_accepts_parsed_values(self) -> None:
        rows = diff_paths({"a": [1]}, {"a": [1, 2]})
        assert [(r.path, r.status) for r in rows] == [
            ("a[0]", PathStatus.UNCHANGED),
            ("a[1]", PathStatus.ADDED),
        ]

    def test_diff_paths_parses_strings(self) -> None:
        rows = diff_paths('{"a": 1}', {"a": 1})
        assert rows[0].status == PathStatus.UNCHANGED

    def test_diff_paths_malformed(self) -> None:
        with pytest.raises(MalformedDocument):
            diff_paths("{", "{}")


class TestPackageExports:
    def test_all_names_resolve(self) -> None:
        for name in config_diff.__all__:
            assert hasattr(config_diff, name), name

    def test_errors_exported(self) -> None:
        assert issubclass(UnsupportedComparison, config_diff.ComparisonError)
