"""Tests for PathDiffer and the flattening helpers.

Covers:
- flatten: object/array paths, empty-container sentinels, null and root scalars
- stringify_scalar: JSON spellings of booleans, null, integral floats and exponents
- PathDiffer.diff: added/removed/modified/unchanged rows in sorted path order
- Type-blind default versus type_sensitive_paths
- diff_documents parse errors and the nesting depth limit
- flatten_tree / diff_trees over XML-like Node trees
- PathDiffRow.to_change conversion
"""

from __future__ import annotations

import pytest

from config_diff.algorithm.config import MAX_NESTING_DEPTH, DiffConfig
from config_diff.algorithm.paths import (
    PathDiffer,
    flatten,
    flatten_tree,
    parse_hierarchical,
    stringify_scalar,
)
from config_diff.errors import MalformedDocument
from config_diff.result import ChangeKind, EntryKind, PathStatus
from config_diff.tree.builder import TreeBuilder

# ---------------------------------------------------------------------------
# flatten
# ---------------------------------------------------------------------------


class TestFlatten:
    def test_nested_objects_use_dots(self) -> None:
        entries = flatten({"a": {"b": 1, "c": "x"}})
        assert list(entries) == ["a.b", "a.c"]
        assert entries["a.b"].value == "1"
        assert entries["a.b"].value_type == "number"
        assert entries["a.c"].value_type == "string"

    def test_arrays_use_indices(self) -> None:
        entries = flatten({"x": [1, {"y": None}]})
        assert list(entries) == ["x[0]", "x[1].y"]
        assert entries["x[1].y"].kind == EntryKind.NULL
        assert entries["x[1].y"].value == "null"

    def test_empty_containers_emit_sentinels(self) -> None:
        entries = flatten({"a": {}, "b": []})
        assert (entries["a"].kind, entries["a"].value) == (EntryKind.OBJECT, "{}")
        assert (entries["b"].kind, entries["b"].value) == (EntryKind.ARRAY, "[]")

    def test_root_array(self) -> None:
        assert list(flatten([{"a": 1}, 2])) == ["[0].a", "[1]"]

    def test_root_scalar(self) -> None:
        entries = flatten(5)
        assert list(entries) == [""]
        assert entries[""].kind == EntryKind.SCALAR

    def test_non_json_value_rejected(self) -> None:
        with pytest.raises(TypeError):
            flatten({"a": object()})


class TestStringifyScalar:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, ("true", "boolean")),
            (False, ("false", "boolean")),
            (None, ("null", "null")),
            (1, ("1", "number")),
            (1.0, ("1", "number")),
            (1.5, ("1.5", "number")),
            (1e-07, ("1e-7", "number")),
            (-2.5e-08, ("-2.5e-8", "number")),
            (1.5e-05, ("0.000015", "number")),
            (0.0001, ("0.0001", "number")),
            (1e21, ("1e+21", "number")),
            ("1", ("1", "string")),
        ],
    )
    def test_spelling(self, value: object, expected: tuple[str, str]) -> None:
        assert stringify_scalar(value) == expected


# ---------------------------------------------------------------------------
# PathDiffer
# ---------------------------------------------------------------------------


class TestPathDiffer:
    def test_modified_and_added(self) -> None:
        rows = PathDiffer().diff({"a": {"b": 1}}, {"a": {"b": 2, "c": 3}})
        assert [(r.path, r.status) for r in rows] == [
            ("a.b", PathStatus.MODIFIED),
            ("a.c", PathStatus.ADDED),
        ]
        assert (rows[0].left_value, rows[0].right_value) == ("1", "2")
        assert rows[1].left is None

    def test_removed_and_unchanged(self) -> None:
        rows = PathDiffer().diff({"k": 1, "gone": True}, {"k": 1})
        assert [(r.path, r.status) for r in rows] == [
            ("gone", PathStatus.REMOVED),
            ("k", PathStatus.UNCHANGED),
        ]

    def test_rows_sorted_lexicographically(self) -> None:
        rows = PathDiffer().diff({"b": 1, "a": 1, "c": {"z": 1, "y": 2}}, {})
        assert [r.path for r in rows] == ["a", "b", "c.y", "c.z"]

    def test_identical_documents_all_unchanged(self) -> None:
        doc = {"a": [1, 2, {"b": None}], "c": {}}
        rows = PathDiffer().diff(doc, doc)
        assert all(r.status == PathStatus.UNCHANGED for r in rows)

    def test_container_replaced_by_scalar(self) -> None:
        rows = PathDiffer().diff({"a": {}}, {"a": 0})
        assert [(r.path, r.status) for r in rows] == [("a", PathStatus.MODIFIED)]

    def test_type_blind_by_default(self) -> None:
        rows = PathDiffer().diff({"a": 1}, {"a": "1"})
        assert rows[0].status == PathStatus.UNCHANGED

    def test_type_sensitive_flag(self) -> None:
        rows = PathDiffer(DiffConfig(type_sensitive_paths=True)).diff({"a": 1}, {"a": "1"})
        assert rows[0].status == PathStatus.MODIFIED

    def test_diff_documents_parses_json(self) -> None:
        rows = PathDiffer().diff_documents('{"a": 1}', '{"a": 2}')
        assert rows[0].status == PathStatus.MODIFIED

    def test_diff_documents_malformed_side(self) -> None:
        with pytest.raises(MalformedDocument) as exc_info:
            PathDiffer().diff_documents('{"a": 1}', '{"a": ')
        assert exc_info.value.side == "right"

    def test_parse_hierarchical_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_hierarchical("{nope}")

    @pytest.mark.parametrize(
        "document",
        [
            "[" * 3000 + "1" + "]" * 3000,
            '{"a": ' * (MAX_NESTING_DEPTH + 1) + "1" + "}" * (MAX_NESTING_DEPTH + 1),
        ],
        ids=["beyond-decoder", "just-over-limit"],
    )
    def test_parse_hierarchical_rejects_deep_nesting(self, document: str) -> None:
        with pytest.raises(MalformedDocument) as exc_info:
            parse_hierarchical(document, side="left")
        assert exc_info.value.reason == "document nesting too deep"
        assert exc_info.value.side == "left"

    def test_parse_hierarchical_accepts_depth_limit(self) -> None:
        document = "[" * MAX_NESTING_DEPTH + "]" * MAX_NESTING_DEPTH
        value = parse_hierarchical(document)
        assert isinstance(value, list)


# ---------------------------------------------------------------------------
# PathDiffRow.to_change
# ---------------------------------------------------------------------------


class TestToChange:
    def test_unchanged_row_has_no_change(self) -> None:
        (row,) = PathDiffer().diff({"a": 1}, {"a": 1})
        assert row.to_change() is None

    def test_modified_row_becomes_changed(self) -> None:
        (row,) = PathDiffer().diff({"a": 1}, {"a": 2})
        change = row.to_change()
        assert change is not None
        assert change.kind == ChangeKind.CHANGED
        assert (change.path, change.field) == ("a", None)
        assert (change.old_value, change.new_value) == ("1", "2")

    def test_type_only_difference_spells_out_types(self) -> None:
        (row,) = PathDiffer(DiffConfig(type_sensitive_paths=True)).diff(
            {"a": 1}, {"a": "1"}
        )
        change = row.to_change()
        assert change is not None
        assert (change.old_value, change.new_value) == ("1 (number)", "1 (string)")


# ---------------------------------------------------------------------------
# Tree flattening
# ---------------------------------------------------------------------------


class TestFlattenTree:
    DOC = '<cfg><port id="1" speed="10">up</port><opt/><opt/></cfg>'

    def test_attribute_text_and_bare_entries(self) -> None:
        entries = flatten_tree(TreeBuilder().build(self.DOC))
        assert list(entries) == [
            "cfg",
            "cfg/port[1]@id",
            "cfg/port[1]@speed",
            "cfg/port[1]#text",
            "cfg/opt",
            "cfg/opt(2)",
        ]
        assert entries["cfg/port[1]#text"].value == "up"

    def test_diff_trees(self) -> None:
        builder = TreeBuilder()
        rows = PathDiffer().diff_trees(
            builder.build(self.DOC),
            builder.build('<cfg><port id="1" speed="100">up</port><opt/></cfg>'),
        )
        changed = {(r.path, r.status) for r in rows if r.status != PathStatus.UNCHANGED}
        assert changed == {
            ("cfg/port[1]@speed", PathStatus.MODIFIED),
            ("cfg/opt(2)", PathStatus.REMOVED),
        }
