"""PathDiffer: flat, path-keyed diff of hierarchical documents.

Each document is flattened into ``path -> PathEntry``:

- object members extend the path with ``.key`` (no leading dot at the root)
- array elements extend the path with ``[index]``
- empty objects and arrays emit a sentinel entry (``{}`` / ``[]``)
- scalars, ``null`` included, emit their JSON string form

The diff walks the union of paths in lexicographic order.  Comparison is on
the string form only unless ``DiffConfig.type_sensitive_paths`` is set, so
by default ``1`` and ``"1"`` are equal.

``flatten_tree`` applies the same idea to XML-like Node trees, keying
attributes as ``path@attr`` and direct text as ``path#text``.
"""

from __future__ import annotations

import json
from collections import Counter
from typing import Any

from config_diff.algorithm.config import MAX_NESTING_DEPTH, DiffConfig
from config_diff.errors import MalformedDocument
from config_diff.result import EntryKind, PathDiffRow, PathEntry, PathStatus
from config_diff.tree.nodes import Node

__all__ = [
    "PathDiffRow",
    "PathDiffer",
    "PathStatus",
    "flatten",
    "flatten_tree",
    "parse_hierarchical",
    "stringify_scalar",
]


def parse_hierarchical(document: str, side: str | None = None) -> Any:
    """Parse a JSON document into dicts, lists and scalars.

    Raises:
        MalformedDocument: With the decoder's message when parsing fails, or
            when containers nest deeper than ``MAX_NESTING_DEPTH``.
    """
    try:
        value = json.loads(document)
    except json.JSONDecodeError as exc:
        raise MalformedDocument(str(exc), side=side) from exc
    except RecursionError as exc:
        raise MalformedDocument("document nesting too deep", side=side) from exc
    if _nesting_depth(value) > MAX_NESTING_DEPTH:
        raise MalformedDocument("document nesting too deep", side=side)
    return value


def _nesting_depth(value: Any) -> int:
    deepest = 0
    stack = [(value, 0)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, dict):
            stack.extend((child, depth + 1) for child in current.values())
        elif isinstance(current, list):
            stack.extend((child, depth + 1) for child in current)
        else:
            deepest = max(deepest, depth)
            continue
        deepest = max(deepest, depth + 1)
    return deepest


def _format_float(value: float) -> str:
    """Shortest round-trip form, with exponents written the JSON way.

    ``1e-07`` reads ``1e-7`` and ``1e-05`` reads ``0.00001``.
    """
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    exp = int(exponent)
    if -7 < exp < 0:
        sign = "-" if mantissa.startswith("-") else ""
        digits = mantissa.lstrip("-").replace(".", "")
        return f"{sign}0.{'0' * (-exp - 1)}{digits}"
    return f"{mantissa}e{exp:+d}"


def stringify_scalar(value: Any) -> tuple[str, str]:
    """Return ``(string_form, json_type)`` for a scalar value.

    bool MUST be checked before int: bool subclasses int in Python.
    Integral floats drop their fractional part so ``1.0`` reads as ``1``.
    """
    if value is None:
        return "null", "null"
    if isinstance(value, bool):
        return ("true" if value else "false"), "boolean"
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value)), "number"
        return _format_float(value), "number"
    if isinstance(value, int):
        return str(value), "number"
    if isinstance(value, str):
        return value, "string"
    raise TypeError(f"Unsupported hierarchical value type: {type(value)!r}")


def flatten(
    value: Any, path: str = "", entries: dict[str, PathEntry] | None = None
) -> dict[str, PathEntry]:
    """Flatten a JSON-like value into a ``path -> PathEntry`` mapping.

    Args:
        value:   dict, list or scalar.
        path:    Path of ``value`` itself; ``""`` for the document root.
        entries: Mapping to fill; a new one is created when None.

    Returns:
        The filled mapping, in traversal order.
    """
    if entries is None:
        entries = {}

    if isinstance(value, dict):
        if not value:
            entries[path] = PathEntry(path, EntryKind.OBJECT, "{}", "object")
        for key, child in value.items():
            flatten(child, f"{path}.{key}" if path else str(key), entries)
    elif isinstance(value, list):
        if not value:
            entries[path] = PathEntry(path, EntryKind.ARRAY, "[]", "array")
        for idx, child in enumerate(value):
            flatten(child, f"{path}[{idx}]", entries)
    else:
        text, value_type = stringify_scalar(value)
        kind = EntryKind.NULL if value is None else EntryKind.SCALAR
        entries[path] = PathEntry(path, kind, text, value_type)

    return entries


def flatten_tree(node: Node) -> dict[str, PathEntry]:
    """Flatten a Node tree into ``path@attr`` / ``path#text`` entries.

    Elements with neither attributes nor text still emit one bare entry so
    their presence is compared.  Siblings sharing a display name get an
    occurrence suffix ``(n)`` from the second one on.
    """
    entries: dict[str, PathEntry] = {}
    _flatten_element(node, node.display_name, entries)
    return entries


def _flatten_element(node: Node, path: str, entries: dict[str, PathEntry]) -> None:
    for attr, val in node.attributes.items():
        key = f"{path}@{attr}"
        entries[key] = PathEntry(key, EntryKind.SCALAR, val)
    if node.text:
        key = f"{path}#text"
        entries[key] = PathEntry(key, EntryKind.SCALAR, node.text)
    if not node.attributes and not node.text:
        entries[path] = PathEntry(path, EntryKind.OBJECT, "", "object")

    seen: Counter[str] = Counter()
    for child in node.children:
        seen[child.display_name] += 1
        occurrence = seen[child.display_name]
        child_path = f"{path}/{child.display_name}"
        if occurrence > 1:
            child_path = f"{child_path}({occurrence})"
        _flatten_element(child, child_path, entries)


class PathDiffer:
    """Set-difference diff over flattened hierarchical documents.

    Example::

        rows = PathDiffer().diff({"a": {"b": 1}}, {"a": {"b": 2, "c": 3}})
        [(r.path, r.status) for r in rows]
        # [("a.b", "modified"), ("a.c", "added")]
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config = config if config is not None else DiffConfig()

    def diff(self, value_a: Any, value_b: Any) -> list[PathDiffRow]:
        """Diff two already-parsed hierarchical values."""
        return self.diff_entries(flatten(value_a), flatten(value_b))

    def diff_documents(self, document_a: str, document_b: str) -> list[PathDiffRow]:
        """Parse two JSON documents and diff them.

        Raises:
            MalformedDocument: If either document is not valid JSON.
        """
        return self.diff(
            parse_hierarchical(document_a, side="left"),
            parse_hierarchical(document_b, side="right"),
        )

    def diff_trees(self, root_a: Node, root_b: Node) -> list[PathDiffRow]:
        """Diff two Node trees through their flattened attribute maps."""
        return self.diff_entries(flatten_tree(root_a), flatten_tree(root_b))

    def diff_entries(
        self, entries_a: dict[str, PathEntry], entries_b: dict[str, PathEntry]
    ) -> list[PathDiffRow]:
        """Compare two flattened maps over the sorted union of their paths."""
        rows: list[PathDiffRow] = []
        for path in sorted(entries_a.keys() | entries_b.keys()):
            left = entries_a.get(path)
            right = entries_b.get(path)
            if left is not None and right is not None:
                status = (
                    PathStatus.UNCHANGED
                    if self._equal(left, right)
                    else PathStatus.MODIFIED
                )
            elif left is not None:
                status = PathStatus.REMOVED
            else:
                status = PathStatus.ADDED
            rows.append(PathDiffRow(path=path, status=status, left=left, right=right))
        return rows

    def _equal(self, left: PathEntry, right: PathEntry) -> bool:
        if self._config.type_sensitive_paths and left.value_type != right.value_type:
            return False
        return left.value == right.value
