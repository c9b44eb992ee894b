"""Plain-text and tabular exports of comparison results.

These are consumers of a ComparisonResult: they never recompute anything
and produce no markup.  The caller passes the result it holds; nothing is
read from ambient state.
"""

from __future__ import annotations

import csv
import io
from collections import Counter
from collections.abc import Iterable, Sequence

from config_diff.algorithm.config import DocumentKind
from config_diff.result import (
    Change,
    ChangeKind,
    ChangeScope,
    ComparisonResult,
    DiffLine,
    LineKind,
    PathDiffRow,
    PathStatus,
)

__all__ = [
    "PATH_TABLE_HEADERS",
    "count_by_status",
    "format_text_report",
    "format_unified_lines",
    "path_rows_to_csv",
    "path_rows_to_tsv",
]

PATH_TABLE_HEADERS: tuple[str, ...] = (
    "Path",
    "Type",
    "Value (Left)",
    "Value (Right)",
    "Status",
)

_CHANGE_MARKERS = {
    ChangeKind.ADDED: "+",
    ChangeKind.REMOVED: "-",
    ChangeKind.CHANGED: "~",
}

_LINE_PREFIXES = {
    LineKind.ADDITION: "+",
    LineKind.DELETION: "-",
    LineKind.UNCHANGED: " ",
}


def format_text_report(result: ComparisonResult) -> str:
    """Render ``result`` as a human-readable plain-text report."""
    if result.kind == DocumentKind.TREE:
        return _format_tree_report(result.changes)
    if result.kind == DocumentKind.HIERARCHICAL:
        return _format_path_report(result.paths)
    return format_unified_lines(result.lines)


def format_unified_lines(lines: Iterable[DiffLine]) -> str:
    """One ``+``/``-``/`` `` prefixed line per LineDiffer row.

    Modification rows (from the Aligner) expand to a ``-`` and a ``+`` line.
    """
    out: list[str] = []
    for line in lines:
        if line.kind == LineKind.MODIFICATION:
            out.append(f"- {line.left_content}")
            out.append(f"+ {line.right_content}")
            continue
        content = line.right_content if line.kind == LineKind.ADDITION else line.left_content
        out.append(f"{_LINE_PREFIXES[line.kind]} {content}")
    return "\n".join(out)


def _format_tree_report(changes: Sequence[Change]) -> str:
    removed_elements = [
        c for c in changes if c.kind == ChangeKind.REMOVED and c.scope == ChangeScope.ELEMENT
    ]
    added_elements = [
        c for c in changes if c.kind == ChangeKind.ADDED and c.scope == ChangeScope.ELEMENT
    ]
    field_changes = [c for c in changes if c.scope != ChangeScope.ELEMENT]

    out = [
        "=== CONFIG COMPARISON SUMMARY ===",
        f"Removed Elements : {len(removed_elements)}",
        f"Added Elements   : {len(added_elements)}",
        f"Field Changes    : {len(field_changes)}",
        f"Total Differences: {len(changes)}",
        "",
    ]

    for title, marker, group in (
        ("REMOVED ELEMENTS", "-", removed_elements),
        ("ADDED ELEMENTS", "+", added_elements),
    ):
        if not group:
            continue
        out.append(f"=== {title} ({len(group)}) ===")
        for change in group:
            out.append("")
            out.append(f"[{marker}] {change.path}")
            payload = change.old_value if marker == "-" else change.new_value
            if payload:
                out.extend(f"    {line}" for line in payload.split("\n"))
        out.append("")

    if field_changes:
        out.append(f"=== FIELD CHANGES ({len(field_changes)}) ===")
        by_path: dict[str, list[Change]] = {}
        for change in field_changes:
            by_path.setdefault(change.path, []).append(change)
        for path, group in by_path.items():
            out.append("")
            out.append(f"  {path}")
            for change in group:
                name = f"@{change.field}" if change.scope == ChangeScope.ATTRIBUTE else change.field
                line = f"    [{_CHANGE_MARKERS[change.kind]}] {name}"
                if change.old_value is not None:
                    line += f"  was: {change.old_value}"
                if change.new_value is not None:
                    line += f"  now: {change.new_value}"
                out.append(line)

    return "\n".join(out).rstrip("\n") + "\n"


def _format_path_report(rows: Sequence[PathDiffRow]) -> str:
    counts = count_by_status(rows)
    out = [
        f"+ {counts[PathStatus.ADDED]} Added",
        f"- {counts[PathStatus.REMOVED]} Removed",
        f"~ {counts[PathStatus.MODIFIED]} Modified",
        f"= {counts[PathStatus.UNCHANGED]} Unchanged",
        "",
    ]
    for row in rows:
        if row.status == PathStatus.ADDED:
            out.append(f"[+] {row.path}  now: {row.right_value}")
        elif row.status == PathStatus.REMOVED:
            out.append(f"[-] {row.path}  was: {row.left_value}")
        elif row.status == PathStatus.MODIFIED:
            out.append(f"[~] {row.path}  was: {row.left_value}  now: {row.right_value}")
    return "\n".join(out).rstrip("\n") + "\n"


def count_by_status(rows: Iterable[PathDiffRow]) -> Counter[PathStatus]:
    """Count rows per status; statuses with no rows read as 0."""
    counts: Counter[PathStatus] = Counter({status: 0 for status in PathStatus})
    counts.update(row.status for row in rows)
    return counts


def _table_rows(rows: Iterable[PathDiffRow]) -> list[list[str]]:
    return [
        [
            row.path,
            row.value_type,
            row.left_value or "",
            row.right_value or "",
            row.status.capitalize(),
        ]
        for row in rows
    ]


def path_rows_to_csv(rows: Iterable[PathDiffRow]) -> str:
    """Export path rows as CSV with a header line."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(PATH_TABLE_HEADERS)
    writer.writerows(_table_rows(rows))
    return buffer.getvalue()


def path_rows_to_tsv(rows: Iterable[PathDiffRow]) -> str:
    """Export path rows as tab-separated text (clipboard-friendly)."""
    lines = ["\t".join(PATH_TABLE_HEADERS)]
    lines.extend("\t".join(cells) for cells in _table_rows(rows))
    return "\n".join(lines)
