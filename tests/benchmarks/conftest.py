"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three families, each as a (left, right) pair with a handful of edits:
- text:          line-oriented device configuration
- tree:          RAML-like managed-object dump
- hierarchical:  nested JSON settings
"""

from __future__ import annotations

import json

import pytest


def _text_config(blocks: int, mtu: int) -> str:
    lines = ["hostname bench-r1", "!"]
    for i in range(blocks):
        lines += [
            f"interface ge-0/0/{i}",
            f" description uplink {i}",
            f" mtu {mtu if i % 50 == 0 else 1500}",
            " no shutdown",
            "!",
        ]
    return "\n".join(lines)


def _tree_config(objects: int, changed_every: int) -> str:
    parts = ['<raml version="2.0"><cmData type="actual">']
    for i in range(objects):
        value = "true" if changed_every and i % changed_every == 0 else "false"
        parts.append(
            f'<managedObject class="LNCEL" distName="MRBTS-1/LNCEL-{i}" version="1">'
            f'<p name="actFlag">{value}</p><p name="pMax">{400 + i % 7}</p>'
            "</managedObject>"
        )
    parts.append("</cmData></raml>")
    return "".join(parts)


def _hierarchical_config(sections: int, bump: int) -> str:
    doc = {
        f"section_{i}": {
            "enabled": i % 3 != 0,
            "limits": {"rx": 1000 + i, "tx": 1000 + i + (bump if i % 10 == 0 else 0)},
            "peers": [f"10.0.{i}.{j}" for j in range(4)],
        }
        for i in range(sections)
    }
    return json.dumps(doc)


# --- Fixtures for each family ---


@pytest.fixture
def text_pair_1000_lines() -> tuple[str, str]:
    """~1000-line interface config with every 50th MTU changed."""
    return _text_config(200, 1500), _text_config(200, 9000)


@pytest.fixture
def tree_pair_500_objects() -> tuple[str, str]:
    """500 managed objects (1500 elements) with every 25th flag flipped."""
    return _tree_config(500, 0), _tree_config(500, 25)


@pytest.fixture
def hierarchical_pair_100_sections() -> tuple[str, str]:
    """100 sections (~800 paths) with every 10th tx limit bumped."""
    return _hierarchical_config(100, 0), _hierarchical_config(100, 5)
