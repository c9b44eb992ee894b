"""pytest plugin for config-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.
"""

from __future__ import annotations

from typing import Any

import pytest

from config_diff import DiffConfig, DocumentKind, compare
from config_diff.report import format_text_report


@pytest.fixture(scope="session")
def assert_configs_match() -> Any:
    """Fixture that returns a callable configuration equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh ConfigComparator per call).

    Usage in tests::

        def test_render(assert_configs_match):
            assert_configs_match(render_config(), EXPECTED_XML)

        def test_drift(assert_configs_match):
            with pytest.raises(AssertionError, match=r"differences="):
                assert_configs_match('{"a": 1}', '{"a": 2}')

    Returns:
        A callable ``_assert(actual, expected, kind=None, config=None) -> None``
        that raises ``AssertionError`` when the documents differ.
    """

    def _assert(
        actual: str,
        expected: str,
        kind: DocumentKind | str | None = None,
        config: DiffConfig | None = None,
    ) -> None:
        """Assert that two configuration documents have no differences.

        Args:
            actual:   The document produced by the code under test.
            expected: The expected/reference document.
            kind:     Declared kind for both sides; detected when None.
            config:   Optional DiffConfig (whitespace, case, identifiers...).

        Raises:
            AssertionError: When any change is reported, with a message
                including the change count, the compared kind and the
                plain-text report.
        """
        result = compare(actual, expected, kind=kind, config=config)
        if not result.is_identical:
            raise AssertionError(
                f"Configuration documents differ: "
                f"differences={result.change_count} kind={result.kind}\n"
                f"{format_text_report(result)}"
            )

    return _assert
