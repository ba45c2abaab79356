"""pytest plugin for json-equivalence.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_equivalence import ComparisonConfig, compare_values, evaluate
from json_equivalence.report import format_report


@pytest.fixture(scope="session")
def assert_json_equivalent() -> Any:
    """Fixture that returns a callable JSON equivalence asserter.

    The fixture is session-scoped because the returned callable is stateless
    (each call builds a fresh comparator).

    Usage in tests::

        def test_output(assert_json_equivalent):
            assert_json_equivalent({"total": 0.30000000000000004}, {"total": 0.3})

        def test_output_file(assert_json_equivalent, tmp_path):
            assert_json_equivalent(
                (tmp_path / "out.json").read_text(), '{"ok": true}', as_text=True
            )

    Returns:
        A callable ``_assert(actual, expected, config=None, as_text=False) -> None``
        that raises ``AssertionError`` listing every mismatch when the
        documents differ.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: ComparisonConfig | None = None,
        as_text: bool = False,
    ) -> None:
        """Assert that two JSON documents are equivalent.

        Args:
            actual:   The value (or JSON text, with ``as_text``) produced by
                      the code under test.
            expected: The expected value (or JSON text).
            config:   Optional ComparisonConfig for custom tolerances.
            as_text:  Treat both arguments as JSON texts instead of Python values.

        Raises:
            AssertionError: When any mismatch is found; the message is the
                full report.
            JsonParseError: When ``as_text`` is set and a text is invalid JSON.
        """
        if as_text:
            result = evaluate(expected, actual, config=config)
        else:
            result = compare_values(expected, actual, config=config)
        if not result.is_equivalent:
            raise AssertionError(
                "JSON documents not equivalent:\n" + format_report(result)
            )

    return _assert
