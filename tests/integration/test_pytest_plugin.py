"""Integration tests for the json-equivalence pytest plugin.

These tests verify that the assert_json_equivalent fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require json-equivalence to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from json_equivalence import ComparisonConfig, JsonParseError


def test_fixture_passes_equivalent_docs(assert_json_equivalent: Any) -> None:
    """Key order, int/float and round-off differences are all equivalent."""
    assert_json_equivalent({"b": [1, 2], "a": 0.1 + 0.2}, {"a": 0.3, "b": [1.0, 2]})


def test_fixture_fails_on_mismatch(assert_json_equivalent: Any) -> None:
    with pytest.raises(AssertionError, match=r"\$\.a: expected 1, got 2"):
        assert_json_equivalent({"a": 2}, {"a": 1})


def test_fixture_argument_order_is_actual_then_expected(
    assert_json_equivalent: Any,
) -> None:
    with pytest.raises(AssertionError) as exc_info:
        assert_json_equivalent({}, {"only_expected": 1})
    assert "$.only_expected: expected 1, got (missing)" in str(exc_info.value)


def test_fixture_error_message_contents(assert_json_equivalent: Any) -> None:
    """AssertionError message should carry the full report."""
    with pytest.raises(AssertionError) as exc_info:
        assert_json_equivalent([1, 9], [1, 2, 3])

    error_message = str(exc_info.value)
    assert "JSON documents not equivalent" in error_message
    assert "2 difference(s) found" in error_message
    assert "$.length: expected 3, got 2" in error_message
    assert "$[1]: expected 2, got 9" in error_message


def test_fixture_custom_config(assert_json_equivalent: Any) -> None:
    """Custom ComparisonConfig should be forwarded to the comparison."""
    assert_json_equivalent(100.5, 100, config=ComparisonConfig(relative_tolerance=0.01))
    with pytest.raises(AssertionError):
        assert_json_equivalent(100.5, 100)


def test_fixture_as_text(assert_json_equivalent: Any) -> None:
    assert_json_equivalent('{"x": 42.0}', '{"x": 42}', as_text=True)
    with pytest.raises(AssertionError, match="String"):
        assert_json_equivalent('"42"', "42", as_text=True)


def test_fixture_as_text_invalid_json(assert_json_equivalent: Any) -> None:
    with pytest.raises(JsonParseError):
        assert_json_equivalent("{", "{}", as_text=True)


def test_fixture_returns_callable(assert_json_equivalent: Any) -> None:
    """The fixture should return a callable, not None or a direct assertion result."""
    assert callable(assert_json_equivalent), (
        "assert_json_equivalent fixture must return a callable, not a direct value"
    )


def test_plugin_discovery() -> None:
    """Verify assert_json_equivalent appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_json_equivalent" in result.stdout, (
        f"assert_json_equivalent not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
