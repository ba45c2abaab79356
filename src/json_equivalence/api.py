"""Public API functions for json-equivalence.

This module provides the user-facing functions: compare, evaluate,
is_equivalent, compare_values, and compare_files.  Each call creates a
fresh JsonComparator to guarantee zero shared state between calls.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from json_equivalence.algorithm.config import ComparisonConfig
from json_equivalence.comparator import JsonComparator
from json_equivalence.result import ComparisonResult, Mismatch

__all__ = ["compare", "compare_files", "compare_values", "evaluate", "is_equivalent"]


def compare(
    expected: str | bytes,
    actual: str | bytes,
    config: ComparisonConfig | None = None,
) -> list[Mismatch]:
    """Compare two JSON texts and return every mismatch.

    Args:
        expected: The expected JSON document.
        actual:   The actual JSON document.
        config:   Tolerance settings.  Defaults to ``ComparisonConfig()`` when None.

    Returns:
        Mismatches in depth-first order of the expected document.  An empty
        list means the documents are semantically equivalent.

    Raises:
        JsonParseError: If either text is not valid JSON.
    """
    return JsonComparator(config=config, max_cache_size=0).compare(expected, actual)


def evaluate(
    expected: str | bytes,
    actual: str | bytes,
    config: ComparisonConfig | None = None,
) -> ComparisonResult:
    """Compare two JSON texts and return a timed ComparisonResult.

    Raises:
        JsonParseError: If either text is not valid JSON.
    """
    return JsonComparator(config=config, max_cache_size=0).evaluate(expected, actual)


def is_equivalent(
    expected: str | bytes,
    actual: str | bytes,
    config: ComparisonConfig | None = None,
) -> bool:
    """Return True if the two JSON texts have no mismatches.

    Raises:
        JsonParseError: If either text is not valid JSON.
    """
    return not compare(expected, actual, config=config)


def compare_values(
    expected: Any,
    actual: Any,
    config: ComparisonConfig | None = None,
) -> ComparisonResult:
    """Serialize two in-memory Python values and compare them as JSON.

    Args:
        expected: Expected value (dict, list, str, int, float, bool, None).
        actual:   Actual value, typically the result of a computation.
        config:   Tolerance settings.  Defaults to ``ComparisonConfig()`` when None.

    Raises:
        TypeError: If a value is not JSON serializable.
        ValueError: If a value contains NaN or an infinity.
    """
    return evaluate(
        json.dumps(expected, allow_nan=False, ensure_ascii=False),
        json.dumps(actual, allow_nan=False, ensure_ascii=False),
        config=config,
    )


def compare_files(
    expected_path: str | Path,
    actual_path: str | Path,
    config: ComparisonConfig | None = None,
) -> ComparisonResult:
    """Load two JSON files and compare them.

    Files are read as bytes and decoded as UTF-8; a byte-order mark is
    tolerated.

    Raises:
        OSError: If either file cannot be read.
        JsonParseError: If either file is not valid JSON.
    """
    expected_path = Path(expected_path)
    actual_path = Path(actual_path)
    logger.debug("Loading {} and {}", expected_path, actual_path)
    return evaluate(
        expected_path.read_bytes(),
        actual_path.read_bytes(),
        config=config,
    )
