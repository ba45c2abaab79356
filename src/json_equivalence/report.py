"""Human-readable rendering of a ComparisonResult.

Produces the report printed by the command line and used in pytest
assertion messages::

    [FAIL]: actual.json differs from expected.json
      2 difference(s) found:
        $.length: expected 3, got 2
        $[1]: expected 2, got 9
"""

from __future__ import annotations

from json_equivalence.result import ComparisonResult

__all__ = ["format_report"]


def format_report(
    result: ComparisonResult,
    expected_label: str = "expected",
    actual_label: str = "actual",
) -> str:
    """Render a result as a PASS line, or a FAIL line plus one line per mismatch.

    Args:
        result:         The comparison result.
        expected_label: Name shown for the expected document (e.g. a path).
        actual_label:   Name shown for the actual document.

    Returns:
        The report text, without a trailing newline.
    """
    if result.is_equivalent:
        return f"[PASS]: {actual_label} is equivalent to {expected_label}"

    lines = [
        f"[FAIL]: {actual_label} differs from {expected_label}",
        f"  {len(result.mismatches)} difference(s) found:",
    ]
    lines.extend(f"    {mismatch}" for mismatch in result.mismatches)
    return "\n".join(lines)
