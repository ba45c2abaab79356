"""Mismatch and ComparisonResult dataclasses for comparison output.

``Mismatch`` is one path-addressed disagreement between the expected and
actual documents.  ``ComparisonResult`` is the rich result returned by
``evaluate()`` calls: the ordered mismatches plus timing.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["MISSING", "ComparisonResult", "Mismatch"]

MISSING = "(missing)"
"""Marker used for a member that exists on only one side."""


@dataclass(frozen=True, slots=True)
class Mismatch:
    """A single disagreement between the expected and actual documents.

    Attributes:
        path:     Location in the expected tree, e.g. ``"$.user.scores[1]"``.
        expected: Rendering of the expected value, or ``MISSING``.
        actual:   Rendering of the actual value, or ``MISSING``.
    """

    path: str
    expected: str
    actual: str

    def __str__(self) -> str:
        return f"{self.path}: expected {self.expected}, got {self.actual}"


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Result of an evaluate() call.

    Attributes:
        mismatches: Every mismatch found, in traversal order.  Empty when
            the documents are equivalent.
        computation_time_ms: Wall-clock duration of parsing plus comparison
            in milliseconds.
    """

    mismatches: tuple[Mismatch, ...]
    computation_time_ms: float

    @property
    def is_equivalent(self) -> bool:
        return not self.mismatches

    @property
    def exit_status(self) -> int:
        """Process exit status: 0 when equivalent, 1 when the documents differ."""
        return 0 if self.is_equivalent else 1
