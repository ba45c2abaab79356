"""ComparisonConfig: numeric tolerance settings for document comparison.

ComparisonConfig is a frozen (immutable) dataclass.  Its defaults give the
standard tolerance rule; see ``json_equivalence.algorithm.tolerance``.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ComparisonConfig"]


@dataclass(frozen=True, slots=True)
class ComparisonConfig:
    """Immutable configuration for document comparison.

    Attributes:
        relative_tolerance: Multiplier applied to ``max(|e|, |a|)`` to obtain
            the allowed absolute difference between two numbers.  Default 1e-10.
        zero_tolerance: Allowed absolute difference when the magnitude is
            exactly zero.  Default 1e-15.
    """

    relative_tolerance: float = 1e-10
    zero_tolerance: float = 1e-15

    def __post_init__(self) -> None:
        if not self.relative_tolerance >= 0.0:
            msg = f"relative_tolerance must be >= 0.0, got {self.relative_tolerance}"
            raise ValueError(msg)
        if not self.zero_tolerance >= 0.0:
            msg = f"zero_tolerance must be >= 0.0, got {self.zero_tolerance}"
            raise ValueError(msg)
