"""algorithm subpackage: public API for structural document comparison.

Provides the lockstep tree walker, its configuration, and the numeric
tolerance rule.  Import from this module (not from sub-modules directly)
to stay on the stable public interface.

Example::

    from json_equivalence.algorithm import DocumentWalker
    from json_equivalence.document import DocumentBuilder

    builder = DocumentBuilder()
    mismatches = DocumentWalker().walk(builder.parse("42"), builder.parse("42.0"))
    # []  (integral and fractional literals compare by value)
"""

from __future__ import annotations

from json_equivalence.algorithm.config import ComparisonConfig
from json_equivalence.algorithm.tolerance import (
    literals_equivalent,
    numbers_equivalent,
    numeric_tolerance,
)
from json_equivalence.algorithm.walker import ROOT_PATH, DocumentWalker

__all__ = [
    "ROOT_PATH",
    "ComparisonConfig",
    "DocumentWalker",
    "literals_equivalent",
    "numbers_equivalent",
    "numeric_tolerance",
]
