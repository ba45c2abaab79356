"""JSON equivalence - path-addressed structural comparison of JSON documents."""

from __future__ import annotations

from loguru import logger

from json_equivalence.algorithm.config import ComparisonConfig
from json_equivalence.api import (
    compare,
    compare_files,
    compare_values,
    evaluate,
    is_equivalent,
)
from json_equivalence.comparator import JsonComparator
from json_equivalence.errors import JsonParseError
from json_equivalence.result import MISSING, ComparisonResult, Mismatch

logger.disable("json_equivalence")

__version__: str = "0.1.0"
__all__: list[str] = [
    "MISSING",
    "ComparisonConfig",
    "ComparisonResult",
    "JsonComparator",
    "JsonParseError",
    "Mismatch",
    "compare",
    "compare_files",
    "compare_values",
    "evaluate",
    "is_equivalent",
]
