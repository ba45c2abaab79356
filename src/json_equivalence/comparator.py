"""JsonComparator: orchestrator that wires DocumentBuilder + DocumentWalker.

This is the wiring layer between the raw algorithm and the public API.  It
parses both inputs, delegates traversal to ``DocumentWalker.walk()``, and
wraps the mismatches in a timed ``ComparisonResult``.

Architecture:
- compare() parses the expected text, then the actual text, then walks the
  two trees.  A parse failure raises ``JsonParseError`` before any walking
  happens; it is never turned into a mismatch.
- Parsed documents are cached per instance in an LRU cache keyed by the
  JSON text.  Documents are never mutated after parsing, so a cached tree
  can be handed to any number of walks.  Test suites that check many
  actual outputs against one expected fixture parse that fixture once.
- The cache is guarded by a lock; the walk itself holds no shared state,
  so one comparator may be shared between threads.
"""

from __future__ import annotations

import threading
import time

from cachetools import LRUCache
from loguru import logger

from json_equivalence.algorithm.config import ComparisonConfig
from json_equivalence.algorithm.walker import DocumentWalker
from json_equivalence.document.builder import DocumentBuilder
from json_equivalence.document.nodes import DocumentNode
from json_equivalence.result import ComparisonResult, Mismatch

__all__ = ["JsonComparator"]


class JsonComparator:
    """Orchestrator for structural JSON comparison.

    Wires ``DocumentBuilder`` and ``DocumentWalker`` together into a single
    ``compare()`` call that returns the ordered mismatch list, and an
    ``evaluate()`` call that returns a timed ``ComparisonResult``.

    Two separate ``JsonComparator`` instances never share cache state; each
    instance maintains its own ``LRUCache``.

    Example::

        from json_equivalence.comparator import JsonComparator

        cmp = JsonComparator()
        mismatches = cmp.compare('{"a": 1}', '{}')
        print(mismatches[0])   # $.a: expected 1, got (missing)
    """

    def __init__(
        self,
        config: ComparisonConfig | None = None,
        max_cache_size: int = 32,
    ) -> None:
        """Initialise the comparator.

        Args:
            config: Tolerance settings.  Defaults to ``ComparisonConfig()``.
            max_cache_size: Maximum number of parsed documents held in the
                per-instance LRU cache.  0 disables caching.  This is an
                infrastructure parameter and does not affect results.
        """
        self._config: ComparisonConfig = (
            config if config is not None else ComparisonConfig()
        )
        self._builder = DocumentBuilder()
        self._walker = DocumentWalker(config=self._config)
        self._cache: LRUCache[str | bytes, DocumentNode] | None = (
            LRUCache(maxsize=max_cache_size) if max_cache_size > 0 else None
        )
        self._lock = threading.Lock()

    @property
    def config(self) -> ComparisonConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, expected: str | bytes, actual: str | bytes) -> list[Mismatch]:
        """Compare two JSON texts and return every mismatch.

        Args:
            expected: The expected JSON document.
            actual:   The actual JSON document.

        Returns:
            Mismatches in traversal order; empty when equivalent.

        Raises:
            JsonParseError: If either text is not valid JSON.
        """
        expected_root = self._parse(expected, "expected")
        actual_root = self._parse(actual, "actual")
        mismatches = self._walker.walk(expected_root, actual_root)
        logger.debug("Comparison found {} mismatch(es)", len(mismatches))
        return mismatches

    def evaluate(self, expected: str | bytes, actual: str | bytes) -> ComparisonResult:
        """Compare two JSON texts and return a timed ComparisonResult.

        Raises:
            JsonParseError: If either text is not valid JSON.
        """
        t0 = time.perf_counter()
        mismatches = self.compare(expected, actual)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug("Comparison took {:.3f} ms", elapsed_ms)
        return ComparisonResult(
            mismatches=tuple(mismatches),
            computation_time_ms=elapsed_ms,
        )

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def _parse(self, text: str | bytes, source: str) -> DocumentNode:
        if self._cache is None:
            return self._builder.parse(text, source)

        with self._lock:
            cached = self._cache.get(text)
        if cached is not None:
            logger.debug("Using cached {} document", source)
            return cached

        logger.debug("Parsing {} document ({} chars)", source, len(text))
        root = self._builder.parse(text, source)
        with self._lock:
            self._cache[text] = root
        return root
