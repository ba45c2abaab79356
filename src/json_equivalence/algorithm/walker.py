"""DocumentWalker: lockstep depth-first comparison of two document trees.

Walks the expected and actual DocumentNode trees together, driven by the
shape of the expected tree, and collects a Mismatch for every point where
they disagree.

Architecture:
- Kind check first.  Differing kinds produce one ``"<Kind>: <raw>"``
  mismatch quoting each side's source text, and stop descent at that node;
  two numeric kinds never differ in kind.
- OBJECT nodes:  expected members in stored order (recurse or ``(missing)``),
                 then actual-only members as ``(missing)`` on the expected side.
- ARRAY nodes:   ``.length`` mismatch when lengths differ, then pairwise
                 comparison over the common prefix.
- Leaf nodes:    STRING and BOOLEAN by value, NUMBER by the tolerance rule,
                 NULL always equal.

Traversal uses an explicit LIFO work stack instead of recursion, so depth
is bounded only by memory.  Each stack entry is either a pending node pair
or an already-built Mismatch; an object pushes its actual-only mismatches
beneath its member pairs so they are emitted after the whole expected-driven
pass over that object, exactly where a recursive walk would emit them.
"""

from __future__ import annotations

from typing import TypeAlias

from json_equivalence.algorithm.config import ComparisonConfig
from json_equivalence.algorithm.tolerance import literals_equivalent
from json_equivalence.document.nodes import DocumentNode, NodeKind
from json_equivalence.result import MISSING, Mismatch

__all__ = ["ROOT_PATH", "DocumentWalker"]

ROOT_PATH = "$"

_Pair: TypeAlias = tuple[DocumentNode, DocumentNode, str]
_Task: TypeAlias = _Pair | Mismatch


class DocumentWalker:
    """Compares two DocumentNode trees and returns every mismatch.

    The walker holds only its configuration; all traversal state is local to
    ``walk()``, so one instance may be used from several threads at once.

    Example::

        from json_equivalence.document import DocumentBuilder

        builder = DocumentBuilder()
        walker = DocumentWalker()
        walker.walk(builder.parse('[1, 2, 3]'), builder.parse('[1, 9]'))
        # [Mismatch("$.length", "3", "2"), Mismatch("$[1]", "2", "9")]
    """

    def __init__(self, config: ComparisonConfig | None = None) -> None:
        self._config = config if config is not None else ComparisonConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def walk(self, expected: DocumentNode, actual: DocumentNode) -> list[Mismatch]:
        """Compare two document trees.

        Args:
            expected: Root of the expected document.
            actual:   Root of the actual document.

        Returns:
            Mismatches in depth-first, left-to-right order of the expected
            tree.  Empty when the documents are equivalent.
        """
        mismatches: list[Mismatch] = []
        stack: list[_Task] = [(expected, actual, ROOT_PATH)]

        while stack:
            task = stack.pop()
            if isinstance(task, Mismatch):
                mismatches.append(task)
                continue

            exp, act, path = task
            if exp.kind is not act.kind and not (
                exp.kind.is_numeric and act.kind.is_numeric
            ):
                mismatches.append(
                    Mismatch(
                        path,
                        f"{exp.kind}: {exp.raw_text}",
                        f"{act.kind}: {act.raw_text}",
                    )
                )
                continue

            if not exp.kind.is_container:
                mismatch = self._compare_leaves(exp, act, path)
                if mismatch is not None:
                    mismatches.append(mismatch)
                continue

            if exp.kind is NodeKind.OBJECT:
                pending = self._object_tasks(exp, act, path)
            else:
                pending = self._array_tasks(exp, act, path)
            stack.extend(reversed(pending))

        return mismatches

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def _object_tasks(
        self, expected: DocumentNode, actual: DocumentNode, path: str
    ) -> list[_Task]:
        """Return the work for an OBJECT pair, in emission order.

        Member order never matters: lookups are by key, and the residual
        scan checks against the set of expected keys.
        """
        tasks: list[_Task] = []
        for key, exp_child in expected.members.items():
            child_path = f"{path}.{key}"
            act_child = actual.members.get(key)
            if act_child is None:
                tasks.append(Mismatch(child_path, exp_child.raw_text, MISSING))
            else:
                tasks.append((exp_child, act_child, child_path))

        for key, act_child in actual.members.items():
            if key not in expected.members:
                tasks.append(Mismatch(f"{path}.{key}", MISSING, act_child.raw_text))
        return tasks

    def _array_tasks(
        self, expected: DocumentNode, actual: DocumentNode, path: str
    ) -> list[_Task]:
        """Return the work for an ARRAY pair, in emission order.

        Elements past the shorter array are not visited; the length mismatch
        is the only signal for them.
        """
        tasks: list[_Task] = []
        n_expected = len(expected.items)
        n_actual = len(actual.items)
        if n_expected != n_actual:
            tasks.append(Mismatch(f"{path}.length", str(n_expected), str(n_actual)))

        for i, (exp_item, act_item) in enumerate(
            zip(expected.items, actual.items, strict=False)
        ):
            tasks.append((exp_item, act_item, f"{path}[{i}]"))
        return tasks

    # ------------------------------------------------------------------
    # Leaves
    # ------------------------------------------------------------------

    def _compare_leaves(
        self, expected: DocumentNode, actual: DocumentNode, path: str
    ) -> Mismatch | None:
        """Compare two leaf nodes of the same kind.

        STRING mismatches carry the decoded values; NUMBER and BOOLEAN
        mismatches carry the source text of each side.
        """
        kind = expected.kind
        if kind is NodeKind.STRING:
            if expected.value != actual.value:
                return Mismatch(path, expected.value, actual.value)
        elif kind is NodeKind.NUMBER:
            if not literals_equivalent(
                expected.value.text,
                actual.value.text,
                self._config.relative_tolerance,
                self._config.zero_tolerance,
            ):
                return Mismatch(path, expected.raw_text, actual.raw_text)
        elif kind is NodeKind.BOOLEAN:
            if expected.value != actual.value:
                return Mismatch(path, expected.raw_text, actual.raw_text)
        # NULL == NULL
        return None
