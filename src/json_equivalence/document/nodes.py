"""DocumentNode dataclass and NodeKind StrEnum for parsed JSON documents.

A parsed document is a tree of ``DocumentNode`` records tagged with one of
the six JSON kinds.  The kind set is fixed by the JSON data model, so the
tree is a closed tagged variant rather than a class hierarchy: every node
is the same record type and the walker dispatches on ``node.kind``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

__all__ = ["DocumentNode", "NodeKind", "NumberLiteral"]


class NodeKind(StrEnum):
    """The six JSON value kinds.

    Values are the display names used in kind-mismatch diagnostics
    (``"Object: {...}"``, ``"String: \\"x\\""``).
    """

    OBJECT = "Object"
    ARRAY = "Array"
    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    NULL = "Null"

    @property
    def is_container(self) -> bool:
        """True for the kinds that extend the path and hold children."""
        return self in (NodeKind.OBJECT, NodeKind.ARRAY)

    @property
    def is_numeric(self) -> bool:
        return self is NodeKind.NUMBER


@dataclass(frozen=True, slots=True)
class NumberLiteral:
    """A JSON number kept as its source literal.

    The literal is retained verbatim so mismatches render exactly what the
    document contained (``42.0`` stays ``42.0``, ``1e5`` stays ``1e5``), and
    so literals beyond double range (``1e400``) can still be compared exactly.

    Attributes:
        text: The number exactly as written in the JSON text.
    """

    text: str

    def as_float(self) -> float:
        return float(self.text)


@dataclass(frozen=True, slots=True)
class DocumentNode:
    """A node in a parsed JSON document.

    Attributes:
        kind:    Which JSON kind this node is (see NodeKind).
        value:   ``str`` for STRING, ``NumberLiteral`` for NUMBER, ``bool`` for
                 BOOLEAN; None for NULL and the container kinds.
        members: Key -> child mapping for OBJECT nodes, in document order.
                 Empty for every other kind.
        items:   Child nodes for ARRAY nodes, in document order.  Empty for
                 every other kind.
        source:  The whole document text the node was parsed from.  Shared by
                 every node of a document, never copied.
        start:   Offset of the node's first character in ``source``.
        end:     Offset just past the node's last character.

    ``source``, ``start`` and ``end`` do not take part in equality: two nodes
    with the same content are equal however they were written.
    """

    kind: NodeKind
    value: Any = None
    members: dict[str, DocumentNode] = field(default_factory=dict)
    items: tuple[DocumentNode, ...] = ()
    source: str = field(default="", repr=False, compare=False)
    start: int = field(default=0, repr=False, compare=False)
    end: int = field(default=0, repr=False, compare=False)

    @property
    def raw_text(self) -> str:
        """The node's JSON text exactly as it appears in the source."""
        return self.source[self.start : self.end]
