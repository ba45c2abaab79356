"""DocumentBuilder: converts JSON text into a typed DocumentNode tree.

The builder scans the text itself, one value at a time, leaning on the
standard ``json`` module for string literals (``scanstring``) and
whitespace (``WHITESPACE``) and raising ``json.JSONDecodeError`` with the
module's own messages.  Doing the structural part here gives two things
``json.loads`` does not:

- every node records the span of source text it was parsed from, so
  diagnostics can quote a value exactly as the document wrote it
  (whitespace, escapes and member layout included);
- open containers live on an explicit stack, so nesting depth is bounded
  only by memory.

Number literals are kept verbatim (``NumberLiteral``); the non-standard
``NaN``/``Infinity`` constants are not JSON and fail as "Expecting value".
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from json.decoder import WHITESPACE, scanstring

from json_equivalence.document.nodes import DocumentNode, NodeKind, NumberLiteral
from json_equivalence.errors import JsonParseError

__all__ = ["DocumentBuilder"]

# ASCII digits only: str patterns let \d match any Unicode digit.
_NUMBER = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][-+]?[0-9]+)?")

_LITERALS = (
    ("true", NodeKind.BOOLEAN, True),
    ("false", NodeKind.BOOLEAN, False),
    ("null", NodeKind.NULL, None),
)


@dataclass
class _OpenContainer:
    """An OBJECT or ARRAY whose closing bracket has not been reached yet."""

    kind: NodeKind
    start: int
    members: dict[str, DocumentNode] = field(default_factory=dict)
    items: list[DocumentNode] = field(default_factory=list)
    key: str = ""

    def add(self, node: DocumentNode) -> None:
        if self.kind is NodeKind.OBJECT:
            self.members[self.key] = node
        else:
            self.items.append(node)

    def close(self, text: str, end: int) -> DocumentNode:
        return DocumentNode(
            kind=self.kind,
            members=self.members,
            items=tuple(self.items),
            source=text,
            start=self.start,
            end=end,
        )


@dataclass
class DocumentBuilder:
    """Parses JSON text into a DocumentNode tree.

    The builder is stateless; one instance may be shared freely.

    Example::

        builder = DocumentBuilder()
        root = builder.parse('{"a": [1, 2.5]}')
        # root: OBJECT {"a": ARRAY (NUMBER 1, NUMBER 2.5)}
        root.members["a"].raw_text
        # '[1, 2.5]'
    """

    def parse(self, text: str | bytes, source: str = "expected") -> DocumentNode:
        """Parse JSON text into a DocumentNode tree.

        Args:
            text:   The JSON document.  ``bytes`` are decoded as UTF-8 (a
                    leading byte-order mark is tolerated).
            source: Label for the input, used in error messages.

        Returns:
            The root DocumentNode.

        Raises:
            JsonParseError: If the text is not valid JSON or uses a
                non-standard constant.
        """
        if isinstance(text, bytes):
            try:
                text = text.decode("utf-8-sig")
            except UnicodeDecodeError as exc:
                raise JsonParseError(source, f"not valid UTF-8: {exc.reason}") from exc

        try:
            return self._scan(text)
        except json.JSONDecodeError as exc:
            raise JsonParseError(source, exc.msg, exc.lineno, exc.colno) from exc

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _scan(self, text: str) -> DocumentNode:
        stack: list[_OpenContainer] = []
        pos = _skip(text, 0)

        while True:
            char = text[pos : pos + 1]

            if char in ("{", "["):
                kind = NodeKind.OBJECT if char == "{" else NodeKind.ARRAY
                closer = "}" if char == "{" else "]"
                start = pos
                pos = _skip(text, pos + 1)
                if text.startswith(closer, pos):
                    pos += 1
                    node = DocumentNode(kind=kind, source=text, start=start, end=pos)
                else:
                    container = _OpenContainer(kind=kind, start=start)
                    if kind is NodeKind.OBJECT:
                        container.key, pos = _scan_key(text, pos)
                    stack.append(container)
                    continue
            else:
                node, pos = _scan_scalar(text, pos)

            # Attach the finished value, closing every container it completes.
            while True:
                if not stack:
                    end = _skip(text, pos)
                    if end != len(text):
                        raise json.JSONDecodeError("Extra data", text, end)
                    return node

                container = stack[-1]
                container.add(node)
                pos = _skip(text, pos)
                char = text[pos : pos + 1]
                if char == ",":
                    pos = _skip(text, pos + 1)
                    if container.kind is NodeKind.OBJECT:
                        container.key, pos = _scan_key(text, pos)
                    break
                if char == ("}" if container.kind is NodeKind.OBJECT else "]"):
                    stack.pop()
                    pos += 1
                    node = container.close(text, pos)
                    continue
                raise json.JSONDecodeError("Expecting ',' delimiter", text, pos)


def _skip(text: str, pos: int) -> int:
    return WHITESPACE.match(text, pos).end()


def _scan_key(text: str, pos: int) -> tuple[str, int]:
    """Scan ``"key" :`` and return the key and the position of its value."""
    if not text.startswith('"', pos):
        raise json.JSONDecodeError(
            "Expecting property name enclosed in double quotes", text, pos
        )
    key, pos = scanstring(text, pos + 1)
    pos = _skip(text, pos)
    if not text.startswith(":", pos):
        raise json.JSONDecodeError("Expecting ':' delimiter", text, pos)
    return key, _skip(text, pos + 1)


def _scan_scalar(text: str, pos: int) -> tuple[DocumentNode, int]:
    """Scan a string, number or literal starting exactly at ``pos``."""
    if text.startswith('"', pos):
        value, end = scanstring(text, pos + 1)
        node = DocumentNode(
            kind=NodeKind.STRING, value=value, source=text, start=pos, end=end
        )
        return node, end

    match = _NUMBER.match(text, pos)
    if match is not None:
        end = match.end()
        node = DocumentNode(
            kind=NodeKind.NUMBER,
            value=NumberLiteral(text[pos:end]),
            source=text,
            start=pos,
            end=end,
        )
        return node, end

    for literal, kind, value in _LITERALS:
        if text.startswith(literal, pos):
            end = pos + len(literal)
            node = DocumentNode(kind=kind, value=value, source=text, start=pos, end=end)
            return node, end

    raise json.JSONDecodeError("Expecting value", text, pos)
