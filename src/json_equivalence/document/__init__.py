"""Document subpackage: parsed JSON value trees.

Re-exports the public API for the document module:
- DocumentNode: frozen record for one node of a parsed document, carrying
  the source text it was parsed from (``raw_text``)
- NodeKind: StrEnum of the six JSON kinds (Object, Array, String, Number, Boolean, Null)
- NumberLiteral: a JSON number kept as its verbatim literal
- DocumentBuilder: converts JSON text into a DocumentNode tree
"""

from json_equivalence.document.builder import DocumentBuilder
from json_equivalence.document.nodes import DocumentNode, NodeKind, NumberLiteral

__all__ = ["DocumentBuilder", "DocumentNode", "NodeKind", "NumberLiteral"]
