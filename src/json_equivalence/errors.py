"""Exception types for json-equivalence.

A ``JsonParseError`` is a hard failure of the comparison attempt.  It is
never reported as a mismatch: malformed input means there is nothing to
compare.
"""

from __future__ import annotations

__all__ = ["JsonParseError"]


class JsonParseError(ValueError):
    """Raised when an input document is not valid JSON.

    Attributes:
        source: Which input failed, ``"expected"`` or ``"actual"``.
        msg:    The underlying decoder message, without position.
        lineno: 1-based line of the failure, or None when unknown.
        colno:  1-based column of the failure, or None when unknown.
    """

    def __init__(
        self,
        source: str,
        msg: str,
        lineno: int | None = None,
        colno: int | None = None,
    ) -> None:
        self.source = source
        self.msg = msg
        self.lineno = lineno
        self.colno = colno
        where = f" (line {lineno}, column {colno})" if lineno is not None else ""
        super().__init__(f"invalid {source} JSON: {msg}{where}")
