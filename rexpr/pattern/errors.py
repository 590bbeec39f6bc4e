# rexpr/pattern/errors.py
"""Parse errors.

Every failure of the pattern parser is reported as a `ParseError`, which
carries an `ErrorKind` and an `ErrorInfo` (byte offset + message).
`ParseError` derives from `SyntaxError`, so callers that already handle
syntax errors catch it without special casing.

The kind names follow the historical error set of the parser; two of them are
known misnomers that callers rely on:
- a missing ',' inside `{m,n}` is reported as OUT_OF_RANGE
- a missing '}' after `{m,n` is reported as INVALID_CHAR
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class ErrorKind(Enum):
    NON_ASCII_CHAR = auto()   # input contains a byte >= 0x80
    BAD_SPLIT = auto()        # unconsumed trailing input (strict mode)
    OUT_OF_RANGE = auto()     # atom expected past end of input, or ',' missing in {m,n}
    INVALID_CHAR = auto()     # unsupported character, or '}' missing in {m,n}
    INVALID_INT = auto()      # repeat bound is not an unsigned integer
    INVALID_RANGE = auto()    # {m,n} with m > n
    TOO_DEEP = auto()         # nesting limit exceeded


@dataclass(frozen=True)
class ErrorInfo:
    at: int    # 0-based byte offset into the original input
    msg: str


def snippet_at(src: Union[str, bytes], pos: int) -> str:
    """Render `src` with a caret under offset `pos` (may be len(src))."""
    if isinstance(src, bytes):
        src = src.decode("ascii", errors="replace")
    return f"{src}\n{' ' * pos}^"


class ParseError(SyntaxError):
    def __init__(self, kind: ErrorKind, at: int, msg: str):
        super().__init__(f"{kind.name} at {at}: {msg}")
        self.kind = kind
        self.info = ErrorInfo(at, msg)

    @property
    def at(self) -> int:
        return self.info.at

    def snippet(self, src: Union[str, bytes]) -> str:
        return snippet_at(src, self.at)
