# rexpr/pattern/parser.py
"""Recursive-descent parser for the rexpr pattern language.

Grammar, in descending precedence:

    alternation   := concatenation ('|' alternation)?
    concatenation := postfix concatenation?        (implicit, no operator)
    postfix       := atom ( '*' | '+' | '{' UINT ',' UINT '}' )?
    atom          := [a-zA-Z0-9] | '.' | '(' alternation ')'

Each level is a plain function `parse_xxx(text, pos, ...) -> (node, new_pos)`.
The cursor is threaded through the calls; nothing is shared or mutated.
A failure at any level raises `ParseError` and propagates unchanged.

The closing ')' of a group is consumed by whichever of the concatenation or
alternation level meets it first; `parse_atom` relies on that when it hands a
group over to `parse_alternation`.

`parse_alternation` runs the mutually recursive alternation / concatenation /
group rules on an explicit stack, so neither long patterns nor deeply nested
groups are limited by the interpreter recursion limit.
"""

from __future__ import annotations
import regex as re
from typing import List, Optional, Tuple, Union

from .ast import (
    Pattern, Literal, AnyChar, Alternation, Concatenation, Star, Plus, Repeat,
)
from .errors import ErrorKind, ParseError
from .options import ParseOptions, DEFAULT_OPTIONS

# Repeat bounds are unsigned 64-bit integers.
UINT_MAX = (1 << 64) - 1

_NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")
_ALNUM_RE = re.compile(r"[A-Za-z0-9]")
_DIGITS_RE = re.compile(r"[0-9]*")

Result = Tuple[Pattern, int]

# pending work on the parse stack
_CONCAT = "concat"   # left operand waiting for the rest of the chain
_ALT    = "alt"      # left branch waiting for the right one
_GROUP  = "group"    # '(' waiting for its alternation

# parser states
_ATOM, _SUFFIX, _SPLIT, _DONE = range(4)


def _as_text(pattern: Union[str, bytes]) -> str:
    # latin-1 maps every byte to one character, so offsets stay byte offsets.
    if isinstance(pattern, (bytes, bytearray)):
        return bytes(pattern).decode("latin-1")
    if isinstance(pattern, str):
        return pattern
    raise TypeError(f"pattern must be str or bytes, got {type(pattern).__name__}")

# ---------- helpers ----------

def first_non_ascii(pattern: Union[str, bytes]) -> Optional[int]:
    """Offset of the first non-ASCII character (or byte), None if all ASCII."""
    m = _NON_ASCII_RE.search(_as_text(pattern))
    return m.start() if m else None


def parse_number(text: str, pos: int) -> Optional[Tuple[int, int]]:
    """Read the maximal run of ASCII digits at `pos`.
    Returns (value, position after the run), or None when the run is empty
    or the value does not fit in UINT_MAX."""
    digits = _DIGITS_RE.match(text, pos).group(0)
    if not digits:
        return None
    value = int(digits)
    if value > UINT_MAX:
        return None
    return value, pos + len(digits)


def _check_depth(pos: int, depth: int, opts: ParseOptions) -> None:
    if opts.max_depth is not None and depth > opts.max_depth:
        raise ParseError(ErrorKind.TOO_DEEP, pos,
                         f"Pattern nests deeper than {opts.max_depth} levels")


def _concat_end(text: str, pos: int) -> Optional[int]:
    """Where a concatenation stops after a term ending at `pos`, or None when
    another term follows. A ')' is consumed, a '|' is left in place."""
    if pos >= len(text) or text[pos] == "|":
        return pos
    if text[pos] == ")":
        return pos + 1
    return None


def _single_atom(text: str, pos: int) -> Result:
    """Non-group atoms; '(' is handled by the callers."""
    if pos >= len(text):
        raise ParseError(ErrorKind.OUT_OF_RANGE, pos, "Expected an atom")
    ch = text[pos]
    if _ALNUM_RE.fullmatch(ch):
        return Literal(ch), pos + 1
    if ch == ".":
        return AnyChar(), pos + 1
    raise ParseError(ErrorKind.INVALID_CHAR, pos, "Expected a char in [a-zA-Z0-9]")


def _suffix(text: str, pos: int, node: Pattern) -> Result:
    if pos >= len(text):
        return node, pos
    ch = text[pos]
    if ch == "*":
        return Star(node), pos + 1
    if ch == "+":
        return Plus(node), pos + 1
    if ch == "{":
        return _parse_repeat(text, pos, node)
    return node, pos


def _parse_repeat(text: str, brace: int, node: Pattern) -> Result:
    """`{m,n}` suffix; `brace` is the offset of '{'."""
    low = parse_number(text, brace + 1)
    if low is None:
        raise ParseError(ErrorKind.INVALID_INT, brace + 1, "Expected a positive integer")
    lo, comma = low
    if comma >= len(text) or text[comma] != ",":
        raise ParseError(ErrorKind.OUT_OF_RANGE, brace, "Expected a ',' for postfix [reg]{a,b}")

    high = parse_number(text, comma + 1)
    if high is None:
        raise ParseError(ErrorKind.INVALID_INT, comma, "Expected a positive integer")
    hi, end = high
    if lo > hi:
        raise ParseError(ErrorKind.INVALID_RANGE, brace,
                         "left number should be lower than or equal to the right one")
    if end >= len(text) or text[end] != "}":
        raise ParseError(ErrorKind.INVALID_CHAR, comma, "Expected a '}'")

    return Repeat(node, lo, hi), end + 1

# ---------- grammar ----------

def parse_alternation(text: str, pos: int, depth: int = 1,
                      opts: ParseOptions = DEFAULT_OPTIONS) -> Result:
    """alternation := concatenation ('|' alternation)?

    `depth` is the group nesting level of this alternation; every '(' opens
    one more. Implicit concatenation and '|' chains do not count.
    """
    _check_depth(pos, depth, opts)

    stack: List[Tuple[str, Optional[Pattern]]] = []
    state = _ATOM
    node: Optional[Pattern] = None

    while True:
        if state == _ATOM:
            if pos < len(text) and text[pos] == "(":
                depth += 1
                _check_depth(pos + 1, depth, opts)
                stack.append((_GROUP, None))
                pos += 1
                continue
            node, pos = _single_atom(text, pos)
            state = _SUFFIX

        elif state == _SUFFIX:
            node, pos = _suffix(text, pos, node)
            end = _concat_end(text, pos)
            if end is None:
                stack.append((_CONCAT, node))
                state = _ATOM
            else:
                pos = end
                state = _SPLIT

        elif state == _SPLIT:
            # `node` is the left side of an alternation
            if pos < len(text) and text[pos] == "|":
                stack.append((_ALT, node))
                pos += 1
                state = _ATOM
                continue
            if pos < len(text) and text[pos] == ")":
                # end of the enclosing group
                pos += 1
            state = _DONE

        else:
            # an alternation finished with `node`; resume whoever asked for it
            if not stack:
                return node, pos
            kind, left = stack.pop()
            if kind == _ALT:
                node = Alternation(left, node)
            elif kind == _CONCAT:
                # the concatenation returns to its own alternation
                node = Concatenation(left, node)
                state = _SPLIT
            else:
                depth -= 1
                state = _SUFFIX


def parse_concatenation(text: str, pos: int, depth: int = 1,
                        opts: ParseOptions = DEFAULT_OPTIONS) -> Result:
    left, pos = parse_postfix(text, pos, depth, opts)

    end = _concat_end(text, pos)
    if end is not None:
        return left, end

    right, pos = parse_alternation(text, pos, depth, opts)
    return Concatenation(left, right), pos


def parse_postfix(text: str, pos: int, depth: int = 1,
                  opts: ParseOptions = DEFAULT_OPTIONS) -> Result:
    node, pos = parse_atom(text, pos, depth, opts)
    return _suffix(text, pos, node)


def parse_atom(text: str, pos: int, depth: int = 1,
               opts: ParseOptions = DEFAULT_OPTIONS) -> Result:
    if pos < len(text) and text[pos] == "(":
        # the group's ')' is consumed further down
        return parse_alternation(text, pos + 1, depth + 1, opts)
    return _single_atom(text, pos)

# ---------- entry point ----------

def parse_regexp(pattern: Union[str, bytes],
                 options: Optional[ParseOptions] = None) -> Pattern:
    """Parse `pattern` into a `Pattern` tree.

    Non-ASCII input is rejected before any parsing. Unless `options.strict`
    is set, input left over after the top-level alternation is ignored.
    """
    opts = options or DEFAULT_OPTIONS
    text = _as_text(pattern)

    bad = first_non_ascii(text)
    if bad is not None:
        raise ParseError(ErrorKind.NON_ASCII_CHAR, bad, "Only ASCII patterns are supported")

    node, end = parse_alternation(text, 0, 1, opts)
    if opts.strict and end < len(text):
        raise ParseError(ErrorKind.BAD_SPLIT, end, f"Unexpected trailing input {text[end]!r}")
    return node


parse = parse_regexp
