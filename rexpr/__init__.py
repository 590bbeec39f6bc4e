# rexpr/__init__.py
"""rexpr – a small regular-expression pattern parser.

    >>> from rexpr import parse, to_pattern_string
    >>> to_pattern_string(parse("(a|b)*a"))
    '(((a|b))*a)'
"""

from .pattern import (
    Pattern, Literal, AnyChar, Alternation, Concatenation, Star, Plus, Repeat,
    ErrorKind, ErrorInfo, ParseError, ParseOptions,
    parse, parse_regexp, to_pattern_string, debug_print,
)

__version__ = "0.1.0"
