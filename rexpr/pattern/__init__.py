# rexpr/pattern/__init__.py
"""Pattern AST, parser and canonical printer.

This package provides:
- frozen AST nodes for the pattern language (structural equality)
- a recursive-descent parser producing them, with positioned errors
- a fully parenthesized printer used for diagnostics
"""

from .ast import (
    Pattern, Literal, AnyChar, Alternation, Concatenation, Star, Plus, Repeat,
    iter_nodes,
)
from .errors import ErrorKind, ErrorInfo, ParseError
from .options import ParseOptions
from .parser import parse, parse_regexp
from .printer import to_pattern_string, debug_print
