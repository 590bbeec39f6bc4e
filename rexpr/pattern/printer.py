# rexpr/pattern/printer.py
"""Canonical text form of a pattern tree.

Every compound node is parenthesized, so the output is not the original
source text but an equivalent, fully bracketed one:

    Concatenation(Star(Alternation(a, b)), a)  ->  (((a|b))*a)

The walk keeps its own stack so trees of any depth can be printed.
"""

from __future__ import annotations
import sys
from typing import List, Optional, TextIO, Union

from .ast import (
    Pattern, Literal, AnyChar, Alternation, Concatenation, Star, Plus, Repeat,
)


def _expand(node: Pattern) -> List[Union[str, Pattern]]:
    """Output pieces of `node`, with sub-patterns left unexpanded."""
    if isinstance(node, Literal):
        return [node.char]
    if isinstance(node, AnyChar):
        return ["."]
    if isinstance(node, Alternation):
        return ["(", node.left, "|", node.right, ")"]
    if isinstance(node, Concatenation):
        return ["(", node.left, node.right, ")"]
    if isinstance(node, Star):
        return ["(", node.inner, ")*"]
    if isinstance(node, Plus):
        return ["(", node.inner, ")+"]
    if isinstance(node, Repeat):
        return ["(", node.inner, f"){{{node.min},{node.max}}}"]
    raise AssertionError(f"unknown node: {node!r}")


def to_pattern_string(node: Pattern) -> str:
    out: List[str] = []
    stack: List[Union[str, Pattern]] = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
        else:
            stack.extend(reversed(_expand(item)))
    return "".join(out)


def debug_print(node: Pattern, file: Optional[TextIO] = None) -> None:
    """Write the canonical form to `file` (stdout by default), no newline."""
    print(to_pattern_string(node), end="", file=file or sys.stdout)
