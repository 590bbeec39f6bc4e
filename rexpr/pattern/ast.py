# rexpr/pattern/ast.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Union

# ---- Pattern AST node definitions ----
# Nodes are frozen: a sub-tree may be referenced from several parents and is
# never mutated after construction. Equality is structural (dataclass eq).

@dataclass(frozen=True)
class Literal:
    char: str  # exactly one ASCII character

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"Literal expects a single character, got {self.char!r}")

@dataclass(frozen=True)
class AnyChar:
    pass

@dataclass(frozen=True)
class Alternation:
    left: "Pattern"
    right: "Pattern"

@dataclass(frozen=True)
class Concatenation:
    left: "Pattern"
    right: "Pattern"

@dataclass(frozen=True)
class Star:
    inner: "Pattern"  # zero or more

@dataclass(frozen=True)
class Plus:
    inner: "Pattern"  # one or more

@dataclass(frozen=True)
class Repeat:
    inner: "Pattern"
    min: int
    max: int  # inclusive

    def __post_init__(self) -> None:
        if not 0 <= self.min <= self.max:
            raise ValueError(f"invalid repeat bounds {{{self.min},{self.max}}}")

Pattern = Union[Literal, AnyChar, Alternation, Concatenation, Star, Plus, Repeat]

# Variants carrying a single child, and those carrying two.
UNARY_NODES = (Star, Plus, Repeat)
BINARY_NODES = (Alternation, Concatenation)


def children(node: Pattern) -> tuple:
    """Direct sub-patterns of `node`, left to right."""
    if isinstance(node, BINARY_NODES):
        return (node.left, node.right)
    if isinstance(node, UNARY_NODES):
        return (node.inner,)
    return ()


def iter_nodes(node: Pattern) -> Iterator[Pattern]:
    """Pre-order walk over `node` and all of its descendants."""
    stack = [node]
    while stack:
        cur = stack.pop()
        yield cur
        stack.extend(reversed(children(cur)))
