# rexpr/pattern/options.py
from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class ParseOptions:
    """Parser settings.

    - strict    : reject unconsumed trailing input (BAD_SPLIT) instead of
                  silently dropping it
    - max_depth : maximum group nesting, counting the top level as 1;
                  None means unlimited. Concatenation and '|' chains never
                  count, only '('.
    """
    strict: bool = False
    max_depth: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_depth is None:
            return
        if not isinstance(self.max_depth, int) or isinstance(self.max_depth, bool):
            raise TypeError(f"max_depth must be an int, got {type(self.max_depth).__name__}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ParseOptions":
        """Build options from a plain mapping (e.g. parsed CLI arguments).
        `None` values fall back to the defaults."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"unknown parse option(s): {', '.join(unknown)}")
        return cls(**{k: v for k, v in values.items() if v is not None})


DEFAULT_OPTIONS = ParseOptions()
