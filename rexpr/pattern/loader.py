"""Pattern list files: one pattern per line, '#' starts a comment line."""

from __future__ import annotations
from pathlib    import Path
from typing     import List


def load_pattern_text(path: str) -> str:
    """Whole file as UTF-8 text with CRLF and lone CR turned into LF, so a
    pattern never carries a stray '\\r' (which the parser would reject)."""
    text = Path(path).read_text(encoding="utf-8")
    return text.replace("\r\n", "\n").replace("\r", "\n")


def load_patterns(path: str) -> List[str]:
    """Non-blank, non-comment lines of `path`, in file order.
    Only the line break is removed; other whitespace is part of the pattern."""
    out: List[str] = []
    for line in load_pattern_text(path).split("\n"):
        if not line.strip() or line.startswith("#"):
            continue
        out.append(line)
    return out
