# rexpr/cli.py
"""rexpr – pattern parser CLI

Usage:
    $ python -m rexpr print "(a|b)*a"
    $ python -m rexpr print "a{2,5}b" --strict -D
    $ python -m rexpr check --text "ab|c"
    $ python -m rexpr check --input patterns.txt --max-depth 64

Commands
--------
- print : parse one pattern and print its canonical (fully parenthesized) form
- check : parse one pattern or every pattern of a file and report the result

With -D/--debug the options, the AST repr and a node count are written to
stderr.
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from .pattern.errors import ParseError
from .pattern.options import ParseOptions

DEFAULT_PATTERN = "(a|b)*a"
_MAX_REPR_NODES = 200

# ------------------------------
# helpers
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _options_from_args(args) -> ParseOptions:
    return ParseOptions.from_mapping({"strict": args.strict, "max_depth": args.max_depth})


def _report_syntax_error(src: str, e: ParseError) -> None:
    _eprint("[SYNTAX ERROR]")
    _eprint(str(e))
    _eprint(e.snippet(src))


def _parse_one(src: str, opts: ParseOptions, debug: bool):
    from .pattern.ast import iter_nodes
    from .pattern.parser import parse_regexp

    if debug: _eprint(f"[DEBUG] parsing {src!r}")
    node = parse_regexp(src, opts)
    if debug:
        n_nodes = sum(1 for _ in iter_nodes(node))
        _eprint("[DEBUG] AST ready | nodes=%d" % n_nodes)
        # dataclass repr recurses; skip it for very deep trees
        if n_nodes <= _MAX_REPR_NODES:
            _eprint("\n[AST]\n" + repr(node))
        else:
            _eprint("[DEBUG] AST repr skipped (more than %d nodes)" % _MAX_REPR_NODES)
    return node

# ------------------------------
# commands
# ------------------------------

def cmd_print(args) -> int:
    from .pattern.printer import to_pattern_string

    try:
        opts = _options_from_args(args)
    except (TypeError, ValueError) as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2
    if args.debug:
        _eprint(f"[DEBUG] options | strict={opts.strict} max_depth={opts.max_depth}")

    try:
        node = _parse_one(args.pattern, opts, args.debug)
    except ParseError as e:
        _report_syntax_error(args.pattern, e)
        return 2

    print(to_pattern_string(node))
    return 0


def cmd_check(args) -> int:
    from .pattern.loader import load_patterns
    from .pattern.printer import to_pattern_string

    try:
        opts = _options_from_args(args)
        if args.text is not None:
            patterns = [args.text]
        else:
            patterns = load_patterns(args.input)
    except (TypeError, ValueError, OSError) as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2
    if args.debug:
        _eprint(f"[DEBUG] options | strict={opts.strict} max_depth={opts.max_depth}")
        _eprint(f"[DEBUG] {len(patterns)} pattern(s) loaded")

    failed = 0
    for src in patterns:
        try:
            node = _parse_one(src, opts, args.debug)
        except ParseError as e:
            _report_syntax_error(src, e)
            failed += 1
            continue
        print(f"[CHECK OK] {src} -> {to_pattern_string(node)}")

    if failed:
        _eprint(f"[CHECK FAILED] {failed} of {len(patterns)} pattern(s) rejected")
        return 2
    return 0

# ------------------------------
# entry point
# ------------------------------

def _add_parse_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--strict", action="store_true", help="reject input left over after the pattern")
    p.add_argument("--max-depth", type=int, default=None, help="maximum group nesting depth (default: unlimited)")
    p.add_argument("-D", "--debug", action="store_true", help="print debug information to stderr")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="rexpr", description="rexpr pattern parser CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_print = sub.add_parser("print", help="parse a pattern and print its canonical form")
    p_print.add_argument("pattern", nargs="?", default=DEFAULT_PATTERN, help=f"pattern (default: {DEFAULT_PATTERN})")
    _add_parse_flags(p_print)
    p_print.set_defaults(func=cmd_print)

    p_check = sub.add_parser("check", help="validate one pattern or a file of patterns")
    src_group = p_check.add_mutually_exclusive_group(required=True)
    src_group.add_argument("--text", help="pattern given inline")
    src_group.add_argument("--input", help="file with one pattern per line")
    _add_parse_flags(p_check)
    p_check.set_defaults(func=cmd_check)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
