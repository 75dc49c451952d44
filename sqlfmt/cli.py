# sqlfmt/cli.py
# CLI for formatting SQL from an argument string, a file, or stdin.

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from . import __version__
from .config import load_config
from .errors import InputError, SqlFmtError, ConfigError
from .formatter import FormatOptions, format_sql
from .normalizer import KEYWORD_CASES

PROG = "sql-fmt"

EPILOG = """\
input:
  - pass a filepath to read from disk (UTF-8)
  - pass a quoted SQL string (several words are joined with spaces)
  - pass '-' or nothing to read from stdin
"""


def _non_negative_int(value: str) -> int:
    try:
        n = int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid indent: {value!r} (expected a non-negative integer)")
    if n < 0:
        raise argparse.ArgumentTypeError(f"invalid indent: {value!r} (expected a non-negative integer)")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description="Re-case SQL keywords and re-indent the query.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("inputs", nargs="*", metavar="INPUT", help="SQL file, quoted SQL text, or '-' for stdin.")
    p.add_argument("--indent", type=_non_negative_int, default=None, metavar="N",
                   help="Number of spaces per indent (default: 2).")
    p.add_argument("--keyword-case", type=str.lower, choices=KEYWORD_CASES, default=None,
                   help="Keyword case: upper | lower | keep (default: upper).")
    p.add_argument("--config", metavar="PATH", default=None,
                   help="JSON config file (indentSize, keywordCase, keywords).")
    p.add_argument("-v", "--version", action="version", version=__version__)
    return p


def _read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(str(path), getattr(e, "strerror", None) or str(e)) from e


def read_input(inputs: List[str], stdin: TextIO) -> str:
    if not inputs or inputs == ["-"]:
        return stdin.read()
    candidate = Path(inputs[0])
    if candidate.is_file():
        return _read_file(candidate)
    return " ".join(inputs)


def resolve_options(args: argparse.Namespace) -> FormatOptions:
    base = FormatOptions()
    if args.config:
        base = load_config(Path(args.config), base)
    return base.merged(indent_size=args.indent, keyword_case=args.keyword_case)


def main(argv: Optional[List[str]] = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    if not args.inputs and sys.stdin.isatty():
        p.print_help(sys.stderr)
        return 1

    try:
        opts = resolve_options(args)
        sql = read_input(args.inputs, sys.stdin)
    except ConfigError as e:
        print(f"{PROG}: config error: {e}", file=sys.stderr)
        return 1
    except SqlFmtError as e:
        print(f"{PROG}: error: {e}", file=sys.stderr)
        return 1

    print(format_sql(sql, opts))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
