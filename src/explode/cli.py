#!/usr/bin/env python
# cli.py: print the brace expansion of each argument

"""
Command line front end.

  explode 'fi{nd,ne,sh}' 'r{u,a}{,i}n'

Each expansion is printed on its own line. Syntax errors are reported on
stderr as the expression followed by a caret under the offending
character; the remaining expressions are still processed.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List

import yaml

from .errors import ExplodeError
from .expander import _selftest, count, expand, expand_recover
from .scanner import Lit, scan_tokens

__all__ = ["main", "load_expressions", "format_error"]


# ============================================================
# Diagnostics
# ============================================================

def _indent(n: int) -> str:
    return " " * n if n > 0 else ""


def format_error(err: ExplodeError) -> str:
    """Caret line pointing at err.position."""
    return f"{_indent(err.position)}^ {err.message}"


def _log(s: str) -> None:
    print(s, file=sys.stderr)


def _report(expr: str, errors: List[ExplodeError]) -> None:
    if not errors:
        return
    _log(expr)
    for e in errors:
        _log(format_error(e))


# ============================================================
# Input
# ============================================================

def load_expressions(path: str | Path) -> List[str]:
    """
    Read expressions from a file.

    .yaml/.yml files must contain a list of strings; any other file holds
    one expression per non-blank line.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(f)
            if data is None:
                return []
            if not isinstance(data, list):
                raise ValueError(f"'{path}' must contain a YAML list of expressions")
            for i, x in enumerate(data):
                # unquoted "{a,b}" loads as a mapping
                if not isinstance(x, str):
                    raise ValueError(f"'{path}' item {i} is not a string (quote brace expressions in YAML): {x!r}")
            return data
        return [line.rstrip("\r\n") for line in f if line.strip()]


# ============================================================
# Output
# ============================================================

def _token_repr(tok) -> str:
    if isinstance(tok, Lit):
        return f"LIT   {tok.offset:<4} {tok.text!r}"
    return f"{type(tok).__name__.upper():<5} {tok.offset}"


def _dump(results: dict, fmt: str) -> None:
    if fmt == "json":
        print(json.dumps(results, ensure_ascii=False))
    elif fmt == "yaml":
        print(yaml.dump(results, default_flow_style=False, allow_unicode=True, sort_keys=False), end="")


# ============================================================
# CLI
# ============================================================

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(
        prog="explode",
        description="Brace expansion: 'a{b,c}d' -> abd acd. Groups nest; '\\' escapes '{', '}', ',' and '\\'.",
    )
    ap.add_argument("expressions", nargs="*", metavar="EXPRESSION", help="Expression to expand.")
    ap.add_argument("--file", "-f", action="append", default=[], help="Read expressions from file (.yaml list or one per line). Repeatable.")
    ap.add_argument(
        "--format",
        choices=["lines", "json", "yaml"],
        default="lines",
        help="Output format: lines (one expansion per line), json or yaml (expression -> expansions).",
    )
    ap.add_argument("--count", "-c", action="store_true", help="Print the number of expansions instead (ignores --limit).")
    ap.add_argument("--limit", "-n", type=int, default=0, help="Max expansions per expression (0 = no limit).")
    ap.add_argument("--recover", "-r", action="store_true", help="Report every error and print a best-effort expansion.")
    ap.add_argument("--tokens", action="store_true", help="Print scanner tokens.")
    ap.add_argument("--selftest", action="store_true", help="Run built-in self tests.")
    args = ap.parse_args(argv)

    if args.selftest:
        _selftest()
        return 0

    if args.limit < 0:
        ap.error("--limit must be >= 0")

    exprs: List[str] = list(args.expressions)
    try:
        for fn in args.file:
            exprs.extend(load_expressions(fn))
    except (OSError, ValueError, yaml.YAMLError) as e:
        ap.error(str(e))

    if not exprs:
        _log("usage: explode EXPRESSION...")
        return 0

    results: dict = {}
    for expr in exprs:
        if args.tokens:
            try:
                for tok in scan_tokens(expr):
                    print(_token_repr(tok))
            except ExplodeError as e:
                _report(expr, [e])
            continue

        if args.recover:
            res, errors = expand_recover(expr, limit=0 if args.count else args.limit)
            _report(expr, errors)
            if args.count:
                res = len(res)
        else:
            try:
                if args.count:
                    res = count(expr)
                else:
                    res = expand(expr, limit=args.limit)
            except ExplodeError as e:
                _report(expr, [e])
                continue

        if args.format == "lines":
            if args.count:
                print(res)
            else:
                for r in res:
                    print(r)
        else:
            results[expr] = res

    if args.format != "lines" and not args.tokens:
        _dump(results, args.format)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
