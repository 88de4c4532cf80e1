#!/usr/bin/env python
"""
scanner.py

Single-pass tokenizer for brace expressions.

Scanner output (structure, no expansion):
  - Lit(text, offset)   unescaped literal run
  - Open(offset)        "{"
  - Close(offset)       "}"
  - Sep(offset)         ","

Escapes:
  - "\\" followed by one of "{", "}", ",", "\\" yields that character as literal text
  - "\\" followed by anything else is an invalid escape sequence
  - "\\" as the last character is an incomplete escape
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Union

from . import explode_state as state
from .errors import ExplodeError, incomplete_escape, invalid_escape

__all__ = [
    "Lit",
    "Open",
    "Close",
    "Sep",
    "Token",
    "iter_tokens",
    "scan_tokens",
    "unescape",
    "escape",
]


# ============================================================
# Tokens
# ============================================================

@dataclass(frozen=True)
class Lit:
    text: str
    offset: int  # index of the first character of the raw run


@dataclass(frozen=True)
class Open:
    offset: int


@dataclass(frozen=True)
class Close:
    offset: int


@dataclass(frozen=True)
class Sep:
    offset: int


Token = Union[Lit, Open, Close, Sep]

ReportFunc = Callable[[ExplodeError], None]

_STRUCTURAL_TOKENS = {
    state.OPEN: Open,
    state.CLOSE: Close,
    state.SEP: Sep,
}


def _raise(err: ExplodeError) -> None:
    raise err


# ============================================================
# Scanner
# ============================================================

def iter_tokens(expr: str, report: Optional[ReportFunc] = None) -> Iterator[Token]:
    """
    Lazily tokenize expr.

    Literal runs are flushed as a single Lit right before the structural
    token that ends them (and once more at end of input). Empty runs are
    not emitted.

    Escape errors go to report. Without a report function they are raised,
    so the caller sees them exactly when the scan reaches them. With a report
    function the offending characters are kept verbatim.
    """
    if report is None:
        report = _raise

    buf: List[str] = []
    start = 0

    i = 0
    n = len(expr)
    while i < n:
        ch = expr[i]

        if ch == state.ESCAPE:
            if i + 1 >= n:
                report(incomplete_escape(i))
                buf.append(ch)
                i += 1
                continue
            nxt = expr[i + 1]
            if nxt not in state.ESCAPABLE:
                report(invalid_escape(i))
                buf.append(ch)
            buf.append(nxt)
            i += 2
            continue

        tok = _STRUCTURAL_TOKENS.get(ch)
        if tok is None:
            buf.append(ch)
            i += 1
            continue

        if buf:
            yield Lit("".join(buf), start)
            buf.clear()
        yield tok(i)
        i += 1
        start = i

    if buf:
        yield Lit("".join(buf), start)


def scan_tokens(expr: str) -> List[Token]:
    """Tokenize the whole expression; raises ExplodeError on a bad escape."""
    return list(iter_tokens(expr))


# ============================================================
# Escape helpers
# ============================================================

def unescape(text: str) -> str:
    """
    Resolve escape sequences in a literal run that holds no structural characters.
    """
    out: List[str] = []
    for tok in iter_tokens(text):
        if not isinstance(tok, Lit):
            raise ExplodeError(tok.offset, None, f"unexpected '{text[tok.offset]}' in literal")
        out.append(tok.text)
    return "".join(out)


def escape(text: str) -> str:
    """Escape every structural character, so expand(escape(s)) == [s]."""
    return "".join(state.ESCAPE + ch if ch in state.STRUCTURAL else ch for ch in text)
