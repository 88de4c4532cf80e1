#!/usr/bin/env python
"""
expander.py

Brace expansion core.

  a{b,c}d                     -> abd, acd
  fi{nd,ne,sh}                -> find, fine, fish
  r{u,a}{,i}n                 -> run, ruin, ran, rain
  s{{a,o}{il,lv},l{ee,o}p}ing -> sailing, salving, soiling, solving, sleeping, sloping

One left-to-right pass over the tokens from scanner.iter_tokens:
  - Lit    appends its text to every string of the current result
  - "{"    pushes a Context whose prefixes are the current result, restarts at [""]
  - ","    flushes the current result into the innermost Context, restarts at [""]
  - "}"    flushes, then replaces the current result by prefixes x alternatives and pops

Order: all strings built from one alternative of a group come before
those of the next alternative of the same group.

Two modes:
  - expand()   strict, raises the first ExplodeError
  - explode()  recovering, hands every ExplodeError to a callback and keeps going
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from . import explode_state as state
from .errors import ExplodeError, invalid_separator, unmatched
from .scanner import Close, Lit, Open, Sep, _raise, iter_tokens

__all__ = [
    "Context",
    "combine",
    "open_group",
    "separate",
    "close_group",
    "expand",
    "explode",
    "expand_recover",
    "count",
]

ReportFunc = Callable[[ExplodeError], None]


# ============================================================
# Context stack
# ============================================================

@dataclass
class Context:
    """One open group."""
    parent: Optional["Context"]
    offset: int  # index of the "{" that opened the group
    prefixes: Optional[Tuple[str, ...]]  # None: no enclosing prefixes
    result: List[str] = field(default_factory=list)


def combine(prefixes: Optional[Sequence[str]], alternatives: Sequence[str]) -> List[str]:
    """
    Cross product, prefix-major:
      combine(["a", "b"], ["c", "d"]) -> ["ac", "ad", "bc", "bd"]
    """
    if prefixes is None:
        return list(alternatives)
    return [p + a for p in prefixes for a in alternatives]


def append_suffix(current: List[str], suffix: str) -> List[str]:
    if not suffix:
        return current
    return [r + suffix for r in current]


def open_group(head: Optional[Context], current: List[str], offset: int) -> Tuple[Context, List[str]]:
    """Push a new context inheriting current as its prefixes."""
    return Context(head, offset, tuple(current)), [""]


def separate(head: Context, current: List[str]) -> List[str]:
    """Finish one alternative of head and start the next."""
    head.result.extend(current)
    return [""]


def close_group(head: Context, current: List[str]) -> Tuple[Optional[Context], List[str]]:
    """Finish the last alternative of head, combine with its prefixes and pop."""
    head.result.extend(current)
    return head.parent, combine(head.prefixes, head.result)


# ============================================================
# Driver
# ============================================================

def _explode(expr: str, report: ReportFunc, limit: int = 0) -> List[str]:
    head: Optional[Context] = None
    current: List[str] = [""]

    for tok in iter_tokens(expr, report):
        if isinstance(tok, Lit):
            current = append_suffix(current, tok.text)

        elif isinstance(tok, Open):
            head, current = open_group(head, current, tok.offset)

        elif isinstance(tok, Sep):
            if head is None:
                report(invalid_separator(tok.offset))
                # recover: a separator outside any group is plain text
                current = append_suffix(current, state.SEP)
            else:
                current = separate(head, current)

        elif isinstance(tok, Close):
            if head is None:
                report(unmatched(tok.offset, state.OPEN))
                # recover: pretend a group was opened before everything seen so far
                head = Context(None, tok.offset, None)
            head, current = close_group(head, current)

        # at top level the first `limit` results only depend on the first `limit` strings
        if limit and head is None and len(current) > limit:
            del current[limit:]

    # unclosed groups, innermost first
    while head is not None:
        report(unmatched(head.offset, state.CLOSE))
        head, current = close_group(head, current)

    if limit and len(current) > limit:
        del current[limit:]
    return current


def expand(expr: str, *, limit: int | None = None) -> List[str]:
    """
    Expand a brace expression.

    Args:
        expr: The expression. "\\" escapes "{", "}", "," and itself.
        limit: Return at most this many strings (0 = no limit).
               None uses explode_state.get_limit().

    Returns:
        The ordered expansions; never empty.

    Raises:
        ExplodeError: on the first syntax error, scanning left to right.
    """
    if limit is None:
        limit = state.get_limit()
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    return _explode(expr, _raise, limit)


def explode(expr: str, report: ReportFunc) -> List[str]:
    """
    Expand with error recovery.

    Every syntax error is passed to report, in the order found, and the
    expansion continues:
      - "," outside a group is kept as text
      - "}" without "{" closes an implicit group spanning everything before it
      - unclosed "{" groups are closed at end of input (innermost reported first)
      - bad escapes are kept verbatim

    If report raises, the expansion stops there.
    """
    if report is None:
        raise TypeError("explode() needs a report function; use expand() for strict mode")
    return _explode(expr, report)


def expand_recover(expr: str, *, limit: int = 0) -> Tuple[List[str], List[ExplodeError]]:
    """explode() collecting errors into a list: returns (results, errors)."""
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    errors: List[ExplodeError] = []
    return _explode(expr, errors.append, limit), errors


# ============================================================
# Size
# ============================================================

def count(expr: str) -> int:
    """
    Number of strings expand(expr) returns, without building them.
    Raises the same ExplodeError as expand().
    """
    # (offset, prefix count, alternatives so far)
    stack: List[Tuple[int, int, int]] = []
    current = 1

    for tok in iter_tokens(expr):
        if isinstance(tok, Open):
            stack.append((tok.offset, current, 0))
            current = 1
        elif isinstance(tok, Sep):
            if not stack:
                raise invalid_separator(tok.offset)
            offset, prefixes, alternatives = stack[-1]
            stack[-1] = (offset, prefixes, alternatives + current)
            current = 1
        elif isinstance(tok, Close):
            if not stack:
                raise unmatched(tok.offset, state.OPEN)
            _, prefixes, alternatives = stack.pop()
            current = prefixes * (alternatives + current)

    if stack:
        raise unmatched(stack[-1][0], state.CLOSE)
    return current


# ============================================================
# Selftest
# ============================================================

def _selftest() -> None:
    def err(expr: str) -> Tuple[int, Optional[str], str]:
        try:
            expand(expr)
        except ExplodeError as e:
            return (e.position, e.missing, e.reason)
        raise AssertionError(f"no error for {expr!r}")

    # --- literals ---
    assert expand("") == [""]
    assert expand("abc") == ["abc"]

    # --- empty groups ---
    assert expand("{}") == [""]
    assert expand("{,}") == ["", ""]
    assert expand("a{}b") == ["ab"]
    assert expand("{{},{}}{}{{},{}}") == ["", "", "", ""]

    # --- groups ---
    assert expand("a{b,c}d") == ["abd", "acd"]
    assert expand("fi{nd,ne,sh}") == ["find", "fine", "fish"]
    assert expand("r{u,a}{,i}n") == ["run", "ruin", "ran", "rain"]
    assert expand("s{{a,o}{il,lv},l{ee,o}p}ing") == [
        "sailing", "salving", "soiling", "solving", "sleeping", "sloping",
    ]
    assert expand("a{b{c,d}e,f{g,h}i}j") == ["abcej", "abdej", "afgij", "afhij"]

    # --- escapes ---
    assert expand(r"a\{b\,c\}") == ["a{b,c}"]
    assert expand(r"{a\,b,c}") == ["a,b", "c"]
    assert expand("\\\\") == ["\\"]

    # --- errors ---
    assert err(",") == (0, None, "invalid separator")
    assert err("{") == (0, "}", "unmatched")
    assert err("}") == (0, "{", "unmatched")
    assert err("a{b{c}") == (1, "}", "unmatched")
    assert err("x\\q") == (1, None, "invalid escape sequence")
    assert err("x\\") == (1, None, "incomplete escape")
    assert err("},\\q") == (0, "{", "unmatched")

    # --- recovery ---
    res, errs = expand_recover("a,d}e{fg},h}")
    assert res == ["a,defg,h"]
    assert [(e.position, e.missing) for e in errs] == [(1, None), (3, "{"), (9, None), (11, "{")]

    # --- count / limit ---
    assert count("{a,b}{c,d}{e,f}") == 8
    assert count("x") == 1
    assert expand("{a,b,c,d,e}", limit=2) == ["a", "b"]

    print("selftest: OK")
