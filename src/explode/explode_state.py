# -------------------------------------
# explode shared state
# -------------------------------------
"""
Shared state for the brace expander:
- OPEN, CLOSE, SEP, ESCAPE: structural characters
- STRUCTURAL / ESCAPABLE: character classes used by the scanner
- LIMIT: default cap on the number of expansions returned
"""

# ============================================================
# Structural characters
# ============================================================

OPEN = "{"
CLOSE = "}"
SEP = ","
ESCAPE = "\\"

STRUCTURAL = frozenset((OPEN, CLOSE, SEP, ESCAPE))

# characters that may follow ESCAPE
ESCAPABLE = STRUCTURAL


# ============================================================
# Output limit
# ============================================================

_DEFAULT_LIMIT = 0

LIMIT: int = _DEFAULT_LIMIT


def set_limit(n: int) -> int:
    """
    Set the default output limit used by expand() when no limit is given.

    Args:
        n: Maximum number of expansions to return. 0 means no limit.

    Returns:
        The previous limit.
    """
    global LIMIT
    n = int(n)
    if n < 0:
        raise ValueError(f"limit must be >= 0, got {n}")
    prev = LIMIT
    LIMIT = n
    return prev


def get_limit() -> int:
    """Return the current default output limit."""
    return LIMIT


def reset() -> None:
    """Restore defaults."""
    global LIMIT
    LIMIT = _DEFAULT_LIMIT
