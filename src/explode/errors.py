# -------------------------------------
# expansion errors
# -------------------------------------
from __future__ import annotations

INVALID_SEPARATOR = "invalid separator"
INVALID_ESCAPE = "invalid escape sequence"
INCOMPLETE_ESCAPE = "incomplete escape"
UNMATCHED = "unmatched"


class ExplodeError(ValueError):
    """
    Syntax error in a brace expression.

    position: index of the offending character
    missing:  the delimiter that was expected but never seen
              ("{" for a stray "}", "}" for an unclosed "{"), else None
    reason:   short description when missing is None
    """

    def __init__(self, position: int, missing: str | None = None, reason: str = INVALID_SEPARATOR):
        self.position = position
        self.missing = missing
        self.reason = UNMATCHED if missing is not None else reason
        super().__init__(f"{position}: {self.message}")

    @property
    def message(self) -> str:
        if self.missing is not None:
            return f"no matching '{self.missing}' found"
        return self.reason

    def __eq__(self, other):
        if not isinstance(other, ExplodeError):
            return NotImplemented
        return (self.position, self.missing, self.reason) == (other.position, other.missing, other.reason)

    def __hash__(self):
        return hash((self.position, self.missing, self.reason))

    def __repr__(self) -> str:
        return f"ExplodeError(position={self.position!r}, missing={self.missing!r}, reason={self.reason!r})"


def unmatched(position: int, missing: str) -> ExplodeError:
    return ExplodeError(position, missing)


def invalid_separator(position: int) -> ExplodeError:
    return ExplodeError(position, None, INVALID_SEPARATOR)


def invalid_escape(position: int) -> ExplodeError:
    return ExplodeError(position, None, INVALID_ESCAPE)


def incomplete_escape(position: int) -> ExplodeError:
    return ExplodeError(position, None, INCOMPLETE_ESCAPE)
