"""
Evaluation error handling for arithexpr.

Evaluation errors describe computed values, not source text, so unlike lexer
and parser errors they carry no location.

Author: xwest
"""

from enum import Enum


class EvalErrorKind(Enum):
    """The ways evaluating a well-formed tree can fail."""
    DIVISION_BY_ZERO = "Division by zero"
    OVERFLOW = "Numeric overflow"       # result is +inf
    UNDERFLOW = "Numeric underflow"     # result is -inf


class EvalError(Exception):
    """Exception raised when evaluation of an expression tree fails."""

    def __init__(self, kind: EvalErrorKind):
        super().__init__(kind.value)
        self.kind = kind

    @property
    def message(self) -> str:
        return self.kind.value

    def __str__(self) -> str:
        return self.kind.value

    def __repr__(self) -> str:
        return f"EvalError({self.kind.name})"
