"""
Token definitions for the arithexpr lexer.

The vocabulary is deliberately small:
- Numeric literals (always carried as floats)
- The four arithmetic operators
- Parentheses for grouping
- An end-of-input marker

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Dict, Optional


class TokenType(Enum):
    """Enumeration of all token types in arithexpr."""

    # Special
    EOF = auto()                    # End of input (repeatable)

    # Literals
    NUMBER = auto()                 # 42, 3.14

    # Arithmetic operators
    PLUS = auto()                   # +
    MINUS = auto()                  # - (binary and unary)
    STAR = auto()                   # *
    SLASH = auto()                  # /

    # Grouping
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Lines and columns both start at 1. Attached to every token and to every
    lexical or syntactic diagnostic.
    """
    line: int
    column: int

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.line}, {self.column})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Equality covers the token type and the numeric value; the raw lexeme is
    kept for diagnostics only.
    """
    type: TokenType
    value: Optional[float] = None
    lexeme: str = field(default="", compare=False)

    @classmethod
    def number(cls, value: float, lexeme: str = "") -> "Token":
        return cls(TokenType.NUMBER, float(value), lexeme or repr(float(value)))

    @classmethod
    def symbol(cls, token_type: TokenType) -> "Token":
        return cls(token_type, None, SYMBOLS.get(token_type, ""))

    def __str__(self) -> str:
        if self.type == TokenType.NUMBER:
            return f"{self.type.name}({self.value!r})"
        if self.lexeme:
            return f"{self.type.name}({self.lexeme!r})"
        return self.type.name

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.lexeme!r})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self) -> bool:
        """Check if this token is an arithmetic operator."""
        return self.type in ARITHMETIC_OPERATORS

    def is_kind(self, token_type: TokenType) -> bool:
        """Compare by kind only, ignoring any carried value."""
        return self.type == token_type


# Lookup tables for single-character recognition
OPERATORS: Dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

SYMBOLS: Dict[TokenType, str] = {token_type: char for char, token_type in OPERATORS.items()}

ARITHMETIC_OPERATORS = frozenset({
    TokenType.PLUS,
    TokenType.MINUS,
    TokenType.STAR,
    TokenType.SLASH,
})
