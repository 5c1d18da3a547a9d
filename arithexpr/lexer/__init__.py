"""
arithexpr Lexer Package

Implements a pull-based lexical analyzer for arithmetic expressions.

Key Features:
- One token per call, driven by the parser
- Integer and decimal literals, all read as floats
- Line/column tracking for every token and error
- Diagnostics with error codes and help texts

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerError",
    "tokenize_string",
]
