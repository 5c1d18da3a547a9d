"""
arithexpr Package

A small three-stage pipeline for arithmetic over floating-point numbers:
scanning, recursive descent parsing and tree-walking evaluation, with
source locations threaded through every lexical and syntactic error.

Architecture:
    arithexpr/
    ├── lexer/           # Tokenization and location tracking
    ├── parser/          # Syntax analysis and AST generation
    ├── evaluator/       # Evaluation with range checks
    └── cli.py           # Command-line driver

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, SourceLocation, LexerError
from .parser import Parser, ParseError, Expression, parse_string, to_display_string
from .evaluator import Evaluator, EvalError, EvalErrorKind, evaluate, evaluate_string

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Evaluator",

    # Data model
    "Token",
    "TokenType",
    "SourceLocation",
    "Expression",

    # Entry points
    "parse_string",
    "evaluate",
    "evaluate_string",
    "to_display_string",

    # Errors
    "LexerError",
    "ParseError",
    "EvalError",
    "EvalErrorKind",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
