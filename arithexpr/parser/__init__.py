"""
arithexpr Parser Package

Implements a recursive descent parser for arithmetic expressions.
Produces immutable, structurally comparable Abstract Syntax Trees.

Key Features:
- One token of lookahead, pulled from the lexer on demand
- Precedence levels: unary minus > '*' '/' > '+' '-'
- Left-associative binary operators
- Fail-fast diagnostics with source locations

Author: xwest
"""

from .ast_nodes import *
from .parser import Parser, parse_string
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser",
    "parse_string",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "Expression", "BinaryOp",
    "Number", "Add", "Sub", "Mul", "Div", "Neg", "Pow",
    "to_display_string", "format_number",

    # Error handling
    "ParseError",
]
