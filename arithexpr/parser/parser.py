"""
arithexpr Recursive Descent Parser

Pulls tokens from a Lexer with a single token of lookahead and builds an
immutable expression tree. Grammar, lowest precedence first:

    expression -> term (('+' | '-') term)*
    term       -> unary (('*' | '/') unary)*
    unary      -> '-' unary | primary
    primary    -> NUMBER | '(' expression ')'

Author: xwest
"""

import logging
from typing import Dict, Type

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenType
from ..lexer.errors import LexerError
from .ast_nodes import Expression, BinaryOp, Number, Neg, Add, Sub, Mul, Div
from .errors import (
    ParseError, create_unexpected_token_error,
    create_expected_expression_error, create_trailing_input_error,
    create_nesting_too_deep_error
)

logger = logging.getLogger("arithexpr.parser")


class Parser:
    """
    arithexpr recursive descent parser.

    Owns its lexer exclusively. Parsing stops at the first error; there is
    no recovery.
    """

    def __init__(self, lexer: Lexer):
        """
        Initialize the parser and prime the lookahead.

        Args:
            lexer: Lexer positioned at the start of the input

        Raises:
            LexerError: If the first token cannot be scanned
        """
        self.lexer = lexer
        self.current, self.current_location = lexer.next_token()

        # Infix tables, one per precedence level
        self.additive_ops: Dict[TokenType, Type[BinaryOp]] = {
            TokenType.PLUS: Add,
            TokenType.MINUS: Sub,
        }
        self.multiplicative_ops: Dict[TokenType, Type[BinaryOp]] = {
            TokenType.STAR: Mul,
            TokenType.SLASH: Div,
        }

    @classmethod
    def from_string(cls, source: str) -> "Parser":
        return cls(Lexer(source))

    def parse(self) -> Expression:
        """
        Parse one complete expression.

        Returns:
            Root of the expression tree

        Raises:
            ParseError: On a syntax error, a lexical error met while parsing,
                input left over after the expression, or parentheses nested
                deeper than the interpreter stack
        """
        try:
            expr = self._parse_expression()
        except RecursionError:
            raise create_nesting_too_deep_error(self.current, self.current_location) from None

        if not self.check(TokenType.EOF):
            raise create_trailing_input_error(self.current, self.current_location)

        logger.debug("parsed %s", expr)
        return expr

    # Grammar rules. Only parentheses recurse; operator chains and runs of
    # unary minus are built in loops.

    def _parse_expression(self) -> Expression:
        """expression -> term (('+' | '-') term)*"""
        left = self._parse_term()

        # Left-associative: a - b - c is (a - b) - c
        while self.current.type in self.additive_ops:
            node_class = self.additive_ops[self.advance().type]
            left = node_class(left, self._parse_term())

        return left

    def _parse_term(self) -> Expression:
        """term -> unary (('*' | '/') unary)*"""
        left = self._parse_unary()

        while self.current.type in self.multiplicative_ops:
            node_class = self.multiplicative_ops[self.advance().type]
            left = node_class(left, self._parse_unary())

        return left

    def _parse_unary(self) -> Expression:
        """
        unary   -> '-' unary | primary
        primary -> NUMBER | '(' expression ')'
        """
        negations = 0
        while self.check(TokenType.MINUS):
            self.advance()
            negations += 1

        if self.check(TokenType.NUMBER):
            expr: Expression = Number(self.advance().value)
        elif self.check(TokenType.LEFT_PAREN):
            self.advance()
            expr = self._parse_expression()
            self.expect_and_advance(TokenType.RIGHT_PAREN)
        else:
            raise create_expected_expression_error(self.current, self.current_location)

        for _ in range(negations):
            expr = Neg(expr)
        return expr

    # Utility methods

    def advance(self) -> Token:
        """
        Consume the lookahead token and fetch the next one.

        Returns:
            The token that was current before the call

        Raises:
            ParseError: Lifted from a LexerError, same message and location
        """
        previous = self.current
        try:
            self.current, self.current_location = self.lexer.next_token()
        except LexerError as e:
            raise ParseError.from_lexer_error(e) from e
        return previous

    def check(self, token_type: TokenType) -> bool:
        """Check the lookahead's kind without consuming it."""
        return self.current.is_kind(token_type)

    def expect_and_advance(self, token_type: TokenType):
        """Consume a token of the expected kind or raise ParseError."""
        if not self.check(token_type):
            raise create_unexpected_token_error(token_type, self.current, self.current_location)
        self.advance()


def parse_string(source: str) -> Expression:
    """
    Convenience function to parse a source string.

    Args:
        source: Expression text

    Returns:
        Expression AST

    Raises:
        LexerError: If the very first token is malformed
        ParseError: If parsing fails
    """
    parser = Parser(Lexer(source))
    return parser.parse()
