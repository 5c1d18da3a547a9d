"""
Error handling for the arithexpr parser.

Provides syntax error reporting with source location information, including
the lifting of lexer errors raised while the parser is pulling tokens.

Author: xwest
"""

from typing import Optional, List, Union

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic, LexerError


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    @classmethod
    def from_lexer_error(cls, error: LexerError) -> "ParseError":
        """Lift a lexer error, keeping its message, location and code."""
        diagnostic = error.diagnostic
        return cls(
            message=diagnostic.message,
            location=diagnostic.location,
            code=diagnostic.code,
            help_text=diagnostic.help_text,
            suggestions=diagnostic.suggestions
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


# Hints for tokens the grammar can demand explicitly
MISSING_TOKEN_HINTS = {
    TokenType.RIGHT_PAREN: ["Add a closing parenthesis ')'"],
    TokenType.EOF: ["Remove the trailing input", "Join the pieces with an operator"],
}


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P002": "Expected expression",
    "P003": "Trailing input after expression",
    "P004": "Expression nested too deeply",
}


# Helper functions for creating common parser errors

def create_unexpected_token_error(expected: Union[TokenType, str], found: Token,
                                  location: SourceLocation) -> ParseError:
    """Create an error for a token that does not match the grammar."""
    expected_str = expected.name if isinstance(expected, TokenType) else expected

    return ParseError(
        message=f"Expected {expected_str}, got {found}",
        location=location,
        token=found,
        code="P001",
        help_text=f"The parser expected {expected_str} at this position.",
        suggestions=MISSING_TOKEN_HINTS.get(expected, [])
    )


def create_expected_expression_error(found: Token, location: SourceLocation) -> ParseError:
    """Create an error for a token that cannot start an operand."""
    return ParseError(
        message=f"Expected expression, got {found}",
        location=location,
        token=found,
        code="P002",
        help_text="An operand is a number, a parenthesized expression or '-' followed by an operand."
    )


def create_trailing_input_error(found: Token, location: SourceLocation) -> ParseError:
    """Create an error for input left over after a complete expression."""
    return ParseError(
        message=f"Expected end of input, got {found}",
        location=location,
        token=found,
        code="P003",
        help_text="A complete expression was parsed but more input follows it.",
        suggestions=MISSING_TOKEN_HINTS[TokenType.EOF]
    )


def create_nesting_too_deep_error(found: Token, location: SourceLocation) -> ParseError:
    """Create an error for parentheses nested past the parser's stack depth."""
    return ParseError(
        message="Expression nested too deeply",
        location=location,
        token=found,
        code="P004",
        help_text="Parentheses are nested deeper than the parser can follow.",
        suggestions=["Remove redundant parentheses"]
    )
