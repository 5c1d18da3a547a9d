"""
Error handling for the arithexpr lexer.

Provides error reporting with source location information and short help
texts suitable for printing next to the offending input.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        result = self.severity
        if self.code:
            result += f"[{self.code}]"
        result += f": {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result.rstrip("\n")


class LexerError(Exception):
    """
    Exception raised when the lexer encounters malformed input.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
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

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Missing digits after decimal point",
    "L003": "Invalid numeric literal",
}


# Helper functions for creating common errors

def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character outside the expression alphabet."""
    if char.isprintable():
        help_text = "Only digits, '.', '+', '-', '*', '/', '(' and ')' are allowed."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Unexpected character: '{char}'",
        location=location,
        code="L001",
        help_text=help_text
    )


def create_missing_fraction_error(lexeme: str, location: SourceLocation) -> LexerError:
    """Create an error for a literal like '1.' with nothing after the point."""
    return LexerError(
        message="Expected digits after decimal point",
        location=location,
        code="L002",
        help_text=f"The literal '{lexeme}' ends with a decimal point.",
        suggestions=[f"Write '{lexeme}0'", f"Write '{lexeme[:-1]}'"]
    )


def create_invalid_number_error(lexeme: str, location: SourceLocation) -> LexerError:
    """Create an error for a literal that cannot be converted to a float."""
    return LexerError(
        message=f"Invalid number: '{lexeme}'",
        location=location,
        code="L003",
        help_text="Numeric literals are digits, optionally followed by '.' and more digits."
    )
