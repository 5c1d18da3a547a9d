"""
arithexpr Lexer - pulls tokens out of expression text one at a time

The parser drives this directly: it asks for the next token only when it
needs one, so there is no token list and no backtracking.

xwest
"""

import logging
from typing import List, Tuple

from .tokens import Token, TokenType, SourceLocation, OPERATORS
from .errors import (
    create_invalid_character_error,
    create_missing_fraction_error, create_invalid_number_error
)

logger = logging.getLogger("arithexpr.lexer")


def _is_digit(char: str) -> bool:
    """ASCII digits only; str.isdigit() also accepts '²' and other scripts."""
    return '0' <= char <= '9'


class Lexer:
    """
    arithexpr lexical analyzer.

    Holds a cursor over the source text together with the current line and
    column. Every call to ``next_token`` consumes exactly one token.
    """

    def __init__(self, source: str):
        """
        Initialize the lexer with source text.

        Args:
            source: Expression text
        """
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1

    def location(self) -> SourceLocation:
        """Return the current cursor position."""
        return SourceLocation(self.line, self.column)

    def next_token(self) -> Tuple[Token, SourceLocation]:
        """
        Scan the next token.

        Returns:
            The token and the location where it starts. Once the input is
            exhausted every call returns an EOF token.

        Raises:
            LexerError: If the text at the cursor is not a valid token
        """
        self._skip_whitespace()

        start = self.location()

        if self.pos >= len(self.source):
            return Token.symbol(TokenType.EOF), start

        current_char = self.source[self.pos]

        if _is_digit(current_char):
            token = self._tokenize_number(start)
        elif current_char in OPERATORS:
            self._advance()
            token = Token(OPERATORS[current_char], None, current_char)
        else:
            raise create_invalid_character_error(current_char, start)

        logger.debug("scanned %s at %s", token, start)
        return token, start

    def tokenize(self) -> List[Tuple[Token, SourceLocation]]:
        """
        Scan the remaining input.

        Returns:
            List of (token, location) pairs ending with EOF

        Raises:
            LexerError: On the first malformed token
        """
        tokens = []
        while True:
            token, location = self.next_token()
            tokens.append((token, location))
            if token.type == TokenType.EOF:
                return tokens

    def _tokenize_number(self, start: SourceLocation) -> Token:
        """Tokenize digits with an optional fractional part."""
        start_pos = self.pos

        self._skip_digits()

        if self._current() == '.':
            self._advance()
            if not _is_digit(self._current()):
                raise create_missing_fraction_error(self.source[start_pos:self.pos], start)
            self._skip_digits()

        lexeme = self.source[start_pos:self.pos]

        try:
            value = float(lexeme)
        except ValueError:
            raise create_invalid_number_error(lexeme, start) from None

        return Token(TokenType.NUMBER, value, lexeme)

    def _skip_digits(self):
        while _is_digit(self._current()):
            self._advance()

    def _skip_whitespace(self):
        """Skip whitespace, newlines included."""
        while self.pos < len(self.source) and self.source[self.pos].isspace():
            self._advance()

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _current(self) -> str:
        """Character under the cursor, or '\\0' past the end."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return '\0'


def tokenize_string(source: str) -> List[Tuple[Token, SourceLocation]]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Expression text

    Returns:
        List of (token, location) pairs including the final EOF

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source).tokenize()
