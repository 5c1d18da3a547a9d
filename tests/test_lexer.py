"""
Test suite for the arithexpr lexer.

Tests cover:
- Token recognition for numbers, operators and parentheses
- Line/column tracking across whitespace and newlines
- Repeatable EOF
- Lexical errors and their locations

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from arithexpr.lexer import Lexer, Token, TokenType, SourceLocation, LexerError, tokenize_string
from arithexpr.lexer.errors import create_invalid_number_error


class TestLexer(unittest.TestCase):
    """Test cases for token recognition."""

    def _types(self, source: str):
        return [token.type for token, _ in tokenize_string(source)]

    def test_operators_and_parentheses(self):
        """Every single-character symbol maps to its own token type."""
        self.assertEqual(
            self._types("+ - * / ( )"),
            [
                TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH,
                TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN, TokenType.EOF,
            ]
        )

    def test_integer_literal_is_float(self):
        token, location = Lexer("42").next_token()
        self.assertEqual(token, Token.number(42.0))
        self.assertIsInstance(token.value, float)
        self.assertEqual(token.lexeme, "42")
        self.assertEqual(location, SourceLocation(1, 1))

    def test_decimal_literal(self):
        token, _ = Lexer("3.25").next_token()
        self.assertEqual(token.type, TokenType.NUMBER)
        self.assertEqual(token.value, 3.25)

    def test_expression_without_spaces(self):
        tokens = [token for token, _ in tokenize_string("2*(3+4.5)")]
        self.assertEqual(tokens, [
            Token.number(2.0),
            Token.symbol(TokenType.STAR),
            Token.symbol(TokenType.LEFT_PAREN),
            Token.number(3.0),
            Token.symbol(TokenType.PLUS),
            Token.number(4.5),
            Token.symbol(TokenType.RIGHT_PAREN),
            Token.symbol(TokenType.EOF),
        ])

    def test_number_equality_uses_value(self):
        self.assertNotEqual(Token.number(1.0), Token.number(2.0))
        self.assertTrue(Token.number(1.0).is_kind(TokenType.NUMBER))
        self.assertTrue(Token.number(2.0).is_kind(TokenType.NUMBER))

    def test_eof_is_repeatable(self):
        lexer = Lexer("7")
        self.assertEqual(lexer.next_token()[0], Token.number(7.0))
        for _ in range(3):
            token, location = lexer.next_token()
            self.assertEqual(token.type, TokenType.EOF)
            self.assertEqual(location, SourceLocation(1, 2))

    def test_empty_input(self):
        token, location = Lexer("").next_token()
        self.assertEqual(token.type, TokenType.EOF)
        self.assertEqual(location, SourceLocation(1, 1))

    def test_whitespace_only_input(self):
        self.assertEqual(self._types(" \t\n "), [TokenType.EOF])

    def test_token_str_for_diagnostics(self):
        self.assertEqual(str(Token.symbol(TokenType.EOF)), "EOF")
        self.assertEqual(str(Token.symbol(TokenType.PLUS)), "PLUS('+')")
        self.assertEqual(str(Token.number(3.0)), "NUMBER(3.0)")


class TestLocations(unittest.TestCase):
    """Test cases for line/column tracking."""

    def test_columns_are_one_based(self):
        locations = [location for _, location in tokenize_string("2 + 3")]
        self.assertEqual(locations, [
            SourceLocation(1, 1),
            SourceLocation(1, 3),
            SourceLocation(1, 5),
            SourceLocation(1, 6),
        ])

    def test_newline_advances_line(self):
        """The number after the newline is reported on line 2."""
        pairs = tokenize_string("1 +\n2")
        token, location = pairs[2]
        self.assertEqual(token, Token.number(2.0))
        self.assertEqual(location.line, 2)
        self.assertEqual(location.column, 1)

    def test_columns_count_number_characters(self):
        pairs = tokenize_string("12.50 *\n  (7)")
        self.assertEqual(pairs[1][1], SourceLocation(1, 7))
        self.assertEqual(pairs[2][1], SourceLocation(2, 3))
        self.assertEqual(pairs[3][1], SourceLocation(2, 4))
        self.assertEqual(pairs[4][1], SourceLocation(2, 5))

    def test_location_tracks_cursor(self):
        lexer = Lexer("10 +")
        self.assertEqual(lexer.location(), SourceLocation(1, 1))
        lexer.next_token()
        self.assertEqual(lexer.location(), SourceLocation(1, 3))
        lexer.next_token()
        self.assertEqual(lexer.location(), SourceLocation(1, 5))

    def test_location_str(self):
        self.assertEqual(str(SourceLocation(2, 9)), "line 2, column 9")


class TestLexerErrors(unittest.TestCase):
    """Test cases for lexical errors."""

    def test_unexpected_character_after_valid_tokens(self):
        lexer = Lexer("2 + @")
        self.assertEqual(lexer.next_token()[0], Token.number(2.0))
        self.assertEqual(lexer.next_token()[0], Token.symbol(TokenType.PLUS))

        with self.assertRaises(LexerError) as ctx:
            lexer.next_token()

        self.assertEqual(ctx.exception.location, SourceLocation(1, 5))
        self.assertEqual(ctx.exception.message, "Unexpected character: '@'")
        self.assertEqual(ctx.exception.diagnostic.code, "L001")

    def test_unexpected_character_on_later_line(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize_string("1\n  + x")
        self.assertEqual(ctx.exception.location, SourceLocation(2, 5))

    def test_power_operator_is_not_lexed(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize_string("2 ^ 3")
        self.assertIn("'^'", ctx.exception.message)

    def test_leading_decimal_point_is_unexpected(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize_string(".5")
        self.assertEqual(ctx.exception.message, "Unexpected character: '.'")

    def test_missing_digits_after_decimal_point(self):
        """The error points at the start of the literal, not at the dot."""
        with self.assertRaises(LexerError) as ctx:
            tokenize_string("1 + 12. * 3")

        self.assertEqual(ctx.exception.message, "Expected digits after decimal point")
        self.assertEqual(ctx.exception.location, SourceLocation(1, 5))
        self.assertEqual(ctx.exception.diagnostic.code, "L002")

    def test_decimal_point_at_end_of_input(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize_string("7.")
        self.assertEqual(ctx.exception.location, SourceLocation(1, 1))

    def test_second_decimal_point_starts_new_token(self):
        lexer = Lexer("1.5.2")
        self.assertEqual(lexer.next_token()[0], Token.number(1.5))
        with self.assertRaises(LexerError) as ctx:
            lexer.next_token()
        self.assertEqual(ctx.exception.location, SourceLocation(1, 4))

    def test_superscript_digit_is_unexpected(self):
        """'²' ends the literal and is reported on its own column."""
        with self.assertRaises(LexerError) as ctx:
            tokenize_string("2²")
        self.assertEqual(ctx.exception.message, "Unexpected character: '²'")
        self.assertEqual(ctx.exception.location, SourceLocation(1, 2))
        self.assertEqual(ctx.exception.diagnostic.code, "L001")

    def test_non_ascii_digit_is_unexpected(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize_string("٣ + 1")
        self.assertEqual(ctx.exception.message, "Unexpected character: '٣'")
        self.assertEqual(ctx.exception.location, SourceLocation(1, 1))
        self.assertEqual(ctx.exception.diagnostic.code, "L001")

    def test_non_ascii_digit_after_decimal_point(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize_string("1.٣")
        self.assertEqual(ctx.exception.message, "Expected digits after decimal point")
        self.assertEqual(ctx.exception.diagnostic.code, "L002")

    def test_invalid_number_diagnostic(self):
        error = create_invalid_number_error("1.2.3", SourceLocation(2, 5))
        self.assertEqual(error.message, "Invalid number: '1.2.3'")
        self.assertEqual(error.location, SourceLocation(2, 5))
        self.assertEqual(error.diagnostic.code, "L003")

    def test_diagnostic_rendering(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize_string("@")
        rendered = str(ctx.exception)
        self.assertTrue(rendered.startswith("error[L001]: Unexpected character: '@'"))
        self.assertIn("--> line 1, column 1", rendered)


if __name__ == "__main__":
    unittest.main()
