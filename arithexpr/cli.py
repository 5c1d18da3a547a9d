"""
Command-line driver for arithexpr.

Feeds each input through parse and evaluate and prints the rendered tree
with its value, or the first error met. One failing input never stops the
rest of the batch.

Author: xwest
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .lexer import Lexer, LexerError
from .parser import Parser, ParseError, format_number
from .evaluator import EvalError, evaluate

logger = logging.getLogger("arithexpr.cli")

SAMPLE_INPUTS = [
    "2 + 3",
    "2 + 3 * 4",
    "10 - 2 - 3",
    "(2 + 3) * 4",
    "-5",
    "--5",
    "2 * -3",
    "10 / 0",
    "1 + @",
    "(2 + 3",
]


def run_one(text: str, out: TextIO, show_tokens: bool = False) -> bool:
    """
    Run one input through the pipeline and report the outcome.

    Returns:
        True if the input evaluated successfully
    """
    out.write(f"Input: {text!r} => ")

    if show_tokens:
        _write_tokens(text, out)

    try:
        expr = Parser(Lexer(text)).parse()
    except LexerError as e:
        out.write(f"Lexer error at {e.location}: {e.message}\n")
        return False
    except ParseError as e:
        out.write(f"Parse error at {e.location}: {e.message}\n")
        return False

    try:
        value = evaluate(expr)
    except EvalError as e:
        out.write(f"Evaluation error: {e}\n")
        return False

    out.write(f"{expr} = {format_number(value)}\n")
    return True


def _write_tokens(text: str, out: TextIO):
    lexer = Lexer(text)
    parts = []
    try:
        for token, location in lexer.tokenize():
            parts.append(f"{token}@{location.line}:{location.column}")
    except LexerError as e:
        parts.append(f"<error at {e.location.line}:{e.location.column}>")
    out.write(f"[{' '.join(parts)}] ")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arithexpr",
        description="Parse and evaluate arithmetic expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    arithexpr                          # Run the built-in samples
    arithexpr "2 + 3 * 4"              # Evaluate one expression
    arithexpr --tokens "(1 + 2) / 4"   # Also show the token stream
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("expressions", nargs="*",
                        help="Expressions to evaluate (default: built-in samples)")
    parser.add_argument("--tokens", action="store_true",
                        help="Print the token stream of each input")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    inputs = args.expressions or SAMPLE_INPUTS
    logger.debug("running %d input(s)", len(inputs))

    failures = 0
    for text in inputs:
        if not run_one(text, sys.stdout, show_tokens=args.tokens):
            failures += 1

    if failures:
        logger.debug("%d of %d input(s) failed", failures, len(inputs))
    return 0 if failures == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
