"""
End-to-end tests for the arithexpr command-line driver.

Author: xwest
"""

import io
import unittest
import sys
import os
from contextlib import redirect_stdout

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from arithexpr.cli import main, run_one, SAMPLE_INPUTS


class TestRunOne(unittest.TestCase):
    """Test cases for reporting a single input."""

    def _run(self, text: str, show_tokens: bool = False):
        out = io.StringIO()
        ok = run_one(text, out, show_tokens=show_tokens)
        return ok, out.getvalue()

    def test_success(self):
        ok, output = self._run("2 + 3 * 4")
        self.assertTrue(ok)
        self.assertEqual(output, "Input: '2 + 3 * 4' => (2) + ((3) * (4)) = 14\n")

    def test_fractional_result(self):
        ok, output = self._run("7 / 2")
        self.assertTrue(ok)
        self.assertTrue(output.endswith("= 3.5\n"))

    def test_evaluation_error(self):
        ok, output = self._run("10 / 0")
        self.assertFalse(ok)
        self.assertEqual(output, "Input: '10 / 0' => Evaluation error: Division by zero\n")

    def test_lifted_lexer_error_is_parse_error(self):
        ok, output = self._run("1 + @")
        self.assertFalse(ok)
        self.assertIn("Parse error at line 1, column 5: Unexpected character: '@'", output)

    def test_lexer_error_on_first_token(self):
        ok, output = self._run("@")
        self.assertFalse(ok)
        self.assertIn("Lexer error at line 1, column 1", output)

    def test_parse_error(self):
        ok, output = self._run("(2 + 3")
        self.assertFalse(ok)
        self.assertIn("Parse error at line 1, column 7: Expected RIGHT_PAREN, got EOF", output)

    def test_deep_negation(self):
        ok, output = self._run("-" * 600 + "5")
        self.assertTrue(ok)
        self.assertTrue(output.endswith(")" * 600 + " = 5\n"))

    def test_nesting_too_deep(self):
        depth = 50000
        ok, output = self._run("(" * depth + "1" + ")" * depth)
        self.assertFalse(ok)
        self.assertIn("Expression nested too deeply", output)

    def test_small_result_without_exponent(self):
        ok, output = self._run("1 / 10000000")
        self.assertTrue(ok)
        self.assertTrue(output.endswith("= 0.0000001\n"))

    def test_show_tokens(self):
        ok, output = self._run("1+2", show_tokens=True)
        self.assertTrue(ok)
        self.assertIn("[NUMBER(1.0)@1:1 PLUS('+')@1:2 NUMBER(2.0)@1:3 EOF@1:4]", output)

    def test_show_tokens_with_error(self):
        ok, output = self._run("1 # 2", show_tokens=True)
        self.assertFalse(ok)
        self.assertIn("<error at 1:3>", output)


class TestMain(unittest.TestCase):
    """Test cases for the console entry point."""

    def _main(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            status = main(argv)
        return status, out.getvalue()

    def test_all_inputs_succeed(self):
        status, output = self._main(["--", "1 + 1", "-(3)"])
        self.assertEqual(status, 0)
        self.assertEqual(output.count("Input:"), 2)

    def test_failure_does_not_stop_batch(self):
        status, output = self._main(["1 / 0", "2 * 2"])
        self.assertEqual(status, 1)
        self.assertIn("Division by zero", output)
        self.assertIn("(2) * (2) = 4", output)

    def test_samples_by_default(self):
        status, output = self._main([])
        self.assertEqual(status, 1)
        self.assertEqual(output.count("Input:"), len(SAMPLE_INPUTS))
        self.assertIn("Input: '--5' => -(-(5)) = 5", output)


if __name__ == "__main__":
    unittest.main()
