"""
Test suite for the strict parse entry points and their diagnostics.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from whilelang import ParseError, parse_com_strict, parse_exp_strict
from whilelang.parser import Assign, Const, PARSER_ERROR_CODES, Seq, Var


class TestStrictParsing(unittest.TestCase):
    """Test cases for parse_exp_strict / parse_com_strict."""

    def test_success_returns_tree(self):
        self.assertEqual(parse_exp_strict(" x "), Var("x"))
        self.assertEqual(parse_com_strict("{ x = 1 }"), Seq([Assign("x", Const(1))]))

    def test_trailing_input_location(self):
        """Leftover input is reported at its first character."""
        with self.assertRaises(ParseError) as ctx:
            parse_exp_strict("a+b extra")

        error = ctx.exception
        self.assertEqual(error.diagnostic.code, "P002")
        self.assertEqual(error.location.line, 1)
        self.assertEqual(error.location.column, 5)
        self.assertIn("extra", error.diagnostic.message)

    def test_trailing_input_on_later_line(self):
        with self.assertRaises(ParseError) as ctx:
            parse_com_strict("x = 1\n  y = 2", filename="prog.while")

        location = ctx.exception.location
        self.assertEqual((location.line, location.column), (2, 3))
        self.assertEqual(location.filename, "prog.while")

    def test_no_parse_location(self):
        """With no match at all the error points at the first real character."""
        with self.assertRaises(ParseError) as ctx:
            parse_com_strict("\n   if x then y = 1")

        error = ctx.exception
        self.assertEqual(error.diagnostic.code, "P001")
        self.assertEqual((error.location.line, error.location.column), (2, 4))

    def test_empty_input(self):
        with self.assertRaises(ParseError) as ctx:
            parse_exp_strict("")
        self.assertEqual(ctx.exception.diagnostic.code, "P001")

    def test_error_text(self):
        with self.assertRaises(ParseError) as ctx:
            parse_exp_strict("-5")

        text = str(ctx.exception)
        self.assertTrue(text.startswith("ERROR: Input is not a valid expression"))
        self.assertIn("<string>:1:1", text)
        self.assertIn("help:", text)
        self.assertIn("suggestions:", text)

    def test_nesting_too_deep(self):
        with self.assertRaises(ParseError) as ctx:
            parse_com_strict("\n  " + "{" * 1000 + "}" * 1000)

        error = ctx.exception
        self.assertEqual(error.diagnostic.code, "P003")
        self.assertEqual((error.location.line, error.location.column), (2, 3))

        with self.assertRaises(ParseError) as ctx:
            parse_exp_strict("(" * 1000 + "x" + ")" * 1000)
        self.assertEqual(ctx.exception.diagnostic.code, "P003")

    def test_error_codes_are_documented(self):
        self.assertEqual(set(PARSER_ERROR_CODES), {"P001", "P002", "P003"})


if __name__ == "__main__":
    unittest.main()
