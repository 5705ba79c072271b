"""
Test suite for the while-language command grammar.

Tests cover:
- Assignment, if/then/else, while/do and blocks
- Empty blocks and separator handling
- Keywords versus identifiers
- Whole-input requirement

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from whilelang.parser import (
    parse_com, Assign, BinaryOp, Binop, Const, If, Seq, Var, While,
)


x, y, z = Var("x"), Var("y"), Var("z")


class TestAssign(unittest.TestCase):
    """Test cases for assignments."""

    def test_simple(self):
        self.assertEqual(parse_com("x = 1"), Assign("x", Const(1)))
        self.assertEqual(parse_com("x=y+1"), Assign("x", BinaryOp(Binop.PLUS, y, Const(1))))

    def test_names_with_keyword_prefix(self):
        self.assertEqual(parse_com("ifx = 1"), Assign("ifx", Const(1)))
        self.assertEqual(parse_com("done = 0"), Assign("done", Const(0)))

    def test_reserved_target(self):
        self.assertIsNone(parse_com("if = 1"))
        self.assertIsNone(parse_com("do = 1"))

    def test_missing_expression(self):
        self.assertIsNone(parse_com("x ="))
        self.assertIsNone(parse_com("x == 1"))


class TestSeq(unittest.TestCase):
    """Test cases for blocks."""

    def test_empty_block(self):
        self.assertEqual(parse_com("{}"), Seq([]))
        self.assertEqual(parse_com("{ \n }"), Seq(()))

    def test_block(self):
        self.assertEqual(
            parse_com("{a = 1; b = 2}"),
            Seq([Assign("a", Const(1)), Assign("b", Const(2))]),
        )

    def test_nested_blocks(self):
        self.assertEqual(parse_com("{{}; {x = 1}}"), Seq([Seq([]), Seq([Assign("x", Const(1))])]))

    def test_trailing_separator_rejected(self):
        self.assertIsNone(parse_com("{a = 1;}"))
        self.assertIsNone(parse_com("{;}"))

    def test_missing_separator_rejected(self):
        self.assertIsNone(parse_com("{a = 1 b = 2}"))

    def test_unclosed_block(self):
        self.assertIsNone(parse_com("{a = 1"))


class TestIf(unittest.TestCase):
    """Test cases for if/then/else."""

    def test_bare_branches(self):
        self.assertEqual(
            parse_com("if x then a = 1 else b = 2"),
            If(x, Assign("a", Const(1)), Assign("b", Const(2))),
        )

    def test_block_branches(self):
        self.assertEqual(
            parse_com("if x<1 then {} else {y = 2}"),
            If(BinaryOp(Binop.LESS, x, Const(1)), Seq([]), Seq([Assign("y", Const(2))])),
        )

    def test_else_if_chain(self):
        self.assertEqual(
            parse_com("if a then b = 1 else if c then d = 2 else e = 3"),
            If(
                Var("a"),
                Assign("b", Const(1)),
                If(Var("c"), Assign("d", Const(2)), Assign("e", Const(3))),
            ),
        )

    def test_else_is_required(self):
        self.assertIsNone(parse_com("if x then a = 1"))

    def test_keyword_boundaries(self):
        """Keywords must stand alone; 'thenx' is not 'then'."""
        self.assertIsNone(parse_com("if x thena = 1 else b = 2"))
        self.assertEqual(
            parse_com("if(x)then{}else{}"),
            If(x, Seq([]), Seq([])),
        )


class TestWhile(unittest.TestCase):
    """Test cases for while loops."""

    def test_bare_body(self):
        self.assertEqual(
            parse_com("while x < 10 do x = x + 1"),
            While(BinaryOp(Binop.LESS, x, Const(10)), Assign("x", BinaryOp(Binop.PLUS, x, Const(1)))),
        )

    def test_empty_body(self):
        self.assertEqual(parse_com("while 0 do {}"), While(Const(0), Seq([])))

    def test_missing_do(self):
        self.assertIsNone(parse_com("while x x = 1"))
        self.assertIsNone(parse_com("whilex do {}"))


class TestPrograms(unittest.TestCase):
    """Test cases for larger commands."""

    def test_layout_example(self):
        source = "if z then {\n  a = 1<z;\n  while 0 do {}\n} else\n  b = y<y"
        expected = If(
            z,
            Seq([
                Assign("a", BinaryOp(Binop.LESS, Const(1), z)),
                While(Const(0), Seq([])),
            ]),
            Assign("b", BinaryOp(Binop.LESS, y, y)),
        )
        self.assertEqual(parse_com(source), expected)

    def test_factorial(self):
        source = """
        {
          n = 5;
          acc = 1;
          while 0 < n do {
            acc = acc * n;
            n = n - 1
          }
        }
        """
        n, acc = Var("n"), Var("acc")
        expected = Seq([
            Assign("n", Const(5)),
            Assign("acc", Const(1)),
            While(
                BinaryOp(Binop.LESS, Const(0), n),
                Seq([
                    Assign("acc", BinaryOp(Binop.TIMES, acc, n)),
                    Assign("n", BinaryOp(Binop.MINUS, n, Const(1))),
                ]),
            ),
        ])
        self.assertEqual(parse_com(source), expected)

    def test_trailing_input(self):
        self.assertIsNone(parse_com("x = 1 y = 2"))
        self.assertIsNone(parse_com("x = 1;"))
        self.assertIsNone(parse_com(""))

    def test_moderate_nesting(self):
        self.assertEqual(parse_com("{" * 10 + "}" * 10), _nested_blocks(10))

    def test_excessive_nesting_is_no_parse(self):
        """Blocks nested past the recursion limit fail instead of raising."""
        self.assertIsNone(parse_com("{" * 1000 + "}" * 1000))
        self.assertIsNone(parse_com("while x do " * 1000 + "x = 1"))

    def test_many_statements(self):
        block = parse_com("{" + ";".join(["x = x+1"] * 2000) + "}")
        self.assertEqual(len(block.commands), 2000)
        self.assertEqual(block.commands[-1], Assign("x", BinaryOp(Binop.PLUS, x, Const(1))))


def _nested_blocks(depth):
    block = Seq([])
    for _ in range(depth - 1):
        block = Seq([block])
    return block


if __name__ == "__main__":
    unittest.main()
