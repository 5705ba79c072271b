"""
Expression pretty-printer.

Prints the fewest parentheses the parser needs to rebuild the same tree.
All binary operators associate to the left, so:

    (a-b)-c   prints as   a-b-c
    a-(b-c)   prints as   a-(b-c)
    (a*b)+c   prints as   a*b+c

Author: xwest
"""

from enum import IntEnum

from ..parser.ast_nodes import BinaryOp, Binop, Const, Expression, Uminus, Var


class Precedence(IntEnum):
    """Binding strength of binary operators (higher binds tighter)."""
    NONE = 0            # top level, no enclosing operator
    OR = 1              # ||
    AND = 2             # &&
    COMPARISON = 3      # <, <=, ==
    TERM = 4            # +, -
    FACTOR = 5          # *, /


PRECEDENCE = {
    Binop.OR: Precedence.OR,
    Binop.AND: Precedence.AND,
    Binop.LESS: Precedence.COMPARISON,
    Binop.LESS_EQ: Precedence.COMPARISON,
    Binop.EQUAL: Precedence.COMPARISON,
    Binop.PLUS: Precedence.TERM,
    Binop.MINUS: Precedence.TERM,
    Binop.TIMES: Precedence.FACTOR,
    Binop.DIV: Precedence.FACTOR,
}


def pretty(exp: Expression, context: int = Precedence.NONE) -> str:
    """
    Print ``exp`` inside an operator context of strength ``context``.

    A binary operator of precedence P is parenthesized when ``context >= P``.
    Its left operand is printed at P-1, so a same-tier left child stays
    bare, and its right operand at P, so a same-tier right child gets
    parentheses.

    Only right operands and operands of other tiers are printed
    recursively, so nesting depth (not chain length) bounds the recursion.
    """
    if isinstance(exp, Var):
        return exp.name

    if isinstance(exp, Const):
        return str(exp.value)

    if isinstance(exp, Uminus):
        if isinstance(exp.operand, Var):
            return "-" + exp.operand.name
        return "-(" + pretty(exp.operand, Precedence.NONE) + ")"

    if isinstance(exp, BinaryOp):
        level = PRECEDENCE[exp.op]
        # Walk the left spine of same-tier operators iteratively; the parser
        # builds arbitrarily long left-deep chains like a-b-c-...
        tails = []
        node = exp
        while isinstance(node, BinaryOp) and PRECEDENCE[node.op] == level:
            tails.append(node.op.symbol + pretty(node.right, level))
            node = node.left
        text = pretty(node, level - 1) + "".join(reversed(tails))
        if context < level:
            return text
        return "(" + text + ")"

    raise TypeError(f"Cannot pretty-print {type(exp).__name__} as an expression")


def pretty_exp(exp: Expression) -> str:
    """Canonical source text for ``exp``."""
    return pretty(exp, Precedence.NONE)
