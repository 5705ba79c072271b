"""
Expression grammar for the while-language.

Precedence tiers, loosest first:

    or        ||
    and       &&
    compare   <  <=  ==
    additive  +  -
    factor    *  /
    unary     -x   -(5)   -(e)
    atom      (e)  name  integer

Each binary tier parses one operand from the next tier up, then any number
of (operator, operand) pairs, and folds them to the left so ``a-b-c`` comes
out as ``(a-b)-c``.

Unary minus only applies to a bare name or to something in parentheses:
``-x`` and ``-(5)`` parse, ``-5`` does not.

Author: xwest
"""

from functools import reduce
from typing import Optional, Sequence, Tuple

from ..combinators import Parser, choice, ctrl, ident, lazy, many, number, parse_all
from .ast_nodes import BinaryOp, Binop, Const, Expression, Uminus, Var
from .errors import parse_or_raise


def left_assoc(acc: Expression, pair: Tuple[Binop, Expression]) -> Expression:
    op, right = pair
    return BinaryOp(op, acc, right)


def binary_tier(operand: Parser[Expression], operators: Sequence[Binop], name: str) -> Parser[Expression]:
    """
    One left-associative precedence tier.

    Operators are tried in the order given; a failed operator alternative
    (symbol matched but no operand after it) is discarded as a whole.
    """
    op_parser = choice(*[
        ctrl(op.symbol).then(operand).map(lambda right, op=op: (op, right))
        for op in operators
    ])

    def fold(first: Expression) -> Parser[Expression]:
        return many(op_parser).map(lambda pairs: reduce(left_assoc, pairs, first))

    return operand.bind(fold).named(name)


# Forward reference: parentheses reopen the loosest tier
expression: Parser[Expression] = lazy(lambda: or_tier, consumes=True, name="expression")


def parenthesized(inner: Parser[Expression]) -> Parser[Expression]:
    return ctrl("(").then(inner).skip(ctrl(")"))


variable: Parser[Expression] = ident.map(Var).named("variable")
constant: Parser[Expression] = number.map(Const).named("constant")

atom: Parser[Expression] = (parenthesized(expression) | variable | constant).named("atom")

unary: Parser[Expression] = choice(
    ctrl("-").then(variable).map(Uminus),
    ctrl("-").then(parenthesized(constant)).map(Uminus),
    ctrl("-").then(parenthesized(expression)).map(Uminus),
    atom,
).named("unary")

factor_tier = binary_tier(unary, [Binop.TIMES, Binop.DIV], "factor")
additive_tier = binary_tier(factor_tier, [Binop.PLUS, Binop.MINUS], "additive")
# "<" is tried before "<="; an operand can never start with "=", so the
# "<" alternative fails on "<=" and the retry from the same cursor picks "<=".
compare_tier = binary_tier(additive_tier, [Binop.LESS, Binop.LESS_EQ, Binop.EQUAL], "compare")
and_tier = binary_tier(compare_tier, [Binop.AND], "and")
or_tier = binary_tier(and_tier, [Binop.OR], "or")


def parse_exp(text: str) -> Optional[Expression]:
    """
    Parse ``text`` as a single expression.

    Returns ``None`` unless the whole input (trailing whitespace aside) is
    one expression.
    """
    return parse_all(expression, text)


def parse_exp_strict(text: str, filename: str = "<string>") -> Expression:
    """Like ``parse_exp`` but raises ``ParseError`` instead of returning ``None``."""
    return parse_or_raise(expression, text, "expression", filename)
