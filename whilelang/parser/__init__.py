"""
whilelang Parser Package

Recursive-descent grammars for while-language expressions and commands,
built from the combinators in ``whilelang.combinators``.

Key Features:
- Five left-associative binary precedence tiers plus unary minus
- Assignment, if/then/else, while/do and { ...; ... } blocks
- Success-or-None entry points (parse_exp, parse_com)
- Optional strict entry points raising ParseError with a source location

Author: xwest
"""

from .ast_nodes import (
    Binop, Expression, Command,
    Var, Const, Uminus, BinaryOp,
    Assign, Seq, If, While,
)
from .expressions import parse_exp, parse_exp_strict
from .commands import parse_com, parse_com_strict
from .errors import ParseError, Diagnostic, PARSER_ERROR_CODES

__all__ = [
    # Entry points
    "parse_exp", "parse_com",
    "parse_exp_strict", "parse_com_strict",

    # AST nodes
    "Binop", "Expression", "Command",
    "Var", "Const", "Uminus", "BinaryOp",
    "Assign", "Seq", "If", "While",

    # Error handling
    "ParseError", "Diagnostic", "PARSER_ERROR_CODES",
]
