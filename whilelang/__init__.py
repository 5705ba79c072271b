"""
whilelang Package

Parser and pretty-printer for a minimal imperative while-language:
integer and boolean expressions plus assignment, blocks, if/then/else
and while loops.

Architecture:
    whilelang/
    ├── combinators/     # Generic parser combinators over an immutable cursor
    ├── parser/          # AST, expression and command grammars, errors
    └── pretty/          # Expression and command pretty-printers

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .parser import (
    parse_exp, parse_com, parse_exp_strict, parse_com_strict,
    Binop, Expression, Command,
    Var, Const, Uminus, BinaryOp,
    Assign, Seq, If, While,
    ParseError,
)
from .pretty import pretty_exp, pretty_com

__all__ = [
    # Entry points
    "parse_exp", "parse_com",
    "parse_exp_strict", "parse_com_strict",
    "pretty_exp", "pretty_com",

    # AST nodes
    "Binop", "Expression", "Command",
    "Var", "Const", "Uminus", "BinaryOp",
    "Assign", "Seq", "If", "While",

    # Errors
    "ParseError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
