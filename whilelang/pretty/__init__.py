"""
whilelang Pretty-Printer Package

Turns expression and command trees back into canonical source text that
the parser reads back as the same tree.

Author: xwest
"""

from .expressions import Precedence, PRECEDENCE, pretty, pretty_exp
from .commands import CommandPrinter, INDENT_WIDTH, pretty_com

__all__ = [
    "Precedence", "PRECEDENCE", "pretty", "pretty_exp",
    "CommandPrinter", "INDENT_WIDTH", "pretty_com",
]
