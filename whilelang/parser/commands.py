"""
Command grammar for the while-language.

    com ::= name "=" exp
          | "if" exp "then" com "else" com
          | "while" exp "do" com
          | "{" [ com { ";" com } ] "}"

Alternatives are tried in that order and each one starts again from the
cursor the command began at. There is no one-armed ``if`` and a trailing
``;`` inside a block is an error.

Author: xwest
"""

from typing import Optional

from ..combinators import Parser, choice, ctrl, ident, keyword, lazy, parse_all, sep_by
from .ast_nodes import Assign, Command, If, Seq, While
from .errors import parse_or_raise
from .expressions import expression


# Recursive reference for branches, loop bodies and block contents
command: Parser[Command] = lazy(lambda: any_command, consumes=True, name="command")


assign_command: Parser[Command] = ident.bind(
    lambda name: ctrl("=").then(expression).map(lambda exp: Assign(name, exp))
).named("assign")

if_command: Parser[Command] = keyword("if").then(expression).bind(
    lambda cond: keyword("then").then(command).bind(
        lambda then_branch: keyword("else").then(command).map(
            lambda else_branch: If(cond, then_branch, else_branch)
        )
    )
).named("if")

while_command: Parser[Command] = keyword("while").then(expression).bind(
    lambda cond: keyword("do").then(command).map(lambda body: While(cond, body))
).named("while")

seq_command: Parser[Command] = (
    ctrl("{").then(sep_by(command, ctrl(";"))).skip(ctrl("}")).map(Seq)
).named("seq")

any_command: Parser[Command] = choice(assign_command, if_command, while_command, seq_command)


def parse_com(text: str) -> Optional[Command]:
    """
    Parse ``text`` as a single command.

    Returns ``None`` unless the whole input (trailing whitespace aside) is
    one command.
    """
    return parse_all(command, text)


def parse_com_strict(text: str, filename: str = "<string>") -> Command:
    """Like ``parse_com`` but raises ``ParseError`` instead of returning ``None``."""
    return parse_or_raise(command, text, "command", filename)
