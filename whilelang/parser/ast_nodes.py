"""
Abstract Syntax Tree node definitions for the while-language.

Expressions and commands are immutable tree nodes compared structurally.
The parser builds them bottom-up and nothing mutates them afterwards.

Author: xwest
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Binop(Enum):
    """Binary operators, valued by their concrete syntax."""
    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIV = "/"
    EQUAL = "=="
    LESS = "<"
    LESS_EQ = "<="
    AND = "&&"
    OR = "||"

    @property
    def symbol(self) -> str:
        return self.value


class Expression:
    """Base class for expression nodes."""

    def __str__(self) -> str:
        from ..pretty.expressions import pretty_exp
        return pretty_exp(self)


class Command:
    """Base class for command nodes."""

    def __str__(self) -> str:
        from ..pretty.commands import pretty_com
        return pretty_com(self)


# ============================================================================
# Expressions
# ============================================================================

@dataclass(frozen=True)
class Var(Expression):
    name: str


@dataclass(frozen=True)
class Const(Expression):
    value: int


@dataclass(frozen=True)
class Uminus(Expression):
    operand: Expression


@dataclass(frozen=True)
class BinaryOp(Expression):
    op: Binop
    left: Expression
    right: Expression


# ============================================================================
# Commands
# ============================================================================

@dataclass(frozen=True)
class Assign(Command):
    name: str
    exp: Expression


@dataclass(frozen=True)
class Seq(Command):
    """Block of commands; any iterable is accepted and stored as a tuple."""
    commands: Tuple[Command, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "commands", tuple(self.commands))


@dataclass(frozen=True)
class If(Command):
    cond: Expression
    then_branch: Command
    else_branch: Command


@dataclass(frozen=True)
class While(Command):
    cond: Expression
    body: Command
