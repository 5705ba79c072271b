"""
Command pretty-printer.

Layout rules:

* two spaces per level of indentation (configurable);
* ``{`` hugs ``then``, ``else`` and ``do``: a block branch or body stays on
  the keyword's line and its closing brace is followed by `` else``;
* any other branch or body goes on the next line, one level deeper, and
  ``else`` returns to the statement's own indentation;
* ``else if`` chains stay flat instead of nesting deeper each time;
* every command in a block gets its own line, separated by ``;`` with no
  ``;`` after the last one; an empty block is ``{}``.

Output never ends with a newline.

Author: xwest
"""

import logging

from ..parser.ast_nodes import Assign, Command, If, Seq, While
from .expressions import pretty_exp


logger = logging.getLogger(__name__)

INDENT_WIDTH = 2


class CommandPrinter:
    """
    Renders commands as indented source text.

    Args:
        indent_width: Spaces per nesting level
    """

    def __init__(self, indent_width: int = INDENT_WIDTH):
        if indent_width < 0:
            raise ValueError(f"indent_width must be non-negative, got {indent_width}")
        self.indent_width = indent_width
        self.unit = " " * indent_width

    def render(self, command: Command, indent: str = "") -> str:
        """Render ``command`` as a statement starting at ``indent``."""
        if isinstance(command, Assign):
            return f"{indent}{command.name} = {pretty_exp(command.exp)}"
        if isinstance(command, Seq):
            return indent + self._block(command, indent)
        if isinstance(command, If):
            return indent + self._if(command, indent)
        if isinstance(command, While):
            return indent + self._while(command, indent)
        raise TypeError(f"Cannot pretty-print {type(command).__name__} as a command")

    def _block(self, seq: Seq, indent: str) -> str:
        # No leading indentation: the caller has already placed the "{"
        if not seq.commands:
            return "{}"
        inner = indent + self.unit
        body = ";\n".join(self.render(child, inner) for child in seq.commands)
        return "{\n" + body + "\n" + indent + "}"

    def _if(self, command: If, indent: str) -> str:
        text = f"if {pretty_exp(command.cond)} then"

        then_branch = command.then_branch
        if isinstance(then_branch, Seq):
            text += " " + self._block(then_branch, indent) + " else"
        else:
            text += "\n" + self.render(then_branch, indent + self.unit) + "\n" + indent + "else"

        else_branch = command.else_branch
        if isinstance(else_branch, Seq):
            text += " " + self._block(else_branch, indent)
        elif isinstance(else_branch, If):
            text += " " + self._if(else_branch, indent)
        else:
            text += "\n" + self.render(else_branch, indent + self.unit)
        return text

    def _while(self, command: While, indent: str) -> str:
        text = f"while {pretty_exp(command.cond)} do"
        if isinstance(command.body, Seq):
            return text + " " + self._block(command.body, indent)
        return text + "\n" + self.render(command.body, indent + self.unit)


def pretty_com(command: Command, indent_width: int = INDENT_WIDTH) -> str:
    """Canonical source text for ``command``."""
    text = CommandPrinter(indent_width).render(command)
    logger.debug("rendered %s as %d lines", type(command).__name__, text.count("\n") + 1)
    return text
