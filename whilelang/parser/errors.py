"""
Error handling for the while-language parser.

The grammars themselves only ever succeed or fail. This module adds an
opt-in error channel on top: the ``*_strict`` entry points raise a
``ParseError`` carrying a diagnostic with the source location where
parsing gave up.

Author: xwest
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..combinators import Cursor, Parser, SourceLocation, parse_prefix, skip_whitespace


logger = logging.getLogger(__name__)


@dataclass
class Diagnostic:
    """A single parser diagnostic."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class ParseError(Exception):
    """
    Exception raised by the strict parse entry points.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


# Parser error codes
PARSER_ERROR_CODES = {
    "P001": "No parse",
    "P002": "Unexpected trailing input",
    "P003": "Nesting too deep",
}


def create_no_parse_error(what: str, location: SourceLocation) -> ParseError:
    """Create an error for input the grammar does not match at all."""
    return ParseError(
        message=f"Input is not a valid {what}",
        location=location,
        code="P001",
        help_text=f"No {what} could be parsed starting at this position.",
        suggestions=["Check for unbalanced parentheses or braces",
                     "Reserved words (if, then, else, while, do) cannot be used as names"]
    )


def create_trailing_input_error(what: str, location: SourceLocation, excerpt: str) -> ParseError:
    """Create an error for input left over after a complete parse."""
    return ParseError(
        message=f"Unexpected input after {what}: {excerpt!r}",
        location=location,
        code="P002",
        help_text=f"A complete {what} ends before this position; the rest of the input was not consumed.",
        suggestions=["Remove the trailing text", "Separate commands with ';' inside '{ }'"]
    )


def create_nesting_too_deep_error(what: str, location: SourceLocation) -> ParseError:
    """Create an error for input nested beyond the interpreter's recursion limit."""
    return ParseError(
        message=f"Input nests too deeply to parse as a {what}",
        location=location,
        code="P003",
        help_text="Each level of parentheses or braces uses part of the Python call stack.",
        suggestions=["Split deeply nested blocks into flatter sequences",
                     "Drop redundant parentheses"]
    )


def parse_or_raise(parser: Parser, text: str, what: str, filename: str = "<string>"):
    """
    Parse the whole of ``text`` or raise ``ParseError``.

    Args:
        parser: Grammar entry parser
        text: Source text
        what: Human-readable name of the construct ("expression", "command")
        filename: Name used in reported locations

    Raises:
        ParseError: if nothing matches, if a prefix matches and
            non-whitespace input remains, or if the input nests too deeply
    """
    _, start = skip_whitespace.run(Cursor(text))
    try:
        result = parse_prefix(parser, text)
    except RecursionError:
        error = create_nesting_too_deep_error(what, start.location(filename))
        logger.debug("strict %s parse exceeded the recursion limit", what)
        raise error from None

    if result is None:
        error = create_no_parse_error(what, start.location(filename))
        logger.debug("strict %s parse failed: %s", what, error.location)
        raise error

    value, rest = result
    if not rest.at_end:
        excerpt = rest.remaining.split("\n", 1)[0][:20]
        error = create_trailing_input_error(what, rest.location(filename), excerpt)
        logger.debug("strict %s parse left input at %s", what, error.location)
        raise error

    return value
