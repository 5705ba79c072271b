"""
whilelang Parser Combinator Package

A small, generic parser-combinator library. Parsers run over an immutable
cursor and report only success (value plus remaining input) or failure.

Key Features:
- Immutable cursor, so backtracking needs no undo logic
- Sequencing (bind/then/skip), left-biased alternation, repetition
- Zero-width repetition rejected when the parser is built
- Whitespace-skipping token helpers (ctrl, ident, number, keyword)

Author: xwest
"""

from .cursor import Cursor, SourceLocation
from .parser import Parser, pure, fail, item, sat, char, string, lazy, choice, many, many1
from .lexical import (
    RESERVED_WORDS, skip_whitespace, token, identifier_run,
    ctrl, ident, number, keyword, sep_by, sep_by1, parse_prefix, parse_all
)

__all__ = [
    # Input
    "Cursor", "SourceLocation",

    # Core combinators
    "Parser", "pure", "fail", "item", "sat", "char", "string",
    "lazy", "choice", "many", "many1",

    # Token-level helpers
    "RESERVED_WORDS", "skip_whitespace", "token", "identifier_run",
    "ctrl", "ident", "number", "keyword", "sep_by", "sep_by1",

    # Drivers
    "parse_prefix", "parse_all",
]
