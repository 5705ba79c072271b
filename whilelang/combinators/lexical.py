"""
Whitespace-aware helpers built on the core combinators.

These are the parsers the grammars actually use: every token-level helper
skips leading whitespace first, and ``parse_all`` checks that nothing but
whitespace is left over at the end.

Author: xwest
"""

import logging
from typing import Any, List, Optional, Tuple

from .cursor import Cursor
from .parser import Parser, ParseResult, T, many, many1, pure, sat, string


logger = logging.getLogger(__name__)

# Words that can never be used as variable names
RESERVED_WORDS = frozenset({"if", "then", "else", "while", "do"})

DIGITS = "0123456789"


def is_identifier_start(c: str) -> bool:
    return c.isalpha()


def is_identifier_continue(c: str) -> bool:
    return c.isalnum()


def _skip_whitespace_run(cursor: Cursor) -> ParseResult:
    pos = cursor.pos
    text = cursor.text
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return None, Cursor(text, pos)


skip_whitespace: Parser[None] = Parser(_skip_whitespace_run, consumes=False, name="whitespace")


def token(parser: Parser[T]) -> Parser[T]:
    """Skip whitespace, then run ``parser``."""
    return skip_whitespace.then(parser).named(parser.name)


# Maximal run of identifier characters, no whitespace skipping and no reserved-word check
identifier_run: Parser[str] = sat(is_identifier_start, name="letter").bind(
    lambda head: many(sat(is_identifier_continue, name="alnum")).map(lambda tail: head + "".join(tail))
).named("identifier")


def ctrl(s: str) -> Parser[str]:
    """Punctuation / operator token."""
    return token(string(s))


ident: Parser[str] = token(identifier_run.filter(lambda name: name not in RESERVED_WORDS)).named("ident")

number: Parser[int] = token(
    many1(sat(lambda c: c in DIGITS, name="digit")).map(lambda digits: int("".join(digits)))
).named("number")


def keyword(k: str) -> Parser[str]:
    """
    Reserved word ``k``.

    The whole identifier run is scanned before comparing, so ``k`` followed
    by more identifier characters (``ifx``) does not match.
    """
    if not k or not is_identifier_start(k[0]) or not all(is_identifier_continue(c) for c in k):
        raise ValueError(f"keyword() expects an identifier-shaped word, got {k!r}")
    return token(identifier_run.filter(lambda word: word == k)).named(k)


def sep_by1(parser: Parser[T], sep: Parser[Any]) -> Parser[List[T]]:
    return parser.bind(lambda first: many(sep.then(parser)).map(lambda rest: [first] + rest))


def sep_by(parser: Parser[T], sep: Parser[Any]) -> Parser[List[T]]:
    """Zero or more ``parser`` separated by ``sep``; separators are dropped."""
    return (sep_by1(parser, sep) | pure([])).named(f"sep_by({parser.name})")


def parse_prefix(parser: Parser[T], text: str) -> Optional[Tuple[T, Cursor]]:
    """
    Run ``parser`` from the start of ``text`` and skip trailing whitespace.

    Returns the value together with the cursor where parsing stopped, so
    callers can tell a full match from a prefix match.

    Raises:
        RecursionError: if the input nests deeper than the interpreter
            stack allows (each nesting level costs a fixed number of frames)
    """
    return parser.skip(skip_whitespace).run(Cursor(text))


def parse_all(parser: Parser[T], text: str) -> Optional[T]:
    """
    Parse the whole of ``text``.

    Returns ``None`` on failure, on leftover input, and on input nested too
    deeply to parse within the interpreter's recursion limit.
    """
    try:
        result = parse_prefix(parser, text)
    except RecursionError:
        logger.debug("%s: nesting too deep", parser.name)
        return None
    if result is None:
        logger.debug("%s: no parse", parser.name)
        return None
    value, rest = result
    if not rest.at_end:
        logger.debug("%s: unconsumed input at offset %d", parser.name, rest.pos)
        return None
    logger.debug("%s: parsed %d characters", parser.name, rest.pos)
    return value
