"""
Core parser combinators.

A ``Parser`` wraps a function ``Cursor -> Optional[(value, Cursor)]``.
``None`` is the only failure signal: there is no error message and no
position attached to it. Because cursors are immutable, a failed branch
leaves nothing behind and alternation simply reruns from the cursor it
was given.

Every parser also carries a ``consumes`` flag: ``True`` when each success
is guaranteed to eat at least one character. ``many`` refuses to wrap a
parser without that guarantee, which rules out zero-width loops when the
grammar is built rather than when it runs.

Author: xwest
"""

from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

from .cursor import Cursor


T = TypeVar("T")
U = TypeVar("U")

ParseResult = Optional[Tuple[Any, Cursor]]


class Parser(Generic[T]):
    """
    A composable parser producing values of type ``T``.

    Args:
        run: Function from a cursor to ``(value, rest)`` or ``None``
        consumes: Whether every success is known to consume input
        name: Label used in ``repr`` only
    """

    def __init__(self, run: Callable[[Cursor], ParseResult], consumes: bool = False,
                 name: Optional[str] = None):
        self._run = run
        self.consumes = consumes
        self.name = name or "parser"

    def run(self, cursor: Cursor) -> ParseResult:
        return self._run(cursor)

    def parse(self, text: str) -> ParseResult:
        """Run against ``text`` from position 0 without requiring full consumption."""
        return self._run(Cursor(text))

    # ------------------------------------------------------------------
    # Sequencing
    # ------------------------------------------------------------------

    def bind(self, f: Callable[[T], "Parser[U]"], consumes: Optional[bool] = None) -> "Parser[U]":
        """
        Run this parser, then the parser ``f`` builds from its result.

        The continuation is only known at run time, so the combined parser
        is assumed to consume exactly when this one does unless the caller
        says otherwise.
        """
        first = self._run

        def run(cursor: Cursor) -> ParseResult:
            result = first(cursor)
            if result is None:
                return None
            value, rest = result
            return f(value).run(rest)

        if consumes is None:
            consumes = self.consumes
        return Parser(run, consumes=consumes, name=f"{self.name} >>= ...")

    def then(self, other: "Parser[U]") -> "Parser[U]":
        """Sequence two parsers, keeping the right result."""
        return self.bind(lambda _: other, consumes=self.consumes or other.consumes)

    def skip(self, other: "Parser[Any]") -> "Parser[T]":
        """Sequence two parsers, keeping the left result."""
        return self.bind(lambda value: other.map(lambda _: value),
                         consumes=self.consumes or other.consumes)

    def map(self, f: Callable[[T], U]) -> "Parser[U]":
        first = self._run

        def run(cursor: Cursor) -> ParseResult:
            result = first(cursor)
            if result is None:
                return None
            value, rest = result
            return f(value), rest

        return Parser(run, consumes=self.consumes, name=self.name)

    def filter(self, predicate: Callable[[T], bool]) -> "Parser[T]":
        """Fail whenever the parsed value does not satisfy ``predicate``."""
        first = self._run

        def run(cursor: Cursor) -> ParseResult:
            result = first(cursor)
            if result is None or not predicate(result[0]):
                return None
            return result

        return Parser(run, consumes=self.consumes, name=self.name)

    # ------------------------------------------------------------------
    # Alternation and repetition
    # ------------------------------------------------------------------

    def __or__(self, other: "Parser[T]") -> "Parser[T]":
        """Left-biased choice: ``other`` runs on the original cursor only if this fails."""
        left, right = self._run, other._run

        def run(cursor: Cursor) -> ParseResult:
            result = left(cursor)
            if result is not None:
                return result
            return right(cursor)

        return Parser(run, consumes=self.consumes and other.consumes,
                      name=f"{self.name} | {other.name}")

    def many(self) -> "Parser[List[T]]":
        return many(self)

    def named(self, name: str) -> "Parser[T]":
        return Parser(self._run, consumes=self.consumes, name=name)

    def __repr__(self) -> str:
        return f"Parser({self.name!r}, consumes={self.consumes})"


# ----------------------------------------------------------------------
# Primitive parsers
# ----------------------------------------------------------------------

def pure(value: T) -> Parser[T]:
    """Succeed with ``value`` without consuming anything."""
    return Parser(lambda cursor: (value, cursor), consumes=False, name=f"pure({value!r})")


def _fail_run(cursor: Cursor) -> ParseResult:
    return None


fail: Parser[Any] = Parser(_fail_run, consumes=True, name="fail")


def _item_run(cursor: Cursor) -> ParseResult:
    if cursor.at_end:
        return None
    return cursor.peek(), cursor.advance()


item: Parser[str] = Parser(_item_run, consumes=True, name="item")


def sat(predicate: Callable[[str], bool], name: str = "sat") -> Parser[str]:
    """Consume one character if it satisfies ``predicate``."""
    def run(cursor: Cursor) -> ParseResult:
        char = cursor.peek()
        if char and predicate(char):
            return char, cursor.advance()
        return None

    return Parser(run, consumes=True, name=name)


def char(c: str) -> Parser[str]:
    if len(c) != 1:
        raise ValueError(f"char() expects a single character, got {c!r}")
    return sat(lambda x: x == c, name=repr(c))


def string(s: str) -> Parser[str]:
    """Match the literal ``s`` as a unit."""
    def run(cursor: Cursor) -> ParseResult:
        if cursor.startswith(s):
            return s, cursor.advance(len(s))
        return None

    return Parser(run, consumes=bool(s), name=repr(s))


def lazy(thunk: Callable[[], Parser[T]], consumes: bool, name: str = "lazy") -> Parser[T]:
    """
    Forward reference to a parser defined later (recursive grammars).

    ``consumes`` cannot be computed without forcing the thunk, so the
    caller declares it.
    """
    cache: List[Parser[T]] = []

    def run(cursor: Cursor) -> ParseResult:
        if not cache:
            cache.append(thunk())
        return cache[0].run(cursor)

    return Parser(run, consumes=consumes, name=name)


def choice(*parsers: Parser[T]) -> Parser[T]:
    """Try ``parsers`` left to right; the first success wins."""
    if not parsers:
        return fail
    combined = parsers[0]
    for parser in parsers[1:]:
        combined = combined | parser
    return combined


def many(parser: Parser[T]) -> Parser[List[T]]:
    """
    Zero or more repetitions of ``parser``; never fails.

    Raises:
        ValueError: if ``parser`` may succeed without consuming input
    """
    if not parser.consumes:
        raise ValueError(f"many() over {parser!r} could loop forever: it may succeed without consuming input")

    step = parser.run

    def run(cursor: Cursor) -> ParseResult:
        values: List[T] = []
        while True:
            result = step(cursor)
            if result is None:
                return values, cursor
            value, rest = result
            if rest.pos <= cursor.pos:
                # Only reachable when a lazy() declaration lied about consuming.
                raise ValueError(f"{parser!r} succeeded without consuming input inside many()")
            values.append(value)
            cursor = rest

    return Parser(run, consumes=False, name=f"many({parser.name})")


def many1(parser: Parser[T]) -> Parser[List[T]]:
    """One or more repetitions of ``parser``."""
    return parser.bind(lambda first: many(parser).map(lambda rest: [first] + rest))
