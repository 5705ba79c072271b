"""
Input cursor for the whilelang parser combinators.

A cursor is an immutable view over the not-yet-consumed part of the source
text. Combinators never mutate a cursor; consuming input produces a new one.
Backtracking is therefore just "keep using the old cursor".

Author: xwest
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Used for error reporting only; the combinators themselves never look at it.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Cursor:
    """Immutable position inside a piece of source text."""
    text: str
    pos: int = 0

    def __post_init__(self):
        if not 0 <= self.pos <= len(self.text):
            raise ValueError(f"cursor position {self.pos} outside input of length {len(self.text)}")

    @property
    def remaining(self) -> str:
        """The unconsumed input."""
        return self.text[self.pos:]

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Next character, or the empty string at end of input."""
        return self.text[self.pos:self.pos + 1]

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def advance(self, count: int = 1) -> "Cursor":
        """Return a new cursor ``count`` characters further on."""
        return Cursor(self.text, self.pos + count)

    def location(self, filename: str = "<string>") -> SourceLocation:
        """Line/column of the cursor (both 1-based)."""
        consumed = self.text[:self.pos]
        line = consumed.count("\n") + 1
        column = self.pos - (consumed.rfind("\n") + 1) + 1
        return SourceLocation(filename, line, column, self.pos)

    def __repr__(self) -> str:
        preview = self.remaining[:20]
        return f"Cursor(pos={self.pos}, remaining={preview!r})"
