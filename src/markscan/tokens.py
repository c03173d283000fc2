"""Token and TokenType definitions for the markscan scanners.

Scanners produce an ordered list of Token objects for a downstream parser.
Each Token has a type, the exact lexeme consumed, an interpreted literal,
and the zero-based position where the lexeme starts.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from markscan.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the scanners.

    Organized by category:
    - Whitespace runs (SPACE, BR)
    - Punctuation (COLON)
    - Code blocks (header keys/values and source lines)
    - Plain text (for scanners plugged in through sub-tokenization)

    """

    # Whitespace runs (literal = run length)
    SPACE = auto()  # spaces and tabs
    BR = auto()  # consecutive line breaks

    # Punctuation
    COLON = auto()  # :

    # Code blocks
    CODE_KEY = auto()  # key in "key: value"
    CODE_VALUE = auto()  # value in "key: value"
    CODE_SOURCE = auto()  # one line of literal source

    # Plain text
    TEXT = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by a scanner.

    Attributes:
        type: The token type (from TokenType enum)
        lexeme: The exact substring consumed from the source
        literal: Interpreted value; the lexeme itself unless the scanner
            supplied one (run-length tokens carry an int)
        line: Line of the first character (0-indexed)
        column: Column of the first character (0-indexed)
        offset: Absolute index of the first character in the source
        source_file: Optional source file path for messages

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    lexeme: str
    literal: object
    line: int
    column: int
    offset: int = 0
    source_file: str | None = None

    @property
    def location(self) -> SourceLocation:
        """Source location of the token's first character."""
        return SourceLocation(
            line=self.line,
            column=self.column,
            offset=self.offset,
            source_file=self.source_file,
        )

    @property
    def end_offset(self) -> int:
        """Absolute index just past the token's last character."""
        return self.offset + len(self.lexeme)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.lexeme
        if len(val) > 20:
            val = val[:17] + "..."
        if self.literal == self.lexeme:
            return f"Token({self.type.name}, {val!r}, {self.line}:{self.column})"
        return (
            f"Token({self.type.name}, {val!r}, {self.literal!r}, "
            f"{self.line}:{self.column})"
        )
