"""Cursor-based scanning engine shared by all markscan scanners.

A scanner walks a source string one character at a time. Characters the
cursor has passed over but that have not yet been emitted are *queued*;
``add()`` folds the queued window (up to and including the character under
the cursor) into one token and steps past it.

    abcdefghij
    ^  ^ cursor
    queued_index       queued chars = "abcd", peek() = "e"

Every read past the end of the source returns the EOF sentinel instead of
raising, so lookahead is total and loops terminate by comparing against EOF.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import replace
from typing import Protocol

from markscan.config import ScanConfig, get_scan_config
from markscan.errors import CursorMovementError
from markscan.lexer.charsets import BR, EOF, EOL, SPACE, Match, flatten_matches
from markscan.location import SourceLocation
from markscan.tokens import Token, TokenType
from markscan.utils.logger import get_logger

logger = get_logger(__name__)


class Tokenizer(Protocol):
    """Anything that turns its source into an ordered token list."""

    def tokenize(self) -> list[Token]:
        """Scan the whole source and return the tokens in source order."""
        ...


# A scanner class is itself a valid factory.
TokenizerFactory = Callable[[str], Tokenizer]


class ScannerBase(ABC):
    """Abstract scanner providing the cursor and emission primitives.

    Subclasses implement ``tokenize()`` on top of the primitives below and
    return ``self.tokens``.

    Attributes:
        source: The input string (never modified)
        source_file: Optional file path stamped on emitted tokens
        char: Character under the cursor, or EOF
        cursor_index: Index of the character under the cursor
        queued_index: Start of the queued (unemitted) window
        tokens: Emitted tokens, append-only
        line: Line of the next token (0-indexed)
        column: Column of the next token (0-indexed)
        config: Scan configuration captured at construction

    """

    __slots__ = (
        "source",
        "source_file",
        "char",
        "cursor_index",
        "queued_index",
        "tokens",
        "line",
        "column",
        "config",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        self.source = source
        self.source_file = source_file
        self.char = ""
        self.queued_index = 0
        self.cursor_index = 0
        self.tokens: list[Token] = []
        self.line = 0
        self.column = 0
        self.config: ScanConfig = get_scan_config()
        self.move_cursor(0)

    @abstractmethod
    def tokenize(self) -> list[Token]:
        """Tokenize the source string."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.source

    # =========================================================================
    # Character access
    # =========================================================================

    def char_at(self, index: int, default: str = EOF) -> str:
        """Return the character at index, or default when out of bounds."""
        if 0 <= index < len(self.source):
            return self.source[index]
        return default or EOF

    def chars(self, length: int) -> str:
        """Return up to ``length`` characters starting at the cursor.

        Returns EOF when the cursor is at or past the end of the source.
        """
        return self.source[self.cursor_index : self.cursor_index + length] or EOF

    def peek(self, length: int = 1) -> str:
        """Return the ``length`` characters after the cursor, without consuming.

        Returns EOF if the window would run past the end of the source.
        """
        start = self.cursor_index + 1
        if start + length > len(self.source):
            return EOF
        return self.source[start : start + length]

    def next_is(self, *matches: Match) -> bool:
        """Return True if the characters after the cursor equal any match.

        Each candidate's own length sets the lookahead window.
        """
        return any(self.peek(len(match)) == match for match in flatten_matches(matches))

    def current_is(self, *matches: Match) -> bool:
        """Return True if the characters starting at the cursor equal any match."""
        return any(self.chars(len(match)) == match for match in flatten_matches(matches))

    # =========================================================================
    # Cursor movement
    # =========================================================================

    def move_cursor(self, offset: int) -> ScannerBase:
        """Move the cursor forward by ``offset`` characters.

        Moving past the end is legal; later reads return EOF.

        Raises:
            CursorMovementError: If offset is negative.
        """
        if offset < 0:
            raise CursorMovementError(offset, self.cursor_index, self._cursor_location())

        self.cursor_index += offset
        self.char = self.char_at(self.cursor_index, EOF)
        return self

    def advance(self) -> ScannerBase:
        """Move the cursor forward one character."""
        return self.move_cursor(1)

    def advance_until(self, *matches: Match) -> None:
        """Advance one character at a time until ``next_is(*matches)``.

        Never stops on its own: include EOF among the matches (or use
        ``advance_on_line_until``) so the loop ends at end of input.
        """
        candidates = flatten_matches(matches)
        while not self.next_is(candidates):
            self.advance()

    def advance_on_line_until(self, *matches: Match) -> None:
        """Advance until the next characters match, a line break, or EOF."""
        self.advance_until(*matches, EOL)

    def move_cursor_to_end_of_line(self) -> None:
        """Advance to the last character before the next line break or EOF."""
        self.advance_until(EOL)

    # =========================================================================
    # Queued characters and emission
    # =========================================================================

    def queued_chars(self) -> str:
        """Return the characters from queued_index through the cursor (inclusive)."""
        return self.source[self.queued_index : self.cursor_index + 1]

    def clear_queued_chars(self) -> str:
        """Drop the queued window and step the cursor past it.

        Returns:
            The characters that were queued.
        """
        queued = self.queued_chars()
        self.cursor_index += 1
        self.queued_index = self.cursor_index
        self.char = self.char_at(self.cursor_index, EOF)
        return queued

    def add(self, token_type: TokenType, literal: object = None) -> None:
        """Emit the queued window as one token and step past it.

        Args:
            token_type: The type of token to add.
            literal: Interpreted value of the token. Defaults to the lexeme.

        Example:
            self.add(TokenType.CODE_KEY)
            self.add(TokenType.SPACE, 4)
        """
        lexeme = self.queued_chars()
        self.tokens.append(
            Token(
                type=token_type,
                lexeme=lexeme,
                literal=lexeme if literal is None else literal,
                line=self.line,
                column=self.column,
                offset=self.queued_index,
                source_file=self.source_file,
            )
        )
        self.column += len(lexeme)
        self.clear_queued_chars()

    # =========================================================================
    # Run-length scanning
    # =========================================================================

    def scan_repeated_char(self, char: Match, token_type: TokenType) -> int:
        """Emit a maximal run of ``char`` as one token whose literal is its length.

        Does nothing unless the cursor is on ``char``.

        Returns:
            The run length, 0 if nothing was emitted.
        """
        if not self.current_is(char):
            return 0

        count = 1
        while self.next_is(char):
            count += 1
            self.advance()

        self.add(token_type, count)
        return count

    def scan_spaces(self) -> int:
        """Emit a run of spaces and tabs as one SPACE token."""
        return self.scan_repeated_char(SPACE, TokenType.SPACE)

    def scan_brs(self) -> int:
        """Emit a run of line breaks as one BR token and move to the next line."""
        count = self.scan_repeated_char(BR, TokenType.BR)
        if count:
            self.line += count
            self.column = 0
        return count

    # =========================================================================
    # Sub-tokenization
    # =========================================================================

    def tokenize_queued_chars(self, tokenizer: TokenizerFactory) -> None:
        """Tokenize the queued characters with a fresh scanner.

        The sub-scanner sees only the queued text. Its tokens are rebased to
        positions in this scanner's source before being appended, and the
        line/column counters move past the delegated text.

        Args:
            tokenizer: Factory (usually a scanner class) called with the
                queued text.
        """
        start_offset = self.queued_index
        start_line = self.line
        start_column = self.column
        text = self.clear_queued_chars()

        logger.debug(
            "Delegating %d queued chars at %d:%d to %r",
            len(text),
            start_line,
            start_column,
            tokenizer,
        )

        for token in tokenizer(text).tokenize():
            self.tokens.append(
                replace(
                    token,
                    line=start_line + token.line,
                    column=token.column + (start_column if token.line == 0 else 0),
                    offset=start_offset + token.offset,
                    source_file=token.source_file or self.source_file,
                )
            )

        breaks = text.count(BR)
        if breaks:
            self.line += breaks
            self.column = len(text) - text.rfind(BR) - 1
        else:
            self.column += len(text)

    def _cursor_location(self) -> SourceLocation:
        """Best-effort location of the cursor (column assumes no queued breaks)."""
        return SourceLocation(
            line=self.line,
            column=self.column + max(self.cursor_index - self.queued_index, 0),
            offset=self.cursor_index,
            source_file=self.source_file,
        )
