"""Code-block scanner.

A code block is an optional header of ``key: value`` lines followed by
literal source text:

    title: Hello        <- header (CODE_KEY, COLON, SPACE, CODE_VALUE, BR)
    lang: python        <- header
    print("hello")      <- source (CODE_SOURCE, BR)
    x = {"a": 1}        <- source, even though it contains ": "

A line is a header only if the text before its first colon is non-empty and
the colon is followed by a space. The first line that is not a header ends
the header section for good.
"""

from __future__ import annotations

from markscan.lexer.base import ScannerBase
from markscan.lexer.charsets import BR, EOF, EOL
from markscan.lexer.modes import CodeScanState
from markscan.tokens import Token, TokenType
from markscan.utils.logger import get_logger

logger = get_logger(__name__)


class CodeTokenizer(ScannerBase):
    """Two-state scanner for code blocks.

    Usage:
            >>> tokens = CodeTokenizer("lang: py\\nprint(1)").tokenize()
            >>> [t.type.name for t in tokens]
            ['CODE_KEY', 'COLON', 'SPACE', 'CODE_VALUE', 'BR', 'CODE_SOURCE']

    """

    __slots__ = ("_state", "_header_count")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        super().__init__(source, source_file)
        self._state = CodeScanState.SCANNING_HEADERS
        self._header_count = 0

    @property
    def state(self) -> CodeScanState:
        return self._state

    def tokenize(self) -> list[Token]:
        """Scan the code block and return its tokens (headers, then source)."""
        while self._state is CodeScanState.SCANNING_HEADERS:
            self._scan_key_value()
        self._scan_source()
        return self.tokens

    def _scan_key_value(self) -> None:
        """Scan one header line, or switch to source mode.

        On a miss the characters already advanced over stay queued, so they
        become the start of the first source line.
        """
        limit = self.config.max_header_lines
        if limit is not None and self._header_count >= limit:
            self._enter_source()
            return

        # An empty line (or no line at all) cannot carry a key
        if self.current_is(EOL):
            self._enter_source()
            return

        self.advance_on_line_until(":")

        if not self.next_is(": "):
            self._enter_source()
            return

        self.add(TokenType.CODE_KEY)
        self.add(TokenType.COLON)
        self.scan_spaces()
        if not self.current_is(EOL):
            self.move_cursor_to_end_of_line()
            self.add(TokenType.CODE_VALUE)
        self.scan_brs()
        self._header_count += 1

    def _scan_source(self) -> None:
        """Emit each remaining line as one CODE_SOURCE token."""
        while not self.current_is(EOF):
            if not self.current_is(BR):
                self.move_cursor_to_end_of_line()
                self.add(TokenType.CODE_SOURCE)
            self.scan_brs()

    def _enter_source(self) -> None:
        self._state = CodeScanState.SCANNING_SOURCE
        logger.debug(
            "Code block source starts at line %d after %d header line(s)",
            self.line,
            self._header_count,
        )
