"""Error-path tests.

Invalid cursor movement is the only error a scan raises. Everything else
at the edges of the input is handled through the EOF sentinel.
"""

import pytest

from markscan import tokenize
from markscan.errors import CursorMovementError, MarkscanError
from markscan.lexer import ScannerBase
from markscan.location import SourceLocation
from markscan.tokens import Token, TokenType

# =========================================================================
# CursorMovementError construction and formatting
# =========================================================================


class TestCursorMovementErrorFormatting:
    def test_message_without_location(self) -> None:
        err = CursorMovementError(-1, 4)
        assert str(err) == "Cannot move cursor backwards (offset -1 at index 4)"
        assert err.offset == -1
        assert err.cursor_index == 4
        assert err.location is None

    def test_message_with_location(self) -> None:
        err = CursorMovementError(-2, 7, SourceLocation(1, 2, 7, "a.md"))
        assert str(err).startswith("a.md:2:3 ")

    def test_hierarchy(self) -> None:
        err = CursorMovementError(-1, 0)
        assert isinstance(err, MarkscanError)
        assert isinstance(err, ValueError)


# =========================================================================
# Raised by scanners
# =========================================================================


class Rewinder(ScannerBase):
    """Scanner with a bug: it tries to step back after emitting."""

    def tokenize(self) -> list[Token]:
        self.advance()
        self.add(TokenType.TEXT)
        self.move_cursor(-1)
        return self.tokens


class TestNegativeMovement:
    def test_scan_aborts(self) -> None:
        with pytest.raises(CursorMovementError) as exc_info:
            Rewinder("ab\ncd").tokenize()
        assert exc_info.value.cursor_index == 2
        assert exc_info.value.location is not None
        assert exc_info.value.location.column == 2

    def test_not_swallowed_by_tokenize(self) -> None:
        with pytest.raises(CursorMovementError):
            tokenize("ab", Rewinder)

    def test_catchable_as_value_error(self) -> None:
        with pytest.raises(ValueError, match="backwards"):
            Rewinder("abc").tokenize()

    @pytest.mark.parametrize("offset", [-1, -5, -100])
    def test_never_clamps(self, offset: int) -> None:
        scanner = Rewinder("abcdef")
        scanner.advance().advance()
        with pytest.raises(CursorMovementError):
            scanner.move_cursor(offset)
        assert scanner.cursor_index == 2


# =========================================================================
# Boundary input does not raise
# =========================================================================


class TestBoundaryInputIsNotAnError:
    @pytest.mark.parametrize(
        "source",
        ["", "\n", ":", ": ", "a:", "a: ", "\0", "a: b\0c", " \t ", "\n\n:\n"],
    )
    def test_code_block_edge_input(self, source: str) -> None:
        tokenize(source)
