"""Exception classes for markscan.

End of input is never an error: scanners observe it through the EOF
sentinel. The only failure a scan can raise is an invalid cursor
movement, which signals a bug in the calling scanner rather than bad input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from markscan.location import SourceLocation


class MarkscanError(Exception):
    """Base exception for all markscan errors.

    Subclass this for specific error categories.
    """

    pass


class CursorMovementError(MarkscanError, ValueError):
    """Cursor was asked to move backwards.

    Fatal to the current scan. Scanners only ever move forward, so a
    negative offset means the scanner itself is broken.
    """

    def __init__(
        self,
        offset: int,
        cursor_index: int,
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize cursor movement error.

        Args:
            offset: The rejected (negative) offset
            cursor_index: Cursor position when the move was requested
            location: Location of the cursor, if known
        """
        self.offset = offset
        self.cursor_index = cursor_index
        self.location = location

        prefix = f"{location} " if location is not None else ""
        super().__init__(
            f"{prefix}Cannot move cursor backwards "
            f"(offset {offset} at index {cursor_index})"
        )
