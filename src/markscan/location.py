"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking positions in source text.
Scanners count lines and columns from zero; ``str()`` renders them
1-indexed, the way editors and compilers report positions.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    Attributes:
        line: Line number (0-indexed)
        column: Column (0-indexed)
        offset: Absolute index in the source string
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(line=0, column=4)
            >>> str(loc)
            '1:5'

            >>> loc = SourceLocation(2, 0, 17, "docs/guide.md")
            >>> str(loc)
            'docs/guide.md:3:1'

    """

    line: int
    column: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.md:10:5" or "10:5"
        """
        position = f"{self.line + 1}:{self.column + 1}"
        if self.source_file:
            return f"{self.source_file}:{position}"
        return position
