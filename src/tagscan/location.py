"""Source location tracking for error messages.

Provides SourceLocation for turning a 0-based character offset into the
line and column a human reads.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    lineno and col_offset are 1-indexed; offset is the 0-based position
    in the scanned text.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column offset (1-indexed)
        offset: Absolute offset in the source text
        source_file: Source file path (optional)

    Examples:
        >>> SourceLocation.from_offset("<a>\\n<b>", 5)
        SourceLocation(lineno=2, col_offset=2, offset=5, source_file=None)

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "doc.xml:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(
        cls, text: str, offset: int, source_file: str | None = None
    ) -> SourceLocation:
        """Compute the line and column of offset in text.

        Offsets past the end of the text are clamped to its length, which
        is where end-of-input errors point.
        """
        offset = max(0, min(offset, len(text)))
        lineno = text.count("\n", 0, offset) + 1
        line_start = text.rfind("\n", 0, offset) + 1
        return cls(
            lineno=lineno,
            col_offset=offset - line_start + 1,
            offset=offset,
            source_file=source_file,
        )
