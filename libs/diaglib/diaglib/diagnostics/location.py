"""Source location tracking for diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourcePos:
    """A single position in a source file."""

    line: int  # 1-indexed
    column: int  # 1-indexed
    byte: int  # 0-indexed


@dataclass(frozen=True)
class SourceRange:
    """A contiguous range of a source file, start inclusive, end exclusive."""

    filename: str
    start: SourcePos
    end: SourcePos

    def __str__(self) -> str:
        if self.start == self.end:
            return f"{self.filename}:{self.start.line}:{self.start.column}"
        return (
            f"{self.filename}:{self.start.line}:{self.start.column}"
            f"-{self.end.line}:{self.end.column}"
        )


@dataclass(frozen=True)
class Source:
    """Where a diagnostic applies.

    ``subject`` is the range the diagnostic is about. ``context``, if set, is a
    wider range enclosing it, used only to frame the subject when displayed.
    """

    subject: SourceRange | None = None
    context: SourceRange | None = None
