"""
Source Location (Span)

Two views of a position in a document: ``TextSpan`` is the half-open
character range used by the syntax tree, ``SourceLocation`` is the
file/line/column form used in diagnostics.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextSpan:
    """
    Half-open character range ``[start, end)``.

    A zero-length span is a caret position. Immutable (frozen) for hashability.
    """
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid span [{self.start}, {self.end})")

    @classmethod
    def at(cls, position: int) -> "TextSpan":
        """Caret span at ``position``."""
        return cls(position, position)

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def contains(self, other: "TextSpan") -> bool:
        """True if ``other`` lies within this span (touching the end counts for carets)."""
        if other.is_empty:
            return self.start <= other.start <= self.end
        return self.start <= other.start and other.end <= self.end

    def __str__(self) -> str:
        return f"[{self.start}..{self.end})"


@dataclass(frozen=True)
class SourceLocation:
    """
    Source location for diagnostics.

    Line and column are 1-based, matching what editors and compilers print.
    ``start``/``end`` are optional character offsets; ``end_line`` and
    ``end_column`` are 0 when unknown.
    """
    file: str
    line: int
    column: int
    start: int = 0
    end: int = 0
    end_line: int = 0
    end_column: int = 0

    @classmethod
    def from_offset(cls, file: str, text: str, offset: int) -> "SourceLocation":
        """Translate a character offset in ``text`` into a 1-based location."""
        offset = max(0, min(offset, len(text)))
        line = text.count("\n", 0, offset) + 1
        line_start = text.rfind("\n", 0, offset) + 1
        return cls(file=file, line=line, column=offset - line_start + 1, start=offset, end=offset)

    def __str__(self) -> str:
        """Format as file:line:column"""
        return f"{self.file}:{self.line}:{self.column}"
