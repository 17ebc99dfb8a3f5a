"""
Source Location (Span)

Rust Pattern: rustc_span::Span
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """
    Source location (Rust Span pattern).

    Rust Pattern: rustc_span::Span

    Carries both the human-facing position (1-based line/column, inclusive
    start, exclusive end column) and the offset range ``[start, end)`` into the
    source string. Fixes substitute by offset range; rendering uses line/column.
    """
    file: str
    line: int
    column: int
    start: int = 0
    end: int = 0
    end_line: int = 0
    end_column: int = 0

    def __str__(self) -> str:
        """Format as file:line:column (Rust pattern)"""
        return f"{self.file}:{self.line}:{self.column}"

    @property
    def length(self) -> int:
        return max(0, self.end - self.start)
