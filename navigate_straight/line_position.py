"""Data model for zero-based line/column positions in a document."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class LinePosition:
    """A zero-based (line, column) position.

    Positions order line first, then column, so a span test reads
    ``start <= position <= end``.
    """

    line: int
    column: int = 0

    def __str__(self) -> str:
        """Render as ``line:column``."""
        return f"{self.line}:{self.column}"
