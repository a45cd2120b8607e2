"""Data model for the places a symbol is declared."""

from collections.abc import Iterable
from dataclasses import dataclass

from navigate_straight.file_kind import FileKind
from navigate_straight.is_generated_file import GENERATED_SUFFIXES, classify_file
from navigate_straight.line_position import LinePosition


@dataclass(frozen=True)
class DeclarationLocation:
    """One physical place a symbol is declared.

    ``end`` is inclusive of the declaration's syntactic extent.
    """

    file_path: str
    start: LinePosition
    end: LinePosition
    kind: FileKind = FileKind.USER_AUTHORED

    @classmethod
    def in_file(
        cls,
        file_path: str,
        start: LinePosition,
        end: LinePosition,
        suffixes: Iterable[str] = GENERATED_SUFFIXES,
    ) -> "DeclarationLocation":
        """Create a location, classifying the file from its name."""
        return cls(file_path, start, end, classify_file(file_path, suffixes))

    @property
    def is_generated(self) -> bool:
        """Whether the declaring file was emitted by a code generator."""
        return self.kind is FileKind.GENERATED

    def contains(self, position: LinePosition) -> bool:
        """Check if a position lies within the inclusive span."""
        return self.start <= position <= self.end
