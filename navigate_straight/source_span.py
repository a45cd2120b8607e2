"""Logic for turning host symbol locations into declaration locations."""

from collections.abc import Iterable
from dataclasses import dataclass

from navigate_straight.declaration_location import DeclarationLocation
from navigate_straight.is_generated_file import GENERATED_SUFFIXES
from navigate_straight.line_position import LinePosition


@dataclass(frozen=True)
class SourceSpan:
    """A symbol location as reported by the host's symbol lookup."""

    file_path: str | None
    start: LinePosition
    end: LinePosition
    in_source: bool = True  # False for metadata-only locations


def to_declaration_locations(
    spans: Iterable[SourceSpan], suffixes: Iterable[str] = GENERATED_SUFFIXES
) -> list[DeclarationLocation]:
    """Keep spans backed by source text and classify their files."""
    suffixes = tuple(suffixes)
    return [
        DeclarationLocation.in_file(span.file_path, span.start, span.end, suffixes)
        for span in spans
        if span.in_source and span.file_path
    ]
