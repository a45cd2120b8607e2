"""Data model for the caret the navigation starts from."""

from collections.abc import Iterable
from dataclasses import dataclass

from navigate_straight.declaration_location import DeclarationLocation
from navigate_straight.is_caret_on_declaration import is_caret_on_declaration
from navigate_straight.line_position import LinePosition


@dataclass(frozen=True)
class CaretContext:
    """The focused file, the caret position, and whether it is on a declaration."""

    file_path: str
    position: LinePosition
    on_declaration: bool = False


def build_caret_context(
    file_path: str | None,
    position: LinePosition,
    locations: Iterable[DeclarationLocation],
) -> CaretContext:
    """Create a CaretContext, deriving on_declaration from the locations."""
    path = file_path or ""
    return CaretContext(
        file_path=path,
        position=position,
        on_declaration=is_caret_on_declaration(locations, path, position),
    )
