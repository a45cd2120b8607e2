"""Predicate for checking if the caret sits on one of a symbol's declarations."""

from collections.abc import Iterable

from navigate_straight.declaration_location import DeclarationLocation
from navigate_straight.is_same_path import is_same_path
from navigate_straight.line_position import LinePosition


def is_caret_on_declaration(
    locations: Iterable[DeclarationLocation],
    file_path: str | None,
    position: LinePosition,
) -> bool:
    """Check if the caret is inside any declaration span in its own file.

    Both span boundaries are inclusive.
    """
    return any(
        is_same_path(loc.file_path, file_path) and loc.contains(position)
        for loc in locations
    )
