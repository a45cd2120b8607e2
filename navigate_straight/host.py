"""Capabilities the navigation command needs from its editor host."""

from collections.abc import Sequence
from typing import Protocol

from navigate_straight.line_position import LinePosition
from navigate_straight.source_span import SourceSpan


class EditorView(Protocol):
    """An open document with a caret."""

    file_path: str | None
    text: str  # currently displayed text
    caret_offset: int

    def move_caret(self, position: LinePosition) -> None:
        """Move the caret to a position and scroll it into view."""


class EditorHost(Protocol):
    """Access to the editor's documents."""

    def active_view(self) -> EditorView | None:
        """Return the focused document view, if any."""

    def open_document(self, file_path: str) -> EditorView:
        """Open (or activate) a document and return its view."""


class SymbolLookup(Protocol):
    """Finds the declarations of the symbol at a caret offset.

    Both methods return the original definition's locations, or None when no
    symbol is found.
    """

    def locations_at(
        self, view: EditorView, offset: int
    ) -> Sequence[SourceSpan] | None:
        """Look up the symbol referenced at the offset."""

    def declared_locations_at(
        self, view: EditorView, offset: int
    ) -> Sequence[SourceSpan] | None:
        """Look up the symbol declared by the syntax at the offset."""


class GoToDefinitionFallback(Protocol):
    """The host's generic go to definition, which may show a picker."""

    def go_to_definition(self) -> None:
        """Run the generic go to definition."""
