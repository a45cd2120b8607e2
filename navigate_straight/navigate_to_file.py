"""Navigation command that jumps straight to a symbol's declaring file.

- Caret on a declaration of a symbol declared in exactly two files: switch to
  the other file.
- Caret on one of several declarations: defer to the generic picker, which
  lists every part, generated ones included.
- Otherwise ignore generated files and navigate when exactly one
  user-authored declaration remains.
- Anything else, including host errors, runs the generic go to definition.
"""

import logging
from collections.abc import Iterable, Sequence

from navigate_straight.caret_context import build_caret_context
from navigate_straight.clamp_position import clamp_position
from navigate_straight.declaration_location import DeclarationLocation
from navigate_straight.host import (
    EditorHost,
    EditorView,
    GoToDefinitionFallback,
    SymbolLookup,
)
from navigate_straight.is_generated_file import GENERATED_SUFFIXES
from navigate_straight.navigation_resolver import resolve
from navigate_straight.position_from_offset import position_from_offset
from navigate_straight.resolution_result import (
    ERROR,
    NO_ACTIVE_VIEW,
    NO_LOCATIONS,
    NO_SYMBOL,
    Fallback,
    NavigateTo,
    ResolutionResult,
)
from navigate_straight.source_span import SourceSpan, to_declaration_locations

logger = logging.getLogger(__name__)


class NavigateToFile:
    """Host adapter around the navigation resolver."""

    def __init__(
        self,
        host: EditorHost,
        symbols: SymbolLookup,
        fallback: GoToDefinitionFallback,
        generated_suffixes: Iterable[str] = GENERATED_SUFFIXES,
    ) -> None:
        """Initialize the command with its host capabilities."""
        self.host = host
        self.symbols = symbols
        self.fallback = fallback
        self.generated_suffixes = tuple(generated_suffixes)

    def execute(self) -> ResolutionResult:
        """Navigate from the active caret, falling back on any failure."""
        try:
            result = self._resolve_and_navigate()
        except Exception:
            logger.exception("Navigation failed")
            result = Fallback(ERROR)

        if isinstance(result, Fallback):
            logger.info("Falling back to go to definition (%s)", result.reason)
            self.fallback.go_to_definition()
        return result

    def _resolve_and_navigate(self) -> ResolutionResult:
        view = self.host.active_view()
        if view is None:
            return Fallback(NO_ACTIVE_VIEW)

        offset = view.caret_offset
        spans = self._lookup(view, offset)
        if spans is None:
            return Fallback(NO_SYMBOL)

        locations = to_declaration_locations(spans, self.generated_suffixes)
        if not locations:
            return Fallback(NO_LOCATIONS)

        caret = build_caret_context(
            view.file_path, position_from_offset(view.text, offset), locations
        )
        result = resolve(locations, caret)
        if isinstance(result, NavigateTo):
            self.navigate_to(result.location)
        return result

    def _lookup(self, view: EditorView, offset: int) -> Sequence[SourceSpan] | None:
        """Find the symbol at the caret, then the symbol declared there."""
        spans = self.symbols.locations_at(view, offset)
        if spans is None:
            logger.debug("No symbol at offset %d, trying declared symbol", offset)
            spans = self.symbols.declared_locations_at(view, offset)
        return spans

    def navigate_to(self, location: DeclarationLocation) -> None:
        """Open the declaring file and put the caret on the declaration."""
        view = self.host.open_document(location.file_path)
        view.move_caret(clamp_position(view.text, location.start))
