"""Logic for choosing the single declaration a navigation should jump to.

Rules are evaluated in a fixed order:

1. No locations: fall back.
2. Caret on a declaration: with exactly two declaring files, toggle to the
   first location in the other file. Otherwise several locations fall back to
   the host picker, and a lone location falls through to rule 3.
3. Ignore generated files. Exactly one user-authored location is the target;
   none or several fall back.
"""

import logging
from collections.abc import Sequence

from navigate_straight.caret_context import CaretContext
from navigate_straight.declaration_location import DeclarationLocation
from navigate_straight.distinct_files import distinct_files
from navigate_straight.is_same_path import is_same_path
from navigate_straight.resolution_result import (
    AMBIGUOUS_USER_AUTHORED,
    MULTIPLE_DECLARATIONS,
    NO_LOCATIONS,
    NO_USER_AUTHORED,
    SINGLE_USER_AUTHORED,
    TOGGLE,
    Fallback,
    NavigateTo,
    ResolutionResult,
)

logger = logging.getLogger(__name__)


def resolve(
    locations: Sequence[DeclarationLocation], caret: CaretContext
) -> ResolutionResult:
    """Return the location to navigate to, or a Fallback."""
    # 1. Nothing in source
    if not locations:
        return _fallback(NO_LOCATIONS)

    # 2. Caret on a declaration
    if caret.on_declaration:
        target = toggle_target(locations, caret.file_path)
        if target is not None:
            return _navigate(target, TOGGLE)
        if len(locations) > 1:
            return _fallback(MULTIPLE_DECLARATIONS)

    # 3. Prefer user-authored files
    non_generated = [loc for loc in locations if not loc.is_generated]
    if not non_generated:
        return _fallback(NO_USER_AUTHORED)
    if len(non_generated) == 1:
        return _navigate(non_generated[0], SINGLE_USER_AUTHORED)
    return _fallback(AMBIGUOUS_USER_AUTHORED)


def toggle_target(
    locations: Sequence[DeclarationLocation], current_path: str
) -> DeclarationLocation | None:
    """Return the first location in the other file of a two-file symbol."""
    files = distinct_files(locations)
    if len(files) != 2:
        logger.debug("No toggle: declared in %d file(s)", len(files))
        return None
    return next(
        (loc for loc in locations if not is_same_path(loc.file_path, current_path)),
        None,
    )


def _navigate(location: DeclarationLocation, rule: str) -> NavigateTo:
    logger.debug("Navigate to %s:%s via %s", location.file_path, location.start, rule)
    return NavigateTo(location, rule)


def _fallback(reason: str) -> Fallback:
    logger.debug("Fallback: %s", reason)
    return Fallback(reason)
