"""Data models for navigation resolution results."""

from dataclasses import dataclass

from navigate_straight.declaration_location import DeclarationLocation

# NavigateTo rules
TOGGLE = "toggle"
SINGLE_USER_AUTHORED = "single_user_authored"

# Fallback reasons decided by the resolver
NO_LOCATIONS = "no_locations"
MULTIPLE_DECLARATIONS = "multiple_declarations"
NO_USER_AUTHORED = "no_user_authored"
AMBIGUOUS_USER_AUTHORED = "ambiguous_user_authored"

# Fallback reasons decided by the host adapter
NO_ACTIVE_VIEW = "no_active_view"
NO_SYMBOL = "no_symbol"
ERROR = "error"


@dataclass(frozen=True)
class NavigateTo:
    """Jump straight to a single declaration."""

    location: DeclarationLocation
    rule: str

    def __str__(self) -> str:
        """Render as ``NavigateTo file:line:column (rule)``."""
        loc = self.location
        return f"NavigateTo {loc.file_path}:{loc.start} ({self.rule})"


@dataclass(frozen=True)
class Fallback:
    """Defer to the host's generic go to definition behaviour."""

    reason: str

    def __str__(self) -> str:
        """Render as ``Fallback (reason)``."""
        return f"Fallback ({self.reason})"


ResolutionResult = NavigateTo | Fallback
