"""Logic for wiring the navigation command from configuration."""

from collections.abc import Callable
from typing import Any

from navigate_straight.command_fallback import DEFAULT_FALLBACK_COMMAND, CommandFallback
from navigate_straight.host import EditorHost, SymbolLookup
from navigate_straight.load_config import generated_suffixes
from navigate_straight.navigate_to_file import NavigateToFile


def create_navigate_command(
    config: dict[str, Any],
    host: EditorHost,
    symbols: SymbolLookup,
    execute_command: Callable[[str], object],
) -> NavigateToFile:
    """Build a NavigateToFile whose fallback runs the configured host command."""
    command = config.get("fallback", {}).get("command") or DEFAULT_FALLBACK_COMMAND
    return NavigateToFile(
        host,
        symbols,
        CommandFallback(execute_command, command),
        generated_suffixes=generated_suffixes(config),
    )
