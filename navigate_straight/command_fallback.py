"""Fallback that runs a host command by name."""

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_COMMAND = "Edit.GoToDefinition"


class CommandFallback:
    """Runs the host's go to definition through its command dispatcher."""

    def __init__(
        self,
        execute_command: Callable[[str], object],
        command: str = DEFAULT_FALLBACK_COMMAND,
    ) -> None:
        """Initialize with the host dispatcher and the command to run."""
        self.execute_command = execute_command
        self.command = command

    def go_to_definition(self) -> None:
        """Dispatch the configured command."""
        logger.info("Running fallback command %s", self.command)
        self.execute_command(self.command)
