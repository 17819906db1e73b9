"""
Shell Command Handler - Run an arbitrary command line typed after '>'.

Usage: >htop, >systemctl --user restart pipewire
"""

from seekr.search.handlers.base import SearchHandler
from seekr.search.intent import SHELL_PREFIX
from seekr.search.results import CommandResult, ResultItem


class ShellCommandHandler(SearchHandler):
    """Offer the text after '>' as a command to execute."""

    name = "shell_command"

    async def get_results(self, query: str) -> list[ResultItem]:
        command = query[len(SHELL_PREFIX):].strip() if query.startswith(SHELL_PREFIX) else ""
        if not command:
            return []

        return [CommandResult(
            title=f"Run: {command}",
            description="Terminal command",
            command_line=command,
        )]
