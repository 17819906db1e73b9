"""
System Commands Handler - Fixed power and session actions.

Matches the whole query (case-insensitive) against a bilingual keyword set:
  lock, zár                          → xdg-screensaver lock
  sleep, alvás                       → systemctl suspend
  shutdown, leállítás, kikapcs       → systemctl poweroff
  restart, újraindítás               → systemctl reboot
"""

from seekr.search.handlers.base import SearchHandler
from seekr.search.intent import SYSTEM_COMMANDS
from seekr.search.results import ResultItem, SystemCommandResult


class SystemCommandHandler(SearchHandler):
    """Map a system keyword to its OS action."""

    name = "system_command"

    def __init__(self, commands: dict = None):
        self.commands = commands or SYSTEM_COMMANDS

    async def get_results(self, query: str) -> list[ResultItem]:
        keyword = query.lower()
        if keyword not in self.commands:
            return []

        title, command_line = self.commands[keyword]
        return [SystemCommandResult(
            title=title,
            description=f"System command ({keyword})",
            command_line=command_line,
        )]
