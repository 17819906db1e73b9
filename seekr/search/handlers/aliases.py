"""
Alias Handler - User-defined multi-step shortcuts.

Aliases are read from the [aliases] table of settings.toml:
    [aliases]
    work = ["https://mail.example.com", "code ~/work"]
    music = "spotify"

Typing the exact alias key (any case) offers one result that runs every
entry in order: URLs are opened, everything else is executed.
"""

from seekr.config import load_aliases
from seekr.search.handlers.base import SearchHandler
from seekr.search.results import AliasResult, ResultItem


class AliasHandler(SearchHandler):
    """Look the whole query up in the alias table."""

    name = "alias"

    def __init__(self, aliases: dict = None):
        self.aliases = load_aliases(aliases or {})

    async def get_results(self, query: str) -> list[ResultItem]:
        key = query.lower()
        commands = self.aliases.get(key)
        if not commands:
            return []

        return [AliasResult(
            title=f"Alias: {key}",
            description=f"Run {len(commands)} action{'s' if len(commands) != 1 else ''}",
            commands=commands,
        )]
