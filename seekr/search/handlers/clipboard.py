"""
Clipboard Handler - Show recent clipboard history for "clip".

Each entry becomes a result whose title is the first 50 characters of the
copied text; activating it copies the full text back.
"""

from typing import Optional

from seekr.search.handlers.base import SearchHandler
from seekr.search.results import ClipboardResult, ResultItem
from seekr.services.clipboard import ClipboardHistory

TITLE_LENGTH = 50


class ClipboardHandler(SearchHandler):
    """List clipboard history, newest first."""

    name = "clipboard"

    def __init__(self, history: Optional[ClipboardHistory] = None):
        self.history = history if history is not None else ClipboardHistory()

    async def get_results(self, query: str) -> list[ResultItem]:
        return [
            ClipboardResult(
                title=entry.text[:TITLE_LENGTH],
                description="Clipboard item",
                value=entry.text,
            )
            for entry in self.history.snapshot()
        ]
