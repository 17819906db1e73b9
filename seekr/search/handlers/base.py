"""
Handler Base - Common interface for branch handlers and fallback sources.

A handler turns a query into a list of results for one branch of the router.
Sources are handlers backed by the filesystem; their scan runs in a worker
thread so the router can await several of them at once.
"""

import asyncio
from abc import ABC, abstractmethod

from seekr.search.results import ResultItem


class SearchHandler(ABC):
    """Base class for all search handlers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Handler identifier."""
        ...

    @abstractmethod
    async def get_results(self, query: str) -> list[ResultItem]:
        """Return results for the query (empty list when nothing applies)."""
        ...


class SearchSource(SearchHandler):
    """
    Handler that scans a local backing store on every call.

    Subclasses implement search() synchronously; get_results() runs it off
    the event loop. Disabled sources and queries shorter than
    min_query_length return nothing without touching the disk.
    """

    def __init__(self, enabled: bool = True, min_query_length: int = 0):
        self.enabled = enabled
        self.min_query_length = min_query_length

    def accepts(self, query: str) -> bool:
        return self.enabled and len(query) >= self.min_query_length

    async def get_results(self, query: str) -> list[ResultItem]:
        if not self.accepts(query):
            return []
        return await asyncio.to_thread(self.search, query)

    @abstractmethod
    def search(self, query: str) -> list[ResultItem]:
        """Scan the backing store and return matching results."""
        ...
