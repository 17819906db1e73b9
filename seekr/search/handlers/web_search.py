"""
Web Search Handler - Open web searches in the default browser.

Triggers on two-character prefixes (configurable in settings.toml):
  g query    → search engine
  ? query    → search engine

The search term is URL-encoded into the engine URL template.
"""

import urllib.parse

from seekr.search.handlers.base import SearchHandler
from seekr.search.results import ResultItem, WebResult

DEFAULT_PREFIXES = ("g ", "? ")
DEFAULT_URL = "https://www.google.com/search?q={query}"


class WebSearchHandler(SearchHandler):
    """Turn a prefixed query into a search-engine URL."""

    name = "web_search"

    def __init__(self, prefixes: tuple = DEFAULT_PREFIXES, url: str = DEFAULT_URL):
        self.prefixes = prefixes
        self.url = url

    async def get_results(self, query: str) -> list[ResultItem]:
        for prefix in self.prefixes:
            if not query.startswith(prefix):
                continue

            search_term = query[len(prefix):].strip()
            if not search_term:
                return []

            url = self.url.format(query=urllib.parse.quote(search_term, safe=""))
            return [WebResult(
                title=f"Search the web: {search_term}",
                description=f"Web search ({urllib.parse.urlsplit(self.url).hostname})",
                url=url,
            )]

        return []
