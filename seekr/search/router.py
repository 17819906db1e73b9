"""
Query Router - Resolves one line of input into an ordered result list.

Resolution order (see intent.py for the matching rules):

  1. Weather: a successful lookup is returned on its own, uncapped.
  2. Alias: an exact alias hit is added and resolution continues.
  3. One exclusive branch (shell, web, system, calculator, clipboard), or
     the default branch: converter first, then apps + bookmarks + files
     searched concurrently and merged in that fixed order.
  4. The list is truncated to max_results.

A failing branch or source is logged and contributes nothing; resolve()
does not raise for them.
"""

import asyncio
from typing import Optional

from loguru import logger

from seekr.config import SearchConfig
from seekr.search.handlers import (
    AliasHandler,
    AppSearchHandler,
    BookmarkSearchHandler,
    CalculatorHandler,
    ClipboardHandler,
    ConverterHandler,
    FileSearchHandler,
    SearchHandler,
    ShellCommandHandler,
    SystemCommandHandler,
    WeatherHandler,
    WebSearchHandler,
)
from seekr.search.intent import Branch, classify
from seekr.search.results import ResultItem
from seekr.services.clipboard import ClipboardHistory
from seekr.services.exchange_rates import ExchangeRateCache
from seekr.services.weather import WeatherClient
from seekr.utils.icons import get_icon_path

# Per-source caps for the fallback merge, in priority order
FALLBACK_LIMITS = (
    ("app_search", 5),
    ("bookmarks", 3),
    ("files", 3),
)


class QueryRouter:
    """Routes queries to branch handlers and merges fallback sources."""

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        rates: Optional[ExchangeRateCache] = None,
        clipboard: Optional[ClipboardHistory] = None,
        weather: Optional[WeatherClient] = None,
    ):
        self.config = config or SearchConfig()
        self.rates = rates or ExchangeRateCache(
            url=self.config.exchange_rate_url,
            ttl=self.config.exchange_rate_ttl,
        )
        self.clipboard = clipboard if clipboard is not None else ClipboardHistory()

        self.weather = WeatherHandler(
            client=weather or WeatherClient(url=self.config.weather_url),
            timeout=self.config.weather_timeout,
        )
        self.aliases = AliasHandler(self.config.aliases)
        self.converter = ConverterHandler(self.rates)

        self._handlers: dict[Branch, SearchHandler] = {
            Branch.SHELL_COMMAND: ShellCommandHandler(),
            Branch.WEB_SEARCH: WebSearchHandler(
                prefixes=self.config.web_search_prefixes,
                url=self.config.web_search_url,
            ),
            Branch.SYSTEM_COMMAND: SystemCommandHandler(),
            Branch.CALCULATOR: CalculatorHandler(),
            Branch.CLIPBOARD: ClipboardHandler(self.clipboard),
        }

        self._sources: dict[str, SearchHandler] = {
            "app_search": AppSearchHandler(
                app_dirs=self.config.app_dirs,
                fuzzy_threshold=self.config.fuzzy_threshold,
                enabled=self.config.enable_apps,
            ),
            "bookmarks": BookmarkSearchHandler(
                bookmark_files=self.config.bookmark_files,
                enabled=self.config.enable_bookmarks,
                min_query_length=self.config.min_bookmark_query,
            ),
            "files": FileSearchHandler(
                file_dirs=self.config.file_dirs,
                enabled=self.config.enable_files,
                min_query_length=self.config.min_file_query,
            ),
        }

    def register(self, branch: Branch, handler: SearchHandler) -> None:
        """Replace the handler for a branch."""
        self._handlers[branch] = handler

    def register_source(self, name: str, handler: SearchHandler) -> None:
        """Replace one of the fallback sources (app_search, bookmarks, files)."""
        if name not in dict(FALLBACK_LIMITS):
            raise KeyError(f"Unknown fallback source: {name}")
        self._sources[name] = handler

    async def resolve(self, query: str) -> list[ResultItem]:
        """
        Resolve a query into results.

        Args:
            query: The raw input line

        Returns:
            Ordered results; at most config.max_results items unless the
            weather lookup answered, in which case exactly one
        """
        intent = classify(query, self.config)

        if intent.weather_location:
            weather = await self._run(self.weather, query)
            if weather:
                return weather[:1]

        results: list[ResultItem] = []

        if intent.alias_key:
            results.extend(await self._run(self.aliases, query))

        if intent.branch is Branch.DEFAULT:
            results.extend(await self._run(self.converter, query))
            if not results and query:
                results.extend(await self._fan_out(query))
        else:
            results.extend(await self._run(self._handlers[intent.branch], query))

        logger.debug(f"Resolved '{query}' via {intent.branch.value}: {len(results)} results")
        return results[:self.config.max_results]

    def get_icon_path(self, icon_name: Optional[str]) -> Optional[str]:
        """Icon file for an AppResult icon name (presentation only)."""
        return get_icon_path(icon_name)

    async def _run(self, handler: SearchHandler, query: str) -> list[ResultItem]:
        """Run one handler, turning unexpected failures into no results."""
        try:
            return await handler.get_results(query)
        except Exception:
            logger.exception(f"Handler '{handler.name}' failed for '{query}'")
            return []

    async def _fan_out(self, query: str) -> list[ResultItem]:
        """Search all fallback sources concurrently and merge by priority."""
        names = [name for name, _limit in FALLBACK_LIMITS]
        batches = await asyncio.gather(*(self._run(self._sources[name], query) for name in names))

        merged: list[ResultItem] = []
        for (_name, limit), batch in zip(FALLBACK_LIMITS, batches):
            merged.extend(batch[:limit])
        return merged
