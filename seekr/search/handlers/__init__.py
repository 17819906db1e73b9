"""
Search handlers - One per router branch.

Branch handlers answer a classified query directly; sources (apps,
bookmarks, files) scan the filesystem for the fallback search.
"""

from .aliases import AliasHandler
from .app_search import AppSearchHandler
from .base import SearchHandler, SearchSource
from .bookmarks import BookmarkSearchHandler
from .calculator import CalculatorHandler
from .clipboard import ClipboardHandler
from .converter import ConverterHandler
from .files import FileSearchHandler
from .shell import ShellCommandHandler
from .system_commands import SystemCommandHandler
from .weather import WeatherHandler
from .web_search import WebSearchHandler

__all__ = [
    "AliasHandler",
    "AppSearchHandler",
    "BookmarkSearchHandler",
    "CalculatorHandler",
    "ClipboardHandler",
    "ConverterHandler",
    "FileSearchHandler",
    "SearchHandler",
    "SearchSource",
    "ShellCommandHandler",
    "SystemCommandHandler",
    "WeatherHandler",
    "WebSearchHandler",
]
