"""
Bookmark Search Handler - Browser bookmarks from Chromium-style profiles.

Each bookmark file is JSON with three roots (bookmark_bar, other, synced),
each a tree of folder and url nodes:
    {"type": "folder", "name": "Dev", "children": [
        {"type": "url", "name": "Docs", "url": "https://docs.python.org"}]}

Matches on name or URL substring (case-insensitive). The same URL found in
several browsers is reported once.
"""

import json
import urllib.parse
from pathlib import Path

from loguru import logger

from seekr.search.handlers.base import SearchSource
from seekr.search.results import BookmarkResult, ResultItem

ROOTS = ("bookmark_bar", "other", "synced")


def _hostname(url: str) -> str:
    """Host part of url for display, or the url itself if it does not parse."""
    try:
        return urllib.parse.urlsplit(url).hostname or url
    except ValueError:
        return url


def collect_bookmarks(node, needle: str, found: list) -> None:
    """Depth-first walk appending matching url nodes to found."""
    if not isinstance(node, dict):
        return

    node_type = node.get("type")
    if node_type == "url":
        name = node.get("name")
        url = node.get("url")
        if not isinstance(name, str) or not isinstance(url, str) or not name or not url:
            return
        if needle in name.lower() or needle in url.lower():
            found.append((name, url))
    elif node_type == "folder":
        for child in node.get("children") or []:
            collect_bookmarks(child, needle, found)


def load_bookmark_file(path: Path, needle: str) -> list[tuple[str, str]]:
    """
    Matching (name, url) pairs from one bookmark file.

    Missing or malformed files yield an empty list.
    """
    if not path.exists():
        return []

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not load bookmarks from {path}: {e}")
        return []

    roots = data.get("roots") if isinstance(data, dict) else None
    if not isinstance(roots, dict):
        return []

    found = []
    for root in ROOTS:
        collect_bookmarks(roots.get(root), needle, found)
    return found


class BookmarkSearchHandler(SearchSource):
    """Substring search over browser bookmark trees."""

    name = "bookmarks"

    def __init__(self, bookmark_files=(), enabled: bool = True, min_query_length: int = 2):
        super().__init__(enabled=enabled, min_query_length=min_query_length)
        self.bookmark_files = [Path(p) for p in bookmark_files]

    def search(self, query: str) -> list[ResultItem]:
        needle = query.lower()
        seen = set()
        results = []

        for path in self.bookmark_files:
            for name, url in load_bookmark_file(path, needle):
                if url in seen:
                    continue
                seen.add(url)
                results.append(BookmarkResult(
                    title=name,
                    description=f"Bookmark • {_hostname(url)}",
                    url=url,
                ))

        return results
