"""
App Search Handler - Installed applications from desktop entries.

Scans the application directories on every query (no index). Each
*.desktop file contributes its first Name=, Icon= and Comment= lines;
entries without a Name are ignored. With a query, candidates are ranked by
the approximate matcher over name and description.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from seekr.search import fuzzy
from seekr.search.handlers.base import SearchSource
from seekr.search.results import AppResult, ResultItem

NAME_PATTERN = re.compile(r"^Name=(.+)$", re.MULTILINE)
ICON_PATTERN = re.compile(r"^Icon=(.+)$", re.MULTILINE)
COMMENT_PATTERN = re.compile(r"^Comment=(.+)$", re.MULTILINE)

DEFAULT_ICON = "application"


@dataclass(frozen=True)
class AppEntry:
    name: str
    path: str
    icon: str = DEFAULT_ICON
    description: str = ""


def _first(pattern: re.Pattern, content: str) -> Optional[str]:
    match = pattern.search(content)
    return match.group(1).strip() if match else None


def parse_desktop_entry(path: Path) -> Optional[AppEntry]:
    """
    Read one desktop entry file.

    Returns:
        AppEntry, or None if the file is unreadable or has no Name
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Skipping unreadable desktop entry {path}: {e}")
        return None

    name = _first(NAME_PATTERN, content)
    if not name:
        return None

    return AppEntry(
        name=name,
        path=str(path),
        icon=_first(ICON_PATTERN, content) or DEFAULT_ICON,
        description=_first(COMMENT_PATTERN, content) or "",
    )


class AppSearchHandler(SearchSource):
    """Search installed applications with fuzzy matching."""

    name = "app_search"

    def __init__(self, app_dirs=(), fuzzy_threshold: float = 0.3, enabled: bool = True):
        super().__init__(enabled=enabled)
        self.app_dirs = [Path(d) for d in app_dirs]
        self.fuzzy_threshold = fuzzy_threshold

    def scan(self) -> list[AppEntry]:
        """Collect every parsable desktop entry, directory by directory."""
        apps = []
        for directory in self.app_dirs:
            try:
                files = sorted(directory.iterdir())
            except OSError as e:
                logger.debug(f"Skipping application directory {directory}: {e}")
                continue

            for path in files:
                if path.suffix != ".desktop":
                    continue
                entry = parse_desktop_entry(path)
                if entry:
                    apps.append(entry)
        return apps

    def search(self, query: str) -> list[ResultItem]:
        apps = fuzzy.match(self.scan(), query, threshold=self.fuzzy_threshold)
        return self._apps_to_results(apps)

    def _apps_to_results(self, apps: list[AppEntry]) -> list[ResultItem]:
        """Convert AppEntry objects to ResultItem list."""
        return [
            AppResult(
                title=app.name,
                description=app.description,
                executable=app.path,
                icon=app.icon,
            )
            for app in apps
        ]
