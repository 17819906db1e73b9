"""
Seekr Configuration - Settings loading and the read-only search config.

Settings are read from a TOML file and merged over built-in defaults.
The merged dictionary is turned into a SearchConfig, which the router and
the intent classifier treat as read-only.

Example settings.toml:
    [search]
    max_results = 8
    enable_files = false

    [aliases]
    work = ["https://mail.example.com", "code ~/work"]
"""

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from loguru import logger

HOME = Path.home()

DEFAULT_SETTINGS: Dict[str, Any] = {
    "search": {
        "max_results": 8,
        "enable_apps": True,
        "enable_files": True,
        "enable_bookmarks": True,
        "enable_web_search": True,
        "enable_sys_commands": True,
        "enable_calculator": True,
        "enable_clipboard": True,
        "enable_commands": True,
        "enable_weather": True,
        "min_bookmark_query": 2,
        "min_file_query": 3,
        "fuzzy_threshold": 0.3,
    },
    "web_search": {
        "prefixes": ["g ", "? "],
        "url": "https://www.google.com/search?q={query}",
    },
    "aliases": {},
    "paths": {
        "app_dirs": [
            "/usr/share/applications",
            str(HOME / ".local" / "share" / "applications"),
        ],
        "bookmark_files": [
            str(HOME / ".config" / "google-chrome" / "Default" / "Bookmarks"),
            str(HOME / ".config" / "BraveSoftware" / "Brave-Browser" / "Default" / "Bookmarks"),
            str(HOME / ".config" / "chromium" / "Default" / "Bookmarks"),
        ],
        "file_dirs": [
            str(HOME / "Desktop"),
            str(HOME / "Documents"),
            str(HOME / "Downloads"),
        ],
    },
    "network": {
        "exchange_rate_url": "https://open.er-api.com/v6/latest/USD",
        "exchange_rate_ttl": 3600,
        "weather_url": "https://wttr.in/{location}?format=j1",
        "weather_timeout": 3.0,
    },
}


@dataclass(frozen=True)
class SearchConfig:
    """Feature flags, limits and paths consumed by the query router."""

    max_results: int = 8
    enable_apps: bool = True
    enable_files: bool = True
    enable_bookmarks: bool = True
    enable_web_search: bool = True
    enable_sys_commands: bool = True
    enable_calculator: bool = True
    enable_clipboard: bool = True
    enable_commands: bool = True
    enable_weather: bool = True
    min_bookmark_query: int = 2
    min_file_query: int = 3
    fuzzy_threshold: float = 0.3
    web_search_prefixes: tuple = ("g ", "? ")
    web_search_url: str = "https://www.google.com/search?q={query}"
    aliases: Dict[str, tuple] = field(default_factory=dict)
    app_dirs: tuple = ()
    bookmark_files: tuple = ()
    file_dirs: tuple = ()
    exchange_rate_url: str = "https://open.er-api.com/v6/latest/USD"
    exchange_rate_ttl: float = 3600.0
    weather_url: str = "https://wttr.in/{location}?format=j1"
    weather_timeout: float = 3.0

    def __post_init__(self):
        object.__setattr__(self, "aliases", load_aliases(self.aliases))

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> "SearchConfig":
        """
        Build a config from a merged settings dictionary.

        Args:
            settings: Output of load_settings() (or any dict of the same shape)

        Returns:
            SearchConfig with missing sections filled from DEFAULT_SETTINGS
        """
        merged = _deep_merge(DEFAULT_SETTINGS, settings)
        search = merged["search"]
        web = merged["web_search"]
        paths = merged["paths"]
        network = merged["network"]

        return cls(
            max_results=int(search["max_results"]),
            enable_apps=bool(search["enable_apps"]),
            enable_files=bool(search["enable_files"]),
            enable_bookmarks=bool(search["enable_bookmarks"]),
            enable_web_search=bool(search["enable_web_search"]),
            enable_sys_commands=bool(search["enable_sys_commands"]),
            enable_calculator=bool(search["enable_calculator"]),
            enable_clipboard=bool(search["enable_clipboard"]),
            enable_commands=bool(search["enable_commands"]),
            enable_weather=bool(search["enable_weather"]),
            min_bookmark_query=int(search["min_bookmark_query"]),
            min_file_query=int(search["min_file_query"]),
            fuzzy_threshold=float(search["fuzzy_threshold"]),
            web_search_prefixes=tuple(web["prefixes"]),
            web_search_url=web["url"],
            aliases=load_aliases(merged["aliases"]),
            app_dirs=tuple(paths["app_dirs"]),
            bookmark_files=tuple(paths["bookmark_files"]),
            file_dirs=tuple(paths["file_dirs"]),
            exchange_rate_url=network["exchange_rate_url"],
            exchange_rate_ttl=float(network["exchange_rate_ttl"]),
            weather_url=network["weather_url"],
            weather_timeout=float(network["weather_timeout"]),
        )


def load_aliases(raw: Dict[str, Any]) -> Dict[str, tuple]:
    """
    Validate the [aliases] table.

    Keys are lower-cased so lookups can be case-insensitive. A bare string is
    accepted as a single command; anything that is not a string or a list of
    strings is skipped.
    """
    aliases = {}
    for key, value in raw.items():
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)) or not value or not all(isinstance(c, str) for c in value):
            logger.warning(f"Skipping malformed alias '{key}': expected a list of commands")
            continue
        aliases[str(key).lower()] = tuple(value)
    return aliases


def settings_path() -> Path:
    """Location of settings.toml (XDG config dir)."""
    config_home = os.environ.get("XDG_CONFIG_HOME") or str(HOME / ".config")
    return Path(config_home) / "seekr" / "settings.toml"


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from TOML file.

    Args:
        path: Settings file to read; defaults to settings_path()

    Returns:
        Dictionary containing settings with defaults applied
    """
    path = path or settings_path()

    if not path.exists():
        logger.info(f"Settings file not found at {path}, using defaults")
        return copy.deepcopy(DEFAULT_SETTINGS)

    try:
        loaded = toml.load(path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning(f"Could not load settings from {path}: {e}")
        return copy.deepcopy(DEFAULT_SETTINGS)

    return _deep_merge(copy.deepcopy(DEFAULT_SETTINGS), loaded)


def load_config(path: Optional[Path] = None) -> SearchConfig:
    """Shortcut for SearchConfig.from_settings(load_settings(path))."""
    return SearchConfig.from_settings(load_settings(path))


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
