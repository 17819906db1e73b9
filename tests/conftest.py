"""
Shared test fixtures for the Seekr test suite.

Provides temporary desktop entries, bookmark files, user folders and
settings that use real file I/O (no mocking of the filesystem). Network
services are replaced by small fakes.
"""

import asyncio
import json
from pathlib import Path

import pytest
import toml

from seekr.config import SearchConfig
from seekr.search.router import QueryRouter
from seekr.services.clipboard import ClipboardHistory
from seekr.services.exchange_rates import ExchangeRateCache
from seekr.services.weather import WeatherReport


def write_desktop_entry(directory: Path, filename: str, **keys) -> Path:
    """Write a minimal desktop entry with the given Key=Value lines."""
    lines = ["[Desktop Entry]", "Type=Application"]
    lines += [f"{key}={value}" for key, value in keys.items()]
    path = directory / filename
    path.write_text("\n".join(lines) + "\n")
    return path


def bookmark_tree(*children):
    return {"type": "folder", "name": "Bookmarks bar", "children": list(children)}


def url_node(name, url):
    return {"type": "url", "name": name, "url": url}


class FakeWeatherClient:
    """Stands in for WeatherClient; returns a canned report or None."""

    def __init__(self, report=None, delay: float = 0.0):
        self.report = report
        self.delay = delay
        self.calls = []

    async def lookup(self, location):
        self.calls.append(location)
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.report


class OfflineRates(ExchangeRateCache):
    """Rate cache that never reaches the network."""

    def __init__(self, rates=None):
        super().__init__(url="http://rates.invalid")
        self.refreshes = 0
        if rates is not None:
            self.set_snapshot(rates)

    async def refresh(self):
        self.refreshes += 1
        return self.snapshot


@pytest.fixture
def apps_dir(tmp_path):
    """Application directory with a few desktop entries."""
    directory = tmp_path / "applications"
    directory.mkdir()
    write_desktop_entry(directory, "firefox.desktop", Name="Firefox", Icon="firefox", Comment="Web Browser")
    write_desktop_entry(directory, "code.desktop", Name="Visual Studio Code", Icon="code", Comment="Code Editor")
    write_desktop_entry(directory, "nautilus.desktop", Name="Files", Icon="org.gnome.Nautilus", Comment="Access and organize files")
    write_desktop_entry(directory, "gimp.desktop", Name="GNU Image Manipulation Program", Comment="Create images and edit photographs")
    (directory / "notes.txt").write_text("Name=Not an app\n")
    return directory


@pytest.fixture
def bookmark_file(tmp_path):
    """Chromium-style bookmark file."""
    path = tmp_path / "chrome" / "Bookmarks"
    path.parent.mkdir()
    data = {
        "roots": {
            "bookmark_bar": bookmark_tree(
                url_node("Python Docs", "https://docs.python.org/3/"),
                {"type": "folder", "name": "Dev", "children": [
                    url_node("GitHub", "https://github.com/"),
                    url_node("PyPI", "https://pypi.org/"),
                ]},
            ),
            "other": bookmark_tree(url_node("News", "https://news.ycombinator.com/")),
            "synced": bookmark_tree(),
        }
    }
    path.write_text(json.dumps(data))
    return path


@pytest.fixture
def user_dirs(tmp_path):
    """Desktop/Documents/Downloads with a handful of files."""
    dirs = []
    for name, files in (
        ("Desktop", ["report-draft.odt", "todo.txt"]),
        ("Documents", ["Report-final.pdf", "taxes.xlsx"]),
        ("Downloads", ["report.zip", "setup.sh", "photo.jpg"]),
    ):
        directory = tmp_path / name
        directory.mkdir()
        for filename in files:
            (directory / filename).write_text("x")
        dirs.append(directory)
    return dirs


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with all sections."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "search": {"max_results": 6, "enable_files": False, "min_bookmark_query": 4},
        "web_search": {"prefixes": ["d "], "url": "https://duckduckgo.com/?q={query}"},
        "aliases": {
            "Work": ["https://mail.example.com", "code ~/work"],
            "music": "spotify",
            "broken": 42,
        },
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path


@pytest.fixture
def config(apps_dir, bookmark_file, user_dirs):
    """Config pointing every source at the temporary fixtures."""
    return SearchConfig(
        max_results=8,
        app_dirs=(str(apps_dir),),
        bookmark_files=(str(bookmark_file),),
        file_dirs=tuple(str(d) for d in user_dirs),
        aliases={"lock": ("xdg-screensaver lock",), "work": ("https://mail.example.com", "code ~/work")},
    )


@pytest.fixture
def weather_report():
    return WeatherReport(
        location="budapest",
        temperature_c="12",
        feels_like_c="10",
        humidity="81",
        condition="Light rain",
    )


@pytest.fixture
def router(config):
    """Router with offline rates (USD/EUR/HUF), empty weather and clipboard."""
    return QueryRouter(
        config=config,
        rates=OfflineRates({"USD": 1, "EUR": 0.9, "HUF": 360}),
        clipboard=ClipboardHistory(),
        weather=FakeWeatherClient(report=None),
    )
