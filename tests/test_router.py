"""
Tests for QueryRouter.resolve().

Uses real desktop entries, bookmark files and folders from conftest; the
weather client and exchange rates are offline fakes.
"""

import asyncio
import dataclasses

import pytest

from conftest import FakeWeatherClient, OfflineRates
from seekr.search.handlers.base import SearchHandler
from seekr.search.intent import Branch
from seekr.search.results import (
    AliasResult,
    AppResult,
    BookmarkResult,
    CalculatorResult,
    ClipboardResult,
    CommandResult,
    FileResult,
    ResultItem,
    SystemCommandResult,
    WeatherResult,
    WebResult,
)
from seekr.search.router import QueryRouter
from seekr.services.clipboard import ClipboardHistory


class StubHandler(SearchHandler):
    """Handler returning a fixed number of plain results."""

    def __init__(self, name, count=1, delay=0.0, error=None):
        self._name = name
        self.count = count
        self.delay = delay
        self.error = error

    @property
    def name(self):
        return self._name

    async def get_results(self, query):
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return [ResultItem(title=f"{self._name} {i}") for i in range(self.count)]


class TestWeatherShortCircuit:
    """Weather answers alone and bypasses the cap."""

    @pytest.mark.asyncio
    async def test_successful_lookup_returns_single_weather_item(self, config, weather_report):
        router = QueryRouter(config=config, rates=OfflineRates(), weather=FakeWeatherClient(weather_report))
        results = await router.resolve("weather budapest")
        assert len(results) == 1
        assert isinstance(results[0], WeatherResult)
        assert results[0].title == "Budapest"
        assert results[0].temperature == "12°C"
        assert results[0].condition == "Light rain"

    @pytest.mark.asyncio
    async def test_hungarian_keyword(self, config, weather_report):
        client = FakeWeatherClient(weather_report)
        router = QueryRouter(config=config, rates=OfflineRates(), weather=client)
        results = await router.resolve("Időjárás Szeged")
        assert [r.kind for r in results] == ["weather"]
        assert client.calls == ["Szeged"]

    @pytest.mark.asyncio
    async def test_weather_bypasses_zero_cap(self, config, weather_report):
        config = dataclasses.replace(config, max_results=0)
        router = QueryRouter(config=config, rates=OfflineRates(), weather=FakeWeatherClient(weather_report))
        results = await router.resolve("weather lock")
        assert len(results) == 1

    @pytest.mark.asyncio
    async def test_failed_lookup_falls_through(self, router):
        results = await router.resolve("weather files")
        assert all(not isinstance(r, WeatherResult) for r in results)

    @pytest.mark.asyncio
    async def test_timeout_falls_through(self, config, weather_report):
        config = dataclasses.replace(config, weather_timeout=0.05)
        router = QueryRouter(
            config=config,
            rates=OfflineRates(),
            weather=FakeWeatherClient(weather_report, delay=1.0),
        )
        results = await router.resolve("weather 2")
        assert all(r.kind != "weather" for r in results)

    @pytest.mark.asyncio
    async def test_disabled_weather_skips_lookup(self, config, weather_report):
        client = FakeWeatherClient(weather_report)
        config = dataclasses.replace(config, enable_weather=False)
        router = QueryRouter(config=config, rates=OfflineRates(), weather=client)
        results = await router.resolve("weather budapest")
        assert client.calls == []
        assert all(r.kind != "weather" for r in results)


class TestAliases:
    """Alias hits are added on top of the exclusive branch."""

    @pytest.mark.asyncio
    async def test_alias_is_case_insensitive(self, router):
        results = await router.resolve("WORK")
        assert isinstance(results[0], AliasResult)
        assert results[0].commands == ("https://mail.example.com", "code ~/work")

    @pytest.mark.asyncio
    async def test_alias_requires_full_query(self, router):
        results = await router.resolve("work stuff")
        assert not any(isinstance(r, AliasResult) for r in results)

    @pytest.mark.asyncio
    async def test_alias_and_system_command_both_appear(self, router):
        results = await router.resolve("lock")
        assert [r.kind for r in results] == ["alias", "syscommand"]

    @pytest.mark.asyncio
    async def test_upper_and_lower_case_give_same_system_command(self, router):
        upper = await router.resolve("LOCK")
        lower = await router.resolve("lock")
        upper_cmds = [r for r in upper if isinstance(r, SystemCommandResult)]
        lower_cmds = [r for r in lower if isinstance(r, SystemCommandResult)]
        assert upper_cmds == lower_cmds
        assert upper_cmds[0].command_line == "xdg-screensaver lock"

    @pytest.mark.asyncio
    async def test_alias_suppresses_fallback_search(self, router):
        results = await router.resolve("work")
        assert [r.kind for r in results] == ["alias"]


class TestExclusiveBranches:
    """Prefix and keyword branches."""

    @pytest.mark.asyncio
    async def test_shell_command(self, router):
        results = await router.resolve(">echo hi")
        assert len(results) == 1
        assert isinstance(results[0], CommandResult)
        assert results[0].command_line == "echo hi"

    @pytest.mark.asyncio
    async def test_bare_shell_prefix_yields_nothing(self, router):
        assert await router.resolve(">") == []
        assert await router.resolve(">   ") == []

    @pytest.mark.asyncio
    async def test_web_search(self, router):
        results = await router.resolve("g python asyncio")
        assert len(results) == 1
        assert isinstance(results[0], WebResult)
        assert results[0].url == "https://www.google.com/search?q=python%20asyncio"

    @pytest.mark.asyncio
    async def test_calculator(self, router):
        results = await router.resolve("2 + 2")
        assert len(results) == 1
        assert isinstance(results[0], CalculatorResult)
        assert results[0].value == "4"

    @pytest.mark.asyncio
    async def test_division_by_zero_yields_nothing(self, router):
        assert await router.resolve("1/0") == []

    @pytest.mark.asyncio
    async def test_disabled_calculator_falls_to_default(self, config):
        config = dataclasses.replace(config, enable_calculator=False)
        router = QueryRouter(config=config, rates=OfflineRates(), weather=FakeWeatherClient())
        results = await router.resolve("2 + 2")
        assert not any(isinstance(r, CalculatorResult) for r in results)

    @pytest.mark.asyncio
    async def test_clipboard_history(self, config):
        history = ClipboardHistory()
        for i in range(12):
            history.push(f"copied text {i}")
        router = QueryRouter(config=config, rates=OfflineRates(), clipboard=history, weather=FakeWeatherClient())

        results = await router.resolve("CLIP")
        assert len(results) == config.max_results
        assert all(isinstance(r, ClipboardResult) for r in results)
        assert results[0].value == "copied text 11"

    @pytest.mark.asyncio
    async def test_empty_clipboard(self, router):
        assert await router.resolve("clip") == []


class TestDefaultBranch:
    """Converter and the concurrent app/bookmark/file fallback."""

    @pytest.mark.asyncio
    async def test_unit_conversion(self, router):
        results = await router.resolve("10 km to mi")
        assert len(results) == 1
        assert float(results[0].value) == pytest.approx(6.2137, abs=1e-4)

    @pytest.mark.asyncio
    async def test_temperature_conversion(self, router):
        results = await router.resolve("0 c to f")
        assert results[0].value == "32"

    @pytest.mark.asyncio
    async def test_currency_conversion(self, router):
        results = await router.resolve("10 USD to EUR")
        assert len(results) == 1
        assert float(results[0].value) == pytest.approx(9)

    @pytest.mark.asyncio
    async def test_currency_without_rates_falls_back(self, config):
        router = QueryRouter(config=config, rates=OfflineRates(), weather=FakeWeatherClient())
        results = await router.resolve("10 USD to EUR")
        assert not any(isinstance(r, CalculatorResult) for r in results)

    @pytest.mark.asyncio
    async def test_fallback_merges_in_priority_order(self, router):
        results = await router.resolve("report")
        assert all(isinstance(r, FileResult) for r in results)
        assert [r.title for r in results] == ["report-draft.odt", "Report-final.pdf", "report.zip"]

    @pytest.mark.asyncio
    async def test_apps_before_bookmarks_before_files(self, config):
        router = QueryRouter(config=config, rates=OfflineRates(), weather=FakeWeatherClient())
        router.register_source("app_search", StubHandler("app", count=2, delay=0.05))
        router.register_source("bookmarks", StubHandler("bookmark", count=2, delay=0.02))
        router.register_source("files", StubHandler("file", count=2))

        results = await router.resolve("anything")
        assert [r.title for r in results] == [
            "app 0", "app 1", "bookmark 0", "bookmark 1", "file 0", "file 1",
        ]

    @pytest.mark.asyncio
    async def test_per_source_caps(self, config):
        config = dataclasses.replace(config, max_results=50)
        router = QueryRouter(config=config, rates=OfflineRates(), weather=FakeWeatherClient())
        router.register_source("app_search", StubHandler("app", count=9))
        router.register_source("bookmarks", StubHandler("bookmark", count=9))
        router.register_source("files", StubHandler("file", count=9))

        results = await router.resolve("anything")
        titles = [r.title for r in results]
        assert len(titles) == 11
        assert titles[:5] == [f"app {i}" for i in range(5)]
        assert titles[5:8] == [f"bookmark {i}" for i in range(3)]

    @pytest.mark.asyncio
    async def test_failing_source_is_isolated(self, config):
        router = QueryRouter(config=config, rates=OfflineRates(), weather=FakeWeatherClient())
        router.register_source("app_search", StubHandler("app", error=RuntimeError("boom")))
        router.register_source("bookmarks", StubHandler("bookmark", count=1))
        router.register_source("files", StubHandler("file", count=1))

        results = await router.resolve("anything")
        assert [r.title for r in results] == ["bookmark 0", "file 0"]

    @pytest.mark.asyncio
    async def test_app_and_bookmark_results(self, router):
        results = await router.resolve("firefox")
        assert isinstance(results[0], AppResult)
        assert results[0].title == "Firefox"

        results = await router.resolve("github")
        assert any(isinstance(r, BookmarkResult) and r.url == "https://github.com/" for r in results)

    @pytest.mark.asyncio
    async def test_empty_query_returns_nothing(self, router):
        assert await router.resolve("") == []

    @pytest.mark.asyncio
    async def test_unknown_source_name_rejected(self, router):
        with pytest.raises(KeyError):
            router.register_source("music", StubHandler("music"))


class TestResultCap:
    """Every non-weather path honours max_results."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("maximum", [0, 1, 3])
    async def test_cap_applies(self, config, maximum):
        config = dataclasses.replace(config, max_results=maximum)
        router = QueryRouter(config=config, rates=OfflineRates(), weather=FakeWeatherClient())
        for query in ("lock", "report", "f", "2*3", "g test"):
            assert len(await router.resolve(query)) <= maximum

    @pytest.mark.asyncio
    async def test_replaced_branch_handler_is_capped(self, config):
        config = dataclasses.replace(config, max_results=2)
        router = QueryRouter(config=config, rates=OfflineRates(), weather=FakeWeatherClient())
        router.register(Branch.SHELL_COMMAND, StubHandler("shell", count=10))
        assert len(await router.resolve(">ls")) == 2
