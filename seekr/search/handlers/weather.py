"""
Weather Handler - Current conditions for "weather <city>".

The lookup has a hard time budget; when it runs out (or the lookup fails)
the handler returns nothing and the router resolves the query normally.
"""

import asyncio
from typing import Optional

from loguru import logger

from seekr.search.handlers.base import SearchHandler
from seekr.search.intent import weather_location
from seekr.search.results import ResultItem, WeatherResult
from seekr.services.weather import WeatherClient

DEFAULT_TIMEOUT = 3.0


class WeatherHandler(SearchHandler):
    """Build a single weather result from a WeatherClient lookup."""

    name = "weather"

    def __init__(self, client: Optional[WeatherClient] = None, timeout: float = DEFAULT_TIMEOUT):
        self.client = client or WeatherClient()
        self.timeout = timeout

    async def get_results(self, query: str) -> list[ResultItem]:
        location = weather_location(query)
        if location is None:
            return []

        try:
            report = await asyncio.wait_for(self.client.lookup(location), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Weather lookup for '{location}' timed out after {self.timeout}s")
            return []

        if report is None:
            return []

        return [WeatherResult(
            title=location[:1].upper() + location[1:],
            description=(
                f"Temperature: {report.temperature_c}°C | "
                f"Feels like: {report.feels_like_c}°C | "
                f"Humidity: {report.humidity}%"
            ),
            temperature=f"{report.temperature_c}°C",
            feels_like=f"{report.feels_like_c}°C",
            humidity=f"{report.humidity}%",
            condition=report.condition,
        )]
