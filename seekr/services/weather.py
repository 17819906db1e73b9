"""
Weather Service - Current conditions from wttr.in.

Reads the j1 JSON format:
    {"current_condition": [{"temp_C": "12", "FeelsLikeC": "10",
                            "humidity": "81",
                            "weatherDesc": [{"value": "Light rain"}]}]}

Any failure (network, HTTP status, unexpected shape) yields None so the
caller can carry on as if no weather was asked for.
"""

import urllib.parse
from dataclasses import dataclass
from typing import Optional

import httpx
from loguru import logger

DEFAULT_URL = "https://wttr.in/{location}?format=j1"


@dataclass(frozen=True)
class WeatherReport:
    location: str
    temperature_c: str
    feels_like_c: str
    humidity: str
    condition: str


class WeatherClient:
    """Looks up current weather for a free-form location."""

    def __init__(self, url: str = DEFAULT_URL, client: Optional[httpx.AsyncClient] = None):
        self.url = url
        self._client = client

    async def lookup(self, location: str) -> Optional[WeatherReport]:
        """
        Fetch current conditions.

        Args:
            location: City or place name as typed

        Returns:
            WeatherReport, or None if the lookup failed for any reason
        """
        url = self.url.format(location=urllib.parse.quote(location))

        try:
            if self._client is not None:
                response = await self._client.get(url)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.get(url)
            response.raise_for_status()
            current = response.json()["current_condition"][0]
            report = WeatherReport(
                location=location,
                temperature_c=str(current["temp_C"]),
                feels_like_c=str(current["FeelsLikeC"]),
                humidity=str(current["humidity"]),
                condition=str(current["weatherDesc"][0]["value"]),
            )
        except httpx.HTTPError as e:
            logger.warning(f"Weather lookup for '{location}' failed: {e}")
            return None
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.warning(f"Weather response for '{location}' malformed: {e}")
            return None

        logger.debug(f"Weather for {location}: {report.temperature_c}°C, {report.condition}")
        return report
