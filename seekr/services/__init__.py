# Seekr Services Package
"""
Backend services for the Seekr query router.

Services own state or talk to the network: exchange rates, weather,
clipboard history.
"""

from .clipboard import ClipboardEntry, ClipboardHistory
from .exchange_rates import ExchangeRateCache, ExchangeRateSnapshot
from .weather import WeatherClient, WeatherReport

__all__ = [
    "ClipboardEntry",
    "ClipboardHistory",
    "ExchangeRateCache",
    "ExchangeRateSnapshot",
    "WeatherClient",
    "WeatherReport",
]
