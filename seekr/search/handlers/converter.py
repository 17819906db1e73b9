"""
Converter Handler - Unit, temperature and currency conversion.

Query form: "<amount> <from> (to|in|ba|be) <to>", e.g.
    10 km to mi
    0 c in f
    2,5 kg to lb
    100 usd to huf

Conversions are tried in order: temperature (c <-> f), length/mass table,
then currency using the cached USD-based exchange rates. The rate cache is
only consulted when neither of the first two applies.
"""

import re
from typing import Optional

from loguru import logger

from seekr.search.handlers.base import SearchHandler
from seekr.search.handlers.calculator import format_number
from seekr.search.results import CalculatorResult, ResultItem
from seekr.services.exchange_rates import ExchangeRateCache

CONVERT_PATTERN = re.compile(
    r"^([\d.,]+)\s*([a-zA-Z]+)\s+(?:in|to|ba|be)\s+([a-zA-Z]+)$",
    re.IGNORECASE,
)
AMOUNT_PATTERN = re.compile(r"\d*\.?\d*")

# Multipliers against the base unit: meter for length, gram for mass
UNITS = {
    "mm": 0.001, "cm": 0.01, "m": 1.0, "km": 1000.0,
    "in": 0.0254, "ft": 0.3048, "yd": 0.9144, "mi": 1609.344,
    "mg": 0.001, "g": 1.0, "kg": 1000.0, "oz": 28.3495, "lb": 453.592,
}


def parse_amount(text: str) -> Optional[float]:
    """Leading number of text, accepting one decimal comma."""
    text = text.replace(",", ".", 1)
    try:
        return float(AMOUNT_PATTERN.match(text).group())
    except ValueError:
        return None


def convert_temperature(amount: float, source: str, target: str) -> Optional[float]:
    if source == "c" and target == "f":
        return amount * 9 / 5 + 32
    if source == "f" and target == "c":
        return (amount - 32) * 5 / 9
    return None


def convert_units(amount: float, source: str, target: str) -> Optional[float]:
    if source in UNITS and target in UNITS:
        return amount * UNITS[source] / UNITS[target]
    return None


class ConverterHandler(SearchHandler):
    """Convert amounts between units, temperature scales and currencies."""

    name = "converter"

    def __init__(self, rates: Optional[ExchangeRateCache] = None):
        self.rates = rates

    async def get_results(self, query: str) -> list[ResultItem]:
        match = CONVERT_PATTERN.match(query)
        if not match:
            return []

        amount = parse_amount(match.group(1))
        if amount is None:
            return []
        source = match.group(2).lower()
        target = match.group(3).lower()

        value = convert_temperature(amount, source, target)
        if value is not None:
            return [CalculatorResult(
                title=f"{format_number(amount)}°{source.upper()} = {value:.2f}°{target.upper()}",
                description="Temperature conversion",
                value=format_number(value),
            )]

        value = convert_units(amount, source, target)
        if value is not None:
            return [CalculatorResult(
                title=f"{format_number(amount)} {source} = {value:.4f} {target}",
                description="Unit conversion",
                value=format_number(value),
            )]

        return await self._convert_currency(amount, source.upper(), target.upper())

    async def _convert_currency(self, amount: float, source: str, target: str) -> list[ResultItem]:
        if self.rates is None:
            return []

        snapshot = await self.rates.get_rates()
        if snapshot is None:
            logger.debug("No exchange rates available, skipping currency conversion")
            return []

        source_rate = snapshot.rate(source)
        target_rate = snapshot.rate(target)
        if not source_rate or not target_rate:
            return []

        value = amount / source_rate * target_rate
        return [CalculatorResult(
            title=f"{format_number(amount)} {source} = {value:,.2f} {target}",
            description="Currency conversion",
            value=format_number(value),
        )]
