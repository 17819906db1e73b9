"""
Exchange Rate Service - Time-cached USD-based currency rates.

Rates are fetched from a JSON endpoint shaped like:
    {"rates": {"USD": 1, "EUR": 0.92, "HUF": 361.5, ...}}

A snapshot younger than the TTL (1 hour) is served without network access.
A failed refresh never discards the previous snapshot, however old; with no
snapshot at all, currency conversion is simply unavailable.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

import httpx
from loguru import logger

DEFAULT_URL = "https://open.er-api.com/v6/latest/USD"
DEFAULT_TTL = 3600.0


@dataclass(frozen=True)
class ExchangeRateSnapshot:
    """Units of each currency per 1 USD, and when they were fetched."""

    rates: Dict[str, float]
    fetched_at: float

    def rate(self, code: str) -> Optional[float]:
        return self.rates.get(code.upper())


class ExchangeRateCache:
    """
    Process-wide holder of the latest exchange-rate snapshot.

    Concurrent get_rates() calls that find the snapshot stale share a single
    in-flight refresh instead of each hitting the endpoint.
    """

    def __init__(
        self,
        url: str = DEFAULT_URL,
        ttl: float = DEFAULT_TTL,
        client: Optional[httpx.AsyncClient] = None,
        clock: Callable[[], float] = time.time,
        timeout: float = 5.0,
    ):
        self.url = url
        self.ttl = ttl
        self.timeout = timeout
        self._client = client
        self._clock = clock
        self._snapshot: Optional[ExchangeRateSnapshot] = None
        self._inflight: Optional[asyncio.Task] = None

    @property
    def snapshot(self) -> Optional[ExchangeRateSnapshot]:
        return self._snapshot

    def set_snapshot(self, rates: Dict[str, float], fetched_at: Optional[float] = None) -> None:
        """Install rates directly (startup seeding or tests)."""
        self._snapshot = ExchangeRateSnapshot(
            rates={code.upper(): float(value) for code, value in rates.items()},
            fetched_at=self._clock() if fetched_at is None else fetched_at,
        )

    def is_fresh(self) -> bool:
        if self._snapshot is None:
            return False
        return self._clock() - self._snapshot.fetched_at < self.ttl

    async def get_rates(self) -> Optional[ExchangeRateSnapshot]:
        """
        Current snapshot, refreshing first if it is missing or stale.

        Returns:
            The newest snapshot available, or None if no fetch ever succeeded
        """
        if self.is_fresh():
            return self._snapshot
        return await self.refresh()

    async def refresh(self) -> Optional[ExchangeRateSnapshot]:
        """Fetch new rates; joins an in-flight refresh if one is running."""
        if self._inflight is None or self._inflight.done():
            self._inflight = asyncio.ensure_future(self._refresh())
        return await asyncio.shield(self._inflight)

    async def _refresh(self) -> Optional[ExchangeRateSnapshot]:
        try:
            rates = await self._fetch()
        except httpx.HTTPError as e:
            logger.warning(f"Exchange rate refresh failed: {e}")
            return self._snapshot
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            logger.warning(f"Exchange rate response malformed: {e}")
            return self._snapshot

        self._snapshot = ExchangeRateSnapshot(rates=rates, fetched_at=self._clock())
        logger.debug(f"Fetched {len(rates)} exchange rates")
        return self._snapshot

    async def _fetch(self) -> Dict[str, float]:
        if self._client is not None:
            response = await self._client.get(self.url, timeout=self.timeout)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.url)
        response.raise_for_status()

        raw = response.json()["rates"]
        rates = {
            str(code).upper(): float(value)
            for code, value in raw.items()
            if isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0
        }
        if not rates:
            raise ValueError("no usable rates in response")
        return rates
