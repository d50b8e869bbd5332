"""Rate provider that consults the file cache before the network."""

from __future__ import annotations

from datetime import date

from fx_overview.providers.cache import CacheKey, RateCache
from fx_overview.providers.exchangerates_api import ExchangeRatesAPIClient
from fx_overview.utils.logger import get_logger

LOGGER = get_logger(__name__)


class CachedRateProvider:
    """Resolve rates from :class:`RateCache`, falling back to the HTTP client.

    Fetched values are persisted before they are returned, so a second run
    over the same window does not touch the network.
    """

    def __init__(self, cache: RateCache, client: ExchangeRatesAPIClient) -> None:
        self.cache = cache
        self.client = client

    def lookup(self, currency_from: str, currency_to: str, rate_date: date) -> float:
        currency_from = currency_from.upper()
        currency_to = currency_to.upper()
        key = CacheKey(currency_from, currency_to, rate_date)

        cached = self.cache.get(key)
        if cached is not None:
            LOGGER.debug("Cache hit for %s:%s on %s", currency_from, currency_to, rate_date)
            return cached

        value = self.client.fetch_rate(currency_from, currency_to, rate_date)
        self.cache.put(key, value)
        return value

    __call__ = lookup

    def close(self) -> None:
        self.client.close()


__all__ = ["CachedRateProvider"]
