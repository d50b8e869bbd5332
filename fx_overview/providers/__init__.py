"""Rate providers consumed by the range aggregator."""

from __future__ import annotations

from fx_overview.providers.base import RateLookup, RateProvider
from fx_overview.providers.cache import RateCache
from fx_overview.providers.cached import CachedRateProvider
from fx_overview.providers.exchangerates_api import ExchangeRatesAPIClient

__all__ = [
    "CachedRateProvider",
    "ExchangeRatesAPIClient",
    "RateCache",
    "RateLookup",
    "RateProvider",
]
