"""Public interface for the fx_overview package."""

from __future__ import annotations

from datetime import date
from importlib import metadata as importlib_metadata
from pathlib import Path

import requests

from fx_overview.aggregator import aggregate, exchange_rate_overview
from fx_overview.config import DEFAULT_CACHE_DIR, EXCHANGE_URL
from fx_overview.exceptions import (
    ExcessiveFailureRateError,
    FxOverviewError,
    InvalidInputError,
    NoDataError,
    RateLookupError,
)
from fx_overview.models import ExchangeSummary, RateSample
from fx_overview.providers.cache import RateCache
from fx_overview.providers.cached import CachedRateProvider
from fx_overview.providers.exchangerates_api import ExchangeRatesAPIClient

__all__ = [
    "__version__",
    "FxOverview",
    "ExchangeSummary",
    "RateSample",
    "aggregate",
    "exchange_rate_overview",
    "FxOverviewError",
    "InvalidInputError",
    "NoDataError",
    "ExcessiveFailureRateError",
    "RateLookupError",
]

try:
    __version__ = importlib_metadata.version("fx-overview")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


class FxOverview:
    """Package facade wiring the file cache, HTTP client and aggregator."""

    __slots__ = ("cache", "client", "provider")

    __version__ = __version__

    def __init__(
        self,
        cache_dir: str | Path = DEFAULT_CACHE_DIR,
        *,
        api_url: str = EXCHANGE_URL,
        session: requests.Session | None = None,
    ) -> None:
        """Configure where rates are cached and which service answers misses.

        Passing ``session`` lets callers share connection pools or inject a
        stub in tests; otherwise the client opens its own session.
        """

        self.cache = RateCache(cache_dir)
        self.client = ExchangeRatesAPIClient(api_url, session=session)
        self.provider = CachedRateProvider(self.cache, self.client)

    def rate(self, currency_from: str, currency_to: str, rate_date: date) -> float:
        """Return a single day's rate, from the cache when available."""

        return self.provider.lookup(currency_from, currency_to, rate_date)

    def overview(
        self,
        currency_from: str,
        currency_to: str,
        from_date: str | date,
        to_date: str | date,
    ) -> ExchangeSummary:
        """Return mean/min/max rates for the business days in the window."""

        return exchange_rate_overview(currency_from, currency_to, from_date, to_date, self.provider)

    def close(self) -> None:
        self.provider.close()

    def __enter__(self) -> "FxOverview":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
