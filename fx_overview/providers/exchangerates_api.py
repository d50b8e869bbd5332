"""requests-based client for exchangeratesapi-compatible services."""

from __future__ import annotations

from datetime import date
from typing import Any

import requests

from fx_overview.config import EXCHANGE_URL, REQUEST_TIMEOUT_SECONDS
from fx_overview.exceptions import MalformedResponseError, NetworkFailureError, RateTimeoutError
from fx_overview.utils.logger import get_logger

LOGGER = get_logger(__name__)


class ExchangeRatesAPIClient:
    """Fetch a single day's rate for a currency pair.

    ``GET {base_url}{YYYY-MM-DD}?symbols=FROM,TO&base=FROM`` is expected to
    answer with ``{"rates": {"TO": 0.72, ...}, ...}``.
    """

    def __init__(
        self,
        base_url: str = EXCHANGE_URL,
        *,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.session.headers.setdefault("User-Agent", "fx-overview/1.0")

    def url_for(self, rate_date: date) -> str:
        return f"{self.base_url}{rate_date.isoformat()}"

    def fetch_rate(self, currency_from: str, currency_to: str, rate_date: date) -> float:
        """Return the ``currency_to`` rate for one unit of ``currency_from``."""

        url = self.url_for(rate_date)
        params = {"symbols": f"{currency_from},{currency_to}", "base": currency_from}
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.Timeout as exc:
            raise RateTimeoutError(f"request to {url} timed out after {self.timeout}s") from exc
        except requests.RequestException as exc:
            raise NetworkFailureError(f"request to {url} failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedResponseError(f"cannot parse json from {url}: {exc}") from exc

        rate = extract_rate(payload, currency_to)
        LOGGER.info("Fetched %s:%s rate for %s from %s", currency_from, currency_to, rate_date, url)
        return rate

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "ExchangeRatesAPIClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def extract_rate(payload: Any, currency_to: str) -> float:
    """Pull ``payload["rates"][currency_to]`` out of a decoded response body."""

    if not isinstance(payload, dict):
        raise MalformedResponseError(f"cannot parse json: {payload}")
    rates = payload.get("rates")
    if not isinstance(rates, dict):
        raise MalformedResponseError(f"cannot parse json: {payload}")
    value = rates.get(currency_to)
    # bool is an int subclass but never a valid rate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedResponseError(f"cannot parse json: {payload}")
    return float(value)


__all__ = ["ExchangeRatesAPIClient", "extract_rate"]
