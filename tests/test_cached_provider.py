from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from fakes import FakeResponse, FakeSession
from fx_overview.aggregator import exchange_rate_overview
from fx_overview.exceptions import (
    CacheCorruptError,
    ExcessiveFailureRateError,
    NetworkFailureError,
    NoDataError,
)
from fx_overview.providers.cache import RateCache
from fx_overview.providers.cached import CachedRateProvider
from fx_overview.providers.exchangerates_api import ExchangeRatesAPIClient

DAY = date(2021, 3, 8)


def _provider(tmp_path: Path, *responses) -> tuple[CachedRateProvider, FakeSession]:
    session = FakeSession(*responses)
    provider = CachedRateProvider(RateCache(tmp_path), ExchangeRatesAPIClient(session=session))
    return provider, session


def test_second_lookup_is_served_from_cache(tmp_path: Path) -> None:
    provider, session = _provider(tmp_path, FakeResponse({"rates": {"GBP": 0.7224675544}}))

    first = provider.lookup("USD", "GBP", DAY)
    second = provider.lookup("USD", "GBP", DAY)

    assert first == second == 0.7224675544
    assert len(session.calls) == 1
    assert (tmp_path / "USD_GBP_2021-03-08.cached").read_text() == "0.7224675544"


def test_currency_codes_are_normalised(tmp_path: Path) -> None:
    provider, session = _provider(tmp_path, FakeResponse({"rates": {"GBP": 0.5}}))

    assert provider("usd", "gbp", DAY) == 0.5
    assert session.calls[0]["params"] == {"symbols": "USD,GBP", "base": "USD"}
    assert (tmp_path / "USD_GBP_2021-03-08.cached").exists()


def test_corrupt_cache_does_not_fall_back_to_network(tmp_path: Path) -> None:
    (tmp_path / "USD_GBP_2021-03-08.cached").write_text("garbage")
    provider, session = _provider(tmp_path, FakeResponse({"rates": {"GBP": 0.5}}))

    with pytest.raises(CacheCorruptError):
        provider.lookup("USD", "GBP", DAY)
    assert session.calls == []


def test_failed_fetch_is_not_cached(tmp_path: Path) -> None:
    provider, _ = _provider(tmp_path, FakeResponse({}, status_code=500))

    with pytest.raises(NetworkFailureError):
        provider.lookup("USD", "GBP", DAY)
    assert list(tmp_path.iterdir()) == []


def test_aggregation_counts_corrupt_cache_against_budget(tmp_path: Path) -> None:
    (tmp_path / "USD_GBP_2021-03-01.cached").write_text("garbage")
    responses = [FakeResponse({"rates": {"GBP": float(day)}}) for day in (2, 3, 4, 5)]
    provider, session = _provider(tmp_path, *responses)

    with pytest.raises(ExcessiveFailureRateError):
        exchange_rate_overview("USD", "GBP", date(2021, 3, 1), date(2021, 3, 5), provider)

    assert len(session.calls) == 4


def test_cache_os_errors_count_as_failed_days(tmp_path: Path) -> None:
    provider, session = _provider(tmp_path)

    with pytest.raises(NoDataError):
        exchange_rate_overview("X" * 300, "GBP", date(2021, 3, 1), date(2021, 3, 5), provider)

    assert session.calls == []
