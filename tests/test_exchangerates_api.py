from __future__ import annotations

from datetime import date

import pytest
import requests

from fakes import FakeResponse, FakeSession
from fx_overview.config import EXCHANGE_URL, REQUEST_TIMEOUT_SECONDS
from fx_overview.exceptions import (
    MalformedResponseError,
    NetworkFailureError,
    RateTimeoutError,
)
from fx_overview.providers.exchangerates_api import ExchangeRatesAPIClient, extract_rate

DAY = date(2021, 3, 8)


def test_fetch_rate_builds_request_and_extracts_value() -> None:
    session = FakeSession(
        FakeResponse({"rates": {"USD": 1.0, "GBP": 0.7224675544}, "base": "USD", "date": "2021-03-08"})
    )
    client = ExchangeRatesAPIClient(session=session)

    assert client.fetch_rate("USD", "GBP", DAY) == 0.7224675544
    assert session.calls == [
        {
            "url": f"{EXCHANGE_URL}2021-03-08",
            "params": {"symbols": "USD,GBP", "base": "USD"},
            "timeout": REQUEST_TIMEOUT_SECONDS,
        }
    ]
    assert session.headers["User-Agent"].startswith("fx-overview")


def test_base_url_gets_trailing_slash() -> None:
    client = ExchangeRatesAPIClient("http://localhost:8000/api", session=FakeSession())
    assert client.url_for(DAY) == "http://localhost:8000/api/2021-03-08"


def test_integer_rates_are_accepted() -> None:
    client = ExchangeRatesAPIClient(session=FakeSession(FakeResponse({"rates": {"JPY": 108}})))
    assert client.fetch_rate("USD", "JPY", DAY) == 108.0


def test_timeout_is_mapped() -> None:
    client = ExchangeRatesAPIClient(session=FakeSession(requests.Timeout("slow")))
    with pytest.raises(RateTimeoutError):
        client.fetch_rate("USD", "GBP", DAY)


def test_connection_error_is_mapped() -> None:
    client = ExchangeRatesAPIClient(session=FakeSession(requests.ConnectionError("refused")))
    with pytest.raises(NetworkFailureError):
        client.fetch_rate("USD", "GBP", DAY)


def test_http_error_status_is_mapped() -> None:
    client = ExchangeRatesAPIClient(session=FakeSession(FakeResponse({}, status_code=503)))
    with pytest.raises(NetworkFailureError) as excinfo:
        client.fetch_rate("USD", "GBP", DAY)
    assert not isinstance(excinfo.value, RateTimeoutError)


def test_non_json_body_is_malformed() -> None:
    client = ExchangeRatesAPIClient(session=FakeSession(FakeResponse(text="<html>")))
    with pytest.raises(MalformedResponseError):
        client.fetch_rate("USD", "GBP", DAY)


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"error": "unsupported"},
        {"rates": []},
        {"rates": {"USD": 1.0}},
        {"rates": {"GBP": "0.72"}},
        {"rates": {"GBP": None}},
        {"rates": {"GBP": True}},
    ],
)
def test_extract_rate_rejects_unexpected_shapes(payload: object) -> None:
    with pytest.raises(MalformedResponseError):
        extract_rate(payload, "GBP")


def test_close_only_releases_own_session() -> None:
    shared = FakeSession()
    with ExchangeRatesAPIClient(session=shared):
        pass
    assert shared.closed is False
