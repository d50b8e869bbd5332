"""Aggregate daily exchange rates over a date range."""

from __future__ import annotations

from datetime import date

from fx_overview.config import ACCEPTABLE_RETRIEVAL_FAILURE_FRACTION
from fx_overview.exceptions import (
    ExcessiveFailureRateError,
    InvalidInputError,
    NoDataError,
    RateLookupError,
)
from fx_overview.models import ExchangeSummary, RateSample
from fx_overview.providers.base import ProviderLike, as_lookup
from fx_overview.utils.date_range import DateRange
from fx_overview.utils.logger import get_logger

LOGGER = get_logger(__name__)

NO_DATA_MESSAGE = "Could not retrieve even 1 rate. Perhaps pick a date range with more working days."


def exchange_rate_overview(
    currency_from: str,
    currency_to: str,
    date_from: str | date,
    date_to: str | date,
    provider: ProviderLike,
) -> ExchangeSummary:
    """Return mean/min/max rates for every business day in the inclusive window.

    ``provider`` is called once per Monday-Friday date, in ascending order. A
    :class:`RateLookupError` for a given day is logged and counted as a miss;
    the run only fails when nothing was retrieved or when the share of misses
    exceeds :data:`ACCEPTABLE_RETRIEVAL_FAILURE_FRACTION`. Ties for the
    minimum or maximum keep the earliest date.
    """

    if currency_from.lower() == currency_to.lower():
        raise InvalidInputError("You have to pick two different currencies")
    window = DateRange.parse(date_from, date_to)
    lookup = as_lookup(provider)

    expected_days = 0
    retrieved_days = 0
    rate_sum = 0.0
    min_rate: RateSample | None = None
    max_rate: RateSample | None = None

    for day in window.business_days():
        expected_days += 1
        try:
            value = lookup(currency_from, currency_to, day)
        except RateLookupError as exc:
            LOGGER.warning("%s -> Failed to retrieve rates: %s", day.isoformat(), exc)
            continue

        retrieved_days += 1
        rate_sum += value
        if max_rate is None or value > max_rate.value:
            max_rate = RateSample(value, day)
        if min_rate is None or value < min_rate.value:
            min_rate = RateSample(value, day)

    LOGGER.debug(
        "Retrieved %s of %s business day rates for %s:%s",
        retrieved_days,
        expected_days,
        currency_from,
        currency_to,
    )

    if expected_days == 0 or retrieved_days == 0 or min_rate is None or max_rate is None:
        raise NoDataError(NO_DATA_MESSAGE)

    if 1 - retrieved_days / expected_days > ACCEPTABLE_RETRIEVAL_FAILURE_FRACTION:
        raise ExcessiveFailureRateError(
            ACCEPTABLE_RETRIEVAL_FAILURE_FRACTION,
            expected_days=expected_days,
            retrieved_days=retrieved_days,
        )

    notice = None
    if retrieved_days != expected_days:
        notice = f"we failed to retrieve {expected_days - retrieved_days} of {expected_days} rates"

    return ExchangeSummary(
        mean_rate=rate_sum / retrieved_days,
        min_rate=min_rate,
        max_rate=max_rate,
        notice=notice,
        expected_days=expected_days,
        retrieved_days=retrieved_days,
    )


def aggregate(
    currency_from: str,
    currency_to: str,
    date_from: str | date,
    date_to: str | date,
    provider: ProviderLike,
) -> ExchangeSummary:
    """Alias for :func:`exchange_rate_overview`."""

    return exchange_rate_overview(currency_from, currency_to, date_from, date_to, provider)


__all__ = ["aggregate", "exchange_rate_overview", "NO_DATA_MESSAGE"]
