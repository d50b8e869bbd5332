"""Abstractions for pluggable rate providers."""

from __future__ import annotations

from datetime import date
from typing import Callable, Protocol, Union

RateLookup = Callable[[str, str, date], float]


class RateProvider(Protocol):
    """Contract for resolving a single day's exchange rate.

    Implementations return the rate for ``currency_to`` expressed in units of
    ``currency_from`` and raise :class:`~fx_overview.exceptions.RateLookupError`
    (or a subclass) when the rate cannot be produced.
    """

    def lookup(self, currency_from: str, currency_to: str, rate_date: date) -> float:
        ...  # pragma: no cover - protocol definition


ProviderLike = Union[RateProvider, RateLookup]


def as_lookup(provider: ProviderLike) -> RateLookup:
    """Accept either a :class:`RateProvider` or a bare callable."""

    lookup = getattr(provider, "lookup", None)
    if callable(lookup):
        return lookup
    if callable(provider):
        return provider
    raise TypeError(f"Unsupported rate provider: {provider!r}")


__all__ = ["RateLookup", "RateProvider", "ProviderLike", "as_lookup"]
