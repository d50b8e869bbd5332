"""Exception hierarchy raised by fx_overview."""

from __future__ import annotations

__all__ = [
    "FxOverviewError",
    "InvalidInputError",
    "NoDataError",
    "ExcessiveFailureRateError",
    "RateLookupError",
    "CacheCorruptError",
    "CacheWriteError",
    "NetworkFailureError",
    "RateTimeoutError",
    "MalformedResponseError",
]


class FxOverviewError(Exception):
    """Base class for every error that aborts an overview run."""


class InvalidInputError(FxOverviewError, ValueError):
    """Raised for an unusable currency pair or date window."""


class NoDataError(FxOverviewError):
    """Raised when not a single rate could be retrieved."""


class ExcessiveFailureRateError(FxOverviewError):
    """Raised when too many business days are missing a rate."""

    def __init__(self, threshold: float, *, expected_days: int = 0, retrieved_days: int = 0) -> None:
        self.threshold = threshold
        self.expected_days = expected_days
        self.retrieved_days = retrieved_days
        super().__init__(f"Failure rate exceeded acceptable threshold ({threshold})")


class RateLookupError(FxOverviewError):
    """A single day's rate could not be produced.

    The aggregator counts these against the failure budget instead of
    aborting, so providers should raise a subclass of this for any per-day
    problem.
    """


class CacheCorruptError(RateLookupError):
    """A cache file exists but does not hold a readable float."""


class CacheWriteError(RateLookupError):
    """A freshly fetched rate could not be persisted."""


class NetworkFailureError(RateLookupError):
    """The exchange rate service could not be reached or answered with an error."""


class RateTimeoutError(NetworkFailureError):
    """The exchange rate service did not answer in time."""


class MalformedResponseError(RateLookupError):
    """The service answered but the payload did not contain the expected rate."""
