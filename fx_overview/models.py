"""Value objects produced by the range aggregator."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True, slots=True)
class RateSample:
    """A single retrieved exchange rate together with the day it belongs to."""

    value: float
    rate_date: date

    def as_tuple(self) -> tuple[float, date]:
        return (self.value, self.rate_date)


@dataclass(frozen=True, slots=True)
class ExchangeSummary:
    """Mean/min/max statistics for a currency pair over a date range.

    ``notice`` is only set when some business days could not be retrieved but
    the failure budget was not exhausted. The day counts are informational and
    do not take part in equality checks.
    """

    mean_rate: float
    min_rate: RateSample
    max_rate: RateSample
    notice: str | None = None
    expected_days: int = field(default=0, compare=False)
    retrieved_days: int = field(default=0, compare=False)

    def describe(self) -> str:
        """Return the multi-line report printed by the command line tool."""

        lines = [
            f"mean rate: {self.mean_rate}",
            f"min rate:  {self.min_rate.value} on {self.min_rate.rate_date.isoformat()}",
            f"max rate:  {self.max_rate.value} on {self.max_rate.rate_date.isoformat()}",
        ]
        if self.notice:
            lines.append(f"notice:    {self.notice}")
        return "\n".join(lines)


__all__ = ["RateSample", "ExchangeSummary"]
