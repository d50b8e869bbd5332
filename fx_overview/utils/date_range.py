"""Utility helpers for walking inclusive date ranges."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator, Tuple

from fx_overview.exceptions import InvalidInputError

WEEKEND_DAYS = frozenset({5, 6})


@dataclass(frozen=True)
class DateRange:
    """Container representing a closed date range."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidInputError("date_from must precede or be equal to date_to")

    @classmethod
    def parse(cls, start: str | date, end: str | date) -> "DateRange":
        """Build a range from ISO strings or :class:`date` objects."""

        return cls(start=parse_date(start), end=parse_date(end))

    def as_tuple(self) -> Tuple[date, date]:
        """Return the range as a tuple of ``(start, end)``."""
        return (self.start, self.end)

    def days(self) -> Iterator[date]:
        """Yield every calendar day in the range in ascending order."""

        current = self.start
        step = timedelta(days=1)
        while current <= self.end:
            yield current
            current += step

    def business_days(self) -> Iterator[date]:
        """Yield Monday to Friday dates only."""

        return (day for day in self.days() if is_business_day(day))


def parse_date(value: str | date) -> date:
    """Parse a date string in ISO format to :class:`date`."""

    if isinstance(value, date):
        return value
    return datetime.strptime(value, "%Y-%m-%d").date()


def is_business_day(day: date) -> bool:
    """Return ``True`` unless ``day`` falls on a Saturday or Sunday."""

    return day.weekday() not in WEEKEND_DAYS
