"""Calendar date value objects.

Date is a civil date (no time of day, no timezone) whose only text form
is ``YYYY-MM-DD``.  DateRange is an inclusive, ordered pair of Dates.
"""

from __future__ import annotations

import calendar
import datetime as dt
import logging
import re
from dataclasses import dataclass

from course_domain.core.clock import IClock, get_default_clock
from course_domain.core.errors import InvalidError

logger = logging.getLogger(__name__)

_ISO_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


@dataclass(frozen=True, order=True)
class Date:
    """Civil date validated against the Gregorian calendar.

    Usage::

        Date(2025, 10, 1)
        Date.parse("2025-10-01")
        Date(2025, 2, 30)   # raises InvalidError
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        parts = (self.year, self.month, self.day)
        if any(isinstance(p, bool) or not isinstance(p, int) for p in parts):
            raise InvalidError(
                "date components must be integers",
                context={"year": self.year, "month": self.month, "day": self.day},
            )
        try:
            dt.date(self.year, self.month, self.day)
        except ValueError as exc:
            raise InvalidError(
                "invalid date provided",
                context={"year": self.year, "month": self.month, "day": self.day},
            ) from exc

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, value: str) -> Date:
        """Parse the strict ``YYYY-MM-DD`` form (zero-padded)."""
        if not isinstance(value, str):
            raise InvalidError(
                "date must be in YYYY-MM-DD format",
                context={"received_type": type(value).__name__},
            )
        match = _ISO_DATE_RE.fullmatch(value)
        if match is None:
            logger.debug("Date.parse rejected %r: not YYYY-MM-DD", value)
            raise InvalidError(
                "date must be in YYYY-MM-DD format",
                context={"input": value},
            )
        year, month, day = (int(g) for g in match.groups())
        return cls(year, month, day)

    @classmethod
    def from_date(cls, value: dt.date) -> Date:
        return cls(value.year, value.month, value.day)

    @classmethod
    def today(cls, clock: IClock | None = None) -> Date:
        """Current UTC civil date according to *clock*."""
        now = (clock or get_default_clock()).now()
        return cls.from_date(now.astimezone(dt.timezone.utc).date())

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add_days(self, days: int) -> Date:
        try:
            return Date.from_date(self.to_date() + dt.timedelta(days=days))
        except OverflowError as exc:
            raise InvalidError(
                "date arithmetic out of range",
                context={"date": str(self), "days": days},
            ) from exc

    def add_months(self, months: int) -> Date:
        """Shift by whole months, clamping the day to the target month."""
        index = self.year * 12 + (self.month - 1) + months
        year, month = divmod(index, 12)
        month += 1
        if not dt.MINYEAR <= year <= dt.MAXYEAR:
            raise InvalidError(
                "date arithmetic out of range",
                context={"date": str(self), "months": months},
            )
        day = min(self.day, calendar.monthrange(year, month)[1])
        return Date(year, month, day)

    def add_years(self, years: int) -> Date:
        return self.add_months(years * 12)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_date(self) -> dt.date:
        return dt.date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class DateRange:
    """Inclusive period between two Dates, with ``start <= end``."""

    start: Date
    end: Date

    def __post_init__(self) -> None:
        if not isinstance(self.start, Date) or not isinstance(self.end, Date):
            raise InvalidError(
                "date range endpoints must be Date values",
                context={
                    "start_type": type(self.start).__name__,
                    "end_type": type(self.end).__name__,
                },
            )
        if self.start > self.end:
            raise InvalidError(
                "start date cannot be after end date",
                context={"start_date": str(self.start), "end_date": str(self.end)},
            )

    @classmethod
    def parse(cls, start: str, end: str) -> DateRange:
        return cls(Date.parse(start), Date.parse(end))

    @property
    def days(self) -> int:
        """Number of days in the range (inclusive)."""
        return (self.end.to_date() - self.start.to_date()).days + 1

    def contains(self, day: Date) -> bool:
        return self.start <= day <= self.end

    def overlaps(self, other: DateRange) -> bool:
        if not isinstance(other, DateRange):
            raise TypeError(f"Cannot compare DateRange with {type(other)}")
        return self.start <= other.end and other.start <= self.end

    def to_dict(self) -> dict[str, str]:
        return {"start": str(self.start), "end": str(self.end)}

    def __contains__(self, day: Date) -> bool:
        return self.contains(day)

    def __str__(self) -> str:
        return f"{self.start} to {self.end}"
