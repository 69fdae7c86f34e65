"""
Domain models for period kinds, time ranges and slices.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Sequence, Tuple

import pendulum
from pendulum import DateTime

from .exceptions import InvalidArgumentError

# Reference zone used when no other zone is configured (UTC+8, no DST).
DEFAULT_TIMEZONE = "Asia/Shanghai"

# Smallest step between two instants; a period ends one step before the next begins.
RESOLUTION = pendulum.duration(milliseconds=1)

EPOCH = pendulum.datetime(1970, 1, 1, tz="UTC")

TIME_RANGE_FORMAT_ERROR = "time range format error"
UNKNOWN_PERIOD_ERROR = "unknown time period"


class PeriodKind(str, Enum):
    """
    Periodicity used to slice a time range.
    """
    DAILY = "daily"
    WORKDAY = "workday"
    WEEKEND = "weekend"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @property
    def label(self) -> str:
        """Human-readable description of the period."""
        return _PERIOD_LABELS[self]

    @classmethod
    def parse(cls, value: Any) -> "PeriodKind":
        """
        Resolve a period kind from a member, its value or its name.

        Raises:
            InvalidArgumentError: If the value names no known period
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            key = value.strip().lower()
            for kind in cls:
                if key in (kind.value, kind.name.lower()):
                    return kind

        raise InvalidArgumentError(UNKNOWN_PERIOD_ERROR)


_PERIOD_LABELS = {
    PeriodKind.DAILY: "every day",
    PeriodKind.WORKDAY: "workdays",
    PeriodKind.WEEKEND: "weekends",
    PeriodKind.WEEKLY: "every week",
    PeriodKind.MONTHLY: "every month",
    PeriodKind.YEARLY: "every year",
}


def to_datetime(value: Any, timezone: str = DEFAULT_TIMEZONE) -> DateTime:
    """
    Convert an instant to a pendulum DateTime in the given zone.

    Accepts epoch milliseconds (int) or a datetime. Naive datetimes are
    interpreted as wall-clock time in ``timezone``.

    Raises:
        InvalidArgumentError: If the value is not an instant or lies outside
            the representable calendar
    """
    # bool is an int subclass but never a timestamp
    if isinstance(value, bool):
        raise InvalidArgumentError(TIME_RANGE_FORMAT_ERROR)

    try:
        if isinstance(value, int):
            return EPOCH.add(microseconds=value * 1000).in_timezone(timezone)

        if isinstance(value, datetime):
            return pendulum.instance(value, tz=timezone).in_timezone(timezone)
    except (OverflowError, ValueError) as exc:
        raise InvalidArgumentError(TIME_RANGE_FORMAT_ERROR) from exc

    raise InvalidArgumentError(TIME_RANGE_FORMAT_ERROR)


def to_millis(dt: datetime) -> int:
    """Return the instant as integer milliseconds since the epoch."""
    return calendar.timegm(dt.utctimetuple()) * 1000 + dt.microsecond // 1000


@dataclass(frozen=True)
class TimeRange:
    """
    Immutable absolute time range to be sliced.

    ``start <= end`` is expected but not enforced; an inverted range simply
    yields no slices.
    """
    start: DateTime
    end: DateTime

    @classmethod
    def from_sequence(
        cls,
        values: Sequence[Any] | None,
        timezone: str = DEFAULT_TIMEZONE
    ) -> "TimeRange":
        """
        Build a range from the first two instants of a sequence.

        Args:
            values: Sequence like ``[start_ms, end_ms]``; extra items are ignored
            timezone: Zone the instants are converted into

        Raises:
            InvalidArgumentError: If the sequence is missing, too short, or
                holds something other than instants
        """
        if values is None or isinstance(values, (str, bytes)):
            raise InvalidArgumentError(TIME_RANGE_FORMAT_ERROR)

        try:
            items = list(values)
        except TypeError as exc:
            raise InvalidArgumentError(TIME_RANGE_FORMAT_ERROR) from exc

        if len(items) < 2:
            raise InvalidArgumentError(TIME_RANGE_FORMAT_ERROR)

        return cls(
            start=to_datetime(items[0], timezone),
            end=to_datetime(items[1], timezone)
        )

    def in_timezone(self, timezone: str) -> "TimeRange":
        """Return the same range expressed in another zone."""
        return TimeRange(
            start=to_datetime(self.start, timezone),
            end=to_datetime(self.end, timezone)
        )

    def contains(self, start: DateTime, end: DateTime) -> bool:
        """Check whether [start, end] lies fully inside this range."""
        return start >= self.start and end <= self.end

    def to_millis(self) -> Tuple[int, int]:
        """Return ``(start_ms, end_ms)``."""
        return to_millis(self.start), to_millis(self.end)


@dataclass(frozen=True)
class Slice:
    """
    One calendar-aligned sub-interval of a time range.
    """
    start: DateTime
    end: DateTime

    def to_millis(self) -> Tuple[int, int]:
        """Return ``(start_ms, end_ms)``."""
        return to_millis(self.start), to_millis(self.end)

    def format_display(self, fmt: str = "YYYY-MM-DD HH:mm:ss.SSS") -> str:
        """Format the slice for display using pendulum format tokens."""
        return f"{self.start.format(fmt)} - {self.end.format(fmt)}"

    def __str__(self) -> str:
        return self.format_display()
