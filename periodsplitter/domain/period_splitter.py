"""
Core business logic for slicing a time range into calendar periods.

Pure domain logic: no I/O, no shared state. Every call walks forward through
calendar-aligned periods and materializes the resulting slices.
"""

import logging
from typing import Any, Callable, Dict, List, Sequence

from pendulum import DateTime

from .exceptions import InvalidArgumentError
from .models import (
    DEFAULT_TIMEZONE,
    RESOLUTION,
    PeriodKind,
    Slice,
    TimeRange,
)

logger = logging.getLogger(__name__)

WEEKEND_DAYS = (5, 6)  # Saturday, Sunday (datetime.weekday numbering)


class PeriodSplitter:
    """
    Splits a time range into calendar-aligned slices.

    Algorithm (shared by all period kinds):
    1. Convert the range into the reference zone
    2. Truncate the range start to the beginning of its period
    3. Walk forward one period at a time while the period starts before the range end
    4. Decide per period whether its slice is kept, dropped or clipped

    Daily, workday, weekend and weekly slices must lie fully inside the
    range. Monthly clips the trailing month to the range end; yearly drops
    the trailing partial year.
    """

    def __init__(self, timezone: str = DEFAULT_TIMEZONE):
        self.timezone = timezone
        self._strategies: Dict[PeriodKind, Callable[[TimeRange], List[Slice]]] = {
            PeriodKind.DAILY: self._split_daily,
            PeriodKind.WORKDAY: self._split_workdays,
            PeriodKind.WEEKEND: self._split_weekends,
            PeriodKind.WEEKLY: self._split_weekly,
            PeriodKind.MONTHLY: self._split_monthly,
            PeriodKind.YEARLY: self._split_yearly,
        }

    def split(self, kind: Any, time_range: TimeRange | Sequence[Any]) -> List[Slice]:
        """
        Slice a time range according to a period kind.

        Args:
            kind: PeriodKind, or its value/name as a string
            time_range: TimeRange, or a sequence of at least two instants
                (epoch milliseconds or datetimes)

        Returns:
            Chronologically ordered, non-overlapping slices

        Raises:
            InvalidArgumentError: If the range is malformed, the kind is
                unknown, or the walk leaves the representable calendar
        """
        if isinstance(time_range, TimeRange):
            bounds = time_range.in_timezone(self.timezone)
        else:
            bounds = TimeRange.from_sequence(time_range, self.timezone)

        period = PeriodKind.parse(kind)
        strategy = self._strategies[period]

        try:
            slices = strategy(bounds)
        except (OverflowError, ValueError) as exc:
            raise InvalidArgumentError(
                f"time range exceeds supported calendar: {exc}"
            ) from exc

        logger.debug(
            "Split %s - %s into %d %s slice(s)",
            bounds.start.to_iso8601_string(),
            bounds.end.to_iso8601_string(),
            len(slices),
            period.value
        )
        return slices

    @staticmethod
    def _period_end(next_start: DateTime) -> DateTime:
        """Last instant before the next period begins."""
        return next_start - RESOLUTION

    def _split_days(
        self,
        bounds: TimeRange,
        accept_day: Callable[[DateTime], bool]
    ) -> List[Slice]:
        """
        Walk day by day, keeping accepted days that fit fully inside the range.
        """
        slices: List[Slice] = []
        current = bounds.start.start_of("day")

        while current < bounds.end:
            next_day = current.add(days=1)

            if accept_day(current):
                day_end = self._period_end(next_day)
                if bounds.contains(current, day_end):
                    slices.append(Slice(start=current, end=day_end))

            current = next_day

        return slices

    def _split_daily(self, bounds: TimeRange) -> List[Slice]:
        return self._split_days(bounds, lambda day: True)

    def _split_workdays(self, bounds: TimeRange) -> List[Slice]:
        return self._split_days(bounds, lambda day: day.weekday() not in WEEKEND_DAYS)

    def _split_weekends(self, bounds: TimeRange) -> List[Slice]:
        return self._split_days(bounds, lambda day: day.weekday() in WEEKEND_DAYS)

    def _split_weekly(self, bounds: TimeRange) -> List[Slice]:
        """
        Walk Monday-aligned weeks, keeping weeks that fit fully inside the range.
        """
        slices: List[Slice] = []
        first_day = bounds.start.start_of("day")
        monday = first_day.subtract(days=first_day.weekday())

        # Skip a leading week that ends before the range starts
        if self._period_end(monday.add(weeks=1)) < bounds.start:
            monday = monday.add(weeks=1)

        while monday < bounds.end:
            next_monday = monday.add(weeks=1)
            week_end = self._period_end(next_monday)

            if bounds.contains(monday, week_end):
                slices.append(Slice(start=monday, end=week_end))

            monday = next_monday

        return slices

    def _split_monthly(self, bounds: TimeRange) -> List[Slice]:
        """
        Walk calendar months, emitting one slice per month touched.

        The month containing the range start keeps its day-1 start; the
        month end is clipped to the range end when it would overflow it.
        """
        slices: List[Slice] = []
        current = bounds.start.start_of("month")

        while current < bounds.end:
            next_month = current.add(months=1)
            month_end = self._period_end(next_month)

            if month_end < current or month_end > bounds.end:
                month_end = bounds.end

            slices.append(Slice(start=current, end=month_end))
            current = next_month

        return slices

    def _split_yearly(self, bounds: TimeRange) -> List[Slice]:
        """
        Walk calendar years, emitting only full years inside the range.

        The walk stops at the first year ending after the range end; years
        starting before the range start are skipped.
        """
        slices: List[Slice] = []
        current = bounds.start.start_of("year")

        while current < bounds.end:
            next_year = current.add(years=1)
            year_end = self._period_end(next_year)

            if year_end > bounds.end:
                break

            if current >= bounds.start:
                slices.append(Slice(start=current, end=year_end))

            current = next_year

        return slices


def split_period(
    kind: Any,
    time_range: TimeRange | Sequence[Any],
    timezone: str = DEFAULT_TIMEZONE
) -> List[Slice]:
    """Slice a time range with a one-off splitter for ``timezone``."""
    return PeriodSplitter(timezone=timezone).split(kind, time_range)
