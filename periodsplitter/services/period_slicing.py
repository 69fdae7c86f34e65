"""
Application service for slicing caller-supplied time ranges.

The service sits between outer surfaces (request payloads, the CLI) and the
domain-level ``PeriodSplitter``: it parses and converts inputs in the
configured zone, delegates the calendar work, and shapes the output.
"""

from __future__ import annotations

import logging
from typing import Any, List, Sequence, Tuple

import pendulum
from pendulum import DateTime

from ..config import AppConfig
from ..domain.exceptions import InvalidArgumentError
from ..domain.models import RESOLUTION, PeriodKind, Slice, TimeRange
from ..domain.period_splitter import PeriodSplitter

logger = logging.getLogger(__name__)

DATE_FORMAT = "YYYY-MM-DD"


class PeriodSlicingService:
    """
    Orchestrates input parsing and period slicing.

    The splitter is injected so tests can supply one bound to another zone.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        splitter: PeriodSplitter | None = None,
    ) -> None:
        self._config = config or AppConfig()
        self._splitter = splitter or PeriodSplitter(timezone=self._config.timezone)

    @property
    def timezone(self) -> str:
        """Zone the splitter computes boundaries in."""
        return self._splitter.timezone

    def split(self, kind: Any, time_range: TimeRange | Sequence[Any]) -> List[Slice]:
        """Slice a range, falling back to the configured default period."""
        period = self._config.default_period if kind is None else kind
        return self._splitter.split(period, time_range)

    def split_millis(
        self,
        kind: Any,
        time_range: Sequence[Any] | None,
    ) -> List[Tuple[int, int]]:
        """
        Slice an epoch-millisecond range, as received in a request payload.

        Returns:
            List of ``(start_ms, end_ms)`` pairs
        """
        return [piece.to_millis() for piece in self.split(kind, time_range)]

    def split_dates(self, kind: Any, start: str, end: str) -> List[Slice]:
        """
        Slice a range given as date or ISO-8601 strings.

        A bare date means start-of-day for ``start`` and the last instant of
        the day for ``end``.
        """
        time_range = TimeRange(
            start=self._parse_boundary(start, end_of_day=False),
            end=self._parse_boundary(end, end_of_day=True),
        )
        logger.debug("Parsed %r - %r as %s - %s", start, end, time_range.start, time_range.end)
        return self.split(kind, time_range)

    def describe(self, kind: Any) -> str:
        """Return the human-readable label of a period kind."""
        return PeriodKind.parse(kind).label

    def _parse_boundary(self, value: str, *, end_of_day: bool) -> DateTime:
        text = value.strip()

        try:
            if len(text) == len(DATE_FORMAT):
                day = pendulum.from_format(text, DATE_FORMAT, tz=self.timezone)
                if end_of_day:
                    return day.start_of("day").add(days=1) - RESOLUTION
                return day.start_of("day")

            parsed = pendulum.parse(text, tz=self.timezone)
        except Exception as exc:
            raise InvalidArgumentError(f"Could not parse date '{value}': {exc}") from exc

        if not isinstance(parsed, DateTime):
            raise InvalidArgumentError(f"Could not parse date '{value}': not a point in time")

        return parsed.in_timezone(self.timezone)
