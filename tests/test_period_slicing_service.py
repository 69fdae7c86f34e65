"""
Tests for the PeriodSlicingService orchestration layer.
"""

import pendulum
import pytest

from periodsplitter.config import AppConfig
from periodsplitter.domain.exceptions import InvalidArgumentError
from periodsplitter.domain.models import PeriodKind
from periodsplitter.domain.period_splitter import PeriodSplitter
from periodsplitter.services.period_slicing import PeriodSlicingService

TZ = "Asia/Shanghai"


class RecordingSplitter(PeriodSplitter):
    """Splitter that remembers the arguments it was called with."""

    def __init__(self, timezone: str = TZ):
        super().__init__(timezone=timezone)
        self.calls = []

    def split(self, kind, time_range):
        self.calls.append((kind, time_range))
        return super().split(kind, time_range)


def test_split_millis_returns_millisecond_pairs():
    """Payload-style input yields payload-style output."""
    service = PeriodSlicingService()
    start_ms = 1_717_171_200_000  # 2024-06-01 00:00 Asia/Shanghai

    pairs = service.split_millis("daily", [start_ms, start_ms + 2 * 86_400_000 - 1])

    assert pairs == [
        (start_ms, start_ms + 86_400_000 - 1),
        (start_ms + 86_400_000, start_ms + 2 * 86_400_000 - 1),
    ]


def test_split_millis_rejects_missing_range():
    """A missing payload range is reported as a format error."""
    service = PeriodSlicingService()

    with pytest.raises(InvalidArgumentError, match="time range format error"):
        service.split_millis(PeriodKind.DAILY, None)


def test_split_dates_expands_bare_dates_to_whole_days():
    """Bare dates cover the full first and last day."""
    service = PeriodSlicingService()

    slices = service.split_dates(PeriodKind.MONTHLY, "2024-01-15", "2024-03-10")

    assert len(slices) == 3
    assert slices[-1].start == pendulum.datetime(2024, 3, 1, tz=TZ)
    assert slices[-1].end == pendulum.datetime(2024, 3, 10, 23, 59, 59, 999_000, tz=TZ)


def test_split_dates_workdays_of_full_week():
    """Monday to Sunday as dates gives five workdays."""
    service = PeriodSlicingService()

    slices = service.split_dates("workday", "2024-06-24", "2024-06-30")

    assert len(slices) == 5


def test_split_dates_accepts_iso_timestamps():
    """ISO strings with an offset are converted into the reference zone."""
    splitter = RecordingSplitter()
    service = PeriodSlicingService(splitter=splitter)

    service.split_dates("daily", "2024-06-01T12:00:00+00:00", "2024-06-03T00:00:00")

    _, time_range = splitter.calls[0]
    assert time_range.start.hour == 20
    assert time_range.start.day == 1
    assert time_range.end == pendulum.datetime(2024, 6, 3, tz=TZ)


@pytest.mark.parametrize("start", ["2024-13-01", "not-a-date", "yesterday-ish"])
def test_split_dates_rejects_unparseable_input(start):
    """Unparseable dates raise InvalidArgumentError."""
    service = PeriodSlicingService()

    with pytest.raises(InvalidArgumentError, match="Could not parse date"):
        service.split_dates("daily", start, "2024-06-30")


def test_missing_kind_uses_configured_default():
    """Without a kind the configured default period applies."""
    splitter = RecordingSplitter()
    service = PeriodSlicingService(
        config=AppConfig(default_period="weekend"),
        splitter=splitter
    )

    slices = service.split_dates(None, "2024-06-24", "2024-06-30")

    assert splitter.calls[0][0] == PeriodKind.WEEKEND
    assert len(slices) == 2


def test_splitter_zone_comes_from_config():
    """The default splitter is bound to the configured zone."""
    service = PeriodSlicingService(config=AppConfig(timezone="Europe/Berlin"))

    slices = service.split_dates("daily", "2024-06-01", "2024-06-01")

    assert service.timezone == "Europe/Berlin"
    assert slices[0].start.timezone_name == "Europe/Berlin"


def test_describe():
    """Labels are exposed for display layers."""
    assert PeriodSlicingService().describe("weekly") == "every week"
