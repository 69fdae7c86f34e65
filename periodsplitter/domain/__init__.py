"""
Domain layer - Pure calendar slicing logic without external dependencies.
"""

from .exceptions import InvalidArgumentError, PeriodSplitterError
from .models import DEFAULT_TIMEZONE, PeriodKind, Slice, TimeRange
from .period_splitter import PeriodSplitter, split_period

__all__ = [
    "DEFAULT_TIMEZONE",
    "InvalidArgumentError",
    "PeriodKind",
    "PeriodSplitter",
    "PeriodSplitterError",
    "Slice",
    "TimeRange",
    "split_period",
]
