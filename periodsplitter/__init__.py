"""
periodsplitter - slice time ranges into calendar-aligned periods.
"""

from .domain import (
    DEFAULT_TIMEZONE,
    InvalidArgumentError,
    PeriodKind,
    PeriodSplitter,
    PeriodSplitterError,
    Slice,
    TimeRange,
    split_period,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TIMEZONE",
    "InvalidArgumentError",
    "PeriodKind",
    "PeriodSplitter",
    "PeriodSplitterError",
    "Slice",
    "TimeRange",
    "split_period",
    "__version__",
]
