"""
Domain-specific exception hierarchy for the period splitter.
"""


class PeriodSplitterError(Exception):
    """Base class for all application-level errors."""


class InvalidArgumentError(PeriodSplitterError, ValueError):
    """Raised when a time range or period kind cannot be interpreted."""
