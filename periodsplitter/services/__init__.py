"""
Service layer helpers that orchestrate input handling and domain logic.
"""

from .period_slicing import PeriodSlicingService

__all__ = ["PeriodSlicingService"]
