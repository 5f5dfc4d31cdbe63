"""
Date sources for request builders.

The transaction searches default their upper date bound to "today"; the
clock is injected so that default is reproducible.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from datetime import date, datetime


class Clock(ABC):
    """Source of the current calendar date."""

    @abstractmethod
    def today(self) -> date:
        """Return the current date."""
        pass


class SystemClock(Clock):
    """Clock backed by the local wall clock."""

    def today(self) -> date:
        return date.today()


class FixedClock(Clock):
    """Clock pinned to a single date, for tests and replays."""

    def __init__(self, fixed: date):
        if isinstance(fixed, datetime):
            fixed = fixed.date()
        self._fixed = fixed

    def today(self) -> date:
        return self._fixed

    def __repr__(self) -> str:
        return f"FixedClock({self._fixed.isoformat()})"


__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
]
