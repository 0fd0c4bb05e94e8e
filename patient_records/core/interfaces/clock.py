"""
Clock interface definition.

Business rules that depend on "now" or "today" read time through this
interface so tests can pin it to a fixed instant.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime


class IClock(ABC):
    """Source of the current time."""

    @property
    @abstractmethod
    def utc_now(self) -> datetime:
        """Current date and time as an aware UTC datetime."""
        raise NotImplementedError

    @property
    @abstractmethod
    def now(self) -> datetime:
        """Current local date and time."""
        raise NotImplementedError

    @property
    @abstractmethod
    def today(self) -> date:
        """Current local date."""
        raise NotImplementedError
