"""Abstract interface for clock access."""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract clock so timestamps on issues and hooks are injectable."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        ...
