"""Clock interface for the tick cadence that drives a simulation session."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol


class ClockSubscriber(Protocol):
    """Advanced by the clock; ``count`` is the number of elapsed ticks."""

    def tick(self, count: int = 1) -> object:
        ...


class IClock(ABC):
    """Cadence source used by sessions and external drivers.

    The interval may change between ticks (variable cadence); the elapsed
    time is accumulated per tick at the interval in force at that moment.
    """

    @property
    @abstractmethod
    def interval_ms(self) -> int:
        """Time between ticks in milliseconds."""
        ...

    @property
    @abstractmethod
    def tick_count(self) -> int:
        ...

    @property
    @abstractmethod
    def elapsed_ms(self) -> int:
        """Simulated time covered by all ticks so far."""
        ...

    @abstractmethod
    def set_interval(self, interval_ms: int) -> None:
        ...

    @abstractmethod
    def subscribe(self, subscriber: ClockSubscriber) -> None:
        ...

    @abstractmethod
    def unsubscribe(self, subscriber: ClockSubscriber) -> None:
        ...

    @abstractmethod
    def tick(self, count: int = 1) -> None:
        """Advance the clock and pass ``count`` to every subscriber."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Zero the tick count and elapsed time; the interval is kept."""
        ...
