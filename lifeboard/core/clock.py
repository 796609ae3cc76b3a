"""Fixed or variable cadence tick source for simulation sessions."""

from __future__ import annotations

import logging

from lifeboard.interfaces.clock import ClockSubscriber, IClock
from lifeboard.utils.consts import DEFAULT_TICK_INTERVAL_MS

logger = logging.getLogger(__name__)


def _validate_interval(interval_ms: int) -> int:
    if isinstance(interval_ms, bool) or not isinstance(interval_ms, int):
        raise ValueError("Clock interval must be an integer number of milliseconds")
    if interval_ms <= 0:
        raise ValueError("Clock interval must be positive")
    return interval_ms


class Clock(IClock):
    """Pub/sub clock that hands each tick batch to its subscribers.

    The clock never sleeps. The external driver calls tick() and waits
    ``interval_seconds`` between calls. Exceptions raised by a subscriber
    propagate to the driver; the remaining subscribers are not notified for
    that batch.
    """

    def __init__(self, interval_ms: int = DEFAULT_TICK_INTERVAL_MS):
        self._interval_ms = _validate_interval(interval_ms)
        self._tick_count = 0
        self._elapsed_ms = 0
        self._subscribers: list[ClockSubscriber] = []

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def interval_seconds(self) -> float:
        return self._interval_ms / 1000.0

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def elapsed_ms(self) -> int:
        return self._elapsed_ms

    def set_interval(self, interval_ms: int) -> None:
        """Change the cadence; takes effect from the next tick."""
        self._interval_ms = _validate_interval(interval_ms)
        logger.debug(f"Clock interval set to {interval_ms} ms")

    def subscribe(self, subscriber: ClockSubscriber) -> None:
        if subscriber not in self._subscribers:
            self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: ClockSubscriber) -> None:
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    def tick(self, count: int = 1) -> None:
        if count < 0:
            raise ValueError("count must be >= 0")
        if count == 0:
            return

        self._tick_count += count
        self._elapsed_ms += count * self._interval_ms

        for subscriber in list(self._subscribers):
            subscriber.tick(count)

    def reset(self) -> None:
        self._tick_count = 0
        self._elapsed_ms = 0
