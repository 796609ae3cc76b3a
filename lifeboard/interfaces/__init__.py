"""Interface abstractions for lifeboard.

Defines the contracts between the simulation core and its external drivers:
- IClock, ClockSubscriber: tick cadence source and its subscribers
- StateRenderer: presentation layer that draws board snapshots
"""

from lifeboard.interfaces.clock import ClockSubscriber, IClock
from lifeboard.interfaces.renderer import StateRenderer

__all__ = [
    "IClock",
    "ClockSubscriber",
    "StateRenderer",
]
