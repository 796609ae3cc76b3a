"""Core modules for the simulation.

- cell: single grid element (id + alive flag)
- board: grid ownership, neighbor counting and the B3/S23 rule engine
- clock: fixed-cadence pub/sub tick source
- simulation_engine: one generation = count neighbors, then advance
- session: explicit owner of a board with start/stop/reset/tick
- patterns: named seed patterns
"""

from lifeboard.core.board import Board, next_state
from lifeboard.core.cell import Cell
from lifeboard.core.clock import Clock
from lifeboard.core.exceptions import (
    CellNotFoundError,
    ConfigurationError,
    InvalidDimensionError,
    LifeBoardError,
    StaleNeighborDataError,
)
from lifeboard.core.patterns import (
    PatternRegistry,
    get_pattern,
    list_available_patterns,
    register_pattern,
)
from lifeboard.core.session import SimulationSession, SimulationState
from lifeboard.core.simulation_engine import SimulationEngine

__all__ = [
    # Grid
    "Cell",
    "Board",
    "next_state",
    # Timing / orchestration
    "Clock",
    "SimulationEngine",
    "SimulationSession",
    "SimulationState",
    # Patterns
    "PatternRegistry",
    "get_pattern",
    "list_available_patterns",
    "register_pattern",
    # Errors
    "LifeBoardError",
    "ConfigurationError",
    "InvalidDimensionError",
    "CellNotFoundError",
    "StaleNeighborDataError",
]
