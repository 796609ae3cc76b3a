"""Conway's Game of Life simulation core.

Simulates Life on a fixed-size grid whose border counts as dead. Rendering,
input handling and wall-clock scheduling are left to the caller.

Getting started:
    from lifeboard import SimulationSession, Clock

    session = SimulationSession(width=40, height=20)
    clock = Clock(interval_ms=100)
    clock.subscribe(session)
    session.start()
    clock.tick()
"""

from lifeboard.core.board import Board
from lifeboard.core.cell import Cell
from lifeboard.core.clock import Clock
from lifeboard.core.exceptions import (
    CellNotFoundError,
    ConfigurationError,
    InvalidDimensionError,
    LifeBoardError,
    StaleNeighborDataError,
)
from lifeboard.core.patterns import get_pattern, list_available_patterns
from lifeboard.core.session import SimulationSession
from lifeboard.core.simulation_engine import SimulationEngine
from lifeboard.utils.config_loader import LifeConfig, get_config, load_config

__all__ = [
    # Core
    "Board",
    "Cell",
    "Clock",
    "SimulationEngine",
    "SimulationSession",
    # Patterns
    "get_pattern",
    "list_available_patterns",
    # Configuration
    "LifeConfig",
    "get_config",
    "load_config",
    # Errors
    "LifeBoardError",
    "ConfigurationError",
    "InvalidDimensionError",
    "CellNotFoundError",
    "StaleNeighborDataError",
]
