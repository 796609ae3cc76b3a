"""Simulation engine for advancing a board generation by generation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lifeboard.core.board import Board

logger = logging.getLogger(__name__)


class SimulationEngine:
    """Minimal simulation engine.

    One step is always a full neighbor count followed by a generation
    advance, in that order.
    """

    def run(self, board: "Board", generations: int = 1) -> None:
        """Advance the board by the given number of generations."""
        if generations < 0:
            raise ValueError("generations must be >= 0")
        for _ in range(generations):
            self.step(board)

    def step(self, board: "Board") -> None:
        """Advance the board by exactly one generation."""
        board.compute_neighbor_counts()
        board.advance_generation()
        logger.debug(f"Stepped board, population={board.population}")
