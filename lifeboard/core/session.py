"""Simulation session: the single owner of a board and its lifecycle."""

from __future__ import annotations

import logging
import random
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

from lifeboard.core.board import Board
from lifeboard.core.simulation_engine import SimulationEngine

if TYPE_CHECKING:
    from lifeboard.interfaces.renderer import StateRenderer
    from lifeboard.utils.config_loader import LifeConfig

logger = logging.getLogger(__name__)


class SimulationState(Enum):
    RUNNING = auto()
    PAUSED = auto()


class SimulationSession:
    """Coordinator for ticking a board and feeding renderers.

    A tick renders the current generation, then counts neighbors and
    advances, mirroring the read -> render -> count -> advance cycle an
    external driver runs at a fixed cadence. Subscribe the session to a
    Clock to have it ticked.

    THREAD SAFETY: Not thread-safe. Driver ticks and manual toggles must be
    dispatched from the same thread (e.g. one event queue).
    """

    def __init__(
        self,
        width: int,
        height: int,
        randomize: bool = True,
        rng: Optional[random.Random] = None,
        engine: Optional[SimulationEngine] = None,
    ):
        self._rng = rng
        self._randomize = randomize
        self._engine = engine or SimulationEngine()
        self._board = Board(width, height, randomize=randomize, rng=rng)
        self._generation = 0
        self._state = SimulationState.PAUSED
        self._renderers: list[StateRenderer] = []

    @classmethod
    def from_config(
        cls, config: "LifeConfig", rng: Optional[random.Random] = None
    ) -> SimulationSession:
        """Build a session from a loaded configuration.

        If no rng is given and the config pins a seed, a seeded generator is
        used so the initial board is reproducible.
        """
        board_cfg = config.board
        if rng is None and board_cfg.seed is not None:
            rng = random.Random(board_cfg.seed)
        return cls(
            board_cfg.width,
            board_cfg.height,
            randomize=board_cfg.randomize,
            rng=rng,
        )

    @property
    def board(self) -> Board:
        return self._board

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == SimulationState.RUNNING

    def snapshot(self) -> list[list[int]]:
        return self._board.get_state()

    def attach_renderer(self, renderer: "StateRenderer") -> None:
        if renderer not in self._renderers:
            self._renderers.append(renderer)

    def detach_renderer(self, renderer: "StateRenderer") -> None:
        if renderer in self._renderers:
            self._renderers.remove(renderer)

    def start(self) -> None:
        if not self.is_running:
            logger.info(f"Simulation started at generation {self._generation}")
        self._state = SimulationState.RUNNING

    def stop(self) -> None:
        if self.is_running:
            logger.info(f"Simulation stopped at generation {self._generation}")
        self._state = SimulationState.PAUSED

    def render(self) -> None:
        """Push the current generation to every attached renderer."""
        for renderer in list(self._renderers):
            renderer.render(self._board.get_state(), self._generation)

    def step(self) -> int:
        """Render and advance one generation, whether or not running."""
        self.render()
        self._engine.step(self._board)
        self._generation += 1
        return self._generation

    def tick(self, count: int = 1) -> int:
        """Advance ``count`` generations if running; otherwise do nothing.

        Returns:
            The current generation number
        """
        if count < 0:
            raise ValueError("count must be >= 0")
        if not self.is_running:
            return self._generation
        for _ in range(count):
            self.step()
        return self._generation

    def toggle(self, cell_id: int | str) -> None:
        """Flip one cell. See Board.set_cell_manually."""
        self._board.set_cell_manually(cell_id)

    def reset(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        randomize: Optional[bool] = None,
    ) -> Board:
        """Discard the board and build a new one.

        Omitted arguments reuse the current values. The new board is fully
        built before it replaces the old one, so a failed reset leaves the
        session untouched. The running state is preserved.

        Raises:
            InvalidDimensionError: If the new dimensions are invalid
        """
        width = self._board.width if width is None else width
        height = self._board.height if height is None else height
        randomize = self._randomize if randomize is None else randomize

        board = Board(width, height, randomize=randomize, rng=self._rng)
        self._board = board
        self._randomize = randomize
        self._generation = 0
        logger.info(f"Session reset to a {width}x{height} board")
        return board
