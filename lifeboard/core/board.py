"""Game of Life board: grid ownership, neighbor counting and the rule engine.

A generation is advanced in two passes that must not overlap:

1. ``compute_neighbor_counts()`` slides a 3x3 window over every cell and
   records how many of the (up to) eight surrounding cells are alive.
2. ``advance_generation()`` applies B3/S23 to every cell using only those
   recorded counts.

Because every count is captured before any cell changes, no cell can see a
neighbor's next-generation state within the same step.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Iterable, Optional, Sequence

from lifeboard.core.cell import Cell
from lifeboard.core.exceptions import (
    CellNotFoundError,
    InvalidDimensionError,
    StaleNeighborDataError,
)
from lifeboard.utils.consts import NEIGHBOR_OFFSETS, RuleSet, in_bounds

logger = logging.getLogger(__name__)


def next_state(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rules to a single cell.

    Args:
        alive: Current cell state
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state
    """
    if alive:
        return live_neighbors in RuleSet.SURVIVAL_COUNTS
    return live_neighbors in RuleSet.BIRTH_COUNTS


def _is_dimension(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


class Board:
    """A fixed-size, dead-bordered Game of Life grid.

    The board exclusively owns its cells. Resizing is not supported: build a
    new Board instead.

    THREAD SAFETY: Not thread-safe. Manual toggles and generation steps must
    be serialized onto one thread of control.
    """

    def __init__(
        self,
        width: int,
        height: int,
        randomize: bool = True,
        rng: Optional[random.Random] = None,
    ):
        """Allocate a height x width grid of cells in row-major order.

        Args:
            width: Number of columns, at least 1
            height: Number of rows, at least 1
            randomize: If True every cell starts alive with probability 1/2,
                otherwise every cell starts dead
            rng: Random source used when randomize is True. Defaults to the
                module-level ``random`` generator.

        Raises:
            InvalidDimensionError: If width or height is not a positive integer
        """
        if not (_is_dimension(width) and _is_dimension(height)):
            raise InvalidDimensionError(width, height)

        self._width = width
        self._height = height
        self._neighbor_counts: Optional[list[list[int]]] = None

        source = rng if rng is not None else random
        self._cells: list[list[Cell]] = []
        cell_id = 0
        for _row in range(height):
            row = []
            for _col in range(width):
                alive = bool(source.getrandbits(1)) if randomize else False
                row.append(Cell(cell_id, alive))
                cell_id += 1
            self._cells.append(row)

        logger.debug(
            f"Created {width}x{height} board (randomize={randomize}, "
            f"population={self.population})"
        )

    @classmethod
    def from_state(cls, state: Sequence[Sequence[Any]]) -> Board:
        """Build a board whose cells mirror a rectangular grid of 0/1 values.

        Raises:
            InvalidDimensionError: If the grid is empty or ragged
            ValueError: If a value is not 0 or 1
        """
        height = len(state)
        width = len(state[0]) if height else 0
        if any(len(row) != width for row in state):
            raise InvalidDimensionError(
                width,
                height,
                message="State grid must be rectangular (all rows the same length)",
            )

        board = cls(width, height, randomize=False)
        for r, row in enumerate(state):
            for c, value in enumerate(row):
                if isinstance(value, str) or value not in (0, 1):
                    raise ValueError(
                        f"Cell value at ({r}, {c}) must be 0 or 1, got {value!r}"
                    )
                board._cells[r][c].alive = bool(value)
        return board

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self._width * self._height

    @property
    def cells(self) -> list[list[Cell]]:
        """Row-major grid of cells; ``cells[r][c].id == r * width + c``."""
        return self._cells

    @property
    def neighbor_counts(self) -> Optional[list[list[int]]]:
        """Copy of the last computed counts, or None once they were consumed."""
        if self._neighbor_counts is None:
            return None
        return [row[:] for row in self._neighbor_counts]

    @property
    def population(self) -> int:
        return sum(cell.alive for row in self._cells for cell in row)

    def cell_at(self, row: int, col: int) -> Cell:
        if not in_bounds(row, col, self._height, self._width):
            raise CellNotFoundError((row, col), self.size)
        return self._cells[row][col]

    def get_state(self) -> list[list[int]]:
        """Snapshot of the grid as 0/1 integers; never aliases the cells."""
        return [[int(cell.alive) for cell in row] for row in self._cells]

    def live_cells(self) -> list[tuple[int, int]]:
        """Sorted (row, col) positions of every live cell."""
        return [
            (r, c)
            for r, row in enumerate(self._cells)
            for c, cell in enumerate(row)
            if cell.alive
        ]

    def format_state(self, alive: str = "1", dead: str = "0") -> str:
        """Render the grid as text, one line per row, cells separated by spaces."""
        return "\n".join(
            " ".join(alive if cell.alive else dead for cell in row)
            for row in self._cells
        )

    def __str__(self) -> str:
        return self.format_state()

    def __repr__(self) -> str:
        return (
            f"Board(width={self._width}, height={self._height}, "
            f"population={self.population})"
        )

    def compute_neighbor_counts(self) -> list[list[int]]:
        """Count live neighbors for every cell in one pass over the grid.

        Positions beyond the first/last row or column count as dead.

        Returns:
            A height x width grid of counts in the range 0-8
        """
        height, width = self._height, self._width
        cells = self._cells
        counts: list[list[int]] = []
        for r in range(height):
            row_counts = []
            for c in range(width):
                total = 0
                for d_row, d_col in NEIGHBOR_OFFSETS:
                    nr, nc = r + d_row, c + d_col
                    if in_bounds(nr, nc, height, width) and cells[nr][nc].alive:
                        total += 1
                row_counts.append(total)
            counts.append(row_counts)

        self._neighbor_counts = counts
        return [row[:] for row in counts]

    def _check_neighbor_counts(self) -> list[list[int]]:
        counts = self._neighbor_counts
        if counts is None:
            logger.warning("advance_generation() called without neighbor counts")
            raise StaleNeighborDataError(
                "No neighbor counts for the current generation; "
                "call compute_neighbor_counts() first"
            )

        rows = len(counts)
        cols = len(counts[0]) if rows else 0
        if rows != self._height or any(len(row) != self._width for row in counts):
            logger.warning(
                f"Neighbor counts {cols}x{rows} do not match board "
                f"{self._width}x{self._height}"
            )
            raise StaleNeighborDataError(
                "Neighbor counts do not match the board dimensions",
                details={
                    "expected": (self._height, self._width),
                    "actual": (rows, cols),
                },
            )
        return counts

    def advance_generation(self) -> None:
        """Move every cell to the next generation using the stored counts.

        Precondition: ``compute_neighbor_counts()`` ran after the previous
        advance. The counts are consumed here, so calling this twice in a row
        raises. A manual toggle made after counting is not reflected in the
        counts used for this step.

        Raises:
            StaleNeighborDataError: If no matching counts are available
        """
        counts = self._check_neighbor_counts()
        for row_cells, row_counts in zip(self._cells, counts):
            for cell, count in zip(row_cells, row_counts):
                cell.alive = next_state(cell.alive, count)
        self._neighbor_counts = None

    def _resolve_id(self, cell_id: Any) -> int:
        # Input layers may hand over ids as strings (e.g. element attributes).
        if isinstance(cell_id, bool):
            raise CellNotFoundError(cell_id, self.size)
        if isinstance(cell_id, str):
            try:
                cell_id = int(cell_id.strip())
            except ValueError as exc:
                raise CellNotFoundError(cell_id, self.size) from exc
        if not isinstance(cell_id, int) or not 0 <= cell_id < self.size:
            raise CellNotFoundError(cell_id, self.size)
        return cell_id

    def set_cell_manually(self, cell_id: int | str) -> None:
        """Toggle the state of the cell with the given id.

        Ids may be ints or strings holding a whole decimal integer (surrounding
        whitespace allowed). Partially numeric strings such as "5abc" and
        floats such as 5.0 are rejected rather than truncated.

        Raises:
            CellNotFoundError: If no cell has that id
        """
        index = self._resolve_id(cell_id)
        row, col = divmod(index, self._width)
        cell = self._cells[row][col]
        cell.alive = not cell.alive
        logger.debug(f"Toggled cell {index} -> {'alive' if cell.alive else 'dead'}")

    def place_pattern(
        self, cells: Iterable[tuple[int, int]], row: int = 0, col: int = 0
    ) -> None:
        """Set the given (row, col) offsets alive, shifted by (row, col).

        Either every position is placed or none is.

        Raises:
            CellNotFoundError: If any shifted position falls off the board
        """
        targets = [(row + d_row, col + d_col) for d_row, d_col in cells]
        for target in targets:
            if not in_bounds(target[0], target[1], self._height, self._width):
                raise CellNotFoundError(target, self.size)
        for r, c in targets:
            self._cells[r][c].alive = True
