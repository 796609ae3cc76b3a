"""Constants and default values for the simulation core."""


class RuleSet:
    """Conway's B3/S23 rule constants."""

    SURVIVAL_COUNTS = frozenset({2, 3})
    """Live cells with this many live neighbors stay alive."""

    BIRTH_COUNTS = frozenset({3})
    """Dead cells with this many live neighbors come alive."""

    MAX_NEIGHBORS = 8
    """Upper bound of a live-neighbor count (full 3x3 window minus the center)."""


# Eight Moore-neighborhood offsets as (row delta, column delta), row-major.
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (d_row, d_col)
    for d_row in (-1, 0, 1)
    for d_col in (-1, 0, 1)
    if (d_row, d_col) != (0, 0)
)

DEFAULT_TICK_INTERVAL_MS = 100
DEFAULT_BOARD_WIDTH = 40
DEFAULT_BOARD_HEIGHT = 20

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def in_bounds(row: int, col: int, height: int, width: int) -> bool:
    """Return True if (row, col) lies on a height x width grid.

    Positions outside the grid are treated as permanently dead by the
    neighbor count; there is no wraparound.
    """
    return 0 <= row < height and 0 <= col < width
