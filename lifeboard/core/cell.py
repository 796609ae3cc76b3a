"""Single grid cell: a stable id plus binary life state."""

from __future__ import annotations


class Cell:
    """One element of a Board.

    The id is assigned once, in row-major order, when the owning Board is
    built. Only the Board flips ``alive``.
    """

    __slots__ = ("_id", "alive")

    def __init__(self, cell_id: int, alive: bool = False):
        self._id = cell_id
        self.alive = bool(alive)

    @property
    def id(self) -> int:
        return self._id

    def is_alive(self) -> bool:
        return self.alive

    def __repr__(self) -> str:
        state = "alive" if self.alive else "dead"
        return f"Cell(id={self._id}, {state})"
