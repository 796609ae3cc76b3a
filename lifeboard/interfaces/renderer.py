"""Presentation seam: what a session needs from a renderer."""

from __future__ import annotations

from typing import Protocol


class StateRenderer(Protocol):
    """Anything that can draw a board snapshot.

    ``state`` is a fresh height x width grid of 0/1 integers; renderers may
    keep it. Mapping it onto a visual surface is entirely up to them.
    """

    def render(self, state: list[list[int]], generation: int) -> None:
        ...
