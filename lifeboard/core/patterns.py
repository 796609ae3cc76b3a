"""Pattern registry and the built-in seed patterns.

Patterns are stored as (row, col) offsets of their live cells relative to
the pattern's top-left corner. Place one with ``Board.place_pattern``.
"""

from __future__ import annotations

Pattern = tuple[tuple[int, int], ...]


class PatternRegistry:
    """Registry of named seed patterns.

    THREAD SAFETY: Not thread-safe. Register patterns during module
    initialization before any threads are spawned.
    """

    def __init__(self):
        self._patterns: dict[str, Pattern] = {}

    def register(self, name: str, cells) -> None:
        """Register a pattern under a unique name."""
        if name in self._patterns:
            raise ValueError(f"Pattern '{name}' already registered")
        pattern = tuple(sorted((int(r), int(c)) for r, c in cells))
        if any(r < 0 or c < 0 for r, c in pattern):
            raise ValueError(f"Pattern '{name}' has negative offsets")
        self._patterns[name] = pattern

    def get(self, name: str) -> Pattern:
        """Get a pattern by name."""
        if name not in self._patterns:
            raise ValueError(
                f"Unknown pattern '{name}'. Available: {list(self._patterns.keys())}"
            )
        return self._patterns[name]

    def list_patterns(self) -> list[str]:
        """List all registered pattern names."""
        return list(self._patterns.keys())


# Global registry
_REGISTRY = PatternRegistry()


def register_pattern(name: str, cells) -> None:
    """Register a pattern globally."""
    _REGISTRY.register(name, cells)


def get_pattern(name: str) -> Pattern:
    """Get a pattern by name."""
    return _REGISTRY.get(name)


def list_available_patterns() -> list[str]:
    """List all registered patterns."""
    return _REGISTRY.list_patterns()


def pattern_extent(pattern: Pattern) -> tuple[int, int]:
    """Return the (height, width) of the pattern's bounding box."""
    if not pattern:
        return 0, 0
    return (
        max(r for r, _ in pattern) + 1,
        max(c for _, c in pattern) + 1,
    )


register_pattern("glider", [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)])
register_pattern("block", [(0, 0), (0, 1), (1, 0), (1, 1)])
register_pattern("blinker", [(0, 0), (0, 1), (0, 2)])
register_pattern("beehive", [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)])
register_pattern("toad", [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)])
