"""Custom exceptions used throughout the lifeboard package."""

from typing import Any, Optional


class LifeBoardError(Exception):
    """Base exception for all lifeboard errors.

    All lifeboard-specific exceptions should inherit from this class.
    This allows catching all simulation errors with a single except clause.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class ConfigurationError(LifeBoardError):
    """Raised when there's an error in configuration.

    This includes:
    - Invalid configuration value
    - Missing required configuration
    - Configuration validation failures
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize configuration error.

        Args:
            config_key: The configuration key that caused the error
            message: Description of what's wrong. If omitted, config_key is
                treated as the message and the key defaults to "configuration".
            details: Additional context
        """
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class InvalidDimensionError(LifeBoardError):
    """Raised when a board is created with a non-positive width or height.

    Examples:
    - Board(0, 10)
    - Board.from_state([]) or a ragged state grid
    """

    def __init__(
        self,
        width: Any,
        height: Any,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if message is None:
            message = (
                f"Invalid board dimensions {width}x{height}: "
                "width and height must be positive integers"
            )
        details = details or {}
        details["width"] = width
        details["height"] = height
        super().__init__(message=message, details=details)
        self.width = width
        self.height = height


class CellNotFoundError(LifeBoardError):
    """Raised when a cell id or position does not exist on the board.

    Examples:
    - set_cell_manually(-1)
    - set_cell_manually(width * height)
    """

    def __init__(
        self,
        cell_id: Any,
        cell_count: int,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if message is None:
            message = f"No cell with id {cell_id!r} (valid ids are 0..{cell_count - 1})"
        details = details or {}
        details["cell_id"] = cell_id
        details["cell_count"] = cell_count
        super().__init__(message=message, details=details)
        self.cell_id = cell_id
        self.cell_count = cell_count


class StaleNeighborDataError(LifeBoardError):
    """Raised when a generation is advanced without fresh neighbor counts.

    Examples:
    - advance_generation() before any compute_neighbor_counts()
    - advance_generation() twice in a row
    - neighbor counts whose dimensions do not match the grid
    """
