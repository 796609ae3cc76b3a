"""Helpers for loading and validating lifeboard configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
import threading

import yaml  # type: ignore[import-untyped]

from lifeboard.core.exceptions import ConfigurationError
from lifeboard.utils.consts import (
    DEFAULT_BOARD_HEIGHT,
    DEFAULT_BOARD_WIDTH,
    DEFAULT_TICK_INTERVAL_MS,
    LOG_LEVELS,
)


@dataclass(frozen=True)
class BoardConfig:
    width: int = DEFAULT_BOARD_WIDTH
    height: int = DEFAULT_BOARD_HEIGHT
    randomize: bool = True
    seed: Optional[int] = None


@dataclass(frozen=True)
class TimingConfig:
    tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"


@dataclass(frozen=True)
class LifeConfig:
    board: BoardConfig
    timing: TimingConfig
    logging: LoggingConfig


# Configuration cache with thread safety
_LOADER_CACHE: dict[str, LifeConfig] = {}
_CACHE_LOCK = threading.RLock()
_DEFAULT_KEY = "default"


def _get_config_path(path: Optional[str] = None) -> str:
    if path is None:
        # Bundled config lives next to the package: lifeboard/config.yaml
        base = Path(__file__).parent.parent / "config.yaml"
        path = str(base)

    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except Exception as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError("Config root must be a mapping")
    return raw


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigurationError(config_key=name, message="section must be a mapping")
    return value


def _as_positive_int(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            config_key=key, message="must be an integer", details={"value": value}
        )
    if value <= 0:
        raise ConfigurationError(
            config_key=key, message="must be positive", details={"value": value}
        )
    return value


def _as_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(
            config_key=key, message="must be true or false", details={"value": value}
        )
    return value


def _build_board_cfg(board_raw: dict[str, Any]) -> BoardConfig:
    seed = board_raw.get("seed")
    if seed is not None:
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise ConfigurationError(
                config_key="board.seed", message="must be an integer or null"
            )
    return BoardConfig(
        width=_as_positive_int("board.width", board_raw.get("width", DEFAULT_BOARD_WIDTH)),
        height=_as_positive_int(
            "board.height", board_raw.get("height", DEFAULT_BOARD_HEIGHT)
        ),
        randomize=_as_bool("board.randomize", board_raw.get("randomize", True)),
        seed=seed,
    )


def _build_timing_cfg(timing_raw: dict[str, Any]) -> TimingConfig:
    return TimingConfig(
        tick_interval_ms=_as_positive_int(
            "timing.tick_interval_ms",
            timing_raw.get("tick_interval_ms", DEFAULT_TICK_INTERVAL_MS),
        )
    )


def _build_logging_cfg(logging_raw: dict[str, Any]) -> LoggingConfig:
    level = str(logging_raw.get("level", "INFO")).upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            config_key="logging.level",
            message=f"must be one of {', '.join(LOG_LEVELS)}",
            details={"value": level},
        )
    return LoggingConfig(level=level)


def _parse_life_cfg_from_dict(raw: dict[str, Any]) -> LifeConfig:
    return LifeConfig(
        board=_build_board_cfg(_section(raw, "board")),
        timing=_build_timing_cfg(_section(raw, "timing")),
        logging=_build_logging_cfg(_section(raw, "logging")),
    )


def load_config(path: Optional[str] = None) -> LifeConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Optional path to YAML config. If None, load the bundled
            lifeboard/config.yaml. Missing sections and keys take defaults.

    Returns:
        LifeConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(path=path))
    raw = _load_yaml_file(p)

    return _parse_life_cfg_from_dict(raw=raw)


def get_config() -> LifeConfig:
    """Return the bundled config, loading and caching it on first use.

    THREAD SAFETY: This function is thread-safe. Multiple threads can
    safely call this concurrently.
    """
    with _CACHE_LOCK:
        if _DEFAULT_KEY not in _LOADER_CACHE:
            _LOADER_CACHE[_DEFAULT_KEY] = load_config()
        return _LOADER_CACHE[_DEFAULT_KEY]


def clear_config_cache() -> None:
    """Clear the cached configuration.

    All subsequent calls to get_config() will reload from disk.
    """
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()
