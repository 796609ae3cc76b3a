import argparse
import logging
import sys
import time
from pathlib import Path

# Ensure local repo package is used even if another "lifeboard" is on PYTHONPATH.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lifeboard import Clock, SimulationSession, get_pattern, load_config
from lifeboard.core.patterns import pattern_extent


class TerminalRenderer:
    """Prints each generation as a block of characters."""

    def __init__(self, alive: str = "#", dead: str = "."):
        self.alive = alive
        self.dead = dead

    def render(self, state: list[list[int]], generation: int) -> None:
        print(f"generation {generation}")
        for row in state:
            print("".join(self.alive if value else self.dead for value in row))
        print()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run Game of Life in the terminal.")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML config (defaults to the bundled lifeboard/config.yaml)",
    )
    parser.add_argument("--width", type=int, default=None, help="Override board width")
    parser.add_argument("--height", type=int, default=None, help="Override board height")
    parser.add_argument(
        "--generations",
        type=int,
        default=20,
        help="Number of generations to run",
    )
    parser.add_argument(
        "--pattern",
        default=None,
        help="Seed a dead board with a named pattern (e.g. glider) instead of noise",
    )
    parser.add_argument(
        "--no-sleep",
        action="store_true",
        help="Do not wait between ticks",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    config = load_config(args.config)
    logging.basicConfig(level=config.logging.level, format="%(levelname)s: %(message)s")

    session = SimulationSession.from_config(config)
    if args.width is not None or args.height is not None or args.pattern:
        session.reset(
            width=args.width,
            height=args.height,
            randomize=False if args.pattern else None,
        )
    if args.pattern:
        pattern = get_pattern(args.pattern)
        pattern_height, pattern_width = pattern_extent(pattern)
        session.board.place_pattern(
            pattern,
            row=max(0, (session.board.height - pattern_height) // 2),
            col=max(0, (session.board.width - pattern_width) // 2),
        )

    session.attach_renderer(TerminalRenderer())

    clock = Clock(interval_ms=config.timing.tick_interval_ms)
    clock.subscribe(session)
    session.start()

    for _ in range(args.generations):
        clock.tick()
        if not args.no_sleep:
            time.sleep(clock.interval_seconds)

    session.stop()


if __name__ == "__main__":
    main()
