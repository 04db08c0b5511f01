"""A tiny text adventure about an isopod looking for a home."""

import sys

from .config import Config
from .engine.errors import WorldLoadError
from .engine.loader import default_world_path, load_world
from .logging import configure_logging, get_logger
from .session import GameSession, play

__all__ = ["main", "play", "Config", "GameSession"]


def main() -> None:
    """Entry point for the isopod-adventure command."""
    config = Config.from_env()

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )

    logger = get_logger(__name__)
    world_path = config.world_file or default_world_path()

    try:
        world = load_world(world_path)
    except WorldLoadError as exc:
        logger.error("world_load_failed", path=str(world_path), error=str(exc))
        print(f"isopod-adventure: {exc}", file=sys.stderr)
        sys.exit(1)

    logger.info(
        "world_loaded",
        path=str(world_path),
        locations=len(world.locations),
        items=world.total_items,
    )

    play(world, sys.stdin, sys.stdout)
