"""Configuration for Isopod Adventure."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    """Application configuration."""

    world_file: Path | None = None
    log_level: str = "WARNING"
    log_file: Path | None = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        world_file = os.getenv("ISOPOD_WORLD_FILE")
        log_file = os.getenv("ISOPOD_LOG_FILE")

        return cls(
            world_file=Path(world_file) if world_file else None,
            log_level=os.getenv("ISOPOD_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=os.getenv("ISOPOD_JSON_LOGS", "").lower()
            in ("true", "1", "yes"),
        )
