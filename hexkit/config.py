"""
Logging configuration for applications embedding hexkit.

Nothing in here changes how hex is encoded or decoded.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import find_dotenv, load_dotenv


@dataclass
class LoggingConfig:
    """
    Configuration for standard library logging.

    Can be loaded from:
    - Environment variables (HEXKIT_LOG_LEVEL, HEXKIT_LOG_FILE)
    - YAML file with a top-level "logging" mapping
    - Programmatic construction
    """
    level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """
        Load configuration from environment variables.

        A .env file in the working directory is read first.
        """
        load_dotenv(find_dotenv(usecwd=True))
        return cls(
            level=os.getenv("HEXKIT_LOG_LEVEL") or cls.level,
            log_file=os.getenv("HEXKIT_LOG_FILE") or None,
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "LoggingConfig":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict((data or {}).get("logging", {}))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LoggingConfig":
        """Load configuration from a dictionary (supports partial data)."""
        return cls(**data) if data else cls()


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure root logging."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def configure(config: LoggingConfig | None = None) -> LoggingConfig:
    """Apply a logging configuration (default: LoggingConfig.from_env())."""
    config = config or LoggingConfig.from_env()
    setup_logging(config.level, config.log_file)
    return config
