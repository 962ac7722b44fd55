"""
Configuration module for the Route Calculator.

Loads environment variables (optionally from a .env file) and provides
centralized settings plus logging setup.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ENV_LOG_LEVEL = "ROUTE_CALCULATOR_LOG_LEVEL"
ENV_QUERY_TIMEOUT = "ROUTE_CALCULATOR_QUERY_TIMEOUT"


@dataclass(frozen=True)
class Settings:
    """
    Application settings.

    Attributes:
        log_level: Root logging level name (e.g., "INFO", "DEBUG").
        query_timeout: Deadline for a single route query in seconds.
            None means queries run inline without a deadline.
    """

    log_level: str = "INFO"
    query_timeout: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        if self.query_timeout is not None and self.query_timeout <= 0:
            raise ValueError(
                f"query_timeout must be > 0, got {self.query_timeout}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        Raises:
            ValueError: If a variable is set to an unusable value.
        """
        log_level = os.getenv(ENV_LOG_LEVEL, "INFO")

        query_timeout: Optional[float] = None
        raw_timeout = os.getenv(ENV_QUERY_TIMEOUT)
        if raw_timeout:
            try:
                query_timeout = float(raw_timeout)
            except ValueError as e:
                raise ValueError(
                    f"{ENV_QUERY_TIMEOUT} must be a number of seconds, got {raw_timeout!r}"
                ) from e

        return cls(log_level=log_level, query_timeout=query_timeout)


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger to write timestamped lines to stdout.

    Calling it again only changes the level; no duplicate handlers
    are added.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    for handler in root_logger.handlers:
        if getattr(handler, "_route_calculator", False):
            handler.setLevel(level.upper())
            return

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level.upper())
    console_handler.setFormatter(formatter)
    console_handler._route_calculator = True
    root_logger.addHandler(console_handler)
