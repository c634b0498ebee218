"""
Configuration for the ballot package.
"""
import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Config:
    """Application configuration."""

    # Logging Configuration
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FORMAT = os.getenv('LOG_FORMAT', DEFAULT_LOG_FORMAT)


config = Config()


def configure_logging(level: str | None = None) -> None:
    """Send log records to stdout at the given (or configured) level.

    Raises:
        ValueError: If the level is not a standard logging level name
    """
    level_name = (level or config.LOG_LEVEL).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    logging.basicConfig(
        level=numeric_level,
        format=config.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True,
    )
