"""Logging setup for toolchat and its console script."""

import logging
import os
import sys

from pydantic import BaseModel


class LogConfig(BaseModel):
    """Log level, line format and the third-party loggers kept at WARNING."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    quiet_loggers: list[str] = ["httpx", "httpcore"]


def setup_logging(config: LogConfig | None = None) -> None:
    """Route log records to stderr so the chat answer on stdout stays clean.

    Args:
        config: Logging configuration, defaults to INFO with httpx quieted
    """
    if config is None:
        config = LogConfig()

    logging.basicConfig(
        level=getattr(logging, config.level.upper()),
        format=config.format,
        datefmt=config.date_format,
        stream=sys.stderr,
        force=True,
    )

    # httpx logs every request line at INFO
    for name in config.quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """Get a toolchat module logger.

    Wire payloads are logged at DEBUG and conversation steps at INFO, so
    ``LOG_LEVEL=DEBUG`` shows what is sent to the chat backend.

    Args:
        name: Module name (typically __name__)
        level: Explicit level, overrides the LOG_LEVEL environment variable

    Returns:
        Logger with its level set
    """
    logger = logging.getLogger(name)

    log_level = level if level else os.getenv("LOG_LEVEL", "INFO")
    logger.setLevel(log_level.upper())

    return logger
