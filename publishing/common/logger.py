"""Logging infrastructure for the publishing workflow.

Loggers are configured from the ``logging`` section of the configuration
file: console output by default, a rotating ``<name>.log`` under
``log_dir`` when file logging is on, ISO 8601 timestamps throughout.
"""

import logging
import logging.handlers
import os
from typing import Optional, TextIO

from .config import LOG_LEVELS, LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
LOG_FILE_MAX_BYTES = 1048576  # 1MB
LOG_FILE_BACKUPS = 3


def setup_logger(
    name: str,
    config: Optional[LoggingConfig] = None,
    *,
    level: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Set up a logger from a logging configuration section.

    Args:
        name: Logger name (typically "publishing" or a child of it)
        config: Logging section; built-in defaults when omitted
        level: Level overriding ``config.level`` (from the CLI or env)
        stream: Stream for the console handler (stderr when omitted)

    Returns:
        Configured logger instance

    Raises:
        ValueError: If the effective level is not a known level name
    """
    if config is None:
        config = LoggingConfig()

    level_name = (level or config.level).upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {level or config.level}. "
            f"Must be one of: {', '.join(LOG_LEVELS)}"
        )

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level_name))

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if config.file_logging:
        os.makedirs(config.log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            os.path.join(config.log_dir, f"{name}.log"),
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if config.console_logging:
        console_handler = logging.StreamHandler(stream)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get an existing logger by name."""
    return logging.getLogger(name)
