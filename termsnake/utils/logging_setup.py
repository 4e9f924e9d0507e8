"""
Logging setup.

The game draws over the whole terminal, so log records go to a file by
default rather than to the screen. Handlers are attached to the package
logger so a host application's root logger is left alone.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from .config_loader import LoggingConfig

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)-28s - %(levelname)-8s - %(message)s"
PACKAGE_LOGGER = "termsnake"


def parse_level(name) -> int:
    """
    Resolve a level name such as "debug" or "INFO".

    Raises:
        ValueError: If the name is not a logging level
    """
    level = getattr(logging, str(name).upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


def configure_logging(config: LoggingConfig, logger: Optional[logging.Logger] = None) -> logging.Logger:
    """
    Attach a handler to the package logger unless one is already attached.

    Args:
        config: Level name and log file; an empty log_file logs to stderr
        logger: Logger to configure (the "termsnake" package logger if omitted)

    Returns:
        The configured logger
    """
    level = parse_level(config.level)
    if logger is None:
        logger = logging.getLogger(PACKAGE_LOGGER)
    if logger.handlers:
        return logger

    if config.log_file:
        log_path = Path(config.log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
