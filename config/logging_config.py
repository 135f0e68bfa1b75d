"""
Centralized logging configuration.
stdout carries the filtered document, so every handler writes elsewhere.
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from .constants import (
    LOG_LEVEL, LOG_FORMAT,
    LOG_MAX_SIZE_MB, LOG_BACKUP_COUNT
)


def setup_logger(
    name: str = None,
    level: str = LOG_LEVEL,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Get or create a configured logger.

    Usage:
        from config.logging_config import setup_logger
        logger = setup_logger('lipics_filter')
        logger.info("Message here")

    Args:
        name: Logger name. If None, uses 'lipics_filter'.
        level: Level name for the logger and the console handler.
        log_file: Optional path of a rotating debug log.

    Returns:
        Configured logging.Logger instance.
    """
    logger = logging.getLogger(name or 'lipics_filter')

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Console handler on stderr
    console = logging.StreamHandler()
    console.setLevel(getattr(logging, level.upper(), logging.INFO))
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)

    if log_file:
        # File handler with rotation - DEBUG level
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=LOG_MAX_SIZE_MB * 1024 * 1024,
            backupCount=LOG_BACKUP_COUNT
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Alias for setup_logger for convenience.

    Usage:
        from config.logging_config import get_logger
        logger = get_logger(__name__)
    """
    return setup_logger(name)
