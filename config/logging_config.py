"""
Centralized logging configuration.
PostScript goes to stdout, so every handler here writes elsewhere.
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from .constants import (
    LOG_LEVEL, LOG_FORMAT,
    LOG_MAX_SIZE_MB, LOG_BACKUP_COUNT
)


def setup_logger(name: str = None, log_file: Optional[str] = None,
                 level: Optional[str] = None) -> logging.Logger:
    """
    Get or create a configured logger.

    Usage:
        from config.logging_config import setup_logger
        logger = setup_logger(__name__)
        logger.info("Message here")

    Args:
        name: Logger name. If None, uses 'textps'.
        log_file: Optional path for a rotating file handler.
        level: Level name overriding LOG_LEVEL.

    Returns:
        Configured logging.Logger instance.
    """
    logger = logging.getLogger(name or 'textps')

    if level:
        logger.setLevel(getattr(logging, level.upper()))

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    if not level:
        logger.setLevel(getattr(logging, LOG_LEVEL))

    # Console handler - stderr
    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)

    # File handler with rotation - DEBUG level
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=LOG_MAX_SIZE_MB * 1024 * 1024,
            backupCount=LOG_BACKUP_COUNT
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Module-level logger that propagates to the 'textps' root.

    Usage:
        from config.logging_config import get_logger
        logger = get_logger(__name__)
    """
    return logging.getLogger(name or 'textps')
