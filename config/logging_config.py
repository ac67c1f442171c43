"""
Centralized logging configuration.
"""
import logging
import logging.handlers
from pathlib import Path
from pydantic import ValidationError

from .constants import LOG_FORMAT, LOG_MAX_SIZE_MB, LOG_BACKUP_COUNT, LOG_LEVEL, LOG_FILE
from .settings import get_settings


def setup_logger(name: str = None) -> logging.Logger:
    """
    Get or create a configured logger.

    Usage:
        from config.logging_config import setup_logger
        logger = setup_logger(__name__)
        logger.info("Message here")

    Args:
        name: Logger name. If None, uses 'kegg_flatfile'.

    Returns:
        Configured logging.Logger instance.
    """
    logger = logging.getLogger(name or 'kegg_flatfile')

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    # Invalid layout values surface through RenderConfig, never at import time
    try:
        settings = get_settings()
        log_level, log_file = settings.log_level, settings.log_file
    except ValidationError:
        log_level, log_file = LOG_LEVEL, LOG_FILE
    logger.setLevel(getattr(logging, log_level, logging.INFO))

    # Console handler - WARNING level, stdout stays clean for rendered text
    console = logging.StreamHandler()
    console.setLevel(logging.WARNING)
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
    Alias for setup_logger for convenience.

    Usage:
        from config.logging_config import get_logger
        logger = get_logger(__name__)
    """
    return setup_logger(name)
