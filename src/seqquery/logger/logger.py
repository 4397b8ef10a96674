"""Global logger configuration for the seqquery package."""

import logging
import sys

from seqquery.core.config import settings

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "seqquery",
    level: str | None = None,
    format_string: str | None = None,
    propagate: bool = False,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (``seqquery`` or one of its children)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Falls back
            to ``settings.LOG_LEVEL``.
        format_string: Custom format string
        propagate: Whether records also reach the root logger's handlers.

    Returns:
        Configured logger instance
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only attach a handler once per logger name
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = propagate

    return logger


# Default logger shared by the functional modules
logger = setup_logger()
