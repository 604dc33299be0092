"""Logging configuration for PrismTrace."""

import logging
import os
from typing import Optional

LOG_LEVEL = os.getenv("PRISMTRACE_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None, name: str = "prismtrace") -> logging.Logger:
    """
    Set up console logging for the package.

    Library modules only create loggers; handlers are attached here, once,
    by the application entry point.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Falls back to the PRISMTRACE_LOG_LEVEL environment variable.
        name: Logger name to configure

    Returns:
        Configured logger instance
    """
    if level is None:
        level = LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Avoid stacking handlers when called more than once
    if not any(getattr(h, "_prismtrace", False) for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler._prismtrace = True
        logger.addHandler(console_handler)

    for handler in logger.handlers:
        handler.setLevel(numeric_level)

    return logger
