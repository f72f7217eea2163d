"""Logging configuration for the ray tracer."""

import logging
from typing import Dict, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LEVEL = "INFO"

# Console handlers installed by setup_logging, keyed by logger name.
_handlers: Dict[Optional[str], logging.Handler] = {}


def setup_logging(level: Optional[str] = None, name: Optional[str] = None) -> logging.Logger:
    """
    Set up console logging once for the given logger (root by default).

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        name: Logger name, None for the root logger

    Returns:
        Configured logger instance
    """
    if level is None:
        level = DEFAULT_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Repeated calls only change the level.
    handler = _handlers.get(name)
    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _handlers[name] = handler
    if handler not in logger.handlers:
        logger.addHandler(handler)
    handler.setLevel(numeric_level)

    return logger
