"""Logging setup shared by the GUI entry point and services."""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logger(name: str = "flashdeck", level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Configure a logger with a single stream handler.

    Calling it again only updates the level, so repeated app starts in
    the same process do not duplicate output.

    Args:
        name: Logger name (package root by default)
        level: Level name or number (defaults to Config.LOG_LEVEL)

    Returns:
        The configured logger
    """
    from ..config import Config

    logger = logging.getLogger(name)
    if isinstance(level, str) or level is None:
        level = logging.getLevelName((level or Config.LOG_LEVEL).upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if not any(getattr(h, "_flashdeck", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler._flashdeck = True
        logger.addHandler(handler)

    return logger
