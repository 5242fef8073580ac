"""
Logging Setup

Library modules only attach a NullHandler to their own loggers; handlers
are installed here, by the application entry point.
"""

import logging
from typing import Optional

from .settings import EngineSettings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(settings: Optional[EngineSettings] = None) -> logging.Logger:
    """Install a stream handler on the package logger at the configured level."""
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger("kpi_engine")
    logger.setLevel(level)
    global _handler
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in logger.handlers:
        logger.addHandler(_handler)
    return logger
