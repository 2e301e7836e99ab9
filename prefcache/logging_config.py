"""Logging setup driven by ObservabilityConfig.

Components log through ``logging.getLogger(__name__)`` and attach
context with ``extra={...}``. In structured mode python-json-logger
renders those extra fields as JSON keys.
"""

from __future__ import annotations

import logging
from typing import Optional

from pythonjsonlogger import jsonlogger

from .config import ObservabilityConfig, get_config

HANDLER_NAME = "prefcache"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(
    config: Optional[ObservabilityConfig] = None,
    logger_name: str = "prefcache",
) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling this twice replaces the handler instead of stacking a second one.

    Args:
        config: Logging configuration (defaults to get_config().observability).
        logger_name: Logger to configure.

    Returns:
        The configured logger.
    """
    config = config or get_config().observability
    logger = logging.getLogger(logger_name)
    logger.setLevel(config.level.upper())

    for handler in list(logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    if config.structured:
        handler.setFormatter(jsonlogger.JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(config.format))
    logger.addHandler(handler)
    return logger
