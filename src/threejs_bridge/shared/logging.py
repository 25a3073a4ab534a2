from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import LoggingConfig

ROOT_LOGGER = "threejs_bridge"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

# Chatty at INFO: mcp logs every request, websockets every handshake failure.
_LIBRARY_LOGGERS = ("mcp", "websockets")


def _sink(config: LoggingConfig) -> logging.Handler:
    if config.file:
        return logging.FileHandler(config.file, encoding="utf-8")
    # stdout belongs to the MCP stdio transport.
    return logging.StreamHandler(sys.stderr)


def configure_logging(config: LoggingConfig) -> int:
    """Install the bridge's log sink on the root logger; returns the level used."""
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[_sink(config)], force=True)

    library_level = level if level <= logging.DEBUG else max(level, logging.WARNING)
    for name in _LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or ROOT_LOGGER)
