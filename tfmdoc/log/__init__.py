"""
Logging for tfmdoc.

Thin layer over the standard logging module:
- a custom TRACE level below DEBUG
- colored, single-line records with extra fields rendered as [key:value]
- path-named loggers ("/", "/render") derived from one root logger
- complete disable with level=False or level="false"

Log output always goes to stderr; stdout is reserved for Markdown. Level
names are resolved in one place, LogConfig.from_params().

Example:
    lg = LoggerFactory.create_root(LogConfig.from_params("debug", colors=False))
    LoggerFactory.derive(lg, "render").info("wrote documentation")
"""

import logging

from .config import LogConfig
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter
from .logger import TRACE, Logger

logging.addLevelName(TRACE, "TRACE")
LogConstants.LEVEL_NAMES["trace"] = TRACE

__all__ = [
    "TRACE",
    "Logger",
    "LoggerFactory",
    "LogConfig",
    "LogConstants",
    "LogFormatter",
    "LogError",
    "InvalidLogLevelError",
]
