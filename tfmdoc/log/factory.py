"""
Factory for creating and deriving loggers.

Loggers are named by path: the root is ``/`` and derived loggers append
tags, e.g. ``/render`` or ``/render/template``. Only the root logger owns a
handler; derived loggers keep level NOTSET and propagate to it.
"""

import logging
import sys
from typing import TextIO, cast

from .config import LogConfig
from .constants import LogConstants
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create_root(config: LogConfig, stream: TextIO | None = None) -> Logger:
        """
        Create (or reconfigure) the root logger.

        Log output goes to stderr by default so stdout only carries the
        generated Markdown.

        Args:
            config: Logger configuration
            stream: Output stream for the handler (defaults to sys.stderr)

        Returns:
            Configured root logger

        Example:
            >>> lg = LoggerFactory.create_root(LogConfig.from_params("debug"))
            >>> lg.info("loaded module", extra={"path": "./modules/vpc"})
            [12:34:56] [I] loaded module [path:./modules/vpc] [/]
        """
        lg = LoggerFactory._get_or_create(LogConstants.ROOT_NAME)
        for handler in list(lg.handlers):
            lg.removeHandler(handler)

        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(LogFormatter(config))
        lg.addHandler(handler)

        if config.level is False:
            lg.setLevel(logging.CRITICAL + 1)
            lg.disabled = True
        else:
            lg.setLevel(config.level)
            lg.disabled = False
        lg.propagate = False
        return lg

    @staticmethod
    def derive(parent: Logger, tags: str | list[str]) -> Logger:
        """
        Derive a logger that writes through the parent's handlers.

        Args:
            parent: Parent logger instance
            tags: Single tag string OR list of tag strings to form hierarchy

        Returns:
            Derived logger, e.g. '/render/template' for tags ["render", "template"]
        """
        if isinstance(tags, str):
            tags = [tags]

        prefix = parent.name if parent.name == "/" else parent.name + "/"
        lg = LoggerFactory._get_or_create(prefix + "/".join(tags))
        lg.setLevel(logging.NOTSET)
        lg.parent = parent
        lg.propagate = True
        lg.disabled = parent.disabled
        return lg

    @staticmethod
    def _get_or_create(name: str) -> Logger:
        """Get a Logger instance from the logging manager by name."""
        previous = logging.getLoggerClass()
        logging.setLoggerClass(Logger)
        try:
            return cast(Logger, logging.getLogger(name))
        finally:
            logging.setLoggerClass(previous)
