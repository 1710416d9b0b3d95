"""
Configuration for the logging system.

LogConfig is immutable so a logger's settings cannot drift after the
root logger has been created.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LogConfig:
    """Immutable configuration for the root logger."""

    level: int | bool = logging.INFO  # int for normal levels, False to disable logging
    colors: bool = True

    @staticmethod
    def _resolve_level(level: str | int | bool) -> int | bool:
        """Resolve level parameter to int or False."""
        from .constants import LogConstants
        from .exceptions import InvalidLogLevelError

        if isinstance(level, bool):
            return False if not level else logging.INFO
        if isinstance(level, str):
            if level.isnumeric():
                return int(level)
            if level.lower() in LogConstants.LEVEL_NAMES:
                return LogConstants.LEVEL_NAMES[level.lower()]
            raise InvalidLogLevelError(level)
        return level

    @classmethod
    def from_params(cls, level: str | int | bool, colors: bool = True) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        Args:
            level: Log level (string name, numeric value, or False to disable logging)
            colors: Whether to enable colored output

        Returns:
            LogConfig instance
        """
        return cls(level=cls._resolve_level(level), colors=colors)

    @classmethod
    def from_config(cls, config: Any, section: str = "logging") -> LogConfig:
        """
        Create LogConfig from a tfmdoc Config (or anything with a dotted get()).

        Missing keys fall back to the dataclass defaults.
        """
        level = config.get(f"{section}.level", "info")
        colors = config.get(f"{section}.colors", True)
        return cls.from_params(level, colors=bool(colors))
