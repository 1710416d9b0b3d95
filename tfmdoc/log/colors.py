"""ANSI colors for log levels."""

import logging

from .constants import LogConstants


class ColorManager:
    """Centralized ANSI color code management."""

    RED = "\x1b[31"
    GREEN = "\x1b[32"
    YELLOW = "\x1b[33"
    MAGENTA = "\x1b[35"
    CYAN = "\x1b[36"
    DEFAULT = "\x1b[38"

    RESET = LogConstants.RESET

    COLORS: dict[int, str] = {
        LogConstants.CUSTOM_LEVELS["TRACE"]: "\x1b[38;5;244",
        logging.DEBUG: "\x1b[38;5;32",
        logging.INFO: CYAN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: MAGENTA,
    }

    @staticmethod
    def get_color_for_level(level: int) -> str:
        """Get the color escape prefix for a level, without the final 'm'."""
        return ColorManager.COLORS.get(level, ColorManager.DEFAULT)

    @staticmethod
    def colorize(text: str, level: int) -> str:
        """Wrap text in the color of the given level."""
        col = ColorManager.get_color_for_level(level)
        return f"{col}m{text}{ColorManager.RESET}"
