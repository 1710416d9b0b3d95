"""
Constants for the logging system.

Format strings, custom level numbers and the level name table used when
resolving levels given on the command line or in the config file.
"""

import logging


class LogConstants:
    """Constants for the logging system."""

    DEFAULT_FORMAT: str = "[%(asctime)s] [%(levelname).1s] %(message)s"
    DATE_FORMAT: str = "%H:%M:%S"

    # Custom log levels
    CUSTOM_LEVELS: dict[str, int] = {"TRACE": 5}

    # Log level names for resolution (trace is added by the package init)
    LEVEL_NAMES: dict[str, int | bool] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "false": False,  # Special value to disable all logging
    }

    ROOT_NAME: str = "/"

    RESET: str = "\x1b[0m"
