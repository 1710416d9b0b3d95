"""Logger class with the custom trace level."""

import logging
from typing import Any

from .constants import LogConstants

TRACE = LogConstants.CUSTOM_LEVELS["TRACE"]


class Logger(logging.Logger):
    """
    Standard logger plus a trace() method.

    Instances are created by LoggerFactory; the root logger owns the handler
    and derived loggers propagate to it.
    """

    def trace(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log at TRACE level, below DEBUG."""
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)
