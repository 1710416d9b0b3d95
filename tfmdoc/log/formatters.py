"""
Log formatter.

Renders records as ``[time] [L] message [key:value] [logger]``, with the
whole line colored by level when colors are enabled.
"""

import logging
from typing import Any

from .colors import ColorManager
from .config import LogConfig
from .constants import LogConstants

# Attributes every LogRecord has; anything else came in through extra=
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime"}


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Collect the fields passed with extra={...}, sorted by key."""
    extra = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}
    return dict(sorted(extra.items()))


class LogFormatter(logging.Formatter):
    """Formatter with optional ANSI colors and extra-field rendering."""

    def __init__(self, config: LogConfig):
        super().__init__(LogConstants.DEFAULT_FORMAT, LogConstants.DATE_FORMAT)
        self._config = config

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)

        fields = _extra_fields(record)
        if fields:
            text += " " + " ".join(f"[{k}:{v}]" for k, v in fields.items())
        text += f" [{record.name}]"

        if self._config.colors:
            return ColorManager.colorize(text, record.levelno)
        return text
