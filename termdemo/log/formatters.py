"""
Log formatter for the logging system.

Renders records as:

    [12:34:56,789] [I] message              [key:value] [/termdemo/progress]

with ANSI level colors when enabled.
"""

import logging
from datetime import datetime
from typing import Any

from .colors import ColorManager
from .config import LogConfig
from .constants import LogConstants
from .logger import EXTRA_ATTR


def _format_value(value: Any) -> str:
    """Format a single extra field value."""
    if isinstance(value, BaseException):
        return value.__class__.__name__
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    if isinstance(value, float):
        return f"{value:.3f}"
    return str(value)


def format_extra(extra: dict[str, Any] | None) -> list[str]:
    """Format extra fields as sorted `[key:value]` chunks."""
    if not extra:
        return []
    return [f"[{key}:{_format_value(extra[key])}]" for key in sorted(extra)]


class LogFormatter(logging.Formatter):
    """Formatter producing the termdemo single-line log layout."""

    def __init__(self, config: LogConfig):
        super().__init__()
        self._config = config

    @property
    def config(self) -> LogConfig:
        return self._config

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        ts = datetime.fromtimestamp(record.created)
        if self._config.micros:
            return ts.strftime("%H:%M:%S,%f")
        return ts.strftime("%H:%M:%S,") + f"{int(record.msecs):03d}"

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        stamp = self.formatTime(record)
        level = record.levelname[:1]
        rule = (
            LogConstants.MICRO_RULE_WIDTH
            if self._config.micros
            else LogConstants.DEFAULT_RULE_WIDTH
        )
        head_plain = f"[{stamp}] [{level}] {message}"
        padding = " " * max(1, rule - len(head_plain))

        fields = format_extra(getattr(record, EXTRA_ATTR, None))
        fields.append(f"[{record.name}]")

        if self._config.colors:
            col = ColorManager.get_color_for_level(record.levelno)
            bold = ColorManager.create_bold_color(col)
            line = (
                f"{col}m[{stamp}] [{bold}{level}{ColorManager.RESET}{col}m]"
                f" {bold}{message}{ColorManager.RESET}{padding}"
                f"{col}m{' '.join(fields)}{ColorManager.RESET}"
            )
        else:
            line = f"{head_plain}{padding}{' '.join(fields)}"

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line
