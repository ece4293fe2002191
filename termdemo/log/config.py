"""
Configuration class for the logging system.

LogConfig is immutable so one instance can be shared by the root logger and
its formatter without risk of one side changing it under the other.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .constants import LogConstants
from .exceptions import InvalidLogLevelError


@dataclass(frozen=True)
class LogConfig:
    """
    Immutable configuration for root loggers.

    Attributes:
        level: Numeric log level, or False to disable logging entirely
        colors: Whether to emit ANSI colors
        micros: Whether timestamps carry microsecond precision
    """

    level: int | bool = logging.INFO
    colors: bool = True
    micros: bool = False

    @staticmethod
    def _resolve_level(level: str | int | bool) -> int | bool:
        """Resolve level parameter to int or False."""
        if isinstance(level, bool):
            return False if not level else logging.INFO
        elif isinstance(level, str):
            name = level.strip().lower()
            if name.isnumeric():
                return int(name)
            elif name in LogConstants.LEVEL_NAMES:
                return LogConstants.LEVEL_NAMES[name]
            else:
                raise InvalidLogLevelError(level)
        return level

    @classmethod
    def from_params(
        cls,
        level: str | int | bool,
        colors: bool = True,
        micros: bool = False,
    ) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        Args:
            level: Log level (string name, numeric value, or False to disable logging)
            colors: Whether to enable colored output
            micros: Whether to show microsecond precision

        Returns:
            LogConfig instance

        Raises:
            InvalidLogLevelError: If level is not a known name or number
        """
        return cls(level=cls._resolve_level(level), colors=colors, micros=micros)

    @classmethod
    def from_config(
        cls, config_dict: dict[str, Any], section: str = "logging"
    ) -> LogConfig:
        """
        Create LogConfig from a configuration dictionary.

        Args:
            config_dict: Configuration dictionary (e.g., Config.to_dict())
            section: Dotted path of the logging section (default: "logging")

        Returns:
            LogConfig instance

        Raises:
            InvalidLogLevelError: If the section's level is not a known name or number
        """
        current: Any = config_dict
        for part in section.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                current = {}
                break

        return cls.from_params(
            level=current.get("level", "info"),
            colors=bool(current.get("colors", True)),
            micros=bool(current.get("micros", False)),
        )
