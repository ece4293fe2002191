"""
Constants and configuration values for the logging system.

This module contains the constant values used by the logging system,
including format strings, default values, and custom log level definitions.
"""

import logging


class LogConstants:
    """Constants for the logging system."""

    # Rule width the message is padded to before extra fields
    DEFAULT_RULE_WIDTH: int = 60
    MICRO_RULE_WIDTH: int = 64

    # Custom log levels
    CUSTOM_LEVELS: dict[str, int] = {"TRACE": 5}

    # Log level names for resolution
    LEVEL_NAMES: dict[str, int | bool] = {
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "trace": 5,
        "false": False,  # Special value to disable all logging
    }

    # ANSI escape sequences
    RESET: str = "\x1b[0m"

    # Root logger name; children are "/"-separated paths below it
    ROOT_NAME: str = "/termdemo"


logging.addLevelName(LogConstants.CUSTOM_LEVELS["TRACE"], "TRACE")
