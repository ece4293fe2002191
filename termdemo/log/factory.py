"""
Factory for creating and configuring loggers.
"""

import logging
import sys
from typing import IO, Any

from .config import LogConfig
from .constants import LogConstants
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create_root(
        config: LogConfig,
        stream: IO[str] | None = None,
        name: str = LogConstants.ROOT_NAME,
        extra: dict[str, Any] | None = None,
    ) -> Logger:
        """
        Create a root logger with its own stream handler.

        Root loggers are not registered with the standard logging manager, so
        creating several (e.g., one per test) never leaks handlers between them.

        Args:
            config: Logger configuration
            stream: Output stream (default: sys.stderr)
            name: Logger name
            extra: Pre-populated extra fields to include in all log records

        Returns:
            Configured root logger

        Example:
            >>> config = LogConfig.from_params("info", colors=False)
            >>> lg = LoggerFactory.create_root(config)
            >>> lg.info("started", extra={"command": "info"})
            [12:34:56,789] [I] started          [command:info] [/termdemo]
        """
        lg = Logger(name, config, extra)
        lg.propagate = False

        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(LogFormatter(config))
        if config.level is not False:
            handler.setLevel(config.level)
        lg.addHandler(handler)
        return lg

    @staticmethod
    def derive(parent: Logger, tags: str | list[str]) -> Logger:
        """
        Derive a "view" logger that delegates to the root's handlers.

        Examples:
            >>> derived = LoggerFactory.derive(root, "progress")
            >>> derived.name
            '/termdemo/progress'

            >>> derived = LoggerFactory.derive(root, ["cli", "dispatch"])
            >>> derived.name
            '/termdemo/cli/dispatch'

        Args:
            parent: Parent logger instance
            tags: Single tag string OR list of tag strings to form hierarchy

        Returns:
            Derived logger, cached on the parent so repeated calls return it
        """
        if isinstance(tags, str):
            tags = [tags]

        key = "/".join(tags)
        existing = parent._children.get(key)
        if existing is not None:
            return existing

        prefix = parent.name if parent.name == "/" else parent.name + "/"
        root = parent._root_logger if parent._root_logger else parent

        lg = parent.__class__(prefix + key, parent.config)
        lg.setLevel(logging.NOTSET)
        lg.parent = parent
        lg.propagate = False
        lg._root_logger = root
        lg.disabled = parent.disabled

        parent._children[key] = lg
        return lg
