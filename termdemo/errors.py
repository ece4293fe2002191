"""
Exception hierarchy for termdemo.

Every error raised by the command framework derives from TermDemoError so the
dispatcher can turn any of them into a user-facing message and exit code
without leaking a traceback to the terminal.
"""

from collections.abc import Iterable
from typing import Any


class TermDemoError(Exception):
    """
    Base exception for all termdemo errors.

    Example:
        try:
            handler.bind(options)
        except TermDemoError as e:
            console.print_error(str(e))
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ValidationError(TermDemoError):
    """
    Raised when an options field violates a declared constraint.

    Examples:
        - Duration is zero or negative
        - Greeting count below one
    """

    def __init__(self, field: str, message: str, **context: Any) -> None:
        self.field = field
        super().__init__(message, field=field, **context)


class InvalidArgumentError(TermDemoError):
    """
    Raised when command-line input cannot be bound to a command.

    Examples:
        - Flag value cannot be coerced to its declared type
        - Unrecognized flag or stray token
    """

    pass


class CommandNotFoundError(TermDemoError):
    """Raised when no command matches the requested name."""

    def __init__(self, name: str, known: Iterable[str] = ()) -> None:
        self.name = name
        self.known = list(known)
        super().__init__(f"Unknown command '{name}'")


class CancelledError(TermDemoError):
    """Raised when the user interrupts a running command."""

    def __init__(self, message: str = "Operation cancelled by user.", **context: Any):
        super().__init__(message, **context)


class ExecutionError(TermDemoError):
    """Raised when a command fails while performing its side effects."""

    pass


class CommandRegistrationError(TermDemoError):
    """Raised when a command cannot be registered with the dispatcher."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Failed to register command '{name}': {reason}")


class ConfigError(TermDemoError):
    """
    Configuration-related errors.

    Examples:
        - Config file not found
        - Invalid YAML syntax
        - Top-level document is not a mapping
    """

    pass
