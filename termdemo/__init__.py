from .cancel import CancellationToken
from .cli import CommandDescriptor, CommandHandler, Dispatcher, DispatchState, Flag
from .config import Config
from .errors import (
    CancelledError,
    CommandNotFoundError,
    CommandRegistrationError,
    ConfigError,
    ExecutionError,
    InvalidArgumentError,
    TermDemoError,
    ValidationError,
)
from .options import (
    CommandOptions,
    GreetOptions,
    InfoOptions,
    ListOptions,
    ProgressOptions,
)
from .version import package_version

__version__ = package_version()

# Explicit public API
__all__ = [
    "__version__",
    # Framework
    "CancellationToken",
    "CommandDescriptor",
    "CommandHandler",
    "Config",
    "DispatchState",
    "Dispatcher",
    "Flag",
    # Options
    "CommandOptions",
    "GreetOptions",
    "InfoOptions",
    "ListOptions",
    "ProgressOptions",
    # Exceptions
    "CancelledError",
    "CommandNotFoundError",
    "CommandRegistrationError",
    "ConfigError",
    "ExecutionError",
    "InvalidArgumentError",
    "TermDemoError",
    "ValidationError",
]
