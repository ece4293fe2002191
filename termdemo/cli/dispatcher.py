"""
Root command dispatcher.

Owns the registered command descriptors, routes an argument vector to one of
them and converts every outcome into a process exit code.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from enum import Enum

from ..constants import (
    COMMAND_NAME_PATTERN,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    MAX_COMMAND_NAME_LENGTH,
)
from ..errors import (
    CancelledError,
    CommandNotFoundError,
    CommandRegistrationError,
    InvalidArgumentError,
    ValidationError,
)
from ..messages import ErrorMessages, LogMessages, UiMessages
from ..ui import Console, Table
from .descriptor import CommandDescriptor
from .parser import HelpRequested

HELP_TOKENS = ("-h", "--help")


class DispatchState(Enum):
    """Progress of a single dispatch() call."""

    IDLE = "idle"
    PARSING = "parsing"
    PARSE_FAILED = "parse_failed"
    DISPATCHED = "dispatched"
    EXECUTING = "executing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"

    @property
    def exit_code(self) -> int:
        return EXIT_SUCCESS if self is DispatchState.SUCCEEDED else EXIT_FAILURE


def _validate_command_name(name: str) -> None:
    if not name:
        raise CommandRegistrationError("", "Command must have a name")

    if len(name) > MAX_COMMAND_NAME_LENGTH:
        raise CommandRegistrationError(
            name,
            f"Command name exceeds maximum length of {MAX_COMMAND_NAME_LENGTH} characters",
        )

    if not COMMAND_NAME_PATTERN.match(name):
        raise CommandRegistrationError(
            name,
            "Command name must start with a lowercase letter and contain only "
            "lowercase letters, numbers, underscores, and hyphens",
        )


class Dispatcher:
    """
    Routes `argv` to the matching command and returns its exit code.

    Descriptors are listed in help output in the order they were given.

    Example:
        dispatcher = Dispatcher([greet, info], console, lg)
        exit_code = dispatcher.dispatch(["greet", "--name", "Ada"])
    """

    def __init__(
        self,
        descriptors: Iterable[CommandDescriptor],
        console: Console,
        lg: logging.Logger,
        prog: str = "termdemo",
    ) -> None:
        """
        Register the descriptors.

        Raises:
            CommandRegistrationError: Malformed or duplicate command name
        """
        self.console = console
        self.lg = lg
        self.prog = prog
        self._commands: dict[str, CommandDescriptor] = {}
        self._state = DispatchState.IDLE

        for descriptor in descriptors:
            _validate_command_name(descriptor.name)
            if descriptor.name in self._commands:
                raise CommandRegistrationError(
                    descriptor.name, "Command already registered"
                )
            self._commands[descriptor.name] = descriptor

    @property
    def names(self) -> list[str]:
        return list(self._commands)

    @property
    def state(self) -> DispatchState:
        """State reached by the most recent dispatch()."""
        return self._state

    def lookup(self, name: str) -> CommandDescriptor:
        """
        Find a command by exact name.

        Raises:
            CommandNotFoundError: If no command has that name
        """
        descriptor = self._commands.get(name)
        if descriptor is None:
            raise CommandNotFoundError(name, self.names)
        return descriptor

    def dispatch(self, argv: Sequence[str]) -> int:
        """
        Run the command named by argv[0] with the remaining tokens as flags.

        Never raises for user errors; every outcome becomes an exit code.
        """
        self._state = DispatchState.IDLE

        if not argv:
            self.print_usage()
            return self._finish(DispatchState.PARSE_FAILED)

        name, tokens = argv[0], list(argv[1:])
        if name in HELP_TOKENS:
            self.print_usage()
            return self._finish(DispatchState.SUCCEEDED)

        self._state = DispatchState.PARSING
        try:
            descriptor = self.lookup(name)
        except CommandNotFoundError as e:
            self.lg.warning(LogMessages.UNKNOWN_COMMAND, extra={"command": name})
            self.console.print(str(e), style="error", markup=False)
            self.print_commands()
            return self._finish(DispatchState.PARSE_FAILED)

        try:
            options = descriptor.parse(
                tokens, prog=f"{self.prog} {name}", output=self.console.file
            )
            descriptor.handler.bind(options)
        except HelpRequested as e:
            return self._finish(
                DispatchState.SUCCEEDED if e.status == 0 else DispatchState.PARSE_FAILED
            )
        except (InvalidArgumentError, ValidationError) as e:
            self.lg.warning(
                LogMessages.INVALID_ARGUMENTS, extra={"command": name, "exception": e}
            )
            self.console.print(
                ErrorMessages.INVALID_ARGUMENT.format(e), style="error", markup=False
            )
            return self._finish(DispatchState.PARSE_FAILED)
        except Exception as e:
            # A malformed default or option value that failed outside validate()
            self.lg.warning(
                LogMessages.INVALID_ARGUMENTS,
                extra={"command": name, "exception": e},
                exc_info=True,
            )
            self.console.print(
                ErrorMessages.INVALID_ARGUMENT.format(e), style="error", markup=False
            )
            return self._finish(DispatchState.PARSE_FAILED)

        self._state = DispatchState.DISPATCHED
        self.lg.debug(LogMessages.DISPATCH, extra={"command": name})
        return self._execute(descriptor)

    def _execute(self, descriptor: CommandDescriptor) -> int:
        self._state = DispatchState.EXECUTING
        try:
            code = descriptor.handler.execute()
        except CancelledError:
            self.lg.warning(
                LogMessages.COMMAND_CANCELLED, extra={"command": descriptor.name}
            )
            self.console.print(UiMessages.COMMAND_CANCELLED.format(descriptor.name))
            return self._finish(DispatchState.CANCELLED)
        except Exception as e:
            self.lg.error(
                LogMessages.FATAL_ERROR,
                extra={"command": descriptor.name, "exception": e},
                exc_info=True,
            )
            self.console.print(
                UiMessages.FATAL_ERROR.format(e), style="error", markup=False
            )
            return self._finish(DispatchState.FAILED)

        state = DispatchState.SUCCEEDED if code == EXIT_SUCCESS else DispatchState.FAILED
        self.lg.debug(
            LogMessages.DISPATCH_DONE,
            extra={"command": descriptor.name, "exit_code": code},
        )
        return self._finish(state)

    def _finish(self, state: DispatchState) -> int:
        self._state = state
        return state.exit_code

    def print_usage(self) -> None:
        self.console.print(
            f"usage: {self.prog} [-h] COMMAND [flags]", markup=False
        )
        self.print_commands()

    def print_commands(self) -> None:
        """Print the command listing in registration order."""
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        for descriptor in self._commands.values():
            table.add_row(f"  {descriptor.name}", descriptor.description)
        self.console.print(UiMessages.AVAILABLE_COMMANDS)
        self.console.print(table)
