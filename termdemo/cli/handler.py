"""
Base class for command handlers.

A handler performs one command's side effects. It is constructed once with
its collaborators, receives validated options through bind(), and turns its
own failures into exit codes so only cancellation escapes execute().
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..constants import EXIT_FAILURE
from ..errors import CancelledError, ExecutionError
from ..messages import ErrorMessages, LogMessages
from ..options import CommandOptions
from ..ui import Console

OptionsT = TypeVar("OptionsT", bound=CommandOptions)


class CommandHandler(ABC, Generic[OptionsT]):
    """
    Executor for a single command.

    Subclasses set `name` and implement run(). They read their parameters
    from self.options and return 0 on success.

    Example:
        class HelloHandler(CommandHandler[GreetOptions]):
            name = "hello"

            def run(self) -> int:
                self.console.print(f"Hello, {self.options.name}!")
                return 0

        handler = HelloHandler(lg, console)
        handler.bind(GreetOptions(name="Ada"))
        exit_code = handler.execute()
    """

    name: str = ""

    def __init__(self, lg: logging.Logger, console: Console) -> None:
        self.lg = lg
        self.console = console
        self._options: OptionsT | None = None

    @property
    def bound(self) -> bool:
        return self._options is not None

    @property
    def options(self) -> OptionsT:
        """
        The options bound for the current invocation.

        Raises:
            ExecutionError: If no options are bound
        """
        if self._options is None:
            raise ExecutionError(
                ErrorMessages.HANDLER_UNBOUND.format(self.name), command=self.name
            )
        return self._options

    def bind(self, options: OptionsT) -> None:
        """
        Validate and store the options for the next execute().

        Raises:
            ValidationError: If the options are invalid; nothing is stored
        """
        options.validate()
        self._options = options
        self.lg.debug(
            LogMessages.OPTIONS_BOUND, extra={"command": self.name, "options": options}
        )

    def execute(self) -> int:
        """
        Run the command with the bound options.

        Returns:
            Exit code, 0 on success and 1 on failure

        Raises:
            ExecutionError: If called before bind()
            CancelledError: If the command was interrupted
        """
        if self._options is None:
            raise ExecutionError(
                ErrorMessages.HANDLER_UNBOUND.format(self.name), command=self.name
            )

        try:
            return self.run()
        except CancelledError:
            self.lg.warning(LogMessages.COMMAND_CANCELLED, extra={"command": self.name})
            raise
        except KeyboardInterrupt:
            self.lg.warning(LogMessages.COMMAND_CANCELLED, extra={"command": self.name})
            raise CancelledError(command=self.name) from None
        except Exception as e:
            self.lg.error(
                LogMessages.COMMAND_FAILED, extra={"command": self.name, "exception": e}
            )
            self.console.print(
                ErrorMessages.EXECUTION_ERROR.format(e), style="error", markup=False
            )
            return EXIT_FAILURE
        finally:
            self._options = None

    @abstractmethod
    def run(self) -> int:
        """Perform the command. Implemented by each concrete handler."""
