"""
Argument parser that reports problems as exceptions.

argparse normally prints an error and calls sys.exit(). The dispatcher has to
turn every parse problem into a message and an exit code itself, so this
parser raises InvalidArgumentError for bad input and HelpRequested when help
was printed.
"""

from __future__ import annotations

import argparse
import sys
from typing import IO, Any, NoReturn

from ..errors import InvalidArgumentError
from .args import DefaultsHelpFormatter


class HelpRequested(Exception):
    """Raised after help or usage was printed in response to -h/--help."""

    def __init__(self, status: int = 0) -> None:
        super().__init__(status)
        self.status = status


class CommandParser(argparse.ArgumentParser):
    """
    ArgumentParser that never exits the process.

    Example:
        parser = CommandParser(prog="termdemo progress", output=console.file)
        parser.add_argument("--duration", type=int, default=3)
        try:
            ns = parser.parse_args(["--duration", "x"])
        except InvalidArgumentError as e:
            ...  # "argument --duration: invalid int value: 'x'"
    """

    def __init__(self, *args: Any, output: IO[str] | None = None, **kwargs: Any):
        kwargs.setdefault("formatter_class", DefaultsHelpFormatter)
        kwargs.setdefault("allow_abbrev", False)
        super().__init__(*args, **kwargs)
        self._output = output

    def _print_message(self, message: str, file: IO[str] | None = None) -> None:
        if not message:
            return
        out = self._output if self._output is not None else (file or sys.stdout)
        out.write(message)

    def error(self, message: str) -> NoReturn:
        raise InvalidArgumentError(message, command=self.prog)

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        if message:
            self._print_message(message)
        raise HelpRequested(status)
