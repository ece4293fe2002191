"""
Declarative command descriptors.

A descriptor names a command, declares its flag grammar and knows how to turn
the flag tokens of one invocation into a typed options object.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import IO, Any

from ..options import CommandOptions
from .handler import CommandHandler
from .parser import CommandParser


@dataclass(frozen=True)
class Flag:
    """
    One `--name VALUE` flag of a command.

    `dest` is the options field the value is passed as; it defaults to the
    flag name with dashes replaced by underscores. A `multiple` flag accepts
    one or more values and may be repeated, values accumulating in order.
    """

    name: str
    type: Callable[[str], Any] = str
    default: Any = None
    help: str = ""
    metavar: str | None = None
    dest: str | None = None
    multiple: bool = False

    @property
    def option(self) -> str:
        return f"--{self.name}"

    @property
    def field_name(self) -> str:
        return self.dest or self.name.replace("-", "_")

    def add_to(self, parser: argparse.ArgumentParser) -> None:
        kwargs: dict[str, Any] = {
            "dest": self.field_name,
            "type": self.type,
            "help": self.help,
            "metavar": self.metavar,
        }
        if self.multiple:
            # extend mutates a non-empty default; defaults are filled in after parsing
            kwargs.update(action="extend", nargs="+", default=None)
            if self.default:
                shown = ",".join(map(str, self.default))
                kwargs["help"] = f"{self.help} (default: {shown})"
        else:
            kwargs["default"] = self.default
        parser.add_argument(self.option, **kwargs)


@dataclass(frozen=True)
class CommandDescriptor:
    """
    Static description of one command.

    Example:
        descriptor = CommandDescriptor(
            name="progress",
            description="Show progress bars",
            handler=ProgressHandler(lg, console, token),
            options_factory=ProgressOptions,
            flags=(Flag("duration", int, 3, dest="duration_seconds"),),
        )
        options = descriptor.parse(["--duration", "5"])
    """

    name: str
    description: str
    handler: CommandHandler[Any]
    options_factory: Callable[..., CommandOptions]
    flags: Sequence[Flag] = field(default_factory=tuple)

    def build_parser(self, prog: str, output: IO[str] | None = None) -> CommandParser:
        """Build a parser for this command's flag grammar."""
        parser = CommandParser(prog=prog, description=self.description, output=output)
        for flag in self.flags:
            flag.add_to(parser)
        return parser

    def parse(
        self,
        tokens: Sequence[str],
        prog: str | None = None,
        output: IO[str] | None = None,
    ) -> CommandOptions:
        """
        Bind flag tokens to a new options object.

        Omitted flags take their declared default. The result is not yet
        validated; CommandHandler.bind() does that.

        Raises:
            InvalidArgumentError: Unknown flag, stray token or bad value
            HelpRequested: -h/--help was given and help was printed
        """
        parser = self.build_parser(prog or self.name, output)
        namespace = parser.parse_args(list(tokens))
        return self.options_factory(**self._fields(namespace))

    def _fields(self, namespace: argparse.Namespace) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        for flag in self.flags:
            value = getattr(namespace, flag.field_name)
            if value is None:
                value = flag.default
            fields[flag.field_name] = value
        return fields
