"""
Command-line entry point.

Parses the global options, loads configuration, builds the logger, console
and command set explicitly, and hands the rest of the command line to the
dispatcher.
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from collections.abc import Sequence

from .cancel import CancellationToken, SignalCanceller
from .cli import CommandDescriptor, CommandParser, Dispatcher, Flag
from .commands import GreetHandler, InfoHandler, ListHandler, ProgressHandler
from .config import Config
from .constants import EXIT_FAILURE, EXIT_SUCCESS
from .errors import InvalidArgumentError, TermDemoError
from .log import InvalidLogLevelError, LogConfig, Logger, LoggerFactory
from .messages import LogMessages
from .options import GreetOptions, InfoOptions, ListOptions, ProgressOptions
from .ui import Console, get_console, should_use_color
from .version import BuildInfo, version_string

PROG = "termdemo"


def build_parser() -> CommandParser:
    """Create the parser for options that come before the command name."""
    parser = CommandParser(
        prog=PROG,
        description="Demonstration commands rendered with rich.",
        add_help=False,
        usage=f"{PROG} [-h] [--version] [-c FILE] [-l LEVEL] [-q] [--no-color]"
        " COMMAND [flags]",
    )
    parser.add_argument("-h", "--help", action="store_true", help="show this help and exit")
    parser.add_argument("--version", action="store_true", help="show version and exit")
    parser.add_argument("-c", "--config", metavar="FILE", help="YAML configuration file")
    parser.add_argument(
        "-l",
        "--log-level",
        metavar="LEVEL",
        help="log level: trace, debug, info, warning, error or false",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="disable logging")
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    parser.add_argument("argv", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)
    return parser


def build_dispatcher(
    config: Config, console: Console, lg: Logger, token: CancellationToken
) -> Dispatcher:
    """
    Wire handlers and descriptors for every command.

    Flag defaults come from the `commands` configuration section.
    """
    greet = CommandDescriptor(
        name="greet",
        description="Greet someone with a summary table",
        handler=GreetHandler(LoggerFactory.derive(lg, "greet"), console),
        options_factory=GreetOptions,
        flags=(
            Flag(
                "name",
                str,
                config.command_default("greet", "name", GreetOptions.name),
                help="name to greet",
                metavar="NAME",
            ),
            Flag(
                "count",
                int,
                config.command_default("greet", "count", GreetOptions.count),
                help="number of greetings",
                metavar="N",
            ),
        ),
    )
    info = CommandDescriptor(
        name="info",
        description="Display system information",
        handler=InfoHandler(LoggerFactory.derive(lg, "info"), console),
        options_factory=InfoOptions,
    )
    listing = CommandDescriptor(
        name="list",
        description="Display a list of items",
        handler=ListHandler(LoggerFactory.derive(lg, "list"), console),
        options_factory=ListOptions.from_values,
        flags=(
            Flag(
                "items",
                str,
                ListOptions.from_values(config.command_default("list", "items")).items,
                help="items to show, comma separated or repeated",
                metavar="ITEM",
                multiple=True,
            ),
        ),
    )
    progress = CommandDescriptor(
        name="progress",
        description="Show a multi-task progress demonstration",
        handler=ProgressHandler(LoggerFactory.derive(lg, "progress"), console, token),
        options_factory=ProgressOptions,
        flags=(
            Flag(
                "duration",
                int,
                config.command_default(
                    "progress", "duration", ProgressOptions.duration_seconds
                ),
                help="duration in seconds",
                metavar="SECONDS",
                dest="duration_seconds",
            ),
        ),
    )
    return Dispatcher(
        [greet, info, listing, progress], console, LoggerFactory.derive(lg, "cli"), PROG
    )


def _create_logger(config: Config, args: argparse.Namespace) -> Logger:
    data = config.to_dict()
    if args.quiet:
        data["logging"]["level"] = False
    elif args.log_level:
        data["logging"]["level"] = args.log_level
    log_config = LogConfig.from_config(data)
    colors = log_config.colors and not args.no_color and should_use_color(sys.stderr)
    return LoggerFactory.create_root(dataclasses.replace(log_config, colors=colors))


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run termdemo with the given arguments (default: sys.argv[1:]).

    Returns:
        Process exit code
    """
    parser = build_parser()
    try:
        args = parser.parse_args(list(sys.argv[1:] if argv is None else argv))
    except InvalidArgumentError as e:
        parser.print_usage(sys.stderr)
        sys.stderr.write(f"{PROG}: error: {e.message}\n")
        return EXIT_FAILURE

    console = get_console(no_color=args.no_color)
    if args.version:
        console.print(version_string(BuildInfo.load()), markup=False)
        return EXIT_SUCCESS

    token = CancellationToken()
    try:
        config = Config.load(args.config)
        lg = _create_logger(config, args)
        dispatcher = build_dispatcher(config, console, lg, token)
    except (TermDemoError, InvalidLogLevelError) as e:
        console.print_error(str(e))
        return EXIT_FAILURE

    lg.debug(LogMessages.CONFIG_LOADED, extra={"path": str(config.source)})

    if args.help:
        parser.print_help(console.file)
        dispatcher.print_commands()
        return EXIT_SUCCESS

    with SignalCanceller(token):
        return dispatcher.dispatch(args.argv)
