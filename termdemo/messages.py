"""
Message catalog for termdemo.

Log messages, error messages and user-interface strings live here so command
code reads as behavior rather than as prose. UI strings may carry rich markup.
"""


class LogMessages:
    """Messages passed to the logger. Structured data goes in `extra`."""

    INFO_EXECUTING = "executing info command"
    INFO_COMPLETED = "info command completed"
    PROGRESS_EXECUTING = "executing progress command"
    PROGRESS_COMPLETED = "progress command completed"
    PROGRESS_CANCELLED = "progress command was cancelled"
    PROGRESS_STOPPED = "progress stopped before completion"
    PROGRESS_STEPS_DONE = "all progress steps done"
    GREET_EXECUTING = "executing greet command"
    LIST_EXECUTING = "executing list command"
    OPTIONS_BOUND = "options bound"
    COMMAND_FAILED = "command failed"
    COMMAND_CANCELLED = "command cancelled"
    DISPATCH = "dispatching command"
    DISPATCH_DONE = "command finished"
    UNKNOWN_COMMAND = "unknown command"
    INVALID_ARGUMENTS = "invalid arguments"
    FATAL_ERROR = "unhandled error escaped command"
    CONFIG_LOADED = "loaded config"


class ErrorMessages:
    """Messages used in exceptions and validation."""

    PROGRESS_INVALID_DURATION = "Duration must be greater than 0."
    GREET_EMPTY_NAME = "Name must not be empty."
    GREET_INVALID_COUNT = "Count must be at least 1."
    OPERATION_CANCELLED = "Operation cancelled by user."
    HANDLER_UNBOUND = "Command '{0}' executed before its options were bound."
    INVALID_ARGUMENT = "Invalid argument: {0}"
    EXECUTION_ERROR = "Error: {0}"


class UiMessages:
    """Strings rendered to the terminal."""

    INFO_PANEL_HEADER = "[bold cyan]📊 System Info[/]"
    INFO_PANEL_TITLE = "[bold]System Information[/]"
    INFO_OS = "OS:"
    INFO_RUNTIME = "Runtime:"
    INFO_MACHINE = "Machine:"
    INFO_USER = "User:"
    INFO_64BIT = "64-bit:"
    INFO_PROCESSORS = "Processors:"

    PROGRESS_TASK_FILES = "[green]Processing files[/]"
    PROGRESS_TASK_DOWNLOAD = "[yellow]Downloading data[/]"
    PROGRESS_TASK_CACHE = "[cyan]Building cache[/]"
    PROGRESS_ALL_COMPLETED = "[bold green]✓ All tasks completed![/]"

    GREET_PROPERTY_COLUMN = "[bold yellow]Property[/]"
    GREET_VALUE_COLUMN = "[bold cyan]Value[/]"
    GREET_LINE = "[bold green]Hello, {name}![/] (#{index})"

    LIST_RULE = "[bold yellow]📋 Item List[/]"
    LIST_BULLET = "[cyan]•[/] [white]{item}[/]"

    COMMAND_CANCELLED = "[yellow]{0} command cancelled.[/]"
    FATAL_ERROR = "Fatal error: {0}"
    AVAILABLE_COMMANDS = "Available commands:"
