"""
Console wrapper with terminal auto-detection.

All command output goes through one Console instance. Writes are serialized
with a lock so frames from the progress display and regular output never
interleave.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import IO, Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.theme import Theme


def _is_interactive(file: IO[str]) -> bool:
    """Check if the output file is an interactive terminal."""
    isatty = getattr(file, "isatty", None)
    return bool(isatty and isatty())


def should_use_color(file: IO[str]) -> bool:
    """Determine if color output should be used."""
    # Respect NO_COLOR environment variable (https://no-color.org/)
    if os.environ.get("NO_COLOR"):
        return False

    # Respect FORCE_COLOR for CI environments that support color
    if os.environ.get("FORCE_COLOR"):
        return True

    return _is_interactive(file)


TERMDEMO_THEME = {
    "info": "cyan",
    "warning": "yellow",
    "error": "red bold",
    "success": "green",
    "muted": "dim",
}


class Console:
    """
    Console wrapper around rich with a project theme and a write lock.

    Example:
        console = Console()
        console.print("[green]Success![/green]")
        console.print_error("Something went wrong")
    """

    def __init__(
        self,
        *,
        file: IO[str] | None = None,
        force_terminal: bool | None = None,
        no_color: bool | None = None,
        width: int | None = None,
    ):
        """
        Initialize the console.

        Args:
            file: Output file (default: sys.stdout)
            force_terminal: Force terminal mode (True/False) or auto-detect (None)
            no_color: Disable color output (True/False) or auto-detect (None)
            width: Fixed render width (default: detect from terminal)
        """
        self._file = file if file is not None else sys.stdout

        if no_color is None:
            no_color = not should_use_color(self._file)
        if force_terminal is None:
            force_terminal = _is_interactive(self._file)

        self._no_color = no_color
        self._force_terminal = force_terminal
        self._lock = threading.RLock()
        self._rich = RichConsole(
            file=self._file,
            force_terminal=force_terminal,
            no_color=no_color,
            theme=Theme(TERMDEMO_THEME),
            width=width,
            highlight=False,
        )

    @property
    def rich(self) -> RichConsole:
        """The underlying rich console, for live displays."""
        return self._rich

    @property
    def file(self) -> IO[str]:
        """The stream output is written to."""
        return self._file

    @property
    def is_interactive(self) -> bool:
        """Check if running in interactive mode."""
        return self._force_terminal

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print renderables or markup strings to the console."""
        with self._lock:
            self._rich.print(*args, **kwargs)

    def print_success(self, message: str) -> None:
        self.print(f"[success]{escape(message)}[/success]")

    def print_warning(self, message: str) -> None:
        self.print(f"[warning]Warning:[/warning] {escape(message)}")

    def print_error(self, message: str) -> None:
        self.print(f"[error]Error:[/error] {escape(message)}")

    def rule(self, title: str = "", *, align: str = "center") -> None:
        """Print a horizontal rule."""
        with self._lock:
            self._rich.rule(title, align=align)  # type: ignore[arg-type]


def get_console(no_color: bool | None = None) -> Console:
    """Create the console used by the command-line entry point."""
    return Console(no_color=True if no_color else None)
