"""
Multi-task progress display with logging coordination.

Provides a context manager that shows several progress bars at once while
letting log messages be written cleanly by pausing the live display first.
Progress values are tracked locally too, so callers (and tests) can read
them whether or not the terminal is animated.
"""

from __future__ import annotations

import logging
from typing import Any

from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TaskProgressColumn,
    TextColumn,
)

from ..constants import PERCENT_COMPLETE
from .console import Console


class ProgressBoard:
    """
    Context manager owning a rich Progress with one bar per task.

    Example:
        with ProgressBoard(console, lg) as board:
            files = board.add_task("[green]Processing files[/]")
            for _ in range(10):
                board.advance(files, 10.0)
                board.log("step done", logging.DEBUG)
    """

    def __init__(
        self,
        console: Console,
        logger: logging.Logger,
        total: float = PERCENT_COMPLETE,
        transient: bool = False,
    ):
        """
        Initialize the progress board.

        Args:
            console: Console the display renders to
            logger: Logger used by log()
            total: Value at which each task is complete
            transient: Remove the display when the board closes
        """
        self._console = console
        self._logger = logger
        self._total = total
        self._transient = transient
        self._progress: Progress | None = None
        self._tasks: dict[TaskID, float] = {}
        self._descriptions: dict[TaskID, str] = {}
        self._next_id = 0

    def __enter__(self) -> ProgressBoard:
        """Start the live display."""
        self._progress = Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            SpinnerColumn(),
            console=self._console.rich,
            transient=True,
        )
        self._progress.start()
        for task_id, description in self._descriptions.items():
            self._progress.add_task(
                description, total=self._total, completed=self._tasks[task_id]
            )
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Stop the live display."""
        if self._progress is None:
            return
        with self._console.lock:
            self._progress.stop()
            if not self._transient:
                # The live region is always transient; leave one final frame behind
                self._console.rich.print(self._progress.get_renderable())
        self._progress = None

    def add_task(self, description: str) -> TaskID:
        """Add a task bar starting at zero."""
        if self._progress is not None:
            task_id = self._progress.add_task(description, total=self._total)
        else:
            task_id = TaskID(self._next_id)
        self._next_id = int(task_id) + 1
        self._tasks[task_id] = 0.0
        self._descriptions[task_id] = description
        return task_id

    def advance(self, task_id: TaskID, amount: float) -> None:
        """Advance a task, never past the total."""
        value = min(self._tasks[task_id] + amount, self._total)
        self._set(task_id, value)

    def complete(self, task_id: TaskID) -> None:
        """Mark a task as finished."""
        self._set(task_id, self._total)

    def complete_all(self) -> None:
        for task_id in list(self._tasks):
            self.complete(task_id)

    def completed(self, task_id: TaskID) -> float:
        """Get the current value of a task."""
        return self._tasks[task_id]

    @property
    def task_ids(self) -> list[TaskID]:
        return list(self._tasks)

    def _set(self, task_id: TaskID, value: float) -> None:
        self._tasks[task_id] = value
        if self._progress is not None:
            self._progress.update(task_id, completed=value)

    def _pause(self) -> None:
        if self._progress is not None:
            self._progress.stop()

    def _resume(self) -> None:
        if self._progress is not None:
            self._progress.start()

    def log(self, msg: str, level: int = logging.INFO, *args: Any, **kwargs: Any) -> None:
        """
        Log a message, pausing the live display while it is written.

        Args:
            msg: Log message
            level: Log level (default: INFO)
            *args: Additional positional args for logger
            **kwargs: Additional keyword args for logger (e.g., extra={})
        """
        if not self._logger.isEnabledFor(level):
            return
        with self._console.lock:
            self._pause()
            self._logger.log(level, msg, *args, **kwargs)
            self._resume()
