"""
The `progress` command: three simulated tasks advancing at different rates.

The work loop is separate from the handler so its arithmetic can be checked
without a terminal or real sleeps.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from ..cancel import CancellationToken
from ..cli.handler import CommandHandler
from ..constants import (
    EXIT_SUCCESS,
    PERCENT_COMPLETE,
    STEP_INTERVAL_SECONDS,
    STEPS_PER_SECOND,
)
from ..errors import CancelledError
from ..messages import LogMessages, UiMessages
from ..options import ProgressOptions
from ..ui import Console, ProgressBoard

TASK_DESCRIPTIONS = (
    UiMessages.PROGRESS_TASK_FILES,
    UiMessages.PROGRESS_TASK_DOWNLOAD,
    UiMessages.PROGRESS_TASK_CACHE,
)


class ProgressOutcome(Enum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class ProgressSimulation:
    """
    Step schedule for a run of `duration_seconds`.

    There are duration * 10 steps, each worth 100 / steps percent. The first
    task advances every step, the second only after the first third of the
    steps and the third only after the first half.
    """

    duration_seconds: int
    interval: float = STEP_INTERVAL_SECONDS

    @property
    def steps(self) -> int:
        return self.duration_seconds * STEPS_PER_SECOND

    @property
    def increment(self) -> float:
        return PERCENT_COMPLETE / self.steps

    def advances(self, index: int) -> tuple[bool, bool, bool]:
        """Which of the three tasks advance at step `index`."""
        steps = self.steps
        return (True, index > steps // 3, index > steps // 2)

    def run(self, board: ProgressBoard, token: CancellationToken) -> ProgressOutcome:
        """
        Drive the board through every step.

        Waits one interval before each step and stops without advancing
        further once the token is cancelled. Log lines are written through
        the board. On completion every task is set to 100%.
        """
        task_ids = [board.add_task(description) for description in TASK_DESCRIPTIONS]
        for index in range(self.steps):
            if token.wait(self.interval):
                board.log(
                    LogMessages.PROGRESS_STOPPED,
                    logging.INFO,
                    extra={"step": index, "steps": self.steps},
                )
                return ProgressOutcome.CANCELLED
            for task_id, advance in zip(task_ids, self.advances(index)):
                if advance:
                    board.advance(task_id, self.increment)
        board.log(
            LogMessages.PROGRESS_STEPS_DONE, logging.DEBUG, extra={"steps": self.steps}
        )
        board.complete_all()
        return ProgressOutcome.COMPLETED


class ProgressHandler(CommandHandler[ProgressOptions]):
    """Shows the multi-task progress display."""

    name = "progress"

    def __init__(self, lg: logging.Logger, console: Console, token: CancellationToken):
        super().__init__(lg, console)
        self.token = token

    def run(self) -> int:
        duration = self.options.duration_seconds
        self.lg.info(LogMessages.PROGRESS_EXECUTING, extra={"duration": duration})

        simulation = ProgressSimulation(duration)
        with ProgressBoard(self.console, self.lg) as board:
            outcome = simulation.run(board, self.token)

        if outcome is ProgressOutcome.CANCELLED:
            self.lg.warning(
                LogMessages.PROGRESS_CANCELLED, extra={"reason": self.token.reason}
            )
            raise CancelledError(command=self.name)

        self.console.print(UiMessages.PROGRESS_ALL_COMPLETED)
        self.lg.info(LogMessages.PROGRESS_COMPLETED)
        return EXIT_SUCCESS
