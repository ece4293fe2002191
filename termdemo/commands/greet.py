"""
The `greet` command.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from rich import box
from rich.markup import escape

from ..cli.handler import CommandHandler
from ..constants import EXIT_SUCCESS, TIMESTAMP_FORMAT
from ..messages import LogMessages, UiMessages
from ..options import GreetOptions
from ..ui import Table


class GreetHandler(CommandHandler[GreetOptions]):
    """Prints a summary table followed by `count` greetings."""

    name = "greet"

    # Swapped in tests for a fixed clock
    clock: Callable[[], float] = staticmethod(time.time)

    def timestamp(self) -> str:
        return time.strftime(TIMESTAMP_FORMAT, time.localtime(self.clock()))

    def summary(self, options: GreetOptions) -> Table:
        table = Table(box=box.ROUNDED)
        table.add_column(UiMessages.GREET_PROPERTY_COLUMN, justify="center")
        table.add_column(UiMessages.GREET_VALUE_COLUMN, justify="center")
        table.add_row("Name", escape(options.name))
        table.add_row("Count", str(options.count))
        table.add_row("Timestamp", self.timestamp())
        return table

    def run(self) -> int:
        options = self.options
        self.lg.info(
            LogMessages.GREET_EXECUTING,
            extra={"name": options.name, "count": options.count},
        )
        self.console.print(self.summary(options))
        for index in range(1, options.count + 1):
            self.console.print(
                UiMessages.GREET_LINE.format(name=escape(options.name), index=index)
            )
        return EXIT_SUCCESS
