"""
The `list` command.
"""

from rich.markup import escape

from ..cli.handler import CommandHandler
from ..constants import EXIT_SUCCESS
from ..messages import LogMessages, UiMessages
from ..options import ListOptions


class ListHandler(CommandHandler[ListOptions]):
    """Prints a rule and one bullet per item."""

    name = "list"

    def run(self) -> int:
        items = self.options.effective_items
        self.lg.info(LogMessages.LIST_EXECUTING, extra={"count": len(items)})
        self.console.rule(UiMessages.LIST_RULE, align="left")
        for item in items:
            self.console.print(UiMessages.LIST_BULLET.format(item=escape(item)))
        return EXIT_SUCCESS
