"""
The `info` command: a panel describing the host.
"""

from __future__ import annotations

import getpass
import os
import platform
from dataclasses import dataclass

from rich import box
from rich.markup import escape

from ..cli.handler import CommandHandler
from ..constants import EXIT_SUCCESS
from ..messages import LogMessages, UiMessages
from ..options import InfoOptions
from ..ui import Panel


def _user_name() -> str:
    try:
        return getpass.getuser()
    except (OSError, KeyError):
        # No login name and no passwd entry, e.g. an arbitrary container uid
        return "unknown"


@dataclass(frozen=True)
class HostInfo:
    """Facts about the machine the command runs on."""

    os_version: str
    runtime_version: str
    machine_name: str
    user_name: str
    is_64bit: bool
    processor_count: int

    @classmethod
    def collect(cls) -> HostInfo:
        return cls(
            os_version=platform.platform(),
            runtime_version=(
                f"{platform.python_implementation()} {platform.python_version()}"
            ),
            machine_name=platform.node(),
            user_name=_user_name(),
            is_64bit=platform.machine().endswith("64"),
            processor_count=os.cpu_count() or 1,
        )

    def rows(self) -> list[tuple[str, str]]:
        return [
            (UiMessages.INFO_OS, self.os_version),
            (UiMessages.INFO_RUNTIME, self.runtime_version),
            (UiMessages.INFO_MACHINE, self.machine_name),
            (UiMessages.INFO_USER, self.user_name),
            (UiMessages.INFO_64BIT, str(self.is_64bit)),
            (UiMessages.INFO_PROCESSORS, str(self.processor_count)),
        ]


class InfoHandler(CommandHandler[InfoOptions]):
    """Prints host information in a double-bordered panel."""

    name = "info"

    def collect(self) -> HostInfo:
        return HostInfo.collect()

    def render(self, host: HostInfo) -> Panel:
        lines = [UiMessages.INFO_PANEL_TITLE, ""]
        lines.extend(
            f"[yellow]{label}[/] {escape(value)}" for label, value in host.rows()
        )
        return Panel(
            "\n".join(lines),
            box=box.DOUBLE,
            border_style="cyan",
            title=UiMessages.INFO_PANEL_HEADER,
            title_align="left",
            expand=False,
        )

    def run(self) -> int:
        self.lg.info(LogMessages.INFO_EXECUTING)
        self.console.print(self.render(self.collect()))
        self.lg.info(LogMessages.INFO_COMPLETED)
        return EXIT_SUCCESS
