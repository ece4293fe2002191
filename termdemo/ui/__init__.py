"""
Rich terminal output for termdemo.

Example:
    from termdemo.ui import Console, Panel, Table

    console = Console()
    table = Table(title="Results")
    table.add_column("Name")
    table.add_row("server-1")
    console.print(table)
"""

from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

from .console import Console, get_console, should_use_color
from .progress import ProgressBoard

__all__ = [
    "Console",
    "Panel",
    "ProgressBoard",
    "Rule",
    "Table",
    "get_console",
    "should_use_color",
]
