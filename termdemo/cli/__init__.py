"""
Command framework: handlers, descriptors and the dispatcher.
"""

from .descriptor import CommandDescriptor, Flag
from .dispatcher import Dispatcher, DispatchState
from .handler import CommandHandler
from .parser import CommandParser, HelpRequested

__all__ = [
    "CommandDescriptor",
    "CommandHandler",
    "CommandParser",
    "DispatchState",
    "Dispatcher",
    "Flag",
    "HelpRequested",
]
