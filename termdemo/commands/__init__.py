"""
Concrete command handlers.
"""

from .greet import GreetHandler
from .info import HostInfo, InfoHandler
from .listing import ListHandler
from .progress import ProgressHandler, ProgressOutcome, ProgressSimulation

__all__ = [
    "GreetHandler",
    "HostInfo",
    "InfoHandler",
    "ListHandler",
    "ProgressHandler",
    "ProgressOutcome",
    "ProgressSimulation",
]
