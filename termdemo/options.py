"""
Validated option values for commands.

Each command receives one immutable options object. Construction only stores
the fields; validate() checks them and is run exactly once by
CommandHandler.bind() before the handler may execute.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .constants import (
    DEFAULT_DURATION_SECONDS,
    DEFAULT_GREET_COUNT,
    DEFAULT_GREET_NAME,
    FALLBACK_ITEMS,
)
from .errors import ValidationError
from .messages import ErrorMessages


@dataclass(frozen=True)
class CommandOptions:
    """
    Base class for command options.

    Subclasses are frozen dataclasses and override validate() when they have
    constraints. The base implementation accepts everything.

    Example:
        @dataclass(frozen=True)
        class CountOptions(CommandOptions):
            count: int = 1

            def validate(self) -> None:
                if self.count <= 0:
                    raise ValidationError("count", "Count must be positive")
    """

    def validate(self) -> None:
        """
        Validate the options.

        Raises:
            ValidationError: When a field violates a constraint
        """
        return None


@dataclass(frozen=True)
class InfoOptions(CommandOptions):
    """The info command takes no options."""


@dataclass(frozen=True)
class ProgressOptions(CommandOptions):
    """Options for the progress demonstration."""

    duration_seconds: int = DEFAULT_DURATION_SECONDS

    def validate(self) -> None:
        if self.duration_seconds <= 0:
            raise ValidationError(
                "duration_seconds",
                ErrorMessages.PROGRESS_INVALID_DURATION,
                value=self.duration_seconds,
            )


@dataclass(frozen=True)
class GreetOptions(CommandOptions):
    """Options for the greet command."""

    name: str = DEFAULT_GREET_NAME
    count: int = DEFAULT_GREET_COUNT

    def validate(self) -> None:
        if not self.name.strip():
            raise ValidationError("name", ErrorMessages.GREET_EMPTY_NAME)
        if self.count < 1:
            raise ValidationError(
                "count", ErrorMessages.GREET_INVALID_COUNT, value=self.count
            )


@dataclass(frozen=True)
class ListOptions(CommandOptions):
    """Options for the list command. Empty items select the fallback list."""

    items: tuple[str, ...] = ()

    @classmethod
    def from_values(cls, items: Iterable[str] | str | None = None) -> ListOptions:
        """
        Build options from raw flag values.

        Values may be comma separated and may repeat:
        ["a,b", "c"] -> ("a", "b", "c"). Blank entries are dropped.
        """
        if items is None:
            return cls()
        if isinstance(items, str):
            items = [items]

        parsed: list[str] = []
        for value in items:
            for part in str(value).split(","):
                part = part.strip()
                if part:
                    parsed.append(part)
        return cls(items=tuple(parsed))

    @property
    def effective_items(self) -> tuple[str, ...]:
        """The items to display, falling back to the fixed fruit list."""
        return self.items or FALLBACK_ITEMS
