"""
Console fixtures for testing.

Provides a console rendering plain text into a buffer, so tests can assert on
what a command printed.
"""

from io import StringIO

import pytest

from termdemo.cancel import CancellationToken
from termdemo.ui import Console


@pytest.fixture
def output() -> StringIO:
    """Buffer receiving everything printed to the test console."""
    return StringIO()


@pytest.fixture
def console(output: StringIO) -> Console:
    """
    Provide a non-interactive, colorless console writing to `output`.

    Returns:
        Console: Console with a fixed width so rendering is deterministic
    """
    return Console(file=output, force_terminal=False, no_color=True, width=100)


@pytest.fixture
def token() -> CancellationToken:
    return CancellationToken()
