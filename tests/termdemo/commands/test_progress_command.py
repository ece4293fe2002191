"""
Tests for the progress command.

Tests key progress features including:
- Step schedule arithmetic
- Cancellation before and during the loop
- Handler output and exit codes
"""

import logging
import math
import threading
from unittest.mock import MagicMock, patch

import pytest

from termdemo.cancel import CancellationToken
from termdemo.commands.progress import (
    ProgressHandler,
    ProgressOutcome,
    ProgressSimulation,
)
from termdemo.errors import CancelledError
from termdemo.options import ProgressOptions

# =============================================================================
# Test Doubles
# =============================================================================


class RecordingBoard:
    """Stand-in for ProgressBoard that records every call."""

    def __init__(self):
        self.values = {}
        self.advances = {}
        self.completed_all = False
        self.logged = []

    def add_task(self, description):
        task_id = len(self.values)
        self.values[task_id] = 0.0
        self.advances[task_id] = []
        return task_id

    def advance(self, task_id, amount):
        self.values[task_id] = min(self.values[task_id] + amount, 100.0)
        self.advances[task_id].append(amount)

    def complete_all(self):
        self.completed_all = True
        for task_id in self.values:
            self.values[task_id] = 100.0

    def log(self, msg, level=logging.INFO, *args, **kwargs):
        self.logged.append((level, msg, kwargs.get("extra", {})))


class InstantToken(CancellationToken):
    """Token whose wait() never sleeps, optionally cancelling at a given step."""

    def __init__(self, cancel_at=None):
        super().__init__()
        self.cancel_at = cancel_at
        self.waits = 0

    def wait(self, timeout):
        if self.cancel_at is not None and self.waits == self.cancel_at:
            self.cancel("test")
        self.waits += 1
        return self.cancelled


# =============================================================================
# Test ProgressSimulation
# =============================================================================


@pytest.mark.unit
class TestProgressSimulation:
    """Test the step schedule."""

    def test_three_seconds_is_thirty_steps(self):
        """Test step count and increment for the default duration."""
        simulation = ProgressSimulation(3)
        assert simulation.steps == 30
        assert simulation.increment == pytest.approx(100.0 / 30)

    def test_thresholds_for_default_duration(self):
        """Test task2 starts at index 11 and task3 at index 16."""
        simulation = ProgressSimulation(3)
        assert simulation.advances(10) == (True, False, False)
        assert simulation.advances(11) == (True, True, False)
        assert simulation.advances(15) == (True, True, False)
        assert simulation.advances(16) == (True, True, True)

    def test_run_advances_and_completes(self):
        """Test a full run advances on schedule and then completes."""
        board = RecordingBoard()
        token = InstantToken()
        outcome = ProgressSimulation(3).run(board, token)

        assert outcome is ProgressOutcome.COMPLETED
        assert token.waits == 30
        assert len(board.advances[0]) == 30
        assert len(board.advances[1]) == 30 - 11
        assert len(board.advances[2]) == 30 - 16
        assert math.isclose(sum(board.advances[0]), 100.0)
        assert board.completed_all
        assert list(board.values.values()) == [100.0, 100.0, 100.0]

    def test_cancel_before_start(self):
        """Test an already cancelled token stops before any advance."""
        board = RecordingBoard()
        token = InstantToken()
        token.cancel()
        assert ProgressSimulation(3).run(board, token) is ProgressOutcome.CANCELLED
        assert board.advances[0] == []
        assert not board.completed_all

    def test_cancel_mid_run(self):
        """Test cancellation stops advancing before the next step."""
        board = RecordingBoard()
        token = InstantToken(cancel_at=5)
        assert ProgressSimulation(3).run(board, token) is ProgressOutcome.CANCELLED
        assert len(board.advances[0]) == 5
        assert not board.completed_all

    def test_cancel_logged_through_board(self):
        """Test the stop is logged via the board with the step reached."""
        board = RecordingBoard()
        ProgressSimulation(3).run(board, InstantToken(cancel_at=5))
        assert board.logged == [
            (logging.INFO, "progress stopped before completion", {"step": 5, "steps": 30})
        ]

    def test_completion_logged_through_board(self):
        """Test a full run logs one debug line via the board."""
        board = RecordingBoard()
        ProgressSimulation(1).run(board, InstantToken())
        assert board.logged == [(logging.DEBUG, "all progress steps done", {"steps": 10})]

    def test_wait_uses_interval(self):
        """Test each step waits one interval on the token."""
        token = MagicMock(spec=CancellationToken)
        token.wait.return_value = False
        ProgressSimulation(1, interval=0.25).run(RecordingBoard(), token)
        assert token.wait.call_count == 10
        token.wait.assert_called_with(0.25)


# =============================================================================
# Test ProgressHandler
# =============================================================================


@pytest.mark.unit
class TestProgressHandler:
    """Test the progress handler."""

    def test_completes(self, lg, console, output):
        """Test a run prints the completion line and exits 0."""
        handler = ProgressHandler(lg, console, InstantToken())
        handler.bind(ProgressOptions(duration_seconds=1))

        assert handler.execute() == 0
        text = output.getvalue()
        assert "Processing files" in text
        assert "Downloading data" in text
        assert "Building cache" in text
        assert "All tasks completed!" in text

    def test_cancelled_raises(self, lg, console, output, log_stream):
        """Test a cancelled run raises CancelledError and skips completion."""
        handler = ProgressHandler(lg, console, InstantToken(cancel_at=3))
        handler.bind(ProgressOptions(duration_seconds=1))

        with pytest.raises(CancelledError):
            handler.execute()
        assert "All tasks completed!" not in output.getvalue()
        assert "[reason:test]" in log_stream.getvalue()
        assert "progress stopped before completion" in log_stream.getvalue()

    def test_unexpected_failure_exit_code(self, lg, console, output):
        """Test errors inside the loop become exit code 1."""
        handler = ProgressHandler(lg, console, InstantToken())
        handler.bind(ProgressOptions(duration_seconds=1))
        with patch.object(ProgressSimulation, "run", side_effect=OSError("tty gone")):
            assert handler.execute() == 1
        assert "Error: tty gone" in output.getvalue()

    def test_cancel_from_other_thread(self, lg, console):
        """Test a real token cancelled mid-run stops the command early."""
        token = CancellationToken()
        handler = ProgressHandler(lg, console, token)
        handler.bind(ProgressOptions(duration_seconds=30))

        timer = threading.Timer(0.15, token.cancel)
        timer.start()
        try:
            with pytest.raises(CancelledError):
                handler.execute()
        finally:
            timer.cancel()
