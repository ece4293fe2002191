"""
Cooperative cancellation for running commands.

SIGINT and SIGTERM set a CancellationToken instead of raising
KeyboardInterrupt in the middle of a step. Long-running loops wait on the
token between steps, wake up as soon as it is cancelled, and return a
cancelled outcome before doing any more work.
"""

import signal
import threading
from typing import Any


class CancellationToken:
    """
    Thread-safe cancellation flag.

    Usage:
        token = CancellationToken()
        while not token.cancelled:
            if token.wait(0.1):
                break
            do_step()
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self._reason: str | None = None

    @property
    def cancelled(self) -> bool:
        """Check if cancellation was requested."""
        return self._event.is_set()

    @property
    def reason(self) -> str | None:
        return self._reason

    def cancel(self, reason: str = "cancelled") -> None:
        """Request cancellation. Repeated calls keep the first reason."""
        if not self._event.is_set():
            self._reason = reason
            self._event.set()

    def wait(self, timeout: float) -> bool:
        """
        Sleep up to `timeout` seconds, returning early on cancellation.

        Returns:
            True if the token is cancelled
        """
        if timeout <= 0:
            return self._event.is_set()
        return self._event.wait(timeout)


class SignalCanceller:
    """
    Routes SIGINT and SIGTERM to a CancellationToken.

    A second signal while already cancelled restores the original handlers
    and raises KeyboardInterrupt, so a stuck command can still be killed.

    Usage:
        with SignalCanceller(token):
            dispatcher.dispatch(argv)
    """

    SIGNALS = (signal.SIGINT, signal.SIGTERM)

    def __init__(self, token: CancellationToken) -> None:
        self._token = token
        self._original_handlers: dict[signal.Signals, Any] = {}

    def _handle_signal(self, signum: int, frame: Any) -> None:
        if self._token.cancelled:
            self.restore()
            raise KeyboardInterrupt()
        self._token.cancel(signal.Signals(signum).name)

    def install(self) -> None:
        """Install handlers; only possible from the main thread."""
        if threading.current_thread() is not threading.main_thread():
            return
        for sig in self.SIGNALS:
            self._original_handlers[sig] = signal.signal(sig, self._handle_signal)

    def restore(self) -> None:
        for sig, handler in self._original_handlers.items():
            signal.signal(sig, handler)
        self._original_handlers.clear()

    def __enter__(self) -> "SignalCanceller":
        self.install()
        return self

    def __exit__(self, *args: Any) -> None:
        self.restore()
