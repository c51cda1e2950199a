"""Background timers driving the splash delay and carousel autoplay.

Callbacks run on a daemon thread. Screens hand UI work back to the page
event loop with ``page.run_task``.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Callable


class _BaseTimer(ABC):
    """Shared start/cancel bookkeeping."""

    def __init__(self, seconds: float, callback: Callable[[], None]) -> None:
        if seconds <= 0:
            raise ValueError(f"Timer duration must be positive, got {seconds}")
        self.seconds = seconds
        self.callback = callback
        self._cancelled = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_active(self) -> bool:
        """True while the timer thread is running and not cancelled."""
        return (
            self._thread is not None
            and self._thread.is_alive()
            and not self._cancelled.is_set()
        )

    def start(self) -> None:
        """Start the timer. Starting twice is an error."""
        if self._thread is not None:
            raise RuntimeError("Timer already started")
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def cancel(self) -> None:
        """Stop the timer; no callback runs after this returns."""
        self._cancelled.set()

    @abstractmethod
    def _run(self) -> None:
        """Body of the timer thread."""
        pass


class OneShotTimer(_BaseTimer):
    """Calls ``callback`` once after ``seconds``, unless cancelled first."""

    def _run(self) -> None:
        # wait() returns True when cancel() was called
        if not self._cancelled.wait(self.seconds):
            self._cancelled.set()
            self.callback()


class RepeatingTimer(_BaseTimer):
    """Calls ``callback`` every ``seconds`` until cancelled."""

    def _run(self) -> None:
        while not self._cancelled.wait(self.seconds):
            self.callback()
