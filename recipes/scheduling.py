"""
Scheduling primitives for the interactive client.

- Scheduler contract: schedule(delay, action) -> handle, cancel(handle)
- TimerScheduler: runs actions on threading.Timer threads
- InlineScheduler: runs actions immediately (used where input already arrives
  only once the user has committed it, e.g. Streamlit text inputs)
- Debouncer: restarts a delayed action on every trigger
- RequestGenerations: monotonically increasing request tokens used to discard
  stale completions
"""

import logging
import threading
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

Action = Callable[[], None]


class TimerScheduler:
    """Schedule actions on daemon threading.Timer threads."""

    def schedule(self, delay: float, action: Action) -> threading.Timer:
        timer = threading.Timer(delay, action)
        timer.daemon = True
        timer.start()
        return timer

    def cancel(self, handle: threading.Timer) -> None:
        handle.cancel()


class InlineScheduler:
    """Run actions immediately; nothing is ever pending."""

    def schedule(self, delay: float, action: Action) -> None:
        action()
        return None

    def cancel(self, handle: Any) -> None:
        return None


class Debouncer:
    """
    Delay an action until triggers have been quiet for `delay` seconds.

    Each trigger cancels the previously scheduled action, if any, and schedules
    the new one.
    """

    def __init__(self, scheduler, delay: float) -> None:
        self.scheduler = scheduler
        self.delay = delay
        self._handle: Optional[Any] = None
        self._seq = 0
        self._pending_seq: Optional[int] = None
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        return self._pending_seq is not None

    def trigger(self, action: Action) -> None:
        self.cancel()
        with self._lock:
            self._seq += 1
            seq = self._seq
            self._pending_seq = seq

        def run() -> None:
            # A timer may fire after being cancelled; only the latest trigger runs
            with self._lock:
                if self._pending_seq != seq:
                    return
                self._pending_seq = None
                self._handle = None
            action()

        handle = self.scheduler.schedule(self.delay, run)
        with self._lock:
            if self._pending_seq == seq:
                self._handle = handle
        logger.debug("Debounced action scheduled in %.3fs", self.delay)

    def cancel(self) -> None:
        with self._lock:
            handle, self._handle = self._handle, None
            was_pending = self._pending_seq is not None
            self._pending_seq = None
        if handle is not None:
            self.scheduler.cancel(handle)
        if was_pending:
            logger.debug("Pending debounced action cancelled")


class RequestGenerations:
    """
    Issue request tokens and tell whether a token is still the active one.

    A completion carrying a token that is no longer current belongs to a
    superseded request and must not be applied.
    """

    def __init__(self) -> None:
        self._current = 0
        self._lock = threading.Lock()

    @property
    def current(self) -> int:
        return self._current

    def issue(self) -> int:
        with self._lock:
            self._current += 1
            return self._current

    def is_current(self, token: int) -> bool:
        return token == self._current

    def invalidate(self) -> None:
        """Supersede any request in flight."""
        self.issue()
