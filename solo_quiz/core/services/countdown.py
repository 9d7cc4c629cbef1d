"""Cancellable per-question deadline."""

from __future__ import annotations

from concurrent.futures import Future
from enum import Enum, auto
import logging
from threading import Lock, Timer
import time
from typing import Callable

logger = logging.getLogger(__name__)


class DeadlineOutcome(Enum):
    """How a question's deadline was resolved."""

    SUBMITTED = auto()
    EXPIRED = auto()
    CANCELLED = auto()


class QuestionDeadline:
    """Single-shot countdown whose ``outcome`` future resolves exactly once.

    With ``auto_expire`` the deadline arms a ``threading.Timer`` and calls
    ``on_expire(deadline)`` from the timer thread when it runs out. Shells that
    drive their own clock (a Qt ``QTimer``) pass ``auto_expire=False`` and
    report expiry through the session instead.
    """

    def __init__(
        self,
        duration_seconds: float,
        on_expire: Callable[[QuestionDeadline], None] | None = None,
        *,
        auto_expire: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if duration_seconds <= 0:
            raise ValueError("Deadline duration must be positive.")
        self.duration_seconds = float(duration_seconds)
        self.outcome: Future[DeadlineOutcome] = Future()
        self._on_expire = on_expire
        self._auto_expire = auto_expire
        self._clock = clock
        self._lock = Lock()
        self._started_at: float | None = None
        self._timer: Timer | None = None

    def start(self) -> None:
        with self._lock:
            if self._started_at is not None:
                raise RuntimeError("Deadline already started.")
            self._started_at = self._clock()
            if self._auto_expire:
                self._timer = Timer(self.duration_seconds, self._fire)
                self._timer.daemon = True
                self._timer.start()

    def is_started(self) -> bool:
        return self._started_at is not None

    def is_resolved(self) -> bool:
        return self.outcome.done()

    def remaining_seconds(self) -> float:
        if self._started_at is None:
            return self.duration_seconds
        if self.outcome.done():
            return 0.0
        elapsed = self._clock() - self._started_at
        return max(0.0, self.duration_seconds - elapsed)

    def settle(self, outcome: DeadlineOutcome) -> bool:
        """Resolve the deadline. Returns False if it was already resolved."""
        with self._lock:
            if self.outcome.done():
                return False
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self.outcome.set_result(outcome)
            return True

    def cancel(self) -> bool:
        return self.settle(DeadlineOutcome.CANCELLED)

    def _fire(self) -> None:
        if self.outcome.done():
            return
        if self._on_expire is None:
            self.settle(DeadlineOutcome.EXPIRED)
            return
        logger.debug("Question deadline of %.1fs expired", self.duration_seconds)
        self._on_expire(self)
