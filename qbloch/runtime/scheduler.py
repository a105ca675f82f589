"""Deferred callbacks driven by the caller's frame clock."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, List, Tuple

from qbloch.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ScheduledCall:
    """Handle for one deferred callback."""

    due_ms: float
    callback: Callable[[], None] = field(repr=False)
    cancelled: bool = False
    done: bool = False


class Scheduler:
    """
    Single-threaded timer queue with no clock of its own.

    Time moves only when :meth:`advance` is called, so the owner of the
    render loop also owns every delay. Callbacks due at the same instant
    run in the order they were scheduled.
    """

    def __init__(self) -> None:
        self._now_ms = 0.0
        self._queue: List[Tuple[float, int, ScheduledCall]] = []
        self._counter = itertools.count()

    @property
    def now_ms(self) -> float:
        return self._now_ms

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ScheduledCall:
        """
        Run ``callback`` once ``delay_ms`` of clock time has passed.

        Raises:
            ValueError: If ``delay_ms`` is negative.
        """
        if delay_ms < 0.0:
            raise ValueError(f"delay_ms must be non-negative, got {delay_ms}.")
        call = ScheduledCall(due_ms=self._now_ms + float(delay_ms), callback=callback)
        heapq.heappush(self._queue, (call.due_ms, next(self._counter), call))
        return call

    def cancel(self, call: ScheduledCall) -> bool:
        """Cancel a pending call. Returns False if it already ran or was cancelled."""
        if call.done or call.cancelled:
            return False
        call.cancelled = True
        return True

    def pending(self) -> int:
        return sum(1 for _, _, call in self._queue if not call.cancelled)

    def advance(self, delta_ms: float) -> int:
        """
        Move the clock forward and run every callback that fell due.

        Each callback sees :attr:`now_ms` equal to its own due time.
        Callbacks scheduled from inside a callback run in the same call if
        they fall due within the window. Negative deltas count as zero.

        Returns:
            Number of callbacks run.
        """
        deadline = self._now_ms + max(float(delta_ms), 0.0)
        ran = 0
        while self._queue and self._queue[0][0] <= deadline:
            due_ms, _, call = heapq.heappop(self._queue)
            if call.cancelled:
                continue
            self._now_ms = due_ms
            call.done = True
            call.callback()
            ran += 1
        self._now_ms = deadline
        if ran:
            logger.debug("Ran %d deferred callback(s) at t=%.1f ms", ran, self._now_ms)
        return ran
