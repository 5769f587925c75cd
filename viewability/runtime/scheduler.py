"""Timer capabilities for debounced viewability callbacks."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from heapq import heappop, heappush

from viewability.api.contracts import TimerCallback


@dataclass(slots=True)
class _Timer:
    handle: int
    due_ms: float
    callback: TimerCallback
    cancelled: bool = False


class DeferredCallScheduler:
    """Host-driven one-shot timer queue measured in milliseconds.

    Nothing runs on its own: the host advances the clock from its frame or
    event loop, and due callbacks run in due-time order.
    """

    def __init__(self) -> None:
        self._now_ms = 0.0
        self._next_handle = 1
        self._timers: dict[int, _Timer] = {}
        self._queue: list[tuple[float, int]] = []

    @property
    def now_ms(self) -> float:
        return self._now_ms

    @property
    def queued_task_count(self) -> int:
        """Return count of pending, non-cancelled timers."""
        return sum(1 for timer in self._timers.values() if not timer.cancelled)

    def call_later(self, delay_ms: float, callback: TimerCallback) -> int:
        """Schedule a one-shot callback after ``delay_ms``."""
        if delay_ms < 0.0:
            raise ValueError("delay_ms must be >= 0")
        handle = self._next_handle
        self._next_handle += 1
        due_ms = self._now_ms + delay_ms
        self._timers[handle] = _Timer(handle=handle, due_ms=due_ms, callback=callback)
        heappush(self._queue, (due_ms, handle))
        return handle

    def cancel(self, handle: int) -> None:
        """Cancel a scheduled timer if it exists."""
        timer = self._timers.get(handle)
        if timer is not None:
            timer.cancelled = True

    def advance(self, delta_ms: float) -> int:
        """Advance the clock and run due callbacks."""
        if delta_ms < 0.0:
            raise ValueError("delta_ms must be >= 0")
        return self.run_due(self._now_ms + delta_ms)

    def run_due(self, now_ms: float) -> int:
        """Run callbacks due at or before ``now_ms``."""
        if now_ms < self._now_ms:
            raise ValueError("now_ms cannot move backwards")
        self._now_ms = now_ms
        executed = 0
        while self._queue and self._queue[0][0] <= self._now_ms:
            _, handle = heappop(self._queue)
            timer = self._timers.pop(handle, None)
            if timer is None or timer.cancelled:
                continue
            timer.callback()
            executed += 1
        return executed


class LoopTimerScheduler:
    """Timer capability backed by an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._next_handle = 1
        self._handles: dict[int, asyncio.TimerHandle] = {}

    def call_later(self, delay_ms: float, callback: TimerCallback) -> int:
        if delay_ms < 0.0:
            raise ValueError("delay_ms must be >= 0")
        loop = self._loop or asyncio.get_running_loop()
        handle = self._next_handle
        self._next_handle += 1

        def _fire() -> None:
            self._handles.pop(handle, None)
            callback()

        self._handles[handle] = loop.call_later(delay_ms / 1000.0, _fire)
        return handle

    def cancel(self, handle: int) -> None:
        timer = self._handles.pop(handle, None)
        if timer is not None:
            timer.cancel()

    @property
    def queued_task_count(self) -> int:
        return len(self._handles)
