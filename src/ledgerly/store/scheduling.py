"""Deferred, cancellable callbacks used to debounce saves.

``ThreadingScheduler`` runs callbacks on timer threads. ``ManualScheduler``
keeps a virtual clock that only moves when told to, which lets tests drive
the debounce window without sleeping.
"""

from __future__ import annotations

import heapq
import itertools
import threading
from abc import ABC, abstractmethod
from typing import Callable


class ScheduledTask(ABC):
    """Handle for a scheduled callback."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the callback from running if it has not started yet."""

    @property
    @abstractmethod
    def cancelled(self) -> bool:
        """Whether ``cancel`` was called before the callback started."""


class Scheduler(ABC):
    """Runs callbacks after a delay."""

    @abstractmethod
    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        """Run ``callback`` once after ``delay`` seconds."""

    @abstractmethod
    def shutdown(self, wait: bool = True) -> None:
        """Cancel pending callbacks, optionally waiting for running ones."""


class _TimerTask(ScheduledTask):
    def __init__(self, scheduler: "ThreadingScheduler", timer: threading.Timer):
        self._scheduler = scheduler
        self._timer = timer
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True
        self._timer.cancel()
        self._scheduler._release(self._timer)

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class ThreadingScheduler(Scheduler):
    """Scheduler backed by daemon ``threading.Timer`` threads.

    A timer is forgotten once its callback finishes or it is cancelled.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._timers: set[threading.Timer] = set()

    @property
    def pending(self) -> int:
        """Number of timers that have neither finished nor been cancelled."""
        with self._lock:
            return len(self._timers)

    def _release(self, timer: threading.Timer) -> None:
        with self._lock:
            self._timers.discard(timer)

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        timer: threading.Timer

        def run() -> None:
            try:
                callback()
            finally:
                self._release(timer)

        timer = threading.Timer(max(delay, 0.0), run)
        timer.daemon = True
        with self._lock:
            self._timers.add(timer)
        timer.start()
        return _TimerTask(self, timer)

    def shutdown(self, wait: bool = True) -> None:
        with self._lock:
            timers = list(self._timers)
            self._timers.clear()
        for timer in timers:
            timer.cancel()
        if wait:
            current = threading.current_thread()
            for timer in timers:
                if timer is not current:
                    timer.join()


class _ManualTask(ScheduledTask):
    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class ManualScheduler(Scheduler):
    """Virtual-clock scheduler; callbacks run inside ``advance``/``run_pending``."""

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[tuple[float, int, _ManualTask]] = []
        self._counter = itertools.count()

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        task = _ManualTask(self.now + max(delay, 0.0), callback)
        heapq.heappush(self._queue, (task.due, next(self._counter), task))
        return task

    @property
    def pending(self) -> int:
        """Number of scheduled callbacks that have neither run nor been cancelled."""
        return sum(1 for _, _, task in self._queue if not task.cancelled)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every callback that falls due.

        Returns:
            Number of callbacks that ran
        """
        target = self.now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, task = heapq.heappop(self._queue)
            self.now = max(self.now, due)
            if not task.cancelled:
                task.callback()
                ran += 1
        self.now = target
        return ran

    def run_pending(self) -> int:
        """Run callbacks that are already due without moving the clock."""
        return self.advance(0.0)

    def shutdown(self, wait: bool = True) -> None:
        for _, _, task in self._queue:
            task.cancel()
        self._queue.clear()
