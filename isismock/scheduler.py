"""A simple thread-safe task scheduler driven by an explicit loop."""

from __future__ import annotations

import threading
from collections import deque
from typing import Callable, Optional

__all__ = ["LoopScheduler"]


class LoopScheduler:
    """Queue of tasks executed by whichever thread runs the loop."""

    def __init__(self) -> None:
        self._tasks: deque[Optional[Callable[[], object]]] = deque()
        self._running = True
        self._cond = threading.Condition()

    def stop(self) -> None:
        """Stop the loop and wake up any thread waiting for tasks."""
        with self._cond:
            self._running = False
            self._cond.notify_all()

    def run(self) -> None:
        """Execute tasks until the scheduler is stopped."""
        while self.exec_one():
            pass

    def stopped(self) -> bool:
        """Return True once :meth:`stop` has been called."""
        with self._cond:
            return not self._running

    def post(self, task: Optional[Callable[[], object]]) -> None:
        """Queue ``task`` for execution by the loop thread."""
        with self._cond:
            self._tasks.append(task)
            self._cond.notify_all()

    def exec_one(self) -> bool:
        """Wait for one task and run it; return False if the scheduler stopped."""
        with self._cond:
            self._cond.wait_for(lambda: not self._running or bool(self._tasks))
            if not self._running:
                return False
            task = self._tasks.popleft()
        if task is not None:
            task()
        return True

    def poll_one(self) -> bool:
        """Run one queued task without waiting; return False if there was none."""
        with self._cond:
            if not self._running or not self._tasks:
                return False
            task = self._tasks.popleft()
        if task is not None:
            task()
        return True

    def __del__(self) -> None:
        try:
            self.stop()
        except Exception:
            pass