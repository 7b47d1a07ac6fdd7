"""A countdown latch: threads wait until the count has been brought to zero."""

from __future__ import annotations

import threading


class CountDown:
    """Latch that releases all waiters once ``down`` has been called enough times."""

    def __init__(self, count: int) -> None:
        self._count = count
        self._cond = threading.Condition(threading.Lock())

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the count reaches zero; return False if the timeout ran out."""
        with self._cond:
            return self._cond.wait_for(lambda: self._count <= 0, timeout)

    def down(self) -> None:
        """Decrement the count, waking every waiter when it reaches zero."""
        with self._cond:
            self._count -= 1
            if self._count == 0:
                self._cond.notify_all()

    def count(self) -> int:
        """Return the current count."""
        with self._cond:
            return self._count