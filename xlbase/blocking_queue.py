"""A thread-safe unbounded FIFO queue whose ``take`` blocks until data arrives."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, TypeVar

T = TypeVar("T")


class BlockingQueue(Generic[T]):
    """Unbounded FIFO queue shared between producer and consumer threads."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()
        self._cond = threading.Condition(threading.Lock())

    def put(self, item: T) -> None:
        """Append an item and wake one waiting consumer."""
        with self._cond:
            self._items.append(item)
            self._cond.notify()

    def take(self) -> T:
        """Remove and return the oldest item, blocking while the queue is empty."""
        with self._cond:
            while not self._items:
                self._cond.wait()
            return self._items.popleft()

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)