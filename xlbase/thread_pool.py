"""A fixed-size pool of worker threads that run posted callables in order."""

from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional

from .blocking_queue import BlockingQueue
from .current_thread import current_tid

Task = Callable[[], object]

_log = logging.getLogger(__name__)
_STOP = object()


class ThreadPool:
    """Workers that take tasks from a shared blocking queue until stopped."""

    def __init__(self, name: str = "xlThreadPool") -> None:
        self.name = name
        self._threads: List[threading.Thread] = []
        self._tasks: BlockingQueue = BlockingQueue()
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self, thread_num: int) -> None:
        """Launch ``thread_num`` worker threads."""
        if self._running:
            raise RuntimeError(f"thread pool {self.name!r} is already running")
        self._running = True
        self._threads = [
            threading.Thread(target=self._run, name=f"{self.name}-{index}", daemon=True)
            for index in range(thread_num)
        ]
        for thread in self._threads:
            thread.start()

    def stop(self) -> None:
        """Let workers finish the tasks already posted, then join them."""
        if not self._running:
            return
        self._running = False
        for _ in self._threads:
            self._tasks.put(_STOP)
        for thread in self._threads:
            thread.join()
        self._threads = []

    def post(self, task: Optional[Task]) -> None:
        """Queue a callable for a worker; a falsy task is skipped when taken."""
        self._tasks.put(task)

    def _run(self) -> None:
        _log.debug("new thread(pid:%d)", current_tid())
        while True:
            task = self._tasks.take()
            if task is _STOP:
                return
            if task:
                try:
                    task()
                except Exception:
                    _log.exception("task in thread pool %r failed", self.name)

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()