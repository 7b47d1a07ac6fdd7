"""An integer whose read-modify-write operations are atomic across threads."""

from __future__ import annotations

import threading


class AtomicInteger:
    """Thread-safe integer, optionally wrapping like a signed integer of ``bits`` width."""

    def __init__(self, value: int = 0, bits: int | None = None) -> None:
        self._bits = bits
        self._lock = threading.Lock()
        self._value = self._wrap(value)

    def _wrap(self, value: int) -> int:
        if self._bits is None:
            return value
        span = 1 << self._bits
        value &= span - 1
        if value >= span >> 1:
            value -= span
        return value

    def set(self, value: int) -> None:
        """Store a new value."""
        with self._lock:
            self._value = self._wrap(value)

    def get(self) -> int:
        """Return the current value."""
        with self._lock:
            return self._value

    def get_and_add(self, n: int) -> int:
        """Add ``n`` and return the value from before the addition."""
        with self._lock:
            old = self._value
            self._value = self._wrap(old + n)
            return old

    def add_and_get(self, n: int) -> int:
        """Add ``n`` and return the new value."""
        with self._lock:
            self._value = self._wrap(self._value + n)
            return self._value

    def increment_and_get(self) -> int:
        """Add one and return the new value."""
        return self.add_and_get(1)

    def decrement_and_get(self) -> int:
        """Subtract one and return the new value."""
        return self.add_and_get(-1)