"""Identification of the calling thread."""

from __future__ import annotations

import threading


def current_tid() -> int:
    """Return the operating-system thread id of the calling thread."""
    return threading.get_native_id()